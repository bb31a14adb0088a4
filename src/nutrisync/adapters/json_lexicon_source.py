"""Lexicon source backed by a JSON file."""

import json
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from nutrisync.services.lexicon import Lexicon, LexiconUnavailableError, require_lexicon


@dataclass(frozen=True)
class JsonLexiconSource:
    """Loads a lexicon payload from a JSON document on disk."""

    path: Path | str

    def load(self) -> Lexicon:
        path = Path(self.path)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise LexiconUnavailableError(f"Lexicon file not found: {path}") from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise LexiconUnavailableError(f"Lexicon file unreadable: {path}") from exc
        if not isinstance(payload, dict):
            raise LexiconUnavailableError(f"Lexicon file is not an object: {path}")
        try:
            lexicon = Lexicon.from_payload(payload)
        except ValidationError as exc:
            raise LexiconUnavailableError(f"Lexicon file invalid: {path}") from exc
        return require_lexicon(lexicon)
