"""Tests for the JSON lexicon source."""

import json

import pytest

from nutrisync.adapters.json_lexicon_source import JsonLexiconSource
from nutrisync.services.default_lexicon import DEFAULT_LEXICON_PAYLOAD
from nutrisync.services.lexicon import LexiconError, LexiconUnavailableError


def _write(tmp_path, payload) -> str:
    path = tmp_path / "lexicon.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_load_default_payload(tmp_path, lexicon) -> None:
    loaded = JsonLexiconSource(_write(tmp_path, DEFAULT_LEXICON_PAYLOAD)).load()

    assert len(loaded) == len(lexicon)
    assert loaded.version == "2024.1"
    assert loaded.resolve("chawal").candidates == ("rice",)


def test_missing_file(tmp_path) -> None:
    with pytest.raises(LexiconUnavailableError, match="not found"):
        JsonLexiconSource(tmp_path / "missing.json").load()


def test_malformed_json(tmp_path) -> None:
    path = tmp_path / "lexicon.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LexiconUnavailableError, match="unreadable"):
        JsonLexiconSource(path).load()


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"concepts": [{"name": "rice", "kind": "grain", "aliases": ["chawal"]}]},
        {"concepts": [{"name": "glass", "kind": "unit", "aliases": ["glass"]}]},
    ],
)
def test_unusable_payloads(tmp_path, payload) -> None:
    with pytest.raises(LexiconUnavailableError):
        JsonLexiconSource(_write(tmp_path, payload)).load()


def test_inconsistent_lexicon_is_a_lexicon_error(tmp_path) -> None:
    payload = {
        "concepts": [
            {"name": "rice", "kind": "food", "aliases": ["chawal"]},
            {"name": "bowl", "kind": "unit", "aliases": ["chawal"]},
        ]
    }

    with pytest.raises(LexiconError):
        JsonLexiconSource(_write(tmp_path, payload)).load()
