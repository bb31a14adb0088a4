"""Tests for container wiring."""

import json

from nutrisync.config import Settings
from nutrisync.containers import build_container
from nutrisync.services.default_lexicon import DEFAULT_LEXICON_PAYLOAD, default_lexicon


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.lexicon is default_lexicon()
    assert container.extraction_service.lexicon is container.lexicon
    assert container.query_service.extraction_service is container.extraction_service
    assert container.clarification_service is not None
    assert container.portion_service is not None


def test_build_container_loads_lexicon_file(tmp_path) -> None:
    payload = {**DEFAULT_LEXICON_PAYLOAD, "version": "custom"}
    path = tmp_path / "lexicon.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    container = build_container(Settings(environment="test", lexicon_path=str(path)))

    assert container.lexicon.version == "custom"
    assert container.extraction_service.extract_food_items("chawal").food_items
