"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from nutrisync.config import ExtractionSettings, Settings


def test_defaults() -> None:
    settings = ExtractionSettings()

    assert settings.max_ngram_words == 3
    assert settings.modifier_window == 2
    assert settings.exact_match_confidence == 0.8
    assert settings.context_resolved_confidence == 0.65


def test_nested_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("NUTRISYNC_DEBUG", "true")
    monkeypatch.setenv("NUTRISYNC_LEXICON_PATH", "/tmp/lexicon.json")
    monkeypatch.setenv("NUTRISYNC_EXTRACTION__MODIFIER_WINDOW", "3")

    settings = Settings()

    assert settings.debug is True
    assert settings.lexicon_path == "/tmp/lexicon.json"
    assert settings.extraction.modifier_window == 3
    assert settings.extraction.pairing_window == 2


def test_bounds_are_validated() -> None:
    with pytest.raises(ValidationError):
        ExtractionSettings(max_ngram_words=0)
    with pytest.raises(ValidationError):
        ExtractionSettings(exact_match_confidence=1.5)


def test_extraction_settings_are_frozen() -> None:
    settings = ExtractionSettings()

    with pytest.raises(ValidationError):
        settings.modifier_window = 5
