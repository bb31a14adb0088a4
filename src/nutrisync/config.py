"""Application configuration."""

import os

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class ExtractionSettings(BaseModel):
    """Tuning knobs for matching, attachment windows and confidence scores."""

    model_config = ConfigDict(frozen=True)

    max_ngram_words: int = Field(default=3, ge=1, le=5)
    modifier_window: int = Field(default=2, ge=0)
    pairing_window: int = Field(default=2, ge=0)
    fuzzy_matching: bool = True
    fuzzy_score_cutoff: float = Field(default=88.0, ge=0.0, le=100.0)
    fuzzy_min_length: int = Field(default=4, ge=1)
    exact_match_confidence: float = Field(default=0.8, ge=0.0, le=1.0)
    multi_word_confidence: float = Field(default=0.9, ge=0.0, le=1.0)
    context_resolved_confidence: float = Field(default=0.65, ge=0.0, le=1.0)
    fuzzy_match_confidence: float = Field(default=0.6, ge=0.0, le=1.0)
    quantity_bonus: float = Field(default=0.05, ge=0.0, le=1.0)
    cooking_method_bonus: float = Field(default=0.05, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    debug: bool = False
    lexicon_path: str | None = None
    extraction: ExtractionSettings = ExtractionSettings()

    model_config = SettingsConfigDict(
        env_prefix="NUTRISYNC_",
        env_nested_delimiter="__",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
