"""Validation models for lexicon payloads supplied by the food database."""

from pydantic import BaseModel, Field

from nutrisync.domain.lexicon import ConceptKind


class ConceptPayload(BaseModel):
    """Single concept definition."""

    name: str = Field(min_length=1)
    kind: ConceptKind
    aliases: list[str] = Field(min_length=1)
    variants: list[str] = Field(default_factory=list)
    pairs_with: list[str] = Field(default_factory=list)
    grams: float | None = Field(default=None, gt=0.0)
    nutrition_multiplier: float = Field(default=1.0, gt=0.0)


class LexiconPayload(BaseModel):
    """Complete lexicon definition."""

    version: str = "1"
    locale: str = "hi-Latn"
    concepts: list[ConceptPayload]
    number_words: dict[str, float] = Field(default_factory=dict)
    portion_words: dict[str, float] = Field(default_factory=dict)
    stop_words: list[str] = Field(default_factory=list)
