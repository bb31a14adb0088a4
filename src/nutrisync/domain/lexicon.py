"""Domain models for the food, unit and cooking-method lexicon."""

from dataclasses import dataclass
from enum import StrEnum


class ConceptKind(StrEnum):
    """Kinds of concepts a surface form can name."""

    FOOD = "food"
    UNIT = "unit"
    COOKING_METHOD = "cooking_method"


@dataclass(frozen=True)
class LexiconEntry:
    """Canonical concept with the surface forms that refer to it."""

    name: str
    kind: ConceptKind
    aliases: tuple[str, ...]
    variants: tuple[str, ...] = ()
    pairs_with: tuple[str, ...] = ()
    grams: float | None = None
    nutrition_multiplier: float = 1.0

    @property
    def is_generic(self) -> bool:
        """Whether the entry stands for several narrower foods."""
        return bool(self.variants)


@dataclass(frozen=True)
class Resolution:
    """Canonical concepts a surface form may refer to."""

    surface: str
    kind: ConceptKind
    candidates: tuple[str, ...]
    generic: str | None = None
    exact: bool = True

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1

    @property
    def word_count(self) -> int:
        return len(self.surface.split())
