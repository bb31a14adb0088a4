"""Domain models for food extraction results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodQuantity:
    """Amount of a food in a canonical unit."""

    amount: float
    unit: str


@dataclass(frozen=True)
class ExtractedFoodItem:
    """Food mention resolved to a single canonical concept."""

    name: str
    original_text: str
    confidence: float
    span: tuple[int, int]
    quantity: FoodQuantity | None = None
    cooking_method: str | None = None


@dataclass(frozen=True)
class FoodAmbiguity:
    """Food mention that needs clarification before it can be logged."""

    term: str
    possible_meanings: tuple[str, ...]
    context: str
    span: tuple[int, int]


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of extracting food items from a meal description."""

    food_items: tuple[ExtractedFoodItem, ...]
    ambiguities: tuple[FoodAmbiguity, ...]
    confidence: float
    original_text: str
    processed_text: str

    @property
    def is_empty(self) -> bool:
        return not self.food_items and not self.ambiguities
