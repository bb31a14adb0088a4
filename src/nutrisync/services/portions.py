"""Gram estimates for extracted food items."""

from dataclasses import dataclass

from nutrisync.domain.extraction import ExtractedFoodItem, ExtractionResult
from nutrisync.domain.portions import PortionEstimate
from nutrisync.services.lexicon import Lexicon, require_lexicon

_COUNT_UNITS = frozenset({"piece", "portion", "slice"})
_DEFAULT_SERVING_CONFIDENCE = 0.5
_MEASURED_CONFIDENCE = 0.9
_COUNTED_CONFIDENCE = 0.8


@dataclass
class PortionService:
    """Converts household quantities into approximate grams."""

    lexicon: Lexicon | None

    def __post_init__(self) -> None:
        self.lexicon = require_lexicon(self.lexicon)

    def estimate(self, item: ExtractedFoodItem) -> PortionEstimate:
        """Estimate the grams eaten for a single food item.

        Measured units (katori, glass, gram, ...) use the unit's weight. Counted
        units (piece, portion, slice) use the food's typical serving weight.
        Without a quantity one serving is assumed at lower confidence.
        """
        food = self.lexicon.entry(item.name)
        multiplier = self._cooking_multiplier(item.cooking_method)
        quantity = item.quantity
        if quantity is None:
            return PortionEstimate(
                food=item.name,
                grams=food.grams,
                reference=f"1 {self.lexicon.display_name(item.name)}",
                nutrition_multiplier=multiplier,
                confidence=_DEFAULT_SERVING_CONFIDENCE,
            )

        reference = f"{_format_amount(quantity.amount)} {quantity.unit}"
        if quantity.unit in _COUNT_UNITS:
            grams = _scaled(food.grams, quantity.amount)
            confidence = _COUNTED_CONFIDENCE
        else:
            unit_grams = (
                self.lexicon.entry(quantity.unit).grams
                if quantity.unit in self.lexicon
                else None
            )
            grams = _scaled(unit_grams, quantity.amount)
            confidence = _MEASURED_CONFIDENCE
        if grams is None:
            confidence = _DEFAULT_SERVING_CONFIDENCE
        return PortionEstimate(
            food=item.name,
            grams=grams,
            reference=reference,
            nutrition_multiplier=multiplier,
            confidence=confidence,
        )

    def estimate_all(self, result: ExtractionResult) -> list[PortionEstimate]:
        return [self.estimate(item) for item in result.food_items]

    def _cooking_multiplier(self, method: str | None) -> float:
        if method is None or method not in self.lexicon:
            return 1.0
        return self.lexicon.entry(method).nutrition_multiplier


def _scaled(grams: float | None, amount: float) -> float | None:
    if grams is None:
        return None
    return round(grams * amount, 1)


def _format_amount(amount: float) -> str:
    return f"{amount:g}"
