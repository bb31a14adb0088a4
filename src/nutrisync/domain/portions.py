"""Domain models for portion estimates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PortionEstimate:
    """Gram estimate for an extracted food item."""

    food: str
    grams: float | None
    reference: str
    nutrition_multiplier: float
    confidence: float
