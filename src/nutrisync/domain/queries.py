"""Domain models for nutrition questions."""

from dataclasses import dataclass
from enum import StrEnum

from nutrisync.domain.extraction import ExtractedFoodItem, FoodAmbiguity


class NutritionQueryType(StrEnum):
    """Communicative intent of a nutrition question."""

    CALORIE_INQUIRY = "calorie_inquiry"
    PROTEIN_INQUIRY = "protein_inquiry"
    HEALTH_INQUIRY = "health_inquiry"
    WEIGHT_MANAGEMENT = "weight_management"
    MEDICAL_CONCERN = "medical_concern"
    GENERAL = "general"


@dataclass(frozen=True)
class NutritionQuery:
    """Parsed nutrition question."""

    query_type: NutritionQueryType
    food_items: tuple[ExtractedFoodItem, ...]
    nutrition_concerns: tuple[str, ...]
    requires_clarification: bool
    ambiguities: tuple[FoodAmbiguity, ...]
    original_query: str
    processed_query: str
