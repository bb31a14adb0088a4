"""Tests for portion estimates."""

import pytest

from nutrisync.domain.extraction import ExtractedFoodItem, FoodQuantity
from nutrisync.services.lexicon import LexiconUnavailableError
from nutrisync.services.portions import PortionService


def _estimates(extraction_service, portion_service, text):
    return portion_service.estimate_all(extraction_service.extract_food_items(text))


def test_household_units_convert_to_grams(extraction_service, portion_service) -> None:
    (estimate,) = _estimates(extraction_service, portion_service, "do katori dal")

    assert estimate.food == "lentils"
    assert estimate.grams == pytest.approx(300.0)
    assert estimate.reference == "2 katori"
    assert estimate.nutrition_multiplier == 1.0
    assert estimate.confidence == pytest.approx(0.9)


def test_counted_items_use_food_weight(extraction_service, portion_service) -> None:
    (estimate,) = _estimates(extraction_service, portion_service, "teen roti")

    assert estimate.grams == pytest.approx(90.0)
    assert estimate.reference == "3 piece"
    assert estimate.confidence == pytest.approx(0.8)


def test_fractional_amounts(extraction_service, portion_service) -> None:
    (estimate,) = _estimates(extraction_service, portion_service, "1/2 glass doodh")

    assert estimate.food == "milk"
    assert estimate.grams == pytest.approx(125.0)
    assert estimate.reference == "0.5 glass"


def test_missing_quantity_assumes_one_serving(
    extraction_service, portion_service
) -> None:
    (estimate,) = _estimates(extraction_service, portion_service, "fried samosa")

    assert estimate.food == "samosa"
    assert estimate.grams == pytest.approx(60.0)
    assert estimate.reference == "1 samosa"
    assert estimate.nutrition_multiplier == pytest.approx(1.5)
    assert estimate.confidence == pytest.approx(0.5)


def test_unknown_unit_has_no_grams(portion_service) -> None:
    item = ExtractedFoodItem(
        name="rice",
        original_text="chawal",
        confidence=0.8,
        span=(0, 6),
        quantity=FoodQuantity(2.0, "bucket"),
    )

    estimate = portion_service.estimate(item)

    assert estimate.grams is None
    assert estimate.reference == "2 bucket"
    assert estimate.confidence == pytest.approx(0.5)


def test_ambiguities_are_not_estimated(extraction_service, portion_service) -> None:
    assert _estimates(extraction_service, portion_service, "dal aur sabzi") == []


def test_requires_lexicon() -> None:
    with pytest.raises(LexiconUnavailableError):
        PortionService(None)
