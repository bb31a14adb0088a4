"""Shared test fixtures."""

import pytest

from nutrisync.config import ExtractionSettings, Settings
from nutrisync.containers import AppContainer, build_container
from nutrisync.domain.lexicon import ConceptKind, LexiconEntry
from nutrisync.services.clarification import ClarificationService
from nutrisync.services.default_lexicon import default_lexicon
from nutrisync.services.extraction import FoodExtractionService
from nutrisync.services.lexicon import Lexicon
from nutrisync.services.portions import PortionService
from nutrisync.services.queries import QueryClassifierService


@pytest.fixture
def lexicon() -> Lexicon:
    return default_lexicon()


@pytest.fixture
def small_lexicon() -> Lexicon:
    """Minimal lexicon with one generic food, one homonym and one unit."""
    return Lexicon(
        [
            LexiconEntry("apple", ConceptKind.FOOD, ("seb", "apple"), grams=150),
            LexiconEntry(
                "juice",
                ConceptKind.FOOD,
                ("ras", "juice"),
                variants=("orange juice", "apple juice"),
                pairs_with=("apple",),
            ),
            LexiconEntry("orange juice", ConceptKind.FOOD, ("santra ras",)),
            LexiconEntry("apple juice", ConceptKind.FOOD, ("seb ras",)),
            LexiconEntry("glass", ConceptKind.UNIT, ("glass",), grams=250),
        ],
        number_words={"ek": 1, "do": 2},
        portion_words={"thoda": 0.5},
        version="test",
    )


@pytest.fixture
def extraction_settings() -> ExtractionSettings:
    return ExtractionSettings()


@pytest.fixture
def extraction_service(
    lexicon: Lexicon, extraction_settings: ExtractionSettings
) -> FoodExtractionService:
    return FoodExtractionService(lexicon, settings=extraction_settings)


@pytest.fixture
def query_service(extraction_service: FoodExtractionService) -> QueryClassifierService:
    return QueryClassifierService(extraction_service)


@pytest.fixture
def clarification_service(lexicon: Lexicon) -> ClarificationService:
    return ClarificationService(lexicon)


@pytest.fixture
def portion_service(lexicon: Lexicon) -> PortionService:
    return PortionService(lexicon)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", debug=False, lexicon_path=None)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
