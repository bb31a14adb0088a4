"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrisync.adapters.json_lexicon_source import JsonLexiconSource
from nutrisync.config import Settings
from nutrisync.services.clarification import ClarificationService
from nutrisync.services.default_lexicon import default_lexicon
from nutrisync.services.extraction import FoodExtractionService
from nutrisync.services.lexicon import Lexicon
from nutrisync.services.portions import PortionService
from nutrisync.services.queries import QueryClassifierService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    lexicon: Lexicon
    extraction_service: FoodExtractionService
    query_service: QueryClassifierService
    clarification_service: ClarificationService
    portion_service: PortionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.lexicon_path:
        lexicon = JsonLexiconSource(resolved_settings.lexicon_path).load()
    else:
        lexicon = default_lexicon()
    extraction_service = FoodExtractionService(
        lexicon=lexicon,
        settings=resolved_settings.extraction,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        lexicon=lexicon,
        extraction_service=extraction_service,
        query_service=QueryClassifierService(
            extraction_service, debug=resolved_settings.debug
        ),
        clarification_service=ClarificationService(lexicon),
        portion_service=PortionService(lexicon),
    )
