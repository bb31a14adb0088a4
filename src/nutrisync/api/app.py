"""FastAPI application factory."""

from dataclasses import asdict

from fastapi import FastAPI, Request

from nutrisync.api.models import TextRequest
from nutrisync.app_logging import configure_logging
from nutrisync.containers import AppContainer
from nutrisync.domain.extraction import ExtractionResult
from nutrisync.domain.queries import NutritionQuery


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    app = FastAPI(title="nutrisync")
    app.state.container = container

    @app.get("/health")
    async def health(request: Request) -> dict[str, str]:
        """Simple health check endpoint."""
        lexicon = request.app.state.container.lexicon
        return {"status": "ok", "lexicon_version": lexicon.version}

    @app.post("/extract")
    async def extract(payload: TextRequest, request: Request) -> dict[str, object]:
        """Extract food items and ambiguities from a meal description."""
        state_container: AppContainer = request.app.state.container
        result = state_container.extraction_service.extract_food_items(payload.text)
        questions = _questions(state_container, result)
        return {**_serialize_extraction(result), "clarifications": questions}

    @app.post("/query")
    async def query(payload: TextRequest, request: Request) -> dict[str, object]:
        """Classify a nutrition question."""
        state_container: AppContainer = request.app.state.container
        parsed = state_container.query_service.parse_nutrition_query(payload.text)
        return _serialize_query(parsed)

    @app.post("/clarifications")
    async def clarifications(
        payload: TextRequest, request: Request
    ) -> dict[str, list[str]]:
        """Return follow-up questions for ambiguous foods in the text."""
        state_container: AppContainer = request.app.state.container
        result = state_container.extraction_service.extract_food_items(payload.text)
        questions = _questions(state_container, result)
        return {"questions": questions}

    @app.post("/portions")
    async def portions(payload: TextRequest, request: Request) -> dict[str, object]:
        """Estimate grams for each food item in a meal description."""
        state_container: AppContainer = request.app.state.container
        result = state_container.extraction_service.extract_food_items(payload.text)
        estimates = state_container.portion_service.estimate_all(result)
        return {
            "portions": [asdict(estimate) for estimate in estimates],
            "unresolved": [ambiguity.term for ambiguity in result.ambiguities],
        }

    return app


def _serialize_extraction(result: ExtractionResult) -> dict[str, object]:
    return {
        "food_items": [asdict(item) for item in result.food_items],
        "ambiguities": [asdict(ambiguity) for ambiguity in result.ambiguities],
        "confidence": result.confidence,
        "original_text": result.original_text,
        "processed_text": result.processed_text,
    }


def _serialize_query(query: NutritionQuery) -> dict[str, object]:
    return {
        "query_type": query.query_type.value,
        "food_items": [asdict(item) for item in query.food_items],
        "nutrition_concerns": list(query.nutrition_concerns),
        "requires_clarification": query.requires_clarification,
        "ambiguities": [asdict(ambiguity) for ambiguity in query.ambiguities],
        "original_query": query.original_query,
        "processed_query": query.processed_query,
    }


def _questions(container: AppContainer, result: ExtractionResult) -> list[str]:
    return container.clarification_service.generate_clarification_questions(
        result.ambiguities
    )
