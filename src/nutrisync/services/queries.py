"""Nutrition question classification."""

import logging
from dataclasses import dataclass
from enum import Enum

from nutrisync.domain.queries import NutritionQuery, NutritionQueryType
from nutrisync.services.extraction import FoodExtractionService
from nutrisync.services.tokenizer import Token, normalize, tokenize

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryRule:
    """Keyword rule assigning a query type."""

    query_type: NutritionQueryType
    keywords: tuple[str, ...]


class ClassifierRule(Enum):
    """Classifier rules in priority order; the first matching member wins.

    Clinical and weight framing outrank nutrient and generic health questions,
    so "is dal healthy for diabetes" is a medical concern.
    """

    MEDICAL_CONCERN = QueryRule(
        NutritionQueryType.MEDICAL_CONCERN,
        (
            "diabetes",
            "diabetic",
            "sugar patient",
            "blood sugar",
            "sugar level",
            "sugar ki bimari",
            "madhumeh",
            "blood pressure",
            "bp",
            "hypertension",
            "cholesterol",
            "heart patient",
            "thyroid",
            "pcos",
            "pcod",
            "bimari",
            "doctor",
        ),
    )
    WEIGHT_MANAGEMENT = QueryRule(
        NutritionQueryType.WEIGHT_MANAGEMENT,
        (
            "weight",
            "vajan",
            "vazan",
            "wajan",
            "motapa",
            "patla",
            "fat loss",
            "lose weight",
            "gain weight",
            "belly",
            "pet kam",
        ),
    )
    CALORIE_INQUIRY = QueryRule(
        NutritionQueryType.CALORIE_INQUIRY,
        ("calorie", "calories", "kcal", "kitni calorie", "cal"),
    )
    PROTEIN_INQUIRY = QueryRule(
        NutritionQueryType.PROTEIN_INQUIRY,
        ("protein", "kitna protein", "proteins"),
    )
    HEALTH_INQUIRY = QueryRule(
        NutritionQueryType.HEALTH_INQUIRY,
        (
            "healthy",
            "unhealthy",
            "sehatmand",
            "sehat",
            "accha hai",
            "achha hai",
            "acha hai",
            "good for",
            "bad for",
            "fayda",
            "nuksan",
            "nutritious",
            "kya khana chahiye",
        ),
    )


DEFAULT_RULES: tuple[QueryRule, ...] = tuple(rule.value for rule in ClassifierRule)

CONCERN_KEYWORDS: dict[str, tuple[str, ...]] = {
    "diabetes": (
        "diabetes",
        "diabetic",
        "blood sugar",
        "sugar patient",
        "sugar level",
        "sugar ki bimari",
        "madhumeh",
    ),
    "weight_loss": (
        "weight loss",
        "lose weight",
        "vajan kam",
        "vazan kam",
        "wajan kam",
        "patla",
        "fat loss",
        "motapa kam",
        "pet kam",
    ),
    "weight_gain": (
        "weight gain",
        "gain weight",
        "vajan badhana",
        "vajan badhao",
        "vazan badhana",
    ),
    "muscle_gain": ("muscle gain", "muscle", "muscles", "body banani", "bulk"),
    "high_bp": ("blood pressure", "bp", "hypertension"),
    "cholesterol": ("cholesterol", "heart"),
    "thyroid": ("thyroid",),
    "pcos": ("pcos", "pcod"),
}


@dataclass
class QueryClassifierService:
    """Classifies nutrition questions and collects their concern tags."""

    extraction_service: FoodExtractionService
    rules: tuple[QueryRule, ...] = DEFAULT_RULES
    concern_keywords: dict[str, tuple[str, ...]] | None = None
    debug: bool = False

    def parse_nutrition_query(self, text: str) -> NutritionQuery:
        """Parse a nutrition question into intent, foods and concerns."""
        extraction = self.extraction_service.extract_food_items(text)
        processed = extraction.processed_text
        masked = self._keyword_spans(tokenize(extraction.original_text))
        food_items = tuple(
            item for item in extraction.food_items if not _overlaps(item.span, masked)
        )
        ambiguities = tuple(
            ambiguity
            for ambiguity in extraction.ambiguities
            if not _overlaps(ambiguity.span, masked)
        )
        query_type = self.classify(processed)
        concerns = self.extract_concerns(processed)
        if self.debug:
            _logger.info(
                "Nutrition query: type=%s concerns=%s foods=%s",
                query_type.value,
                ",".join(concerns) or "-",
                len(food_items),
            )
        return NutritionQuery(
            query_type=query_type,
            food_items=food_items,
            nutrition_concerns=concerns,
            requires_clarification=bool(ambiguities),
            ambiguities=ambiguities,
            original_query=extraction.original_text,
            processed_query=processed,
        )

    def classify(self, text: str) -> NutritionQueryType:
        """Return the query type of the first rule with a keyword in the text."""
        padded = _padded(text)
        for rule in self.rules:
            if _contains_any(padded, rule.keywords):
                return rule.query_type
        return NutritionQueryType.GENERAL

    def extract_concerns(self, text: str) -> tuple[str, ...]:
        """Return concern tags mentioned in the text, in vocabulary order."""
        padded = _padded(text)
        vocabulary = self.concern_keywords or CONCERN_KEYWORDS
        return tuple(
            tag
            for tag, keywords in vocabulary.items()
            if _contains_any(padded, keywords)
        )

    def _keyword_spans(self, tokens: list[Token]) -> list[tuple[int, int]]:
        """Character spans of classifier and concern phrases found in the text.

        Foods inside these phrases, such as "sugar" in "sugar patient", are not
        part of the question.
        """
        vocabulary = self.concern_keywords or CONCERN_KEYWORDS
        keywords = {
            keyword
            for group in (
                *(rule.keywords for rule in self.rules),
                *vocabulary.values(),
            )
            for keyword in group
        }
        words = [token.text for token in tokens]
        spans: list[tuple[int, int]] = []
        for keyword in keywords:
            phrase = normalize(keyword).split()
            size = len(phrase)
            for index in range(len(words) - size + 1):
                if size and words[index : index + size] == phrase:
                    spans.append((tokens[index].start, tokens[index + size - 1].end))
        return spans


def _padded(text: str) -> str:
    return f" {normalize(text)} "


def _contains_any(padded: str, keywords: tuple[str, ...]) -> bool:
    """Whether any keyword occurs as a whole-token phrase."""
    return any(f" {normalize(keyword)} " in padded for keyword in keywords)


def _overlaps(span: tuple[int, int], spans: list[tuple[int, int]]) -> bool:
    return any(span[0] < end and start < span[1] for start, end in spans)
