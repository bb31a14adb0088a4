"""Food item extraction from Hinglish meal descriptions."""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from statistics import fmean

from nutrisync.config import ExtractionSettings
from nutrisync.domain.extraction import (
    ExtractedFoodItem,
    ExtractionResult,
    FoodAmbiguity,
    FoodQuantity,
)
from nutrisync.domain.lexicon import Resolution
from nutrisync.services.lexicon import Lexicon, require_lexicon
from nutrisync.services.tokenizer import Token, tokenize

_COUNT_UNIT = "piece"
_PORTION_UNIT = "portion"

_logger = logging.getLogger(__name__)


class _MentionKind(StrEnum):
    FOOD = "food"
    UNIT = "unit"
    COOKING_METHOD = "cooking_method"
    NUMBER = "number"
    PORTION = "portion"


@dataclass(frozen=True)
class _Mention:
    """Run of tokens recognised as a lexicon concept, number or portion word."""

    start: int
    end: int
    kind: _MentionKind
    resolution: Resolution | None = None
    value: float | None = None
    spelled: bool = False


@dataclass(frozen=True)
class _QuantityMention:
    start: int
    end: int
    quantity: FoodQuantity


@dataclass
class _FoodSlot:
    """Food mention together with the context gathered around it."""

    mention: _Mention
    resolution: Resolution
    quantity: FoodQuantity | None = None
    cooking_method: str | None = None
    paired: bool = False

    @property
    def has_context(self) -> bool:
        return (
            self.quantity is not None or self.cooking_method is not None or self.paired
        )


@dataclass
class FoodExtractionService:
    """Extracts food items, quantities and cooking methods from free text."""

    lexicon: Lexicon | None
    settings: ExtractionSettings = field(default_factory=ExtractionSettings)
    debug: bool = False

    def __post_init__(self) -> None:
        self.lexicon = require_lexicon(self.lexicon)

    def extract_food_items(self, text: str) -> ExtractionResult:
        """Extract food items and ambiguities from a meal description."""
        text = text or ""
        tokens = tokenize(text)
        mentions = self._scan(tokens)
        slots = [
            _FoodSlot(mention, mention.resolution)
            for mention in mentions
            if mention.kind is _MentionKind.FOOD and mention.resolution is not None
        ]
        self._attach_quantities(tokens, mentions, slots)
        self._attach_cooking_methods(tokens, mentions, slots)
        self._mark_pairings(tokens, slots)

        items: list[ExtractedFoodItem] = []
        ambiguities: list[FoodAmbiguity] = []
        for slot in slots:
            resolution = slot.resolution
            start = tokens[slot.mention.start].start
            end = tokens[slot.mention.end - 1].end
            if not resolution.is_ambiguous:
                items.append(
                    self._item(text, slot, resolution.candidates[0], (start, end))
                )
            elif resolution.generic is not None and slot.has_context:
                items.append(self._item(text, slot, resolution.generic, (start, end)))
            else:
                ambiguities.append(
                    FoodAmbiguity(
                        term=_surface(tokens, slot.mention),
                        possible_meanings=resolution.candidates,
                        context=_clause_text(text, tokens, slot.mention.start),
                        span=(start, end),
                    )
                )

        confidence = fmean(item.confidence for item in items) if items else 0.0
        if self.debug:
            _logger.info(
                "Food extraction: items=%s ambiguities=%s confidence=%.2f",
                len(items),
                len(ambiguities),
                confidence,
            )
        return ExtractionResult(
            food_items=tuple(items),
            ambiguities=tuple(ambiguities),
            confidence=confidence,
            original_text=text,
            processed_text=" ".join(token.text for token in tokens),
        )

    def _scan(self, tokens: list[Token]) -> list[_Mention]:
        """Find lexicon concepts left to right, preferring the longest match."""
        mentions: list[_Mention] = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token.is_number:
                value = token.number
                if value is not None and value > 0:
                    mentions.append(
                        _Mention(index, index + 1, _MentionKind.NUMBER, value=value)
                    )
                index += 1
                continue
            mention = self._match_at(tokens, index)
            if mention is None:
                index += 1
                continue
            mentions.append(mention)
            index = mention.end
        return mentions

    def _match_at(self, tokens: list[Token], index: int) -> _Mention | None:
        max_words = min(self.settings.max_ngram_words, self.lexicon.max_alias_words)
        for size in range(max_words, 0, -1):
            window = tokens[index : index + size]
            if len(window) < size:
                continue
            if any(token.is_number for token in window):
                continue
            if window[0].clause != window[-1].clause:
                continue
            resolution = self.lexicon.resolve(" ".join(token.text for token in window))
            if resolution is not None:
                return _Mention(
                    index,
                    index + size,
                    _MentionKind(resolution.kind.value),
                    resolution=resolution,
                )

        word = tokens[index].text
        value = self.lexicon.number_value(word)
        if value is not None:
            return _Mention(
                index, index + 1, _MentionKind.NUMBER, value=value, spelled=True
            )
        multiplier = self.lexicon.portion_multiplier(word)
        if multiplier is not None:
            return _Mention(index, index + 1, _MentionKind.PORTION, value=multiplier)
        if self.settings.fuzzy_matching and len(word) >= self.settings.fuzzy_min_length:
            resolution = self.lexicon.resolve_fuzzy(
                word, self.settings.fuzzy_score_cutoff
            )
            if resolution is not None:
                return _Mention(
                    index, index + 1, _MentionKind.FOOD, resolution=resolution
                )
        return None

    def _attach_quantities(
        self, tokens: list[Token], mentions: list[_Mention], slots: list[_FoodSlot]
    ) -> None:
        for quantity in _quantity_mentions(mentions):
            slot = self._nearest_slot(tokens, quantity.start, quantity.end, slots)
            if slot is not None and slot.quantity is None:
                slot.quantity = quantity.quantity

    def _attach_cooking_methods(
        self, tokens: list[Token], mentions: list[_Mention], slots: list[_FoodSlot]
    ) -> None:
        for mention in mentions:
            if mention.kind is not _MentionKind.COOKING_METHOD:
                continue
            slot = self._nearest_slot(tokens, mention.start, mention.end, slots)
            if slot is not None and slot.cooking_method is None:
                slot.cooking_method = mention.resolution.candidates[0]

    def _nearest_slot(
        self, tokens: list[Token], start: int, end: int, slots: list[_FoodSlot]
    ) -> _FoodSlot | None:
        """Return the closest food in the same clause; ties go to the following food."""
        best: _FoodSlot | None = None
        best_key: tuple[int, int] | None = None
        for slot in slots:
            if tokens[slot.mention.start].clause != tokens[start].clause:
                continue
            gap = _gap(start, end, slot.mention)
            if gap is None or gap > self.settings.modifier_window:
                continue
            key = (gap, 0 if slot.mention.start >= end else 1)
            if best_key is None or key < best_key:
                best, best_key = slot, key
        return best

    def _mark_pairings(self, tokens: list[Token], slots: list[_FoodSlot]) -> None:
        """Resolve generic foods mentioned next to a food they are usually eaten with."""
        for slot in slots:
            generic = slot.resolution.generic
            if generic is None:
                continue
            for other in slots:
                if other is slot:
                    continue
                if not _same_clause(tokens, slot.mention, other.mention):
                    continue
                gap = _gap(slot.mention.start, slot.mention.end, other.mention)
                if gap is None or gap > self.settings.pairing_window:
                    continue
                concept = _concept(other.resolution)
                if concept is not None and self.lexicon.pairs(generic, concept):
                    slot.paired = True
                    break

    def _item(
        self, text: str, slot: _FoodSlot, name: str, span: tuple[int, int]
    ) -> ExtractedFoodItem:
        return ExtractedFoodItem(
            name=name,
            original_text=text[span[0] : span[1]],
            confidence=self._confidence(slot),
            span=span,
            quantity=slot.quantity,
            cooking_method=slot.cooking_method,
        )

    def _confidence(self, slot: _FoodSlot) -> float:
        settings = self.settings
        resolution = slot.resolution
        if resolution.is_ambiguous:
            score = settings.context_resolved_confidence
            if not resolution.exact:
                score = min(score, settings.fuzzy_match_confidence)
        elif not resolution.exact:
            score = settings.fuzzy_match_confidence
        elif resolution.word_count > 1:
            score = settings.multi_word_confidence
        else:
            score = settings.exact_match_confidence
        if slot.quantity is not None:
            score += settings.quantity_bonus
        if slot.cooking_method is not None:
            score += settings.cooking_method_bonus
        return min(1.0, score)


def _quantity_mentions(mentions: list[_Mention]) -> list[_QuantityMention]:
    """Combine numbers, portion words and units into quantity expressions."""
    quantities: list[_QuantityMention] = []
    index = 0
    while index < len(mentions):
        mention = mentions[index]
        following = mentions[index + 1] if index + 1 < len(mentions) else None
        unit_follows = (
            following is not None
            and following.kind is _MentionKind.UNIT
            and following.start == mention.end
        )
        if mention.kind in (_MentionKind.NUMBER, _MentionKind.PORTION):
            if unit_follows:
                quantities.append(
                    _QuantityMention(
                        mention.start,
                        following.end,
                        FoodQuantity(mention.value, _unit_name(following)),
                    )
                )
                index += 2
                continue
            if mention.spelled and not _food_follows(mention, following):
                index += 1
                continue
            unit = _COUNT_UNIT if mention.kind is _MentionKind.NUMBER else _PORTION_UNIT
            quantities.append(
                _QuantityMention(
                    mention.start, mention.end, FoodQuantity(mention.value, unit)
                )
            )
        elif mention.kind is _MentionKind.UNIT:
            quantities.append(
                _QuantityMention(
                    mention.start, mention.end, FoodQuantity(1.0, _unit_name(mention))
                )
            )
        index += 1
    return quantities


def _unit_name(mention: _Mention) -> str:
    return mention.resolution.candidates[0]


def _gap(start: int, end: int, other: _Mention) -> int | None:
    """Count the tokens strictly between a token range and another mention."""
    if other.start >= end:
        return other.start - end
    if other.end <= start:
        return start - other.end
    return None


def _concept(resolution: Resolution) -> str | None:
    if resolution.generic is not None:
        return resolution.generic
    if not resolution.is_ambiguous:
        return resolution.candidates[0]
    return None


def _surface(tokens: list[Token], mention: _Mention) -> str:
    return " ".join(token.text for token in tokens[mention.start : mention.end])


def _clause_text(text: str, tokens: list[Token], index: int) -> str:
    """Return the verbatim clause containing the token at index."""
    clause = tokens[index].clause
    members = [token for token in tokens if token.clause == clause]
    return text[members[0].start : members[-1].end]


def _same_clause(tokens: list[Token], first: _Mention, second: _Mention) -> bool:
    return tokens[first.start].clause == tokens[second.start].clause


def _food_follows(mention: _Mention, following: _Mention | None) -> bool:
    """Whether a food starts right after the mention.

    Spelled-out numbers such as "do" double as verbs, so they only count as
    a bare count when directly followed by a food.
    """
    return (
        following is not None
        and following.kind is _MentionKind.FOOD
        and following.start == mention.end
    )
