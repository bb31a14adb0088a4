"""Tests for the lexicon alias table."""

import pytest
from pydantic import ValidationError

from nutrisync.domain.lexicon import ConceptKind, LexiconEntry
from nutrisync.services.lexicon import (
    Lexicon,
    LexiconError,
    LexiconUnavailableError,
    require_lexicon,
)


def test_resolve_exact_alias(lexicon) -> None:
    resolution = lexicon.resolve("Chawal")

    assert resolution is not None
    assert resolution.kind is ConceptKind.FOOD
    assert resolution.candidates == ("rice",)
    assert resolution.generic is None
    assert resolution.exact
    assert not resolution.is_ambiguous


def test_resolve_generic_food_lists_variants(lexicon) -> None:
    resolution = lexicon.resolve("dal")

    assert resolution.generic == "lentils"
    assert resolution.candidates == (
        "moong dal",
        "toor dal",
        "masoor dal",
        "chana dal",
        "urad dal",
    )
    assert resolution.is_ambiguous


def test_resolve_shared_alias_lists_every_concept(lexicon) -> None:
    resolution = lexicon.resolve("gobi")

    assert resolution.candidates == ("cauliflower", "cabbage")
    assert resolution.generic is None


def test_resolve_multi_word_alias(lexicon) -> None:
    resolution = lexicon.resolve("aloo  paratha")

    assert resolution.candidates == ("aloo paratha",)
    assert resolution.word_count == 2


def test_resolve_unit_and_cooking_method(lexicon) -> None:
    assert lexicon.resolve("katori").kind is ConceptKind.UNIT
    assert lexicon.resolve("tadka").kind is ConceptKind.COOKING_METHOD


def test_resolve_unknown_returns_none(lexicon) -> None:
    assert lexicon.resolve("pizza") is None
    assert lexicon.resolve("") is None


def test_resolve_fuzzy_matches_spelling_variant(lexicon) -> None:
    resolution = lexicon.resolve_fuzzy("chawall", 88)

    assert resolution is not None
    assert resolution.candidates == ("rice",)
    assert not resolution.exact


def test_resolve_fuzzy_ignores_units(lexicon) -> None:
    assert lexicon.resolve_fuzzy("garam", 88) is None


def test_resolve_fuzzy_respects_cutoff(lexicon) -> None:
    assert lexicon.resolve_fuzzy("chawall", 99) is None


def test_pairs_is_symmetric(lexicon) -> None:
    assert lexicon.pairs("rice", "lentils")
    assert lexicon.pairs("lentils", "rice")
    assert not lexicon.pairs("rice", "tea")
    assert not lexicon.pairs("rice", "unknown")


def test_display_name_prefers_first_alias(lexicon) -> None:
    assert lexicon.display_name("rice") == "chawal"
    assert lexicon.display_name("moong dal") == "moong dal"
    assert lexicon.display_name("not there") == "not there"


def test_number_and_portion_words(lexicon) -> None:
    assert lexicon.number_value("do") == 2.0
    assert lexicon.number_value("dedh") == 1.5
    assert lexicon.number_value("roti") is None
    assert lexicon.portion_multiplier("thoda") == 0.5
    assert lexicon.portion_multiplier("zyada") == 2.0


def test_entry_lookup(lexicon) -> None:
    assert lexicon.entry("katori").grams == 150
    assert "rice" in lexicon
    with pytest.raises(LexiconError):
        lexicon.entry("pizza")


def test_entries_filter_by_kind(lexicon) -> None:
    units = lexicon.entries(ConceptKind.UNIT)

    assert units
    assert all(entry.kind is ConceptKind.UNIT for entry in units)
    assert len(lexicon.entries()) == len(lexicon)


def test_max_alias_words(lexicon, small_lexicon) -> None:
    assert lexicon.max_alias_words >= 3
    assert small_lexicon.max_alias_words == 2


def test_duplicate_names_rejected() -> None:
    with pytest.raises(LexiconError, match="Duplicate"):
        Lexicon(
            [
                LexiconEntry("rice", ConceptKind.FOOD, ("chawal",)),
                LexiconEntry("rice", ConceptKind.FOOD, ("bhaat",)),
            ]
        )


def test_alias_shared_across_kinds_rejected() -> None:
    with pytest.raises(LexiconError, match="different kinds"):
        Lexicon(
            [
                LexiconEntry("dum aloo", ConceptKind.FOOD, ("dum",)),
                LexiconEntry("dum", ConceptKind.COOKING_METHOD, ("dum",)),
            ]
        )


def test_dangling_variant_rejected() -> None:
    with pytest.raises(LexiconError, match="unknown food"):
        Lexicon(
            [
                LexiconEntry(
                    "lentils",
                    ConceptKind.FOOD,
                    ("dal",),
                    variants=("moong dal", "toor dal"),
                ),
                LexiconEntry("moong dal", ConceptKind.FOOD, ("moong dal",)),
            ]
        )


def test_single_variant_rejected() -> None:
    with pytest.raises(LexiconError, match="two variants"):
        Lexicon(
            [
                LexiconEntry(
                    "lentils", ConceptKind.FOOD, ("dal",), variants=("moong dal",)
                ),
                LexiconEntry("moong dal", ConceptKind.FOOD, ("moong dal",)),
            ]
        )


def test_variants_only_on_foods() -> None:
    with pytest.raises(LexiconError, match="Only foods"):
        Lexicon(
            [
                LexiconEntry("rice", ConceptKind.FOOD, ("chawal",)),
                LexiconEntry("bhaat", ConceptKind.FOOD, ("bhaat",)),
                LexiconEntry(
                    "katori", ConceptKind.UNIT, ("katori",), variants=("rice", "bhaat")
                ),
            ]
        )


def test_from_payload_validates_schema() -> None:
    with pytest.raises(ValidationError):
        Lexicon.from_payload(
            {"concepts": [{"name": "rice", "kind": "food", "aliases": []}]}
        )


def test_from_payload_builds_lexicon() -> None:
    lexicon = Lexicon.from_payload(
        {
            "version": "7",
            "concepts": [
                {"name": "rice", "kind": "food", "aliases": ["chawal"], "grams": 150}
            ],
            "number_words": {"Ek": 1},
        }
    )

    assert lexicon.version == "7"
    assert lexicon.locale == "hi-Latn"
    assert lexicon.entry("rice").grams == 150
    assert lexicon.number_value("ek") == 1.0


def test_require_lexicon_rejects_missing_or_foodless() -> None:
    with pytest.raises(LexiconUnavailableError):
        require_lexicon(None)
    with pytest.raises(LexiconUnavailableError):
        require_lexicon(Lexicon([LexiconEntry("glass", ConceptKind.UNIT, ("glass",))]))


def test_require_lexicon_returns_lexicon(small_lexicon) -> None:
    assert require_lexicon(small_lexicon) is small_lexicon


def test_stop_words_block_spelling_matches(lexicon) -> None:
    assert lexicon.is_stop_word("Bhaiya")
    assert lexicon.resolve_fuzzy("bhaiya", 88) is None
    assert lexicon.resolve_fuzzy("bhajiyaa", 88).candidates == ("pakora",)


def test_from_payload_reads_stop_words() -> None:
    lexicon = Lexicon.from_payload(
        {
            "concepts": [{"name": "pakora", "kind": "food", "aliases": ["bhajiya"]}],
            "stop_words": ["Bhaiya"],
        }
    )

    assert lexicon.is_stop_word("bhaiya")
    assert lexicon.resolve_fuzzy("bhaiya", 88) is None
