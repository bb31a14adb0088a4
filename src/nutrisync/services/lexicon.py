"""Read-only lexicon lookups for foods, units and cooking methods."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from rapidfuzz import fuzz, process

from nutrisync.domain.lexicon import ConceptKind, LexiconEntry, Resolution
from nutrisync.domain.lexicon_schema import LexiconPayload
from nutrisync.services.tokenizer import normalize


class LexiconError(ValueError):
    """Raised when a lexicon definition is inconsistent."""


class LexiconUnavailableError(RuntimeError):
    """Raised when no usable lexicon has been provided."""


class Lexicon:
    """Immutable alias table mapping surface forms to canonical concepts."""

    def __init__(
        self,
        entries: Iterable[LexiconEntry],
        number_words: Mapping[str, float] | None = None,
        portion_words: Mapping[str, float] | None = None,
        stop_words: Iterable[str] = (),
        version: str = "1",
        locale: str = "hi-Latn",
    ) -> None:
        self.version = version
        self.locale = locale
        by_name: dict[str, LexiconEntry] = {}
        for entry in entries:
            if entry.name in by_name:
                raise LexiconError(f"Duplicate concept: {entry.name}")
            by_name[entry.name] = entry
        self._entries = MappingProxyType(by_name)

        aliases: dict[str, list[str]] = {}
        surface_forms: dict[str, tuple[str, ...]] = {}
        for entry in by_name.values():
            normalized_aliases: list[str] = []
            for alias in entry.aliases:
                key = normalize(alias)
                if not key:
                    raise LexiconError(f"Empty alias for {entry.name}")
                names = aliases.setdefault(key, [])
                if names and by_name[names[0]].kind != entry.kind:
                    raise LexiconError(
                        f"Alias '{key}' is shared by {names[0]} and {entry.name} "
                        "of different kinds"
                    )
                if entry.name not in names:
                    names.append(entry.name)
                if key not in normalized_aliases:
                    normalized_aliases.append(key)
            surface_forms[entry.name] = tuple(normalized_aliases)
        self._aliases = MappingProxyType(
            {key: tuple(names) for key, names in aliases.items()}
        )
        self._surface_forms = MappingProxyType(surface_forms)
        self._fuzzy_aliases = tuple(
            sorted(
                key
                for key, names in self._aliases.items()
                if " " not in key and by_name[names[0]].kind is ConceptKind.FOOD
            )
        )
        self._max_alias_words = max(
            (len(key.split()) for key in self._aliases), default=0
        )
        self._number_words = _normalized_words(number_words)
        self._portion_words = _normalized_words(portion_words)
        self._stop_words = frozenset(filter(None, map(normalize, stop_words)))
        self._validate_references()

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "Lexicon":
        """Build a lexicon from a raw payload after schema validation."""
        parsed = LexiconPayload.model_validate(payload)
        entries = [
            LexiconEntry(
                name=concept.name,
                kind=concept.kind,
                aliases=tuple(concept.aliases),
                variants=tuple(concept.variants),
                pairs_with=tuple(concept.pairs_with),
                grams=concept.grams,
                nutrition_multiplier=concept.nutrition_multiplier,
            )
            for concept in parsed.concepts
        ]
        return cls(
            entries,
            number_words=parsed.number_words,
            portion_words=parsed.portion_words,
            stop_words=parsed.stop_words,
            version=parsed.version,
            locale=parsed.locale,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    @property
    def max_alias_words(self) -> int:
        return self._max_alias_words

    def has_foods(self) -> bool:
        """Whether at least one food concept is defined."""
        return any(entry.kind is ConceptKind.FOOD for entry in self._entries.values())

    def entry(self, name: str) -> LexiconEntry:
        """Return the entry for a canonical name."""
        try:
            return self._entries[name]
        except KeyError as exc:
            raise LexiconError(f"Unknown concept: {name}") from exc

    def entries(self, kind: ConceptKind | None = None) -> list[LexiconEntry]:
        """Return entries in definition order, optionally filtered by kind."""
        return [
            entry
            for entry in self._entries.values()
            if kind is None or entry.kind is kind
        ]

    def resolve(self, surface_form: str) -> Resolution | None:
        """Return the concepts an exact surface form may refer to."""
        key = normalize(surface_form)
        names = self._aliases.get(key)
        if not names:
            return None
        return self._resolution(key, names, exact=True)

    def resolve_fuzzy(self, word: str, score_cutoff: float) -> Resolution | None:
        """Match a single word against single-word food aliases by spelling."""
        key = normalize(word)
        if not key or " " in key or key in self._stop_words:
            return None
        match = process.extractOne(
            key,
            self._fuzzy_aliases,
            scorer=fuzz.ratio,
            score_cutoff=score_cutoff,
        )
        if match is None:
            return None
        alias = match[0]
        return self._resolution(alias, self._aliases[alias], exact=False)

    def surface_forms(self, name: str) -> tuple[str, ...]:
        """Return the normalized surface forms of a canonical concept."""
        return self._surface_forms.get(name, ())

    def display_name(self, name: str) -> str:
        """Return the preferred Hinglish surface form for a concept."""
        forms = self.surface_forms(name)
        return forms[0] if forms else name

    def pairs(self, first: str, second: str) -> bool:
        """Whether two foods are commonly eaten together."""
        if first not in self._entries or second not in self._entries:
            return False
        return (
            second in self._entries[first].pairs_with
            or first in self._entries[second].pairs_with
        )

    def number_value(self, word: str) -> float | None:
        """Return the value of a spelled-out number, if known."""
        return self._number_words.get(word)

    def portion_multiplier(self, word: str) -> float | None:
        """Return the multiplier of a vague portion word such as 'thoda'."""
        return self._portion_words.get(word)

    def is_stop_word(self, word: str) -> bool:
        """Whether a word is common non-food vocabulary never matched by spelling."""
        return normalize(word) in self._stop_words

    def _resolution(
        self, key: str, names: tuple[str, ...], *, exact: bool
    ) -> Resolution:
        kind = self._entries[names[0]].kind
        if len(names) == 1:
            entry = self._entries[names[0]]
            if entry.is_generic:
                return Resolution(
                    surface=key,
                    kind=kind,
                    candidates=entry.variants,
                    generic=entry.name,
                    exact=exact,
                )
        return Resolution(surface=key, kind=kind, candidates=names, exact=exact)

    def _validate_references(self) -> None:
        for entry in self._entries.values():
            if entry.kind is not ConceptKind.FOOD and (
                entry.variants or entry.pairs_with
            ):
                raise LexiconError(f"Only foods may declare variants: {entry.name}")
            if len(entry.variants) == 1:
                raise LexiconError(f"{entry.name} needs at least two variants")
            for name in (*entry.variants, *entry.pairs_with):
                referenced = self._entries.get(name)
                if referenced is None or referenced.kind is not ConceptKind.FOOD:
                    raise LexiconError(f"{entry.name} references unknown food {name}")


def require_lexicon(lexicon: Lexicon | None) -> Lexicon:
    """Return the lexicon, failing fast when it is missing or has no foods."""
    if lexicon is None or not lexicon.has_foods():
        raise LexiconUnavailableError("Lexicon unavailable: no food concepts loaded")
    return lexicon


def _normalized_words(words: Mapping[str, float] | None) -> Mapping[str, float]:
    return MappingProxyType(
        {normalize(word): float(value) for word, value in (words or {}).items()}
    )
