"""Clarification questions for ambiguous food mentions."""

from collections.abc import Iterable
from dataclasses import dataclass

from nutrisync.domain.extraction import FoodAmbiguity
from nutrisync.services.lexicon import Lexicon, require_lexicon


@dataclass
class ClarificationService:
    """Turns ambiguities into Hinglish follow-up questions."""

    lexicon: Lexicon | None

    def __post_init__(self) -> None:
        self.lexicon = require_lexicon(self.lexicon)

    def generate_clarification_questions(
        self, ambiguities: Iterable[FoodAmbiguity]
    ) -> list[str]:
        """Return one question per ambiguity, in input order."""
        return [self.question(ambiguity) for ambiguity in ambiguities]

    def question(self, ambiguity: FoodAmbiguity) -> str:
        meanings = [
            self._label(name, ambiguity.term) for name in ambiguity.possible_meanings
        ]
        return (
            f"Aapne '{ambiguity.context}' kaha. "
            f"{ambiguity.term} se kya matlab hai: {_join_choices(meanings)}?"
        )

    def _label(self, name: str, term: str) -> str:
        """Return the first surface form naming only this concept, other than term."""
        for form in self.lexicon.surface_forms(name):
            if form == term:
                continue
            resolution = self.lexicon.resolve(form)
            if (
                resolution is not None
                and resolution.generic is None
                and resolution.candidates == (name,)
            ):
                return form
        return self.lexicon.display_name(name)


def _join_choices(choices: list[str]) -> str:
    if len(choices) <= 1:
        return "".join(choices)
    return f"{', '.join(choices[:-1])} ya {choices[-1]}"
