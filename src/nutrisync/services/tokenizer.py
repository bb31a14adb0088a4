"""Tokenizer for Hinglish meal descriptions."""

import re
from dataclasses import dataclass

_TOKEN_PATTERN = re.compile(
    r"\d+/\d+|\d+(?:\.\d+)?|(?:[^\W\d_]|[\u0900-\u097f])+(?:'[^\W\d_]+)?"
)
_CLAUSE_BREAK = re.compile(r"[,.;:!?\n|]")


@dataclass(frozen=True)
class Token:
    """Lowercased word or numeral with its position in the input."""

    text: str
    original: str
    start: int
    end: int
    clause: int

    @property
    def is_number(self) -> bool:
        return self.text[0].isdigit()

    @property
    def number(self) -> float | None:
        """Numeric value of a numeral token, if it is one."""
        if not self.is_number:
            return None
        if "/" in self.text:
            numerator, denominator = self.text.split("/", 1)
            if float(denominator) == 0:
                return None
            return float(numerator) / float(denominator)
        return float(self.text)


def tokenize(text: str) -> list[Token]:
    """Split text into tokens, keeping offsets into the original string."""
    tokens: list[Token] = []
    clause = 0
    previous_end = 0
    for match in _TOKEN_PATTERN.finditer(text):
        if tokens and _CLAUSE_BREAK.search(text, previous_end, match.start()):
            clause += 1
        tokens.append(
            Token(
                text=match.group().lower(),
                original=match.group(),
                start=match.start(),
                end=match.end(),
                clause=clause,
            )
        )
        previous_end = match.end()
    return tokens


def normalize(text: str) -> str:
    """Return the lowercased, punctuation-free form used for matching."""
    return " ".join(token.text for token in tokenize(text))
