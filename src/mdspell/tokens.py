from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Position


class TokenKind(str, Enum):
    WORD = "word"
    # Anything between words: spaces, line breaks, punctuation, digits.
    WHITESPACE = "whitespace"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    content: str

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.content!r})"


@dataclass(frozen=True, slots=True)
class PositionedToken(Token):
    position: Position

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.content!r}, {self.position.format()})"


@dataclass(frozen=True, slots=True)
class Word:
    text: str
    position: Position
