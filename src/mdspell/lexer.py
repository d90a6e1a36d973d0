from __future__ import annotations

from typing import Iterator

from .spans import START, Point, Position, add_relative, end_of
from .tokens import PositionedToken, Token, TokenKind, Word


# Characters allowed inside a word when a letter follows them: "don't", "well-known".
_JOINERS = "'-"


def _word_end(text: str, i: int) -> int:
    n = len(text)
    j = i + 1
    while j < n:
        ch = text[j]
        if ch.isalpha():
            j += 1
        elif ch in _JOINERS and j + 1 < n and text[j + 1].isalpha():
            j += 2
        else:
            break
    return j


def _gap_end(text: str, i: int) -> int:
    n = len(text)
    j = i + 1
    while j < n and not text[j].isalpha():
        j += 1
    return j


def tokenize(text: str) -> Iterator[Token]:
    """Split `text` into alternating word and whitespace tokens.

    A word is a letter followed by letters, or by an apostrophe or hyphen that
    is itself followed by a letter. Everything else is whitespace. Joining the
    contents of all tokens gives back `text`.
    """
    i = 0
    while i < len(text):
        if text[i].isalpha():
            j = _word_end(text, i)
            yield Token(TokenKind.WORD, text[i:j])
        else:
            j = _gap_end(text, i)
            yield Token(TokenKind.WHITESPACE, text[i:j])
        i = j


def positioned_tokens(text: str, start: Point = START) -> Iterator[PositionedToken]:
    """Tokens of `text` with absolute positions, `text` itself beginning at `start`."""
    for tok in tokenize(text):
        end = add_relative(start, end_of(tok.content))
        yield PositionedToken(tok.kind, tok.content, Position(start=start, end=end))
        start = end


def split_words(text: str) -> Iterator[Word]:
    for tok in positioned_tokens(text):
        if tok.kind is TokenKind.WORD:
            yield Word(text=tok.content, position=tok.position)
