from __future__ import annotations

from typing import Iterable, Iterator

from .spans import merge
from .tokens import PositionedToken, TokenKind, Word


def merged_words(tokens: Iterable[PositionedToken]) -> Iterator[Word]:
    """Fold a token stream into words.

    Word tokens with no whitespace token between them belong to one word, as
    when markup splits it (``**Ama**zing``): their text is concatenated and
    their positions merged.
    """
    current: Word | None = None

    for tok in tokens:
        if tok.kind is TokenKind.WORD:
            if current is None:
                current = Word(text=tok.content, position=tok.position)
            else:
                current = Word(
                    text=current.text + tok.content,
                    position=merge(current.position, tok.position),
                )
        elif current is not None:
            yield current
            current = None

    if current is not None:
        yield current
