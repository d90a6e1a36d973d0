from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .config import CheckConfig
from .ignorefile import IgnoreDirective
from .markdown import parse_markdown
from .spans import Position
from .spelling import Dictionary, EnglishDictionary
from .walker import markdown_words


@dataclass(frozen=True, slots=True)
class Misspelling:
    word: str
    position: Position
    suggestions: tuple[str, ...] = ()


class Checker:
    """One checking session; owns its dictionary.

    Apply ignore directives before the checks they should affect.
    """

    def __init__(self, dictionary: Dictionary, *, blocks_only: bool = True) -> None:
        self.dictionary = dictionary
        self.blocks_only = blocks_only

    def _misspelling(self, word: str, position: Position) -> Misspelling:
        return Misspelling(word=word, position=position, suggestions=tuple(self.dictionary.suggest(word)))

    def add_ignores(self, directives: Iterable[IgnoreDirective]) -> Iterator[Misspelling]:
        """Apply `directives`, yielding the reference words that are not themselves valid."""
        for directive in directives:
            if directive.like is None:
                self.dictionary.add_word(directive.word)
            elif self.dictionary.spell(directive.like.text):
                self.dictionary.add_word_as_variant_of(directive.word, directive.like.text)
            else:
                yield self._misspelling(directive.like.text, directive.like.position)

    def check(self, contents: str) -> Iterator[Misspelling]:
        root = parse_markdown(contents)
        for word in markdown_words(root, blocks_only=self.blocks_only):
            if not self.dictionary.spell(word.text):
                yield self._misspelling(word.text, word.position)


def initialise(config: CheckConfig | None = None) -> Checker:
    config = config or CheckConfig()
    dictionary = EnglishDictionary(
        config.language,
        distance=config.distance,
        max_suggestions=config.max_suggestions,
    )
    return Checker(dictionary, blocks_only=config.blocks_only)
