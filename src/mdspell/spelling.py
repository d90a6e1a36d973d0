from __future__ import annotations

import logging
from typing import Protocol

from spellchecker import SpellChecker

from .config import DEFAULT_DISTANCE, DEFAULT_LANGUAGE, DEFAULT_MAX_SUGGESTIONS
from .errors import ConfigError

logger = logging.getLogger(__name__)

# Suffixes copied from a reference word onto a word ignored "like" it.
_VARIANT_SUFFIXES = ("s", "es", "'s", "ed", "d", "ing", "er", "ers", "est", "ly")


class Dictionary(Protocol):
    def spell(self, word: str) -> bool: ...

    def suggest(self, word: str) -> list[str]: ...

    def add_word(self, word: str) -> None: ...

    def add_word_as_variant_of(self, word: str, reference: str) -> None: ...


def _match_case(suggestion: str, word: str) -> str:
    if word.isupper() and len(word) > 1:
        return suggestion.upper()
    if word[:1].isupper():
        return suggestion[:1].upper() + suggestion[1:]
    return suggestion


class EnglishDictionary:
    """A `Dictionary` backed by pyspellchecker's word-frequency lists."""

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        *,
        distance: int = DEFAULT_DISTANCE,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    ) -> None:
        try:
            self._spell = SpellChecker(language=language, distance=distance)
        except ValueError as exc:
            raise ConfigError(
                message=f"no dictionary for language {language!r}",
                hint=str(exc),
            ) from exc
        self.max_suggestions = max_suggestions

    def _known(self, word: str) -> bool:
        return bool(self._spell.known([word]))

    def spell(self, word: str) -> bool:
        if self._known(word):
            return True
        # Hyphenated compounds are fine when every part is.
        if "-" in word and all(part and self.spell(part) for part in word.split("-")):
            return True
        if word.endswith("'s") and len(word) > 2:
            return self.spell(word[:-2])
        return False

    def suggest(self, word: str) -> list[str]:
        candidates = self._spell.candidates(word) or set()
        lower = word.lower()
        ranked = sorted(
            (c for c in candidates if c != lower),
            key=lambda c: (-self._spell[c], c),
        )
        return [_match_case(c, word) for c in ranked[: self.max_suggestions]]

    def add_word(self, word: str) -> None:
        self._spell.word_frequency.load_words([word])

    def add_word_as_variant_of(self, word: str, reference: str) -> None:
        forms = [word]
        for suffix in _VARIANT_SUFFIXES:
            if self._known(reference + suffix):
                forms.append(word + suffix)
        logger.debug("Adding %s like %s: %s", word, reference, ", ".join(forms))
        self._spell.word_frequency.load_words(forms)
