from __future__ import annotations

from dataclasses import dataclass


class SpellcheckError(Exception):
    """Base class for errors raised by mdspell."""


@dataclass(slots=True)
class MissingPositionError(SpellcheckError):
    """A text leaf reached the word extractor without a source position."""

    node_type: str
    value: str

    def __str__(self) -> str:
        return f"missing position on {self.node_type} node {self.value!r}"


@dataclass(slots=True)
class ConfigError(SpellcheckError):
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nhint: {self.hint}"
        return self.message
