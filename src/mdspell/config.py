"""Run configuration.

Defaults live here as module constants. When running as a GitHub Action the
inputs arrive as ``INPUT_<NAME>`` environment variables; command-line
arguments take precedence over them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_LANGUAGE = "en"
DEFAULT_DISTANCE = 2
DEFAULT_MAX_SUGGESTIONS = 10

ENV_FILES = "INPUT_FILES-TO-CHECK"
ENV_EXCLUDE = "INPUT_FILES-TO-EXCLUDE"
ENV_IGNORE_FILE = "INPUT_WORDS-TO-IGNORE-FILE"


def _patterns(value: str) -> tuple[str, ...]:
    # Action inputs hold one pattern per line.
    return tuple(p.strip() for p in value.splitlines() if p.strip())


@dataclass(frozen=True, slots=True)
class CheckConfig:
    files: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    ignore_file: str | None = None
    language: str = DEFAULT_LANGUAGE
    distance: int = DEFAULT_DISTANCE
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    blocks_only: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CheckConfig":
        env = os.environ if environ is None else environ
        ignore_file = env.get(ENV_IGNORE_FILE, "").strip()
        return cls(
            files=_patterns(env.get(ENV_FILES, "")),
            exclude=_patterns(env.get(ENV_EXCLUDE, "")),
            ignore_file=ignore_file or None,
        )
