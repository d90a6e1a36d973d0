from __future__ import annotations

import glob
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .config import CheckConfig
from .errors import ConfigError
from .ignorefile import IgnoreDirective, parse_ignore_file
from .spellcheck import Checker, Misspelling, initialise

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileReport:
    path: str
    misspellings: tuple[Misspelling, ...]


@dataclass(frozen=True, slots=True)
class CheckReport:
    files: tuple[FileReport, ...]
    ignore_file: str | None = None
    ignored_words: tuple[str, ...] = ()
    ignore_errors: tuple[Misspelling, ...] = ()  # "like" references missing from the dictionary

    @property
    def has_misspellings(self) -> bool:
        return any(f.misspellings for f in self.files)

    @property
    def ok(self) -> bool:
        return bool(self.files) and not self.has_misspellings


def _expand(patterns: Iterable[str]) -> set[Path]:
    out: set[Path] = set()
    for pattern in patterns:
        for match in glob.glob(str(Path(pattern).expanduser()), recursive=True):
            out.add(Path(match))
    return out


def find_files(patterns: Iterable[str], exclude: Iterable[str] = ()) -> list[Path]:
    """Files matching any of `patterns` and none of `exclude`, sorted."""
    excluded = {p.resolve() for p in _expand(exclude)}
    files: list[Path] = []
    for path in sorted(_expand(patterns)):
        if not path.is_file():
            continue
        if path.resolve() in excluded:
            logger.info("Ignoring %s because it is excluded.", path)
            continue
        files.append(path)
    return files


def load_ignore_file(path: str | Path) -> list[IgnoreDirective]:
    p = Path(path).expanduser()
    try:
        content = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(message=f"cannot read ignore file {str(p)!r}", hint=str(exc)) from exc
    return list(parse_ignore_file(content))


def check_source(src: str, *, checker: Checker | None = None) -> list[Misspelling]:
    checker = checker or initialise()
    return list(checker.check(src))


def check_file(path: str | Path, checker: Checker) -> FileReport:
    p = Path(path)
    src = p.read_text(encoding="utf-8")
    report = FileReport(path=str(p), misspellings=tuple(checker.check(src)))
    logger.info("Spellchecked %s.", p)
    return report


def run_checks(config: CheckConfig, *, checker: Checker | None = None) -> CheckReport:
    if not config.files:
        raise ConfigError(
            message='missing configuration field "files-to-check"',
            hint="pass one or more glob patterns of Markdown files",
        )

    checker = checker or initialise(config)

    directives: list[IgnoreDirective] = []
    ignore_errors: tuple[Misspelling, ...] = ()
    if config.ignore_file:
        directives = load_ignore_file(config.ignore_file)
        # All directives go in before the first check.
        ignore_errors = tuple(checker.add_ignores(directives))

    if directives:
        logger.info("Ignoring words: %s", ", ".join(d.word for d in directives))
    elif config.ignore_file:
        logger.info("No words to ignore configured: No words parsed from the ignore file.")
    else:
        logger.info("No words to ignore configured: No ignore file configured.")

    files = tuple(check_file(p, checker) for p in find_files(config.files, config.exclude))
    return CheckReport(
        files=files,
        ignore_file=config.ignore_file,
        ignored_words=tuple(d.word for d in directives),
        ignore_errors=ignore_errors,
    )
