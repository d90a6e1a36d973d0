from __future__ import annotations

from .api import CheckReport, FileReport, check_file, check_source, find_files, load_ignore_file, run_checks
from .config import CheckConfig
from .errors import ConfigError, MissingPositionError, SpellcheckError
from .ignorefile import IgnoreDirective, parse_ignore_file
from .lexer import split_words, tokenize
from .markdown import parse_markdown
from .spans import Point, Position
from .spellcheck import Checker, Misspelling, initialise
from .spelling import Dictionary, EnglishDictionary
from .tokens import Word
from .walker import markdown_words

__all__ = [
    "CheckConfig",
    "CheckReport",
    "Checker",
    "ConfigError",
    "Dictionary",
    "EnglishDictionary",
    "FileReport",
    "IgnoreDirective",
    "MissingPositionError",
    "Misspelling",
    "Point",
    "Position",
    "SpellcheckError",
    "Word",
    "check_file",
    "check_source",
    "find_files",
    "initialise",
    "load_ignore_file",
    "markdown_words",
    "parse_ignore_file",
    "parse_markdown",
    "run_checks",
    "split_words",
    "tokenize",
]
