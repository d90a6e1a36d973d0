from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Iterator

from .api import CheckReport
from .spellcheck import Misspelling

TITLE = "Misspelled word"
LIKE_HINT = (
    "When using '<word> like <word>' syntax in ignore files, "
    "the second must be a reference word that's already part of the dictionary."
)


def _ignore_hint(report: CheckReport, word: str) -> str:
    if report.ignore_file:
        return f"If you want to ignore this message, add {word} to the ignore file at {report.ignore_file}"
    return "If you want to ignore this message, configure an ignore file for mdspell."


def message(m: Misspelling, hint: str) -> str:
    suggestions = ", ".join(f'"{s}"' for s in m.suggestions)
    return f'Misspelled word "{m.word}".\nSuggested alternatives: {suggestions}\n{hint}'


def _entries(report: CheckReport) -> Iterator[tuple[str, Misspelling, str]]:
    for m in report.ignore_errors:
        yield report.ignore_file or "", m, LIKE_HINT
    for f in report.files:
        for m in f.misspellings:
            yield f.path, m, _ignore_hint(report, m.word)


def format_text(report: CheckReport) -> Iterator[str]:
    for path, m, hint in _entries(report):
        start = m.position.start
        body = message(m, hint).replace("\n", "\n    ")
        yield f"{path}:{start.line}:{start.column}: {body}"


def _escape_data(s: str) -> str:
    return s.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(s: str) -> str:
    return _escape_data(s).replace(":", "%3A").replace(",", "%2C")


def format_github(report: CheckReport) -> Iterator[str]:
    """GitHub Actions ``::error`` workflow commands, one per misspelling."""
    for path, m, hint in _entries(report):
        props = {
            "file": path,
            "line": m.position.start.line,
            "col": m.position.start.column,
            "endLine": m.position.end.line,
            "endColumn": m.position.end.column,
            "title": TITLE,
        }
        prop_s = ",".join(f"{k}={_escape_property(str(v))}" for k, v in props.items())
        yield f"::error {prop_s}::{_escape_data(message(m, hint))}"


def _to_jsonable(obj):
    if is_dataclass(obj):
        return {k: _to_jsonable(v) for k, v in asdict(obj).items()}
    if isinstance(obj, tuple):
        return [_to_jsonable(x) for x in obj]
    if isinstance(obj, list):
        return [_to_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): _to_jsonable(v) for k, v in obj.items()}
    return obj


def format_json(report: CheckReport) -> str:
    payload = {
        "files": {f.path: _to_jsonable(f.misspellings) for f in report.files},
        "ignore_file": report.ignore_file,
        "ignore_errors": _to_jsonable(report.ignore_errors),
    }
    return json.dumps(payload, indent=2, sort_keys=True)
