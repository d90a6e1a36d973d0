from __future__ import annotations

import argparse
import dataclasses
import logging

from .api import run_checks
from .config import CheckConfig
from .errors import SpellcheckError
from .report import format_github, format_json, format_text

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="mdspell", description="Spellcheck Markdown files")
    ap.add_argument("files", nargs="*", help="Glob patterns of files to check (** allowed)")
    ap.add_argument(
        "-x",
        "--exclude",
        action="append",
        default=[],
        help="Glob pattern of files to skip (repeatable)",
    )
    ap.add_argument("-i", "--ignore-file", help="File of words to ignore")
    ap.add_argument("--language", help="Dictionary language (default: en)")
    ap.add_argument(
        "--all-blocks",
        action="store_true",
        help="Check text in every block, not only paragraphs, headings, quotes, tables and footnotes",
    )
    ap.add_argument("--format", choices=("text", "github", "json"), default="text")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    config = CheckConfig.from_env()
    config = dataclasses.replace(
        config,
        files=tuple(args.files) or config.files,
        exclude=tuple(args.exclude) or config.exclude,
        ignore_file=args.ignore_file or config.ignore_file,
        language=args.language or config.language,
        blocks_only=not args.all_blocks,
    )

    try:
        report = run_checks(config)
    except (SpellcheckError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    if args.format == "json":
        print(format_json(report))
    else:
        lines = format_github(report) if args.format == "github" else format_text(report)
        for line in lines:
            print(line)

    if report.has_misspellings:
        logger.error("Misspelled word(s)")
        return 1
    if not report.files:
        logger.error("Couldn't find any files matching the glob pattern(s) %s", ", ".join(config.files))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
