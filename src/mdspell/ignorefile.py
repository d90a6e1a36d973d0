"""Words-to-ignore file format.

One entry per line::

    # comments run to the end of the line
    kubectl
    dockerize like modernize

A bare word is accepted as is. ``<word> like <reference>`` accepts the word
together with the affixed forms the dictionary knows for the reference word.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator

from .spans import Point, Position, add_relative, end_of
from .tokens import Word

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"#.*")


@dataclass(frozen=True, slots=True)
class IgnoreDirective:
    word: str
    like: Word | None = None  # reference word, positioned in the ignore file


def parse_ignore_file(content: str) -> Iterator[IgnoreDirective]:
    offset = 0
    for line_no, line in enumerate(content.split("\n"), start=1):
        entry = _COMMENT_RE.sub("", line, count=1)
        fields = entry.split()

        if len(fields) == 1:
            yield IgnoreDirective(word=fields[0])
        elif len(fields) == 3 and fields[1] == "like":
            reference = fields[2]
            # The comment is gone, so columns still match the raw line.
            column0 = entry.rfind(reference)
            start = Point(line=line_no, column=column0 + 1, offset=offset + column0)
            end = add_relative(start, end_of(reference))
            yield IgnoreDirective(
                word=fields[0],
                like=Word(text=reference, position=Position(start=start, end=end)),
            )
        elif fields:
            logger.warning(
                "Couldn't parse ignore file entry %r on line %d. "
                "Expected format: just a <word> or '<word> like <word>'",
                line,
                line_no,
            )

        offset += len(line) + 1  # the newline
