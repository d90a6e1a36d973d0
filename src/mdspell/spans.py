from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A character boundary in source text.

    Line/column are 1-based; offset is 0-based and unknown when the point was
    derived from a context without absolute offsets.
    """

    line: int
    column: int
    offset: int | None = None


@dataclass(frozen=True, slots=True)
class Position:
    """Half-open span [start, end) in a single text."""

    start: Point
    end: Point

    def format(self) -> str:
        return f"{self.start.line}:{self.start.column}"


START = Point(line=1, column=1, offset=0)


def end_of(text: str) -> Point:
    """The point reached after consuming `text` from line 1, column 1."""
    last_newline = text.rfind("\n")
    return Point(
        line=1 + text.count("\n"),
        column=len(text) - last_newline,
        offset=len(text),
    )


def add_relative(base: Point, rel: Point) -> Point:
    """Promote `rel`, relative to a sub-text anchored at `base`, to an absolute point."""
    # Still on the anchor's first line: columns continue from the anchor.
    column = rel.column + base.column - 1 if rel.line == 1 else rel.column
    offset = None
    if base.offset is not None and rel.offset is not None:
        offset = base.offset + rel.offset
    return Point(line=base.line - 1 + rel.line, column=column, offset=offset)


def _before(a: Point, b: Point) -> bool:
    if a.offset is not None and b.offset is not None:
        return a.offset < b.offset
    return (a.line, a.column) < (b.line, b.column)


def min_point(a: Point, b: Point) -> Point:
    return b if _before(b, a) else a


def max_point(a: Point, b: Point) -> Point:
    return b if _before(a, b) else a


def merge(a: Position, b: Position) -> Position:
    """Smallest position enclosing both `a` and `b`."""
    return Position(start=min_point(a.start, b.start), end=max_point(a.end, b.end))


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Offset <-> line/column conversion for one text."""

    starts: tuple[int, ...]  # offset of the first character of each line
    length: int

    @classmethod
    def of(cls, text: str) -> "LineIndex":
        starts = [0]
        i = text.find("\n")
        while i >= 0:
            starts.append(i + 1)
            i = text.find("\n", i + 1)
        return cls(starts=tuple(starts), length=len(text))

    def line_start(self, line: int) -> int:
        # Lines past the end of the text start at its end.
        if 1 <= line <= len(self.starts):
            return self.starts[line - 1]
        return self.length

    def point(self, offset: int) -> Point:
        line = bisect_right(self.starts, offset)
        return Point(line=line, column=offset - self.starts[line - 1] + 1, offset=offset)

    def offset(self, line: int, column: int) -> int:
        return self.line_start(line) + column - 1

    def position(self, start: int, end: int) -> Position:
        return Position(start=self.point(start), end=self.point(end))
