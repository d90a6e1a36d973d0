from __future__ import annotations

from dataclasses import dataclass

from .spans import Position


@dataclass(frozen=True, slots=True)
class Node:
    type: str  # mdast-style tag: "paragraph", "text", "inlineCode", ...
    position: Position | None


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text starting at `position`; the source slice, with entities decoded."""

    value: str


@dataclass(frozen=True, slots=True)
class Literal(Node):
    """A leaf whose content is never spell-checked (code, math, HTML, images, ...)."""

    value: str = ""


@dataclass(frozen=True, slots=True)
class Parent(Node):
    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class Link(Parent):
    url: str = ""
    # Label was produced from the URL itself (<...> autolinks, bare-URL detection).
    autolink: bool = False
