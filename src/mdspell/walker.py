from __future__ import annotations

from itertools import groupby
from typing import Iterable, Iterator

from .ast import Link, Node, Parent, Text
from .errors import MissingPositionError
from .lexer import positioned_tokens
from .merge import merged_words
from .tokens import PositionedToken, Word


# Never descended into, whatever their content.
SKIP_TYPES = frozenset({"inlineCode", "inlineMath", "math"})

# Only text inside these blocks is checked when walking blocks only.
BLOCK_TYPES = frozenset(
    {
        "paragraph",
        "blockquote",
        "definition",
        "footnote",
        "footnoteDefinition",
        "heading",
        "table",
    }
)

# Inline content: a word may run on across these nodes, never out of the
# block that holds them.
PHRASING_TYPES = frozenset(
    {
        "text",
        "emphasis",
        "strong",
        "delete",
        "link",
        "image",
        "inlineCode",
        "inlineMath",
        "html",
        "footnoteReference",
    }
)


def inner_text(node: Parent) -> str:
    parts: list[str] = []
    for child in node.children:
        if isinstance(child, Text):
            parts.append(child.value)
        elif isinstance(child, Parent):
            parts.append(inner_text(child))
    return "".join(parts)


def _is_bare_url(node: Link) -> bool:
    return node.autolink or inner_text(node) == node.url


def text_nodes(node: Node) -> Iterator[Text]:
    """Text leaves under `node` that are candidates for spell checking."""
    for leaf, _ in _leaves(node, node, True):
        yield leaf


def _leaves(node: Node, block: Node, allowed: bool) -> Iterator[tuple[Text, Node]]:
    # Each text leaf with its nearest non-phrasing ancestor.
    if node.type in SKIP_TYPES:
        return
    if isinstance(node, Link) and _is_bare_url(node):
        return
    allowed = allowed or node.type in BLOCK_TYPES
    if isinstance(node, Text):
        if allowed:
            yield node, block
    elif isinstance(node, Parent):
        if node.type not in PHRASING_TYPES:
            block = node
        for child in node.children:
            yield from _leaves(child, block, allowed)


def text_runs(root: Node, *, blocks_only: bool = True) -> Iterator[list[Text]]:
    """Checkable text leaves grouped by the block that holds them, in document order.

    With `blocks_only`, text outside `BLOCK_TYPES` (front matter, raw HTML,
    list markers, ...) is never considered.
    """
    for _, run in groupby(_leaves(root, root, not blocks_only), key=lambda pair: id(pair[1])):
        yield [leaf for leaf, _ in run]


def leaf_tokens(leaves: Iterable[Text]) -> Iterator[PositionedToken]:
    for leaf in leaves:
        if leaf.position is None:
            raise MissingPositionError(node_type=leaf.type, value=leaf.value)
        yield from positioned_tokens(leaf.value, leaf.position.start)


def markdown_words(root: Node, *, blocks_only: bool = True) -> Iterator[Word]:
    for run in text_runs(root, blocks_only=blocks_only):
        yield from merged_words(leaf_tokens(run))
