"""Markdown parsing into the positioned node tree used for word extraction.

markdown-it-py records only block line ranges, so inline positions are
recovered by walking the source alongside the token stream. Text tokens are
slices of the source once ``text_join`` is disabled, up to the ``\|`` escapes
of table cells; everything else (code spans, math, links, images) is stepped
over by its delimiters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.common.utils import normalizeReference
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.front_matter import front_matter_plugin

from .ast import Link, Literal, Node, Parent, Text
from .spans import LineIndex, Position


_PARSER: MarkdownIt | None = None

# markdown-it node type -> node type of the extracted tree (mdast names)
_CONTAINERS = {
    "root": "root",
    "paragraph": "paragraph",
    "heading": "heading",
    "blockquote": "blockquote",
    "bullet_list": "list",
    "ordered_list": "list",
    "list_item": "listItem",
    "table": "table",
    "thead": "tableHead",
    "tbody": "tableBody",
    "tr": "tableRow",
    "th": "tableCell",
    "td": "tableCell",
    "footnote_reference": "footnoteDefinition",
    "dl": "definition",
    "dt": "definitionTerm",
    "dd": "definitionDescription",
    "em": "emphasis",
    "strong": "strong",
    "s": "delete",
}

_LITERALS = {
    "code_block": "code",
    "fence": "code",
    "html_block": "html",
    "html_inline": "html",
    "math_block": "math",
    "math_block_label": "math",
    "front_matter": "yaml",
    "hr": "thematicBreak",
    "footnote_ref": "footnoteReference",
}


def build_parser() -> MarkdownIt:
    md = (
        MarkdownIt("gfm-like")
        .use(front_matter_plugin)
        # Definitions stay where they are written, referenced or not.
        .use(footnote_plugin, inline=False, move_to_end=False)
        .use(deflist_plugin)
        .use(dollarmath_plugin, double_inline=True)
    )
    # Keeps escapes and entities out of the neighbouring text tokens.
    md.disable("text_join")
    return md


def _get_parser() -> MarkdownIt:
    global _PARSER
    if _PARSER is None:
        _PARSER = build_parser()
    return _PARSER


def _group_end(src: str, i: int) -> int:
    """Index just past the bracket group opening at ``src[i]`` (``[`` or ``(``)."""
    opener = src[i]
    closer = "]" if opener == "[" else ")"
    depth = 0
    quote = ""
    j = i
    while j < len(src):
        ch = src[j]
        if ch == "\\":
            j += 2
            continue
        if quote:
            if ch == quote:
                quote = ""
        elif opener == "(" and ch in "\"'" and src[j - 1] in " \t\n":
            # link title
            quote = ch
        elif ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return j + 1
        j += 1
    return len(src)


@dataclass(slots=True)
class _Cursor:
    src: str
    lines: LineIndex
    references: dict[str, Any]
    i: int = 0
    block_start: int = 0

    def enter(self, line_map: tuple[int, int] | None) -> None:
        if not line_map:
            return
        begin = self.lines.line_start(line_map[0] + 1)
        end = self.lines.line_start(line_map[1] + 1)
        self.block_start = begin
        # Blocks come in source order, but a search that missed may have
        # run past the start of this one.
        if not begin <= self.i < end:
            self.i = begin

    def block_position(self, line_map: tuple[int, int] | None) -> Position | None:
        if not line_map:
            return None
        return self.lines.position(
            self.lines.line_start(line_map[0] + 1),
            self.lines.line_start(line_map[1] + 1),
        )

    def find(self, needle: str, *, fallback: bool = True) -> Position | None:
        if not needle:
            return self.lines.position(self.i, self.i)
        j = self.src.find(needle, self.i)
        if j < 0 and fallback:
            j = self.src.find(needle, self.block_start)
        if j < 0:
            return None
        self.i = j + len(needle)
        return self.lines.position(j, self.i)

    def text(self, content: str) -> Position | None:
        """Locate a text token; table cells unescape ``\\|`` in their content."""
        if "|" not in content:
            return self.find(content)
        pattern = re.compile("".join(r"\\?\|" if ch == "|" else re.escape(ch) for ch in content))
        m = pattern.search(self.src, self.i) or pattern.search(self.src, self.block_start)
        if m is None:
            return None
        self.i = m.end()
        return self.lines.position(m.start(), m.end())

    def source(self, position: Position | None, default: str) -> str:
        if position is None:
            return default
        return self.src[position.start.offset : position.end.offset]

    def span(self, opener: str, closer: str | None = None) -> Position | None:
        """Locate a construct delimited like a code span: opener ... closer."""
        closer = closer or opener
        j = self.src.find(opener, self.i)
        if j < 0:
            return None
        k = self.src.find(closer, j + len(opener))
        if k < 0:
            return None
        self.i = k + len(closer)
        return self.lines.position(j, self.i)

    def link_tail(self) -> None:
        j = self.src.find("]", self.i)
        if j >= 0:
            self.i = self._past_destination(j + 1)

    def image(self) -> Position | None:
        j = self.src.find("![", self.i)
        if j < 0:
            return None
        self.i = self._past_destination(_group_end(self.src, j + 1))
        return self.lines.position(j, self.i)

    def _past_destination(self, i: int) -> int:
        nxt = self.src[i : i + 1]
        if nxt == "(":
            return _group_end(self.src, i)
        if nxt == "[":
            k = _group_end(self.src, i)
            label = self.src[i + 1 : k - 1]
            if not label.strip() or normalizeReference(label) in self.references:
                return k
        return i


class _TreeBuilder:
    def __init__(self, src: str, env: dict[str, Any]) -> None:
        self.cur = _Cursor(src=src, lines=LineIndex.of(src), references=env.get("references", {}))

    def block(self, node: SyntaxTreeNode) -> Node:
        line_map = None if node.is_root else node.map
        self.cur.enter(line_map)
        position = self.cur.block_position(line_map)
        kind = node.type

        if kind in _LITERALS:
            return Literal(_LITERALS[kind], position, node.content)
        if kind not in _CONTAINERS and not node.children:
            return Literal(kind, position, node.content)

        children: list[Node] = []
        for child in node.children:
            if child.type == "inline":
                self.cur.enter(child.map)
                children.extend(self.inline(c) for c in child.children)
            else:
                children.append(self.block(child))
        return Parent(_CONTAINERS.get(kind, kind), position, tuple(children))

    def inline(self, node: SyntaxTreeNode) -> Node:
        cur = self.cur
        kind = node.type

        if kind == "text":
            position = cur.text(node.content)
            return Text("text", position, cur.source(position, node.content))
        if kind in ("softbreak", "hardbreak"):
            # Line breaks read as whitespace, as they do inside a text node.
            return Text("text", cur.find("\n"), "\n")
        if kind == "text_special":
            if node.info == "escape":
                return Text("text", cur.find(node.markup), node.markup)
            # Decoded, so "caf&eacute;s" reads as one word.
            return Text("text", cur.find(node.markup or node.content), node.content)
        if kind == "code_inline":
            return Literal("inlineCode", cur.span(node.markup or "`"), node.content)
        if kind in ("math_inline", "math_inline_double"):
            return Literal("inlineMath", cur.span(node.markup or "$"), node.content)
        if kind == "html_inline":
            return Literal("html", cur.find(node.content), node.content)
        if kind == "image":
            return Literal("image", cur.image(), node.content)
        if kind == "link":
            return self._link(node)
        if kind in _LITERALS:
            return Literal(_LITERALS[kind], None, node.content)
        if node.children:
            children = tuple(self.inline(c) for c in node.children)
            return Parent(_CONTAINERS.get(kind, kind), None, children)
        return Literal(kind, None, node.content)

    def _link(self, node: SyntaxTreeNode) -> Link:
        cur = self.cur
        url = str(node.attrs.get("href", ""))

        if node.markup in ("autolink", "linkify"):
            # The label is the (normalized) URL and may not match the source byte for byte.
            label = "".join(child.content for child in node.children)
            if node.markup == "autolink":
                outer = cur.span("<", ">")
                inner = None
                if outer is not None:
                    inner = cur.lines.position(outer.start.offset + 1, outer.end.offset - 1)
            else:
                inner = outer = cur.find(label, fallback=False)
            return Link("link", outer, (Text("text", inner, label),), url=url, autolink=True)

        children = tuple(self.inline(c) for c in node.children)
        cur.link_tail()
        return Link("link", None, children, url=url)


def parse_markdown(src: str) -> Parent:
    """Parse `src` into a node tree whose text leaves carry source positions."""
    # markdown-it replaces NUL before parsing; offsets are unchanged.
    src = src.replace("\x00", "\ufffd")
    env: dict[str, Any] = {}
    tokens = _get_parser().parse(src, env)
    out = _TreeBuilder(src, env).block(SyntaxTreeNode(tokens))
    if not isinstance(out, Parent):
        raise RuntimeError(f"markdown adapter returned unexpected value: {type(out)!r}")
    return out
