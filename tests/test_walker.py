from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdspell.ast import Link, Literal, Parent, Text
from mdspell.errors import MissingPositionError
from mdspell.lexer import positioned_tokens, split_words
from mdspell.merge import merged_words
from mdspell.spans import START, LineIndex, Point, Position, add_relative, end_of
from mdspell.walker import inner_text, leaf_tokens, markdown_words, text_nodes, text_runs


def _text(src: str, start: int, value: str) -> Text:
    idx = LineIndex.of(src)
    return Text("text", idx.position(start, start + len(value)), value)


def _paragraph(*children) -> Parent:
    return Parent("paragraph", None, tuple(children))


def _root(*children) -> Parent:
    return Parent("root", None, tuple(children))


def test_skip_types_are_not_descended() -> None:
    src = "a `b` $c$"
    tree = _paragraph(
        _text(src, 0, "a "),
        Parent("inlineCode", None, (_text(src, 3, "b"),)),
        _text(src, 5, " "),
        Parent("inlineMath", None, (_text(src, 7, "c"),)),
    )
    assert [t.value for t in text_nodes(tree)] == ["a ", " "]


def test_link_labelled_with_its_url_is_skipped() -> None:
    src = "see https://x.io and [docs](https://x.io)"
    bare = Link("link", None, (_text(src, 4, "https://x.io"),), url="https://x.io")
    labelled = Link("link", None, (_text(src, 22, "docs"),), url="https://x.io")
    tree = _paragraph(_text(src, 0, "see "), bare, _text(src, 16, " and "), labelled)
    assert [t.value for t in text_nodes(tree)] == ["see ", " and ", "docs"]


def test_autolink_is_skipped_even_when_label_differs() -> None:
    link = Link("link", None, (Text("text", None, "me@x.io"),), url="mailto:me@x.io", autolink=True)
    assert list(text_nodes(_paragraph(link))) == []


def test_inner_text_flattens_nested_children() -> None:
    node = Link(
        "link",
        None,
        (
            Text("text", None, "a "),
            Parent("strong", None, (Text("text", None, "b"),)),
            Literal("inlineCode", None, "c"),
        ),
        url="u",
    )
    assert inner_text(node) == "a b"


def test_missing_position_is_fatal() -> None:
    tree = _root(_paragraph(Text("text", None, "orphan")))
    with pytest.raises(MissingPositionError) as e:
        list(markdown_words(tree))
    assert "orphan" in str(e.value)


def test_blocks_only_ignores_text_outside_allowed_blocks() -> None:
    src = "front\n\nbody"
    tree = _root(
        Parent("yaml", None, (_text(src, 0, "front"),)),
        _paragraph(_text(src, 7, "body")),
    )
    assert [w.text for w in markdown_words(tree)] == ["body"]
    assert [w.text for w in markdown_words(tree, blocks_only=False)] == ["front", "body"]


def test_words_do_not_run_across_blocks() -> None:
    src = "|ab|cd|"
    tree = _root(
        Parent(
            "table",
            None,
            (
                Parent(
                    "tableRow",
                    None,
                    (
                        Parent("tableCell", None, (_text(src, 1, "ab"),)),
                        Parent("tableCell", None, (_text(src, 4, "cd"),)),
                    ),
                ),
            ),
        )
    )
    assert [len(run) for run in text_runs(tree)] == [1, 1]
    assert [w.text for w in markdown_words(tree)] == ["ab", "cd"]


def test_words_run_across_emphasis() -> None:
    src = "**Ama**zing"
    tree = _root(
        _paragraph(
            Parent("strong", None, (_text(src, 2, "Ama"),)),
            _text(src, 7, "zing"),
        )
    )
    (word,) = markdown_words(tree)
    assert word.text == "Amazing"
    assert word.position.start == Point(1, 3, 2)
    assert word.position.end == Point(1, 12, 11)


def test_whitespace_stops_a_word() -> None:
    src = "> quote"
    tree = _root(Parent("blockquote", None, (_paragraph(_text(src, 0, "> "), _text(src, 2, "quote")),)))
    assert [w.text for w in markdown_words(tree)] == ["quote"]


def test_merged_words_emits_trailing_word() -> None:
    assert [w.text for w in merged_words(positioned_tokens("one two"))] == ["one", "two"]
    assert list(merged_words([])) == []


@given(
    st.text(alphabet=list("abcdefghijklmnopqrstuvwxyzäöüéßABCXYZ"), min_size=2, max_size=24),
    st.data(),
)
def test_word_split_across_leaves_merges_back(word: str, data: st.DataObject) -> None:
    cut = data.draw(st.integers(min_value=1, max_value=len(word) - 1))
    head, tail = word[:cut], word[cut:]
    halves = [
        Text("text", _span(START, head), head),
        Text("text", _span(add_relative(START, end_of(head)), tail), tail),
    ]
    assert list(merged_words(leaf_tokens(halves))) == list(split_words(word))


def _span(start: Point, value: str) -> Position:
    return Position(start=start, end=add_relative(start, end_of(value)))


def test_text_nodes_agree_with_unrestricted_runs() -> None:
    src = "see https://x.io `b` docs"
    tree = _root(
        _paragraph(
            _text(src, 0, "see "),
            Link("link", None, (_text(src, 4, "https://x.io"),), url="https://x.io"),
            Parent("inlineCode", None, (_text(src, 17, "b"),)),
            _text(src, 20, " docs"),
        ),
        Parent("yaml", None, (_text(src, 21, "docs"),)),
    )
    flattened = [leaf for run in text_runs(tree, blocks_only=False) for leaf in run]
    assert list(text_nodes(tree)) == flattened
    assert [t.value for t in flattened] == ["see ", " docs", "docs"]
