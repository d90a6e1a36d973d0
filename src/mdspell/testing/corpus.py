from __future__ import annotations

import random
from dataclasses import dataclass, field


# Plain words, some with internal apostrophes/hyphens or non-ASCII letters.
_VOCAB = [
    "alpha",
    "bravo",
    "charlie",
    "delta",
    "echo",
    "foxtrot",
    "golf",
    "hotel",
    "India",
    "juliet",
    "kilo",
    "lima",
    "mike",
    "November",
    "don't",
    "well-known",
    "café",
    "naïve",
    "Zürich",
]

# Words safe to cut in two with emphasis markers.
_SPLITTABLE = [w for w in _VOCAB if w.isalpha() and len(w) >= 4]


@dataclass(frozen=True, slots=True)
class CorpusDocument:
    source: str
    # Checkable words in document order: (text, start offset, end offset).
    words: tuple[tuple[str, int, int], ...]


@dataclass(slots=True)
class _Writer:
    parts: list[str] = field(default_factory=list)
    size: int = 0
    words: list[tuple[str, int, int]] = field(default_factory=list)

    def raw(self, s: str) -> None:
        self.parts.append(s)
        self.size += len(s)

    def word(self, w: str, *, before: str = "", after: str = "") -> None:
        self.raw(before)
        start = self.size
        self.raw(w)
        self.words.append((w, start, self.size))
        self.raw(after)

    def split_word(self, w: str, cut: int, marker: str) -> None:
        # "**Ama**zing": one word spanning from "A" to "g".
        self.raw(marker)
        start = self.size
        self.raw(w[:cut] + marker + w[cut:])
        self.words.append((w, start, self.size))

    def text(self) -> str:
        return "".join(self.parts)


def _piece(r: random.Random, out: _Writer) -> None:
    roll = r.random()
    w = r.choice(_VOCAB)
    if roll < 0.45:
        out.word(w)
    elif roll < 0.55:
        out.word(w, before="*", after="*")
    elif roll < 0.65:
        s = r.choice(_SPLITTABLE)
        out.split_word(s, r.randint(1, len(s) - 1), r.choice(["*", "**"]))
    elif roll < 0.70:
        out.raw(f"`{w} {r.choice(_VOCAB)}`")
    elif roll < 0.75:
        out.raw(f"${w}$")
    elif roll < 0.80:
        out.word(w, before="[", after=f"](https://example.com/{r.choice(_VOCAB)})")
    elif roll < 0.84:
        out.word(w, before="[", after=f'](https://example.com "{r.choice(_VOCAB)} {r.choice(_VOCAB)}")')
    elif roll < 0.88:
        out.raw(f"<https://example.com/{w}>")
    elif roll < 0.92:
        out.raw(f"![{w}](img/{r.choice(_VOCAB)}.png)")
    elif roll < 0.96:
        out.word(w, after="\\!")
    else:
        out.word(w, after=",")


def _line(r: random.Random, out: _Writer) -> None:
    # Lines always open with a plain word so no piece is read as block syntax.
    out.word(r.choice(_VOCAB))
    for _ in range(r.randint(0, 7)):
        out.raw(" ")
        _piece(r, out)


def _block(r: random.Random, out: _Writer) -> None:
    roll = r.random()
    if roll < 0.45:
        _line(r, out)
        if r.random() < 0.4:
            out.raw("\n")
            _line(r, out)
    elif roll < 0.60:
        out.raw("#" * r.randint(1, 3) + " ")
        _line(r, out)
    elif roll < 0.72:
        out.raw("> ")
        _line(r, out)
    elif roll < 0.84:
        out.raw("- ")
        _line(r, out)
    elif roll < 0.92:
        # code is never checked
        out.raw("```\n" + " ".join(r.choice(_VOCAB) for _ in range(4)) + "\n```")
    else:
        out.raw("$$\n" + " ".join(r.choice(_VOCAB) for _ in range(3)) + "\n$$")


def generate_markdown_documents(*, seed: int, count: int) -> list[CorpusDocument]:
    """Deterministic Markdown documents with the words a checker must extract."""
    r = random.Random(seed)
    docs: list[CorpusDocument] = []
    for _ in range(count):
        out = _Writer()
        for i in range(r.randint(1, 6)):
            if i:
                out.raw("\n\n")
            _block(r, out)
        out.raw("\n")
        docs.append(CorpusDocument(source=out.text(), words=tuple(out.words)))
    return docs
