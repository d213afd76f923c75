"""Syntax tree primitives.

A :class:`SyntaxNode` is either a leaf holding literal ``text`` or a composite
holding ``children`` in document order.  Concatenating the text of all leaves
of a tree reproduces the parsed source exactly.  Diagnostics use the half-open
offset convention ``[start, end)``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .kinds import COMPOSITE_KINDS, SyntaxKind


@dataclass(slots=True, frozen=True)
class Diagnostic:
    """A syntax error found while parsing."""

    start: int
    end: int
    message: str

    def __str__(self) -> str:
        return f"{self.start}..{self.end}: {self.message}"


@dataclass(slots=True, frozen=True)
class SyntaxNode:
    """A node of the parsed document.

    Attributes
    ----------
    kind:
        The node kind.
    text:
        Literal source text for leaves; empty for composites.
    children:
        Child nodes for composites; empty for leaves.
    lang:
        Language tag of a fenced raw block, ``None`` elsewhere.
    """

    kind: SyntaxKind
    text: str = ""
    children: tuple["SyntaxNode", ...] = ()
    lang: str | None = None

    def __post_init__(self) -> None:
        if self.children and self.text:
            raise ValueError("a syntax node holds either text or children, not both")

    @classmethod
    def leaf(cls, kind: SyntaxKind, text: str, *, lang: str | None = None) -> "SyntaxNode":
        if kind in COMPOSITE_KINDS:
            raise ValueError(f"{kind.name} is not a leaf kind")
        return cls(kind, text, (), lang)

    @classmethod
    def inner(cls, kind: SyntaxKind, children: list["SyntaxNode"]) -> "SyntaxNode":
        return cls(kind, "", tuple(children))

    def full_text(self) -> str:
        """Return the source text covered by this node."""

        if not self.children:
            return self.text
        return "".join(leaf.text for leaf in self.leaves())

    def leaves(self) -> Iterator["SyntaxNode"]:
        """Yield all leaves below this node in document order."""

        if not self.children:
            yield self
            return
        for child in self.children:
            yield from child.leaves()


__all__ = ["Diagnostic", "SyntaxNode"]
