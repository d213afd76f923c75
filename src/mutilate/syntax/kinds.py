"""Closed enumeration of syntax node kinds produced by the markup parser."""

from __future__ import annotations

from enum import Enum


class SyntaxKind(Enum):
    """Kinds of nodes in a parsed document.

    Leaf kinds carry literal text; composite kinds only carry children.
    """

    # Composites
    MARKUP = "markup"
    EMBED = "embed"
    CONTENT_BLOCK = "content_block"
    CODE_BLOCK = "code_block"
    GROUP = "group"

    # Prose-bearing leaves
    TEXT = "text"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    STR = "str"
    RAW = "raw"
    LINK = "link"

    # Structural references
    MODULE_IMPORT = "module_import"
    MODULE_INCLUDE = "module_include"

    # Verbatim leaves
    SPACE = "space"
    ESCAPE = "escape"
    LINEBREAK = "linebreak"
    LABEL = "label"
    REF = "ref"
    EQUATION = "equation"
    HASH = "hash"
    CODE = "code"
    DELIM = "delim"
    ERROR = "error"


COMPOSITE_KINDS: frozenset[SyntaxKind] = frozenset(
    {
        SyntaxKind.MARKUP,
        SyntaxKind.EMBED,
        SyntaxKind.CONTENT_BLOCK,
        SyntaxKind.CODE_BLOCK,
        SyntaxKind.GROUP,
    }
)


__all__ = ["SyntaxKind", "COMPOSITE_KINDS"]
