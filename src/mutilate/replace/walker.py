"""Document tree walker.

The walker visits the syntax tree in pre-order and decides for each node how
much of its text may be mutilated.  Prose (text, comments, links, raw block
bodies and, in aggressive mode, string literals) goes through the tokenizer;
markers, fences and everything structural is echoed unchanged.  Module
``import``/``include`` directives are always echoed so the document keeps
resolving the same files and names.

Output is written to any text sink in document order.
"""

from __future__ import annotations

import io
from typing import TextIO

from mutilate.pseudo.context import MutationContext
from mutilate.syntax import SyntaxKind, SyntaxNode, parse
from mutilate.utils.errors import DocumentSyntaxError
from mutilate.utils.logging import get_logger

from .tokenizer import mutilate_text

log = get_logger(__name__)


def mutilate(node: SyntaxNode, context: MutationContext, output: TextIO) -> None:
    """Write ``node`` to ``output`` with its prose mutilated."""

    kind = node.kind
    text = node.text
    if kind is SyntaxKind.TEXT:
        mutilate_text(text, context, output)
    elif kind is SyntaxKind.LINE_COMMENT:
        output.write(text[:2])
        mutilate_text(text[2:], context, output)
    elif kind is SyntaxKind.BLOCK_COMMENT:
        output.write(text[:2])
        mutilate_text(text[2:-2], context, output)
        output.write(text[-2:])
    elif kind is SyntaxKind.STR and context.aggressive:
        output.write(text[0])
        mutilate_text(text[1:-1], context, output)
        output.write(text[-1])
    elif kind is SyntaxKind.RAW:
        _mutilate_raw(node, context, output)
    elif kind is SyntaxKind.LINK:
        mutilate_text(text, context, output)
    elif kind in (SyntaxKind.MODULE_IMPORT, SyntaxKind.MODULE_INCLUDE):
        write_node(node, output)
    elif node.children:
        for child in node.children:
            mutilate(child, context, output)
    else:
        write_node(node, output)


def _mutilate_raw(node: SyntaxNode, context: MutationContext, output: TextIO) -> None:
    text = node.text
    body = text.lstrip("`")
    fence = text[: len(text) - len(body)]
    if not body:
        # Empty raw: the whole node is backticks.
        output.write(text)
        return

    output.write(fence)
    body = body[: len(body) - len(fence)]
    if node.lang:
        output.write(node.lang)
        body = body[len(node.lang) :]
    mutilate_text(body, context, output)
    output.write(fence)


def write_node(node: SyntaxNode, output: TextIO) -> None:
    """Echo ``node`` to ``output`` unchanged."""

    if node.children:
        for child in node.children:
            write_node(child, output)
    else:
        output.write(node.text)


def mutilate_tree(tree: SyntaxNode, context: MutationContext) -> str:
    """Return the mutilated text of ``tree``."""

    buffer = io.StringIO()
    mutilate(tree, context, buffer)
    return buffer.getvalue()


def mutilate_document(text: str, context: MutationContext) -> str:
    """Parse ``text`` and return it with all prose mutilated.

    Raises
    ------
    DocumentSyntaxError
        If the parser reports diagnostics.  Nothing is mutilated in that
        case.
    """

    tree, diagnostics = parse(text)
    if diagnostics:
        raise DocumentSyntaxError(diagnostics)
    log.debug("mutilating document of %d characters", len(text))
    return mutilate_tree(tree, context)


__all__ = ["mutilate", "mutilate_document", "mutilate_tree", "write_node"]
