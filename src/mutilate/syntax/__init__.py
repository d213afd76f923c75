"""Markup parsing: node kinds, the syntax tree and the parser."""

from .kinds import COMPOSITE_KINDS, SyntaxKind
from .node import Diagnostic, SyntaxNode
from .parser import parse

__all__ = ["COMPOSITE_KINDS", "Diagnostic", "SyntaxKind", "SyntaxNode", "parse"]
