"""Typed exceptions for configuration, document syntax and I/O failures."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mutilate.syntax.node import Diagnostic


class ConfigurationError(ValueError):
    """Base class for fatal configuration errors."""


class UnsupportedLanguageError(ConfigurationError):
    """Raised when a language code is malformed or has no hyphenation dictionary."""


class DocumentSyntaxError(ValueError):
    """Raised when a document cannot be parsed without diagnostics."""

    def __init__(self, diagnostics: Sequence["Diagnostic"]) -> None:
        self.diagnostics: tuple["Diagnostic", ...] = tuple(diagnostics)
        count = len(self.diagnostics)
        super().__init__(f"document has {count} syntax error{'s' if count != 1 else ''}")


class IOFormatError(ValueError):
    """Raised when input bytes cannot be decoded as text."""
