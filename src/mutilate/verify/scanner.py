"""Post-mutilation syntax check.

Replacement words come from a user-supplied wordlist and may contain markup
characters.  A word such as ``$`` or ``[`` would leave an unclosed equation or
content block behind, producing a document that no longer compiles.  The
scanner re-parses the mutilated output and reports any diagnostics so the
caller can refuse to write a broken document.
"""

from __future__ import annotations

from dataclasses import dataclass

from mutilate.syntax import Diagnostic, parse

__all__ = ["VerificationReport", "scan_output"]


@dataclass(frozen=True, slots=True)
class VerificationReport:
    """Structured result of a verification scan."""

    diagnostics: tuple[Diagnostic, ...]

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    @property
    def problem_count(self) -> int:
        return len(self.diagnostics)


def scan_output(output: str) -> VerificationReport:
    """Re-parse ``output`` and collect its diagnostics."""

    _, diagnostics = parse(output)
    return VerificationReport(tuple(diagnostics))
