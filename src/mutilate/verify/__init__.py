"""Post-mutilation checks."""

from .scanner import VerificationReport, scan_output

__all__ = ["VerificationReport", "scan_output"]
