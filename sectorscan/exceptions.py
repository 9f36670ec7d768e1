"""
Scanner Error Taxonomy
=======================

User-facing failures (the file cannot be opened or read) derive from
:class:`SectorScanError` and are converted to exit codes by the CLI.
A histogram whose counts disagree with its byte total is a programming
error and raises :class:`HistogramInvariantError`, an ``AssertionError``.
"""

from __future__ import annotations


class SectorScanError(Exception):
    """Fatal, user-visible scan failure.

    Attributes:
        operation: Failing operation, e.g. ``"open"`` or ``"read"``.
        target: File (or stream label) being scanned.
        reason: Underlying OS error text or a short explanation.
    """

    def __init__(self, operation: str, target: str, reason: str) -> None:
        self.operation = operation
        self.target = target
        self.reason = reason
        super().__init__(f"{operation} failed on {target}: {reason}")

    @classmethod
    def from_os_error(cls, target: str, exc: OSError) -> SectorScanError:
        """Build the error from an :class:`OSError`, keeping its text."""
        return cls(target=target, reason=exc.strerror or str(exc))


class OpenError(SectorScanError):
    """The input file could not be opened."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__("open", target, reason)


class ReadError(SectorScanError):
    """A read failed, or a short final block was rejected."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__("read", target, reason)


class HistogramInvariantError(AssertionError):
    """Histogram counts do not sum to the number of bytes fed."""

    def __init__(self, counted: int, total: int) -> None:
        self.counted = counted
        self.total = total
        super().__init__(
            f"internal error: histogram counts sum to {counted}, expected {total}"
        )
