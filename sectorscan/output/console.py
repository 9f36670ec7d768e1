"""
Sector Report Output
=====================

Prints one plain line per sector, in scan order::

    Sector 0: entropy = 0.000000
    Looks random! Sector 1: entropy = 16204.551327

Entropy is printed with six decimals. The prefix is coloured when the
console supports it; the text is identical either way.
"""

from __future__ import annotations

from typing import Optional

from sectorscan.core.models import SectorReport
from sectorscan.shared.console import ScanConsole

USAGE_LINES: tuple[str, ...] = (
    "entropy <filename>",
    "<filename>\tfile to inspect",
)


def _sector_body(report: SectorReport) -> str:
    return f"Sector {report.sector}: entropy = {report.entropy:f}"


def format_sector(report: SectorReport) -> str:
    """Plain-text report line for *report*."""
    if report.looks_random:
        return f"Looks random! {_sector_body(report)}"
    return _sector_body(report)


class SectorConsoleOutput:
    """Writes sector reports and usage text to a :class:`ScanConsole`."""

    def __init__(self, console: Optional[ScanConsole] = None) -> None:
        self.console = console or ScanConsole()

    def display_sector(self, report: SectorReport) -> None:
        line = _sector_body(report)
        if report.looks_random:
            self.console.print(f"[scan.random]Looks random![/scan.random] {line}")
        else:
            self.console.print(line)

    def display_usage(self) -> None:
        for line in USAGE_LINES:
            self.console.print(line, markup=False)
