"""
SectorScan Console Interface
=============================

Rich console facade shared by the CLI and the report printer. All
output goes to stdout with a small severity-coloured palette. Dynamic
text (paths, OS error strings) is escaped before it reaches Rich markup.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_SCAN_THEME = Theme(
    {
        "scan.warning": "bold yellow",
        "scan.error": "bold red",
        "scan.critical": "bold white on red",
        "scan.random": "bold bright_red",
    }
)


class ScanConsole:
    """Unified console for scanner output.

    Usage::

        con = ScanConsole()
        con.print("Sector 0: entropy = 0.000000")
        con.error("open failed on x.bin: No such file or directory")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output.
            record: Enable Rich recording so output can be exported.
        """
        self._console = Console(
            theme=_SCAN_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
            soft_wrap=True,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def warning(self, message: str) -> None:
        self._console.print(f"[scan.warning]WARNING:[/scan.warning] {escape(message)}")

    def error(self, message: str) -> None:
        self._console.print(f"[scan.error]ERROR:[/scan.error] {escape(message)}")

    def critical(self, message: str) -> None:
        """Print a high-visibility message for internal failures."""
        self._console.print(
            f"[scan.critical]CRITICAL: {escape(message)}[/scan.critical]"
        )

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def export_text(self) -> str:
        """Export recorded output as plain text (requires ``record=True``)."""
        return self._console.export_text()
