"""
SectorScan CLI
===============

Click-based command-line interface for the sector entropy scanner.

Usage::

    entropy /path/to/file
    entropy --config scan.toml /path/to/file
    python -m sectorscan /path/to/file

Exit status is 0 on success and 1 on any failure (unparseable command
line, wrong argument count, bad configuration, open or read failure,
internal histogram error, closed output pipe). A filename starting with
``-`` must follow ``--``.

References:
    - Click documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from sectorscan.core.engine import SectorScanEngine
from sectorscan.exceptions import HistogramInvariantError, SectorScanError
from sectorscan.output.console import SectorConsoleOutput
from sectorscan.shared.config import SectorScanConfig
from sectorscan.shared.console import ScanConsole
from sectorscan.shared.logger import ScanLogger


class _EntropyCommand(click.Command):
    """Command whose parse failures print the usage text and exit 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            console = ScanConsole()
            console.error(exc.format_message())
            SectorConsoleOutput(console).display_usage()
            sys.exit(1)


def _silence_stdout() -> None:
    """Point stdout at the null device so the final flush cannot fail again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        # stdout has no file descriptor (e.g. an in-memory stream)
        pass


@click.command("entropy", cls=_EntropyCommand)
@click.argument("filenames", nargs=-1, metavar="<filename>")
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a TOML configuration file.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging on stderr.",
)
def entropy_cli(
    filenames: tuple[str, ...],
    config_path: Optional[str],
    verbose: bool,
) -> None:
    """Report the Shannon entropy of every sector (2048 bytes by default) of a file.

    Sectors whose entropy exceeds 98% of the maximum (by default) are prefixed with
    "Looks random!".
    """
    console = ScanConsole()
    display = SectorConsoleOutput(console)

    if len(filenames) != 1:
        display.display_usage()
        sys.exit(1)

    try:
        config = SectorScanConfig.load(config_path)
    except (OSError, ValueError) as exc:
        console.error(f"config failed: {exc}")
        sys.exit(1)

    settings = config.global_settings
    logger = ScanLogger(
        "entropy",
        log_level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file or None,
        json_logs=settings.log_json,
    )
    engine = SectorScanEngine(config=config, logger=logger)

    try:
        summary = engine.scan_file(Path(filenames[0]), on_report=display.display_sector)
    except KeyboardInterrupt:
        console.warning("Scan interrupted by user.")
        sys.exit(130)
    except BrokenPipeError:
        # Reader went away (e.g. `entropy big.bin | head -1`)
        _silence_stdout()
        sys.exit(1)
    except SectorScanError as exc:
        console.error(str(exc))
        sys.exit(1)
    except HistogramInvariantError as exc:
        logger.critical("Histogram invariant violated", exc_info=verbose)
        console.critical(str(exc))
        sys.exit(1)

    logger.debug(
        "Scan finished in %.3f sec", summary.duration_seconds or 0.0,
        sectors=summary.sectors,
    )


def main() -> None:
    """Console-script entry point."""
    entropy_cli()


if __name__ == "__main__":
    main()
