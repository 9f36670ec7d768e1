"""
SectorScan Output Module
=========================

Plain per-sector report lines.
"""

from sectorscan.output.console import SectorConsoleOutput, format_sector

__all__ = ["SectorConsoleOutput", "format_sector"]
