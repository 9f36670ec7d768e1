"""
SectorScan Core Module
=======================

Scan engine and data models, re-exporting the error types it raises.
"""

from sectorscan.core.engine import SectorScanEngine
from sectorscan.exceptions import (
    HistogramInvariantError,
    OpenError,
    ReadError,
    SectorScanError,
)
from sectorscan.core.models import PartialBlockPolicy, ScanSummary, SectorReport

__all__ = [
    "HistogramInvariantError",
    "OpenError",
    "PartialBlockPolicy",
    "ReadError",
    "ScanSummary",
    "SectorReport",
    "SectorScanEngine",
    "SectorScanError",
]
