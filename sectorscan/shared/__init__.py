"""
SectorScan Shared Module
========================

Configuration, logging, and console plumbing used by every part of the
scanner.
"""

from sectorscan.shared.config import SectorScanConfig
from sectorscan.shared.console import ScanConsole
from sectorscan.shared.logger import ScanLogger

__all__ = ["SectorScanConfig", "ScanConsole", "ScanLogger"]
