"""
SectorScan Analyzers
=====================

Building blocks of the scan: the byte histogram, the fixed-size block
reader, and the randomness threshold policy.
"""

from sectorscan.analyzers.blocks import BlockReader
from sectorscan.analyzers.classifier import RandomnessClassifier
from sectorscan.analyzers.histogram import ByteHistogram

__all__ = [
    "BlockReader",
    "ByteHistogram",
    "RandomnessClassifier",
]
