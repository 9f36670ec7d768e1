"""
SectorScan -- Sector Entropy Scanner
=====================================

Reads a file in fixed-size sectors, computes the order-0 Shannon entropy
of each sector in total bits, and flags sectors whose entropy is close
to the maximum as likely compressed or encrypted.

Modules:
    - sectorscan.analyzers: Byte histogram, block reader, classifier
    - sectorscan.core: Scan engine and data models
    - sectorscan.exceptions: Error taxonomy
    - sectorscan.output: Per-sector report lines
    - sectorscan.shared: Configuration, logging, console
    - sectorscan.cli: Click-based command-line interface

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

__version__ = "1.0.0"
