"""
SectorScan Module Entry Point
==============================

Allows running the scanner via: python -m sectorscan <filename>
"""

from sectorscan.cli import main

if __name__ == "__main__":
    main()
