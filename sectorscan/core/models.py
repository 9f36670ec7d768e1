"""
Scanner Data Models
====================

Pydantic models for per-sector entropy reports and the summary of a
whole scan. Entropy values are *total* bits for the sector (bits per
byte multiplied by the sector's byte count), so a full 2048-byte sector
ranges over [0, 16384].

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
      Bell System Technical Journal, 27(3), 379-423.
"""

from __future__ import annotations

import datetime as _dt
import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PartialBlockPolicy(str, enum.Enum):
    """What to do with a final sector shorter than the block size."""

    PROCESS = "process"  # analyse it on its own byte count
    STRICT = "strict"    # reject it as a failed read


class SectorReport(BaseModel):
    """Entropy measurement for one sector.

    Attributes:
        sector: 0-based sector index in scan order.
        offset: Byte offset of the sector within the input.
        size: Number of bytes in the sector.
        entropy: Total Shannon entropy of the sector in bits.
        looks_random: Whether the entropy exceeded the random threshold.
    """

    model_config = ConfigDict(frozen=True)

    sector: int = Field(..., ge=0)
    offset: int = Field(..., ge=0)
    size: int = Field(..., ge=0)
    entropy: float = Field(..., ge=0.0)
    looks_random: bool = False

    @property
    def max_bits(self) -> int:
        """Largest possible total entropy for a sector of this size."""
        return 8 * self.size

    @property
    def bits_per_byte(self) -> float:
        if self.size == 0:
            return 0.0
        return self.entropy / self.size


class ScanSummary(BaseModel):
    """Aggregate outcome of scanning one input.

    Attributes:
        target: File path or stream label.
        block_size: Configured sector size in bytes.
        sectors: Number of sectors reported.
        random_sectors: Number of sectors flagged as random.
        bytes_scanned: Total bytes analysed.
        partial_tail: Whether the last reported sector was short.
        start_time: UTC timestamp when the scan started.
        end_time: UTC timestamp when the scan finished.
    """

    model_config = ConfigDict(validate_assignment=True)

    target: str = Field(..., min_length=1)
    block_size: int = Field(..., gt=0)
    sectors: int = 0
    random_sectors: int = 0
    bytes_scanned: int = 0
    partial_tail: bool = False
    start_time: _dt.datetime = Field(
        default_factory=lambda: _dt.datetime.now(_dt.timezone.utc)
    )
    end_time: Optional[_dt.datetime] = None

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed scan time, or ``None`` while the scan is running."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def record(self, report: SectorReport) -> None:
        """Fold one sector report into the running totals."""
        self.sectors += 1
        self.bytes_scanned += report.size
        if report.looks_random:
            self.random_sectors += 1
        self.partial_tail = report.size < self.block_size

    def finalize(self) -> ScanSummary:
        """Stamp *end_time* and return ``self`` for chaining."""
        self.end_time = _dt.datetime.now(_dt.timezone.utc)
        return self
