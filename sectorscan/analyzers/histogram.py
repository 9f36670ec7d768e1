"""
Byte Histogram Accumulator
===========================

Counts byte values (0-255) and turns the counts into the order-0
Shannon entropy of everything fed since the last reset.

The result is *total* entropy in bits:

    H_total = N * ( -sum_{c_i > 0} p_i * ln(p_i) ) / ln(2),   p_i = c_i / N

so a block's maximum is ``8 * N`` bits, reached when all 256 values
occur equally often.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
      Bell System Technical Journal, 27(3), 379-423.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from sectorscan.exceptions import HistogramInvariantError
from sectorscan.shared.logger import ScanLogger

_LN2: float = math.log(2.0)


class ByteHistogram:
    """Byte-value frequency histogram with a running byte total.

    Usage::

        hist = ByteHistogram.from_block(block)
        bits = hist.result()

    Invariant: ``counts.sum() == total`` after every public call.
    """

    def __init__(self, logger: Optional[ScanLogger] = None) -> None:
        self._counts: NDArray[np.uint64] = np.zeros(256, dtype=np.uint64)
        self._total: int = 0
        self._logger = logger

    @classmethod
    def from_block(
        cls, data: bytes | bytearray | memoryview, logger: Optional[ScanLogger] = None
    ) -> ByteHistogram:
        """Return a fresh histogram already fed with *data*."""
        hist = cls(logger=logger)
        hist.add_data(data)
        return hist

    def reset(self) -> None:
        """Zero all 256 counts and the running total."""
        self._counts.fill(0)
        self._total = 0

    def add_data(self, data: bytes | bytearray | memoryview) -> None:
        """Count every byte of *data*; repeated calls accumulate."""
        byte_arr = np.frombuffer(data, dtype=np.uint8)
        if byte_arr.size == 0:
            return
        self._counts += np.bincount(byte_arr, minlength=256).astype(np.uint64)
        self._total += int(byte_arr.size)

    def result(self) -> float:
        """Total Shannon entropy of the counted bytes, in bits.

        Returns:
            ``0.0`` for an empty histogram, otherwise a value in
            ``[0, 8 * total]``.

        Raises:
            HistogramInvariantError: If the counts do not sum to the total.
        """
        counted = int(self._counts.sum())
        if self._logger is not None:
            self._logger.debug("%d / %d", counted, self._total)
        if counted != self._total:
            raise HistogramInvariantError(counted, self._total)

        if self._total == 0:
            return 0.0

        nonzero = self._counts[self._counts > 0].astype(np.float64)
        p = nonzero / float(self._total)
        plogp = -float(np.sum(p * np.log(p)))
        bits = plogp / _LN2
        # A single symbol yields -0.0 or a rounding residue below zero
        if bits <= 0.0:
            return 0.0
        return self._total * bits

    @property
    def total(self) -> int:
        """Number of bytes counted since the last reset."""
        return self._total

    @property
    def counts(self) -> NDArray[np.uint64]:
        """Copy of the 256 per-value counts."""
        return self._counts.copy()

    @property
    def unique_bytes(self) -> int:
        """Number of distinct byte values seen."""
        return int(np.count_nonzero(self._counts))
