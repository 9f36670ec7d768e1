"""
Randomness Classifier
======================

Decides whether a sector "looks random". A sector of ``n`` bytes can
carry at most ``8 * n`` bits of order-0 entropy; it is flagged when its
total entropy is strictly greater than ``random_ratio`` of that maximum.
With the default ratio of 0.98 a full 2048-byte sector needs more than
16056.32 bits.

References:
    - Lyda, R., & Hamrock, J. (2007). Using Entropy Analysis to Find
      Encrypted and Packed Malware. IEEE Security & Privacy, 5(2).
"""

from __future__ import annotations

DEFAULT_RANDOM_RATIO: float = 0.98


class RandomnessClassifier:
    """Threshold policy for the "looks random" flag.

    Attributes:
        random_ratio: Fraction of the maximum entropy that must be exceeded.
    """

    def __init__(self, random_ratio: float = DEFAULT_RANDOM_RATIO) -> None:
        if not 0.0 < random_ratio <= 1.0:
            raise ValueError(f"random_ratio must be in (0, 1], got {random_ratio}")
        self.random_ratio = random_ratio

    def threshold_bits(self, size: int) -> float:
        """Entropy a sector of *size* bytes must exceed to be flagged."""
        return self.random_ratio * (size * 8)

    def is_random(self, entropy: float, size: int) -> bool:
        """Return ``True`` when *entropy* is above the threshold for *size*.

        An empty sector is never random.
        """
        if size <= 0:
            return False
        return entropy > self.threshold_bits(size)
