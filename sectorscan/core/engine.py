"""
Sector Scan Engine
===================

Central orchestrator of the scanner. :class:`SectorScanEngine` opens the
input, walks it block by block, builds a fresh :class:`ByteHistogram`
for each block, classifies the resulting entropy, and hands every
:class:`SectorReport` to a caller-supplied callback.

Scan states::

    Opening -> Scanning (once per block) -> Closing -> Done
            \\-> Fatal (open/read failure, rejected partial block,
                       histogram invariant violation)

Failures are raised as exceptions; the engine never terminates the
process.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Callable, Optional

from sectorscan.analyzers.blocks import BlockReader
from sectorscan.analyzers.classifier import RandomnessClassifier
from sectorscan.analyzers.histogram import ByteHistogram
from sectorscan.core.models import PartialBlockPolicy, ScanSummary, SectorReport
from sectorscan.exceptions import OpenError, ReadError
from sectorscan.shared.config import SectorScanConfig
from sectorscan.shared.logger import ScanLogger

ReportCallback = Callable[[SectorReport], None]


def _discard(report: SectorReport) -> None:
    pass


class SectorScanEngine:
    """Block-wise entropy scanner.

    Usage::

        engine = SectorScanEngine()
        summary = engine.scan_file(Path("disk.img"), on_report=print)

    Attributes:
        config: Scanner configuration.
        logger: Logger for the engine.
        block_size: Sector size in bytes.
        policy: Handling of a short final sector.
        classifier: Threshold policy for the random flag.
    """

    def __init__(
        self,
        config: Optional[SectorScanConfig] = None,
        logger: Optional[ScanLogger] = None,
    ) -> None:
        self.config = config or SectorScanConfig()
        self.logger = logger or ScanLogger("engine", console_output=False)

        scanner = self.config.scanner
        self.block_size: int = scanner.block_size
        self.policy = PartialBlockPolicy(scanner.partial_blocks)
        self.classifier = RandomnessClassifier(scanner.random_ratio)

    # ------------------------------------------------------------------ #
    #  Single block
    # ------------------------------------------------------------------ #

    def analyze_block(
        self, sector: int, offset: int, block: bytes | bytearray | memoryview
    ) -> SectorReport:
        """Compute and classify the entropy of one block.

        Args:
            sector: 0-based sector index.
            offset: Byte offset of the block in the input.
            block: The block's bytes.

        Returns:
            The sector's report.

        Raises:
            HistogramInvariantError: If the histogram is inconsistent.
        """
        hist = ByteHistogram.from_block(block, logger=self.logger)
        size = hist.total
        entropy = hist.result()
        return SectorReport(
            sector=sector,
            offset=offset,
            size=size,
            entropy=entropy,
            looks_random=self.classifier.is_random(entropy, size),
        )

    # ------------------------------------------------------------------ #
    #  Streams and files
    # ------------------------------------------------------------------ #

    def scan_stream(
        self,
        stream: BinaryIO,
        target: str,
        on_report: ReportCallback = _discard,
    ) -> ScanSummary:
        """Scan an already-open binary stream.

        Args:
            stream: Object supporting ``readinto``.
            target: Label used in reports, logs, and errors.
            on_report: Called once per sector, in scan order.

        Returns:
            Summary of the completed scan.

        Raises:
            ReadError: If a read fails, or a short final block is met
                under the strict policy.
            HistogramInvariantError: If a histogram is inconsistent.
        """
        summary = ScanSummary(target=target, block_size=self.block_size)
        reader = BlockReader(stream, self.block_size)
        sector = 0

        with self.logger.operation("scan"):
            while True:
                offset = reader.offset
                try:
                    block = reader.read_block()
                except OSError as exc:
                    self.logger.error(
                        "Read failed at offset %d of %s", offset, target,
                        sector=sector,
                    )
                    raise ReadError.from_os_error(target, exc) from exc

                if not block:
                    break

                short = len(block) < self.block_size
                if short and self.policy is PartialBlockPolicy.STRICT:
                    self.logger.error(
                        "Short final block rejected (%d of %d bytes)",
                        len(block), self.block_size, sector=sector,
                    )
                    raise ReadError(
                        target,
                        f"short read of {len(block)} bytes at sector {sector} "
                        f"(expected {self.block_size})",
                    )

                report = self.analyze_block(sector, offset, block)
                summary.record(report)
                on_report(report)
                sector += 1

                if short:
                    break

        summary.finalize()
        self.logger.info(
            "Scanned %s: %d sectors, %d look random",
            target, summary.sectors, summary.random_sectors,
            bytes_scanned=summary.bytes_scanned,
            partial_tail=summary.partial_tail,
        )
        return summary

    def scan_file(
        self, file_path: Path, on_report: ReportCallback = _discard
    ) -> ScanSummary:
        """Open *file_path* for binary reading and scan it.

        Raises:
            OpenError: If the file cannot be opened.
            ReadError: See :meth:`scan_stream`.
            HistogramInvariantError: See :meth:`scan_stream`.
        """
        target = str(file_path)
        self.logger.info(
            "Starting entropy scan: %s", target,
            block_size=self.block_size, policy=self.policy.value,
        )

        try:
            fh = open(file_path, "rb")
        except OSError as exc:
            self.logger.error("Open failed: %s", target)
            raise OpenError.from_os_error(target, exc) from exc

        with fh, self.logger.timed(f"scan of {target}"):
            return self.scan_stream(fh, target, on_report)
