"""Tests for sectorscan.core.engine -- the block-wise scan."""

from __future__ import annotations

import io
import math
import os

import pytest

from sectorscan.core.engine import SectorScanEngine
from sectorscan.core.models import PartialBlockPolicy, SectorReport
from sectorscan.exceptions import OpenError, ReadError, SectorScanError
from sectorscan.shared.config import ScannerConfig, SectorScanConfig
from tests.helpers import FlakyStream


class TestFullBlocks:

    def test_random_sector_looks_random(self, engine, make_file, collected) -> None:
        engine.scan_file(make_file(os.urandom(2048)), on_report=collected.append)
        assert len(collected) == 1
        assert collected[0].looks_random is True
        assert collected[0].entropy > 0.98 * 8 * 2048

    def test_zero_sector_has_no_entropy(self, engine, make_file, collected) -> None:
        engine.scan_file(make_file(bytes(2048)), on_report=collected.append)
        assert collected == [
            SectorReport(sector=0, offset=0, size=2048, entropy=0.0, looks_random=False)
        ]

    def test_sectors_are_reported_in_order(self, engine, collected) -> None:
        data = bytes(2048) + os.urandom(2048) + b"A" * 2048
        summary = engine.scan_stream(io.BytesIO(data), "mem", collected.append)
        assert [r.sector for r in collected] == [0, 1, 2]
        assert [r.offset for r in collected] == [0, 2048, 4096]
        assert [r.looks_random for r in collected] == [False, True, False]
        assert summary.sectors == 3
        assert summary.random_sectors == 1
        assert summary.bytes_scanned == 6144
        assert summary.partial_tail is False

    def test_uniform_sector_scores_maximum(self, engine) -> None:
        report = engine.analyze_block(0, 0, bytes(range(256)) * 8)
        assert report.entropy == pytest.approx(16384.0)
        assert report.bits_per_byte == pytest.approx(8.0)
        assert report.looks_random is True

    def test_empty_file_completes_without_reports(self, engine, make_file, collected) -> None:
        summary = engine.scan_file(make_file(b""), on_report=collected.append)
        assert collected == []
        assert summary.sectors == 0
        assert summary.end_time is not None

    def test_custom_block_size(self, make_file, collected) -> None:
        config = SectorScanConfig(scanner=ScannerConfig(block_size=256))
        engine = SectorScanEngine(config)
        engine.scan_file(make_file(bytes(range(256)) * 3), on_report=collected.append)
        assert len(collected) == 3
        assert all(r.entropy == pytest.approx(2048.0) for r in collected)


class TestPartialBlockProcess:

    def test_short_file_is_analysed(self, engine, make_file, collected) -> None:
        summary = engine.scan_file(make_file(bytes(range(100))), on_report=collected.append)
        (report,) = collected
        assert report.size == 100
        assert report.entropy == pytest.approx(100 * math.log2(100))
        assert report.looks_random is False
        assert summary.partial_tail is True

    def test_tail_after_full_blocks(self, engine, collected) -> None:
        data = os.urandom(2048) + bytes(1000)
        engine.scan_stream(io.BytesIO(data), "mem", collected.append)
        assert [r.size for r in collected] == [2048, 1000]
        assert collected[1].offset == 2048
        assert collected[1].entropy == 0.0

    def test_random_tail_uses_its_own_threshold(self, engine) -> None:
        report = engine.analyze_block(0, 0, bytes(range(256)))
        assert report.entropy == pytest.approx(2048.0)
        assert report.looks_random is True


class TestPartialBlockStrict:

    def test_policy_is_configured(self, strict_engine) -> None:
        assert strict_engine.policy is PartialBlockPolicy.STRICT

    def test_short_file_is_a_read_failure(self, strict_engine, make_file, collected) -> None:
        with pytest.raises(ReadError) as excinfo:
            strict_engine.scan_file(make_file(bytes(100)), on_report=collected.append)
        assert collected == []
        assert excinfo.value.operation == "read"
        assert "read failed" in str(excinfo.value)
        assert "short read of 100 bytes" in str(excinfo.value)

    def test_full_sectors_before_tail_are_reported(self, strict_engine, collected) -> None:
        with pytest.raises(ReadError):
            strict_engine.scan_stream(io.BytesIO(bytes(2048 + 10)), "mem", collected.append)
        assert [r.sector for r in collected] == [0]

    def test_exact_multiple_completes(self, strict_engine, make_file, collected) -> None:
        summary = strict_engine.scan_file(make_file(bytes(4096)), on_report=collected.append)
        assert summary.sectors == 2

    def test_empty_file_completes(self, strict_engine, make_file) -> None:
        assert strict_engine.scan_file(make_file(b"")).sectors == 0


class TestFailures:

    def test_missing_file_is_open_error(self, engine, tmp_path) -> None:
        with pytest.raises(OpenError) as excinfo:
            engine.scan_file(tmp_path / "missing.bin")
        assert excinfo.value.operation == "open"
        assert excinfo.value.reason == "No such file or directory"
        assert str(excinfo.value).startswith("open failed on ")

    def test_directory_is_open_error(self, engine, tmp_path) -> None:
        with pytest.raises(OpenError):
            engine.scan_file(tmp_path)

    def test_read_error_is_fatal(self, engine, collected) -> None:
        stream = FlakyStream(os.urandom(4096), fail_after=1)
        with pytest.raises(ReadError) as excinfo:
            engine.scan_stream(stream, "flaky", collected.append)
        assert isinstance(excinfo.value, SectorScanError)
        assert excinfo.value.reason == "Input/output error"
        assert len(collected) == 1
