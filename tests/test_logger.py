"""Tests for sectorscan.shared.logger."""

from __future__ import annotations

import json

import pytest

from sectorscan.shared.logger import ScanLogger


class TestScanLogger:

    def test_json_file_records(self, tmp_path) -> None:
        log_path = tmp_path / "logs" / "scan.log"
        log = ScanLogger("test-json", log_level="DEBUG", log_file=log_path,
                         json_logs=True, console_output=False)
        with log.operation("scan"):
            log.info("Scanned %s", "a.bin", sectors=3)
        log.warning("outside")

        lines = log_path.read_text(encoding="utf-8").splitlines()
        first, second = (json.loads(line) for line in lines)
        assert first["message"] == "Scanned a.bin"
        assert first["level"] == "INFO"
        assert first["logger"] == "sectorscan.test-json"
        assert first["tool_name"] == "test-json"
        assert first["operation"] == "scan"
        assert first["extra"] == {"sectors": 3}
        assert "operation" not in second

    def test_level_filters_file_records(self, tmp_path) -> None:
        log_path = tmp_path / "scan.log"
        log = ScanLogger("test-level", log_level="WARNING", log_file=log_path,
                         console_output=False)
        log.debug("hidden")
        log.error("shown")
        text = log_path.read_text(encoding="utf-8")
        assert "hidden" not in text
        assert "shown" in text

    def test_reinstantiation_replaces_handlers(self) -> None:
        ScanLogger("test-dup", console_output=True)
        log = ScanLogger("test-dup", console_output=True)
        assert len(log.underlying.handlers) == 1

    def test_timed_reports_elapsed(self) -> None:
        log = ScanLogger("test-timed", console_output=False)
        with log.timed("work") as timer:
            pass
        assert timer.elapsed >= 0.0

    def test_timed_reports_failure(self, tmp_path) -> None:
        log_path = tmp_path / "timed.log"
        log = ScanLogger("test-timed-fail", log_level="INFO", log_file=log_path,
                         console_output=False)
        with pytest.raises(RuntimeError):
            with log.timed("work"):
                raise RuntimeError("boom")

        text = log_path.read_text(encoding="utf-8")
        assert "Failed: work" in text
        assert "RuntimeError" in text
        assert "Completed" not in text

    def test_timed_reports_completion(self, tmp_path) -> None:
        log_path = tmp_path / "timed.log"
        log = ScanLogger("test-timed-ok", log_level="INFO", log_file=log_path,
                         console_output=False)
        with log.timed("work"):
            pass
        text = log_path.read_text(encoding="utf-8")
        assert "Completed: work" in text
        assert "Failed" not in text
