"""Shared fixtures for the sector scanner tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from sectorscan.core.engine import SectorScanEngine
from sectorscan.core.models import SectorReport
from sectorscan.shared.config import ScannerConfig, SectorScanConfig


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Write *data* to a file under ``tmp_path`` and return its path."""

    def _make(data: bytes, name: str = "input.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def engine() -> SectorScanEngine:
    """Engine with default settings (2048-byte sectors, partial tails processed)."""
    return SectorScanEngine(SectorScanConfig())


@pytest.fixture
def strict_engine() -> SectorScanEngine:
    """Engine that rejects a short final sector."""
    return SectorScanEngine(
        SectorScanConfig(scanner=ScannerConfig(partial_blocks="strict"))
    )


@pytest.fixture
def collected() -> list[SectorReport]:
    """Sink to pass as ``on_report=collected.append``."""
    return []
