"""
SectorScan Configuration Management
====================================

Configuration for the sector entropy scanner, expressed as slotted
dataclasses and persisted as TOML.

Two sections are recognised::

    [global]
    log_level = "WARNING"
    log_file = ""
    log_json = false

    [scanner]
    block_size = 2048
    random_ratio = 0.98
    partial_blocks = "process"

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent.parent / "config.toml"

_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)
_PARTIAL_POLICIES: frozenset[str] = frozenset({"process", "strict"})


# ============================ Sections =====================================


@dataclass(frozen=False, slots=True)
class ScannerConfig:
    """Parameters of the block-wise entropy scan.

    ``block_size`` is the sector size in bytes. A sector is reported as
    random when its total entropy exceeds ``random_ratio * 8 * size``
    bits. ``partial_blocks`` decides what happens to a short final
    sector: ``"process"`` analyses it, ``"strict"`` aborts the scan.
    """

    block_size: int = 2048
    random_ratio: float = 0.98
    partial_blocks: str = "process"

    def __post_init__(self) -> None:
        if isinstance(self.block_size, bool) or not isinstance(self.block_size, int):
            raise ValueError(f"block_size must be an integer, got {self.block_size!r}")
        if self.block_size <= 0:
            raise ValueError(f"block_size must be > 0, got {self.block_size}")
        if isinstance(self.random_ratio, bool) or not isinstance(
            self.random_ratio, (int, float)
        ):
            raise ValueError(f"random_ratio must be a number, got {self.random_ratio!r}")
        if not 0.0 < self.random_ratio <= 1.0:
            raise ValueError(
                f"random_ratio must be in (0, 1], got {self.random_ratio}"
            )
        self.random_ratio = float(self.random_ratio)
        if not isinstance(self.partial_blocks, str):
            raise ValueError(
                f"partial_blocks must be a string, got {self.partial_blocks!r}"
            )
        self.partial_blocks = self.partial_blocks.lower()
        if self.partial_blocks not in _PARTIAL_POLICIES:
            raise ValueError(
                f"partial_blocks must be one of {sorted(_PARTIAL_POLICIES)}, "
                f"got {self.partial_blocks!r}"
            )


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Logging settings.

    An empty ``log_file`` disables file logging.
    """

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.log_level, str):
            raise ValueError(f"log_level must be a string, got {self.log_level!r}")
        if not isinstance(self.log_file, str):
            raise ValueError(f"log_file must be a string, got {self.log_file!r}")
        if not isinstance(self.log_json, bool):
            raise ValueError(f"log_json must be true or false, got {self.log_json!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(_LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class SectorScanConfig:
    """Master configuration aggregating the global and scanner sections.

    Usage:
        >>> config = SectorScanConfig.load()                # default path
        >>> config = SectorScanConfig.load("custom.toml")   # custom path
        >>> config.scanner.block_size
        2048
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> SectorScanConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root and falls back to pure defaults when it is absent.
        Missing keys take their dataclass defaults and unknown keys are
        ignored.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`SectorScanConfig`.

        Raises:
            FileNotFoundError: If an explicitly given *path* does not exist.
            ValueError: If the file is not valid TOML or a value is invalid.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.is_file():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            scanner=cls._build_section(ScannerConfig, raw.get("scanner", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate dataclass *cls* from the keys it declares."""
        if not isinstance(data, dict):
            raise ValueError(f"[{cls.__name__}] section must be a table")
        valid_keys = {f for f in cls.__dataclass_fields__}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)
