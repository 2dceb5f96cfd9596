"""
Package paths and runtime settings.

There are no environment variables: the CLI builds a Settings object from its
arguments and everything else uses the defaults below.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# PACKAGE_DIR always points to the folder where this file is located
PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_DATA_PATH = DATA_DIR / "sample_schedule.json"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class Settings:
    data_path: Path = DEFAULT_DATA_PATH
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
