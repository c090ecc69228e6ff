"""
Configuration for the keyword detector.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
project_root = Path(__file__).resolve().parents[2]
env_file = project_root / ".env"
if env_file.exists():
    load_dotenv(env_file)


DEFAULT_THREAD_NAME = "KeywordDetector-requestHistogramUpdate"


def _int_env(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e


@dataclass
class DetectorConfig:
    """Settings for keyword detection and histogram reporting."""

    thread_name: str = DEFAULT_THREAD_NAME
    # Top-N entries per delivered snapshot; None delivers everything.
    snapshot_limit: Optional[int] = None
    # Thread pool size used when the detector runs behind the API.
    workers: int = 2

    def __post_init__(self) -> None:
        if self.snapshot_limit is not None and self.snapshot_limit <= 0:
            self.snapshot_limit = None
        if self.workers < 1:
            raise ValueError("workers must be at least 1")

    @classmethod
    def from_env(cls) -> "DetectorConfig":
        """Build config from KEYWORD_DETECTOR_* environment variables."""
        workers = _int_env("KEYWORD_DETECTOR_WORKERS")
        return cls(
            thread_name=os.getenv("KEYWORD_DETECTOR_THREAD_NAME") or DEFAULT_THREAD_NAME,
            snapshot_limit=_int_env("KEYWORD_DETECTOR_SNAPSHOT_LIMIT"),
            workers=workers if workers is not None else 2,
        )
