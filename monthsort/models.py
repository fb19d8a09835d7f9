"""
Value types shared across the classification pipeline.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class DateLabel:
    """Year/month pair naming a destination folder, e.g. ``2024/02``."""
    year: str
    month: str

    def __post_init__(self):
        if len(self.year) != 4 or not self.year.isdigit() or not self.year.isascii():
            raise ValueError(f"Invalid year: {self.year!r}")
        if len(self.month) != 2 or not self.month.isdigit() or not self.month.isascii():
            raise ValueError(f"Invalid month: {self.month!r}")
        if not 1 <= int(self.month) <= 12:
            raise ValueError(f"Month out of range: {self.month!r}")

    @classmethod
    def from_datetime(cls, moment: datetime) -> "DateLabel":
        return cls(f"{moment.year:04d}", f"{moment.month:02d}")

    def __str__(self) -> str:
        return f"{self.year}/{self.month}"


@dataclass(frozen=True)
class DiscoveredFile:
    """A node reported by the tree walker."""
    path: Path
    is_dir: bool
    last_modified: datetime


class DateSource(Enum):
    """Fallback tiers, most trustworthy first."""
    METADATA = "metadata"
    FILENAME = "filename"
    FILE_INFO = "file_info"


class Outcome(Enum):
    """Terminal state of a single file in the pipeline."""
    SKIPPED = "skipped"
    DONE = "done"
    FAILED = "failed"
