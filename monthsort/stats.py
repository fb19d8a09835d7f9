"""
Statistics tracking for classification runs.
"""

from typing import Dict

from .models import DateSource


class StatsManager:
    """Counts per-file outcomes and which fallback tier dated each file."""

    def __init__(self):
        self._stats = {
            'metadata': 0,
            'filename': 0,
            'file_info': 0,
            'skipped': 0,
            'failed': 0,
            'total_size': 0,
        }

    def record_relocated(self, source: DateSource, file_size: int = 0) -> None:
        """Record a file moved into the archive, dated by the given tier."""
        self._stats[source.value] += 1
        self._stats['total_size'] += file_size

    def increment_skipped(self) -> None:
        """Increment when a file already sits in a year/month folder."""
        self._stats['skipped'] += 1

    def increment_failed(self) -> None:
        """Increment when a file could not be moved."""
        self._stats['failed'] += 1

    def get_stats(self) -> Dict[str, int]:
        """Get a copy of current statistics."""
        return self._stats.copy()

    def get_relocated(self) -> int:
        return self._stats['metadata'] + self._stats['filename'] + self._stats['file_info']

    def get_total_size_mb(self) -> float:
        return self._stats['total_size'] / (1024 * 1024)

    def has_errors(self) -> bool:
        return self._stats['failed'] > 0

    def get_by_source(self, source: DateSource) -> int:
        return self._stats[source.value]

    def get_skipped(self) -> int:
        return self._stats['skipped']

    def get_failed(self) -> int:
        return self._stats['failed']
