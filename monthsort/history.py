"""
Run history and log files for monthsort.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .stats import StatsManager


class HistoryManager:
    """Manages the per-run log folder and the global runs summary log."""

    def __init__(self, dest_path: Path, root_dir: Path, dry_run: bool = False):
        self.dest_path = dest_path
        self.root_dir = root_dir
        self.dry_run = dry_run
        self.history_dir = self.root_dir / "history"
        self.runs_audit_log = self.root_dir / "imports.log"
        self._file_handler = None

        self._setup_run_folder()

    def _setup_run_folder(self) -> None:
        """Pick a run folder name, adding a counter when today's is taken."""
        timestamp = datetime.now().strftime("%Y-%m-%d")
        dest_name = self._sanitize_dest_name(self.dest_path)
        base_name = f"{timestamp}+{dest_name}"

        folder_name = base_name
        folder = self.history_dir / folder_name
        counter = 1
        while folder.exists() and any(folder.iterdir()):
            folder_name = f"{base_name}-{counter:02d}"
            folder = self.history_dir / folder_name
            counter += 1

        if not self.dry_run:
            folder.mkdir(parents=True, exist_ok=True)
        self.run_folder = folder
        self.run_folder_name = folder_name
        self.run_log = folder / "run.log"

    def _sanitize_dest_name(self, dest_path: Path) -> str:
        """Convert destination path to safe folder name."""
        name = dest_path.name
        sanitized = re.sub(r'[^\w\-_]', '-', name)
        sanitized = re.sub(r'-+', '-', sanitized)
        return sanitized.strip('-')

    def setup_run_logger(self, logger: logging.Logger) -> None:
        """Configure logger to also write to this run's log file."""
        if self.dry_run:
            return

        file_handler = logging.FileHandler(self.run_log, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
        ))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
        self._file_handler = file_handler

    def close_run_logger(self, logger: logging.Logger) -> None:
        if self._file_handler is not None:
            logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    def log_run_summary(self, source: Path, dest: Path, stats_manager: "StatsManager",
                        success: bool) -> None:
        """Append a one-line run summary to the global imports.log."""
        if self.dry_run:
            return

        self.root_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        status = "SUCCESS" if success else "PARTIAL"
        stats = stats_manager.get_stats()
        summary = (
            f"{timestamp} | {status} | "
            f"Source: {source} | Dest: {dest} | "
            f"Moved: {stats_manager.get_relocated()} ({stats['metadata']} metadata, "
            f"{stats['filename']} filename, {stats['file_info']} modified time) | "
            f"Size: {stats_manager.get_total_size_mb():.1f}MB | "
            f"Skipped: {stats['skipped']} | Failed: {stats['failed']} | "
            f"History: {self.run_folder_name}\n"
        )

        with open(self.runs_audit_log, 'a', encoding='utf-8') as f:
            f.write(summary)
