"""
Core classification pipeline.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from rich.table import Table

from .constants import DEFAULT_COLLISION_POLICY, IMAGE_EXTENSIONS, get_console, get_logger
from .errors import DateNotFoundError, DateResolutionError, RelocateError
from .file_operations import Relocator
from .metadata import read_image_tags, resolve_metadata_date
from .models import DateLabel, DateSource, DiscoveredFile, Outcome
from .paths import is_already_organized, resolve_from_filename
from .progress import ProgressContext
from .stats import StatsManager
from .timestamps import resolve_file_info_date
from .walker import walk_tree

TagReader = Callable[[Path], Dict[str, str]]


class ClassificationPipeline:
    """Dates each file in the source tree and files it under year/month.

    Tiers are tried in order: embedded image metadata, a date in the
    filename, then the last-modified time. The first label found is used
    for the move; a failed move is not retried with a later tier.
    """

    def __init__(self, source: Path, dest: Path,
                 on_collision: str = DEFAULT_COLLISION_POLICY, dry_run: bool = False,
                 logger: Optional[logging.Logger] = None,
                 tag_reader: TagReader = read_image_tags,
                 relocator: Optional[Relocator] = None):
        self.source = Path(source)
        self.dest = Path(dest)
        self.dry_run = dry_run
        self.logger = logger or get_logger()
        self.tag_reader = tag_reader
        self.relocator = relocator or Relocator(self.dest, on_collision=on_collision,
                                                dry_run=dry_run, logger=self.logger)
        self.stats_manager = StatsManager()

    def resolve_date(self, found: DiscoveredFile) -> Tuple[DateLabel, DateSource]:
        """Run the fallback chain; the modification-time tier always succeeds."""
        path = found.path

        if path.suffix.lower() in IMAGE_EXTENSIONS:
            try:
                label = resolve_metadata_date(self.tag_reader(path))
                return label, DateSource.METADATA
            except DateResolutionError as e:
                self.logger.info(f"No metadata date for {path}: {e}")

        try:
            return resolve_from_filename(path), DateSource.FILENAME
        except DateNotFoundError as e:
            self.logger.info(f"No filename date for {path}: {e}")

        return resolve_file_info_date(found.last_modified), DateSource.FILE_INFO

    def process_file(self, found: DiscoveredFile) -> Outcome:
        """Classify and relocate a single walker node."""
        if found.is_dir:
            return Outcome.SKIPPED

        if is_already_organized(found.path):
            self.logger.debug(f"Already organized: {found.path}")
            self.stats_manager.increment_skipped()
            return Outcome.SKIPPED

        self.logger.info(f"{found.path}")
        label, date_source = self.resolve_date(found)

        try:
            file_size = found.path.stat().st_size
        except OSError:
            file_size = 0

        try:
            self.relocator.move(found.path, label)
        except RelocateError as e:
            self.logger.error(str(e))
            self.stats_manager.increment_failed()
            return Outcome.FAILED

        self.logger.debug(f"Dated {found.path.name} as {label} from {date_source.value}")
        self.stats_manager.record_relocated(date_source, file_size)
        return Outcome.DONE

    def run(self, progress_ctx: Optional[ProgressContext] = None) -> StatsManager:
        """Walk the source tree and process every node.

        Raises SourceRootError if the source cannot be read; per-file
        problems are logged and counted instead.
        """
        progress_ctx = progress_ctx or ProgressContext()
        self.logger.info(f"Starting run: {self.source} -> {self.dest}")
        self.logger.info(f"Mode: {'DRY RUN' if self.dry_run else 'MOVE'}")

        for found in walk_tree(self.source):
            try:
                outcome = self.process_file(found)
            except Exception as e:
                self.logger.error(f"Error processing {found.path}: {e}")
                self.stats_manager.increment_failed()
                outcome = Outcome.FAILED

            if not found.is_dir:
                if outcome is Outcome.DONE:
                    progress_ctx.update(f"Moved: {found.path.name}")
                progress_ctx.advance()

        return self.stats_manager

    def print_summary(self) -> None:
        """Print processing summary."""
        table = Table(title="Processing Summary")
        table.add_column("Category", style="cyan")
        table.add_column("Count", style="green")

        table.add_row("Dated by Metadata", str(self.stats_manager.get_by_source(DateSource.METADATA)))
        table.add_row("Dated by Filename", str(self.stats_manager.get_by_source(DateSource.FILENAME)))
        table.add_row("Dated by Modified Time", str(self.stats_manager.get_by_source(DateSource.FILE_INFO)))
        table.add_row("Already Organized", str(self.stats_manager.get_skipped()))
        table.add_row("Failed", str(self.stats_manager.get_failed()))

        size_mb = self.stats_manager.get_total_size_mb()
        if size_mb > 1024:
            size_str = f"{size_mb/1024:.1f} GB"
        else:
            size_str = f"{size_mb:.1f} MB"
        table.add_row("Total Size", size_str)

        console = get_console()
        console.print(table)

        if self.stats_manager.has_errors():
            console.print("\n[red]Some files could not be moved; see the run log for details[/red]")
