"""
Atomic relocation of files into the year/month archive.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import COLLISION_POLICIES, DEFAULT_COLLISION_POLICY, get_logger
from .errors import DestinationExistsError, DirCreateError, RenameError
from .models import DateLabel


class Relocator:
    """Moves files under ``<dest_root>/<year>/<month>/`` by renaming them.

    A rename is all-or-nothing, so a failed move never leaves a partial copy
    behind. Moves across filesystems fail with ``RenameError`` rather than
    degrading to copy-and-delete.
    """

    def __init__(self, dest_root: Path, on_collision: str = DEFAULT_COLLISION_POLICY,
                 dry_run: bool = False, logger: Optional[logging.Logger] = None):
        if on_collision not in COLLISION_POLICIES:
            raise ValueError(f"Unknown collision policy: {on_collision}")
        self.dest_root = Path(dest_root)
        self.on_collision = on_collision
        self.dry_run = dry_run
        self.logger = logger or get_logger(f"{__package__}.relocate")

    def destination_dir(self, label: DateLabel) -> Path:
        return self.dest_root / label.year / label.month

    def destination_for(self, file_path: Path, label: DateLabel) -> Path:
        """Destination path keeping the original base filename."""
        return self.destination_dir(label) / Path(file_path).name

    def move(self, file_path: Path, label: DateLabel) -> Path:
        """Move a file into its year/month folder and return the new path."""
        source = Path(file_path)
        dest = self.destination_for(source, label)

        if self.dry_run:
            self.logger.info(f"[dry-run] {source} -> {dest}")
            return dest

        self.ensure_directory(dest.parent, source)

        try:
            collides = dest.exists() and dest.resolve() != source.resolve()
            if collides and self.on_collision == "fail":
                raise DestinationExistsError(source, dest, "destination file already exists")
            if collides and self.on_collision == "suffix":
                dest = self.create_unique_path(dest.parent, source)
            elif collides:
                self.logger.warning(f"Overwriting existing file: {dest}")

            os.replace(source, dest)
        except OSError as e:
            raise RenameError(source, dest, e) from e

        self.logger.info(f"{source} -> {dest}")
        return dest

    def ensure_directory(self, directory: Path, source: Path) -> None:
        """Create directory and parents if needed; existing folders are fine."""
        try:
            directory.mkdir(mode=0o777, parents=True, exist_ok=True)
        except OSError as e:
            raise DirCreateError(source, directory, e) from e

    @staticmethod
    def create_unique_path(dest_dir: Path, file_path: Path) -> Path:
        """Generate unique file path with counter if needed."""
        stem = file_path.stem
        suffix = file_path.suffix
        dest_path = dest_dir / file_path.name
        counter = 1
        while dest_path.exists():
            dest_path = dest_dir / f"{stem}_{counter:03d}{suffix}"
            counter += 1
        return dest_path
