"""
Depth-first traversal of the source tree.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Iterator, Union

from .constants import get_logger
from .errors import SourceRootError
from .models import DiscoveredFile

logger = get_logger(f"{__package__}.walker")


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Cannot read directory {error.filename}: {error.strerror}")


def walk_tree(root: Union[str, Path]) -> Iterator[DiscoveredFile]:
    """Yield each directory followed by its files, top-down.

    Only a failure to read the root itself is fatal; unreadable
    subdirectories and vanished files are logged and skipped.
    """
    root = Path(root)
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise SourceRootError(root, e.strerror or e) from e

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        current = Path(dirpath)
        try:
            dir_mtime = current.stat().st_mtime
        except OSError as e:
            logger.warning(f"Cannot stat {current}: {e}")
            continue
        yield DiscoveredFile(current, True, datetime.fromtimestamp(dir_mtime))

        for name in sorted(filenames):
            file_path = current / name
            try:
                mtime = file_path.stat().st_mtime
            except OSError as e:
                # Moved or deleted since the directory was listed
                logger.warning(f"Cannot stat {file_path}: {e}")
                continue
            yield DiscoveredFile(file_path, False, datetime.fromtimestamp(mtime))
