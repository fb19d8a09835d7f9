"""
File extension constants and shared console/logger accessors.
"""

import logging
from typing import Optional

from rich.console import Console

PROGRAM = "monthsort"

# Image types whose embedded EXIF block is worth decoding
JPG_EXTENSIONS = (".jpg", ".jpeg", ".jpe")
TIFF_EXTENSIONS = (".tif", ".tiff")
IMAGE_EXTENSIONS = JPG_EXTENSIONS + TIFF_EXTENSIONS + (".webp", ".png")

# Date-like EXIF tags in priority order
EXIF_DATE_TAGS = ("DateTimeOriginal", "DateTimeDigitized", "DateTime")

COLLISION_POLICIES = ("overwrite", "fail", "suffix")
DEFAULT_COLLISION_POLICY = "overwrite"

_console: Optional[Console] = None


def get_console() -> Console:
    """Shared rich console so progress bars and log output interleave cleanly."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def get_logger(name: str = PROGRAM) -> logging.Logger:
    return logging.getLogger(name)
