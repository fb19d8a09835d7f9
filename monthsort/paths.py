"""
Path-based classification: the organized-folder guard and filename dates.
"""

import re
from pathlib import Path
from typing import Union

from .errors import DateNotFoundError
from .models import DateLabel

# .../2YYY/MM/<filename>, with either separator style
ORGANIZED_PATH_PATTERN = re.compile(r'[\\/]2\d{3}[\\/]\d{2}[\\/][^\\/]+$')
FILENAME_DATE_PATTERN = re.compile(r'(\d{4})(\d{2})(\d{2})')


def is_already_organized(path: Union[str, Path]) -> bool:
    """Check whether the file already sits directly under a year/month folder.

    This is a structural test and does not compare against the destination
    root, so files in any ``2YYY/MM`` shaped folder are left alone.
    """
    return ORGANIZED_PATH_PATTERN.search(str(path)) is not None


def _base_name(path: Union[str, Path]) -> str:
    # Split on both separators so Windows-style strings work on POSIX too
    return re.split(r'[\\/]', str(path))[-1]


def resolve_from_filename(path: Union[str, Path]) -> DateLabel:
    """Read year and month from the first 8-digit run in the filename."""
    name = _base_name(path)
    match = FILENAME_DATE_PATTERN.search(name)
    if not match:
        raise DateNotFoundError(name, "no YYYYMMDD sequence in filename")

    year, month, _day = match.groups()
    try:
        return DateLabel(year, month)
    except ValueError as e:
        raise DateNotFoundError(name, e) from e
