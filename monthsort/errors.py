"""
Exception hierarchy for date resolution and file relocation.
"""

from pathlib import Path
from typing import Union


class MonthsortError(Exception):
    """Base class for all monthsort errors."""


class SourceRootError(MonthsortError):
    """Raised when the source directory cannot be walked at all."""

    def __init__(self, root: Path, reason: Union[str, Exception]):
        self.root = root
        self.reason = reason
        super().__init__(f"Cannot read source directory {root}: {reason}")


class DateResolutionError(MonthsortError):
    """A fallback tier could not produce a date label."""

    def __init__(self, subject: Union[str, Path], reason: Union[str, Exception]):
        self.subject = subject
        self.reason = reason
        super().__init__(f"{subject}: {reason}")


class DecodeError(DateResolutionError):
    """Metadata could not be extracted from the file."""


class TagMissingError(DateResolutionError):
    """None of the date tags are present."""


class MalformedDateError(DateResolutionError):
    """A date tag is present but its value is unusable."""


class DateNotFoundError(DateResolutionError):
    """No date pattern in the filename."""


class RelocateError(MonthsortError):
    """Moving a file into the archive failed; the source is left in place."""

    def __init__(self, path: Path, target: Path, cause: Union[str, Exception]):
        self.path = path
        self.target = target
        self.cause = cause
        super().__init__(f"Failed to move {path} -> {target}: {cause}")


class DirCreateError(RelocateError):
    """The destination directory could not be created."""


class RenameError(RelocateError):
    """The rename into the destination directory failed."""


class DestinationExistsError(RenameError):
    """The destination already holds a file of the same name."""
