"""
monthsort - File photos and other files into a year/month folder structure.

Each file is dated from its EXIF metadata, a YYYYMMDD run in its filename,
or its modification time, in that order, and renamed into
<archive>/<year>/<month>/. Files already in such a folder are skipped.

MIT License.
"""

__version__ = "1.0.0"
__copyright__ = "Copyright (c) 2025 monthsort contributors"


# Public API
from .cli import main
from .config import Config
from .core import ClassificationPipeline
from .file_operations import Relocator
from .history import HistoryManager
from .models import DateLabel, DateSource, DiscoveredFile, Outcome

__all__ = [ "main", "Config", "ClassificationPipeline", "Relocator", "HistoryManager",
            "DateLabel", "DateSource", "DiscoveredFile", "Outcome" ]
