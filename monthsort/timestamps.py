"""Date labels from filesystem modification times."""

from datetime import datetime
from typing import Union

from .models import DateLabel


def resolve_file_info_date(last_modified: Union[datetime, float, int]) -> DateLabel:
    """Label from a last-modified time, used as the final fallback tier.

    Datetimes are taken in whatever zone they carry; POSIX timestamps are
    read as local time, matching what ``os.stat`` reports.
    """
    if not isinstance(last_modified, datetime):
        last_modified = datetime.fromtimestamp(last_modified)
    return DateLabel.from_datetime(last_modified)
