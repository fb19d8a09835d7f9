"""
EXIF decoding and metadata-based date resolution.
"""

from pathlib import Path
from typing import Dict, Mapping, Union

from PIL import ExifTags, Image

from .constants import EXIF_DATE_TAGS
from .errors import DecodeError, MalformedDateError, TagMissingError
from .models import DateLabel


def read_image_tags(image_path: Union[str, Path]) -> Dict[str, str]:
    """Decode the EXIF block of an image into a tag-name -> text mapping.

    Tags from the primary IFD and the Exif sub-IFD are merged, since
    DateTimeOriginal and DateTimeDigitized live in the latter.
    """
    tags: Dict[str, str] = {}
    try:
        with Image.open(image_path) as img:
            exif = img.getexif()
            for directory in (exif, exif.get_ifd(ExifTags.IFD.Exif)):
                for tag_id, value in directory.items():
                    name = ExifTags.TAGS.get(tag_id)
                    if name is None or isinstance(value, dict):
                        continue
                    tags[name] = _tag_text(value)
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(image_path, e) from e

    if not tags:
        raise DecodeError(image_path, "no EXIF data")
    return tags


def _tag_text(value) -> str:
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="ignore")
    return str(value).strip("\x00 ")


def resolve_metadata_date(tags: Mapping[str, str]) -> DateLabel:
    """Pick the first non-empty date tag in priority order and parse it."""
    for tag in EXIF_DATE_TAGS:
        value = (tags.get(tag) or "").strip("\x00 ")
        if value:
            return parse_exif_date(value)

    raise TagMissingError("EXIF", f"none of {', '.join(EXIF_DATE_TAGS)} present")


def parse_exif_date(value: str) -> DateLabel:
    """Parse the year and month out of an EXIF "YYYY:MM:DD HH:MM:SS" value."""
    date_part = value.strip().split(" ")[0]
    fields = date_part.split(":")
    if len(fields) < 2:
        raise MalformedDateError(value, "expected colon-separated YYYY:MM:DD")

    try:
        return DateLabel(fields[0], fields[1])
    except ValueError as e:
        raise MalformedDateError(value, e) from e
