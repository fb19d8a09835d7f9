"""
Test the organized-folder guard and filename date extraction.
"""

import pytest

from monthsort.errors import DateNotFoundError
from monthsort.models import DateLabel
from monthsort.paths import is_already_organized, resolve_from_filename


class TestIsAlreadyOrganized:
    """Structural matching of <2YYY>/<MM>/<file> paths."""

    @pytest.mark.parametrize("path", [
        r"E:\Pictures\Album\2025\03\photo.jpg",
        r"D:\anywhere\else\2001\12\scan.png",
        "/archive/2025/03/photo.jpg",
        "/home/me/manually/placed/2019/07/notes.txt",
    ])
    def test_matches_year_month_folders(self, path):
        assert is_already_organized(path)

    @pytest.mark.parametrize("path", [
        r"E:\Pictures\Album\2025\3\photo.jpg",   # unpadded month
        "/archive/1999/03/photo.jpg",            # year must start with 2
        "/archive/2025/03/extra/photo.jpg",      # not directly above the file
        "/archive/2025/photo.jpg",
        "/inbox/20250301.jpg",
    ])
    def test_rejects_other_layouts(self, path):
        assert not is_already_organized(path)

    def test_accepts_path_objects(self, tmp_path):
        assert is_already_organized(tmp_path / "2024" / "02" / "a.jpg")
        assert not is_already_organized(tmp_path / "inbox" / "a.jpg")


class TestResolveFromFilename:
    """Year/month from the first 8-digit run in the base filename."""

    def test_camera_style_name(self):
        label = resolve_from_filename("/inbox/IMG_20230714_101500.jpg")
        assert label == DateLabel("2023", "07")

    def test_uses_base_name_only(self):
        label = resolve_from_filename(r"C:\20991231\export\scan-19980415.tif")
        assert label == DateLabel("1998", "04")

    def test_first_run_wins(self):
        assert resolve_from_filename("20200102-20210304.pdf") == DateLabel("2020", "01")

    def test_digits_inside_longer_run(self):
        assert resolve_from_filename("VID2019083112345.mp4") == DateLabel("2019", "08")

    def test_no_date_in_name(self):
        with pytest.raises(DateNotFoundError):
            resolve_from_filename("/inbox/holiday_2023.jpg")

    def test_impossible_month_is_not_a_date(self):
        with pytest.raises(DateNotFoundError):
            resolve_from_filename("/inbox/1699999999.jpg")
