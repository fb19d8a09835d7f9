"""
pytest configuration and fixtures for monthsort tests.
"""

import io
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pytest
from PIL import Image


@dataclass
class CliResult:
    """Result from running CLI command."""
    exit_code: int
    output: str
    error: str


@pytest.fixture
def test_config_path(tmp_path):
    """Isolated config path; history and imports.log land beside it."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir / "config.yml"


@pytest.fixture
def quiet_logger():
    """Logger that swallows everything, for silent pipeline runs."""
    logger = logging.getLogger("monthsort.tests.quiet")
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


@pytest.fixture
def cli_runner(monkeypatch):
    """Create a CLI runner that captures output and uses test config."""

    def run_cli(*args, config_path=None, answer="n"):
        """Run monthsort CLI with given arguments.

        Args:
            *args: Command line arguments (source, dest, --flags, etc)
            config_path: Optional config path for test isolation
            answer: Reply given to the confirmation prompt

        Returns:
            CliResult with exit_code, output, and error
        """
        from monthsort.cli import main
        from monthsort.constants import get_console

        stdout = io.StringIO()
        stderr = io.StringIO()
        monkeypatch.setattr(sys, "stdout", stdout)
        monkeypatch.setattr(sys, "stderr", stderr)
        monkeypatch.setattr(sys, "argv", ["monthsort"] + [str(a) for a in args])
        # Keep argparse help from wrapping long temp paths
        monkeypatch.setenv("COLUMNS", "1000")

        # Avoid hanging on confirmation prompts
        monkeypatch.setattr(get_console(), "input", lambda prompt="": answer)

        try:
            exit_code = main(config_path=config_path)
        except SystemExit as e:
            exit_code = e.code if e.code is not None else 0

        return CliResult(
            exit_code=exit_code,
            output=stdout.getvalue(),
            error=stderr.getvalue()
        )

    return run_cli


def _set_mtime(file_path: Path, mtime: datetime) -> None:
    stamp = mtime.timestamp()
    os.utime(file_path, (stamp, stamp))


@pytest.fixture
def create_test_files(tmp_path):
    """Helper to create test files with specific properties."""

    def create_files(file_specs: List[dict], root: Optional[Path] = None) -> Path:
        """Create test files based on specifications.

        Args:
            file_specs: List of dicts with keys:
                - name: relative file path
                - content: file content (optional)
                - mtime: modification time as datetime (optional)
            root: Directory to create them in (default: tmp_path/source)

        Returns:
            Path to directory containing created files
        """
        test_dir = root or tmp_path / "source"
        test_dir.mkdir(parents=True, exist_ok=True)

        for spec in file_specs:
            file_path = test_dir / spec['name']
            file_path.parent.mkdir(parents=True, exist_ok=True)

            content = spec.get('content', b'test file content')
            if isinstance(content, str):
                file_path.write_text(content)
            else:
                file_path.write_bytes(content)

            if 'mtime' in spec:
                _set_mtime(file_path, spec['mtime'])

        return test_dir

    return create_files


@pytest.fixture
def make_jpeg():
    """Write a small real JPEG, optionally carrying an EXIF DateTime tag."""

    def write_jpeg(file_path: Path, date_time: Optional[str] = None,
                   mtime: Optional[datetime] = None) -> Path:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        img = Image.new("RGB", (8, 8), color=(200, 120, 40))
        if date_time is not None:
            exif = Image.Exif()
            exif[0x0132] = date_time  # DateTime
            img.save(file_path, "JPEG", exif=exif)
        else:
            img.save(file_path, "JPEG")
        if mtime is not None:
            _set_mtime(file_path, mtime)
        return file_path

    return write_jpeg


@pytest.fixture
def assert_file_structure():
    """Helper to assert expected file structure."""

    def check_structure(base_path: Path, expected_structure: dict):
        """Assert that directory has expected structure.

        Args:
            base_path: Root directory to check
            expected_structure: Dict describing expected structure
                e.g., {
                    "2024": {
                        "01": ["file1.jpg", "file2.jpg"],
                        "02": ["file3.jpg"]
                    }
                }
        """
        def check_level(path: Path, structure: dict):
            for name, value in structure.items():
                item_path = path / name
                assert item_path.exists(), f"Expected {item_path} to exist"
                assert item_path.is_dir(), f"Expected {item_path} to be a directory"

                if isinstance(value, dict):
                    check_level(item_path, value)
                else:
                    actual_files = sorted(f.name for f in item_path.iterdir() if f.is_file())
                    assert actual_files == sorted(value), \
                        f"Expected files {sorted(value)} in {item_path}, got {actual_files}"

        check_level(base_path, expected_structure)

    return check_structure
