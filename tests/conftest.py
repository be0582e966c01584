"""
Shared fixtures for organizer tests.
Creates isolated temporary trees with controlled contents and modification times.
"""
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

# Add src/ to sys.path so 'chronosort' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

# Local time used by most scenarios: 2023-05-01 10:00:00.000
DEFAULT_MOMENT = datetime(2023, 5, 1, 10, 0, 0)


def set_mtime(path: Path, moment: datetime) -> None:
    """Set the modification time of path to a naive local datetime, to the microsecond."""
    seconds = int(moment.replace(microsecond=0).timestamp())
    ns = seconds * 1_000_000_000 + moment.microsecond * 1000
    os.utime(path, ns=(ns, ns))


@pytest.fixture
def source_root(tmp_path) -> Path:
    """Empty directory to organize, isolated from pytest's own tmp_path files."""
    root = tmp_path / "inbox"
    root.mkdir()
    return root


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """
    Factory: make_file(root, "sub/photo.jpg", b"content", moment=DEFAULT_MOMENT)
    Creates parent directories and pins the modification time.
    """
    def _make(root: Path, relative: str, content: bytes = b"content", moment: datetime = DEFAULT_MOMENT) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        set_mtime(path, moment)
        return path
    return _make


@pytest.fixture
def lock_dir(tmp_path) -> Path:
    """Private directory for root lock files."""
    path = tmp_path / "locks"
    path.mkdir()
    return path
