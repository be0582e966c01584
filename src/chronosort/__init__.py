"""
chronosort: organizes a directory tree by file type and modification date.

Core features:
- Deterministic layout: original/<type>/<yyyy>/<MM>/<dd>/<name>_<timestamp>.<ext>
- Exact duplicates (equal SHA-256) are moved to a mirrored duplicate/ tree
- Name collisions with different content are kept side by side with _1, _2, ... suffixes
- Empty directories are removed after the run
- CLI interface for headless/server usage
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("chronosort")
except PackageNotFoundError:
    import tomllib
    from pathlib import Path as _Path

    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from chronosort.commands import OrganizeCommand, organize_files
from chronosort.core import OrganizeParams, OrganizeReport, FileOutcome, FileResult, NamingPolicy
from chronosort.errors import ChronoSortError, InvalidRootError, RootLockedError, ChecksumError
from chronosort.services import FileService, RootLock

__all__ = [
    "OrganizeCommand",
    "organize_files",
    "OrganizeParams",
    "OrganizeReport",
    "FileOutcome",
    "FileResult",
    "NamingPolicy",
    "ChronoSortError",
    "InvalidRootError",
    "RootLockedError",
    "ChecksumError",
    "FileService",
    "RootLock",
    "__version__",
]
