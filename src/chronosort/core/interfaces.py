"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the organizer.
These protocols enforce structural typing using Python's `typing.Protocol` so that
components can be swapped in tests without inheritance.

Key Components:
---------------
- HashAlgorithm: Factory for streaming hash objects (e.g., SHA-256).
- ChecksumCalculator: Full-content digest of a file, plus a cheap front-chunk digest.
- ContentComparator: Decides whether two files hold identical bytes.
- PathNamer: Derives the type/date segments and timestamped name of a file.
- PathResolver: Turns a desired destination into a collision-free one.
- FileScanner: Lists the files an organize run has to process.
- TreeCleaner: Removes directories left empty after files were moved out.
- Organizer: The classification engine coordinating all of the above.
"""

from datetime import datetime
from pathlib import Path
from typing import Protocol, List, Optional, Callable, Iterable, Union, Any

from chronosort.core.models import (
    Classification,
    CleanupReport,
    FileRecord,
    OrganizeReport,
)

ProgressCallback = Callable[[str, int, Optional[int]], None]


class HashAlgorithm(Protocol):
    """
    Interface for streaming hash algorithms.

    Allows plugging in different hashing functions like SHA-256 or BLAKE2
    without affecting the rest of the comparison logic.
    """

    @staticmethod
    def new() -> Any:
        """Returns a fresh hash object supporting update() and hexdigest()."""
        ...


class ChecksumCalculator(Protocol):
    def checksum(self, path: Union[str, Path]) -> str: ...

    def compute_front_hash(self, path: Union[str, Path]) -> str:
        """Cheap digest of the first chunk; only a mismatch is meaningful."""
        ...


class ContentComparator(Protocol):
    def are_identical(self, first: Union[str, Path], second: Union[str, Path]) -> bool:
        """True iff both files have equal full-content digests."""
        ...


class PathNamer(Protocol):
    def classify(self, filename: str, modified_time: Union[datetime, float]) -> Classification: ...


class PathResolver(Protocol):
    def unique_path(self, candidate: Path) -> Path: ...


class FileScanner(Protocol):
    """
    Interface for scanning a source tree.

    Methods:
        scan: Returns the files that still need to be organized.
    """
    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[FileRecord]:
        ...


class TreeCleaner(Protocol):
    def remove_empty_directories(
        self,
        root: Path,
        excluded: Iterable[Path] = ()
    ) -> CleanupReport:
        """
        Remove every empty directory under root, deepest first.

        Args:
            root: Directory whose subtree is cleaned. Never removed itself.
            excluded: Directories that must survive even when empty.

        Returns:
            CleanupReport with removed directories and per-directory failures.
        """
        ...


class Organizer(Protocol):
    """
    Interface for the classification engine.
    """
    def organize(
        self,
        root: Union[str, Path],
        progress_callback: Optional[ProgressCallback] = None
    ) -> OrganizeReport:
        """
        Reorganize every file under root into the original/duplicate layout.

        Args:
            root: Existing directory to organize in place.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            OrganizeReport with one FileResult per discovered file.

        Raises:
            InvalidRootError: If root does not exist or is not a directory.
        """
        ...
