"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements source-tree scanning for the organizer.
Features:
- Recursively walks the tree with os.walk, in sorted order for deterministic runs
- Prunes the original/ and duplicate/ roots so organized files are never revisited
- Skips symbolic links
- Returns the full list before any file is moved
"""

import os
import stat
import time
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from chronosort.core.interfaces import FileScanner, ProgressCallback
from chronosort.core.models import FileRecord
from chronosort.errors import InvalidRootError

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Lists every regular file under root_dir that still has to be organized.

    Attributes:
        root_dir: Root directory to scan
        excluded_dirs: Directories whose whole subtree is skipped (compared by exact path)
        failures: (path, message) pairs for files and directories that could not be inspected during the last scan
    """

    def __init__(self, root_dir: str, excluded_dirs: Optional[Iterable[str]] = None):
        self.root_dir = root_dir
        self.excluded_dirs = {os.path.normpath(d) for d in excluded_dirs} if excluded_dirs else set()
        self.failures: List[Tuple[str, str]] = []

    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[FileRecord]:
        """
        Single-pass scan. Files and directories that cannot be inspected are logged and collected in `failures`.
        """
        logger.debug(f"Starting scan of {self.root_dir}")
        root_path = Path(self.root_dir)

        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise InvalidRootError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise InvalidRootError(error_msg)

        found_files: List[FileRecord] = []
        self.failures = []
        start_time = time.time()

        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            # Prune before os.walk descends; sorting keeps traversal order stable
            dirs[:] = sorted(d for d in dirs if self._prefilter_dirs(Path(root) / d))

            for filename in sorted(files):
                record = self._process_file(Path(root) / filename)
                if record:
                    found_files.append(record)

        if progress_callback:
            progress_callback('scanning', len(found_files), None)

        logger.debug(f"Scan completed in {time.time() - start_time:.2f}s. Found {len(found_files)} files.")
        return found_files

    def _prefilter_dirs(self, path: Path) -> bool:
        if os.path.normpath(str(path)) in self.excluded_dirs:
            logger.debug(f"Skipping excluded directory: {path}")
            return False
        return True

    def _on_walk_error(self, error: OSError) -> None:
        logger.warning(f"Cannot list directory {error.filename}: {error}")
        self.failures.append((str(error.filename), str(error)))

    def _process_file(self, path: Path) -> Optional[FileRecord]:
        """
        Build a FileRecord for a regular file, or None if it must be skipped.
        """
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return None
            stat_result = path.stat()
        except OSError as e:
            logger.warning(f"Could not stat {path}: {e}")
            self.failures.append((str(path), str(e)))
            return None

        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        return FileRecord(
            path=str(path),
            size=stat_result.st_size,
            mtime_ns=stat_result.st_mtime_ns,
        )
