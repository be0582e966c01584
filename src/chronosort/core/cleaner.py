"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/cleaner.py
Post-pass that removes directories left empty after their files were moved out.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List

from chronosort.core.interfaces import TreeCleaner
from chronosort.core.models import CleanupReport

logger = logging.getLogger(__name__)


class TreeCleanerImpl(TreeCleaner):
    """
    Directories are visited deepest first (by number of path segments), so a chain
    of nested empty directories collapses upward in a single pass.
    The root and the excluded directories are never removed.
    """

    def remove_empty_directories(self, root: Path, excluded: Iterable[Path] = ()) -> CleanupReport:
        report = CleanupReport()
        root = Path(root)
        keep = {os.path.normpath(str(root))}
        keep.update(os.path.normpath(str(p)) for p in excluded)

        candidates = self._collect_directories(root)
        candidates.sort(key=lambda d: len(d.parts), reverse=True)

        for directory in candidates:
            if os.path.normpath(str(directory)) in keep:
                continue
            try:
                with os.scandir(directory) as entries:
                    if next(entries, None) is not None:
                        continue
                directory.rmdir()
                report.removed.append(str(directory))
                logger.debug(f"Removed empty directory: {directory}")
            except OSError as e:
                logger.warning(f"Could not remove directory {directory}: {e}")
                report.failures.append((str(directory), str(e)))

        return report

    @staticmethod
    def _collect_directories(root: Path) -> List[Path]:
        directories: List[Path] = []
        for current, dirs, _ in os.walk(str(root), onerror=lambda e: logger.warning(
                f"Cannot list directory {e.filename}: {e}")):
            for name in dirs:
                path = Path(current) / name
                # Links are listed by os.walk but never descended into; leave them alone
                if path.is_symlink():
                    continue
                directories.append(path)
        return directories
