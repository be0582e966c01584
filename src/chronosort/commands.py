"""
Unified command orchestrator for organizing a tree.
This is the SINGLE entry point for business logic, used by the CLI and by any other shim.
"""
import logging
from pathlib import Path
from typing import Optional

from chronosort.core.interfaces import Organizer, ProgressCallback
from chronosort.core.models import OrganizeParams, OrganizeReport
from chronosort.core.namer import PathNamerImpl
from chronosort.core.organizer import OrganizerImpl
from chronosort.errors import InvalidRootError
from chronosort.services.root_lock import RootLock

logger = logging.getLogger(__name__)


class OrganizeCommand:
    """
    Orchestrates one organize run:
    1. Validate the root directory (nothing is touched if it is invalid)
    2. Take the advisory lock for that root
    3. Run the classification engine and return its report

    Usage:
        params = OrganizeParams(root_dir="/data/inbox")
        report = OrganizeCommand().execute(params, progress_callback=cli_progress_printer)
        if not report.fully_succeeded:
            print(f"{report.skipped_count} files skipped")
    """

    def __init__(self, organizer: Optional[Organizer] = None, lock_dir: Optional[Path] = None):
        self._organizer = organizer
        self._lock_dir = lock_dir

    def execute(
            self,
            params: OrganizeParams,
            progress_callback: Optional[ProgressCallback] = None
    ) -> OrganizeReport:
        """
        Args:
            params: Validated organize parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            OrganizeReport; skipped files do not make the call fail

        Raises:
            InvalidRootError: If the root is missing or not a directory
            RootLockedError: If another run holds the same root
        """
        root = Path(params.root_dir)
        if not root.exists() or not root.is_dir():
            raise InvalidRootError(f"Invalid path: {params.root_dir}")

        organizer = self._organizer or OrganizerImpl(namer=PathNamerImpl(params.naming_policy))

        with RootLock(root, lock_dir=self._lock_dir):
            return organizer.organize(root, progress_callback=progress_callback)


def organize_files(path: str) -> OrganizeReport:
    """Invocation boundary: organize the tree at `path` with the default layout."""
    return OrganizeCommand().execute(OrganizeParams(root_dir=path))
