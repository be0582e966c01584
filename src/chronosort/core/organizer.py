"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/organizer.py
Classification engine: moves every file of a tree into a type/date partitioned layout.

    <root>/original/<type>/<yyyy>/<MM>/<dd>/<base>_<yyyyMMddHHmmssSSS>[_N].<ext>
    <root>/duplicate/<type>/<yyyy>/<MM>/<dd>/<base>_<yyyyMMddHHmmssSSS>[_N].<ext>

PIPELINE
--------
1. Scan      : list files outside original/ and duplicate/
2. Classify  : type tag, date folders and timestamped name from the modification time
3. Route     : free target -> original; occupied target -> compare content
                 identical -> duplicate/ (suffixed if needed)
                 different -> original/ with a _N suffix
4. Clean     : remove directories emptied by the moves

A failure on one file is logged and recorded as SKIPPED; the run goes on.
"""

import logging
import os
import time
from pathlib import Path
from typing import Optional, Tuple, Union

from chronosort.core.cleaner import TreeCleanerImpl
from chronosort.core.comparator import ContentComparatorImpl
from chronosort.core.interfaces import (
    ContentComparator,
    Organizer,
    PathNamer,
    PathResolver,
    ProgressCallback,
    TreeCleaner,
)
from chronosort.core.models import (
    FileOutcome,
    FileRecord,
    FileResult,
    LayoutConfig,
    OrganizeReport,
)
from chronosort.core.namer import PathNamerImpl
from chronosort.core.resolver import UniquePathResolverImpl
from chronosort.core.scanner import FileScannerImpl
from chronosort.errors import InvalidRootError
from chronosort.services.file_service import FileService

logger = logging.getLogger(__name__)


class OrganizerImpl(Organizer):
    """
    Single-threaded engine. Collaborators are injectable for testing; the defaults
    implement the production layout.
    """

    def __init__(
        self,
        namer: Optional[PathNamer] = None,
        comparator: Optional[ContentComparator] = None,
        resolver: Optional[PathResolver] = None,
        cleaner: Optional[TreeCleaner] = None,
        file_service: Optional[FileService] = None,
    ):
        self.namer = namer or PathNamerImpl()
        self.comparator = comparator or ContentComparatorImpl()
        self.resolver = resolver or UniquePathResolverImpl()
        self.cleaner = cleaner or TreeCleanerImpl()
        self.file_service = file_service or FileService()

    @staticmethod
    def layout_roots(root: Union[str, Path]) -> Tuple[Path, Path]:
        """Return (original_root, duplicate_root) for a source tree."""
        root = Path(root)
        return root / LayoutConfig.ORIGINAL_DIR_NAME, root / LayoutConfig.DUPLICATE_DIR_NAME

    def organize(
        self,
        root: Union[str, Path],
        progress_callback: Optional[ProgressCallback] = None
    ) -> OrganizeReport:
        source_root = Path(root)
        if not source_root.exists() or not source_root.is_dir():
            raise InvalidRootError(f"Invalid path: {root}")

        start_time = time.time()
        report = OrganizeReport(root=str(source_root))
        original_root, duplicate_root = self.layout_roots(source_root)

        self.file_service.ensure_directory(original_root)
        self.file_service.ensure_directory(duplicate_root)

        # Step 1: Scan the whole tree before the first move
        scanner = FileScannerImpl(
            root_dir=str(source_root),
            excluded_dirs=[str(original_root), str(duplicate_root)]
        )
        records = scanner.scan(progress_callback=progress_callback)
        for path, message in scanner.failures:
            report.add(FileResult(source=path, outcome=FileOutcome.SKIPPED, error=message))

        # Step 2: Route files one at a time
        total = len(records)
        for index, record in enumerate(records, 1):
            report.add(self._organize_file(record, original_root, duplicate_root))
            if progress_callback:
                progress_callback('organizing', index, total)

        # Step 3: Collapse directories emptied by the moves
        report.cleanup = self.cleaner.remove_empty_directories(
            source_root,
            excluded=[original_root, duplicate_root]
        )
        if progress_callback:
            progress_callback('cleaning', len(report.cleanup.removed), None)

        report.total_time = time.time() - start_time
        logger.info(
            f"Organized {report.processed_count} files under {source_root} "
            f"({report.count(FileOutcome.DUPLICATE)} duplicates, {report.skipped_count} skipped) "
            f"in {report.total_time:.2f}s"
        )
        return report

    def _organize_file(self, record: FileRecord, original_root: Path, duplicate_root: Path) -> FileResult:
        """Route one file. Never raises for I/O problems; they become SKIPPED results."""
        try:
            classification = self.namer.classify(record.name, record.modified)
            target = classification.path_under(original_root)
            self.file_service.ensure_directory(target.parent)

            if not os.path.lexists(target):
                outcome, destination = FileOutcome.MOVED, target
            elif self.comparator.are_identical(target, record.path):
                outcome = FileOutcome.DUPLICATE
                destination = self.resolver.unique_path(classification.path_under(duplicate_root))
            else:
                outcome, destination = FileOutcome.RENAMED, self.resolver.unique_path(target)

            self.file_service.move(record.path, destination)
            logger.debug(f"[{outcome.display_name}] {record.path} -> {destination}")
            return FileResult(
                source=record.path,
                outcome=outcome,
                destination=str(destination),
                size=record.size,
            )
        except OSError as e:
            logger.warning(f"Skipping {record.path}: {e}")
            return FileResult(
                source=record.path,
                outcome=FileOutcome.SKIPPED,
                size=record.size,
                error=str(e),
            )
