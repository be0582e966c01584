"""
Core organizer engine: scanner, namer, hasher, resolver, cleaner and the engine itself.

This package contains the decision logic of chronosort:
- FileScannerImpl: recursive traversal that skips the original/ and duplicate/ roots
- PathNamerImpl: type tag, date folders and timestamped file names
- HasherImpl + Sha256AlgorithmImpl: streaming SHA-256 checksums (xxHash64 for quick rejects)
- ContentComparatorImpl: size → front hash → full checksum comparison
- UniquePathResolverImpl: _1, _2, ... suffixes for occupied destinations
- TreeCleanerImpl: deepest-first removal of empty directories
- OrganizerImpl: the classification engine tying everything together
- Models: FileRecord, FileResult, OrganizeReport and configuration objects

All components are pure Python with no UI dependencies.
"""

from .scanner import FileScannerImpl
from .namer import PathNamerImpl
from .hasher import HasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl
from .comparator import ContentComparatorImpl
from .resolver import UniquePathResolverImpl
from .cleaner import TreeCleanerImpl
from .organizer import OrganizerImpl
from .models import (
    FileRecord, FileResult, FileOutcome, Classification, CleanupReport, OrganizeReport,
    OrganizeParams, NamingPolicy, LayoutConfig)

__all__ = [
    "FileScannerImpl",
    "PathNamerImpl",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "ContentComparatorImpl",
    "UniquePathResolverImpl",
    "TreeCleanerImpl",
    "OrganizerImpl",
    "FileRecord",
    "FileResult",
    "FileOutcome",
    "Classification",
    "CleanupReport",
    "OrganizeReport",
    "OrganizeParams",
    "NamingPolicy",
    "LayoutConfig",
]
