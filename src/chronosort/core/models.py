"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and configuration for file classification and deduplication.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple
import os

from chronosort.errors import InvalidRootError
from chronosort.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class FileOutcome(Enum):
    """
    What happened to a single file during an organize run.
    """
    MOVED = "moved"
    DUPLICATE = "duplicate"
    RENAMED = "renamed"
    SKIPPED = "skipped"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            FileOutcome.MOVED: "Moved",
            FileOutcome.DUPLICATE: "Duplicate",
            FileOutcome.RENAMED: "Renamed",
            FileOutcome.SKIPPED: "Skipped",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# =============================
# Configuration
# =============================

class LayoutConfig:
    ORIGINAL_DIR_NAME = "original"
    DUPLICATE_DIR_NAME = "duplicate"
    CHECKSUM_CHUNK_SIZE = 64 * 1024
    QUICK_HASH_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class NamingPolicy:
    """
    Formatting rules for destination names.
    The timestamp is `timestamp_format` followed by zero-padded milliseconds,
    e.g. 2023-05-01 10:00:00.000 -> 20230501100000000.
    """
    timestamp_format: str = "%Y%m%d%H%M%S"
    millisecond_digits: int = 3
    unknown_type_tag: str = "unknown"
    separator: str = "_"

    def format_timestamp(self, moment: datetime) -> str:
        millis = moment.microsecond // 1000
        return f"{moment.strftime(self.timestamp_format)}{millis:0{self.millisecond_digits}d}"


DEFAULT_NAMING_POLICY = NamingPolicy()


# ======================
#  Core Data Models
# ======================

@dataclass
class FileRecord:
    """
    A single regular file discovered during a scan.
    """
    path: str
    size: int  # in bytes
    mtime_ns: int  # POSIX timestamp in nanoseconds
    name: Optional[str] = None

    def __post_init__(self):
        """Automatically extract basename from path if not provided."""
        if self.name is None:
            self.name = os.path.basename(self.path)

    @property
    def modified(self) -> datetime:
        """Last-modified time in the local timezone, truncated to microseconds."""
        seconds, nanos = divmod(self.mtime_ns, 1_000_000_000)
        return datetime.fromtimestamp(seconds).replace(microsecond=nanos // 1000)

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class Classification:
    """Canonical destination segments for one file."""
    type_tag: str
    year: str
    month: str
    day: str
    timestamped_name: str

    @property
    def segments(self) -> Tuple[str, str, str, str]:
        return self.type_tag, self.year, self.month, self.day

    def directory_under(self, root: Path) -> Path:
        return root.joinpath(*self.segments)

    def path_under(self, root: Path) -> Path:
        return self.directory_under(root) / self.timestamped_name


@dataclass
class FileResult:
    source: str
    outcome: FileOutcome
    destination: Optional[str] = None
    size: int = 0
    error: Optional[str] = None

    def __repr__(self):
        return f"<FileResult {self.outcome.value} {self.source} -> {self.destination}>"


@dataclass
class CleanupReport:
    """Directories removed by the cleanup pass and the ones that could not be removed."""
    removed: List[str] = field(default_factory=list)
    failures: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class OrganizeReport:
    """
    Aggregate result of one organize run.
    Per-file failures never abort a run; they show up here as SKIPPED results.
    """
    root: str
    results: List[FileResult] = field(default_factory=list)
    cleanup: CleanupReport = field(default_factory=CleanupReport)
    total_time: float = 0.0

    def add(self, result: FileResult) -> None:
        self.results.append(result)

    def count(self, outcome: FileOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    def by_outcome(self, outcome: FileOutcome) -> List[FileResult]:
        return [r for r in self.results if r.outcome == outcome]

    @property
    def processed_count(self) -> int:
        return len(self.results)

    @property
    def skipped_count(self) -> int:
        return self.count(FileOutcome.SKIPPED)

    @property
    def fully_succeeded(self) -> bool:
        """True when every discovered file reached a destination."""
        return self.skipped_count == 0

    @property
    def duplicate_bytes(self) -> int:
        return sum(r.size for r in self.by_outcome(FileOutcome.DUPLICATE))

    def print_summary(self) -> str:
        labels = {
            FileOutcome.MOVED: "📁 Moved to original",
            FileOutcome.RENAMED: "✏️  Renamed on collision",
            FileOutcome.DUPLICATE: "🔁 Moved to duplicate",
            FileOutcome.SKIPPED: "⚠️  Skipped (errors)",
        }

        lines = [
            "📊 Organize Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"Files processed: {self.processed_count}",
        ]
        for outcome, label in labels.items():
            lines.append(f"{label}: {self.count(outcome)}")

        lines.append(f"Duplicate data: {ConvertUtils.bytes_to_human(self.duplicate_bytes)}")
        lines.append(f"Empty directories removed: {len(self.cleanup.removed)}")
        if self.cleanup.failures:
            lines.append(f"Directories that could not be removed: {len(self.cleanup.failures)}")

        return "\n".join(lines)


"""
DTO for organize parameters with built-in validation.
"""

@dataclass
class OrganizeParams:
    """Parameters for an organize operation."""
    root_dir: str
    naming_policy: NamingPolicy = field(default=DEFAULT_NAMING_POLICY)

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if self.root_dir is None or not str(self.root_dir).strip():
            raise InvalidRootError("Root directory cannot be empty")
        self.root_dir = str(self.root_dir)
