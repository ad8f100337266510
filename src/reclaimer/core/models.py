"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for disk usage analysis, duplicate detection and safe deletion.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

from reclaimer.core.errors import InvalidModeError


# =============================
# Enums
# =============================

class Category(Enum):
    """
    File-type bucket used to summarize disk usage.
    Declaration order is the lookup order used by the categorizer.
    """
    DOCUMENTS = "documents"
    IMAGES = "images"
    VIDEOS = "videos"
    AUDIO = "audio"
    ARCHIVES = "archives"
    EXECUTABLES = "executables"
    CODE = "code"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            Category.DOCUMENTS: "Documents",
            Category.IMAGES: "Images",
            Category.VIDEOS: "Videos",
            Category.AUDIO: "Audio",
            Category.ARCHIVES: "Archives",
            Category.EXECUTABLES: "Programs",
            Category.CODE: "Code",
            Category.OTHER: "Other",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class MatchMode(Enum):
    """
    How files are keyed when looking for duplicates.
    """
    NAME = "name"
    SIZE = "size"
    CHECKSUM = "checksum"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            MatchMode.NAME: "Name",
            MatchMode.SIZE: "Size",
            MatchMode.CHECKSUM: "Checksum",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            MatchMode.NAME:
                "Same file name, case-insensitive (fast, distinct files may match)",
            MatchMode.SIZE:
                "Same size in bytes (fast, distinct files may match)",
            MatchMode.CHECKSUM:
                "Same content hash (slowest, recommended)",
        }
        return mapping.get(self, self.value)

    @classmethod
    def from_alias(cls, value) -> "MatchMode":
        """
        Resolve a mode from a MatchMode or one of its string aliases.
        Raises InvalidModeError for anything else.
        """
        if isinstance(value, MatchMode):
            return value
        if isinstance(value, str):
            mode = MATCH_MODE_ALIASES.get(value.strip().lower())
            if mode is not None:
                return mode
        raise InvalidModeError(
            f"Unknown match mode: {value!r}. Supported: {', '.join(MATCH_MODE_CHOICES)}"
        )

    def __repr__(self) -> str:
        return self.value


MATCH_MODE_ALIASES = {
    "name": MatchMode.NAME,
    "size": MatchMode.SIZE,
    "checksum": MatchMode.CHECKSUM,
    "hash": MatchMode.CHECKSUM,
    "content": MatchMode.CHECKSUM,
}

MATCH_MODE_CHOICES = list(MATCH_MODE_ALIASES.keys())


# =============================
# Configuration
# =============================

class ScanConfig:
    DEFAULT_MAX_DEPTH = 5
    TOP_N = 50                       # Entries kept in largest_files / largest_folders
    HASH_CHUNK_SIZE = 1024 * 1024    # Streaming block size for checksums
    DEFAULT_MAX_WORKERS = 4
    PROGRESS_QUEUE_SIZE = 256
    TEMP_SCAN_DEPTH = 2
    APP_CACHE_SCAN_DEPTH = 64


# ======================
#  Scan Records
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    Snapshot of a single file taken at scan time.
    Becomes stale if the file changes afterwards.
    """
    path: str
    name: str
    size_bytes: int
    modified_at: float
    category: Category = Category.OTHER
    depth: int = 0

    @property
    def extension(self) -> str:
        return os.path.splitext(self.name)[1].lower()

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size_bytes}>"


@dataclass(frozen=True)
class FolderRecord:
    """A directory with totals aggregated from its whole subtree."""
    path: str
    name: str
    size_bytes: int
    file_count: int
    folder_count: int

    def __repr__(self):
        return f"<FolderRecord path={self.path}, size={self.size_bytes}>"


@dataclass
class CategoryTotals:
    size_bytes: int = 0
    count: int = 0


@dataclass(frozen=True)
class CategoryShare:
    category: Category
    size_bytes: int
    count: int
    percentage: float


def _empty_category_totals() -> Dict[Category, CategoryTotals]:
    return {category: CategoryTotals() for category in Category}


@dataclass
class ScanReport:
    """
    Disk usage summary of one directory subtree.
    per_category always carries every Category, including empty ones.
    """
    root: str
    total_size_bytes: int = 0
    total_files: int = 0
    total_folders: int = 0
    per_category: Dict[Category, CategoryTotals] = field(default_factory=_empty_category_totals)
    largest_files: List[FileRecord] = field(default_factory=list)
    largest_folders: List[FolderRecord] = field(default_factory=list)
    scan_duration: float = 0.0
    cancelled: bool = False

    @classmethod
    def empty(cls, root: str) -> "ScanReport":
        return cls(root=root)

    def add_file(self, record: FileRecord) -> None:
        self.total_files += 1
        self.total_size_bytes += record.size_bytes
        totals = self.per_category[record.category]
        totals.size_bytes += record.size_bytes
        totals.count += 1
        self.largest_files.append(record)

    def merge(self, other: "ScanReport") -> None:
        """
        Fold a partial report for a subtree into this one.
        Sums are order-independent; list order follows merge order.
        """
        self.total_size_bytes += other.total_size_bytes
        self.total_files += other.total_files
        self.total_folders += other.total_folders
        for category, totals in other.per_category.items():
            mine = self.per_category[category]
            mine.size_bytes += totals.size_bytes
            mine.count += totals.count
        self.largest_files.extend(other.largest_files)
        self.largest_folders.extend(other.largest_folders)
        self.cancelled = self.cancelled or other.cancelled

    def finalize(self, limit: int = ScanConfig.TOP_N) -> None:
        """Sort the presentation lists by size (descending) and keep the top entries."""
        self.largest_files.sort(key=lambda f: f.size_bytes, reverse=True)
        del self.largest_files[limit:]
        self.largest_folders.sort(key=lambda f: f.size_bytes, reverse=True)
        del self.largest_folders[limit:]

    def category_breakdown(self) -> List[CategoryShare]:
        """Non-empty categories, largest first, with their share of the total in percent."""
        shares = []
        for category, totals in self.per_category.items():
            if totals.size_bytes <= 0:
                continue
            percentage = 0.0
            if self.total_size_bytes > 0:
                percentage = round(totals.size_bytes / self.total_size_bytes * 100, 1)
            shares.append(CategoryShare(category, totals.size_bytes, totals.count, percentage))
        shares.sort(key=lambda s: s.size_bytes, reverse=True)
        return shares

    def __repr__(self):
        return f"<ScanReport root={self.root}, files={self.total_files}, size={self.total_size_bytes}>"


# ======================
#  Duplicates
# ======================

@dataclass
class DuplicateGroup:
    """
    Two or more files sharing a name, size or content hash.
    The first member is the copy conventionally kept.
    """
    key: str
    match_mode: MatchMode
    members: List[FileRecord]

    def __post_init__(self):
        if len(self.members) < 2:
            raise ValueError("A duplicate group needs at least two members")

    @property
    def total_size_bytes(self) -> int:
        return sum(f.size_bytes for f in self.members)

    @property
    def wasted_bytes(self) -> int:
        """Space freed by keeping the first member and deleting the rest."""
        return self.total_size_bytes - self.members[0].size_bytes

    @property
    def duplicate_count(self) -> int:
        return len(self.members)

    def __repr__(self):
        return f"<DuplicateGroup key={self.key}, count={len(self.members)}>"


@dataclass
class DuplicateScanResult:
    match_mode: MatchMode
    groups: List[DuplicateGroup] = field(default_factory=list)
    files_scanned: int = 0
    cancelled: bool = False

    @property
    def total_groups(self) -> int:
        return len(self.groups)

    @property
    def total_files(self) -> int:
        return sum(g.duplicate_count for g in self.groups)

    @property
    def total_wasted_space(self) -> int:
        return sum(g.wasted_bytes for g in self.groups)


# ======================
#  Deletion
# ======================

@dataclass(frozen=True)
class DeletionTarget:
    path: str
    size_bytes: int = 0


@dataclass(frozen=True)
class ItemError:
    path: str
    reason: str


@dataclass
class DeletionRequest:
    """Items selected by the caller for removal."""
    targets: List[DeletionTarget]
    dry_run: bool = True
    use_trash: bool = False

    def __post_init__(self):
        normalized = []
        for target in self.targets:
            if isinstance(target, DeletionTarget):
                normalized.append(target)
            elif isinstance(target, dict):
                normalized.append(DeletionTarget(
                    path=str(target["path"]),
                    size_bytes=int(target.get("size_bytes", target.get("sizeBytes", 0)) or 0),
                ))
            else:
                raise ValueError(f"Unsupported deletion target: {target!r}")
        for target in normalized:
            if not target.path:
                raise ValueError("Deletion target path cannot be empty")
            if target.size_bytes < 0:
                raise ValueError(f"Negative size for {target.path}")
        self.targets = normalized


@dataclass
class DeletionResult:
    dry_run: bool
    deleted_count: int = 0
    failed_count: int = 0
    bytes_freed: int = 0
    per_item_errors: List[ItemError] = field(default_factory=list)

    def record_success(self, size_bytes: int) -> None:
        self.deleted_count += 1
        self.bytes_freed += size_bytes

    def record_failure(self, path: str, reason: str) -> None:
        self.failed_count += 1
        self.per_item_errors.append(ItemError(path=path, reason=reason))


# ======================
#  Walking and Progress
# ======================

@dataclass
class WalkStats:
    files: int = 0
    folders: int = 0
    bytes: int = 0
    errors: int = 0
    cancelled: bool = False


@dataclass(frozen=True)
class ProgressEvent:
    """Running totals pushed to the caller while a scan is in progress."""
    stage: str
    files_scanned: int
    folders_scanned: int
    current_path: str
    bytes_so_far: int
    total: Optional[int] = None


# ======================
#  Command Parameters
# ======================

@dataclass
class AnalyzeParams:
    """Parameters for a disk usage analysis."""
    root: str
    max_depth: int = ScanConfig.DEFAULT_MAX_DEPTH
    test_mode: bool = False

    def __post_init__(self):
        if not self.root:
            raise ValueError("Root directory cannot be empty")
        if self.max_depth < 0:
            raise ValueError("Maximum depth cannot be negative")
        self.root = str(self.root)


@dataclass
class DuplicateScanParams:
    """Parameters for a duplicate scan. `mode` accepts a MatchMode or its alias."""
    roots: List[str]
    mode: MatchMode = MatchMode.CHECKSUM
    max_depth: int = ScanConfig.DEFAULT_MAX_DEPTH
    test_mode: bool = False

    def __post_init__(self):
        self.mode = MatchMode.from_alias(self.mode)
        if isinstance(self.roots, (str, os.PathLike)):
            self.roots = [self.roots]
        self.roots = [str(r) for r in self.roots if str(r).strip()]
        if not self.roots:
            raise ValueError("At least one root directory is required")
        if self.max_depth < 0:
            raise ValueError("Maximum depth cannot be negative")


# ======================
#  Results
# ======================

T = TypeVar("T")


@dataclass
class CommandResult(Generic[T]):
    """
    Outcome of a command: either a value or an error message, never both.
    """
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "CommandResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "CommandResult[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise RuntimeError(self.error)
        return self.value


# ======================
#  Cleanup Scans
# ======================

@dataclass(frozen=True)
class CleanupItem:
    path: str
    size_bytes: int
    app: Optional[str] = None


@dataclass
class CleanupCategory:
    name: str
    items: List[CleanupItem] = field(default_factory=list)

    @property
    def files_found(self) -> int:
        return len(self.items)

    @property
    def total_size_bytes(self) -> int:
        return sum(i.size_bytes for i in self.items)


@dataclass(frozen=True)
class BrowserCache:
    key: str
    name: str
    cache_path: str
    cache_size_bytes: int

    @property
    def can_clean(self) -> bool:
        return self.cache_size_bytes > 0


@dataclass
class SystemScanResult:
    categories: List[CleanupCategory] = field(default_factory=list)

    @property
    def total_size_bytes(self) -> int:
        return sum(c.total_size_bytes for c in self.categories)

    @property
    def total_files(self) -> int:
        return sum(c.files_found for c in self.categories)
