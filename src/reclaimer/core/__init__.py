"""
Core scanning engine: path policy, walker, categorizer, hasher, analyzer, duplicate finder and deleter.

- PathPolicy: protected-path and safe-path predicates over static tables
- TreeWalkerImpl: iterative depth-bounded traversal with progress and cancellation
- categorize: file name to Category by extension
- HasherImpl + XXHashAlgorithmImpl / MD5AlgorithmImpl: streaming content checksums
- DiskUsageAnalyzer: ScanReport for a folder, top-level subtrees walked in a bounded pool
- FileGrouperImpl + DuplicateFinderImpl: name, size and checksum duplicate groups
- SafeDeleter: gated deletion with dry run and per-item errors

All components are pure Python with no GUI dependencies.
"""

from .errors import ReclaimerError, InvalidModeError, ChecksumError
from .models import (
    Category, MatchMode, ScanConfig, FileRecord, FolderRecord, CategoryTotals, CategoryShare,
    ScanReport, DuplicateGroup, DuplicateScanResult, DeletionTarget, DeletionRequest, DeletionResult,
    ItemError, WalkStats, ProgressEvent, AnalyzeParams, DuplicateScanParams, CommandResult,
    CleanupItem, CleanupCategory, BrowserCache, SystemScanResult)
from .policy import PathPolicy, DEFAULT_POLICY
from .categorizer import categorize
from .progress import ProgressChannel, ProgressTracker
from .walker import TreeWalkerImpl
from .hasher import HasherImpl, XXHashAlgorithmImpl, MD5AlgorithmImpl
from .analyzer import DiskUsageAnalyzer
from .grouper import FileGrouperImpl, DuplicateFinderImpl
from .deleter import SafeDeleter

__all__ = [
    "ReclaimerError",
    "InvalidModeError",
    "ChecksumError",
    "Category",
    "MatchMode",
    "ScanConfig",
    "FileRecord",
    "FolderRecord",
    "CategoryTotals",
    "CategoryShare",
    "ScanReport",
    "DuplicateGroup",
    "DuplicateScanResult",
    "DeletionTarget",
    "DeletionRequest",
    "DeletionResult",
    "ItemError",
    "WalkStats",
    "ProgressEvent",
    "AnalyzeParams",
    "DuplicateScanParams",
    "CommandResult",
    "CleanupItem",
    "CleanupCategory",
    "BrowserCache",
    "SystemScanResult",
    "PathPolicy",
    "DEFAULT_POLICY",
    "categorize",
    "ProgressChannel",
    "ProgressTracker",
    "TreeWalkerImpl",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "MD5AlgorithmImpl",
    "DiskUsageAnalyzer",
    "FileGrouperImpl",
    "DuplicateFinderImpl",
    "SafeDeleter",
]
