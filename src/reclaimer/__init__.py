"""
Reclaimer: disk usage analysis, duplicate detection and safe cleanup.

Core features:
- Disk usage breakdown by file category, largest files and folders
- Three duplicate modes: NAME, SIZE, CHECKSUM (xxHash64 content hash)
- Gated deletion: protected system paths are never touched, dry run by default
- Temporary file, application cache and browser cache sizing
- CLI interface for headless usage
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("reclaimer")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Public API
from reclaimer.commands import (
    AnalyzeDiskCommand, BrowserScanCommand, DeleteDuplicatesCommand, DeleteItemsCommand,
    FindDuplicatesCommand, SystemScanCommand)
from reclaimer.core import (
    AnalyzeParams, Category, CommandResult, DeletionRequest, DeletionResult, DeletionTarget,
    DuplicateGroup, DuplicateScanParams, DuplicateScanResult, FileRecord, FolderRecord, MatchMode,
    ProgressChannel, ProgressEvent, ScanReport, SystemScanResult)
from reclaimer.services import CleanupService, DuplicateService, FileService
from reclaimer.utils.convert_utils import ConvertUtils, format_bytes

__all__ = [
    "AnalyzeDiskCommand",
    "FindDuplicatesCommand",
    "DeleteItemsCommand",
    "DeleteDuplicatesCommand",
    "SystemScanCommand",
    "BrowserScanCommand",
    "AnalyzeParams",
    "DuplicateScanParams",
    "DeletionRequest",
    "DeletionTarget",
    "DeletionResult",
    "CommandResult",
    "Category",
    "MatchMode",
    "FileRecord",
    "FolderRecord",
    "ScanReport",
    "DuplicateGroup",
    "DuplicateScanResult",
    "SystemScanResult",
    "ProgressChannel",
    "ProgressEvent",
    "CleanupService",
    "DuplicateService",
    "FileService",
    "ConvertUtils",
    "format_bytes",
    "__version__",
]
