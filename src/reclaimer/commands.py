"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

commands.py
Request/response entry points of the cleaner core.
This is the single place where front-ends (GUI, CLI, IPC bridge) call into the library.

Every command:
- validates its input through the params dataclass (ValueError / InvalidModeError propagate)
- returns sample payloads when test_mode is set, without touching the filesystem
- turns any other unexpected failure into CommandResult.failure

Usage:
    command = AnalyzeDiskCommand()
    result = command.execute(
        AnalyzeParams(root="/home/user"),
        progress_callback=ProgressChannel(),
        stopped_flag=lambda: cancel_requested
    )
    if result.ok:
        report = result.value
"""
import logging
import time
from typing import Callable, Iterable, List, Optional, TypeVar, Union

from reclaimer.core.analyzer import DiskUsageAnalyzer
from reclaimer.core.deleter import SafeDeleter
from reclaimer.core.grouper import DuplicateFinderImpl
from reclaimer.core.interfaces import ProgressCallback, StoppedFlag
from reclaimer.core.models import (
    AnalyzeParams, BrowserCache, CommandResult, DeletionRequest, DeletionResult, DeletionTarget,
    DuplicateScanParams, DuplicateScanResult, ScanReport, SystemScanResult)
from reclaimer.core import sample_data
from reclaimer.services.cleanup_service import DEFAULT_BROWSERS, CleanupService

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run(name: str, operation: Callable[[], T]) -> CommandResult[T]:
    try:
        return CommandResult.success(operation())
    except ValueError:
        raise
    except Exception as e:
        logger.exception(f"{name} failed")
        return CommandResult.failure(f"{name} failed: {e}")


class AnalyzeDiskCommand:
    """Disk usage breakdown of one directory tree."""

    def __init__(self, analyzer: DiskUsageAnalyzer = None):
        self.analyzer = analyzer or DiskUsageAnalyzer()

    def execute(
            self,
            params: AnalyzeParams,
            progress_callback: Optional[ProgressCallback] = None,
            stopped_flag: Optional[StoppedFlag] = None
    ) -> CommandResult[ScanReport]:
        if params.test_mode:
            logger.debug(f"Test mode: sample disk analysis for {params.root}")
            return CommandResult.success(sample_data.sample_scan_report(params.root))

        return _run("Disk analysis", lambda: self.analyzer.analyze(
            params.root,
            max_depth=params.max_depth,
            progress_callback=progress_callback,
            stopped_flag=stopped_flag
        ))


class FindDuplicatesCommand:
    """
    Duplicate search over one or more roots.

    Args of execute:
        params: Validated scan parameters (roots, mode, max_depth)
        progress_callback: Receives ProgressEvent with stage "scanning" and then "hashing"
        stopped_flag: () -> bool, True when the scan should stop

    Returns:
        CommandResult wrapping a DuplicateScanResult; a cancelled scan is still a success
        with result.cancelled set.
    """

    def __init__(self, finder: DuplicateFinderImpl = None):
        self.finder = finder or DuplicateFinderImpl()

    def execute(
            self,
            params: DuplicateScanParams,
            progress_callback: Optional[ProgressCallback] = None,
            stopped_flag: Optional[StoppedFlag] = None
    ) -> CommandResult[DuplicateScanResult]:
        if params.test_mode:
            logger.debug(f"Test mode: sample duplicate scan ({params.mode.value})")
            return CommandResult.success(sample_data.sample_duplicate_result(params.mode))

        return _run("Duplicate scan", lambda: self.finder.find(
            params.roots,
            mode=params.mode,
            max_depth=params.max_depth,
            progress_callback=progress_callback,
            stopped_flag=stopped_flag
        ))


class DeleteItemsCommand:
    """Deletion of cleaner targets (temp files, caches) behind the safe-path gate."""

    def __init__(self, deleter: SafeDeleter = None):
        self.deleter = deleter or SafeDeleter()

    def execute(self, request: DeletionRequest, test_mode: bool = False) -> CommandResult[DeletionResult]:
        if test_mode:
            return CommandResult.success(sample_data.sample_deletion_result(request.targets, request.dry_run))

        started = time.monotonic()
        result = _run("Deletion", lambda: self.deleter.delete(
            request.targets,
            dry_run=request.dry_run,
            use_trash=request.use_trash
        ))
        logger.debug(f"Deletion of {len(request.targets)} targets took {time.monotonic() - started:.2f}s")
        return result


class DeleteDuplicatesCommand:
    """Removal of duplicate files picked by the user. Trash is used unless told otherwise."""

    def __init__(self, deleter: SafeDeleter = None):
        self.deleter = deleter or SafeDeleter()

    def execute(
            self,
            paths: Iterable[Union[str, DeletionTarget]],
            dry_run: bool = True,
            use_trash: bool = True,
            test_mode: bool = False
    ) -> CommandResult[DeletionResult]:
        paths = list(paths)
        if test_mode:
            targets = [p if isinstance(p, DeletionTarget) else DeletionTarget(path=str(p)) for p in paths]
            return CommandResult.success(sample_data.sample_deletion_result(targets, dry_run))

        return _run("Duplicate deletion", lambda: self.deleter.delete_duplicates(
            paths,
            dry_run=dry_run,
            use_trash=use_trash
        ))


class SystemScanCommand:
    """Temporary files and application caches, sized but not deleted."""

    def __init__(self, cleanup_service: CleanupService = None):
        self.cleanup_service = cleanup_service or CleanupService()

    def execute(self, test_mode: bool = False) -> CommandResult[SystemScanResult]:
        if test_mode:
            return CommandResult.success(sample_data.sample_system_scan())

        return _run("System scan", self.cleanup_service.scan_system)


class BrowserScanCommand:
    """Cache size per browser. Unknown browser keys are skipped."""

    def __init__(self, cleanup_service: CleanupService = None):
        self.cleanup_service = cleanup_service or CleanupService()

    def execute(
            self,
            browsers: Iterable[str] = DEFAULT_BROWSERS,
            test_mode: bool = False
    ) -> CommandResult[List[BrowserCache]]:
        browsers = [b.strip().lower() for b in browsers]
        if test_mode:
            return CommandResult.success(sample_data.sample_browser_caches(browsers))

        return _run("Browser scan", lambda: self.cleanup_service.scan_browser_caches(browsers))
