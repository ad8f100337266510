"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/analyzer.py
Disk usage analysis: size totals, category breakdown, largest files and folders.

The root is listed once; every top-level subdirectory is an independent
subtree walked on a bounded thread pool. Each subtree produces a partial
ScanReport, and partials are merged in listing order at the join point,
so totals never depend on scheduling.
"""

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from reclaimer.core.interfaces import ProgressCallback, StoppedFlag, TreeWalker
from reclaimer.core.models import FileRecord, FolderRecord, ScanConfig, ScanReport
from reclaimer.core.progress import ProgressTracker
from reclaimer.core.walker import TreeWalkerImpl

logger = logging.getLogger(__name__)


class DiskUsageAnalyzer:
    """
    Builds a ScanReport for a directory subtree.

    Attributes:
        walker: Tree walker used for every subtree
        max_workers: Upper bound on concurrently walked subtrees (1 = sequential)
    """

    def __init__(self, walker: TreeWalker = None, max_workers: int = ScanConfig.DEFAULT_MAX_WORKERS):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.walker = walker or TreeWalkerImpl()
        self.max_workers = max_workers

    def analyze(
            self,
            root: str,
            max_depth: int = ScanConfig.DEFAULT_MAX_DEPTH,
            progress_callback: Optional[ProgressCallback] = None,
            stopped_flag: Optional[StoppedFlag] = None
    ) -> ScanReport:
        root = str(root)
        start_time = time.time()
        report = ScanReport.empty(root)

        if not self._is_scannable_root(root):
            return report
        if max_depth <= 0:
            return report
        if stopped_flag and stopped_flag():
            report.cancelled = True
            return report

        logger.debug(f"Analyzing {root} (max_depth={max_depth}, workers={self.max_workers})")
        tracker = ProgressTracker(progress_callback)

        files, subdirs = self.walker.list_children(root)
        for record in files:
            report.add_file(record)
            tracker.update(record.path, files=1, size_bytes=record.size_bytes)

        if self.max_workers == 1 or len(subdirs) <= 1:
            partials = [
                self._analyze_subtree(d, max_depth, tracker, stopped_flag)
                for d in subdirs
            ]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = [
                    executor.submit(self._analyze_subtree, d, max_depth, tracker, stopped_flag)
                    for d in subdirs
                ]
                partials = [future.result() for future in futures]

        for partial in partials:
            report.merge(partial)

        report.finalize(ScanConfig.TOP_N)
        report.scan_duration = time.time() - start_time
        logger.debug(
            f"Analysis of {root} finished: {report.total_files} files, "
            f"{report.total_folders} folders, {report.total_size_bytes} bytes "
            f"in {report.scan_duration:.2f}s"
        )
        return report

    def _analyze_subtree(
            self,
            directory: str,
            max_depth: int,
            tracker: ProgressTracker,
            stopped_flag: Optional[StoppedFlag]
    ) -> ScanReport:
        """Partial report for one top-level subdirectory, including its own FolderRecord."""
        partial = ScanReport.empty(directory)
        tracker.update(directory, folders=1)

        def on_entry(record: Union[FileRecord, FolderRecord]) -> None:
            if isinstance(record, FileRecord):
                partial.add_file(record)
                tracker.update(record.path, files=1, size_bytes=record.size_bytes)
            else:
                tracker.update(record.path, folders=1)

        # The subdirectory's children sit one level below the root's children
        stats = self.walker.walk(
            directory,
            max_depth,
            on_entry,
            stopped_flag=stopped_flag,
            start_depth=1,
        )

        # largest_folders lists the root's direct subfolders only
        partial.total_folders += stats.folders + 1
        partial.cancelled = stats.cancelled
        if stats.bytes > 0:
            partial.largest_folders.append(FolderRecord(
                path=directory,
                name=os.path.basename(directory),
                size_bytes=stats.bytes,
                file_count=stats.files,
                folder_count=stats.folders,
            ))
        return partial

    def _is_scannable_root(self, root: str) -> bool:
        if self.walker.policy.is_protected(root):
            logger.warning(f"Root is protected, nothing to analyze: {root}")
            return False
        if not os.path.isdir(root):
            logger.warning(f"Root does not exist or is not a directory: {root}")
            return False
        return True
