"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements duplicate detection by name, size or content checksum.

Groups keep files in discovery order (root-list order, then walk order),
and groups themselves are ordered by the first discovery of their key.
Only keys shared by two or more files become groups.
"""

import logging
import os
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from reclaimer.core.errors import ChecksumError
from reclaimer.core.hasher import HasherImpl
from reclaimer.core.interfaces import Hasher, ProgressCallback, StoppedFlag, TreeWalker
from reclaimer.core.models import (
    DuplicateGroup, DuplicateScanResult, FileRecord, FolderRecord, MatchMode, ProgressEvent, ScanConfig)
from reclaimer.core.progress import ProgressTracker
from reclaimer.core.walker import TreeWalkerImpl

logger = logging.getLogger(__name__)


class FileGrouperImpl:
    """
    Groups FileRecords by a computed key.
    Uses an injected Hasher instance for the checksum mode.
    """

    def __init__(self, hasher: Hasher = None, max_workers: int = 1):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.hasher = hasher or HasherImpl()
        self.max_workers = max_workers

    def group_by_name(self, files: List[FileRecord]) -> Dict[str, List[FileRecord]]:
        """Groups files by their lowercased base name."""
        return self._group_by(files, lambda f: f.name.lower())

    def group_by_size(self, files: List[FileRecord]) -> Dict[str, List[FileRecord]]:
        """Groups files by size. Empty files are never grouped."""
        return self._group_by(files, lambda f: str(f.size_bytes) if f.size_bytes > 0 else None)

    def group_by_checksum(
            self,
            files: List[FileRecord],
            progress_callback: Optional[ProgressCallback] = None,
            stopped_flag: Optional[StoppedFlag] = None
    ) -> Tuple[Dict[str, List[FileRecord]], bool]:
        """
        Groups files by full content hash.
        Only files sharing their size with another file are hashed.
        Empty files all share one digest, so two or more of them form a group.
        Unreadable files are left out of every group.

        Returns:
            (groups, cancelled)
        """
        candidates = self._same_size_candidates(files)
        digests, cancelled = self._checksum_all(candidates, progress_callback, stopped_flag)
        keyed = {f.path: d for f, d in zip(candidates, digests)}
        groups = self._group_by(candidates, lambda f: keyed.get(f.path))
        return groups, cancelled

    @staticmethod
    def _same_size_candidates(files: List[FileRecord]) -> List[FileRecord]:
        sizes = defaultdict(int)
        for f in files:
            sizes[f.size_bytes] += 1
        return [f for f in files if sizes[f.size_bytes] >= 2]

    def _checksum_all(
            self,
            files: List[FileRecord],
            progress_callback: Optional[ProgressCallback],
            stopped_flag: Optional[StoppedFlag]
    ) -> Tuple[List[Optional[str]], bool]:
        """Digest per file (None when unreadable or not reached), in input order."""
        total = len(files)
        digests: List[Optional[str]] = [None] * total
        cancelled = False
        hashed_bytes = 0

        def task(record: FileRecord) -> Tuple[Optional[str], bool]:
            # Cancellation is checked between files, never in the middle of one
            if stopped_flag and stopped_flag():
                return None, True
            try:
                return self.hasher.checksum(record.path), False
            except ChecksumError as e:
                logger.debug(f"Excluding unreadable file from checksum groups: {e}")
                return None, False

        def consume(results):
            nonlocal cancelled, hashed_bytes
            for index, (digest, stopped) in enumerate(results):
                if stopped:
                    cancelled = True
                    break
                digests[index] = digest
                hashed_bytes += files[index].size_bytes
                if progress_callback:
                    progress_callback(ProgressEvent(
                        stage="hashing",
                        files_scanned=index + 1,
                        folders_scanned=0,
                        current_path=files[index].path,
                        bytes_so_far=hashed_bytes,
                        total=total,
                    ))

        if self.max_workers == 1 or total <= 1:
            consume(task(f) for f in files)
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                consume(executor.map(task, files))

        if cancelled:
            logger.debug("Checksum pass interrupted by user")
        return digests, cancelled

    @staticmethod
    def _group_by(files: List[FileRecord], key_func: Callable[[FileRecord], Any]) -> Dict[Any, List[FileRecord]]:
        """
        Helper method to group files by any computed key.
        Files whose key is None are skipped.
        Args:
            files: List of files to group
            key_func: Function that computes a hashable key from a FileRecord
        Returns:
            Dict[key, List[FileRecord]] holding only keys shared by 2+ files
        """
        groups = defaultdict(list)
        for file in files:
            key = key_func(file)
            if key is not None:
                groups[key].append(file)

        return {key: group for key, group in groups.items() if len(group) >= 2}


class DuplicateFinderImpl:
    """
    Walks one or more roots and reports groups of duplicate files.

    Attributes:
        walker: Tree walker used to collect files from every root
        grouper: Grouping strategy implementation
    """

    def __init__(self, walker: TreeWalker = None, grouper: FileGrouperImpl = None):
        self.walker = walker or TreeWalkerImpl()
        self.grouper = grouper or FileGrouperImpl()

    def find(
            self,
            root_paths: Sequence[str],
            mode: Union[MatchMode, str] = MatchMode.CHECKSUM,
            max_depth: int = ScanConfig.DEFAULT_MAX_DEPTH,
            progress_callback: Optional[ProgressCallback] = None,
            stopped_flag: Optional[StoppedFlag] = None
    ) -> DuplicateScanResult:
        """
        Raises:
            InvalidModeError: If mode is not a known MatchMode or alias
        """
        mode = MatchMode.from_alias(mode)
        result = DuplicateScanResult(match_mode=mode)

        files, cancelled = self.collect_files(root_paths, max_depth, progress_callback, stopped_flag)
        result.files_scanned = len(files)
        if cancelled:
            result.cancelled = True
            return result

        logger.debug(f"Grouping {len(files)} files by {mode.value}")
        if mode is MatchMode.NAME:
            groups = self.grouper.group_by_name(files)
        elif mode is MatchMode.SIZE:
            groups = self.grouper.group_by_size(files)
        else:
            groups, cancelled = self.grouper.group_by_checksum(files, progress_callback, stopped_flag)
            result.cancelled = cancelled

        result.groups = [
            DuplicateGroup(key=key, match_mode=mode, members=members)
            for key, members in groups.items()
        ]
        logger.debug(
            f"Found {result.total_groups} duplicate groups, "
            f"{result.total_wasted_space} bytes reclaimable"
        )
        return result

    def collect_files(
            self,
            root_paths: Sequence[str],
            max_depth: int,
            progress_callback: Optional[ProgressCallback] = None,
            stopped_flag: Optional[StoppedFlag] = None
    ) -> Tuple[List[FileRecord], bool]:
        """
        Flat list of files across roots, in root order then walk order.
        A file reachable from overlapping roots is collected once.
        """
        files: List[FileRecord] = []
        seen_paths = set()
        tracker = ProgressTracker(progress_callback)

        def on_entry(record: Union[FileRecord, FolderRecord]) -> None:
            if isinstance(record, FileRecord):
                key = os.path.normcase(os.path.abspath(record.path))
                if key in seen_paths:
                    return
                seen_paths.add(key)
                files.append(record)
                tracker.update(record.path, files=1, size_bytes=record.size_bytes)
            else:
                tracker.update(record.path, folders=1)

        for root in root_paths:
            root = str(root)
            if self.walker.policy.is_protected(root):
                logger.warning(f"Skipping protected root: {root}")
                continue
            if not os.path.isdir(root):
                logger.warning(f"Skipping missing or non-directory root: {root}")
                continue
            stats = self.walker.walk(root, max_depth, on_entry, stopped_flag=stopped_flag)
            if stats.cancelled:
                return files, True
        return files, False
