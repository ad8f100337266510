"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Implements depth-bounded directory traversal.
Features:
- Explicit stack instead of recursion, so deep trees cannot exhaust the call stack
- Post-order FolderRecords carrying totals aggregated from the subtree
- Per-entry fault tolerance: unreadable entries and directories are skipped
- Protected paths are never stat-ed or descended into
- Symbolic links are never followed
"""

import logging
import os
from typing import Iterator, List, Optional, Tuple

from reclaimer.core.categorizer import categorize
from reclaimer.core.interfaces import EntryCallback, ProgressCallback, StoppedFlag, TreeWalker
from reclaimer.core.models import FileRecord, FolderRecord, ProgressEvent, WalkStats
from reclaimer.core.policy import DEFAULT_POLICY, PathPolicy

logger = logging.getLogger(__name__)


class _Frame:
    """A directory on the walk stack. `depth` is the depth of its children."""
    __slots__ = ("path", "name", "depth", "entries", "files", "folders", "bytes")

    def __init__(self, path: str, name: str, depth: int, entries: Iterator[os.DirEntry]):
        self.path = path
        self.name = name
        self.depth = depth
        self.entries = entries
        self.files = 0
        self.folders = 0
        self.bytes = 0


class TreeWalkerImpl(TreeWalker):
    """
    Walks a directory tree with an explicit worklist.

    Depth semantics: the root's direct children are depth 0. A directory
    whose children would sit at depth >= max_depth is reported but not listed.
    """

    def __init__(self, policy: PathPolicy = DEFAULT_POLICY):
        self.policy = policy

    def walk(
            self,
            root: str,
            max_depth: int,
            on_entry: EntryCallback,
            progress_callback: Optional[ProgressCallback] = None,
            stopped_flag: Optional[StoppedFlag] = None,
            start_depth: int = 0
    ) -> WalkStats:
        stats = WalkStats()
        root = str(root)

        if self.policy.is_protected(root):
            logger.debug(f"Refusing to walk protected root: {root}")
            return stats
        if start_depth >= max_depth:
            return stats

        entries = self._list_entries(root, stats)
        root_frame = _Frame(root, os.path.basename(root), start_depth, iter(entries))
        stack = [root_frame]

        while stack:
            if stopped_flag and stopped_flag():
                logger.debug(f"Walk of {root} interrupted by user")
                stats.cancelled = True
                break

            frame = stack[-1]
            entry = next(frame.entries, None)

            if entry is None:
                stack.pop()
                if frame is not root_frame:
                    on_entry(FolderRecord(
                        path=frame.path,
                        name=frame.name,
                        size_bytes=frame.bytes,
                        file_count=frame.files,
                        folder_count=frame.folders,
                    ))
                    parent = stack[-1]
                    parent.files += frame.files
                    parent.folders += frame.folders
                    parent.bytes += frame.bytes
                continue

            if self.policy.is_protected(entry.path):
                logger.debug(f"Skipping protected path: {entry.path}")
                continue

            try:
                if entry.is_symlink():
                    logger.debug(f"Skipping symbolic link: {entry.path}")
                    continue

                if entry.is_dir(follow_symlinks=False):
                    child_depth = frame.depth + 1
                    # Beyond the cutoff the folder still counts, it just is not listed
                    child_entries = self._list_entries(entry.path, stats) if child_depth < max_depth else []
                    stats.folders += 1
                    frame.folders += 1
                    stack.append(_Frame(entry.path, entry.name, child_depth, iter(child_entries)))

                elif entry.is_file(follow_symlinks=False):
                    record = self._make_record(entry, frame.depth)
                    stats.files += 1
                    stats.bytes += record.size_bytes
                    frame.files += 1
                    frame.bytes += record.size_bytes
                    on_entry(record)

                else:
                    continue

            except OSError as e:
                stats.errors += 1
                logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
                continue

            if progress_callback:
                progress_callback(ProgressEvent(
                    stage="scanning",
                    files_scanned=stats.files,
                    folders_scanned=stats.folders,
                    current_path=entry.path,
                    bytes_so_far=stats.bytes,
                ))

        return stats

    def list_children(self, directory: str, depth: int = 0) -> Tuple[List[FileRecord], List[str]]:
        """
        Single-level listing with the same skip rules as walk().
        Returns file records and the paths of subdirectories.
        """
        files: List[FileRecord] = []
        subdirs: List[str] = []
        directory = str(directory)
        if self.policy.is_protected(directory):
            return files, subdirs

        for entry in self._list_entries(directory, WalkStats()):
            if self.policy.is_protected(entry.path):
                continue
            try:
                if entry.is_symlink():
                    continue
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
                elif entry.is_file(follow_symlinks=False):
                    files.append(self._make_record(entry, depth))
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
        return files, subdirs

    @staticmethod
    def _make_record(entry: os.DirEntry, depth: int) -> FileRecord:
        st = entry.stat(follow_symlinks=False)
        return FileRecord(
            path=entry.path,
            name=entry.name,
            size_bytes=st.st_size,
            modified_at=st.st_mtime,
            category=categorize(entry.name),
            depth=depth,
        )

    @staticmethod
    def _list_entries(path: str, stats: WalkStats) -> List[os.DirEntry]:
        """Directory listing in OS order; an unreadable directory lists as empty."""
        entries: List[os.DirEntry] = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    entries.append(entry)
        except OSError as e:
            stats.errors += 1
            logger.debug(f"Cannot list directory {path}: {e}")
        return entries
