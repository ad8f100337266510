"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the scanning core.

Key Components:
---------------
- HashAlgorithm: Factory for incremental hash objects (xxHash, MD5, ...).
- Hasher: Interface for computing a streamed content checksum of a file.
- TreeWalker: Interface for depth-bounded directory traversal.
"""

from typing import Callable, List, Optional, Protocol, Tuple, Union

from reclaimer.core.models import FileRecord, FolderRecord, ProgressEvent, WalkStats
from reclaimer.core.policy import PathPolicy

ProgressCallback = Callable[[ProgressEvent], None]
StoppedFlag = Callable[[], bool]
EntryCallback = Callable[[Union[FileRecord, FolderRecord]], None]


# ===== Interfaces =====

class HashState(Protocol):
    """Running digest, as returned by hashlib or xxhash constructors."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like MD5 or xxHash
    without affecting the rest of the duplicate detection logic.
    """
    name: str

    def new(self) -> HashState:
        """Returns a fresh incremental hash object."""
        ...


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""
    def checksum(self, path: str) -> str: ...


class TreeWalker(Protocol):
    """
    Interface for walking directory trees.

    Methods:
        walk: Visits every file and folder below root, up to max_depth.
        list_children: Lists a single directory level.
    """
    policy: PathPolicy

    def walk(
        self,
        root: str,
        max_depth: int,
        on_entry: EntryCallback,
        progress_callback: Optional[ProgressCallback] = None,
        stopped_flag: Optional[StoppedFlag] = None,
        start_depth: int = 0
    ) -> WalkStats:
        """
        Walk the tree below root.

        Args:
            root: Directory whose children form depth start_depth.
            max_depth: Directories whose children would sit at this depth or deeper are not listed.
            on_entry: Receives every FileRecord, and every FolderRecord once its subtree is done.
            progress_callback: Optional sink for running totals.
            stopped_flag: Function that returns True if the walk should stop.
            start_depth: Depth assigned to root's children (used when walking a subtree).

        Returns:
            WalkStats with the totals of everything visited.
        """
        ...

    def list_children(self, directory: str, depth: int = 0) -> Tuple[List[FileRecord], List[str]]:
        """Files and subdirectory paths directly inside a directory."""
        ...
