"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/policy.py
Static rules deciding which paths may be scanned and which may be deleted.

Protected entries come in three shapes:
- absolute roots ("/proc", "c:/windows"): match the root itself and everything below it
- bare directory names (".git", "node_modules"): match any path component
- relative fragments (".local/share/trash"): match a run of consecutive components

Paths are compared after normalization: backslashes become slashes,
redundant separators and dot segments are collapsed, and case is folded.
Symlinks are not resolved.
"""

import posixpath
import re
from typing import Iterable, Tuple

_DRIVE_PATTERN = re.compile(r"^[a-z]:/")

PROTECTED_PATHS: Tuple[str, ...] = (
    # Windows system locations
    "C:\\Windows",
    "C:\\Program Files",
    "C:\\Program Files (x86)",
    "C:\\ProgramData\\Microsoft",
    "C:\\System Volume Information",
    # POSIX system locations
    "/proc",
    "/sys",
    "/dev",
    "/boot",
    "/bin",
    "/sbin",
    "/usr/bin",
    "/usr/sbin",
    "/usr/lib",
    "/etc",
    "/System",
    # Recycle bins and trash
    "$Recycle.Bin",
    "Recycler",
    ".Trash",
    ".Trashes",
    ".local/share/Trash",
    "System Volume Information",
    # Package manager and version control metadata
    "node_modules",
    ".git",
    ".svn",
    ".hg",
)

SAFE_PATH_MARKERS: Tuple[str, ...] = (
    "temp",
    "tmp",
    "cache",
)


def normalize_path(path) -> str:
    """Platform-neutral, lowercase form of a path used for all policy matching."""
    raw = str(path).replace("\\", "/")
    if not raw:
        return ""
    # posixpath.normpath keeps a leading "//", which is never meaningful here
    normalized = posixpath.normpath(raw)
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized.lower()


def _is_absolute(entry: str) -> bool:
    return entry.startswith("/") or bool(_DRIVE_PATTERN.match(entry))


class PathPolicy:
    """
    Pure predicates over read-only tables.
    The default instance uses the module tables; tests may supply their own.
    """

    def __init__(
            self,
            protected_paths: Iterable[str] = PROTECTED_PATHS,
            safe_markers: Iterable[str] = SAFE_PATH_MARKERS
    ):
        roots, names, fragments = [], [], []
        for entry in protected_paths:
            normalized = normalize_path(entry)
            if not normalized or normalized == ".":
                continue
            if _is_absolute(normalized):
                roots.append(normalized.rstrip("/"))
            elif "/" in normalized:
                fragments.append(tuple(normalized.split("/")))
            else:
                names.append(normalized)

        self._protected_roots = tuple(roots)
        self._protected_names = frozenset(names)
        self._protected_fragments = tuple(fragments)
        self._safe_markers = tuple(m.lower() for m in safe_markers if m)

    def is_protected(self, path) -> bool:
        """True if the path lies in, or is, a location that must never be scanned or deleted."""
        normalized = normalize_path(path)
        if not normalized:
            return False

        for root in self._protected_roots:
            if normalized == root or normalized.startswith(root + "/"):
                return True

        components = [c for c in normalized.split("/") if c]
        if self._protected_names.intersection(components):
            return True

        for fragment in self._protected_fragments:
            width = len(fragment)
            for i in range(len(components) - width + 1):
                if tuple(components[i:i + width]) == fragment:
                    return True
        return False

    def is_safe_to_delete(self, path) -> bool:
        """True only if the path mentions one of the transient/cache markers."""
        normalized = normalize_path(path)
        return any(marker in normalized for marker in self._safe_markers)


DEFAULT_POLICY = PathPolicy()
