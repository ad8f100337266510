"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sample_data.py
Fixed payloads returned by commands in test mode.

They have exactly the shapes of real results and are internally consistent:
category totals add up to the report totals, and duplicate waste is
computed from the groups. No function here touches the filesystem.

Documented payloads:
- analyze:     12,543 files / 876 folders / 15,679,234,567 bytes in 8 categories,
               5 largest files and 5 largest folders placed under the requested root
- duplicates:  2 groups (photo.jpg x2 at 2,048,000 bytes, document.pdf x3 at
               1,024,000 bytes), 4,096,000 bytes reclaimable
- delete:      every requested target reported as deleted with its declared size
- system scan: 3 temp files (450 MB) and 3 application caches (320 MB)
- browsers:    Chrome 250 MB, Edge 120 MB, Firefox empty (370 MB in total)
"""

import ntpath
from typing import Iterable, List

from reclaimer.core.models import (
    BrowserCache, Category, CategoryTotals, CleanupCategory, CleanupItem, DeletionResult,
    DeletionTarget, DuplicateGroup, DuplicateScanResult, FileRecord, FolderRecord, MatchMode,
    ScanReport, SystemScanResult)

SAMPLE_MODIFIED_AT = 1700000000.0
MB = 1024 * 1024

_SAMPLE_CATEGORIES = {
    Category.DOCUMENTS: (2345678901, 1234),
    Category.IMAGES: (4567890123, 3456),
    Category.VIDEOS: (5678901234, 234),
    Category.AUDIO: (1234567890, 567),
    Category.ARCHIVES: (890123456, 123),
    Category.EXECUTABLES: (456789012, 345),
    Category.CODE: (234567890, 2345),
    Category.OTHER: (270716061, 4239),
}

_SAMPLE_FILES = (
    ("video_project.mp4", 1234567890, Category.VIDEOS),
    ("backup.zip", 987654321, Category.ARCHIVES),
    ("presentation.pptx", 456789012, Category.DOCUMENTS),
    ("photo_album.zip", 345678901, Category.ARCHIVES),
    ("game_installer.exe", 234567890, Category.EXECUTABLES),
)

_SAMPLE_FOLDERS = (
    ("Videos", 5678901234, 234, 12),
    ("Pictures", 4567890123, 3456, 45),
    ("Documents", 2345678901, 1234, 67),
    ("Music", 1234567890, 567, 23),
    ("Downloads", 890123456, 456, 34),
)


def _join(root: str, name: str) -> str:
    separator = "\\" if "\\" in root else "/"
    return root.rstrip("\\/") + separator + name


def sample_scan_report(root: str) -> ScanReport:
    report = ScanReport.empty(root)
    report.total_folders = 876
    for category, (size, count) in _SAMPLE_CATEGORIES.items():
        report.per_category[category] = CategoryTotals(size_bytes=size, count=count)
        report.total_size_bytes += size
        report.total_files += count
    report.largest_files = [
        FileRecord(path=_join(root, name), name=name, size_bytes=size,
                   modified_at=SAMPLE_MODIFIED_AT, category=category)
        for name, size, category in _SAMPLE_FILES
    ]
    report.largest_folders = [
        FolderRecord(path=_join(root, name), name=name, size_bytes=size,
                     file_count=files, folder_count=folders)
        for name, size, files, folders in _SAMPLE_FOLDERS
    ]
    return report


def _sample_file(path: str, size: int, category: Category) -> FileRecord:
    return FileRecord(path=path, name=ntpath.basename(path), size_bytes=size,
                      modified_at=SAMPLE_MODIFIED_AT, category=category)


def sample_duplicate_result(mode: MatchMode) -> DuplicateScanResult:
    groups = [
        DuplicateGroup(key="test-duplicate-1", match_mode=mode, members=[
            _sample_file("C:\\Users\\Demo\\Documents\\photo.jpg", 2048000, Category.IMAGES),
            _sample_file("C:\\Users\\Demo\\Pictures\\photo.jpg", 2048000, Category.IMAGES),
        ]),
        DuplicateGroup(key="test-duplicate-2", match_mode=mode, members=[
            _sample_file("C:\\Users\\Demo\\Downloads\\document.pdf", 1024000, Category.DOCUMENTS),
            _sample_file("C:\\Users\\Demo\\Desktop\\document.pdf", 1024000, Category.DOCUMENTS),
            _sample_file("C:\\Users\\Demo\\Backup\\document.pdf", 1024000, Category.DOCUMENTS),
        ]),
    ]
    return DuplicateScanResult(match_mode=mode, groups=groups, files_scanned=5)


def sample_deletion_result(targets: Iterable[DeletionTarget], dry_run: bool) -> DeletionResult:
    result = DeletionResult(dry_run=dry_run)
    for target in targets:
        result.record_success(target.size_bytes)
    return result


def sample_system_scan() -> SystemScanResult:
    temp = CleanupCategory(name="Temporary Files", items=[
        CleanupItem(path="C:\\Users\\Demo\\AppData\\Local\\Temp\\file1.tmp", size_bytes=120 * MB),
        CleanupItem(path="C:\\Windows\\Temp\\cache.dat", size_bytes=200 * MB),
        CleanupItem(path="C:\\Users\\Demo\\AppData\\Local\\Temp\\logs", size_bytes=130 * MB),
    ])
    caches = CleanupCategory(name="Application Cache", items=[
        CleanupItem(path="VSCode Cache", size_bytes=150 * MB, app="VSCode"),
        CleanupItem(path="Discord Cache", size_bytes=100 * MB, app="Discord"),
        CleanupItem(path="Slack Cache", size_bytes=70 * MB, app="Slack"),
    ])
    return SystemScanResult(categories=[temp, caches])


_SAMPLE_BROWSERS = {
    "chrome": ("Google Chrome", "C:\\Users\\Demo\\AppData\\Local\\Google\\Chrome\\User Data\\Default\\Cache", 250 * MB),
    "edge": ("Microsoft Edge", "C:\\Users\\Demo\\AppData\\Local\\Microsoft\\Edge\\User Data\\Default\\Cache", 120 * MB),
    "firefox": ("Mozilla Firefox", "C:\\Users\\Demo\\AppData\\Local\\Mozilla\\Firefox\\Profiles", 0),
}


def sample_browser_caches(browsers: Iterable[str]) -> List[BrowserCache]:
    """Requested browsers in request order; unknown keys are left out like in a real scan."""
    caches = []
    for key in browsers:
        if key not in _SAMPLE_BROWSERS:
            continue
        name, cache_path, size = _SAMPLE_BROWSERS[key]
        caches.append(BrowserCache(key=key, name=name, cache_path=cache_path, cache_size_bytes=size))
    return caches
