"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/cleanup_service.py
Sizing scans for the cleaner: temporary files, application caches and browser caches.
Locations are resolved per platform; nothing here deletes anything.
"""
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from reclaimer.core.interfaces import TreeWalker
from reclaimer.core.models import (
    BrowserCache, CleanupCategory, CleanupItem, FileRecord, ScanConfig, SystemScanResult)
from reclaimer.core.walker import TreeWalkerImpl

logger = logging.getLogger(__name__)

TEMP_FILES_CATEGORY = "Temporary Files"
APP_CACHE_CATEGORY = "Application Cache"

BROWSER_NAMES = {
    "chrome": "Google Chrome",
    "edge": "Microsoft Edge",
    "firefox": "Mozilla Firefox",
}
DEFAULT_BROWSERS = tuple(BROWSER_NAMES)

COMMON_FOLDER_NAMES = ("Desktop", "Documents", "Downloads", "Pictures", "Videos", "Music")


def default_temp_paths(home: Path) -> List[str]:
    """Temporary directories for the current platform, without duplicates."""
    candidates = [tempfile.gettempdir(), os.environ.get("TEMP"), os.environ.get("TMP")]
    if sys.platform == "win32":
        candidates += [
            str(home / "AppData" / "Local" / "Temp"),
            "C:\\Windows\\Temp",
        ]
    else:
        candidates.append("/var/tmp")

    paths = []
    for candidate in candidates:
        if candidate and candidate not in paths:
            paths.append(candidate)
    return paths


def default_app_cache_paths(home: Path) -> Dict[str, str]:
    """Known application cache directories for the current platform."""
    if sys.platform == "win32":
        roaming = home / "AppData" / "Roaming"
        local = home / "AppData" / "Local"
        paths = {
            "VSCode": roaming / "Code" / "Cache",
            "Discord": roaming / "discord" / "Cache",
            "Slack": roaming / "Slack" / "Cache",
            "Spotify": local / "Spotify" / "Data",
            "Teams": roaming / "Microsoft" / "Teams" / "Cache",
        }
    elif sys.platform == "darwin":
        support = home / "Library" / "Application Support"
        paths = {
            "VSCode": support / "Code" / "Cache",
            "Discord": support / "discord" / "Cache",
            "Slack": support / "Slack" / "Cache",
            "Spotify": home / "Library" / "Caches" / "com.spotify.client",
            "Teams": support / "Microsoft" / "Teams" / "Cache",
        }
    else:
        config = home / ".config"
        paths = {
            "VSCode": config / "Code" / "Cache",
            "Discord": config / "discord" / "Cache",
            "Slack": config / "Slack" / "Cache",
            "Spotify": home / ".cache" / "spotify",
            "Teams": config / "Microsoft" / "Microsoft Teams" / "Cache",
        }
    return {app: str(path) for app, path in paths.items()}


def default_browser_cache_paths(home: Path) -> Dict[str, str]:
    """Default-profile cache directory per browser key."""
    if sys.platform == "win32":
        local = home / "AppData" / "Local"
        paths = {
            "chrome": local / "Google" / "Chrome" / "User Data" / "Default" / "Cache",
            "edge": local / "Microsoft" / "Edge" / "User Data" / "Default" / "Cache",
            "firefox": local / "Mozilla" / "Firefox" / "Profiles",
        }
    elif sys.platform == "darwin":
        caches = home / "Library" / "Caches"
        paths = {
            "chrome": caches / "Google" / "Chrome" / "Default" / "Cache",
            "edge": caches / "Microsoft Edge" / "Default" / "Cache",
            "firefox": caches / "Firefox" / "Profiles",
        }
    else:
        cache = home / ".cache"
        paths = {
            "chrome": cache / "google-chrome" / "Default" / "Cache",
            "edge": cache / "microsoft-edge" / "Default" / "Cache",
            "firefox": cache / "mozilla" / "firefox",
        }
    return {key: str(path) for key, path in paths.items()}


class CleanupService:
    """
    Finds reclaimable space in well-known transient locations.
    All locations can be overridden, which is how tests point it at a sandbox.
    """

    def __init__(
            self,
            walker: TreeWalker = None,
            home: Optional[str] = None,
            temp_paths: Optional[Iterable[str]] = None,
            app_cache_paths: Optional[Dict[str, str]] = None,
            browser_cache_paths: Optional[Dict[str, str]] = None
    ):
        self.walker = walker or TreeWalkerImpl()
        self.home = Path(home) if home else Path.home()
        self.temp_paths = list(temp_paths) if temp_paths is not None else default_temp_paths(self.home)
        self.app_cache_paths = dict(app_cache_paths) if app_cache_paths is not None \
            else default_app_cache_paths(self.home)
        self.browser_cache_paths = dict(browser_cache_paths) if browser_cache_paths is not None \
            else default_browser_cache_paths(self.home)

    def scan_temp_files(self) -> CleanupCategory:
        """Every file up to two levels deep in each existing temp directory."""
        category = CleanupCategory(name=TEMP_FILES_CATEGORY)

        def on_entry(record) -> None:
            if isinstance(record, FileRecord):
                category.items.append(CleanupItem(path=record.path, size_bytes=record.size_bytes))

        for temp_path in self.temp_paths:
            if not os.path.isdir(temp_path):
                continue
            self.walker.walk(temp_path, ScanConfig.TEMP_SCAN_DEPTH, on_entry)
        logger.debug(f"Temp scan: {category.files_found} files, {category.total_size_bytes} bytes")
        return category

    def scan_app_caches(self) -> CleanupCategory:
        """One item per application cache directory that holds data."""
        category = CleanupCategory(name=APP_CACHE_CATEGORY)
        for app, cache_path in self.app_cache_paths.items():
            if not os.path.isdir(cache_path):
                continue
            size, _ = self.directory_size(cache_path)
            if size > 0:
                category.items.append(CleanupItem(path=cache_path, size_bytes=size, app=app))
        logger.debug(f"App cache scan: {category.files_found} caches, {category.total_size_bytes} bytes")
        return category

    def scan_browser_caches(self, browsers: Iterable[str] = DEFAULT_BROWSERS) -> List[BrowserCache]:
        """Cache size of each requested browser; unknown browser keys are ignored."""
        results = []
        for key in browsers:
            cache_path = self.browser_cache_paths.get(key)
            if cache_path is None:
                logger.warning(f"Unknown browser: {key}")
                continue
            size = self.directory_size(cache_path)[0] if os.path.isdir(cache_path) else 0
            results.append(BrowserCache(
                key=key,
                name=BROWSER_NAMES.get(key, key),
                cache_path=cache_path,
                cache_size_bytes=size,
            ))
        return results

    def scan_system(self) -> SystemScanResult:
        """Temporary files and application caches together."""
        return SystemScanResult(categories=[self.scan_temp_files(), self.scan_app_caches()])

    def common_folders(self) -> List[Tuple[str, str]]:
        """(name, path) of the usual user folders, whether or not they exist."""
        return [(name, str(self.home / name)) for name in COMMON_FOLDER_NAMES]

    def directory_size(self, path: str) -> Tuple[int, int]:
        """Total bytes and file count below a directory."""
        stats = self.walker.walk(path, ScanConfig.APP_CACHE_SCAN_DEPTH, lambda _: None)
        return stats.bytes, stats.files
