"""
Tests for CleanupService sizing scans, pointed at a sandbox instead of real system locations.
"""
import os
from pathlib import Path

import pytest

from reclaimer.services.cleanup_service import (
    APP_CACHE_CATEGORY, COMMON_FOLDER_NAMES, TEMP_FILES_CATEGORY, CleanupService,
    default_app_cache_paths, default_browser_cache_paths, default_temp_paths)


def write(path: Path, size: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)


@pytest.fixture
def sandbox(temp_dir):
    """
    home/
    transient/          a.tmp 10, sub/b.log 20, sub/sub2/c.dat 30
    transient2/         d.tmp 5
    apps/vscode/        x 100, deep/er/y 50
    apps/discord/       (empty)
    browsers/chrome/    index 300
    """
    home = temp_dir / "home"
    home.mkdir()
    write(temp_dir / "transient" / "a.tmp", 10)
    write(temp_dir / "transient" / "sub" / "b.log", 20)
    write(temp_dir / "transient" / "sub" / "sub2" / "c.dat", 30)
    write(temp_dir / "transient2" / "d.tmp", 5)
    write(temp_dir / "apps" / "vscode" / "x", 100)
    write(temp_dir / "apps" / "vscode" / "deep" / "er" / "y", 50)
    (temp_dir / "apps" / "discord").mkdir()
    write(temp_dir / "browsers" / "chrome" / "index", 300)

    service = CleanupService(
        home=str(home),
        temp_paths=[
            str(temp_dir / "transient"),
            str(temp_dir / "missing"),
            str(temp_dir / "transient2"),
        ],
        app_cache_paths={
            "VSCode": str(temp_dir / "apps" / "vscode"),
            "Discord": str(temp_dir / "apps" / "discord"),
            "Slack": str(temp_dir / "apps" / "slack"),
        },
        browser_cache_paths={
            "chrome": str(temp_dir / "browsers" / "chrome"),
            "edge": str(temp_dir / "browsers" / "edge"),
        },
    )
    return {"root": temp_dir, "home": home, "service": service}


class TestScanTempFiles:

    def test_files_up_to_two_levels_deep(self, sandbox):
        category = sandbox["service"].scan_temp_files()

        names = sorted(os.path.basename(item.path) for item in category.items)
        assert category.name == TEMP_FILES_CATEGORY
        assert names == ["a.tmp", "b.log", "d.tmp"]
        assert category.files_found == 3
        assert category.total_size_bytes == 35

    def test_items_follow_temp_location_order(self, sandbox):
        category = sandbox["service"].scan_temp_files()

        assert os.path.basename(category.items[-1].path) == "d.tmp"
        assert all(item.app is None for item in category.items)

    def test_no_temp_locations(self, sandbox):
        category = CleanupService(temp_paths=[], app_cache_paths={}).scan_temp_files()
        assert category.files_found == 0
        assert category.total_size_bytes == 0


class TestScanAppCaches:

    def test_only_caches_with_data_are_listed(self, sandbox):
        category = sandbox["service"].scan_app_caches()

        assert category.name == APP_CACHE_CATEGORY
        assert len(category.items) == 1
        item = category.items[0]
        assert item.app == "VSCode"
        assert item.size_bytes == 150
        assert item.path == str(sandbox["root"] / "apps" / "vscode")


class TestScanBrowserCaches:

    def test_sizes_per_browser(self, sandbox):
        caches = sandbox["service"].scan_browser_caches(["chrome", "edge", "opera"])

        assert [c.key for c in caches] == ["chrome", "edge"]
        chrome, edge = caches
        assert chrome.name == "Google Chrome"
        assert chrome.cache_size_bytes == 300
        assert chrome.can_clean
        assert edge.cache_size_bytes == 0
        assert not edge.can_clean

    def test_default_browsers(self, sandbox):
        caches = sandbox["service"].scan_browser_caches()
        assert [c.key for c in caches] == ["chrome", "edge"]


class TestScanSystem:

    def test_combines_temp_and_app_caches(self, sandbox):
        result = sandbox["service"].scan_system()

        assert [c.name for c in result.categories] == [TEMP_FILES_CATEGORY, APP_CACHE_CATEGORY]
        assert result.total_files == 4
        assert result.total_size_bytes == 185


class TestHelpers:

    def test_common_folders_under_home(self, sandbox):
        folders = sandbox["service"].common_folders()

        assert [name for name, _ in folders] == list(COMMON_FOLDER_NAMES)
        assert all(path == str(sandbox["home"] / name) for name, path in folders)

    def test_directory_size(self, sandbox):
        assert sandbox["service"].directory_size(str(sandbox["root"] / "apps")) == (150, 2)

    def test_platform_defaults(self, temp_dir):
        assert set(default_app_cache_paths(temp_dir)) == {"VSCode", "Discord", "Slack", "Spotify", "Teams"}
        assert set(default_browser_cache_paths(temp_dir)) == {"chrome", "edge", "firefox"}
        temp_paths = default_temp_paths(temp_dir)
        assert temp_paths
        assert len(temp_paths) == len(set(temp_paths))
