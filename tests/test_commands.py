"""
Integration tests for the commands, the request/response layer between front-ends and core.
Verifies wiring, test mode payloads and error handling at the boundary.
"""
import logging
from unittest import mock

import pytest

from reclaimer.commands import (
    AnalyzeDiskCommand, BrowserScanCommand, DeleteDuplicatesCommand, DeleteItemsCommand,
    FindDuplicatesCommand, SystemScanCommand)
from reclaimer.core.analyzer import DiskUsageAnalyzer
from reclaimer.core.deleter import SafeDeleter
from reclaimer.core.errors import InvalidModeError
from reclaimer.core.models import (
    AnalyzeParams, Category, DeletionRequest, DeletionTarget, DuplicateScanParams, MatchMode)
from reclaimer.core.policy import PathPolicy
from reclaimer.core.progress import ProgressChannel
from reclaimer.services.cleanup_service import CleanupService

MB = 1024 * 1024


class TestAnalyzeDiskCommand:

    def test_real_scan(self, usage_tree):
        channel = ProgressChannel()
        result = AnalyzeDiskCommand().execute(AnalyzeParams(root=str(usage_tree["root"])), progress_callback=channel)

        assert result.ok
        assert result.error is None
        assert result.value.total_files == 7
        assert channel.latest().files_scanned == 7

    def test_missing_root_is_an_empty_success(self, temp_dir):
        result = AnalyzeDiskCommand().execute(AnalyzeParams(root=str(temp_dir / "missing")))
        assert result.ok
        assert result.value.total_files == 0

    def test_test_mode_payload(self):
        result = AnalyzeDiskCommand().execute(AnalyzeParams(root="/home/demo", test_mode=True))
        report = result.unwrap()

        assert report.total_files == 12543
        assert report.total_folders == 876
        assert report.total_size_bytes == sum(t.size_bytes for t in report.per_category.values())
        assert report.total_files == sum(t.count for t in report.per_category.values())
        assert report.per_category[Category.VIDEOS].size_bytes == 5678901234
        assert all(f.path.startswith("/home/demo/") for f in report.largest_files)
        assert len(report.largest_folders) == 5

    def test_test_mode_does_not_scan(self):
        analyzer = mock.Mock(spec=DiskUsageAnalyzer)
        AnalyzeDiskCommand(analyzer).execute(AnalyzeParams(root="C:\\Users\\Demo", test_mode=True))
        analyzer.analyze.assert_not_called()

    def test_unexpected_error_becomes_failure(self, caplog):
        analyzer = mock.Mock(spec=DiskUsageAnalyzer)
        analyzer.analyze.side_effect = RuntimeError("disk on fire")

        with caplog.at_level(logging.ERROR, logger="reclaimer.commands"):
            result = AnalyzeDiskCommand(analyzer).execute(AnalyzeParams(root="/data"))

        assert not result.ok
        assert result.value is None
        assert "disk on fire" in result.error
        assert "Disk analysis failed" in caplog.text
        with pytest.raises(RuntimeError):
            result.unwrap()

    def test_value_errors_propagate(self):
        analyzer = mock.Mock(spec=DiskUsageAnalyzer)
        analyzer.analyze.side_effect = ValueError("bad depth")

        with pytest.raises(ValueError):
            AnalyzeDiskCommand(analyzer).execute(AnalyzeParams(root="/data"))

    def test_params_validation(self):
        with pytest.raises(ValueError):
            AnalyzeParams(root="")
        with pytest.raises(ValueError):
            AnalyzeParams(root="/data", max_depth=-1)


class TestFindDuplicatesCommand:

    def test_real_scan(self, photo_tree):
        params = DuplicateScanParams(roots=str(photo_tree["root"]), mode="size")
        result = FindDuplicatesCommand().execute(params)

        assert result.ok
        assert result.value.match_mode is MatchMode.SIZE
        assert result.value.total_groups == 1

    def test_test_mode_payload(self):
        result = FindDuplicatesCommand().execute(
            DuplicateScanParams(roots=["C:\\Users\\Demo"], mode="name", test_mode=True))
        value = result.unwrap()

        assert value.match_mode is MatchMode.NAME
        assert value.total_groups == 2
        assert value.total_files == 5
        assert value.total_wasted_space == 2048000 + 2 * 1024000
        assert all(g.match_mode is MatchMode.NAME for g in value.groups)

    def test_invalid_mode_is_rejected_by_params(self):
        with pytest.raises(InvalidModeError):
            DuplicateScanParams(roots=["/data"], mode="fuzzy")

    def test_params_require_a_root(self):
        with pytest.raises(ValueError):
            DuplicateScanParams(roots=["", "  "])

    def test_params_default_to_checksum(self):
        assert DuplicateScanParams(roots=["/data"]).mode is MatchMode.CHECKSUM


class TestDeleteItemsCommand:

    def test_test_mode_reports_request_without_touching_disk(self, temp_dir):
        keep = temp_dir / "keep.bin"
        keep.write_bytes(b"x" * 10)
        request = DeletionRequest(targets=[DeletionTarget(str(keep), 10), DeletionTarget("/nowhere", 5)],
                                  dry_run=False)

        value = DeleteItemsCommand().execute(request, test_mode=True).unwrap()

        assert value.deleted_count == 2
        assert value.bytes_freed == 15
        assert not value.dry_run
        assert keep.exists()

    def test_real_deletion(self, temp_dir):
        cache = temp_dir / "cache"
        cache.mkdir()
        (cache / "a.bin").write_bytes(b"x" * 10)
        command = DeleteItemsCommand(SafeDeleter(PathPolicy(safe_markers=("cache",))))

        result = command.execute(DeletionRequest(targets=[{"path": str(cache), "sizeBytes": 10}], dry_run=False))

        assert result.ok
        assert result.value.bytes_freed == 10
        assert list(cache.iterdir()) == []

    def test_dry_run_is_the_default(self, temp_dir):
        cache = temp_dir / "cache"
        cache.mkdir()
        (cache / "a.bin").write_bytes(b"x")
        command = DeleteItemsCommand(SafeDeleter(PathPolicy(safe_markers=("cache",))))

        result = command.execute(DeletionRequest(targets=[DeletionTarget(str(cache), 1)]))

        assert result.value.dry_run
        assert (cache / "a.bin").exists()


class TestDeleteDuplicatesCommand:

    def test_test_mode(self):
        value = DeleteDuplicatesCommand().execute(["/a/photo.jpg", "/b/photo.jpg"], test_mode=True).unwrap()
        assert value.deleted_count == 2
        assert value.dry_run

    def test_dry_run_measures_files(self, photo_tree):
        result = DeleteDuplicatesCommand().execute([str(photo_tree["b"])])

        assert result.value.bytes_freed == 2048000
        assert photo_tree["b"].exists()

    def test_real_deletion(self, photo_tree):
        result = DeleteDuplicatesCommand().execute([str(photo_tree["b"])], dry_run=False, use_trash=False)

        assert result.value.deleted_count == 1
        assert not photo_tree["b"].exists()
        assert photo_tree["a"].exists()


class TestSystemScanCommand:

    def test_test_mode_payload(self):
        value = SystemScanCommand().execute(test_mode=True).unwrap()

        assert [c.name for c in value.categories] == ["Temporary Files", "Application Cache"]
        assert value.categories[0].total_size_bytes == 450 * MB
        assert value.categories[1].total_size_bytes == 320 * MB
        assert value.total_files == 6

    def test_real_scan_with_sandbox(self, temp_dir):
        (temp_dir / "t").mkdir()
        (temp_dir / "t" / "x.tmp").write_bytes(b"x" * 42)
        service = CleanupService(home=str(temp_dir), temp_paths=[str(temp_dir / "t")], app_cache_paths={})

        value = SystemScanCommand(service).execute().unwrap()

        assert value.total_files == 1
        assert value.total_size_bytes == 42

    def test_failure_is_reported(self):
        service = mock.Mock(spec=CleanupService)
        service.scan_system.side_effect = PermissionError("denied")

        result = SystemScanCommand(service).execute()

        assert not result.ok
        assert "System scan failed" in result.error


class TestBrowserScanCommand:

    def test_test_mode_payload(self):
        caches = BrowserScanCommand().execute(test_mode=True).unwrap()

        assert [c.key for c in caches] == ["chrome", "edge", "firefox"]
        assert sum(c.cache_size_bytes for c in caches) == 370 * MB
        assert [c.can_clean for c in caches] == [True, True, False]

    def test_test_mode_honours_selection(self):
        caches = BrowserScanCommand().execute([" Firefox", "opera"], test_mode=True).unwrap()
        assert [c.key for c in caches] == ["firefox"]

    def test_real_scan_with_sandbox(self, temp_dir):
        (temp_dir / "chrome").mkdir()
        (temp_dir / "chrome" / "data_0").write_bytes(b"x" * 64)
        service = CleanupService(home=str(temp_dir), browser_cache_paths={
            "chrome": str(temp_dir / "chrome"),
            "firefox": str(temp_dir / "missing"),
        })

        caches = BrowserScanCommand(service).execute().unwrap()

        assert [(c.key, c.cache_size_bytes) for c in caches] == [("chrome", 64), ("firefox", 0)]

    def test_failure_is_reported(self):
        service = mock.Mock(spec=CleanupService)
        service.scan_browser_caches.side_effect = PermissionError("denied")

        result = BrowserScanCommand(service).execute(["chrome"])

        assert not result.ok
        assert "Browser scan failed" in result.error
        service.scan_browser_caches.assert_called_once_with(["chrome"])
