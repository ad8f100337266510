"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/presentation.py
Plain-dict views of scan results for front-ends, with human-readable fields.
Built from the typed results; nothing here feeds back into the core.
"""
from typing import Any, Dict, List

from reclaimer.core.models import (
    BrowserCache, DeletionResult, DuplicateGroup, DuplicateScanResult, FileRecord, FolderRecord,
    ScanReport, SystemScanResult)
from reclaimer.utils.convert_utils import ConvertUtils


def file_to_dict(record: FileRecord) -> Dict[str, Any]:
    return {
        "path": record.path,
        "name": record.name,
        "size": record.size_bytes,
        "size_formatted": ConvertUtils.format_bytes(record.size_bytes),
        "category": record.category.display_name,
        "modified": ConvertUtils.timestamp_to_human(record.modified_at),
    }


def folder_to_dict(record: FolderRecord) -> Dict[str, Any]:
    return {
        "path": record.path,
        "name": record.name,
        "size": record.size_bytes,
        "size_formatted": ConvertUtils.format_bytes(record.size_bytes),
        "files": record.file_count,
        "folders": record.folder_count,
    }


def report_to_dict(report: ScanReport) -> Dict[str, Any]:
    """Disk usage view; the category list leaves out empty categories."""
    return {
        "path": report.root,
        "total_size": report.total_size_bytes,
        "total_size_formatted": ConvertUtils.format_bytes(report.total_size_bytes),
        "total_files": report.total_files,
        "total_folders": report.total_folders,
        "scan_duration_ms": int(report.scan_duration * 1000),
        "cancelled": report.cancelled,
        "categories": [
            {
                "id": share.category.value,
                "name": share.category.display_name,
                "size": share.size_bytes,
                "size_formatted": ConvertUtils.format_bytes(share.size_bytes),
                "count": share.count,
                "percentage": share.percentage,
            }
            for share in report.category_breakdown()
        ],
        "largest_files": [file_to_dict(f) for f in report.largest_files],
        "folders": [folder_to_dict(f) for f in report.largest_folders],
    }


def group_to_dict(group: DuplicateGroup) -> Dict[str, Any]:
    return {
        "type": group.match_mode.value,
        "key": group.key,
        "count": group.duplicate_count,
        "total_size": group.total_size_bytes,
        "wasted": group.wasted_bytes,
        "files": [
            {
                "path": f.path,
                "name": f.name,
                "size": f.size_bytes,
                "size_formatted": ConvertUtils.format_bytes(f.size_bytes),
            }
            for f in group.members
        ],
    }


def duplicates_to_dict(result: DuplicateScanResult) -> Dict[str, Any]:
    return {
        "scan_type": result.match_mode.value,
        "duplicates": [group_to_dict(g) for g in result.groups],
        "total_duplicates": result.total_groups,
        "total_files": result.total_files,
        "files_scanned": result.files_scanned,
        "total_wasted_space": result.total_wasted_space,
        "total_wasted_space_formatted": ConvertUtils.format_bytes(result.total_wasted_space),
        "cancelled": result.cancelled,
    }


def deletion_to_dict(result: DeletionResult) -> Dict[str, Any]:
    return {
        "dry_run": result.dry_run,
        "deleted": result.deleted_count,
        "failed": result.failed_count,
        "bytes_freed": result.bytes_freed,
        "bytes_freed_formatted": ConvertUtils.format_bytes(result.bytes_freed),
        "errors": [{"path": e.path, "reason": e.reason} for e in result.per_item_errors],
        "message": "Dry run complete - no files deleted" if result.dry_run else "Cleaning complete",
    }


def system_scan_to_dict(result: SystemScanResult) -> Dict[str, Any]:
    categories: List[Dict[str, Any]] = []
    for category in result.categories:
        categories.append({
            "category": category.name,
            "files_found": category.files_found,
            "total_size": category.total_size_bytes,
            "total_size_formatted": ConvertUtils.format_bytes(category.total_size_bytes),
            "items": [
                {
                    "path": item.path,
                    "app": item.app,
                    "size": item.size_bytes,
                    "size_formatted": ConvertUtils.format_bytes(item.size_bytes),
                }
                for item in category.items
            ],
        })
    return {
        "categories": categories,
        "total_size": result.total_size_bytes,
        "total_size_formatted": ConvertUtils.format_bytes(result.total_size_bytes),
        "total_files": result.total_files,
    }


def browser_caches_to_dict(caches: List[BrowserCache]) -> Dict[str, Any]:
    total = sum(c.cache_size_bytes for c in caches)
    return {
        "browsers": [
            {
                "key": c.key,
                "name": c.name,
                "cache_path": c.cache_path,
                "cache_size": c.cache_size_bytes,
                "cache_size_formatted": ConvertUtils.format_bytes(c.cache_size_bytes),
                "can_clean": c.can_clean,
            }
            for c in caches
        ],
        "total_size": total,
        "total_size_formatted": ConvertUtils.format_bytes(total),
    }
