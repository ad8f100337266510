#!/usr/bin/env python3
"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

cli.py
Reclaimer CLI: disk usage, duplicate files and cleanup scans from the console.
Runs the same commands a GUI would. Deletion is a dry run unless --execute is given.
"""
import argparse
import json
import os
import signal
import sys
import time
from typing import List, NoReturn, Optional

from reclaimer.commands import (
    AnalyzeDiskCommand, BrowserScanCommand, DeleteDuplicatesCommand, DeleteItemsCommand,
    FindDuplicatesCommand, SystemScanCommand)
from reclaimer.core.models import (
    MATCH_MODE_CHOICES, AnalyzeParams, BrowserCache, DeletionRequest, DeletionResult,
    DeletionTarget, DuplicateScanParams, DuplicateScanResult, ProgressEvent, ScanConfig,
    ScanReport, SystemScanResult)
from reclaimer.services.cleanup_service import DEFAULT_BROWSERS, CleanupService
from reclaimer.services.duplicate_service import DuplicateService
from reclaimer.services.file_service import FileService
from reclaimer.utils import presentation
from reclaimer.utils.convert_utils import ConvertUtils

MODE_HELP_TEXT = (
    "How files are compared:\n"
    "  name               : same file name (case-insensitive)\n"
    "  size               : same size in bytes, empty files ignored\n"
    "  checksum (hash)    : same content\n"
    "Default: checksum"
)

EPILOG_TEXT = """
Examples:
  Disk usage breakdown of your home folder
  %(prog)s analyze ~

  Duplicate files in two folders, compared by content
  %(prog)s duplicates ~/Downloads ~/Pictures

  Same as above and move all but one file of each group to trash (asks first)
  %(prog)s duplicates ~/Downloads ~/Pictures --keep-one

  Temporary files and application caches, as JSON
  %(prog)s system --json

  Browser cache sizes of Chrome and Firefox only
  %(prog)s browsers --browser chrome --browser firefox

  Empty a cache directory (dry run first, then for real)
  %(prog)s clean ~/.cache/thumbnails
  %(prog)s clean ~/.cache/thumbnails --execute
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self.as_json: bool = False
        self.interrupted: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument("--json", action="store_true", help="Print the result as JSON")
        common.add_argument("--test-mode", action="store_true", dest="test_mode",
                            help="Return sample data without touching the filesystem")
        common.add_argument("--quiet", "-q", action="store_true", help="Suppress non-essential output")
        common.add_argument("--verbose", "-v", action="store_true", help="Show progress while scanning")

        parser = argparse.ArgumentParser(
            prog="reclaimer",
            description="Reclaimer: find reclaimable disk space and remove it safely",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        analyze = subparsers.add_parser("analyze", parents=[common], help="Disk usage breakdown of a folder")
        analyze.add_argument("path", type=str, help="Folder to analyze")
        analyze.add_argument(
            "--depth", "-d",
            default=ScanConfig.DEFAULT_MAX_DEPTH,
            type=int,
            help=f"Maximum folder depth. Default: {ScanConfig.DEFAULT_MAX_DEPTH}"
        )

        duplicates = subparsers.add_parser(
            "duplicates", parents=[common], help="Find duplicate files",
            formatter_class=argparse.RawTextHelpFormatter
        )
        duplicates.add_argument("roots", nargs="+", type=str, help="Folders to search (space separated)")
        duplicates.add_argument("--mode", choices=MATCH_MODE_CHOICES, default="checksum", help=MODE_HELP_TEXT)
        duplicates.add_argument(
            "--depth", "-d",
            default=ScanConfig.DEFAULT_MAX_DEPTH,
            type=int,
            help=f"Maximum folder depth. Default: {ScanConfig.DEFAULT_MAX_DEPTH}"
        )
        duplicates.add_argument(
            "--keep-one",
            action="store_true",
            help="Keep the first file of every group and move the rest to trash.\n"
                 "Always shows a preview before deletion."
        )
        duplicates.add_argument(
            "--force",
            action="store_true",
            help="Skip confirmation prompt when used with --keep-one (for scripts)"
        )

        subparsers.add_parser("system", parents=[common], help="Size temporary files and application caches")

        browsers = subparsers.add_parser("browsers", parents=[common], help="Size browser caches")
        browsers.add_argument(
            "--browser",
            action="append",
            dest="browsers",
            choices=DEFAULT_BROWSERS,
            help=f"Browser to check, can be repeated. Default: {', '.join(DEFAULT_BROWSERS)}"
        )

        clean = subparsers.add_parser("clean", parents=[common], help="Delete temporary files or cache folders")
        clean.add_argument("paths", nargs="+", type=str, help="Files or folders to clean (space separated)")
        clean.add_argument("--execute", action="store_true", help="Actually delete. Without it: dry run")
        clean.add_argument("--trash", action="store_true", help="Move to trash instead of deleting")

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if getattr(args, "depth", 0) < 0:
            self.error_exit("Depth cannot be negative")
        if getattr(args, "force", False) and not args.keep_one:
            self.error_exit("--force can only be used with --keep-one")
        if getattr(args, "keep_one", False) and not args.force and not args.test_mode:
            if not sys.stdin.isatty() or not sys.stdout.isatty():
                self.error_exit(
                    "Cannot request interactive confirmation in non-interactive session.\n"
                    "Use --force flag to proceed without confirmation when piping output or running in scripts."
                )

    def progress_callback(self, event: ProgressEvent) -> None:
        """Console progress, only in verbose mode."""
        if not self.verbose:
            return
        if event.total:
            percent = (event.files_scanned / event.total) * 100
            sys.stderr.write(f"\r  [{event.stage}] {event.files_scanned}/{event.total} ({percent:.1f}%)")
        else:
            sys.stderr.write(
                f"\r  [{event.stage}] {event.files_scanned} files, {event.folders_scanned} folders, "
                f"{ConvertUtils.format_bytes(event.bytes_so_far)}"
            )
        sys.stderr.flush()

    def stopped_flag(self) -> bool:
        return self.interrupted

    def _on_interrupt(self, signum, frame) -> None:
        self.interrupted = True

    def run_analyze(self, args: argparse.Namespace) -> None:
        params = AnalyzeParams(root=args.path, max_depth=args.depth, test_mode=args.test_mode)
        report = self._unwrap(AnalyzeDiskCommand().execute(
            params,
            progress_callback=self.progress_callback,
            stopped_flag=self.stopped_flag
        ))
        if self.as_json:
            self.print_json(presentation.report_to_dict(report))
        else:
            self.output_report(report)

    def run_duplicates(self, args: argparse.Namespace) -> None:
        params = DuplicateScanParams(roots=args.roots, mode=args.mode, max_depth=args.depth,
                                     test_mode=args.test_mode)
        if self.verbose:
            print(f"Finding duplicates (mode: {params.mode.display_name})...")
        result = self._unwrap(FindDuplicatesCommand().execute(
            params,
            progress_callback=self.progress_callback,
            stopped_flag=self.stopped_flag
        ))

        if args.keep_one:
            self.execute_keep_one(result, force=args.force, test_mode=args.test_mode)
        elif self.as_json:
            self.print_json(presentation.duplicates_to_dict(result))
        else:
            self.output_duplicates(result)

    def run_system(self, args: argparse.Namespace) -> None:
        result = self._unwrap(SystemScanCommand().execute(test_mode=args.test_mode))
        if self.as_json:
            self.print_json(presentation.system_scan_to_dict(result))
        else:
            self.output_system_scan(result)

    def run_browsers(self, args: argparse.Namespace) -> None:
        caches = self._unwrap(BrowserScanCommand().execute(
            args.browsers or DEFAULT_BROWSERS, test_mode=args.test_mode
        ))
        if self.as_json:
            self.print_json(presentation.browser_caches_to_dict(caches))
        else:
            self.output_browser_caches(caches)

    def run_clean(self, args: argparse.Namespace) -> None:
        targets = [DeletionTarget(path=p, size_bytes=self._path_size(p)) for p in args.paths]
        request = DeletionRequest(targets=targets, dry_run=not args.execute, use_trash=args.trash)
        result = self._unwrap(DeleteItemsCommand().execute(request, test_mode=args.test_mode))
        if self.as_json:
            self.print_json(presentation.deletion_to_dict(result))
        else:
            self.output_deletion(result)

    def output_report(self, report: ScanReport) -> None:
        if self.quiet:
            return
        print(f"\n{report.root}: {ConvertUtils.format_bytes(report.total_size_bytes)} "
              f"in {report.total_files} files, {report.total_folders} folders")
        if report.cancelled:
            print("⚠️  Scan was cancelled, totals are partial")

        print("\nBy category:")
        for share in report.category_breakdown():
            print(f"   {share.category.display_name:<12} {ConvertUtils.format_bytes(share.size_bytes):>10}"
                  f"  {share.percentage:>5}%  ({share.count} files)")

        if report.largest_folders:
            print("\nLargest folders:")
            for folder in report.largest_folders[:10]:
                print(f"   {ConvertUtils.format_bytes(folder.size_bytes):>10}  {folder.path}")

        if report.largest_files:
            print("\nLargest files:")
            for file in report.largest_files[:10]:
                print(f"   {ConvertUtils.format_bytes(file.size_bytes):>10}  {file.path}")

    def output_duplicates(self, result: DuplicateScanResult) -> None:
        """Output duplicate groups as plain text in discovery order."""
        if self.quiet:
            return
        if result.cancelled:
            print("⚠️  Scan was cancelled, results are partial")
        if not result.groups:
            print("No duplicate groups found.")
            return

        print(f"\nFound {result.total_groups} duplicate groups ({result.total_files} files), "
              f"{ConvertUtils.format_bytes(result.total_wasted_space)} reclaimable")
        for idx, group in enumerate(result.groups, 1):
            print(f"\n📁 Group {idx} | Size: {ConvertUtils.format_bytes(group.total_size_bytes)} "
                  f"| Files: {group.duplicate_count}")
            for file in group.members:
                print(f"   {file.path} [{ConvertUtils.format_bytes(file.size_bytes)}]")

    def execute_keep_one(self, result: DuplicateScanResult, force: bool = False, test_mode: bool = False) -> None:
        """Keep the first file per group, move the rest to trash. Always shows a preview first."""
        if not result.groups:
            if not self.quiet:
                print("No duplicate groups found.")
            return

        targets, _ = DuplicateService.keep_only_one_file_per_group(result.groups)
        space_saved = sum(t.size_bytes for t in targets)

        print()
        for idx, group in enumerate(result.groups, 1):
            print(f"📁 Group {idx} | Total size: {ConvertUtils.format_bytes(group.total_size_bytes)} "
                  f"| Files: {group.duplicate_count}")
            print("-" * 60)
            print(f"   [KEEP] {group.members[0].path}")
            for file in group.members[1:]:
                print(f"   [DEL]  {file.path}")
            print()
        print("=" * 60)
        print(f"Summary: {len(result.groups)} files preserved, {len(targets)} files to delete")
        print(f"Total space saved: {ConvertUtils.format_bytes(space_saved)}")
        print()

        if force or test_mode:
            print("⚠️  WARNING: proceeding without confirmation...")
        else:
            response = input(f"Are you sure you want to move {len(targets)} files to trash? [y/N]: ")
            if response.strip().lower() not in ("y", "yes"):
                print("Deletion cancelled by user.")
                return

        deletion = self._unwrap(DeleteDuplicatesCommand().execute(
            targets, dry_run=False, use_trash=True, test_mode=test_mode
        ))
        if self.as_json:
            self.print_json(presentation.deletion_to_dict(deletion))
        else:
            self.output_deletion(deletion)

    def output_system_scan(self, result: SystemScanResult) -> None:
        if self.quiet:
            return
        for category in result.categories:
            print(f"\n{category.name}: {category.files_found} items, "
                  f"{ConvertUtils.format_bytes(category.total_size_bytes)}")
            for item in category.items[:20]:
                label = f"{item.app}: " if item.app else ""
                print(f"   {ConvertUtils.format_bytes(item.size_bytes):>10}  {label}{item.path}")
            if len(category.items) > 20:
                print(f"   ...and {len(category.items) - 20} more")
        print(f"\nTotal: {ConvertUtils.format_bytes(result.total_size_bytes)} in {result.total_files} items")

    def output_browser_caches(self, caches: List[BrowserCache]) -> None:
        if self.quiet:
            return
        for cache in caches:
            note = "" if cache.can_clean else "  (nothing to clean)"
            print(f"{cache.name}: {ConvertUtils.format_bytes(cache.cache_size_bytes)}{note}")
            print(f"   {cache.cache_path}")
        total = sum(c.cache_size_bytes for c in caches)
        print(f"\nTotal: {ConvertUtils.format_bytes(total)} in {len(caches)} browsers")

    def output_deletion(self, result: DeletionResult) -> None:
        if self.quiet:
            return
        if result.dry_run:
            print("Dry run complete - no files deleted")
            print(f"Would free {ConvertUtils.format_bytes(result.bytes_freed)} from {result.deleted_count} items")
        else:
            print(f"✅ Removed {result.deleted_count} items, freed {ConvertUtils.format_bytes(result.bytes_freed)}")
        if result.per_item_errors:
            print(f"⚠️  {result.failed_count} item(s) skipped:")
            for error in result.per_item_errors[:5]:
                print(f"  • {error.path}: {error.reason}")
            if len(result.per_item_errors) > 5:
                print(f"  ...and {len(result.per_item_errors) - 5} more")

    @staticmethod
    def print_json(payload: dict) -> None:
        print(json.dumps(payload, indent=2, ensure_ascii=False))

    @staticmethod
    def _path_size(path: str) -> int:
        """Bytes a target would free: the whole subtree for a directory."""
        if os.path.isdir(path) and not os.path.islink(path):
            return CleanupService().directory_size(path)[0]
        try:
            return FileService.file_size(path)
        except OSError:
            return 0

    def _unwrap(self, result):
        if self.verbose:
            sys.stderr.write("\n")
        if not result.ok:
            self.error_exit(result.error)
        return result.value

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.as_json = args.json
        self.validate_args(args)

        previous_handler = signal.signal(signal.SIGINT, self._on_interrupt)
        try:
            handlers = {
                "analyze": self.run_analyze,
                "duplicates": self.run_duplicates,
                "system": self.run_system,
                "browsers": self.run_browsers,
                "clean": self.run_clean,
            }
            try:
                handlers[args.command](args)
            except ValueError as e:
                self.error_exit(f"Parameter error: {e}")
        finally:
            signal.signal(signal.SIGINT, previous_handler)

        if self.interrupted:
            self.warning("Operation cancelled by user (Ctrl+C)")
        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main(argv: Optional[List[str]] = None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run(argv)
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)


if __name__ == "__main__":
    main()
