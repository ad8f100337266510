"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/deleter.py
Gated deletion of cleaner targets and duplicate files.

Cleaner targets must be safe (temp/cache) and not protected. Directories are
emptied and left in place. Duplicate targets skip the safe-path gate because
the user selected them explicitly, but they must be regular files.

A dry run walks the same decision path and builds the same report, it just
never calls into FileService.
"""

import logging
import os
from typing import Iterable, List, Union

from reclaimer.core.models import DeletionResult, DeletionTarget
from reclaimer.core.policy import DEFAULT_POLICY, PathPolicy
from reclaimer.services.file_service import FileService

logger = logging.getLogger(__name__)

UNSAFE_PATH_REASON = "unsafe path skipped"
PROTECTED_PATH_REASON = "protected path skipped"
NOT_A_FILE_REASON = "not a regular file"


class SafeDeleter:

    def __init__(self, policy: PathPolicy = DEFAULT_POLICY, file_service: FileService = None):
        self.policy = policy
        self.file_service = file_service or FileService()

    def delete(
            self,
            targets: Iterable[DeletionTarget],
            dry_run: bool = True,
            use_trash: bool = False
    ) -> DeletionResult:
        """
        Removes cleaner targets that pass the safety gate.

        Missing paths count as already clean: neither deleted nor failed.
        bytes_freed adds up the sizes reported by the caller for each target.
        """
        result = DeletionResult(dry_run=dry_run)

        for target in targets:
            path = target.path
            if self.policy.is_protected(path):
                logger.warning(f"Refusing to delete protected path: {path}")
                result.record_failure(path, PROTECTED_PATH_REASON)
                continue
            if not self.policy.is_safe_to_delete(path):
                logger.warning(f"Refusing to delete unsafe path: {path}")
                result.record_failure(path, UNSAFE_PATH_REASON)
                continue

            if not os.path.lexists(path):
                logger.debug(f"Already gone: {path}")
                continue

            if dry_run:
                result.record_success(target.size_bytes)
                continue

            try:
                if os.path.isdir(path) and not os.path.islink(path):
                    self.file_service.empty_directory(path, use_trash=use_trash)
                else:
                    self.file_service.remove_file(path, use_trash=use_trash)
            except OSError as e:
                logger.warning(f"Failed to delete {path}: {e}")
                result.record_failure(path, f"Failed to delete: {e}")
                continue
            result.record_success(target.size_bytes)

        logger.debug(
            f"Deletion finished (dry_run={dry_run}): {result.deleted_count} deleted, "
            f"{result.failed_count} failed, {result.bytes_freed} bytes"
        )
        return result

    def delete_duplicates(
            self,
            paths: Iterable[Union[str, DeletionTarget]],
            dry_run: bool = True,
            use_trash: bool = True
    ) -> DeletionResult:
        """
        Removes duplicate files picked by the caller.

        Only regular files are accepted. bytes_freed uses each file's size on disk
        at deletion time, not a size captured during the scan.
        """
        result = DeletionResult(dry_run=dry_run)

        for item in self._as_paths(paths):
            if self.policy.is_protected(item):
                logger.warning(f"Refusing to delete protected path: {item}")
                result.record_failure(item, PROTECTED_PATH_REASON)
                continue

            if not os.path.lexists(item):
                logger.debug(f"Already gone: {item}")
                continue

            if os.path.islink(item) or not os.path.isfile(item):
                result.record_failure(item, NOT_A_FILE_REASON)
                continue

            try:
                size = self.file_service.file_size(item)
                if not dry_run:
                    self.file_service.remove_file(item, use_trash=use_trash)
            except OSError as e:
                logger.warning(f"Failed to delete {item}: {e}")
                result.record_failure(item, f"Failed to delete: {e}")
                continue
            result.record_success(size)

        return result

    @staticmethod
    def _as_paths(items: Iterable[Union[str, DeletionTarget]]) -> List[str]:
        return [item.path if isinstance(item, DeletionTarget) else str(item) for item in items]
