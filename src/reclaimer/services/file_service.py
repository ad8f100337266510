"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Filesystem mutations used by the deleter: remove, trash, empty a directory.
No policy checks happen here; callers gate every call.
"""
import logging
import os
import shutil
from pathlib import Path

from send2trash import send2trash

logger = logging.getLogger(__name__)


class FileService:
    """
    Removal primitives. Every method raises OSError (or a subclass) on failure.
    """

    @staticmethod
    def remove_file(file_path: str, use_trash: bool = False) -> None:
        """Deletes a single file, or moves it to the system trash."""
        if use_trash:
            FileService.move_to_trash(file_path)
            return
        path = Path(file_path)
        if path.is_dir() and not path.is_symlink():
            raise IsADirectoryError(f"Is a directory: {path}")
        path.unlink()
        logger.debug(f"Removed file: {path}")

    @staticmethod
    def move_to_trash(file_path: str) -> None:
        """Moves a file or directory to the system trash."""
        path = Path(file_path).absolute()

        if not path.exists() and not path.is_symlink():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            send2trash(str(path))
        except OSError:
            raise
        except Exception as e:
            # send2trash reports some platform failures with its own exception types
            raise OSError(f"Failed to move to trash: {e}") from e
        logger.debug(f"Moved to trash: {path}")

    @staticmethod
    def empty_directory(dir_path: str, use_trash: bool = False) -> None:
        """
        Removes everything inside a directory but keeps the directory itself.
        Stops at the first failure; entries removed before it stay removed.
        """
        path = Path(dir_path)
        if not path.is_dir():
            raise NotADirectoryError(f"Not a directory: {path}")

        with os.scandir(path) as it:
            entries = list(it)

        for entry in entries:
            if use_trash:
                FileService.move_to_trash(entry.path)
            elif entry.is_dir(follow_symlinks=False):
                shutil.rmtree(entry.path)
            else:
                os.unlink(entry.path)
        logger.debug(f"Emptied directory: {path} ({len(entries)} entries)")

    @staticmethod
    def file_size(file_path: str) -> int:
        """Current size of a regular file, without following symlinks."""
        return os.lstat(file_path).st_size
