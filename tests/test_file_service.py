"""
Tests for file service: removal primitives behind the deleter.
"""
from unittest import mock

import pytest

from reclaimer.services.file_service import FileService


class TestRemoveFile:

    def test_unlinks_file(self, tmp_path):
        target = tmp_path / "old.log"
        target.write_text("content")

        FileService.remove_file(str(target))

        assert not target.exists()

    def test_refuses_directory(self, tmp_path):
        with pytest.raises(IsADirectoryError):
            FileService.remove_file(str(tmp_path))
        assert tmp_path.exists()

    def test_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(OSError):
            FileService.remove_file(str(tmp_path / "missing.log"))

    def test_use_trash_delegates_to_move_to_trash(self, tmp_path):
        target = tmp_path / "old.log"
        target.write_text("content")

        with mock.patch.object(FileService, "move_to_trash") as move_to_trash:
            FileService.remove_file(str(target), use_trash=True)

        move_to_trash.assert_called_once_with(str(target))
        assert target.exists()


class TestMoveToTrash:

    def test_moves_file_to_trash(self, tmp_path):
        """File must disappear from original location; the trash location is OS-dependent."""
        target = tmp_path / "test.txt"
        target.write_text("content to delete")

        with mock.patch("reclaimer.services.file_service.send2trash") as send:
            FileService.move_to_trash(str(target))

        send.assert_called_once_with(str(target.absolute()))

    def test_missing_file_raises_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="File not found"):
            FileService.move_to_trash(str(tmp_path / "does_not_exist.txt"))

    def test_library_errors_become_os_errors(self, tmp_path):
        target = tmp_path / "test.txt"
        target.write_text("content")

        with mock.patch("reclaimer.services.file_service.send2trash", side_effect=RuntimeError("no trash")):
            with pytest.raises(OSError, match="Failed to move to trash"):
                FileService.move_to_trash(str(target))


class TestEmptyDirectory:

    def test_removes_contents_keeps_directory(self, tmp_path):
        (tmp_path / "a.bin").write_bytes(b"x")
        (tmp_path / "sub" / "deeper").mkdir(parents=True)
        (tmp_path / "sub" / "deeper" / "b.bin").write_bytes(b"x")

        FileService.empty_directory(str(tmp_path))

        assert tmp_path.is_dir()
        assert list(tmp_path.iterdir()) == []

    def test_refuses_file(self, tmp_path):
        target = tmp_path / "a.bin"
        target.write_bytes(b"x")
        with pytest.raises(NotADirectoryError):
            FileService.empty_directory(str(target))

    def test_trash_mode_trashes_each_entry(self, tmp_path):
        (tmp_path / "a.bin").write_bytes(b"x")
        (tmp_path / "sub").mkdir()

        with mock.patch.object(FileService, "move_to_trash") as move_to_trash:
            FileService.empty_directory(str(tmp_path), use_trash=True)

        trashed = sorted(call.args[0] for call in move_to_trash.call_args_list)
        assert trashed == sorted([str(tmp_path / "a.bin"), str(tmp_path / "sub")])


class TestFileSize:

    def test_returns_size(self, tmp_path):
        target = tmp_path / "a.bin"
        target.write_bytes(b"x" * 123)
        assert FileService.file_size(str(target)) == 123

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FileService.file_size(str(tmp_path / "missing"))
