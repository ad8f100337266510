"""
Shared fixtures for scanner, duplicate finder and deleter tests.
Creates isolated temporary directories with controlled test files.
"""
import tempfile
from pathlib import Path
from typing import Dict

import pytest

from reclaimer.core.models import FileRecord
from reclaimer.core.categorizer import categorize

PHOTO_SIZE = 2048000


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def usage_tree(temp_dir) -> Dict[str, Path]:
    """
    Small tree for disk usage tests (7 files, 6720 bytes, 4 folders):

        root/
            report.pdf          1000
            song.mp3            3000
            photos/
                a.jpg           2000
                b.png            500
                nested/
                    deep.txt     100
            code/
                main.py           50
                util.js           70
            empty_dir/
    """
    paths = {"root": temp_dir}

    def write(relative: str, size: int) -> None:
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        paths[relative] = path

    write("report.pdf", 1000)
    write("song.mp3", 3000)
    write("photos/a.jpg", 2000)
    write("photos/b.png", 500)
    write("photos/nested/deep.txt", 100)
    write("code/main.py", 50)
    write("code/util.js", 70)
    (temp_dir / "empty_dir").mkdir()
    paths["empty_dir"] = temp_dir / "empty_dir"
    return paths


@pytest.fixture
def photo_tree(temp_dir) -> Dict[str, Path]:
    """Two byte-identical a/photo.jpg and b/photo.jpg of 2,048,000 bytes each."""
    content = bytes(range(256)) * (PHOTO_SIZE // 256)
    files = {"root": temp_dir}
    for folder in ("a", "b"):
        (temp_dir / folder).mkdir()
        files[folder] = temp_dir / folder / "photo.jpg"
        files[folder].write_bytes(content)
    return files


@pytest.fixture
def make_record():
    """Factory for in-memory FileRecords; nothing is written to disk."""
    def factory(path: str, size: int, mtime: float = 0.0) -> FileRecord:
        name = path.replace("\\", "/").rsplit("/", 1)[-1]
        return FileRecord(path=path, name=name, size_bytes=size, modified_at=mtime, category=categorize(name))
    return factory
