"""
Unit tests for the extension-based categorizer.
"""
import pytest

from reclaimer.core.categorizer import CATEGORY_EXTENSIONS, categorize
from reclaimer.core.models import Category


class TestCategorize:

    @pytest.mark.parametrize("filename, expected", [
        ("report.pdf", Category.DOCUMENTS),
        ("budget.XLSX", Category.DOCUMENTS),
        ("photo.jpg", Category.IMAGES),
        ("icon.ICO", Category.IMAGES),
        ("movie.mkv", Category.VIDEOS),
        ("song.flac", Category.AUDIO),
        ("backup.7z", Category.ARCHIVES),
        ("setup.msi", Category.EXECUTABLES),
        ("script.ps1", Category.EXECUTABLES),
        ("main.py", Category.CODE),
        ("data.json", Category.CODE),
    ])
    def test_known_extensions(self, filename, expected):
        assert categorize(filename) == expected

    @pytest.mark.parametrize("filename", [
        "README",
        ".bashrc",
        "archive.unknownext",
        "notes.",
        "",
    ])
    def test_everything_else_is_other(self, filename):
        assert categorize(filename) == Category.OTHER

    def test_only_last_extension_counts(self):
        assert categorize("logs.tar.gz") == Category.ARCHIVES
        assert categorize("photo.jpg.exe") == Category.EXECUTABLES

    def test_directory_part_is_ignored(self):
        assert categorize("/home/user/music.d/track") == Category.OTHER
        assert categorize("/home/user/music/track.mp3") == Category.AUDIO

    def test_every_listed_extension_maps_back_to_its_category(self):
        for category, extensions in CATEGORY_EXTENSIONS.items():
            for ext in extensions:
                assert categorize(f"file{ext}") == category

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CATEGORY_EXTENSIONS[Category.OTHER] = (".foo",)


class TestCategoryDisplay:

    def test_executables_display_as_programs(self):
        assert Category.EXECUTABLES.display_name == "Programs"

    def test_values_are_lowercase_ids(self):
        assert [c.value for c in Category] == [
            "documents", "images", "videos", "audio", "archives", "executables", "code", "other"]
