"""
Tests for DuplicateService: keep-one selection and group pruning after deletion.
"""
import pytest

from reclaimer.core.models import DeletionTarget, DuplicateGroup, MatchMode
from reclaimer.services.duplicate_service import DuplicateService


@pytest.fixture
def groups(make_record):
    return [
        DuplicateGroup(key="photo.jpg", match_mode=MatchMode.NAME, members=[
            make_record("/a/photo.jpg", 100),
            make_record("/b/photo.jpg", 100),
            make_record("/c/photo.jpg", 100),
        ]),
        DuplicateGroup(key="notes.txt", match_mode=MatchMode.NAME, members=[
            make_record("/a/notes.txt", 5),
            make_record("/b/notes.txt", 7),
        ]),
    ]


class TestKeepOnlyOneFilePerGroup:

    def test_first_member_is_kept(self, groups):
        targets, updated = DuplicateService.keep_only_one_file_per_group(groups)

        assert targets == [
            DeletionTarget("/b/photo.jpg", 100),
            DeletionTarget("/c/photo.jpg", 100),
            DeletionTarget("/b/notes.txt", 7),
        ]
        # Every group shrinks to a single file and disappears
        assert updated == []

    def test_targets_add_up_to_wasted_space(self, groups):
        targets, _ = DuplicateService.keep_only_one_file_per_group(groups)
        assert sum(t.size_bytes for t in targets) == sum(g.wasted_bytes for g in groups)

    def test_empty_input(self):
        assert DuplicateService.keep_only_one_file_per_group([]) == ([], [])


class TestRemoveFilesFromGroups:

    def test_groups_keep_remaining_files(self, groups):
        updated = DuplicateService.remove_files_from_groups(groups, ["/c/photo.jpg"])

        assert len(updated) == 2
        assert [f.path for f in updated[0].members] == ["/a/photo.jpg", "/b/photo.jpg"]
        assert updated[0].key == "photo.jpg"

    def test_groups_below_two_files_are_dropped(self, groups):
        updated = DuplicateService.remove_files_from_groups(groups, ["/a/notes.txt"])

        assert [g.key for g in updated] == ["photo.jpg"]

    def test_input_groups_are_not_modified(self, groups):
        DuplicateService.remove_files_from_groups(groups, ["/a/photo.jpg", "/a/notes.txt"])

        assert groups[0].duplicate_count == 3
        assert groups[1].duplicate_count == 2
