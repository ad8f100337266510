from typing import Iterable, List, Tuple

from reclaimer.core.models import DeletionTarget, DuplicateGroup


class DuplicateService:
    @staticmethod
    def remove_files_from_groups(groups: List[DuplicateGroup], file_paths: Iterable[str]) -> List[DuplicateGroup]:
        """
        Removes files with the specified paths from all duplicate groups.

        Files that match any of the provided file paths are removed from each group.
        Groups that contain fewer than 2 files after removal are discarded.

        Args:
            groups (List[DuplicateGroup]): List of duplicate groups to update.
            file_paths (Iterable[str]): Paths of files to remove.

        Returns:
            List[DuplicateGroup]: New groups; the input groups are left untouched.
        """
        removed = set(file_paths)
        updated_groups = []
        for group in groups:
            remaining = [f for f in group.members if f.path not in removed]
            if len(remaining) >= 2:
                updated_groups.append(DuplicateGroup(key=group.key, match_mode=group.match_mode, members=remaining))
        return updated_groups

    @staticmethod
    def keep_only_one_file_per_group(groups: List[DuplicateGroup]) -> Tuple[List[DeletionTarget], List[DuplicateGroup]]:
        """
        Keeps the first file of every group and marks the rest for deletion.
        Returns:
            - Deletion targets for every file after the first
            - Updated list of duplicate groups
        """
        targets = []
        for group in groups:
            for file in group.members[1:]:
                targets.append(DeletionTarget(path=file.path, size_bytes=file.size_bytes))

        updated_groups = DuplicateService.remove_files_from_groups(groups, [t.path for t in targets])
        return targets, updated_groups
