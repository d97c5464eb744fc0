import pytest

from git_quick_add.exceptions import StatusQueryError
from git_quick_add.repository import ChangeRecord, DiffDelta, FakeRepository, StatusFlag
from git_quick_add.staging import (
    UNKNOWN_PATH,
    is_staged,
    resolve_changes,
    resolve_item,
    status_code,
)

# =============================================================================
# is_staged Tests
# =============================================================================


class TestIsStaged:
    def test_index_new_is_staged(self) -> None:
        assert is_staged(StatusFlag.INDEX_NEW) is True

    def test_untracked_alone_is_not_staged(self) -> None:
        assert is_staged(StatusFlag.WT_NEW) is False

    def test_index_bits_win_over_worktree_bits(self) -> None:
        assert is_staged(StatusFlag.WT_MODIFIED | StatusFlag.INDEX_MODIFIED) is True

    def test_no_flags_is_not_staged(self) -> None:
        assert is_staged(StatusFlag(0)) is False

    def test_conflicted_counts_as_staged(self) -> None:
        assert is_staged(StatusFlag.CONFLICTED) is True

    @pytest.mark.parametrize(
        "flag",
        [
            StatusFlag.INDEX_NEW,
            StatusFlag.INDEX_MODIFIED,
            StatusFlag.INDEX_DELETED,
            StatusFlag.INDEX_RENAMED,
            StatusFlag.INDEX_TYPECHANGE,
        ],
    )
    def test_every_index_bit_is_staged(self, flag: StatusFlag) -> None:
        assert is_staged(flag | StatusFlag.WT_DELETED) is True

    @pytest.mark.parametrize(
        "flag",
        [
            StatusFlag.WT_NEW,
            StatusFlag.WT_MODIFIED,
            StatusFlag.WT_DELETED,
            StatusFlag.WT_TYPECHANGE,
            StatusFlag.WT_RENAMED,
            StatusFlag.WT_UNREADABLE,
        ],
    )
    def test_worktree_bits_alone_are_not_staged(self, flag: StatusFlag) -> None:
        assert is_staged(flag) is False


# =============================================================================
# status_code Tests
# =============================================================================


class TestStatusCode:
    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            (StatusFlag.INDEX_NEW, "A "),
            (StatusFlag.WT_MODIFIED, " M"),
            (StatusFlag.INDEX_MODIFIED | StatusFlag.WT_MODIFIED, "MM"),
            (StatusFlag.WT_NEW, "??"),
            (StatusFlag.CONFLICTED, "UU"),
            (StatusFlag.IGNORED, "!!"),
            (StatusFlag.INDEX_RENAMED, "R "),
            (StatusFlag.INDEX_NEW | StatusFlag.WT_DELETED, "AD"),
            (StatusFlag(0), "  "),
        ],
    )
    def test_renders_short_code(self, flags: StatusFlag, expected: str) -> None:
        assert status_code(flags) == expected


# =============================================================================
# resolve_item Tests
# =============================================================================


class TestResolveItem:
    def test_prefers_index_side_new_path(self) -> None:
        record = ChangeRecord(
            flags=StatusFlag.INDEX_MODIFIED | StatusFlag.WT_MODIFIED,
            head_to_index=DiffDelta("index.txt", "index.txt"),
            index_to_workdir=DiffDelta("worktree.txt", "worktree.txt"),
        )

        assert resolve_item(record).path == "index.txt"

    def test_falls_back_to_worktree_new_path(self) -> None:
        record = ChangeRecord(
            flags=StatusFlag.WT_NEW,
            index_to_workdir=DiffDelta(None, "new.txt"),
        )

        assert resolve_item(record).path == "new.txt"

    def test_falls_back_to_worktree_old_path_for_deletions(self) -> None:
        record = ChangeRecord(
            flags=StatusFlag.WT_DELETED,
            index_to_workdir=DiffDelta("gone.txt", None),
        )

        assert resolve_item(record).path == "gone.txt"

    def test_unknown_when_no_path(self) -> None:
        item = resolve_item(ChangeRecord(flags=StatusFlag.WT_MODIFIED))

        assert item.path == UNKNOWN_PATH
        assert item.is_staged is False

    def test_rename_records_original_path(self) -> None:
        record = ChangeRecord(
            flags=StatusFlag.INDEX_RENAMED,
            head_to_index=DiffDelta("old.txt", "new.txt"),
        )

        item = resolve_item(record)

        assert item.path == "new.txt"
        assert item.original_path == "old.txt"

    def test_item_starts_unselected(self) -> None:
        record = ChangeRecord(
            flags=StatusFlag.INDEX_NEW,
            head_to_index=DiffDelta("a.txt", "a.txt"),
        )

        item = resolve_item(record)

        assert item.is_selected is False
        assert item.status == StatusFlag.INDEX_NEW


# =============================================================================
# resolve_changes Tests
# =============================================================================


class TestResolveChanges:
    def test_empty_repository_is_clean(self, repo: FakeRepository) -> None:
        snapshot = resolve_changes(repo)

        assert snapshot.items == []
        assert snapshot.is_clean is True
        assert snapshot.total_records == 0

    def test_single_untracked_file(self, repo: FakeRepository) -> None:
        repo.add_untracked("notes.txt")

        snapshot = resolve_changes(repo)

        assert len(snapshot.items) == 1
        assert snapshot.items[0].path == "notes.txt"
        assert snapshot.items[0].is_staged is False

    def test_single_staged_file(self, repo: FakeRepository) -> None:
        repo.add_staged("notes.txt")

        snapshot = resolve_changes(repo)

        assert [(i.path, i.is_staged) for i in snapshot.items] == [
            ("notes.txt", True)
        ]

    def test_only_ignored_records_is_clean(self, repo: FakeRepository) -> None:
        repo.add_ignored("build/out.o")

        snapshot = resolve_changes(repo)

        assert snapshot.is_clean is True
        assert snapshot.total_records == 1
        assert snapshot.ignored_records == 1

    def test_ignored_bit_skips_record_regardless_of_other_flags(
        self, repo: FakeRepository
    ) -> None:
        repo.add_record(
            ChangeRecord(
                flags=StatusFlag.IGNORED | StatusFlag.WT_NEW,
                index_to_workdir=DiffDelta(None, "cache.tmp"),
            )
        )
        repo.add_untracked("kept.txt")

        snapshot = resolve_changes(repo)

        assert [i.path for i in snapshot.items] == ["kept.txt"]

    def test_keeps_record_order(self, repo: FakeRepository) -> None:
        repo.add_untracked("z.txt")
        repo.add_staged("a.txt")
        repo.add_modified("m.txt")

        snapshot = resolve_changes(repo)

        assert [i.path for i in snapshot.items] == ["z.txt", "a.txt", "m.txt"]
        assert [i.is_staged for i in snapshot.items] == [False, True, False]

    def test_status_error_propagates(self) -> None:
        repo = FakeRepository(status_error="boom")

        with pytest.raises(StatusQueryError):
            _ = resolve_changes(repo)
