# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Fake repository for testing.

This module provides a FakeRepository class that implements
RepositoryProtocol for use in tests without requiring an actual Git
repository.
"""

# Sequence needed at runtime for method signatures
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType
from typing import Self

from git_quick_add.exceptions import (
    HeadNotFoundError,
    IndexWriteError,
    StageOperationError,
    StatusQueryError,
    UnstageOperationError,
)
from git_quick_add.repository._models import ChangeRecord, DiffDelta, StatusFlag

_FAKE_HEAD = "0123456789abcdef0123456789abcdef01234567"


def _record_path(record: ChangeRecord) -> str | None:
    """Return the path a record refers to, using the resolver's order."""
    for delta, attr in (
        (record.head_to_index, "new_path"),
        (record.index_to_workdir, "new_path"),
        (record.index_to_workdir, "old_path"),
    ):
        if delta is not None and getattr(delta, attr) is not None:
            return getattr(delta, attr)
    return None


def _staged_flags(flags: StatusFlag) -> StatusFlag | None:
    """Flags after ``git add``; None when the entry disappears."""
    index = flags & StatusFlag.INDEX
    worktree = flags & StatusFlag.WORKTREE

    if StatusFlag.CONFLICTED in flags:
        return StatusFlag.INDEX_MODIFIED
    if StatusFlag.WT_DELETED in worktree:
        if StatusFlag.INDEX_NEW in index:
            return None
        return StatusFlag.INDEX_DELETED
    if StatusFlag.WT_NEW in worktree:
        return index or StatusFlag.INDEX_NEW
    if StatusFlag.WT_TYPECHANGE in worktree:
        return index or StatusFlag.INDEX_TYPECHANGE
    if StatusFlag.WT_MODIFIED in worktree:
        return index or StatusFlag.INDEX_MODIFIED
    return index


def _unstaged_flags(flags: StatusFlag) -> StatusFlag | None:
    """Flags after ``git reset HEAD``; None when the entry disappears."""
    index = flags & StatusFlag.INDEX
    worktree = flags & StatusFlag.WORKTREE

    if StatusFlag.INDEX_NEW in index or StatusFlag.INDEX_RENAMED in index:
        if StatusFlag.WT_DELETED in worktree:
            return None
        return StatusFlag.WT_NEW
    if worktree:
        return worktree
    if StatusFlag.INDEX_DELETED in index:
        return StatusFlag.WT_DELETED
    if StatusFlag.INDEX_TYPECHANGE in index:
        return StatusFlag.WT_TYPECHANGE
    if index or StatusFlag.CONFLICTED in flags:
        return StatusFlag.WT_MODIFIED
    return flags


@dataclass(slots=True)
class FakeRepository:
    """Fake Git repository for testing.

    Implements RepositoryProtocol without an actual Git repository. The
    fake keeps a list of change records and updates their flags when paths
    are staged or unstaged, so that a second status read reflects the
    first run's mutations.

    Failures can be injected per path (stage_failures, unstage_failures),
    for the whole index (index_write_error), for the status query
    (status_error), and HEAD can be made unborn (head=None).

    Example:
        >>> repo = FakeRepository()
        >>> repo.add_untracked("notes.txt")
        >>> repo.stage(["notes.txt"])
        >>> repo.list_changes()[0].flags
        <StatusFlag.INDEX_NEW: 1>
    """

    root: Path = field(default_factory=lambda: Path("/fake/project"))
    records: list[ChangeRecord] = field(default_factory=list)
    head: str | None = _FAKE_HEAD
    status_error: str | None = None
    index_write_error: str | None = None
    stage_failures: dict[str, str] = field(default_factory=dict)
    unstage_failures: dict[str, str] = field(default_factory=dict)
    stage_calls: list[tuple[str, ...]] = field(default_factory=list)
    unstage_calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)
    closed: bool = False

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        """Enter context manager.

        Returns:
            Self for use in with statement.
        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager."""
        self.close()

    # =========================================================================
    # Scenario Helpers
    # =========================================================================

    def add_record(self, record: ChangeRecord) -> None:
        """Append a raw change record."""
        self.records.append(record)

    def add_untracked(self, path: str) -> None:
        """Add a new file that is not in the index."""
        self.add_record(
            ChangeRecord(
                flags=StatusFlag.WT_NEW,
                index_to_workdir=DiffDelta(old_path=None, new_path=path),
            )
        )

    def add_modified(self, path: str) -> None:
        """Add a tracked file modified in the working tree only."""
        self.add_record(
            ChangeRecord(
                flags=StatusFlag.WT_MODIFIED,
                index_to_workdir=DiffDelta(old_path=path, new_path=path),
            )
        )

    def add_deleted(self, path: str) -> None:
        """Add a tracked file deleted from the working tree only."""
        self.add_record(
            ChangeRecord(
                flags=StatusFlag.WT_DELETED,
                index_to_workdir=DiffDelta(old_path=path, new_path=None),
            )
        )

    def add_staged(
        self,
        path: str,
        flag: StatusFlag = StatusFlag.INDEX_NEW,
        *,
        worktree: StatusFlag = StatusFlag(0),
    ) -> None:
        """Add a path with a change recorded in the index.

        Args:
            path: Repository-relative path.
            flag: Index-side flag of the change.
            worktree: Additional worktree-side flags (changed again after
                staging).
        """
        self.add_record(
            ChangeRecord(
                flags=flag | worktree,
                head_to_index=DiffDelta(old_path=path, new_path=path),
                index_to_workdir=(
                    DiffDelta(old_path=path, new_path=path) if worktree else None
                ),
            )
        )

    def add_renamed(self, old_path: str, new_path: str) -> None:
        """Add a rename recorded in the index."""
        self.add_record(
            ChangeRecord(
                flags=StatusFlag.INDEX_RENAMED,
                head_to_index=DiffDelta(old_path=old_path, new_path=new_path),
            )
        )

    def add_ignored(self, path: str) -> None:
        """Add an ignored path."""
        self.add_record(
            ChangeRecord(
                flags=StatusFlag.IGNORED,
                index_to_workdir=DiffDelta(old_path=None, new_path=path),
            )
        )

    # =========================================================================
    # RepositoryProtocol Methods
    # =========================================================================

    def close(self) -> None:
        """Close the repository (marks the fake as closed)."""
        self.closed = True

    def list_changes(self) -> list[ChangeRecord]:
        """List the current change records.

        Raises:
            StatusQueryError: If status_error is set.
        """
        if self.status_error is not None:
            raise StatusQueryError(self.status_error)
        return list(self.records)

    def resolve_head(self) -> str:
        """Return the fake HEAD SHA.

        Raises:
            HeadNotFoundError: If head is None.
        """
        if self.head is None:
            msg = "Cannot resolve HEAD: the repository has no commits yet"
            raise HeadNotFoundError(msg)
        return self.head

    def stage(self, paths: Sequence[str]) -> None:
        """Stage paths, failing atomically like a single ``git add``.

        Raises:
            IndexWriteError: If index_write_error is set.
            StageOperationError: If any path is in stage_failures.
        """
        self.stage_calls.append(tuple(paths))
        if self.index_write_error is not None:
            raise IndexWriteError(self.index_write_error)
        failing = [p for p in paths if p in self.stage_failures]
        if failing:
            path = paths[0] if len(paths) == 1 else None
            raise StageOperationError(self.stage_failures[failing[0]], path=path)

        targets = set(paths)
        updated: list[ChangeRecord] = []
        for record in self.records:
            path = _record_path(record)
            if path not in targets:
                updated.append(record)
                continue
            flags = _staged_flags(record.flags)
            if flags is None:
                continue
            old_path = (
                record.head_to_index.old_path
                if record.head_to_index is not None
                else path
            )
            updated.append(
                ChangeRecord(
                    flags=flags,
                    head_to_index=DiffDelta(old_path=old_path, new_path=path),
                )
            )
        self.records = updated

    def unstage(self, target: str, paths: Sequence[str]) -> None:
        """Reset paths to HEAD, failing atomically like a single ``git reset``.

        Raises:
            IndexWriteError: If index_write_error is set.
            UnstageOperationError: If any path is in unstage_failures.
        """
        self.unstage_calls.append((target, tuple(paths)))
        if self.index_write_error is not None:
            raise IndexWriteError(self.index_write_error)
        failing = [p for p in paths if p in self.unstage_failures]
        if failing:
            path = paths[0] if len(paths) == 1 else None
            raise UnstageOperationError(self.unstage_failures[failing[0]], path=path)

        targets = set(paths)
        updated: list[ChangeRecord] = []
        for record in self.records:
            path = _record_path(record)
            if path not in targets:
                updated.append(record)
                continue
            flags = _unstaged_flags(record.flags)
            if flags is None:
                continue
            h2i = record.head_to_index
            if (
                StatusFlag.INDEX_RENAMED in record.flags
                and h2i is not None
                and h2i.old_path is not None
                and h2i.old_path != path
            ):
                updated.append(
                    ChangeRecord(
                        flags=StatusFlag.WT_DELETED,
                        index_to_workdir=DiffDelta(
                            old_path=h2i.old_path, new_path=None
                        ),
                    )
                )
            new_path = None if StatusFlag.WT_DELETED in flags else path
            updated.append(
                ChangeRecord(
                    flags=flags,
                    index_to_workdir=DiffDelta(old_path=path, new_path=new_path),
                )
            )
        self.records = updated
