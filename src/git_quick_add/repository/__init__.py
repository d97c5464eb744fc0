"""Repository access.

This package provides the raw status records of a Git working tree and
the index mutations needed to stage and unstage paths.

Classes:
    GitRepository: GitPython-backed implementation for real working trees.
    FakeRepository: In-memory implementation for tests.
    RepositoryProtocol: Runtime-checkable protocol for dependency injection.

Models:
    StatusFlag: Per-path status bits (index side, worktree side, ignored,
        conflicted).
    DiffDelta: Old and new path of one side of a change.
    ChangeRecord: Raw status entry for one path.

Example:
    >>> from git_quick_add.repository import GitRepository
    >>> with GitRepository.discover() as repo:
    ...     for record in repo.list_changes():
    ...         print(record.flags)
"""

from git_quick_add.repository._fake import FakeRepository
from git_quick_add.repository._git import GitRepository
from git_quick_add.repository._models import ChangeRecord, DiffDelta, StatusFlag
from git_quick_add.repository._porcelain import (
    parse_porcelain_status,
    parse_status_entry,
)
from git_quick_add.repository._protocol import RepositoryProtocol

__all__ = [
    "ChangeRecord",
    "DiffDelta",
    "FakeRepository",
    "GitRepository",
    "RepositoryProtocol",
    "StatusFlag",
    "parse_porcelain_status",
    "parse_status_entry",
]
