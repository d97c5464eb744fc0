"""Repository status models.

This module defines the raw per-path change records reported by a
repository, before they are resolved into selectable items.
"""

from dataclasses import dataclass
from enum import Flag, auto


class StatusFlag(Flag):
    """Per-path status bits.

    A single record can carry index-side and worktree-side bits at the
    same time (e.g. staged, then modified again in the working tree).
    """

    INDEX_NEW = auto()
    INDEX_MODIFIED = auto()
    INDEX_DELETED = auto()
    INDEX_RENAMED = auto()
    INDEX_TYPECHANGE = auto()

    WT_NEW = auto()
    WT_MODIFIED = auto()
    WT_DELETED = auto()
    WT_TYPECHANGE = auto()
    WT_RENAMED = auto()
    WT_UNREADABLE = auto()

    IGNORED = auto()
    CONFLICTED = auto()

    INDEX = (
        INDEX_NEW | INDEX_MODIFIED | INDEX_DELETED | INDEX_RENAMED | INDEX_TYPECHANGE
    )
    WORKTREE = (
        WT_NEW | WT_MODIFIED | WT_DELETED | WT_TYPECHANGE | WT_RENAMED | WT_UNREADABLE
    )


@dataclass(frozen=True, slots=True)
class DiffDelta:
    """One side of a change: HEAD to index, or index to working tree.

    Attributes:
        old_path: Repository-relative path before the change, if any.
        new_path: Repository-relative path after the change, if any.
    """

    old_path: str | None
    new_path: str | None


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """A raw status entry for one path.

    Attributes:
        flags: Status bits for the path.
        head_to_index: Difference between HEAD and the index, if any.
        index_to_workdir: Difference between the index and the working
            tree, if any.
    """

    flags: StatusFlag
    head_to_index: DiffDelta | None = None
    index_to_workdir: DiffDelta | None = None
