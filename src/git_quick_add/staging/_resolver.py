"""Status resolution.

This module turns raw repository change records into selectable items:
one item per non-ignored record, each with a display path and a staged
flag derived from the record's status bits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from git_quick_add.repository import ChangeRecord, StatusFlag
from git_quick_add.staging._models import UNKNOWN_PATH, ChangeItem, StatusSnapshot

if TYPE_CHECKING:
    from git_quick_add.repository import RepositoryProtocol

# Ordered for short-code rendering; the first matching bit wins
_INDEX_LETTERS: Final = (
    (StatusFlag.INDEX_NEW, "A"),
    (StatusFlag.INDEX_RENAMED, "R"),
    (StatusFlag.INDEX_DELETED, "D"),
    (StatusFlag.INDEX_TYPECHANGE, "T"),
    (StatusFlag.INDEX_MODIFIED, "M"),
)
_WORKTREE_LETTERS: Final = (
    (StatusFlag.WT_DELETED, "D"),
    (StatusFlag.WT_RENAMED, "R"),
    (StatusFlag.WT_TYPECHANGE, "T"),
    (StatusFlag.WT_MODIFIED, "M"),
    (StatusFlag.WT_UNREADABLE, "!"),
    (StatusFlag.WT_NEW, "A"),
)


def is_staged(flags: StatusFlag) -> bool:
    """Decide whether a path's change is recorded in the index.

    Index-side bits take priority over worktree-side bits, so a path that
    was staged and then modified again still counts as staged. Conflicted
    paths count as staged.

    Args:
        flags: Status bits of the path.

    Returns:
        True if any index-side or conflict bit is set.
    """
    if flags & StatusFlag.INDEX:
        return True
    if StatusFlag.CONFLICTED in flags:
        return True
    if flags & StatusFlag.WORKTREE:
        return False
    return False


def status_code(flags: StatusFlag) -> str:
    """Render status bits as a two-letter code in ``git status -s`` style.

    Args:
        flags: Status bits of the path.

    Returns:
        Codes such as ``"A "``, ``" M"``, ``"MM"``, ``"??"``, ``"UU"``
        or ``"!!"``.
    """
    if StatusFlag.IGNORED in flags:
        return "!!"
    if StatusFlag.CONFLICTED in flags:
        return "UU"
    untracked_only = (flags & StatusFlag.WORKTREE) == StatusFlag.WT_NEW
    if untracked_only and not flags & StatusFlag.INDEX:
        return "??"

    index = next((c for bit, c in _INDEX_LETTERS if bit in flags), " ")
    worktree = next((c for bit, c in _WORKTREE_LETTERS if bit in flags), " ")
    return index + worktree


def resolve_item(record: ChangeRecord) -> ChangeItem:
    """Resolve the display path of one record.

    Candidates are tried in order: the new path of the HEAD-to-index
    difference, the new path of the index-to-workdir difference, then its
    old path (deletions). If none exists the path is UNKNOWN_PATH, so the
    item list stays aligned with the records it came from.

    Args:
        record: A non-ignored change record.

    Returns:
        The selectable item for the record.
    """
    h2i = record.head_to_index
    i2w = record.index_to_workdir

    if h2i is not None and h2i.new_path is not None:
        path = h2i.new_path
    elif i2w is not None and i2w.new_path is not None:
        path = i2w.new_path
    elif i2w is not None and i2w.old_path is not None:
        path = i2w.old_path
    else:
        path = UNKNOWN_PATH

    original_path: str | None = None
    if (
        StatusFlag.INDEX_RENAMED in record.flags
        and h2i is not None
        and h2i.old_path is not None
        and h2i.old_path != path
    ):
        original_path = h2i.old_path

    return ChangeItem(
        path=path,
        is_staged=is_staged(record.flags),
        status=record.flags,
        original_path=original_path,
    )


def resolve_changes(repo: RepositoryProtocol) -> StatusSnapshot:
    """Build the selectable item list for a repository.

    Args:
        repo: The repository to read status from.

    Returns:
        Snapshot with one item per non-ignored record, in record order.
        The snapshot is clean when the repository reported no records or
        only ignored ones.

    Raises:
        StatusQueryError: If the status cannot be enumerated.
    """
    records = repo.list_changes()

    items: list[ChangeItem] = []
    ignored = 0
    for record in records:
        if StatusFlag.IGNORED in record.flags:
            ignored += 1
            continue
        items.append(resolve_item(record))

    return StatusSnapshot(
        items=items,
        total_records=len(records),
        ignored_records=ignored,
    )
