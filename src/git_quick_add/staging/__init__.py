"""Status resolution and index reconciliation.

This package turns repository status into selectable items and converges
the index to the user's selection.

Functions:
    resolve_changes: Build the item list from repository status.
    is_staged: Decide staged-ness from status flags.
    status_code: Render status flags as a two-letter code.
    build_prompt_rows: Labels and default-checked state for the prompt.
    display_text: Escape undecodable path bytes for console output.
    apply_selection: Record the prompt's chosen indices on the items.
    reconcile: Stage and unstage items to match the selection.

Example:
    >>> from git_quick_add.repository import FakeRepository
    >>> from git_quick_add.staging import apply_selection, reconcile, resolve_changes
    >>> repo = FakeRepository()
    >>> repo.add_untracked("notes.txt")
    >>> snapshot = resolve_changes(repo)
    >>> apply_selection(snapshot.items, [0])
    >>> result = reconcile(repo, snapshot.items)
    >>> sorted(result.staged)
    ['notes.txt']
"""

from git_quick_add.staging._models import (
    UNKNOWN_PATH,
    ChangeItem,
    LogEntry,
    LogLabel,
    ReconcileResult,
    StatusSnapshot,
)
from git_quick_add.staging._reconciler import reconcile
from git_quick_add.staging._resolver import (
    is_staged,
    resolve_changes,
    resolve_item,
    status_code,
)
from git_quick_add.staging._selection import (
    apply_selection,
    build_prompt_rows,
    display_text,
    item_label,
)

__all__ = [
    "UNKNOWN_PATH",
    "ChangeItem",
    "LogEntry",
    "LogLabel",
    "ReconcileResult",
    "StatusSnapshot",
    "apply_selection",
    "build_prompt_rows",
    "display_text",
    "is_staged",
    "item_label",
    "reconcile",
    "resolve_changes",
    "resolve_item",
    "status_code",
]
