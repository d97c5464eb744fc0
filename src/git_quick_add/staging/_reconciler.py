"""Reconciliation of a selection with the index.

The reconciler compares each item's staged state with the user's
selection and applies the minimal set of index mutations:

| is_staged | is_selected | action  | label    |
|-----------|-------------|---------|----------|
| True      | False       | unstage | Unstaged |
| False     | True        | stage   | Staged   |
| True      | True        | none    | Staged   |
| False     | False       | none    | Unstaged |

Stage and unstage operations are each applied in one batch. When a batch
fails on a path, the paths are retried one at a time so that every path
that can be changed is changed and every failure is reported.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from git_quick_add.exceptions import (
    HeadNotFoundError,
    IndexWriteError,
    OperationError,
    StageOperationError,
    UnstageOperationError,
)
from git_quick_add.staging._models import (
    UNKNOWN_PATH,
    ChangeItem,
    LogEntry,
    LogLabel,
    ReconcileResult,
)

if TYPE_CHECKING:
    from git_quick_add.repository import RepositoryProtocol

_Batch = list[tuple[int, ChangeItem]]


def _attach_path(error: OperationError, path: str) -> OperationError:
    """Fill in the failing path when the repository could not tell."""
    if error.path is None:
        error.path = path
    return error


def _stage_paths(item: ChangeItem) -> list[str]:
    return [item.path]


def _unstage_paths(item: ChangeItem) -> list[str]:
    # Resetting only the new side of a rename would leave the deletion staged
    if item.original_path is not None:
        return [item.path, item.original_path]
    return [item.path]


def _apply_batch(
    operation: Callable[[Sequence[str]], None],
    batch: _Batch,
    paths_of: Callable[[ChangeItem], list[str]],
    failures: dict[int, OperationError],
) -> set[str]:
    """Apply an operation to a batch, falling back to one path at a time.

    Args:
        operation: Index mutation taking repository-relative paths.
        batch: (record index, item) pairs to apply the operation to.
        paths_of: Paths to pass to the operation for an item.
        failures: Failures by record index, updated in place.

    Returns:
        Paths of the items the operation succeeded for.

    Raises:
        IndexWriteError: If the index cannot be written. Not retried.
    """
    if not batch:
        return set()

    try:
        operation([path for _, item in batch for path in paths_of(item)])
    except IndexWriteError:
        raise
    except OperationError as e:
        if len(batch) == 1:
            index, item = batch[0]
            failures[index] = _attach_path(e, item.path)
            return set()
    else:
        return {item.path for _, item in batch}

    succeeded: set[str] = set()
    for index, item in batch:
        try:
            operation(paths_of(item))
        except IndexWriteError:
            raise
        except OperationError as e:
            failures[index] = _attach_path(e, item.path)
        else:
            succeeded.add(item.path)
    return succeeded


def reconcile(repo: RepositoryProtocol, items: Sequence[ChangeItem]) -> ReconcileResult:
    """Converge the index to the selection carried by the items.

    Args:
        repo: The repository whose index is mutated.
        items: Resolved items with is_selected set, in record order.

    Returns:
        Result with one log entry per item, the paths staged and unstaged,
        and every failed operation.

    Raises:
        IndexWriteError: If the index cannot be written. Mutations applied
            before the failure are kept.
    """
    failures: dict[int, OperationError] = {}
    to_stage: _Batch = []
    to_unstage: _Batch = []

    for index, item in enumerate(items):
        if item.is_selected == item.is_staged:
            continue
        if item.path == UNKNOWN_PATH:
            if item.is_selected:
                msg = "Cannot stage an entry whose path could not be resolved"
                failures[index] = StageOperationError(msg, path=UNKNOWN_PATH)
            else:
                msg = "Cannot unstage an entry whose path could not be resolved"
                failures[index] = UnstageOperationError(msg, path=UNKNOWN_PATH)
            continue
        if item.is_selected:
            to_stage.append((index, item))
        else:
            to_unstage.append((index, item))

    staged = _apply_batch(repo.stage, to_stage, _stage_paths, failures)

    unstaged: set[str] = set()
    if to_unstage:
        try:
            target = repo.resolve_head()
        except HeadNotFoundError as e:
            for index, item in to_unstage:
                failures[index] = HeadNotFoundError(str(e), path=item.path, cause=e)
        else:

            def _unstage(paths: Sequence[str]) -> None:
                repo.unstage(target, paths)

            unstaged = _apply_batch(_unstage, to_unstage, _unstage_paths, failures)

    entries: list[LogEntry] = []
    for index, item in enumerate(items):
        if index in failures:
            entries.append(
                LogEntry(path=item.path, label=LogLabel.FAILED, mutated=False)
            )
            continue
        label = LogLabel.STAGED if item.is_selected else LogLabel.UNSTAGED
        mutated = item.is_selected != item.is_staged
        entries.append(LogEntry(path=item.path, label=label, mutated=mutated))

    return ReconcileResult(
        entries=tuple(entries),
        staged=frozenset(staged),
        unstaged=frozenset(unstaged),
        failures=tuple(failures[i] for i in sorted(failures)),
    )
