"""Staging models.

This module defines the selectable items produced from repository status
and the outcome of reconciling a selection with the index.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final

from git_quick_add.exceptions import OperationError, ReconcileError
from git_quick_add.repository import StatusFlag

UNKNOWN_PATH: Final = "<unknown>"


@dataclass(slots=True)
class ChangeItem:
    """One selectable changed path.

    Attributes:
        path: Repository-relative path, or UNKNOWN_PATH when no path could
            be resolved from the record.
        is_staged: Whether the change is already recorded in the index.
        is_selected: The user's desired end state; set after selection.
        status: Status flags of the underlying record.
        original_path: Source path of a rename recorded in the index.
    """

    path: str
    is_staged: bool
    is_selected: bool = False
    status: StatusFlag = field(default_factory=lambda: StatusFlag(0))
    original_path: str | None = None


@dataclass(frozen=True, slots=True)
class StatusSnapshot:
    """Result of resolving repository status.

    Attributes:
        items: One item per non-ignored record, in record order.
        total_records: Number of records the repository reported.
        ignored_records: Number of records skipped as ignored.
    """

    items: list[ChangeItem]
    total_records: int
    ignored_records: int

    @property
    def is_clean(self) -> bool:
        """True when there is nothing to select."""
        return not self.items


class LogLabel(StrEnum):
    """Outcome label for one item after reconciliation."""

    STAGED = "Staged"
    UNSTAGED = "Unstaged"
    FAILED = "Failed"


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One line of the change log.

    Attributes:
        path: Repository-relative path of the item.
        label: Outcome for the item.
        mutated: True if the index was changed for this item.
    """

    path: str
    label: LogLabel
    mutated: bool


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Outcome of converging the index to a selection.

    Attributes:
        entries: One log entry per item, in record order.
        staged: Paths added to the index.
        unstaged: Paths reset to HEAD.
        failures: Operations that failed, in record order.
    """

    entries: tuple[LogEntry, ...]
    staged: frozenset[str]
    unstaged: frozenset[str]
    failures: tuple[OperationError, ...] = ()

    @property
    def mutations(self) -> int:
        """Number of index mutations applied."""
        return len(self.staged) + len(self.unstaged)

    @property
    def ok(self) -> bool:
        """True when every operation succeeded."""
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise if any operation failed.

        Raises:
            ReconcileError: Carrying every failure.
        """
        if self.failures:
            count = len(self.failures)
            noun = "operation" if count == 1 else "operations"
            msg = f"{count} staging {noun} failed"
            raise ReconcileError(msg, failures=self.failures)
