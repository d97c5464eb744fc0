"""Console rendering of reconciliation results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from rich.markup import escape

from git_quick_add.staging import LogLabel, display_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from git_quick_add.exceptions import OperationError
    from git_quick_add.staging import ReconcileResult

CLEAN_MESSAGE: Final = "✔ working tree clean ✔"

_LABEL_STYLES: Final = {
    LogLabel.STAGED: "green",
    LogLabel.UNSTAGED: "yellow",
    LogLabel.FAILED: "red",
}


def render_clean(console: Console) -> None:
    """Print the clean working tree message."""
    console.print(f"[green]{CLEAN_MESSAGE}[/green]")


def render_changes(console: Console, result: ReconcileResult) -> None:
    """Print the change log, one line per item in record order.

    Args:
        console: Console for standard output.
        result: The reconciliation outcome.
    """
    console.print("[bold]Changes Made:[/bold]")
    for entry in result.entries:
        style = _LABEL_STYLES[entry.label]
        path = escape(display_text(entry.path))
        console.print(f"[{style}] - {entry.label}: {path}[/{style}]")


def render_failures(error_console: Console, failures: Sequence[OperationError]) -> None:
    """Print one line per failed operation.

    Args:
        error_console: Console for error output.
        failures: The failed operations, in record order.
    """
    for failure in failures:
        path = escape(display_text(failure.path or "?"))
        message = escape(display_text(str(failure)))
        error_console.print(f"[red]{path}:[/red] {message}")
