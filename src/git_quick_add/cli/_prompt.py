"""Interactive multi-select prompt.

The prompt shows a numbered checkbox list and reads commands from the
console until the user confirms with an empty line:

- ``3``, ``1 4``, ``2,5``, ``3-6``: toggle rows (1-based)
- ``a`` / ``all``: check every row
- ``n`` / ``none``: uncheck every row
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Final, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from git_quick_add.exceptions import SelectionAbortedError

_SEPARATORS: Final = re.compile(r"[\s,]+")
_RANGE: Final = re.compile(r"^(\d+)-(\d+)$")

_ALL_COMMANDS: Final = frozenset({"a", "all"})
_NONE_COMMANDS: Final = frozenset({"n", "none"})

_HELP: Final = "Enter to confirm | 1 3 5 or 2-4 to toggle | a(ll) | n(one)"

_CHECKED: Final = Text("[x]", style="bold green")
_UNCHECKED: Final = Text("[ ]", style="dim")


@runtime_checkable
class SelectionPrompt(Protocol):
    """Blocking multi-select over an ordered list of labels."""

    def select(
        self, message: str, labels: Sequence[str], defaults: Sequence[bool]
    ) -> list[int]:
        """Return the chosen indices in ascending order.

        Raises:
            SelectionAbortedError: If the interaction is aborted.
        """
        ...


def _parse_token(token: str, count: int) -> range:
    match = _RANGE.match(token)
    if match is not None:
        start, end = int(match.group(1)), int(match.group(2))
    elif token.isdigit():
        start = end = int(token)
    else:
        msg = f"Not a row number or range: {token!r}"
        raise ValueError(msg)

    if start > end:
        msg = f"Range is reversed: {token!r}"
        raise ValueError(msg)
    if start < 1 or end > count:
        msg = f"Row out of range: {token!r} (choose 1-{count})"
        raise ValueError(msg)
    return range(start - 1, end)


def apply_selection_input(text: str, checked: Sequence[bool]) -> list[bool]:
    """Apply one command line to the checkbox states.

    Rows named by the command are toggled once, however many times they
    are named.

    Args:
        text: The command entered by the user. Must not be empty.
        checked: Current state of each row.

    Returns:
        The new state of each row.

    Raises:
        ValueError: If the command is not understood. The state is unchanged.
    """
    command = text.strip().lower()
    if command in _ALL_COMMANDS:
        return [True] * len(checked)
    if command in _NONE_COMMANDS:
        return [False] * len(checked)

    tokens = [t for t in _SEPARATORS.split(command) if t]
    if not tokens:
        msg = "Empty command"
        raise ValueError(msg)

    rows: set[int] = set()
    for token in tokens:
        rows.update(_parse_token(token, len(checked)))

    return [not state if i in rows else state for i, state in enumerate(checked)]


@dataclass(slots=True)
class RichMultiSelect:
    """Checkbox prompt rendered with rich.

    Attributes:
        console: Console to render to and read from.
        input_prompt: Markup shown before each command line.
    """

    console: Console = field(default_factory=Console)
    input_prompt: str = "[bold cyan]> [/bold cyan]"

    def _render(
        self, message: str, labels: Sequence[str], checked: Sequence[bool]
    ) -> Table:
        table = Table(
            title=message,
            title_justify="left",
            title_style="bold",
            show_header=False,
            box=None,
            padding=(0, 1),
        )
        table.add_column(justify="right", style="magenta")
        table.add_column()
        table.add_column()
        rows = zip(labels, checked, strict=True)
        for number, (label, state) in enumerate(rows, start=1):
            box = _CHECKED if state else _UNCHECKED
            table.add_row(str(number), box, Text(label))
        return table

    def select(
        self, message: str, labels: Sequence[str], defaults: Sequence[bool]
    ) -> list[int]:
        """Show the checkbox list and loop until the user confirms.

        Args:
            message: Heading above the list.
            labels: One label per row.
            defaults: Initial checked state of each row.

        Returns:
            Indices of the checked rows, ascending.

        Raises:
            SelectionAbortedError: If the input stream is closed.
        """
        checked = list(defaults)
        while True:
            self.console.print(self._render(message, labels, checked))
            self.console.print(f"[dim]{_HELP}[/dim]")
            try:
                text = self.console.input(self.input_prompt)
            except EOFError as e:
                msg = "Error selecting files"
                raise SelectionAbortedError(msg) from e

            if not text.strip():
                return [i for i, state in enumerate(checked) if state]

            try:
                checked = apply_selection_input(text, checked)
            except ValueError as e:
                self.console.print(f"[yellow]{escape(str(e))}[/yellow]")
