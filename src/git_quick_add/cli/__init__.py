"""Command-line interface for git-quick-add."""

from ._app import app, create_app, main, run_quick_add
from ._output import CLEAN_MESSAGE, render_changes, render_clean, render_failures
from ._prompt import RichMultiSelect, SelectionPrompt, apply_selection_input

__all__ = [
    "CLEAN_MESSAGE",
    "RichMultiSelect",
    "SelectionPrompt",
    "app",
    "apply_selection_input",
    "create_app",
    "main",
    "render_changes",
    "render_clean",
    "render_failures",
    "run_quick_add",
]
