"""The command-line interface for git-quick-add."""
# ruff: noqa: TC003  # Path needed at runtime for create_app signature

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from cyclopts import App
from rich.console import Console
from rich.markup import escape

from git_quick_add import __version__
from git_quick_add.config import PromptConfig, safe_load_config
from git_quick_add.exceptions import (
    QuickAddError,
    RepositoryUnavailableError,
    SelectionAbortedError,
)
from git_quick_add.repository import GitRepository
from git_quick_add.staging import (
    apply_selection,
    build_prompt_rows,
    display_text,
    reconcile,
    resolve_changes,
)
from git_quick_add.utils import create_cli_logger

from ._output import render_changes, render_clean, render_failures
from ._prompt import RichMultiSelect, SelectionPrompt

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from git_quick_add.config import Config
    from git_quick_add.repository import RepositoryProtocol

APP_HELP: Final = "Interactively choose which changed files are staged."


def run_quick_add(
    repo: RepositoryProtocol,
    prompt: SelectionPrompt,
    *,
    console: Console,
    error_console: Console,
    logger: FilteringBoundLogger,
    prompt_config: PromptConfig | None = None,
) -> int:
    """Resolve status, ask for a selection and converge the index to it.

    Args:
        repo: The repository to operate on.
        prompt: Multi-select prompt used for the selection.
        console: Console for the change log.
        error_console: Console for failure details.
        logger: Structured logger for the run.
        prompt_config: Prompt settings; defaults when None.

    Returns:
        Exit code 0. A clean working tree is a success.

    Raises:
        StatusQueryError: If the status cannot be read.
        SelectionAbortedError: If the selection fails.
        ReconcileError: If any stage or unstage operation failed.
        IndexWriteError: If the index cannot be written.
    """
    if prompt_config is None:
        prompt_config = PromptConfig()

    snapshot = resolve_changes(repo)
    logger.info(
        "status_resolved",
        items=len(snapshot.items),
        records=snapshot.total_records,
        ignored=snapshot.ignored_records,
    )

    if snapshot.is_clean:
        logger.info("working_tree_clean")
        render_clean(console)
        return 0

    labels, defaults = build_prompt_rows(
        snapshot.items, show_status=prompt_config.show_status
    )
    chosen = prompt.select(prompt_config.message, labels, defaults)
    try:
        apply_selection(snapshot.items, chosen)
    except ValueError as e:
        msg = "Error selecting files"
        raise SelectionAbortedError(msg) from e
    logger.info("selection_made", selected=len(chosen), items=len(snapshot.items))

    result = reconcile(repo, snapshot.items)
    logger.info(
        "reconciled",
        staged=sorted(result.staged),
        unstaged=sorted(result.unstaged),
        failed=len(result.failures),
    )

    render_changes(console, result)
    for failure in result.failures:
        logger.warning(
            "operation_failed",
            path=failure.path,
            error=str(failure),
            error_type=type(failure).__name__,
        )
    render_failures(error_console, result.failures)

    result.raise_for_failures()
    return 0


def _configure(project_root: Path | None) -> tuple[Config, FilteringBoundLogger]:
    """Load configuration and create the logger for one invocation."""
    config, _ = safe_load_config(project_root=project_root)
    logger = create_cli_logger(
        level=config.logging.level.value,
        log_format=config.logging.format.value,  # type: ignore[arg-type]
        log_file=config.logging.file,
    )
    return config, logger


def _report_failure(
    error: QuickAddError, error_console: Console, logger: FilteringBoundLogger
) -> int:
    """Report a failure to the user and the log; return its exit code."""
    logger.error(
        "command_failed",
        error=str(error),
        error_type=type(error).__name__,
        exc_info=error,
    )
    error_console.print(f"[red]Error:[/red] {escape(display_text(str(error)))}")
    return error.exit_code


def _execute(
    console: Console,
    error_console: Console,
    prompt: SelectionPrompt,
    working_dir: Path | None,
) -> int:
    """Run one invocation and map failures to an exit code."""
    try:
        repo = GitRepository.discover(working_dir)
    except RepositoryUnavailableError as e:
        _, logger = _configure(None)
        return _report_failure(e, error_console, logger)

    config, logger = _configure(repo.root)
    logger = logger.bind(repository=str(repo.root))
    with repo:
        try:
            return run_quick_add(
                repo,
                prompt,
                console=console,
                error_console=error_console,
                logger=logger,
                prompt_config=config.prompt,
            )
        except QuickAddError as e:
            return _report_failure(e, error_console, logger)


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    prompt: SelectionPrompt | None = None,
    working_dir: Path | None = None,
    exit_on_error: bool = True,
) -> App:
    """Build the git-quick-add application.

    Args:
        console: Console for standard output.
        error_console: Console for error output.
        prompt: Selection prompt; a RichMultiSelect on the console if None.
        working_dir: Directory to discover the repository from; the
            current directory if None.
        exit_on_error: Exit on command-line parsing errors.

    Returns:
        The configured cyclopts App.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    selection_prompt = prompt if prompt is not None else RichMultiSelect(console)

    app = App(
        name="git-quick-add",
        help=APP_HELP,
        version=__version__,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _default() -> None:  # pyright: ignore[reportUnusedFunction]
        """Choose the files to stage from the working tree changes."""
        code = _execute(console, error_console, selection_prompt, working_dir)
        if code:
            raise SystemExit(code)

    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `git-quick-add` CLI."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()
