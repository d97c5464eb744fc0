"""GitPython-backed repository.

This module implements RepositoryProtocol on top of a real Git working
tree. Status is read from porcelain output so that index-side and
worktree-side changes of the same path are reported together, and index
mutations go through ``git add`` / ``git reset`` so that the index lock
is honoured.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final, Self

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from git_quick_add.exceptions import (
    HeadNotFoundError,
    IndexWriteError,
    OperationError,
    RepositoryUnavailableError,
    StageOperationError,
    StatusQueryError,
    UnstageOperationError,
)
from git_quick_add.repository._porcelain import parse_porcelain_status

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from git_quick_add.repository._models import ChangeRecord

# Arguments matching the default enumeration of libgit2-based tools:
# ignored entries are reported, untracked directories are expanded.
_STATUS_ARGS: Final = ("--porcelain=v1", "-z", "--ignored", "--untracked-files=all")

# Fragments of git error output that mean the index itself could not be written
_INDEX_WRITE_MARKERS: Final = ("index.lock", "unable to write", "unable to create")

# Paths are passed verbatim; names such as ":notes" must not be read as
# pathspec magic
_LITERAL_PATHSPECS: Final = {"GIT_LITERAL_PATHSPECS": "1"}


def _error_detail(error: GitCommandError) -> str:
    """Extract the human-readable part of a git error.

    Args:
        error: The error raised by GitPython.

    Returns:
        The stderr text without GitPython's framing, or the error string.
    """
    stderr = str(error.stderr).strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:") :].strip().strip("'").strip()
    return stderr or str(error)


class GitRepository:
    """Repository operations for a Git working tree.

    The class implements the context manager protocol; the underlying
    GitPython Repo is closed when exiting the context.

    Attributes:
        root: The resolved path to the working tree root.
    """

    __slots__: Final = ("_repo", "_root")
    _root: Path
    _repo: Repo

    def __init__(self, repo: Repo) -> None:
        """Wrap an opened GitPython repository.

        Args:
            repo: The repository to wrap.

        Raises:
            RepositoryUnavailableError: If the repository has no working tree.
        """
        working_tree_dir = repo.working_tree_dir
        if repo.bare or working_tree_dir is None:
            repo.close()
            msg = "Repository has no working tree"
            raise RepositoryUnavailableError(msg, path=Path(repo.git_dir))
        self._repo = repo
        self._root = Path(working_tree_dir).resolve()

    @classmethod
    def discover(cls, working_dir: Path | None = None) -> Self:
        """Open the repository containing the given directory.

        Args:
            working_dir: Directory to start the upward search from. If None,
                uses the current working directory.

        Returns:
            The repository rooted at or above the directory.

        Raises:
            RepositoryUnavailableError: If no repository is found.
        """
        if working_dir is None:
            working_dir = Path.cwd()
        try:
            repo = Repo(str(working_dir), search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            msg = "Not inside a Git repository"
            raise RepositoryUnavailableError(msg, path=working_dir) from e
        return cls(repo)

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        """Enter the context manager.

        Returns:
            The repository instance.
        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager and close the repository."""
        self.close()

    def close(self) -> None:
        """Close the underlying repository and its git processes."""
        self._repo.close()

    @property
    def root(self) -> Path:
        """Get the resolved root path of the working tree."""
        return self._root

    # =========================================================================
    # Status
    # =========================================================================

    def list_changes(self) -> list[ChangeRecord]:
        """List every changed path with its status flags.

        Returns:
            Change records in the order git reports them, ignored paths
            included.

        Raises:
            StatusQueryError: If git status fails or its output is malformed.
        """
        try:
            output: str = self._repo.git.status(*_STATUS_ARGS)
        except GitCommandError as e:
            msg = f"Failed to read repository status: {_error_detail(e)}"
            raise StatusQueryError(msg) from e

        try:
            return parse_porcelain_status(output)
        except ValueError as e:
            msg = f"Failed to parse repository status: {e}"
            raise StatusQueryError(msg) from e

    def resolve_head(self) -> str:
        """Resolve the commit HEAD points to.

        Returns:
            The HEAD commit SHA as a hex string.

        Raises:
            HeadNotFoundError: If HEAD is unborn (no commits yet).
        """
        head = self._repo.head
        if not head.is_valid():
            msg = "Cannot resolve HEAD: the repository has no commits yet"
            raise HeadNotFoundError(msg)
        return head.commit.hexsha

    # =========================================================================
    # Index Mutations
    # =========================================================================

    def stage(self, paths: Sequence[str]) -> None:
        """Add paths to the index in a single ``git add`` call.

        Deleted paths are recorded as deletions. Paths are matched
        literally, never as pathspec patterns.

        Args:
            paths: Repository-relative paths to stage.

        Raises:
            StageOperationError: If git refuses to stage a path.
            IndexWriteError: If the index cannot be locked or written.
        """
        if not paths:
            return
        try:
            _ = self._repo.git.add("--", *paths, env=_LITERAL_PATHSPECS)
        except GitCommandError as e:
            raise _operation_error(StageOperationError, "stage", paths, e) from e

    def unstage(self, target: str, paths: Sequence[str]) -> None:
        """Reset index entries to the target commit in a single ``git reset``.

        The working tree is left untouched.

        Args:
            target: Commit SHA to reset entries to.
            paths: Repository-relative paths to reset.

        Raises:
            UnstageOperationError: If git refuses to reset a path.
            IndexWriteError: If the index cannot be locked or written.
        """
        if not paths:
            return
        try:
            _ = self._repo.git.reset(
                "-q", target, "--", *paths, env=_LITERAL_PATHSPECS
            )
        except GitCommandError as e:
            raise _operation_error(UnstageOperationError, "unstage", paths, e) from e


def _operation_error(
    error_type: type[OperationError],
    verb: str,
    paths: Sequence[str],
    error: GitCommandError,
) -> OperationError:
    """Build the error for a failed index mutation.

    Args:
        error_type: Error class for path-level failures.
        verb: Operation name used in the message.
        paths: Paths passed to the failing command.
        error: The error raised by GitPython.

    Returns:
        IndexWriteError when git could not write the index, otherwise an
        instance of error_type. The path is set when exactly one path was
        involved.
    """
    detail = _error_detail(error)
    path = paths[0] if len(paths) == 1 else None
    target = path if path is not None else f"{len(paths)} paths"

    if any(marker in detail for marker in _INDEX_WRITE_MARKERS):
        msg = f"Failed to write index while trying to {verb} {target}: {detail}"
        return IndexWriteError(msg, path=path, cause=error)

    msg = f"Failed to {verb} {target}: {detail}"
    return error_type(msg, path=path, cause=error)
