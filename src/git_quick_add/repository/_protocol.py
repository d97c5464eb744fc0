# ruff: noqa: TC003  # Path needed at runtime for Protocol method bodies
"""Repository protocol for type-safe dependency injection.

This module defines a runtime-checkable Protocol that both GitRepository
and FakeRepository satisfy, so the status resolver and the reconciler can
be exercised without a real repository.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from git_quick_add.repository._models import ChangeRecord


@runtime_checkable
class RepositoryProtocol(Protocol):
    """Protocol for the repository operations used to reconcile the index.

    Example:
        >>> def stage_everything(repo: RepositoryProtocol) -> None:
        ...     paths = [r.index_to_workdir.new_path for r in repo.list_changes()]
        ...     repo.stage([p for p in paths if p])
    """

    @property
    def root(self) -> Path:
        """Root directory of the working tree.

        Returns:
            The absolute path to the working tree root.
        """
        ...

    def close(self) -> None:
        """Release resources held by the repository."""
        ...

    def list_changes(self) -> list[ChangeRecord]:
        """List every changed path with its status flags.

        Returns:
            Raw change records relative to HEAD and the working tree,
            ignored paths included.

        Raises:
            StatusQueryError: If the status cannot be enumerated.
        """
        ...

    def resolve_head(self) -> str:
        """Resolve the commit HEAD points to.

        Returns:
            The HEAD commit SHA as a hex string.

        Raises:
            HeadNotFoundError: If the repository has no commits.
        """
        ...

    def stage(self, paths: Sequence[str]) -> None:
        """Add paths to the index and write it.

        Args:
            paths: Repository-relative paths to stage.

        Raises:
            StageOperationError: If a path cannot be staged.
            IndexWriteError: If the index cannot be written.
        """
        ...

    def unstage(self, target: str, paths: Sequence[str]) -> None:
        """Reset index entries to their state in the target commit.

        Args:
            target: Commit SHA to reset entries to (normally HEAD).
            paths: Repository-relative paths to reset.

        Raises:
            UnstageOperationError: If a path cannot be reset.
            IndexWriteError: If the index cannot be written.
        """
        ...
