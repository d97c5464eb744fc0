"""git-quick-add exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class QuickAddError(Exception):
    """Base exception for git-quick-add errors.

    Attributes:
        exit_code: Process exit code the CLI reports for this failure category.
    """

    exit_code: ClassVar[int] = 1


# =============================================================================
# Repository Exceptions
# =============================================================================


class RepositoryUnavailableError(QuickAddError):
    """Raised when the working directory is not inside a usable repository.

    Attributes:
        path: The directory discovery started from.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and discovery context."""
        super().__init__(message)
        self.path: Path | None = path


class StatusQueryError(QuickAddError):
    """Raised when the repository status cannot be enumerated."""


class OperationError(QuickAddError):
    """Base exception for index mutations.

    Attributes:
        path: Repository-relative path of the failing entry, if known.
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and path context."""
        super().__init__(message)
        self.path: str | None = path
        self.cause: Exception | None = cause


class StageOperationError(OperationError):
    """Raised when a path cannot be added to the index."""


class UnstageOperationError(OperationError):
    """Raised when an index entry cannot be reset to HEAD."""


class HeadNotFoundError(UnstageOperationError):
    """Raised when HEAD cannot be resolved (repository without commits)."""


class IndexWriteError(OperationError):
    """Raised when the index cannot be locked or written."""


class ReconcileError(QuickAddError):
    """Raised when one or more index mutations failed.

    Attributes:
        failures: Every failed operation, in record order.
    """

    def __init__(self, message: str, *, failures: Sequence[OperationError]) -> None:
        """Initialize with error message and the aggregated failures."""
        super().__init__(message)
        self.failures: tuple[OperationError, ...] = tuple(failures)


# =============================================================================
# Selection Exceptions
# =============================================================================


class SelectionAbortedError(QuickAddError):
    """Raised when the interactive selection fails or is cancelled."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(QuickAddError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
