from pathlib import Path

import pytest

from git_quick_add.exceptions import (
    ConfigLoadError,
    ConfigValidationError,
    HeadNotFoundError,
    IndexWriteError,
    OperationError,
    QuickAddError,
    ReconcileError,
    RepositoryUnavailableError,
    SelectionAbortedError,
    StageOperationError,
    StatusQueryError,
    UnstageOperationError,
)


class TestErrorTaxonomy:
    @pytest.mark.parametrize(
        "error_type",
        [
            RepositoryUnavailableError,
            StatusQueryError,
            SelectionAbortedError,
            StageOperationError,
            UnstageOperationError,
            IndexWriteError,
            ConfigLoadError,
        ],
    )
    def test_every_failure_exits_with_one(
        self, error_type: type[QuickAddError]
    ) -> None:
        assert issubclass(error_type, QuickAddError)
        assert error_type.exit_code == 1

    def test_head_not_found_is_an_unstage_failure(self) -> None:
        assert issubclass(HeadNotFoundError, UnstageOperationError)

    def test_operation_error_carries_path_and_cause(self) -> None:
        cause = RuntimeError("git failed")
        error = StageOperationError("cannot add", path="a.txt", cause=cause)

        assert str(error) == "cannot add"
        assert error.path == "a.txt"
        assert error.cause is cause

    def test_repository_unavailable_carries_path(self) -> None:
        error = RepositoryUnavailableError("nope", path=Path("/tmp/x"))
        assert error.path == Path("/tmp/x")

    def test_reconcile_error_freezes_failures(self) -> None:
        failures: list[OperationError] = [StageOperationError("x", path="a")]

        error = ReconcileError("1 staging operation failed", failures=failures)
        failures.clear()

        assert len(error.failures) == 1

    def test_config_validation_error_context(self) -> None:
        error = ConfigValidationError(
            "bad", key="logging.level", value="loud", expected="a level"
        )

        assert (error.key, error.value, error.expected, error.source) == (
            "logging.level",
            "loud",
            "a level",
            None,
        )
