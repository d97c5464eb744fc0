"""Shared test fixtures for git-quick-add tests."""

import logging
import os
from dataclasses import dataclass
from io import StringIO
from pathlib import Path

import pytest
import structlog
from rich.console import Console
from structlog.testing import LogCapture
from structlog.typing import FilteringBoundLogger

from git_quick_add.utils import _paths


@pytest.fixture
def isolated_user_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point user config and log directories at a temporary location.

    Also removes GIT_QUICK_ADD_* variables inherited from the environment.
    """
    user_dir = tmp_path / "user"
    monkeypatch.setattr(_paths, "get_user_config_dir", lambda: user_dir / "config")
    monkeypatch.setattr(_paths, "get_log_dir", lambda: user_dir / "logs")
    for key in list(os.environ):
        if key.startswith("GIT_QUICK_ADD_"):
            monkeypatch.delenv(key)
    return user_dir


@dataclass(frozen=True, slots=True)
class CapturedConsole:
    """A rich console writing to memory."""

    console: Console
    stream: StringIO

    @property
    def text(self) -> str:
        return self.stream.getvalue()


def _captured_console() -> CapturedConsole:
    stream = StringIO()
    console = Console(file=stream, force_terminal=False, width=120)
    return CapturedConsole(console=console, stream=stream)


@pytest.fixture
def out() -> CapturedConsole:
    """Console standing in for stdout."""
    return _captured_console()


@pytest.fixture
def err() -> CapturedConsole:
    """Console standing in for stderr."""
    return _captured_console()


@pytest.fixture
def log_capture() -> LogCapture:
    return LogCapture()


@pytest.fixture
def logger(log_capture: LogCapture) -> FilteringBoundLogger:
    """Logger whose events are recorded in log_capture.entries."""
    return structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[log_capture],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
    )
