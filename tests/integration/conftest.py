import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def _isolated_git(
    isolated_user_dirs: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep host git configuration out of the tests."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


@dataclass(frozen=True, slots=True)
class GitWorkspace:
    """A real git repository in a temporary directory."""

    root: Path

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=str(self.root),
            capture_output=True,
            check=True,
            text=True,
        )
        return result.stdout

    def write(self, path: str, content: str = "content\n") -> Path:
        file_path = self.root / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        _ = file_path.write_text(content)
        return file_path

    def commit(self, *paths: str, message: str = "commit") -> str:
        """Write (if missing), add and commit paths; return the new HEAD."""
        for path in paths:
            if not (self.root / path).exists():
                _ = self.write(path)
        if paths:
            _ = self.git("add", "--", *paths)
        _ = self.git("commit", "-q", "--allow-empty", "-m", message)
        return self.git("rev-parse", "HEAD").strip()

    def staged(self) -> list[str]:
        return sorted(self.git("diff", "--cached", "--name-only").split())

    def porcelain(self) -> str:
        return self.git("status", "--porcelain=v1")


def init_git_repo(path: Path) -> GitWorkspace:
    """Initialize a minimal git repository in the given path."""
    workspace = GitWorkspace(root=path)
    _ = workspace.git("init", "-q")
    _ = workspace.git("config", "user.email", "test@example.com")
    _ = workspace.git("config", "user.name", "Test User")
    _ = workspace.git("config", "commit.gpgsign", "false")
    return workspace


@pytest.fixture
def workspace(tmp_path: Path) -> GitWorkspace:
    root = tmp_path / "project"
    root.mkdir()
    return init_git_repo(root)
