from pathlib import Path

import pytest

from git_quick_add.repository import FakeRepository


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def repo() -> FakeRepository:
    return FakeRepository()


@pytest.fixture(autouse=True)
def _user_dirs(isolated_user_dirs: Path) -> Path:
    return isolated_user_dirs
