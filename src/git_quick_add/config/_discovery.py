"""Configuration source discovery.

This module lists the configuration layers in precedence order, from the
built-in defaults to environment variables.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from git_quick_add.config._models import ConfigSource, ConfigSourceName
from git_quick_add.utils import get_project_config_path, get_user_config_path

if TYPE_CHECKING:
    from pathlib import Path


def _file_exists(path: Path) -> bool:
    """Check if a file exists, treating permission errors as absence."""
    try:
        return path.is_file()
    except OSError:
        return False


def discover_sources(*, project_root: Path | None = None) -> list[ConfigSource]:
    """Discover configuration sources.

    File sources are only returned when the file exists. Values are loaded
    later by Config.load().

    Args:
        project_root: Working tree root, or None to skip the project file.

    Returns:
        Sources ordered from lowest to highest precedence.
    """
    sources = [ConfigSource(name=ConfigSourceName.DEFAULT)]

    user_path = get_user_config_path()
    if _file_exists(user_path):
        sources.append(ConfigSource(name=ConfigSourceName.USER, path=user_path))

    if project_root is not None:
        project_path = get_project_config_path(project_root)
        if _file_exists(project_path):
            sources.append(
                ConfigSource(name=ConfigSourceName.PROJECT, path=project_path)
            )

    sources.append(ConfigSource(name=ConfigSourceName.ENV))
    return sources
