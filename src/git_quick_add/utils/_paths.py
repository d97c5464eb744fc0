from pathlib import Path

import platformdirs

APP_NAME = "git-quick-add"
PROJECT_CONFIG_NAME = ".git-quick-add.toml"


def get_user_config_dir() -> Path:
    """Get the platform-specific user configuration directory."""
    return platformdirs.user_config_path(APP_NAME)


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/git-quick-add/config.toml``
    - macOS: ``~/Library/Application Support/git-quick-add/config.toml``
    - Windows: ``%APPDATA%\git-quick-add\config.toml``

    The path is returned regardless of whether the file exists.

    Returns:
        Path to the user config file for the current platform.
    """
    return get_user_config_dir() / "config.toml"


def get_project_config_path(worktree_root: Path) -> Path:
    """Get the path to the project config file at a worktree root."""
    return worktree_root / PROJECT_CONFIG_NAME


def get_log_dir() -> Path:
    """Get the platform-specific log directory."""
    return platformdirs.user_log_path(APP_NAME)


def get_cli_log_file() -> Path:
    """Get the path to the default CLI log file.

    Returns:
        Path to ``cli.log`` inside the user log directory.
    """
    return get_log_dir() / "cli.log"
