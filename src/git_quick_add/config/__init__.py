"""Configuration management for git-quick-add.

Configuration is read in layers, each overriding the previous one:

1. Built-in defaults
2. User file (``config.toml`` in the platform config directory)
3. Project file (``.git-quick-add.toml`` at the working tree root)
4. Environment variables (``GIT_QUICK_ADD_<SECTION>__<KEY>``)

Example:
    >>> from git_quick_add.config import Config
    >>> config = Config.from_dict({"prompt": {"show_status": False}})
    >>> config.prompt.show_status
    False
"""

from ._discovery import discover_sources
from ._load import STRICT_ENV_VAR, safe_load_config
from ._models import (
    Config,
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LoggingConfig,
    LogLevel,
    PromptConfig,
)

__all__ = [
    "STRICT_ENV_VAR",
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PromptConfig",
    "discover_sources",
    "safe_load_config",
]
