from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from git_quick_add.exceptions import ConfigError

from ._models import Config

if TYPE_CHECKING:
    from pathlib import Path

STRICT_ENV_VAR = "GIT_QUICK_ADD_STRICT_CONFIG"


def safe_load_config(
    *,
    project_root: Path | None = None,
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Attempts to load configuration and handles errors based on the
    GIT_QUICK_ADD_STRICT_CONFIG environment variable:
    - If unset or "0": warn to stderr and return the default config
    - If "1": fail fast with sys.exit(1)

    Args:
        project_root: Working tree root holding the project config file.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
        On failure (non-strict mode), returns default Config with the error.
    """
    strict_mode = os.environ.get(STRICT_ENV_VAR, "0") == "1"

    try:
        config = Config.load(project_root=project_root)
    except ConfigError as e:
        error_msg = str(e)
    except OSError as e:
        error_msg = f"Failed to load config: {e}"
    else:
        return config, None

    if strict_mode:
        print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    print(f"Warning: {error_msg}", file=sys.stderr)  # noqa: T201
    return Config.from_dict({}), error_msg
