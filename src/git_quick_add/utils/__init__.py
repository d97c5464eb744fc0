from ._logging import DEBUG_ENV_VAR, LogFormatType, create_cli_logger
from ._paths import (
    APP_NAME,
    PROJECT_CONFIG_NAME,
    get_cli_log_file,
    get_log_dir,
    get_project_config_path,
    get_user_config_dir,
    get_user_config_path,
)

__all__ = [
    "APP_NAME",
    "DEBUG_ENV_VAR",
    "PROJECT_CONFIG_NAME",
    "LogFormatType",
    "create_cli_logger",
    "get_cli_log_file",
    "get_log_dir",
    "get_project_config_path",
    "get_user_config_dir",
    "get_user_config_path",
]
