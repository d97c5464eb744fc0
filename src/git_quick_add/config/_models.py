# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

This module provides the frozen Pydantic models for each configuration
section and the Config container that merges the configuration layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from git_quick_add.config._defaults import DEFAULT_CONFIG
from git_quick_add.config._loader import deep_merge, parse_env_vars, read_toml_file
from git_quick_add.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Self


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class ConfigSourceName(StrEnum):
    """Configuration source names, from lowest to highest precedence."""

    DEFAULT = "default"
    USER = "user"
    PROJECT = "project"
    ENV = "env"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """Represents a configuration source.

    Attributes:
        name: The source type identifier.
        path: Path to the config file, or None for non-file sources.
    """

    name: ConfigSourceName
    path: Path | None = None

    @property
    def label(self) -> str:
        """Name used in error messages: the file path or the source name."""
        return str(self.path) if self.path is not None else self.name.value


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty uses the default CLI log file).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""


class PromptConfig(BaseModel):
    """Interactive prompt configuration section.

    Attributes:
        message: Heading shown above the list of changed files.
        show_status: Prefix each file with its two-letter status code.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    message: str = "Choose files to stage"
    show_status: bool = True


def _key_in(values: dict[str, Any], key: str) -> bool:
    """Check whether a dotted key is set in a nested dictionary."""
    current: Any = values
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return False
        current = current[part]
    return True


def _validation_error(
    error: ValidationError,
    layers: list[tuple[ConfigSource, dict[str, Any]]],
) -> ConfigValidationError:
    """Convert the first Pydantic error into a ConfigValidationError.

    The error is attributed to the highest-precedence file or environment
    layer that sets the offending key.
    """
    detail = error.errors()[0]
    key = ".".join(str(part) for part in detail["loc"])
    source = next(
        (
            s.label
            for s, values in reversed(layers)
            if s.name != ConfigSourceName.DEFAULT and _key_in(values, key)
        ),
        None,
    )
    where = f" (from {source})" if source is not None else ""
    msg = f"Invalid configuration value for '{key}'{where}: {detail['msg']}"
    return ConfigValidationError(
        msg,
        key=key,
        value=detail.get("input"),
        expected=detail["msg"],
        source=source,
    )


class Config(BaseModel):
    """Merged git-quick-add configuration.

    Attributes:
        logging: Logging settings.
        prompt: Interactive prompt settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)

    @classmethod
    def _from_layers(cls, layers: list[tuple[ConfigSource, dict[str, Any]]]) -> Self:
        merged: dict[str, Any] = {}
        for _, values in layers:
            merged = deep_merge(merged, values)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            raise _validation_error(e, layers) from e

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary merged over the defaults.

        Raises:
            ConfigValidationError: If validation fails.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        return cls._from_layers([(ConfigSource(ConfigSourceName.DEFAULT), merged)])

    @classmethod
    def load(
        cls,
        *,
        project_root: Path | None = None,
        include_env: bool = True,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in precedence order (defaults -> user -> project
        -> env).

        Args:
            project_root: Working tree root holding the project config file.
                If None, the project layer is skipped.
            include_env: Include environment variables as a source.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If a config file cannot be parsed.
            ConfigValidationError: If merged config fails validation. The
                error's source names the layer that set the bad value.
        """
        # Deferred import to avoid circular dependency
        from git_quick_add.config._discovery import discover_sources  # noqa: PLC0415

        layers: list[tuple[ConfigSource, dict[str, Any]]] = []
        for source in discover_sources(project_root=project_root):
            if source.name == ConfigSourceName.DEFAULT:
                layers.append((source, DEFAULT_CONFIG))
            elif source.name == ConfigSourceName.ENV:
                if include_env:
                    layers.append((source, parse_env_vars()))
            elif source.path is not None:
                layers.append((source, read_toml_file(source.path)))

        return cls._from_layers(layers)
