"""Configuration loading with environment variable substitution."""

import json
import os
import re
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from lazyfs.exceptions import ConfigError
from lazyfs.observability import LogLevel, configure_logging

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)\}")


def substitute_env_vars(value: Any) -> Any:
    """Recursively substitute ${VAR_NAME} patterns with environment variables."""
    if isinstance(value, str):
        def replace(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable {var_name} is not set")
            return env_value

        return ENV_VAR_PATTERN.sub(replace, value)
    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]
    return value


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: LogLevel = LogLevel.INFO
    format: Literal["json", "text"] = "json"

    def apply(self) -> None:
        """Configure the lazyfs logger from these settings."""
        configure_logging(level=self.level, format=self.format)


class FilesystemConfig(BaseModel):
    """Filesystem facade settings."""

    emit_metrics: bool = True


class Config(BaseModel):
    """Main configuration for lazyfs."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    filesystem: FilesystemConfig = Field(default_factory=FilesystemConfig)

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML or JSON file."""
        path = Path(path)
        try:
            with path.open() as f:
                if path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot load configuration from {path}: {e}") from e

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Load configuration from a dictionary."""
        data = substitute_env_vars(data)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(e)) from e
