# navm/core/config.py
"""
Configuration loading for navm.

One YAML file (``navm.yaml``) selects the runtime a controller launches and
tunes logging and the REPL. Every section is optional.

Usage:
    from navm.core.config import load_config

    config = load_config()              # ./navm.yaml if present, else defaults
    config = load_config("navm.yaml")   # explicit file

    config.runtime.launcher   # 'echo'
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from navm.logging import get_logger
from navm.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULT_CONFIG_FILENAME = "navm.yaml"


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Schema
# =============================================================================


class RuntimeConfig(BaseModel):
    """Which launcher to use and what to pass it."""

    model_config = ConfigDict(extra="forbid")

    launcher: str = "echo"
    options: Dict[str, Any] = Field(default_factory=dict)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return value


class ReplConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    prompt: str = "> "
    output_format: Literal["json", "text"] = "json"


class NavmConfig(BaseModel):
    """Root configuration container."""

    model_config = ConfigDict(extra="forbid")

    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    repl: ReplConfig = Field(default_factory=ReplConfig)


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Return ``navm.yaml`` in ``start`` (default: cwd) if it exists."""
    candidate = (start or Path.cwd()) / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(path: Optional[Union[str, Path]] = None) -> NavmConfig:
    """
    Load and validate the navm configuration.

    Args:
        path: Explicit config file. If None, ./navm.yaml is used when it
              exists, otherwise the defaults are returned.

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If config doesn't match the schema
    """
    resolved = Path(path) if path is not None else find_config_file()
    if resolved is None:
        logger.debug(f"{CONFIG} No config file found, using defaults")
        return NavmConfig()

    data = load_yaml(resolved)
    try:
        return NavmConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config: {e}", path=resolved) from e


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "RuntimeConfig",
    "LoggingConfig",
    "ReplConfig",
    "NavmConfig",
    "DEFAULT_CONFIG_FILENAME",
    "load_yaml",
    "find_config_file",
    "load_config",
]
