# navm/core/__init__.py
"""
navm core - error taxonomy and configuration.

Public API:
    - Exceptions: NavmError and the command/output/runtime error families
    - NavmConfig / load_config: YAML configuration
"""

from .config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    NavmConfig,
    load_config,
)
from .exceptions import (
    CmdParseError,
    DuplicateLauncherError,
    EmptyInputError,
    InsufficientParamsError,
    JsonDecodeError,
    LauncherNotFoundError,
    LauncherRegistryError,
    LaunchError,
    MissingHeadError,
    NavmError,
    NumericParseError,
    OperationMissingOperatorError,
    RuntimeOutputError,
    RuntimeSubmissionError,
    RuntimeTerminationError,
    TermCoercionError,
    TermParseError,
    VmError,
)

__all__ = [
    # Exceptions
    "NavmError",
    "CmdParseError",
    "EmptyInputError",
    "MissingHeadError",
    "InsufficientParamsError",
    "NumericParseError",
    "TermParseError",
    "TermCoercionError",
    "JsonDecodeError",
    "OperationMissingOperatorError",
    "VmError",
    "LaunchError",
    "RuntimeSubmissionError",
    "RuntimeOutputError",
    "RuntimeTerminationError",
    "LauncherRegistryError",
    "LauncherNotFoundError",
    "DuplicateLauncherError",
    # Config
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "NavmConfig",
    "load_config",
]
