# navm/core/exceptions.py
"""
All exceptions for the navm protocol core.

Hierarchy:
    NavmError
    ├── CmdParseError - A command line could not be parsed
    │   ├── EmptyInputError - Blank command line
    │   ├── MissingHeadError - No command head to dispatch on
    │   ├── InsufficientParamsError - Too few parameters for a strict command
    │   ├── NumericParseError - CYC/VOL argument is not an unsigned integer
    │   ├── TermParseError - Embedded Narsese rejected by the term adapter
    │   └── TermCoercionError - Parsed Narsese cannot become a task
    ├── JsonDecodeError - Malformed output JSON or schema violation
    │   └── OperationMissingOperatorError - Operation array is empty
    └── VmError - Runtime contract failures
        ├── LaunchError - Launcher failed or was reused
        ├── RuntimeSubmissionError - input_cmd failed locally
        ├── RuntimeOutputError - No further output can be fetched
        ├── RuntimeTerminationError - Shutdown failed
        └── LauncherRegistryError - Launcher lookup/registration failed
            ├── LauncherNotFoundError
            └── DuplicateLauncherError
"""

from __future__ import annotations


class NavmError(Exception):
    """Base error for the navm package."""

    pass


# =============================================================================
# Command Parsing Errors
# =============================================================================


class CmdParseError(NavmError):
    """A command line could not be parsed."""

    pass


class EmptyInputError(CmdParseError):
    """The command line is empty or whitespace only."""

    def __init__(self, message: str = "Cannot parse an empty command line"):
        super().__init__(message)


class MissingHeadError(CmdParseError):
    """No command head could be separated from the line."""

    def __init__(self, message: str = "Command line has no head"):
        super().__init__(message)


class InsufficientParamsError(CmdParseError):
    """A strict command received fewer parameters than it needs."""

    def __init__(self, needed: int, head: str = ""):
        self.needed = needed
        self.head = head
        where = f" for {head}" if head else ""
        super().__init__(f"Insufficient parameters{where}: {needed} required")


class NumericParseError(CmdParseError):
    """A numeric parameter is not a valid unsigned integer."""

    def __init__(self, value: str, head: str = ""):
        self.value = value
        self.head = head
        where = f" for {head}" if head else ""
        super().__init__(f"Invalid unsigned integer{where}: {value!r}")


class TermParseError(CmdParseError):
    """The term adapter rejected the embedded Narsese text."""

    pass


class TermCoercionError(CmdParseError):
    """Parsed Narsese could not be coerced into a task."""

    pass


# =============================================================================
# Output Decoding Errors
# =============================================================================


class JsonDecodeError(NavmError):
    """Output JSON is malformed or does not match the schema."""

    pass


class OperationMissingOperatorError(JsonDecodeError):
    """An operation array was present but empty."""

    def __init__(self, message: str = "Operation is missing its operator"):
        super().__init__(message)


# =============================================================================
# Runtime Errors
# =============================================================================


class VmError(NavmError):
    """Runtime contract failure."""

    pass


class LaunchError(VmError):
    """A launcher failed to produce a runtime."""

    pass


class RuntimeSubmissionError(VmError):
    """A command could not be submitted to the runtime."""

    pass


class RuntimeOutputError(VmError):
    """The runtime cannot produce any further output."""

    pass


class RuntimeTerminationError(VmError):
    """The runtime failed while shutting down."""

    pass


class LauncherRegistryError(VmError):
    """Base error for launcher registry operations."""

    pass


class LauncherNotFoundError(LauncherRegistryError):
    """Raised when a requested launcher isn't registered."""

    pass


class DuplicateLauncherError(LauncherRegistryError):
    """Raised when two launchers share a name."""

    pass


__all__ = [
    "NavmError",
    # Command parsing
    "CmdParseError",
    "EmptyInputError",
    "MissingHeadError",
    "InsufficientParamsError",
    "NumericParseError",
    "TermParseError",
    "TermCoercionError",
    # Output decoding
    "JsonDecodeError",
    "OperationMissingOperatorError",
    # Runtime
    "VmError",
    "LaunchError",
    "RuntimeSubmissionError",
    "RuntimeOutputError",
    "RuntimeTerminationError",
    "LauncherRegistryError",
    "LauncherNotFoundError",
    "DuplicateLauncherError",
]
