"""
navm - a command/output protocol between controllers and NARS-style
reasoning backends.

Quick Start:
    >>> from navm import parse_cmd, get_launcher_registry
    >>> runtime = get_launcher_registry().create_launcher("echo").launch()
    >>> runtime.input_cmd(parse_cmd("NSE <A --> B>."))
    >>> runtime.fetch_output().raw_content
    '<A --> B>.'

Public API:
    Commands:
        - Cmd (+ variants), parse_cmd, format_cmd
    Outputs:
        - Output (+ variants), Operation, OutputType
        - to_json_string / from_json_string (+ array variants)
    Runtimes:
        - VmLauncher, VmRuntime, BufferedRuntime, VmStatus
        - LauncherRegistry, get_launcher_registry
    Terms:
        - TermInterop, DEFAULT_INTEROP

Architecture:
    navm/
    ├── narsese/   # Default term adapter (lexical ASCII Narsese)
    ├── cmd/       # Command model + text codec
    ├── output/    # Output model + JSON codec
    ├── vm/        # Launcher/runtime contract, registry, echo backend
    ├── core/      # Errors and configuration
    ├── logging/   # get_logger / configure_logging
    └── cli/       # `navm` command line
"""

__version__ = "0.1.0"

from navm.cmd import Cmd, CmdHead, format_cmd, parse_cmd
from navm.core.exceptions import (
    CmdParseError,
    JsonDecodeError,
    NavmError,
    VmError,
)
from navm.narsese import DEFAULT_INTEROP, TermInterop
from navm.output import (
    Operation,
    Output,
    OutputType,
    from_json_array_string,
    from_json_string,
    to_json_array_string,
    to_json_string,
)
from navm.vm import (
    BufferedRuntime,
    LauncherRegistry,
    VmLauncher,
    VmRuntime,
    VmStatus,
    get_launcher_registry,
)

__all__ = [
    "__version__",
    # Commands
    "Cmd",
    "CmdHead",
    "parse_cmd",
    "format_cmd",
    # Outputs
    "Output",
    "OutputType",
    "Operation",
    "to_json_string",
    "from_json_string",
    "to_json_array_string",
    "from_json_array_string",
    # Runtimes
    "VmLauncher",
    "VmRuntime",
    "BufferedRuntime",
    "VmStatus",
    "LauncherRegistry",
    "get_launcher_registry",
    # Terms
    "TermInterop",
    "DEFAULT_INTEROP",
    # Errors
    "NavmError",
    "CmdParseError",
    "JsonDecodeError",
    "VmError",
]
