# navm/vm/__init__.py
"""
navm runtimes - the launcher/runtime contract, the launcher registry and
the built-in echo backend.

Public API:
    - VmLauncher / VmRuntime: the abstract contract
    - BufferedRuntime: base class with listener chain and output buffer
    - VmStatus: Running / Terminated(outcome)
    - LauncherRegistry / get_launcher_registry: name -> launcher factory
    - EchoLauncher / EchoRuntime: in-process reference backend ("echo")
"""

from .echo import EchoLauncher, EchoRuntime
from .registry import LauncherRegistration, LauncherRegistry, get_launcher_registry
from .runtime import BufferedRuntime, OutputListener, VmLauncher, VmRuntime
from .status import VmState, VmStatus

__all__ = [
    # Contract
    "VmLauncher",
    "VmRuntime",
    "BufferedRuntime",
    "OutputListener",
    "VmState",
    "VmStatus",
    # Registry
    "LauncherRegistry",
    "LauncherRegistration",
    "get_launcher_registry",
    # Backends
    "EchoLauncher",
    "EchoRuntime",
]
