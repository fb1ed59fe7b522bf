# navm/vm/registry.py
"""
Launcher Registry - pick a backend by name.

Built-in launchers (``echo``) are present in every global registry;
third-party launchers register themselves on import. Controllers (the CLI,
a config file) then refer to them by name only.

    @LauncherRegistry.register_launcher(name="echo", description="Echoes input")
    def create_echo(**options) -> VmLauncher:
        return EchoLauncher(**options)

    launcher = get_launcher_registry().create_launcher("echo", echo_prefix="> ")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from navm.core.exceptions import DuplicateLauncherError, LauncherNotFoundError, LaunchError
from navm.logging import get_logger
from navm.logging.tags import REGISTRY

from .runtime import VmLauncher

logger = get_logger(__name__)

LauncherFactory = Callable[..., VmLauncher]


@dataclass(frozen=True)
class LauncherRegistration:
    """Metadata about a registered launcher."""

    name: str
    factory: LauncherFactory
    description: str = ""


class LauncherRegistry:
    """
    Name -> launcher factory mapping.

    A factory takes the launcher options as keyword arguments and returns a
    fresh, unlaunched ``VmLauncher``.
    """

    _global_registry: Optional["LauncherRegistry"] = None

    def __init__(self):
        self._launchers: Dict[str, LauncherRegistration] = {}

    @classmethod
    def get_global(cls) -> "LauncherRegistry":
        """Get the global singleton registry, with the built-in launchers registered."""
        if cls._global_registry is None:
            registry = cls()
            _register_builtins(registry)
            cls._global_registry = registry
        return cls._global_registry

    @classmethod
    def reset_global(cls) -> None:
        """Reset the global registry (useful for testing)."""
        cls._global_registry = None

    def register(self, name: str, factory: LauncherFactory, description: str = "") -> None:
        """
        Register a launcher factory.

        Raises:
            DuplicateLauncherError: If ``name`` is already taken
        """
        if not name:
            raise ValueError("Launcher name cannot be empty")
        if name in self._launchers:
            raise DuplicateLauncherError(f"Launcher '{name}' is already registered")

        self._launchers[name] = LauncherRegistration(name=name, factory=factory, description=description)
        logger.debug(f"{REGISTRY} Registered launcher '{name}'")

    def get_info(self, name: str) -> LauncherRegistration:
        """
        Raises:
            LauncherNotFoundError: If no launcher has this name
        """
        if name not in self._launchers:
            available = ", ".join(self.list_launchers()) or "(none)"
            raise LauncherNotFoundError(f"Unknown launcher: '{name}'. Available launchers: {available}")
        return self._launchers[name]

    def get(self, name: str) -> LauncherFactory:
        """Get the factory registered under ``name``."""
        return self.get_info(name).factory

    def create_launcher(self, name: str, **options: Any) -> VmLauncher:
        """
        Build a fresh launcher, passing ``options`` to its factory.

        Raises:
            LauncherNotFoundError: If no launcher has this name
            LaunchError: If the factory rejects the options
        """
        factory = self.get(name)
        logger.debug(f"{REGISTRY} Creating launcher '{name}' with options {sorted(options)}")
        try:
            return factory(**options)
        except (TypeError, ValueError) as e:
            raise LaunchError(f"Invalid options for launcher '{name}': {e}") from e

    def list_launchers(self) -> List[str]:
        return sorted(self._launchers)

    def list_with_descriptions(self) -> Dict[str, str]:
        return {name: self._launchers[name].description for name in self.list_launchers()}

    def __contains__(self, name: object) -> bool:
        return name in self._launchers

    @staticmethod
    def register_launcher(name: str, description: str = "") -> Callable[[LauncherFactory], LauncherFactory]:
        """Decorator registering a factory with the global registry."""

        def decorator(factory: LauncherFactory) -> LauncherFactory:
            LauncherRegistry.get_global().register(name=name, factory=factory, description=description)
            return factory

        return decorator


def _register_builtins(registry: LauncherRegistry) -> None:
    from navm.vm.echo import EchoLauncher

    registry.register("echo", EchoLauncher, description="Reference backend that echoes Narsese input")


def get_launcher_registry() -> LauncherRegistry:
    """Get the global launcher registry."""
    return LauncherRegistry.get_global()


__all__ = [
    "LauncherFactory",
    "LauncherRegistration",
    "LauncherRegistry",
    "get_launcher_registry",
]
