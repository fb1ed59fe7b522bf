# tests/unit/test_vm_registry.py
"""Tests for the launcher registry."""

import pytest

from navm.core.exceptions import DuplicateLauncherError, LauncherNotFoundError, LaunchError, LauncherRegistryError
from navm.vm import EchoLauncher, LauncherRegistry, get_launcher_registry


def test_echo_is_registered_by_default(fresh_registry):
    assert "echo" in fresh_registry.list_launchers()
    assert isinstance(fresh_registry.create_launcher("echo"), EchoLauncher)


def test_global_registry_is_a_singleton(fresh_registry):
    assert get_launcher_registry() is fresh_registry
    assert LauncherRegistry.get_global() is fresh_registry


def test_options_reach_the_factory(fresh_registry):
    launcher = fresh_registry.create_launcher("echo", echo_prefix=">> ")
    assert launcher.echo_prefix == ">> "


def test_bad_options_are_a_launch_error(fresh_registry):
    with pytest.raises(LaunchError):
        fresh_registry.create_launcher("echo", no_such_option=1)


def test_unknown_launcher_lists_available(fresh_registry):
    with pytest.raises(LauncherNotFoundError) as exc_info:
        fresh_registry.get("does_not_exist")

    message = str(exc_info.value)
    assert "does_not_exist" in message
    assert "Available" in message
    assert "echo" in message


def test_duplicate_name(fresh_registry):
    with pytest.raises(DuplicateLauncherError):
        fresh_registry.register("echo", EchoLauncher)


def test_registry_errors_share_a_base():
    assert issubclass(LauncherNotFoundError, LauncherRegistryError)
    assert issubclass(DuplicateLauncherError, LauncherRegistryError)


def test_decorator_registers_globally(fresh_registry):
    @LauncherRegistry.register_launcher(name="loud_echo", description="Echo with a prefix")
    def create_loud_echo(**options):
        return EchoLauncher(echo_prefix="!! ", **options)

    assert fresh_registry.get("loud_echo") is create_loud_echo
    assert fresh_registry.list_with_descriptions()["loud_echo"] == "Echo with a prefix"

    runtime = fresh_registry.create_launcher("loud_echo").launch()
    assert runtime.echo_prefix == "!! "


def test_reset_global_restores_builtins(fresh_registry):
    fresh_registry.register("extra", EchoLauncher)
    LauncherRegistry.reset_global()

    registry = LauncherRegistry.get_global()
    assert registry.list_launchers() == ["echo"]


def test_private_registry_starts_empty():
    registry = LauncherRegistry()
    assert registry.list_launchers() == []
    with pytest.raises(LauncherNotFoundError):
        registry.create_launcher("echo")
