# tests/conftest.py
"""
Root conftest - shared fixtures for all test modules.

Test Tiers:
===========
- tier1: Critical path tests - pure logic, no I/O
         Run: pytest -m tier1
- tier2: Tests touching the filesystem, threads or the CLI
         Run: pytest -m "tier1 or tier2"

Tier markers are applied automatically in tests/unit/conftest.py.
"""

from __future__ import annotations

import pytest

from navm.vm import LauncherRegistry

# =============================================================================
# Registry isolation
# =============================================================================


@pytest.fixture
def fresh_registry():
    """Reset the global launcher registry around a test."""
    LauncherRegistry.reset_global()
    yield LauncherRegistry.get_global()
    LauncherRegistry.reset_global()
