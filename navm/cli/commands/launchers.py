# navm/cli/commands/launchers.py
"""
Launchers command: list what `navm repl --launcher` accepts.

Usage:
    navm launchers
"""

from __future__ import annotations

from navm.cli.ui import ui
from navm.vm import get_launcher_registry


def command() -> None:
    ui.launchers_table(get_launcher_registry().list_with_descriptions())
