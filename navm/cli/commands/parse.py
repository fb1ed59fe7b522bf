# navm/cli/commands/parse.py
"""
Parse command: check one command line and print its canonical form.

Usage:
    navm parse "sav memory ./mem.nal"   # -> SAV memory ./mem.nal
    navm parse "CYC abc"                # -> error, exit code 1
"""

from __future__ import annotations

import typer

from navm.cli.ui import ui
from navm.cmd import format_cmd, parse_cmd
from navm.core.exceptions import CmdParseError


def command(line: str) -> None:
    try:
        cmd = parse_cmd(line)
    except CmdParseError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    typer.echo(format_cmd(cmd))
