# navm/cli/cli.py
"""
navm CLI - Main application.

Commands:
    navm parse LINE     Parse one command line, print its canonical form
    navm decode [FILE]  Decode output JSON (object or array) into a table
    navm repl           Drive a runtime from stdin, printing its outputs
    navm launchers      List registered launchers

NOTE: Commands use lazy loading - a command's module is imported only when it runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="navm",
    help="navm - command/output protocol for NARS-style reasoning backends.",
    no_args_is_help=True,
    add_completion=False,
)


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("parse")
def parse(
    line: str = typer.Argument(..., help="Command line, e.g. 'NSE <A --> B>.'"),
) -> None:
    """Parse a command line and print its canonical form."""
    from navm.cli.commands import parse as mod

    mod.command(line=line)


@app.command("decode")
def decode(
    source: Optional[Path] = typer.Argument(None, help="JSON file to decode (default: stdin)."),
) -> None:
    """Decode output JSON and show it as a table."""
    from navm.cli.commands import decode as mod

    mod.command(source=source)


@app.command("repl")
def repl(
    launcher: Optional[str] = typer.Option(None, "--launcher", "-l", help="Launcher name (overrides config)."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to navm.yaml."),
    text: bool = typer.Option(False, "--text", "-t", help="Print 'TYPE: content' instead of JSON."),
) -> None:
    """Launch a runtime and feed it command lines from stdin."""
    from navm.cli.commands import repl as mod

    mod.command(launcher=launcher, config=config, text=text)


@app.command("launchers")
def launchers() -> None:
    """List registered launchers."""
    from navm.cli.commands import launchers as mod

    mod.command()


if __name__ == "__main__":
    app()
