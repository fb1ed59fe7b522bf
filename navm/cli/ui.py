# navm/cli/ui.py
"""
Shared UI helpers for CLI commands.

Protocol data (JSON lines, canonical commands) goes to stdout through
``typer.echo`` so it is never touched by rich markup. Tables and
diagnostics go through the rich consoles below.

Usage:
    from navm.cli.ui import ui

    ui.error("unknown launcher")
    ui.outputs_table(outputs)
"""

from __future__ import annotations

from typing import Dict, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from navm.output import Output, to_json_struct

console = Console()
err_console = Console(stderr=True)


class UI:
    """Console helpers used by the commands."""

    def error(self, message: str) -> None:
        err_console.print(f"Error: {message}", style="bold red", markup=False, highlight=False, soft_wrap=True)

    def warning(self, message: str) -> None:
        err_console.print(message, style="yellow", markup=False, highlight=False, soft_wrap=True)

    def outputs_table(self, outputs: Sequence[Output]) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", style="dim", width=3)
        table.add_column("Type", style="cyan")
        table.add_column("Content")
        table.add_column("Term", style="green")
        table.add_column("Operation", style="magenta")

        for i, output in enumerate(outputs, 1):
            record = to_json_struct(output)
            table.add_row(
                str(i),
                Text(record.type),
                Text(record.content),
                Text(record.term or "-"),
                Text(" ".join(record.operation) if record.operation else "-"),
            )

        console.print(table)

    def launchers_table(self, launchers: Dict[str, str]) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Launcher", style="cyan")
        table.add_column("Description")

        for name, description in launchers.items():
            table.add_row(Text(name), Text(description or "-"))

        console.print(table)


ui = UI()

__all__ = ["ui", "console", "err_console"]
