# navm/cli/commands/repl.py
"""
REPL command: drive a runtime from stdin.

Each line is parsed as a command and submitted; afterwards every output
the runtime has ready is printed, one per line. Bad lines are reported on
stderr and the loop carries on. The loop ends at end of input or when the
runtime terminates (e.g. after ``EXI``), and the runtime is always
terminated on the way out.

Usage:
    navm repl
    navm repl --launcher echo --text
    printf 'NSE <A --> B>.\\nEXI done\\n' | navm repl
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

import typer

from navm.cli.ui import ui
from navm.cmd import parse_cmd
from navm.core.config import ConfigError, NavmConfig, load_config
from navm.core.exceptions import CmdParseError, RuntimeOutputError, RuntimeSubmissionError, RuntimeTerminationError, VmError
from navm.logging import configure_logging, get_logger
from navm.logging.tags import CLI
from navm.output import Output, to_json_string
from navm.vm import VmRuntime, get_launcher_registry

logger = get_logger(__name__)


def format_output(output: Output, output_format: str) -> str:
    if output_format == "text":
        return f"{output.type_name}: {output.raw_content}"
    return to_json_string(output)


def drain_outputs(runtime: VmRuntime, output_format: str) -> int:
    """Print every output that is ready. Returns how many were printed."""
    count = 0
    while True:
        try:
            output = runtime.try_fetch_output()
        except RuntimeOutputError:
            break
        if output is None:
            break
        typer.echo(format_output(output, output_format))
        count += 1
    return count


def run_loop(runtime: VmRuntime, lines: TextIO, output_format: str, prompt: str = "") -> None:
    """Feed ``lines`` to ``runtime`` until input ends or the runtime terminates."""
    while not runtime.is_terminated:
        if prompt:
            typer.echo(prompt, nl=False)
        line = lines.readline()
        if not line:
            break
        if not line.strip():
            continue

        try:
            cmd = parse_cmd(line)
        except CmdParseError as e:
            logger.warning(f"{CLI} Rejected line {line.rstrip()!r}: {e}")
            ui.error(str(e))
            continue

        try:
            runtime.input_cmd(cmd)
        except RuntimeSubmissionError as e:
            ui.error(str(e))

        drain_outputs(runtime, output_format)


def _load_config(path: Optional[Path]) -> NavmConfig:
    try:
        return load_config(path)
    except ConfigError as e:
        ui.error(str(e))
        raise typer.Exit(1)


def command(launcher: Optional[str], config: Optional[Path], text: bool) -> None:
    cfg = _load_config(config)
    configure_logging(cfg.logging.level)

    name = launcher or cfg.runtime.launcher
    # Options in the config belong to the configured launcher only
    options = cfg.runtime.options if name == cfg.runtime.launcher else {}
    output_format = "text" if text else cfg.repl.output_format

    try:
        runtime = get_launcher_registry().create_launcher(name, **options).launch()
    except VmError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    prompt = cfg.repl.prompt if sys.stdin.isatty() else ""
    try:
        run_loop(runtime, sys.stdin, output_format, prompt=prompt)
    finally:
        try:
            runtime.terminate()
        except RuntimeTerminationError as e:
            ui.error(str(e))
            raise typer.Exit(1)
