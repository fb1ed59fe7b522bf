# navm/cli/commands/decode.py
"""
Decode command: show output JSON as a table.

Accepts a single output object or an array of them.

Usage:
    navm decode outputs.json
    echo '{"type": "INFO", "content": "ready"}' | navm decode
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer

from navm.cli.ui import ui
from navm.core.exceptions import JsonDecodeError
from navm.logging import get_logger
from navm.logging.tags import CLI
from navm.output import Output, from_json_array_string, from_json_string

logger = get_logger(__name__)


def _read_source(source: Optional[Path]) -> str:
    if source is None:
        return sys.stdin.read()
    try:
        return source.read_text(encoding="utf-8")
    except OSError as e:
        ui.error(f"Cannot read {source}: {e}")
        raise typer.Exit(1)


def decode_text(text: str) -> List[Output]:
    """Decode an object or an array, chosen by the first non-blank character."""
    stripped = text.strip()
    if stripped.startswith("["):
        return from_json_array_string(stripped)
    return [from_json_string(stripped)]


def command(source: Optional[Path]) -> None:
    text = _read_source(source)

    try:
        outputs = decode_text(text)
    except JsonDecodeError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    logger.debug(f"{CLI} Decoded {len(outputs)} outputs")
    if not outputs:
        typer.echo("No outputs.")
        return
    ui.outputs_table(outputs)
