# navm/cmd/__init__.py
"""
navm commands - the command model and its text codec.

Public API:
    - Cmd and its variants: Save, Load, Reset, NarseseInput, New, Delete,
      Cycle, Volume, Register, Info, Help, Remark, Exit, Custom
    - parse_cmd: text line -> Cmd
    - format_cmd: Cmd -> text line

Examples:
    >>> from navm.cmd import parse_cmd, format_cmd
    >>> cmd = parse_cmd("sav memory ./mem.nal")
    >>> cmd
    Save(target='memory', path='./mem.nal')
    >>> format_cmd(cmd)
    'SAV memory ./mem.nal'
"""

from .formatter import cmd_head, cmd_tail, format_cmd
from .model import (
    BUILTIN_HEADS,
    CMD_TYPES,
    Cmd,
    CmdHead,
    Custom,
    Cycle,
    Delete,
    Exit,
    Help,
    Info,
    Load,
    NarseseInput,
    New,
    Register,
    Remark,
    Reset,
    Save,
    Volume,
)
from .parser import get_params, get_params_loose, parse_cmd, parse_cmd_parts, split_line

__all__ = [
    # Model
    "Cmd",
    "CmdHead",
    "BUILTIN_HEADS",
    "CMD_TYPES",
    "Save",
    "Load",
    "Reset",
    "NarseseInput",
    "New",
    "Delete",
    "Cycle",
    "Volume",
    "Register",
    "Info",
    "Help",
    "Remark",
    "Exit",
    "Custom",
    # Codec
    "parse_cmd",
    "parse_cmd_parts",
    "split_line",
    "get_params",
    "get_params_loose",
    "format_cmd",
    "cmd_head",
    "cmd_tail",
]
