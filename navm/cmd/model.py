# navm/cmd/model.py
"""
Command model - the closed set of commands a controller can send a runtime.

Each command is a frozen dataclass; ``Cmd`` is the union of all of them.
Unknown heads are captured by ``Custom`` so every command line maps to
exactly one variant.

Construction validates fields so that every value that can be built also
survives ``parse_cmd(format_cmd(cmd)) == cmd``:
    - no field contains a line break
    - whitespace-separated parameters contain no whitespace
    - strict parameters (NEW/DEL/REG) are non-empty
    - CYC/VOL numbers are non-negative ints

Examples:
    >>> str(Save(target="memory", path="./saves/memory.nal"))
    'SAV memory ./saves/memory.nal'
    >>> str(Cycle(137))
    'CYC 137'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class CmdHead(str, Enum):
    """Built-in command heads, shared by the parser and the formatter."""

    SAV = "SAV"
    LOA = "LOA"
    RES = "RES"
    NSE = "NSE"
    NEW = "NEW"
    DEL = "DEL"
    CYC = "CYC"
    VOL = "VOL"
    REG = "REG"
    INF = "INF"
    HLP = "HLP"
    REM = "REM"
    EXI = "EXI"


BUILTIN_HEADS = frozenset(h.value for h in CmdHead)


# =============================================================================
# Field validation
# =============================================================================


def _check_line(field_name: str, value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
    if "\n" in value or "\r" in value:
        raise ValueError(f"{field_name} cannot contain line breaks")


def _check_token(field_name: str, value: str, required: bool = False) -> None:
    _check_line(field_name, value)
    if any(c.isspace() for c in value):
        raise ValueError(f"{field_name} cannot contain whitespace: {value!r}")
    if required and not value:
        raise ValueError(f"{field_name} cannot be empty")


def _check_unsigned(field_name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field_name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{field_name} must be non-negative, got {value}")


class _CmdBase:
    """Formats as command text. The concrete variants below are the whole set."""

    __slots__ = ()

    def __str__(self) -> str:
        from .formatter import format_cmd

        return format_cmd(self)  # type: ignore[arg-type]


class _BuiltinCmd(_CmdBase):
    """Built-in variants derive ``head`` and ``tail``; ``Custom`` stores them."""

    __slots__ = ()

    @property
    def head(self) -> str:
        from .formatter import cmd_head

        return cmd_head(self)  # type: ignore[arg-type]

    @property
    def tail(self) -> str:
        from .formatter import cmd_tail

        return cmd_tail(self)  # type: ignore[arg-type]


# =============================================================================
# Administrative commands
# =============================================================================


@dataclass(frozen=True, slots=True)
class Save(_BuiltinCmd):
    """SAV - save ``target`` (e.g. memory) to ``path``."""

    target: str = ""
    path: str = ""

    def __post_init__(self):
        _check_token("target", self.target)
        _check_token("path", self.path)
        if self.path and not self.target:
            raise ValueError("path requires a target")


@dataclass(frozen=True, slots=True)
class Load(_BuiltinCmd):
    """LOA - load ``target`` from ``path``."""

    target: str = ""
    path: str = ""

    def __post_init__(self):
        _check_token("target", self.target)
        _check_token("path", self.path)
        if self.path and not self.target:
            raise ValueError("path requires a target")


@dataclass(frozen=True, slots=True)
class Reset(_BuiltinCmd):
    """RES - clear ``target`` (memory, buffers...); empty means everything."""

    target: str = ""

    def __post_init__(self):
        _check_token("target", self.target)


@dataclass(frozen=True, slots=True)
class New(_BuiltinCmd):
    """NEW - create a new reasoner."""

    target: str

    def __post_init__(self):
        _check_token("target", self.target, required=True)


@dataclass(frozen=True, slots=True)
class Delete(_BuiltinCmd):
    """DEL - stop and delete a reasoner."""

    target: str

    def __post_init__(self):
        _check_token("target", self.target, required=True)


@dataclass(frozen=True, slots=True)
class Register(_BuiltinCmd):
    """REG - register an operator (NAL-8). ``name`` has no leading ``^``."""

    name: str

    def __post_init__(self):
        _check_token("name", self.name, required=True)


@dataclass(frozen=True, slots=True)
class Info(_BuiltinCmd):
    """INF - ask the runtime to report some information."""

    source: str = ""

    def __post_init__(self):
        _check_token("source", self.source)


@dataclass(frozen=True, slots=True)
class Help(_BuiltinCmd):
    """HLP - print help."""

    name: str = ""

    def __post_init__(self):
        _check_token("name", self.name)


@dataclass(frozen=True, slots=True)
class Remark(_BuiltinCmd):
    """REM - a comment; runtimes normally ignore it."""

    comment: str = ""

    def __post_init__(self):
        _check_line("comment", self.comment)


@dataclass(frozen=True, slots=True)
class Exit(_BuiltinCmd):
    """EXI - ask the runtime to exit."""

    reason: str = ""

    def __post_init__(self):
        _check_line("reason", self.reason)


# =============================================================================
# Numeric control commands
# =============================================================================


@dataclass(frozen=True, slots=True)
class Cycle(_BuiltinCmd):
    """CYC - run ``count`` reasoning cycles."""

    count: int

    def __post_init__(self):
        _check_unsigned("count", self.count)


@dataclass(frozen=True, slots=True)
class Volume(_BuiltinCmd):
    """VOL - set output volume."""

    level: int

    def __post_init__(self):
        _check_unsigned("level", self.level)


# =============================================================================
# Narsese input
# =============================================================================


@dataclass(frozen=True, slots=True)
class NarseseInput(_BuiltinCmd):
    """
    NSE - feed one task to the reasoner.

    ``task`` is opaque to this package; it comes from the term adapter. A
    sentence typed without a budget is stored as a task with an empty budget.
    """

    task: Any

    def __post_init__(self):
        if self.task is None or isinstance(self.task, (str, bytes)):
            raise TypeError(f"task must be a parsed task value, got {type(self.task).__name__}")


# =============================================================================
# Catch-all
# =============================================================================


@dataclass(frozen=True, slots=True)
class Custom(_CmdBase):
    """
    Any head not in the built-in set.

    ``tail`` is the rest of the line, unsplit. The head keeps its original
    case but cannot collide with a built-in head.
    """

    head: str
    tail: str = ""

    def __post_init__(self):
        _check_token("head", self.head, required=True)
        _check_line("tail", self.tail)
        if self.head.upper() in BUILTIN_HEADS:
            raise ValueError(f"{self.head!r} is a built-in command head")


Cmd = Union[
    Save,
    Load,
    Reset,
    NarseseInput,
    New,
    Delete,
    Cycle,
    Volume,
    Register,
    Info,
    Help,
    Remark,
    Exit,
    Custom,
]

CMD_TYPES = (
    Save,
    Load,
    Reset,
    NarseseInput,
    New,
    Delete,
    Cycle,
    Volume,
    Register,
    Info,
    Help,
    Remark,
    Exit,
    Custom,
)


__all__ = [
    "CmdHead",
    "BUILTIN_HEADS",
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
    "Cmd",
    "CMD_TYPES",
]
