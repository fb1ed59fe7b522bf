# navm/cmd/parser.py
"""
Command parsing - one text line in, one command out.

Grammar (head is case-insensitive):
    SAV target path     (loose)
    LOA target path     (loose)
    RES target          (loose)
    NSE <narsese>       (whole tail goes to the term adapter)
    NEW target          (strict)
    DEL target          (strict)
    CYC count           (strict, unsigned int)
    VOL level           (strict, unsigned int)
    REG name            (strict)
    INF source          (loose)
    HLP name            (loose)
    REM comment...      (whole tail)
    EXI reason...       (whole tail)
    <other> tail...     -> Custom

Strict parameters must all be present; loose parameters default to "".
Extra parameters are ignored.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List

from navm.core.exceptions import (
    CmdParseError,
    EmptyInputError,
    InsufficientParamsError,
    MissingHeadError,
    NumericParseError,
    TermCoercionError,
    TermParseError,
)
from navm.logging import get_logger
from navm.logging.tags import CMD
from navm.narsese import DEFAULT_INTEROP, NarseseConversionError, NarseseParseError, TermInterop

from .model import (
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

logger = get_logger(__name__)

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_LINE_END = "\r\n"


# =============================================================================
# Parameter extraction
# =============================================================================


def get_params(tail: str, count: int, head: str = "") -> List[str]:
    """
    Strict extraction: exactly ``count`` whitespace-separated tokens.

    Raises:
        InsufficientParamsError: If fewer than ``count`` tokens are present
    """
    tokens = tail.split()
    if len(tokens) < count:
        raise InsufficientParamsError(needed=count, head=head)
    return tokens[:count]


def get_params_loose(tail: str, count: int) -> List[str]:
    """Loose extraction: missing trailing tokens become empty strings."""
    tokens = tail.split()[:count]
    return tokens + [""] * (count - len(tokens))


def parse_unsigned(token: str, head: str = "") -> int:
    if not _UNSIGNED_RE.fullmatch(token):
        raise NumericParseError(token, head=head)
    return int(token)


def parse_task(text: str, interop: TermInterop = DEFAULT_INTEROP) -> object:
    """
    Parse NSE text and coerce it to a task.

    A sentence becomes a task with an empty budget; a bare term is rejected.

    Raises:
        TermParseError: If the term adapter can't parse the text
        TermCoercionError: If the parsed value can't be used as a task
    """
    try:
        narsese = interop.parse(text)
    except NarseseParseError as e:
        raise TermParseError(f"Invalid Narsese: {e}") from e
    try:
        return interop.try_into_task(narsese)
    except NarseseConversionError as e:
        raise TermCoercionError(str(e)) from e


# =============================================================================
# Per-head builders
# =============================================================================


def _save(tail: str, interop: TermInterop) -> Cmd:
    target, path = get_params_loose(tail, 2)
    return Save(target=target, path=path)


def _load(tail: str, interop: TermInterop) -> Cmd:
    target, path = get_params_loose(tail, 2)
    return Load(target=target, path=path)


def _reset(tail: str, interop: TermInterop) -> Cmd:
    (target,) = get_params_loose(tail, 1)
    return Reset(target=target)


def _nse(tail: str, interop: TermInterop) -> Cmd:
    return NarseseInput(task=parse_task(tail, interop))


def _new(tail: str, interop: TermInterop) -> Cmd:
    (target,) = get_params(tail, 1, head=CmdHead.NEW.value)
    return New(target=target)


def _delete(tail: str, interop: TermInterop) -> Cmd:
    (target,) = get_params(tail, 1, head=CmdHead.DEL.value)
    return Delete(target=target)


def _cycle(tail: str, interop: TermInterop) -> Cmd:
    (token,) = get_params(tail, 1, head=CmdHead.CYC.value)
    return Cycle(parse_unsigned(token, head=CmdHead.CYC.value))


def _volume(tail: str, interop: TermInterop) -> Cmd:
    (token,) = get_params(tail, 1, head=CmdHead.VOL.value)
    return Volume(parse_unsigned(token, head=CmdHead.VOL.value))


def _register(tail: str, interop: TermInterop) -> Cmd:
    (name,) = get_params(tail, 1, head=CmdHead.REG.value)
    return Register(name=name)


def _info(tail: str, interop: TermInterop) -> Cmd:
    (source,) = get_params_loose(tail, 1)
    return Info(source=source)


def _help(tail: str, interop: TermInterop) -> Cmd:
    (name,) = get_params_loose(tail, 1)
    return Help(name=name)


def _remark(tail: str, interop: TermInterop) -> Cmd:
    return Remark(comment=tail)


def _exit(tail: str, interop: TermInterop) -> Cmd:
    return Exit(reason=tail)


_BUILDERS: Dict[CmdHead, Callable[[str, TermInterop], Cmd]] = {
    CmdHead.SAV: _save,
    CmdHead.LOA: _load,
    CmdHead.RES: _reset,
    CmdHead.NSE: _nse,
    CmdHead.NEW: _new,
    CmdHead.DEL: _delete,
    CmdHead.CYC: _cycle,
    CmdHead.VOL: _volume,
    CmdHead.REG: _register,
    CmdHead.INF: _info,
    CmdHead.HLP: _help,
    CmdHead.REM: _remark,
    CmdHead.EXI: _exit,
}


# =============================================================================
# Entry points
# =============================================================================


def split_line(line: str) -> tuple[str, str]:
    """
    Split a command line into head and tail.

    Line terminators and leading whitespace are dropped. The line is split
    at its first whitespace character; the tail keeps anything after that,
    including further whitespace.

    Raises:
        EmptyInputError: If the line is blank
    """
    text = line.rstrip(_LINE_END).lstrip()
    if not text:
        raise EmptyInputError()
    for i, char in enumerate(text):
        if char.isspace():
            return text[:i], text[i + 1:]
    return text, ""


def parse_cmd_parts(head: str, tail: str, interop: TermInterop = DEFAULT_INTEROP) -> Cmd:
    """
    Build a command from an already separated head and tail.

    Raises:
        MissingHeadError: If ``head`` is empty
        CmdParseError: If the tail spans several lines, or a subclass for
            invalid parameters
    """
    if not head or any(c.isspace() for c in head):
        raise MissingHeadError(f"Invalid command head: {head!r}")
    if "\n" in tail or "\r" in tail:
        raise CmdParseError("A command must fit on one line")
    try:
        builtin = CmdHead(head.upper())
    except ValueError:
        return Custom(head=head, tail=tail)
    return _BUILDERS[builtin](tail, interop)


def parse_cmd(line: str, interop: TermInterop = DEFAULT_INTEROP) -> Cmd:
    """
    Parse one command line.

    Args:
        line: The text line (a trailing newline is allowed)
        interop: Term adapter used for NSE

    Returns:
        The parsed command

    Raises:
        EmptyInputError: Blank line
        InsufficientParamsError: Strict command with too few parameters
        NumericParseError: CYC/VOL argument isn't an unsigned integer
        TermParseError / TermCoercionError: Bad NSE payload

    Examples:
        >>> parse_cmd("cyc 137")
        Cycle(count=137)
        >>> parse_cmd("FOO bar baz")
        Custom(head='FOO', tail='bar baz')
    """
    head, tail = split_line(line)
    cmd = parse_cmd_parts(head, tail, interop)
    logger.debug(f"{CMD} Parsed {head!r} as {type(cmd).__name__}")
    return cmd


__all__ = [
    "parse_cmd",
    "parse_cmd_parts",
    "split_line",
    "parse_task",
    "parse_unsigned",
    "get_params",
    "get_params_loose",
]
