# navm/cmd/formatter.py
"""
Command formatting - the inverse of the command parser.

Every command formats as ``head + " " + tail``. NSE uses the term adapter:
a task whose budget is empty is written as its sentence only, so a typed
``NSE <A --> B>.`` comes back as ``NSE <A --> B>.`` and not with an empty
``$$`` budget marker in front.
"""

from __future__ import annotations

from navm.narsese import DEFAULT_INTEROP, TermInterop

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

_HEADS = {
    Save: CmdHead.SAV,
    Load: CmdHead.LOA,
    Reset: CmdHead.RES,
    NarseseInput: CmdHead.NSE,
    New: CmdHead.NEW,
    Delete: CmdHead.DEL,
    Cycle: CmdHead.CYC,
    Volume: CmdHead.VOL,
    Register: CmdHead.REG,
    Info: CmdHead.INF,
    Help: CmdHead.HLP,
    Remark: CmdHead.REM,
    Exit: CmdHead.EXI,
}


def cmd_head(cmd: Cmd) -> str:
    """Return the uppercase head, or the stored head for ``Custom``."""
    if isinstance(cmd, Custom):
        return cmd.head
    try:
        return _HEADS[type(cmd)].value
    except KeyError:
        raise TypeError(f"Not a command: {cmd!r}") from None


def format_task(task: object, interop: TermInterop = DEFAULT_INTEROP) -> str:
    """Format an NSE task, dropping an empty budget."""
    if interop.is_budget_empty(task):
        return interop.format(interop.sentence_of(task))
    return interop.format(task)


def cmd_tail(cmd: Cmd, interop: TermInterop = DEFAULT_INTEROP) -> str:
    """Rebuild the parameter text that follows the head."""
    if isinstance(cmd, (Save, Load)):
        return f"{cmd.target} {cmd.path}"
    if isinstance(cmd, (Reset, New, Delete)):
        return cmd.target
    if isinstance(cmd, Info):
        return cmd.source
    if isinstance(cmd, (Register, Help)):
        return cmd.name
    if isinstance(cmd, Cycle):
        return str(cmd.count)
    if isinstance(cmd, Volume):
        return str(cmd.level)
    if isinstance(cmd, Remark):
        return cmd.comment
    if isinstance(cmd, Exit):
        return cmd.reason
    if isinstance(cmd, NarseseInput):
        return format_task(cmd.task, interop)
    if isinstance(cmd, Custom):
        return cmd.tail
    raise TypeError(f"Not a command: {cmd!r}")


def format_cmd(cmd: Cmd, interop: TermInterop = DEFAULT_INTEROP) -> str:
    """
    Format a command as one line of text.

    Examples:
        >>> format_cmd(Cycle(137))
        'CYC 137'
        >>> format_cmd(Custom("FOO", "bar baz"))
        'FOO bar baz'
    """
    return f"{cmd_head(cmd)} {cmd_tail(cmd, interop)}"


__all__ = ["cmd_head", "cmd_tail", "format_cmd", "format_task"]
