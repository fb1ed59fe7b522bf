# navm/vm/echo.py
"""
Echo runtime - an in-process reference backend.

Needs no external engine, so it is what the REPL and the tests run against:

    NSE <A --> B>.   ->  IN       "<A --> B>."  (term = the task)
    INF              ->  INFO     status, buffered outputs, listeners
    HLP              ->  INFO     supported heads
    VOL 50           ->  COMMENT  "volume set to 50"
    REM ...          ->  (nothing)
    EXI bye          ->  TERMINATED "bye", then the runtime terminates
    anything else    ->  ERROR    "unsupported command: ..."
"""

from __future__ import annotations

from typing import Optional

from navm.cmd import Cmd, Exit, Help, NarseseInput, Remark, Volume, format_cmd
from navm.cmd import Info as InfoCmd
from navm.cmd.formatter import format_task
from navm.logging import get_logger
from navm.logging.tags import VM
from navm.narsese import DEFAULT_INTEROP, TermInterop
from navm.output import Comment, Echo, Error, Info, Terminated

from .runtime import BufferedRuntime, VmLauncher, VmRuntime

logger = get_logger(__name__)

SUPPORTED_HEADS = ("NSE", "INF", "HLP", "VOL", "REM", "EXI")


class EchoRuntime(BufferedRuntime):
    """Answers every command synchronously from ``input_cmd``."""

    def __init__(self, echo_prefix: str = "", interop: TermInterop = DEFAULT_INTEROP):
        super().__init__()
        self.echo_prefix = echo_prefix
        self.interop = interop
        self.volume: Optional[int] = None

    def _process_cmd(self, cmd: Cmd) -> None:
        if isinstance(cmd, NarseseInput):
            text = format_task(cmd.task, self.interop)
            self.on_output(Echo(raw=self.echo_prefix + text, term=cmd.task))
        elif isinstance(cmd, InfoCmd):
            self.on_output(Info(message=self._describe(cmd.source)))
        elif isinstance(cmd, Help):
            self.on_output(Info(message="supported commands: " + " ".join(SUPPORTED_HEADS)))
        elif isinstance(cmd, Volume):
            self.volume = cmd.level
            self.on_output(Comment(text=f"volume set to {cmd.level}"))
        elif isinstance(cmd, Remark):
            pass
        elif isinstance(cmd, Exit):
            self.on_output(Terminated(reason=cmd.reason))
            self.terminate()
        else:
            logger.debug(f"{VM} Echo runtime does not support {type(cmd).__name__}")
            self.on_output(Error(message=f"unsupported command: {format_cmd(cmd, self.interop)}"))

    def _describe(self, source: str) -> str:
        parts = [
            f"status={self.status}",
            f"buffered={self.buffered_count}",
            f"listeners={self.listener_count}",
        ]
        if self.volume is not None:
            parts.append(f"volume={self.volume}")
        if source:
            parts.append(f"source={source}")
        return "echo runtime: " + ", ".join(parts)


class EchoLauncher(VmLauncher):
    """Launches an ``EchoRuntime``. Accepts the ``echo_prefix`` option."""

    def __init__(self, echo_prefix: str = "", interop: TermInterop = DEFAULT_INTEROP):
        if not isinstance(echo_prefix, str):
            raise TypeError(f"echo_prefix must be a string, got {type(echo_prefix).__name__}")
        self.echo_prefix = echo_prefix
        self.interop = interop

    @property
    def name(self) -> str:
        return "echo"

    def _launch(self) -> VmRuntime:
        return EchoRuntime(echo_prefix=self.echo_prefix, interop=self.interop)


__all__ = ["EchoLauncher", "EchoRuntime", "SUPPORTED_HEADS"]
