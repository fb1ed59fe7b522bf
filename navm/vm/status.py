# navm/vm/status.py
"""
Runtime status - a two-state machine.

    Running  ->  Terminated(outcome)

``Terminated`` is final. Its outcome is success (``error is None``) or a
failure reason. This status is authoritative; a ``Terminated`` *output*
event is only a notice from the backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VmState(str, Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class VmStatus:
    """Lifecycle state of a runtime."""

    state: VmState
    error: Optional[str] = None

    def __post_init__(self):
        if self.state == VmState.RUNNING and self.error is not None:
            raise ValueError("A running status cannot carry an error")

    @classmethod
    def running(cls) -> "VmStatus":
        return cls(state=VmState.RUNNING)

    @classmethod
    def terminated(cls, error: Optional[str] = None) -> "VmStatus":
        return cls(state=VmState.TERMINATED, error=error)

    @property
    def is_running(self) -> bool:
        return self.state == VmState.RUNNING

    @property
    def is_terminated(self) -> bool:
        return self.state == VmState.TERMINATED

    @property
    def succeeded(self) -> bool:
        """True once terminated without an error."""
        return self.is_terminated and self.error is None

    def __str__(self) -> str:
        if self.is_running:
            return "Running"
        if self.error is None:
            return "Terminated(ok)"
        return f"Terminated({self.error})"


__all__ = ["VmState", "VmStatus"]
