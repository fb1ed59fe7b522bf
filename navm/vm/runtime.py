# navm/vm/runtime.py
"""
Runtime contract - how controllers talk to a backend.

    launcher = SomeLauncher(...)
    runtime = launcher.launch()          # one shot
    runtime.input_cmd(parse_cmd("NSE <A --> B>."))
    output = runtime.try_fetch_output()  # None if nothing yet
    runtime.terminate()

A runtime publishes every event through ``on_output``. Registered listeners
see it in registration order; a listener returns the output (possibly
transformed) to pass it on, or ``None`` to consume it. Outputs that nobody
consumes land in the buffer that ``fetch_output`` reads, oldest first.

The contract assumes one command writer and one output reader per runtime.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Deque, Iterator, List, Optional

from navm.cmd import Cmd
from navm.core.exceptions import (
    LaunchError,
    NavmError,
    RuntimeOutputError,
    RuntimeSubmissionError,
    RuntimeTerminationError,
)
from navm.logging import get_logger
from navm.logging.tags import VM
from navm.output import Output

from .status import VmStatus

logger = get_logger(__name__)

OutputListener = Callable[[Output], Optional[Output]]


# =============================================================================
# Contract
# =============================================================================


class VmRuntime(ABC):
    """A launched backend that accepts commands and yields outputs."""

    @abstractmethod
    def input_cmd(self, cmd: Cmd) -> None:
        """
        Submit a command.

        Success only means the command was accepted; whatever it produces
        arrives later through the output path.

        Raises:
            RuntimeSubmissionError: Local translation failure, or the
                runtime is terminated
        """
        ...

    @abstractmethod
    def fetch_output(self) -> Output:
        """
        Take the oldest output, waiting for one if the backend is asynchronous.

        Raises:
            RuntimeOutputError: If no further output can be produced
        """
        ...

    @abstractmethod
    def try_fetch_output(self) -> Optional[Output]:
        """
        Take the oldest output without blocking; ``None`` if there is none.

        Raises:
            RuntimeOutputError: If the runtime is terminated and drained
        """
        ...

    @property
    @abstractmethod
    def status(self) -> VmStatus:
        ...

    @property
    def is_terminated(self) -> bool:
        return self.status.is_terminated

    @abstractmethod
    def terminate(self) -> None:
        """
        Stop the backend. May block. Afterwards ``status`` is Terminated.

        Raises:
            RuntimeTerminationError: If shutting down failed
        """
        ...

    def __enter__(self) -> "VmRuntime":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.terminate()


class VmLauncher(ABC):
    """
    One-shot builder for a runtime.

    Subclasses implement ``_launch``; ``launch`` may only be called once.
    """

    _launched: bool = False

    @property
    def name(self) -> str:
        return type(self).__name__

    def launch(self) -> VmRuntime:
        """
        Start the backend.

        Raises:
            LaunchError: If the launcher was already used or the backend failed
        """
        if self._launched:
            raise LaunchError(f"{self.name} has already been launched")
        self._launched = True

        try:
            runtime = self._launch()
        except LaunchError:
            raise
        except Exception as e:
            raise LaunchError(f"Failed to launch {self.name}: {e}") from e

        logger.info(f"{VM} Launched {self.name}")
        return runtime

    @abstractmethod
    def _launch(self) -> VmRuntime:
        ...


# =============================================================================
# Buffered base implementation
# =============================================================================


class BufferedRuntime(VmRuntime):
    """
    Runtime base with the listener chain, an output buffer and status tracking.

    Subclasses implement ``_process_cmd`` (and ``_shutdown`` if they own
    resources) and publish events with ``on_output``.

    Set ``asynchronous_output = True`` when outputs are produced by another
    thread; ``fetch_output`` then waits instead of failing on an empty
    buffer.
    """

    asynchronous_output: bool = False

    def __init__(self):
        self._listeners: List[OutputListener] = []
        self._buffer: Deque[Output] = deque()
        self._condition = threading.Condition()
        self._status = VmStatus.running()

    # -------------------------------------------------------------------------
    # Listener chain
    # -------------------------------------------------------------------------

    def add_output_listener(self, listener: OutputListener) -> None:
        self._listeners.append(listener)

    def iter_output_listeners(self) -> Iterator[OutputListener]:
        return iter(self._listeners)

    def on_output(self, output: Output) -> None:
        """Pass ``output`` down the listener chain; store it if nobody consumes it."""
        current: Optional[Output] = output
        for listener in self.iter_output_listeners():
            current = listener(current)
            if current is None:
                logger.debug(f"{VM} {output.type_name} output consumed by listener")
                return
        self.store_output(current)

    def store_output(self, output: Output) -> None:
        with self._condition:
            self._buffer.append(output)
            self._condition.notify()

    @property
    def buffered_count(self) -> int:
        return len(self._buffer)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    # -------------------------------------------------------------------------
    # Contract
    # -------------------------------------------------------------------------

    def input_cmd(self, cmd: Cmd) -> None:
        if self.is_terminated:
            raise RuntimeSubmissionError(f"Runtime is terminated; cannot accept {type(cmd).__name__}")
        logger.debug(f"{VM} Input {type(cmd).__name__}")
        try:
            self._process_cmd(cmd)
        except RuntimeSubmissionError:
            raise
        except NavmError as e:
            raise RuntimeSubmissionError(f"Failed to submit {type(cmd).__name__}: {e}") from e

    def fetch_output(self) -> Output:
        with self._condition:
            while not self._buffer:
                if self._status.is_terminated:
                    raise RuntimeOutputError("Runtime is terminated and has no output left")
                if not self.asynchronous_output:
                    raise RuntimeOutputError("No output available")
                self._condition.wait()
            return self._buffer.popleft()

    def try_fetch_output(self) -> Optional[Output]:
        with self._condition:
            if self._buffer:
                return self._buffer.popleft()
            if self._status.is_terminated:
                raise RuntimeOutputError("Runtime is terminated and has no output left")
            return None

    @property
    def status(self) -> VmStatus:
        return self._status

    def terminate(self) -> None:
        if self.is_terminated:
            return

        error: Optional[Exception] = None
        try:
            self._shutdown()
        except Exception as e:
            error = e

        self._set_terminated(str(error) if error is not None else None)
        if error is not None:
            raise RuntimeTerminationError(f"Failed to terminate {type(self).__name__}: {error}") from error

    def _set_terminated(self, error: Optional[str] = None) -> None:
        """Record termination and wake any waiting reader. Later calls are ignored."""
        with self._condition:
            if self._status.is_terminated:
                return
            self._status = VmStatus.terminated(error)
            self._condition.notify_all()
        if error is None:
            logger.info(f"{VM} {type(self).__name__} terminated")
        else:
            logger.warning(f"{VM} {type(self).__name__} terminated with error: {error}")

    # -------------------------------------------------------------------------
    # Backend hooks
    # -------------------------------------------------------------------------

    @abstractmethod
    def _process_cmd(self, cmd: Cmd) -> None:
        ...

    def _shutdown(self) -> None:
        """Release backend resources. Called once by ``terminate``."""
        pass


__all__ = ["OutputListener", "VmRuntime", "VmLauncher", "BufferedRuntime"]
