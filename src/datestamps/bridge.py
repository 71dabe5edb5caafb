"""Synchronous call/response over a long-lived child process.

ProcessBridge turns an external command's stdin/stdout into a plain
function, call(value) -> result, for use from ordinary test code. The wire
format belongs to a Codec; the bridge only moves bytes and coordinates.

Architecture:
    Three daemon threads per bridge, all observing one CancelScope:

    - input pump: takes encoded requests off a queue and writes them to the
      child's stdin (which it alone owns).
    - output pump: splits the child's stdout into records (which it alone
      reads), decodes them, and puts the results on a response queue.
    - supervisor: waits for the child to exit.

    call() holds a lock for the whole request/response round trip, so at
    most one request is ever in flight and responses cannot be attributed
    to the wrong caller.

Cancellation:
    The first failure anywhere becomes the terminal cause: a decode error
    in the output pump, a write error in the input pump, a non-zero exit,
    a call timeout, or the owner closing the bridge. On cancellation both
    queues receive a stop sentinel (waking call() and the input pump) and,
    unless the shutdown is orderly, the child is killed (ending the output
    pump's read and the supervisor's wait). Every later call() raises the
    terminal cause.

Lifecycle:
    STARTING -> RUNNING -> {COMPLETED, FAILED, CANCELLED}

    Use as a context manager; the child and all pipes are released on every
    exit path, including exceptions raised inside the with block.

Example:
    >>> from datestamps.codec import TimestampToDateCodec
    >>> with ProcessBridge("./convert", codec=TimestampToDateCodec()) as bridge:  # doctest: +SKIP
    ...     bridge.call(InstantRange(start, end))
    DateRange(start='2024-07-15', end='2024-07-15')

Python 3.13+.
"""

from __future__ import annotations

import contextlib
import logging
import queue
import subprocess
import threading
from collections.abc import Callable, Mapping, Sequence
from typing import IO, TYPE_CHECKING, Final, Self

from datestamps.cancellation import CancelScope
from datestamps.constants import DEFAULT_JOIN_TIMEOUT_SECONDS, DEFAULT_KILL_GRACE_SECONDS
from datestamps.enums import BridgeState
from datestamps.errors import (
    BridgeCancelledError,
    BridgeClosedError,
    ProcessError,
    ProtocolError,
)

if TYPE_CHECKING:
    from os import PathLike
    from types import TracebackType

    from datestamps.codec import Codec

__all__ = ["ProcessBridge", "run_bridge"]

logger = logging.getLogger(__name__)


class _Stop:
    """Queue sentinel: the scope was cancelled."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<stop>"


_STOP: Final = _Stop()


def _state_for(cause: BaseException) -> BridgeState:
    if isinstance(cause, BridgeClosedError):
        return BridgeState.COMPLETED
    if isinstance(cause, (ProtocolError, ProcessError)):
        return BridgeState.FAILED
    return BridgeState.CANCELLED


class ProcessBridge[InputT, OutputT]:
    """Call/response function backed by an external process.

    Thread Safety:
        call() may be invoked from any thread; calls are serialized.

    Args:
        command: Program to run
        args: Program arguments
        codec: Request/response codec
        cwd: Working directory for the child
        env: Environment for the child (None inherits)
        stderr: Where the child's stderr goes (None inherits)
        scope: Parent scope; cancelling it cancels the bridge
        kill_grace: Seconds the child gets to exit after its stdin closes
            during an orderly close, before it is killed
    """

    __slots__ = (
        "_argv",
        "_buffer",
        "_call_lock",
        "_codec",
        "_cwd",
        "_env",
        "_kill_grace",
        "_process",
        "_requests",
        "_responses",
        "_scope",
        "_state",
        "_state_lock",
        "_stderr",
        "_threads",
    )

    def __init__(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        codec: Codec[InputT, OutputT],
        cwd: str | PathLike[str] | None = None,
        env: Mapping[str, str] | None = None,
        stderr: int | IO[bytes] | None = None,
        scope: CancelScope | None = None,
        kill_grace: float = DEFAULT_KILL_GRACE_SECONDS,
    ) -> None:
        self._argv: tuple[str, ...] = (command, *args)
        self._codec = codec
        self._cwd = cwd
        self._env = env
        self._stderr = stderr
        self._kill_grace = kill_grace

        self._scope = CancelScope(parent=scope)
        self._state = BridgeState.STARTING
        self._state_lock = threading.Lock()
        self._call_lock = threading.Lock()
        self._buffer = bytearray()

        self._requests: queue.SimpleQueue[bytes | _Stop] = queue.SimpleQueue()
        self._responses: queue.SimpleQueue[OutputT | _Stop] = queue.SimpleQueue()
        self._process: subprocess.Popen[bytes] | None = None
        self._threads: list[threading.Thread] = []

    # --- Introspection ---

    @property
    def argv(self) -> tuple[str, ...]:
        """The command line of the child."""
        return self._argv

    @property
    def state(self) -> BridgeState:
        """Current lifecycle state."""
        with self._state_lock:
            return self._state

    @property
    def cause(self) -> BaseException | None:
        """Terminal cause, or None while not terminal."""
        return self._scope.cause

    @property
    def pid(self) -> int | None:
        """Process ID of the child, once started."""
        return None if self._process is None else self._process.pid

    # --- Lifecycle ---

    def start(self) -> Self:
        """Spawn the child and the pump threads.

        Returns:
            self, for chaining

        Raises:
            RuntimeError: If the bridge was already started
            ProcessError: If the child cannot be spawned
            BridgeError: If the parent scope is already cancelled
        """
        with self._state_lock:
            if self._state is not BridgeState.STARTING:
                msg = f"Bridge already started (state: {self._state})"
                raise RuntimeError(msg)
            # Claimed: a concurrent start() now fails the check above.
            self._state = BridgeState.RUNNING

        cause = self._scope.cause
        if cause is not None:
            self._set_state(_state_for(cause))
            raise cause

        try:
            process = subprocess.Popen(  # noqa: S603 - the command under test is the point
                self._argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=self._stderr,
                cwd=self._cwd,
                env=self._env,
            )
        except OSError as e:
            msg = f"failed to start {self._argv[0]!r}: {e}"
            err = ProcessError(msg, command=self._argv)
            self._scope.cancel(err)
            self._set_state(BridgeState.FAILED)
            logger.error("%s", msg)
            raise err from e

        assert process.stdin is not None
        assert process.stdout is not None
        self._process = process
        logger.info("Started %s (pid %d)", " ".join(self._argv), process.pid)

        self._threads = [
            threading.Thread(
                target=self._pump_input, args=(process.stdin,), name=f"bridge-{process.pid}-input",
                daemon=True,
            ),
            threading.Thread(
                target=self._pump_output,
                args=(process.stdout,),
                name=f"bridge-{process.pid}-output",
                daemon=True,
            ),
            threading.Thread(
                target=self._supervise, args=(process,), name=f"bridge-{process.pid}-supervisor",
                daemon=True,
            ),
        ]
        for thread in self._threads:
            thread.start()

        # Registered last: may run immediately if the parent was cancelled meanwhile.
        self._scope.add_callback(self._on_cancel)
        return self

    def close(self, cause: BaseException | None = None) -> None:
        """Shut the bridge down and release the child and its pipes.

        Closes the child's stdin, waits up to kill_grace seconds for it to
        exit, then kills it. Idempotent.

        Args:
            cause: Terminal cause to record. None records an orderly
                completion (BridgeClosedError).
        """
        if cause is None:
            cause = BridgeClosedError("bridge closed")
        if self._scope.cancel(cause):
            logger.debug("Closing %s: %s", self._argv[0], cause)

        with self._state_lock:
            if self._state is BridgeState.STARTING:
                self._state = _state_for(self._scope.cause or cause)
                return

        process = self._process
        if process is not None:
            try:
                process.wait(timeout=self._kill_grace)
            except subprocess.TimeoutExpired:
                logger.warning(
                    "Process %d did not exit within %.1fs of close; killing",
                    process.pid,
                    self._kill_grace,
                )
                process.kill()
                process.wait()

        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join(timeout=DEFAULT_JOIN_TIMEOUT_SECONDS)
                if thread.is_alive():
                    logger.warning("Bridge thread %s did not stop", thread.name)

    def __enter__(self) -> Self:
        if self.state is BridgeState.STARTING:
            self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_val is None:
            self.close()
        else:
            self.close(BridgeCancelledError(f"aborted by {type(exc_val).__name__}: {exc_val}"))

    # --- Calls ---

    def call(self, value: InputT, timeout: float | None = None) -> OutputT:
        """Send one request and wait for its response.

        Args:
            value: Request value, encoded with the codec
            timeout: Maximum seconds to wait for the response. Expiry
                cancels the whole bridge, since a late response would
                otherwise answer the next call.

        Returns:
            The decoded response

        Raises:
            RuntimeError: If the bridge was never started
            BridgeError: The terminal cause, if the bridge is or becomes
                terminal before a response arrives
        """
        with self._call_lock:
            if self.state is BridgeState.STARTING:
                msg = "Bridge not started"
                raise RuntimeError(msg)
            self._scope.raise_if_cancelled()

            del self._buffer[:]
            self._buffer = self._codec.encode(self._buffer, value)
            request = bytes(self._buffer)
            logger.debug("-> %r", request)
            self._requests.put(request)

            try:
                response = self._responses.get(timeout=timeout)
            except queue.Empty:
                self._scope.cancel(BridgeCancelledError(f"call timed out after {timeout}s"))
                self._scope.raise_if_cancelled()
                raise  # unreachable: the scope is cancelled

            if isinstance(response, _Stop):
                self._scope.raise_if_cancelled()
            logger.debug("<- %r", response)
            return response  # type: ignore[return-value]

    # --- Threads ---

    def _pump_input(self, stdin: IO[bytes]) -> None:
        try:
            while True:
                request = self._requests.get()
                if isinstance(request, _Stop):
                    return
                try:
                    stdin.write(request)
                    stdin.flush()
                except (OSError, ValueError) as e:
                    msg = f"write to {self._argv[0]!r} failed: {e}"
                    self._fail(ProcessError(msg, command=self._argv))
                    return
        finally:
            with contextlib.suppress(OSError):
                stdin.close()

    def _pump_output(self, stdout: IO[bytes]) -> None:
        try:
            for record in self._codec.split(stdout):
                try:
                    response = self._codec.decode(record)
                except ProtocolError as e:
                    self._fail(e)
                    return
                except ValueError as e:
                    self._fail(ProtocolError(f"malformed output: {e}", record=record))
                    return
                if self._scope.cancelled:
                    return
                self._responses.put(response)
        except ProtocolError as e:
            self._fail(e)
        except (OSError, ValueError) as e:
            self._fail(ProtocolError(f"failed to read output of {self._argv[0]!r}: {e}"))
        finally:
            with contextlib.suppress(OSError):
                stdout.close()

    def _supervise(self, process: subprocess.Popen[bytes]) -> None:
        returncode = process.wait()
        if returncode == 0:
            cause: BaseException = BridgeClosedError(f"{self._argv[0]!r} exited")
        else:
            msg = f"{self._argv[0]!r} exited with status {returncode}"
            cause = ProcessError(msg, command=self._argv, returncode=returncode)
        if self._scope.cancel(cause):
            logger.info("Process %d exited with status %d", process.pid, returncode)

    def _fail(self, cause: BaseException) -> None:
        if self._scope.cancel(cause):
            logger.error("Bridge to %s failed: %s", self._argv[0], cause)

    def _set_state(self, state: BridgeState) -> None:
        with self._state_lock:
            if not self._state.is_terminal:
                self._state = state

    def _on_cancel(self, cause: BaseException) -> None:
        state = _state_for(cause)
        self._set_state(state)
        self._requests.put(_STOP)
        self._responses.put(_STOP)

        # Orderly shutdown leaves the child to exit on stdin EOF (see close()).
        process = self._process
        if state is not BridgeState.COMPLETED and process is not None and process.poll() is None:
            with contextlib.suppress(OSError):
                process.kill()


def run_bridge[InputT, OutputT, ResultT](
    command: str,
    args: Sequence[str],
    codec: Codec[InputT, OutputT],
    fn: Callable[[Callable[[InputT], OutputT]], ResultT],
    *,
    cwd: str | PathLike[str] | None = None,
    env: Mapping[str, str] | None = None,
    scope: CancelScope | None = None,
) -> ResultT:
    """Run fn with a call function backed by command, then tear down.

    Args:
        command: Program to run
        args: Program arguments
        codec: Request/response codec
        fn: Receives bridge.call; its return value is returned
        cwd: Working directory for the child
        env: Environment for the child
        scope: Parent cancellation scope

    Returns:
        Whatever fn returns

    Raises:
        BridgeError: Startup failures, or bridge failures raised from fn
    """
    bridge: ProcessBridge[InputT, OutputT] = ProcessBridge(
        command, args, codec=codec, cwd=cwd, env=env, scope=scope
    )
    with bridge:
        return fn(bridge.call)
