"""Cancellation scope carrying a first-recorded cause.

A CancelScope is a one-shot broadcast signal shared by the owner of a
ProcessBridge and all of the bridge's threads. Whoever cancels first sets
the cause; later cancellations are ignored. Waiters are released and
registered callbacks run exactly once.

Architecture:
    A condition variable guards the cause slot. Callbacks run outside the
    lock, on the cancelling thread, so a callback may itself call back into
    the scope (e.g. read the cause) without deadlocking.

Scopes form a tree: cancelling a parent cancels every child with the same
cause; cancelling a child leaves the parent alone and detaches it from the
parent, so a long-lived parent does not accumulate callbacks of finished
children.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from datestamps.errors import BridgeCancelledError

__all__ = ["CancelScope"]

logger = logging.getLogger(__name__)


class CancelScope:
    """Shared cancellation signal with a first-cause-wins slot.

    Thread Safety:
        All methods are thread-safe.

    Example:
        >>> scope = CancelScope()
        >>> scope.cancel(RuntimeError("first"))
        True
        >>> scope.cancel(RuntimeError("second"))
        False
        >>> str(scope.cause)
        'first'
    """

    __slots__ = ("_callbacks", "_cause", "_condition", "_parent", "_timers")

    def __init__(self, parent: CancelScope | None = None) -> None:
        """Initialize cancellation scope.

        Args:
            parent: Scope whose cancellation propagates to this one
        """
        self._condition = threading.Condition(threading.Lock())
        self._cause: BaseException | None = None
        self._callbacks: list[Callable[[BaseException], None]] = []
        self._timers: list[threading.Timer] = []
        self._parent = parent
        if parent is not None:
            parent.add_callback(self.cancel)

    @property
    def cancelled(self) -> bool:
        """True once any cause has been recorded."""
        with self._condition:
            return self._cause is not None

    @property
    def cause(self) -> BaseException | None:
        """The first recorded cause, or None while still live."""
        with self._condition:
            return self._cause

    def cancel(self, cause: BaseException | None = None) -> bool:
        """Record cause (if first) and release all waiters.

        Args:
            cause: Reason for cancellation. None records a generic
                BridgeCancelledError.

        Returns:
            True if this call recorded the cause, False if already cancelled
        """
        if cause is None:
            cause = BridgeCancelledError("cancelled")

        with self._condition:
            if self._cause is not None:
                return False
            self._cause = cause
            callbacks, self._callbacks = self._callbacks, []
            timers, self._timers = self._timers, []
            parent, self._parent = self._parent, None
            self._condition.notify_all()

        logger.debug("Scope cancelled: %s: %s", type(cause).__name__, cause)
        if parent is not None:
            parent.remove_callback(self.cancel)
        for timer in timers:
            timer.cancel()
        for callback in callbacks:
            callback(cause)
        return True

    def add_callback(self, callback: Callable[[BaseException], None]) -> None:
        """Run callback(cause) on cancellation.

        If the scope is already cancelled, callback runs immediately on the
        calling thread.
        """
        with self._condition:
            cause = self._cause
            if cause is None:
                self._callbacks.append(callback)
                return
        callback(cause)

    def remove_callback(self, callback: Callable[[BaseException], None]) -> bool:
        """Unregister a callback that has not run yet.

        Returns:
            True if the callback was registered and is now removed
        """
        with self._condition:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                return False
            return True

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled.

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely.

        Returns:
            True if cancelled, False if the timeout expired first

        Raises:
            ValueError: If timeout is negative
        """
        if timeout is not None and timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)

        deadline = time.monotonic() + timeout if timeout is not None else None
        with self._condition:
            while self._cause is None:
                if deadline is None:
                    self._condition.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._condition.wait(timeout=remaining)
            return True

    def cancel_after(self, seconds: float, cause: BaseException | None = None) -> None:
        """Cancel with cause after seconds, unless cancelled earlier.

        Raises:
            ValueError: If seconds is negative
        """
        if seconds < 0:
            msg = f"Delay must be non-negative, got {seconds}"
            raise ValueError(msg)
        if cause is None:
            cause = BridgeCancelledError(f"deadline of {seconds}s exceeded")

        timer = threading.Timer(seconds, self.cancel, args=(cause,))
        timer.daemon = True
        with self._condition:
            if self._cause is not None:
                return
            self._timers.append(timer)
        timer.start()

    def child(self) -> CancelScope:
        """New scope cancelled whenever this one is."""
        return CancelScope(parent=self)

    def raise_if_cancelled(self) -> None:
        """Raise the recorded cause if cancelled."""
        cause = self.cause
        if cause is not None:
            raise cause
