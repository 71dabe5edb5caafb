"""Exception hierarchy for datestamps.

Two error domains:

- BridgeError: INFRASTRUCTURE failures. The first one recorded becomes the
  terminal cause of a ProcessBridge; every later call re-raises it. They
  abort the whole run.
- ConformanceFailure: DOMAIN failures. The command under test disagreed
  with the oracle for one case. Runners record them per case and continue.

Hierarchy:
    DatestampsError
    ├─ BridgeError
    │   ├─ ProtocolError        (malformed or unreadable output)
    │   ├─ ProcessError         (spawn failure, write failure, non-zero exit)
    │   ├─ BridgeCancelledError (owner cancellation, call timeout)
    │   └─ BridgeClosedError    (orderly completion)
    └─ ConformanceFailure       (also an AssertionError)
        └─ FuzzFinding

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "BridgeCancelledError",
    "BridgeClosedError",
    "BridgeError",
    "ConformanceFailure",
    "DatestampsError",
    "FuzzFinding",
    "MismatchContext",
    "ProcessError",
    "ProtocolError",
]


@dataclass(frozen=True, slots=True)
class MismatchContext:
    """Context for diagnosing a conformance failure.

    Attributes:
        range_repr: The input range as text, (start, end); "" is unbounded
        value_repr: The value matched against the range
        converted: The converted bounds returned by the command under test
        expected: Expected match outcome (None when not applicable)
        actual: Observed match outcome (None when not computed)
    """

    range_repr: tuple[str, str]
    value_repr: str
    converted: tuple[str, str] = ("", "")
    expected: bool | None = None
    actual: bool | None = None

    def describe(self) -> str:
        """Render a single-line summary for error messages and logs."""
        start, end = self.range_repr
        conv_start, conv_end = self.converted
        return (
            f"range [{start}, {end}] -> [{conv_start}, {conv_end}] "
            f"matching {self.value_repr}: expected {self.expected}, got {self.actual}"
        )


class DatestampsError(Exception):
    """Base exception for all datestamps errors."""


class BridgeError(DatestampsError):
    """Base class for process bridge failures (terminal causes)."""


class ProtocolError(BridgeError):
    """The child wrote output that could not be split or decoded.

    Treated as a defect in the command under test: fatal, never retried.

    Attributes:
        record: The offending raw record (empty if unavailable)
    """

    def __init__(self, message: str, *, record: bytes = b"") -> None:
        """Initialize ProtocolError.

        Args:
            message: Human-readable error description
            record: The raw record that failed to decode
        """
        super().__init__(message)
        self.record = record


class ProcessError(BridgeError):
    """The child process could not be started, written to, or exited non-zero.

    Attributes:
        command: The command line that was run
        returncode: Exit status (None if the process never exited normally)
    """

    def __init__(
        self,
        message: str,
        *,
        command: tuple[str, ...] = (),
        returncode: int | None = None,
    ) -> None:
        """Initialize ProcessError.

        Args:
            message: Human-readable error description
            command: The command line that was run
            returncode: Exit status, if known
        """
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class BridgeCancelledError(BridgeError):
    """The bridge was cancelled by its owner, a parent scope, or a timeout."""


class BridgeClosedError(BridgeError):
    """The bridge completed: closed by its owner, or the child exited cleanly."""


class ConformanceFailure(DatestampsError, AssertionError):
    """Observed behaviour of the command under test diverges from the oracle.

    Subclasses AssertionError so pytest reports it as a test failure.

    Attributes:
        context: Structured mismatch context (optional)
    """

    def __init__(self, message: str, context: MismatchContext | None = None) -> None:
        """Initialize ConformanceFailure.

        Args:
            message: Human-readable error description
            context: Structured mismatch context
        """
        super().__init__(message)
        self.context = context


class FuzzFinding(ConformanceFailure):
    """A fuzz invariant was violated by the command under test."""
