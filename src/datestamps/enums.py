"""Enumerations for datestamps type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class BridgeState(StrEnum):
    """Lifecycle state of a ProcessBridge.

    Transitions: STARTING -> RUNNING -> {COMPLETED, FAILED, CANCELLED}.
    Terminal states are final.
    """

    STARTING = "starting"
    """Constructed; the child process has not been spawned yet."""

    RUNNING = "running"
    """Child process and pump threads are live; calls are accepted."""

    COMPLETED = "completed"
    """Orderly shutdown: closed by the owner or the child exited with status 0."""

    FAILED = "failed"
    """A pump or the child process failed (protocol or process error)."""

    CANCELLED = "cancelled"
    """The owner (or a parent scope) cancelled the bridge, e.g. on timeout."""

    @property
    def is_terminal(self) -> bool:
        """True for COMPLETED, FAILED and CANCELLED."""
        return self not in (BridgeState.STARTING, BridgeState.RUNNING)


class FuzzOutcome(StrEnum):
    """Result of checking a single fuzz case.

    StrEnum provides automatic string conversion: str(FuzzOutcome.MATCH) == "match"
    """

    SKIPPED = "skipped"
    """Degenerate input (no bounds, or narrower than one day)."""

    MATCH = "match"
    """The date value lies wholly inside the converted range."""

    NO_MATCH = "no_match"
    """The date value is (at least partly) outside the converted range."""


__all__ = [
    "BridgeState",
    "FuzzOutcome",
]
