"""Tests for the exception hierarchy, MismatchContext and enums."""

import pytest

from datestamps.enums import BridgeState, FuzzOutcome
from datestamps.errors import (
    BridgeCancelledError,
    BridgeClosedError,
    BridgeError,
    ConformanceFailure,
    DatestampsError,
    FuzzFinding,
    MismatchContext,
    ProcessError,
    ProtocolError,
)


class TestHierarchy:
    """Infrastructure and domain failures stay distinguishable."""

    @pytest.mark.parametrize(
        "error_type", [ProtocolError, ProcessError, BridgeCancelledError, BridgeClosedError]
    )
    def test_bridge_errors(self, error_type: type[BridgeError]) -> None:
        assert issubclass(error_type, BridgeError)
        assert issubclass(error_type, DatestampsError)
        assert not issubclass(error_type, ConformanceFailure)

    def test_conformance_failures_are_assertions(self) -> None:
        assert issubclass(ConformanceFailure, AssertionError)
        assert issubclass(FuzzFinding, ConformanceFailure)
        assert not issubclass(FuzzFinding, BridgeError)

    def test_protocol_error_keeps_record(self) -> None:
        error = ProtocolError("malformed output", record=b"abc")
        assert error.record == b"abc"
        assert str(error) == "malformed output"

    def test_process_error_attributes(self) -> None:
        error = ProcessError("exited", command=("./convert", "-x"), returncode=2)
        assert error.command == ("./convert", "-x")
        assert error.returncode == 2
        assert ProcessError("no start").returncode is None


class TestMismatchContext:
    """Diagnostic rendering."""

    def test_describe(self) -> None:
        context = MismatchContext(
            ("2024-07-15T12:00:00Z", ""), "2024-07-15", ("2024-07-16", ""), True, False
        )
        assert context.describe() == (
            "range [2024-07-15T12:00:00Z, ] -> [2024-07-16, ] "
            "matching 2024-07-15: expected True, got False"
        )

    def test_frozen(self) -> None:
        context = MismatchContext(("", ""), "2024-07-15")
        with pytest.raises(AttributeError):
            context.value_repr = "other"  # type: ignore[misc]

    def test_failure_carries_context(self) -> None:
        context = MismatchContext(("", ""), "2024-07-15")
        assert FuzzFinding("x", context).context is context
        assert ConformanceFailure("x").context is None


class TestEnums:
    """BridgeState and FuzzOutcome."""

    def test_terminal_states(self) -> None:
        terminal = {s for s in BridgeState if s.is_terminal}
        assert terminal == {BridgeState.COMPLETED, BridgeState.FAILED, BridgeState.CANCELLED}

    def test_string_values(self) -> None:
        assert str(BridgeState.RUNNING) == "running"
        assert f"{FuzzOutcome.NO_MATCH}" == "no_match"
