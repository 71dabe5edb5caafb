"""datestamps - conformance and fuzz harness for timestamp/date range converters.

Checks that an external implementation of "convert a timestamp range to a
date range" (and the inverse) agrees with a reference model, over fixed
fixtures and randomized fuzzing. The implementation runs as a long-lived
child process and is called through a synchronous bridge over its
stdin/stdout.

Public API:
    ProcessBridge - call/response function backed by a child process
    run_bridge - Run a function against a bridge, then tear it down
    TimestampToDateCodec - Default line protocol codec
    DateToTimestampCodec - Line protocol codec for the inverse conversion
    Instant - Nanosecond instant with a display offset
    InstantRange, DateRange - Half-open instant and closed date ranges
    timestamp_range_to_date_range - Reference narrowing conversion
    date_range_to_timestamp_range - Reference inverse conversion
    run_timestamp_to_date, run_date_to_timestamp - Fixture conformance runs
    FuzzDriver - Random-search fuzzer

Exceptions:
    DatestampsError - Base exception class
    BridgeError - Terminal bridge failures
    ConformanceFailure - Disagreement with the reference model

Submodules:
    datestamps.oracle - Reference semantics (matching, widening, conversion)
    datestamps.fixtures - Example values and expected-match tables
    datestamps.fuzzing - Fuzz invariants and case generation
    datestamps.configuration - Options handed to external fuzz targets
    datestamps.cancellation - Cancellation scopes shared by bridge threads
    datestamps.reference - Reference child process (python -m datestamps.reference)
"""

from .bridge import ProcessBridge, run_bridge
from .codec import DateToTimestampCodec, TimestampToDateCodec
from .enums import BridgeState, FuzzOutcome
from .errors import (
    BridgeCancelledError,
    BridgeClosedError,
    BridgeError,
    ConformanceFailure,
    DatestampsError,
    FuzzFinding,
    ProcessError,
    ProtocolError,
)
from .fuzzing import FuzzDriver
from .instant import Instant
from .oracle import (
    DateRange,
    InstantRange,
    date_range_to_timestamp_range,
    timestamp_range_to_date_range,
)
from .runner import run_date_to_timestamp, run_timestamp_to_date

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("datestamps")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BridgeCancelledError",
    "BridgeClosedError",
    "BridgeError",
    "BridgeState",
    "ConformanceFailure",
    "DateRange",
    "DateToTimestampCodec",
    "DatestampsError",
    "FuzzDriver",
    "FuzzFinding",
    "FuzzOutcome",
    "Instant",
    "InstantRange",
    "ProcessBridge",
    "ProcessError",
    "ProtocolError",
    "TimestampToDateCodec",
    "__version__",
    "date_range_to_timestamp_range",
    "run_bridge",
    "run_date_to_timestamp",
    "run_timestamp_to_date",
    "timestamp_range_to_date_range",
]
