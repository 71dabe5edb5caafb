"""Shared constants for datestamps.

Constants are grouped by domain:
- Time units: Nanosecond arithmetic for the epoch model
- Wire protocol: Field and record delimiters
- Bridge limits: Shutdown grace periods

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Time units
    "NANOS_PER_SECOND",
    "NANOS_PER_DAY",
    "SECONDS_PER_DAY",
    # Wire protocol
    "FIELD_DELIMITER",
    "RECORD_TERMINATOR",
    # Bridge limits
    "DEFAULT_KILL_GRACE_SECONDS",
    "DEFAULT_JOIN_TIMEOUT_SECONDS",
    # Configuration
    "OPTIONS_ENV_VAR",
    "FUZZ_EXAMPLES_ENV_VAR",
]

# ============================================================================
# TIME UNITS
# ============================================================================
#
# Instants are integer nanoseconds since the Unix epoch. Leap seconds are not
# modelled: every UTC day is exactly NANOS_PER_DAY long.

NANOS_PER_SECOND: int = 1_000_000_000
SECONDS_PER_DAY: int = 86_400
NANOS_PER_DAY: int = SECONDS_PER_DAY * NANOS_PER_SECOND

# ============================================================================
# WIRE PROTOCOL
# ============================================================================

FIELD_DELIMITER: bytes = b"\t"
RECORD_TERMINATOR: bytes = b"\n"

# ============================================================================
# BRIDGE LIMITS
# ============================================================================

DEFAULT_KILL_GRACE_SECONDS: float = 1.0
"""Time a child gets to exit after its stdin closes before it is killed."""

DEFAULT_JOIN_TIMEOUT_SECONDS: float = 5.0
"""Upper bound on waiting for a bridge thread during shutdown."""

# ============================================================================
# CONFIGURATION
# ============================================================================

OPTIONS_ENV_VAR: str = "DATESTAMPS_FUZZ_OPTIONS"
"""Environment variable carrying the encoded fuzz options record."""

FUZZ_EXAMPLES_ENV_VAR: str = "DATESTAMPS_FUZZ_EXAMPLES"
"""Environment variable overriding the number of Hypothesis fuzz examples."""
