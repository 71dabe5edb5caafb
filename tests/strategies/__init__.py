"""Hypothesis strategies for datestamps property-based testing.

Strategies are organized by domain:

- timestamps: Instants, date strings, instant/date ranges, fuzz cases

Usage:
    from tests.strategies import instant_ranges, date_strings
    from tests.strategies.timestamps import fuzz_cases

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - offset_by_kind, fuzz_cases
"""

from .timestamps import (
    EPOCH_MAX,
    EPOCH_MIN,
    aligned_instant_ranges,
    date_ranges,
    date_strings,
    epochs,
    fuzz_cases,
    instant_ranges,
    instants,
    midnight_epochs,
    midnight_instants,
    minute_offsets,
    offset_by_kind,
    representative_offsets,
    second_epochs,
)

__all__ = [
    "EPOCH_MAX",
    "EPOCH_MIN",
    "aligned_instant_ranges",
    "date_ranges",
    "date_strings",
    "epochs",
    "fuzz_cases",
    "instant_ranges",
    "instants",
    "midnight_epochs",
    "midnight_instants",
    "minute_offsets",
    "offset_by_kind",
    "representative_offsets",
    "second_epochs",
]
