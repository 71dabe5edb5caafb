"""Reference semantics for timestamp range <-> date range conversion.

Instant ranges are HALF-OPEN, [start, end): time is continuous, so an
exclusive upper bound is what stops two adjacent ranges from both claiming
the boundary instant. Date ranges are CLOSED, [start, end]: dates are
discrete, so there is no boundary to double-count. Conversions move between
the two without changing which instants a range selects.

Dates are normalized to 00:00:00 UTC. An unset bound is None for instants
and "" for dates; either side of a range may be unset independently.

Conversions:
    timestamp_range_to_date_range: NARROWING. Keeps only the UTC days that
        the instant range covers entirely.
    date_range_to_timestamp_range: Lossless.
    widen_range: Moves the bounds outwards to the enclosing UTC midnights.

Edge Case:
    An instant range that covers no whole UTC day narrows to a date range
    whose end is the day before its start, e.g.
    [2024-07-15T00:00:00+10:00, 2024-07-16T00:00:00+10:00) -> [2024-07-15, 2024-07-14].
    That inverted range is returned as-is and selects nothing
    (see DateRange.is_empty).

Thread-safe. Pure functions, no I/O.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from datestamps.constants import NANOS_PER_DAY
from datestamps.instant import Instant, format_date, parse_date

__all__ = [
    "DateRange",
    "DateToTimestamp",
    "InstantRange",
    "TimestampToDate",
    "assert_date",
    "date_range_to_timestamp_range",
    "date_span",
    "matches_date",
    "matches_instant",
    "relative_days_range",
    "timestamp_range_to_date_range",
    "widen_end",
    "widen_range",
    "widen_start",
]


class InstantRange(NamedTuple):
    """Half-open instant range [start, end); None is unbounded."""

    start: Instant | None = None
    end: Instant | None = None

    def format(self) -> tuple[str, str]:
        """RFC 3339 text of both bounds ("" for unset)."""
        return (
            "" if self.start is None else self.start.format(),
            "" if self.end is None else self.end.format(),
        )


class DateRange(NamedTuple):
    """Closed date range [start, end]; "" is unbounded."""

    start: str = ""
    end: str = ""

    @property
    def is_empty(self) -> bool:
        """True if both bounds are set and end precedes start.

        Narrowing a range that covers no whole day yields end = start - 1 day.
        """
        if not self.start or not self.end:
            return False
        return parse_date(self.end) < parse_date(self.start)


type TimestampToDate = Callable[[InstantRange], DateRange]
"""An implementation of the narrowing conversion (the thing under test)."""

type DateToTimestamp = Callable[[DateRange], InstantRange]
"""An implementation of the inverse conversion."""


# --- Matching ---


def matches_instant(r: InstantRange, value: Instant) -> bool:
    """Whether value lies in the half-open range [start, end).

    The end is exclusive because time is continuous. In practice most
    implementations have somewhere between second and nanosecond resolution.
    """
    if r.start is not None and value < r.start:
        return False
    return not (r.end is not None and value >= r.end)


def matches_date(r: DateRange, value: str) -> bool:
    """Whether the date value lies in the closed range [start, end].

    Raises:
        ValueError: If value or a set bound is not a valid date
    """
    val = parse_date(value)
    if r.start and val < parse_date(r.start):
        return False
    return not (r.end and val > parse_date(r.end))


# --- Widening ---


def widen_start(t: Instant) -> Instant:
    """Truncate to the start of the UTC day (display offset kept)."""
    return t.truncate_day()


def widen_end(t: Instant) -> Instant:
    """The next UTC midnight after t, or t itself if it is a UTC midnight.

    In other words, the instant by which the day containing t is complete.
    """
    if t.is_midnight:
        return t
    return t.truncate_day().add(NANOS_PER_DAY)


def widen_range(r: InstantRange) -> InstantRange:
    """Move both bounds outwards to include every overlapping UTC day.

    Idempotent. Unset bounds stay unset.
    """
    return InstantRange(
        None if r.start is None else widen_start(r.start),
        None if r.end is None else widen_end(r.end),
    )


def relative_days_range(now: Instant, days: int) -> InstantRange:
    """The range [now - days, now), e.g. "the last seven days"."""
    return InstantRange(now.add_days(-days), now)


# --- Conversion ---


def timestamp_range_to_date_range(r: InstantRange) -> DateRange:
    """Narrow an instant range to the UTC dates it covers entirely.

    Start: a partial first day is excluded, so anything past midnight rounds
    UP to the next day. End: the exclusive bound becomes inclusive by
    stepping back one day; whatever day that lands in is the last one
    covered in full.
    """
    start_date = ""
    if r.start is not None:
        start = r.start.utc()
        if not start.is_midnight:
            start = start.add(NANOS_PER_DAY)
        start_date = start.date_string()

    end_date = ""
    if r.end is not None:
        end_date = r.end.utc().add(-NANOS_PER_DAY).date_string()

    return DateRange(start_date, end_date)


def date_range_to_timestamp_range(r: DateRange) -> InstantRange:
    """Expand a closed date range to the half-open UTC instant range it spans.

    Raises:
        ValueError: If a set bound is not a valid date
    """
    start = None if not r.start else Instant(parse_date(r.start))
    # The exclusive end is the midnight after the (inclusive) end date.
    end = None if not r.end else Instant(parse_date(r.end) + NANOS_PER_DAY)
    return InstantRange(start, end)


# --- Validation helpers ---


def assert_date(text: str) -> None:
    """Ensure text is a date string that round-trips exactly.

    Raises:
        ValueError: If text is not a canonical "YYYY-MM-DD" date
    """
    if format_date(parse_date(text)) != text:
        msg = f"date format mismatch: {text!r}"
        raise ValueError(msg)


def date_span(value: str) -> tuple[Instant, Instant]:
    """Earliest and latest representable instant of a UTC date.

    The upper bound is the last nanosecond of the day, not the true
    (exclusive) end.
    """
    lower = Instant(parse_date(value))
    return lower, lower.add(NANOS_PER_DAY - 1)
