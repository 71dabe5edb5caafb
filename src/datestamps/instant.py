"""Nanosecond instants and their text forms.

An Instant is a point on the UTC timeline held as integer nanoseconds since
the Unix epoch, plus the fixed UTC offset it is displayed in. The offset is
presentation only: equality, ordering and hashing ignore it, so converting
an instant to UTC never changes what it means.

Text forms:
    RFC 3339 with up to nine fractional digits, e.g.
    "2024-07-15T09:00:00.5+10:00". Formatting drops trailing fractional
    zeros (and the dot when the fraction is zero) and writes "Z" for a zero
    offset. Offsets are written to the minute.

    Dates are "YYYY-MM-DD" and always mean midnight UTC of that day.

Leap seconds are not modelled; every day is exactly 86400 seconds long.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, timezone

from datestamps.constants import NANOS_PER_DAY, NANOS_PER_SECOND, SECONDS_PER_DAY

__all__ = [
    "Instant",
    "format_date",
    "parse_date",
]

_EPOCH_ORDINAL: int = date(1970, 1, 1).toordinal()

_RFC3339_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?:(?P<zulu>[Zz])|(?P<sign>[+-])(?P<off_hour>\d{2}):(?P<off_minute>\d{2}))",
    re.ASCII,
)

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@dataclass(frozen=True, slots=True, eq=False)
class Instant:
    """A nanosecond-precision point in time with a display offset.

    Attributes:
        epoch_ns: Nanoseconds since 1970-01-01T00:00:00Z
        offset_seconds: Fixed UTC offset (seconds east of UTC) for display

    Example:
        >>> t = Instant.parse("2024-07-15T00:00:00+10:00")
        >>> t.utc().format()
        '2024-07-14T14:00:00Z'
        >>> t == t.utc()
        True
    """

    epoch_ns: int
    offset_seconds: int = 0

    def __post_init__(self) -> None:
        """Validate field types and the offset range.

        Raises:
            TypeError: If a field is not an int
            ValueError: If the offset is a whole day or more
        """
        if not isinstance(self.epoch_ns, int) or isinstance(self.epoch_ns, bool):
            msg = f"epoch_ns must be int, got {type(self.epoch_ns).__name__}"
            raise TypeError(msg)
        if not isinstance(self.offset_seconds, int) or isinstance(self.offset_seconds, bool):
            msg = f"offset_seconds must be int, got {type(self.offset_seconds).__name__}"
            raise TypeError(msg)
        if abs(self.offset_seconds) >= SECONDS_PER_DAY:
            msg = f"offset_seconds out of range: {self.offset_seconds}"
            raise ValueError(msg)

    # --- Comparison (timeline position only) ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.epoch_ns == other.epoch_ns

    def __hash__(self) -> int:
        return hash(self.epoch_ns)

    def __lt__(self, other: Instant) -> bool:
        return self.epoch_ns < other.epoch_ns

    def __le__(self, other: Instant) -> bool:
        return self.epoch_ns <= other.epoch_ns

    def __gt__(self, other: Instant) -> bool:
        return self.epoch_ns > other.epoch_ns

    def __ge__(self, other: Instant) -> bool:
        return self.epoch_ns >= other.epoch_ns

    def __repr__(self) -> str:
        return f"Instant({self.format()!r})"

    # --- Construction ---

    @classmethod
    def parse(cls, text: str) -> Instant:
        """Parse an RFC 3339 timestamp, keeping its offset for display.

        Args:
            text: Timestamp such as "2024-07-04T23:59:59-07:00"

        Returns:
            The parsed instant

        Raises:
            ValueError: If text is not a valid RFC 3339 timestamp
        """
        match = _RFC3339_PATTERN.fullmatch(text)
        if match is None:
            msg = f"invalid RFC 3339 timestamp: {text!r}"
            raise ValueError(msg)

        try:
            day = date(int(match["year"]), int(match["month"]), int(match["day"]))
        except ValueError as e:
            msg = f"invalid RFC 3339 timestamp: {text!r}: {e}"
            raise ValueError(msg) from e

        hour, minute, second = int(match["hour"]), int(match["minute"]), int(match["second"])
        if hour > 23 or minute > 59 or second > 59:
            msg = f"invalid RFC 3339 timestamp: {text!r}: time of day out of range"
            raise ValueError(msg)

        offset = 0
        if match["zulu"] is None:
            off_hour, off_minute = int(match["off_hour"]), int(match["off_minute"])
            if off_hour > 23 or off_minute > 59:
                msg = f"invalid RFC 3339 timestamp: {text!r}: offset out of range"
                raise ValueError(msg)
            offset = off_hour * 3600 + off_minute * 60
            if match["sign"] == "-":
                offset = -offset

        fraction = match["fraction"] or ""
        nanos = int(fraction.ljust(9, "0")) if fraction else 0

        seconds = (
            (day.toordinal() - _EPOCH_ORDINAL) * SECONDS_PER_DAY
            + hour * 3600
            + minute * 60
            + second
            - offset
        )
        return cls(seconds * NANOS_PER_SECOND + nanos, offset)

    @classmethod
    def from_datetime(cls, value: datetime) -> Instant:
        """Convert an aware datetime (microsecond precision) to an Instant.

        Raises:
            ValueError: If value is naive
        """
        offset = value.utcoffset()
        if offset is None:
            msg = "naive datetime has no offset; attach a tzinfo first"
            raise ValueError(msg)
        delta = value - datetime(1970, 1, 1, tzinfo=UTC)
        epoch_ns = (
            (delta.days * SECONDS_PER_DAY + delta.seconds) * NANOS_PER_SECOND
            + delta.microseconds * 1000
        )
        return cls(epoch_ns, int(offset.total_seconds()))

    @classmethod
    def from_date(cls, text: str) -> Instant:
        """Midnight UTC of a "YYYY-MM-DD" date string."""
        return cls(parse_date(text))

    # --- Derivation ---

    def utc(self) -> Instant:
        """Same instant, displayed in UTC."""
        return Instant(self.epoch_ns, 0)

    def in_offset(self, offset_seconds: int) -> Instant:
        """Same instant, displayed at another fixed offset."""
        return Instant(self.epoch_ns, offset_seconds)

    def add(self, nanoseconds: int) -> Instant:
        """Shift along the timeline, keeping the display offset."""
        return Instant(self.epoch_ns + nanoseconds, self.offset_seconds)

    def add_days(self, days: int) -> Instant:
        """Shift by whole (86400 second) days."""
        return self.add(days * NANOS_PER_DAY)

    def truncate_day(self) -> Instant:
        """Start of the UTC day containing this instant (offset kept)."""
        return Instant(self.epoch_ns - self.epoch_ns % NANOS_PER_DAY, self.offset_seconds)

    @property
    def is_midnight(self) -> bool:
        """True if this instant is exactly at a UTC day boundary."""
        return self.epoch_ns % NANOS_PER_DAY == 0

    # --- Formatting ---

    def date_string(self) -> str:
        """The UTC calendar date containing this instant, as "YYYY-MM-DD"."""
        return format_date(self.epoch_ns)

    def format(self) -> str:
        """RFC 3339 with nanoseconds, in the display offset."""
        local_ns = self.epoch_ns + self.offset_seconds * NANOS_PER_SECOND
        days, rem = divmod(local_ns, NANOS_PER_DAY)
        day = date.fromordinal(_EPOCH_ORDINAL + days)
        seconds, nanos = divmod(rem, NANOS_PER_SECOND)
        hour, seconds = divmod(seconds, 3600)
        minute, second = divmod(seconds, 60)

        text = f"{day.year:04d}-{day.month:02d}-{day.day:02d}T{hour:02d}:{minute:02d}:{second:02d}"
        fraction = f"{nanos:09d}".rstrip("0")
        if fraction:
            text += "." + fraction

        if self.offset_seconds == 0:
            return text + "Z"
        sign = "-" if self.offset_seconds < 0 else "+"
        off_hour, off_rem = divmod(abs(self.offset_seconds), 3600)
        return f"{text}{sign}{off_hour:02d}:{off_rem // 60:02d}"

    def to_datetime(self) -> datetime:
        """Aware datetime in the display offset (truncated to microseconds)."""
        tz = UTC if self.offset_seconds == 0 else timezone(timedelta(seconds=self.offset_seconds))
        micros = self.epoch_ns // 1000
        return datetime(1970, 1, 1, tzinfo=UTC).astimezone(tz) + timedelta(microseconds=micros)


def parse_date(text: str) -> int:
    """Parse "YYYY-MM-DD" to the epoch nanoseconds of its UTC midnight.

    Raises:
        ValueError: If text is not a canonical date string
    """
    if not isinstance(text, str) or _DATE_PATTERN.fullmatch(text) is None:
        msg = f"invalid date: {text!r}"
        raise ValueError(msg)
    try:
        day = date.fromisoformat(text)
    except ValueError as e:
        msg = f"invalid date: {text!r}: {e}"
        raise ValueError(msg) from e
    return (day.toordinal() - _EPOCH_ORDINAL) * NANOS_PER_DAY


def format_date(epoch_ns: int) -> str:
    """Format the UTC date containing epoch_ns as "YYYY-MM-DD"."""
    day = date.fromordinal(_EPOCH_ORDINAL + epoch_ns // NANOS_PER_DAY)
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"
