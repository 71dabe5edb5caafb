"""Example values and the expected-match tables for conformance runs.

Every value here is text, exactly as it is sent to (or expected back from)
an implementation. Match triples are keyed on that text too, so a
timestamp written "+00:00" and one written "Z" are different fixtures even
though they are the same instant.

Match tables:
    Each entry (range_start, range_end, value) says: the range, once
    converted by the implementation under test, must contain value. A value
    of the same kind as the range is uninteresting and never listed. Every
    combination not listed must NOT match.

    TIMESTAMP_TO_DATE_MATCHES: timestamp ranges paired with date values.
    DATE_TO_TIMESTAMP_MATCHES: date ranges paired with timestamp values.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "DATE_RANGE_VALUES",
    "DATE_TO_TIMESTAMP_MATCHES",
    "DATE_VALUES",
    "EXAMPLE_MATCHES",
    "TIMESTAMP_RANGE_VALUES",
    "TIMESTAMP_TO_DATE_MATCHES",
    "TIMESTAMP_VALUES",
]

type MatchTriple = tuple[str, str, str]

DATE_VALUES: Final[tuple[str, ...]] = (
    "2024-01-01",  # New Year's Day
    "2024-12-25",  # Christmas
    "2024-02-29",  # Leap year day
    "2024-07-04",  # Independence Day
    "2024-11-05",  # Random date
    "2024-06-15",  # Another random date
    "2024-08-30",  # Yet another random date
    "2024-10-31",  # Halloween
    "2024-09-21",  # Equinox
    "2024-03-10",  # Daylight Saving Time starts (US)
    "2022-01-01",
    "2023-02-28",
    "2024-02-29",  # leap year
    "2023-12-31",
    "2023-07-19",
    "2016-12-31",  # leap second day
    "2023-03-12",  # DST start in US
    "2023-11-05",  # DST end in US
)

DATE_RANGE_VALUES: Final[tuple[tuple[str, str], ...]] = (
    ("2024-01-01", "2024-01-31"),  # Entire month of January
    ("2024-02-01", "2024-02-29"),  # Entire month of February (leap year)
    ("2024-07-01", "2024-07-04"),  # Independence week
    ("2024-12-24", "2024-12-26"),  # Christmas period
    ("2024-06-01", "2024-06-15"),  # First half of June
    ("2024-08-15", "2024-08-30"),  # Second half of August
    ("2024-10-01", "2024-10-31"),  # Entire month of October
    ("2024-09-20", "2024-09-22"),  # Around the Equinox
    ("2024-03-09", "2024-03-11"),  # Around Daylight Saving Time starts
    ("2024-11-01", "2024-11-05"),  # First days of November
    ("2022-01-01", "2022-01-31"),
    ("2023-02-01", "2023-02-28"),
    ("2024-02-01", "2024-02-29"),  # leap year
    ("2023-12-01", "2023-12-31"),
    ("2023-07-01", "2023-07-31"),
    ("2016-12-31", "2017-01-01"),  # leap second day range
    ("2023-03-10", "2023-03-12"),  # around DST start
    ("2023-11-04", "2023-11-06"),  # around DST end
)

TIMESTAMP_VALUES: Final[tuple[str, ...]] = (
    "2024-01-01T00:00:00Z",  # New Year's Day UTC
    "2024-12-25T00:00:00-05:00",  # Christmas EST
    "2024-02-29T12:00:00+05:30",  # Leap year day IST
    "2024-07-04T23:59:59-07:00",  # Independence Day PDT
    "2024-11-05T08:00:00+01:00",  # Random date CET
    "2024-06-15T13:45:30+09:00",  # Another random date JST
    "2024-08-30T18:30:00-04:00",  # Yet another random date EDT
    "2024-10-31T17:00:00+00:00",  # Halloween UTC
    "2024-09-21T00:00:00-03:00",  # Equinox BRT
    "2024-03-10T02:00:00-08:00",  # Daylight Saving Time starts PST
    "2022-01-01T00:00:00Z",
    "2023-02-28T23:59:59Z",
    "2024-02-29T12:00:00Z",  # leap year
    "2023-12-31T23:59:59Z",
    "2023-07-19T14:30:00Z",
    "2023-07-19T14:30:00-07:00",  # with offset
    "2023-07-19T14:30:00+09:00",  # with offset
    "2023-03-12T02:00:00-07:00",  # DST start in US
    "2023-11-05T01:00:00-08:00",  # DST end in US
)

TIMESTAMP_RANGE_VALUES: Final[tuple[tuple[str, str], ...]] = (
    ("2024-01-01T00:00:00Z", "2024-01-31T23:59:59Z"),  # Entire month of January UTC
    ("2024-02-01T00:00:00-08:00", "2024-02-29T23:59:59-08:00"),  # February PST (leap year)
    ("2024-07-01T00:00:00-07:00", "2024-07-04T23:59:59-07:00"),  # Independence week PDT
    ("2024-12-24T00:00:00+01:00", "2024-12-26T23:59:59+01:00"),  # Christmas period CET
    ("2024-06-01T00:00:00+09:00", "2024-06-15T23:59:59+09:00"),  # First half of June JST
    ("2024-08-15T00:00:00-04:00", "2024-08-30T23:59:59-04:00"),  # Second half of August EDT
    ("2024-10-01T00:00:00+00:00", "2024-10-31T23:59:59+00:00"),  # Entire month of October UTC
    ("2024-09-20T00:00:00-03:00", "2024-09-22T23:59:59-03:00"),  # Around the Equinox BRT
    ("2024-03-09T00:00:00-08:00", "2024-03-11T23:59:59-07:00"),  # Around DST start (PST to PDT)
    ("2024-11-01T00:00:00+01:00", "2024-11-05T23:59:59+01:00"),  # First days of November CET
    ("2022-01-01T00:00:00Z", "2022-01-31T23:59:59Z"),
    ("2023-02-01T00:00:00Z", "2023-02-28T23:59:59Z"),
    ("2024-02-01T00:00:00Z", "2024-02-29T23:59:59Z"),  # leap year
    ("2023-12-01T00:00:00Z", "2023-12-31T23:59:59Z"),
    ("2023-07-01T00:00:00Z", "2023-07-31T23:59:59Z"),
    ("2023-07-01T00:00:00-07:00", "2023-07-31T23:59:59-07:00"),  # with offset
    ("2023-07-01T00:00:00+09:00", "2023-07-31T23:59:59+09:00"),  # with offset
    ("2016-12-31T23:59:59Z", "2017-01-01T00:00:00Z"),  # around leap second
    ("2023-03-12T01:59:59-07:00", "2023-03-12T03:00:00-07:00"),  # around DST start
    ("2023-11-05T00:59:59-07:00", "2023-11-05T02:00:00-08:00"),  # around DST end
)

TIMESTAMP_TO_DATE_MATCHES: Final[frozenset[MatchTriple]] = frozenset({
    ("", "2017-01-01T00:00:00Z", "2016-12-31"),
    ("", "2022-01-31T23:59:59Z", "2016-12-31"),
    ("", "2022-01-31T23:59:59Z", "2022-01-01"),
    ("", "2023-02-28T23:59:59Z", "2016-12-31"),
    ("", "2023-02-28T23:59:59Z", "2022-01-01"),
    ("", "2023-03-12T03:00:00-07:00", "2016-12-31"),
    ("", "2023-03-12T03:00:00-07:00", "2022-01-01"),
    ("", "2023-03-12T03:00:00-07:00", "2023-02-28"),
    ("", "2023-07-31T23:59:59+09:00", "2016-12-31"),
    ("", "2023-07-31T23:59:59+09:00", "2022-01-01"),
    ("", "2023-07-31T23:59:59+09:00", "2023-02-28"),
    ("", "2023-07-31T23:59:59+09:00", "2023-03-12"),
    ("", "2023-07-31T23:59:59+09:00", "2023-07-19"),
    ("", "2023-07-31T23:59:59-07:00", "2016-12-31"),
    ("", "2023-07-31T23:59:59-07:00", "2022-01-01"),
    ("", "2023-07-31T23:59:59-07:00", "2023-02-28"),
    ("", "2023-07-31T23:59:59-07:00", "2023-03-12"),
    ("", "2023-07-31T23:59:59-07:00", "2023-07-19"),
    ("", "2023-07-31T23:59:59Z", "2016-12-31"),
    ("", "2023-07-31T23:59:59Z", "2022-01-01"),
    ("", "2023-07-31T23:59:59Z", "2023-02-28"),
    ("", "2023-07-31T23:59:59Z", "2023-03-12"),
    ("", "2023-07-31T23:59:59Z", "2023-07-19"),
    ("", "2023-11-05T02:00:00-08:00", "2016-12-31"),
    ("", "2023-11-05T02:00:00-08:00", "2022-01-01"),
    ("", "2023-11-05T02:00:00-08:00", "2023-02-28"),
    ("", "2023-11-05T02:00:00-08:00", "2023-03-12"),
    ("", "2023-11-05T02:00:00-08:00", "2023-07-19"),
    ("", "2023-12-31T23:59:59Z", "2016-12-31"),
    ("", "2023-12-31T23:59:59Z", "2022-01-01"),
    ("", "2023-12-31T23:59:59Z", "2023-02-28"),
    ("", "2023-12-31T23:59:59Z", "2023-03-12"),
    ("", "2023-12-31T23:59:59Z", "2023-07-19"),
    ("", "2023-12-31T23:59:59Z", "2023-11-05"),
    ("", "2024-01-31T23:59:59Z", "2016-12-31"),
    ("", "2024-01-31T23:59:59Z", "2022-01-01"),
    ("", "2024-01-31T23:59:59Z", "2023-02-28"),
    ("", "2024-01-31T23:59:59Z", "2023-03-12"),
    ("", "2024-01-31T23:59:59Z", "2023-07-19"),
    ("", "2024-01-31T23:59:59Z", "2023-11-05"),
    ("", "2024-01-31T23:59:59Z", "2023-12-31"),
    ("", "2024-01-31T23:59:59Z", "2024-01-01"),
    ("", "2024-02-29T23:59:59-08:00", "2016-12-31"),
    ("", "2024-02-29T23:59:59-08:00", "2022-01-01"),
    ("", "2024-02-29T23:59:59-08:00", "2023-02-28"),
    ("", "2024-02-29T23:59:59-08:00", "2023-03-12"),
    ("", "2024-02-29T23:59:59-08:00", "2023-07-19"),
    ("", "2024-02-29T23:59:59-08:00", "2023-11-05"),
    ("", "2024-02-29T23:59:59-08:00", "2023-12-31"),
    ("", "2024-02-29T23:59:59-08:00", "2024-01-01"),
    ("", "2024-02-29T23:59:59-08:00", "2024-02-29"),
    ("", "2024-02-29T23:59:59Z", "2016-12-31"),
    ("", "2024-02-29T23:59:59Z", "2022-01-01"),
    ("", "2024-02-29T23:59:59Z", "2023-02-28"),
    ("", "2024-02-29T23:59:59Z", "2023-03-12"),
    ("", "2024-02-29T23:59:59Z", "2023-07-19"),
    ("", "2024-02-29T23:59:59Z", "2023-11-05"),
    ("", "2024-02-29T23:59:59Z", "2023-12-31"),
    ("", "2024-02-29T23:59:59Z", "2024-01-01"),
    ("", "2024-03-11T23:59:59-07:00", "2016-12-31"),
    ("", "2024-03-11T23:59:59-07:00", "2022-01-01"),
    ("", "2024-03-11T23:59:59-07:00", "2023-02-28"),
    ("", "2024-03-11T23:59:59-07:00", "2023-03-12"),
    ("", "2024-03-11T23:59:59-07:00", "2023-07-19"),
    ("", "2024-03-11T23:59:59-07:00", "2023-11-05"),
    ("", "2024-03-11T23:59:59-07:00", "2023-12-31"),
    ("", "2024-03-11T23:59:59-07:00", "2024-01-01"),
    ("", "2024-03-11T23:59:59-07:00", "2024-02-29"),
    ("", "2024-03-11T23:59:59-07:00", "2024-03-10"),
    ("", "2024-06-15T23:59:59+09:00", "2016-12-31"),
    ("", "2024-06-15T23:59:59+09:00", "2022-01-01"),
    ("", "2024-06-15T23:59:59+09:00", "2023-02-28"),
    ("", "2024-06-15T23:59:59+09:00", "2023-03-12"),
    ("", "2024-06-15T23:59:59+09:00", "2023-07-19"),
    ("", "2024-06-15T23:59:59+09:00", "2023-11-05"),
    ("", "2024-06-15T23:59:59+09:00", "2023-12-31"),
    ("", "2024-06-15T23:59:59+09:00", "2024-01-01"),
    ("", "2024-06-15T23:59:59+09:00", "2024-02-29"),
    ("", "2024-06-15T23:59:59+09:00", "2024-03-10"),
    ("", "2024-07-04T23:59:59-07:00", "2016-12-31"),
    ("", "2024-07-04T23:59:59-07:00", "2022-01-01"),
    ("", "2024-07-04T23:59:59-07:00", "2023-02-28"),
    ("", "2024-07-04T23:59:59-07:00", "2023-03-12"),
    ("", "2024-07-04T23:59:59-07:00", "2023-07-19"),
    ("", "2024-07-04T23:59:59-07:00", "2023-11-05"),
    ("", "2024-07-04T23:59:59-07:00", "2023-12-31"),
    ("", "2024-07-04T23:59:59-07:00", "2024-01-01"),
    ("", "2024-07-04T23:59:59-07:00", "2024-02-29"),
    ("", "2024-07-04T23:59:59-07:00", "2024-03-10"),
    ("", "2024-07-04T23:59:59-07:00", "2024-06-15"),
    ("", "2024-07-04T23:59:59-07:00", "2024-07-04"),
    ("", "2024-08-30T23:59:59-04:00", "2016-12-31"),
    ("", "2024-08-30T23:59:59-04:00", "2022-01-01"),
    ("", "2024-08-30T23:59:59-04:00", "2023-02-28"),
    ("", "2024-08-30T23:59:59-04:00", "2023-03-12"),
    ("", "2024-08-30T23:59:59-04:00", "2023-07-19"),
    ("", "2024-08-30T23:59:59-04:00", "2023-11-05"),
    ("", "2024-08-30T23:59:59-04:00", "2023-12-31"),
    ("", "2024-08-30T23:59:59-04:00", "2024-01-01"),
    ("", "2024-08-30T23:59:59-04:00", "2024-02-29"),
    ("", "2024-08-30T23:59:59-04:00", "2024-03-10"),
    ("", "2024-08-30T23:59:59-04:00", "2024-06-15"),
    ("", "2024-08-30T23:59:59-04:00", "2024-07-04"),
    ("", "2024-08-30T23:59:59-04:00", "2024-08-30"),
    ("", "2024-09-22T23:59:59-03:00", "2016-12-31"),
    ("", "2024-09-22T23:59:59-03:00", "2022-01-01"),
    ("", "2024-09-22T23:59:59-03:00", "2023-02-28"),
    ("", "2024-09-22T23:59:59-03:00", "2023-03-12"),
    ("", "2024-09-22T23:59:59-03:00", "2023-07-19"),
    ("", "2024-09-22T23:59:59-03:00", "2023-11-05"),
    ("", "2024-09-22T23:59:59-03:00", "2023-12-31"),
    ("", "2024-09-22T23:59:59-03:00", "2024-01-01"),
    ("", "2024-09-22T23:59:59-03:00", "2024-02-29"),
    ("", "2024-09-22T23:59:59-03:00", "2024-03-10"),
    ("", "2024-09-22T23:59:59-03:00", "2024-06-15"),
    ("", "2024-09-22T23:59:59-03:00", "2024-07-04"),
    ("", "2024-09-22T23:59:59-03:00", "2024-08-30"),
    ("", "2024-09-22T23:59:59-03:00", "2024-09-21"),
    ("", "2024-10-31T23:59:59+00:00", "2016-12-31"),
    ("", "2024-10-31T23:59:59+00:00", "2022-01-01"),
    ("", "2024-10-31T23:59:59+00:00", "2023-02-28"),
    ("", "2024-10-31T23:59:59+00:00", "2023-03-12"),
    ("", "2024-10-31T23:59:59+00:00", "2023-07-19"),
    ("", "2024-10-31T23:59:59+00:00", "2023-11-05"),
    ("", "2024-10-31T23:59:59+00:00", "2023-12-31"),
    ("", "2024-10-31T23:59:59+00:00", "2024-01-01"),
    ("", "2024-10-31T23:59:59+00:00", "2024-02-29"),
    ("", "2024-10-31T23:59:59+00:00", "2024-03-10"),
    ("", "2024-10-31T23:59:59+00:00", "2024-06-15"),
    ("", "2024-10-31T23:59:59+00:00", "2024-07-04"),
    ("", "2024-10-31T23:59:59+00:00", "2024-08-30"),
    ("", "2024-10-31T23:59:59+00:00", "2024-09-21"),
    ("", "2024-11-05T23:59:59+01:00", "2016-12-31"),
    ("", "2024-11-05T23:59:59+01:00", "2022-01-01"),
    ("", "2024-11-05T23:59:59+01:00", "2023-02-28"),
    ("", "2024-11-05T23:59:59+01:00", "2023-03-12"),
    ("", "2024-11-05T23:59:59+01:00", "2023-07-19"),
    ("", "2024-11-05T23:59:59+01:00", "2023-11-05"),
    ("", "2024-11-05T23:59:59+01:00", "2023-12-31"),
    ("", "2024-11-05T23:59:59+01:00", "2024-01-01"),
    ("", "2024-11-05T23:59:59+01:00", "2024-02-29"),
    ("", "2024-11-05T23:59:59+01:00", "2024-03-10"),
    ("", "2024-11-05T23:59:59+01:00", "2024-06-15"),
    ("", "2024-11-05T23:59:59+01:00", "2024-07-04"),
    ("", "2024-11-05T23:59:59+01:00", "2024-08-30"),
    ("", "2024-11-05T23:59:59+01:00", "2024-09-21"),
    ("", "2024-11-05T23:59:59+01:00", "2024-10-31"),
    ("", "2024-12-26T23:59:59+01:00", "2016-12-31"),
    ("", "2024-12-26T23:59:59+01:00", "2022-01-01"),
    ("", "2024-12-26T23:59:59+01:00", "2023-02-28"),
    ("", "2024-12-26T23:59:59+01:00", "2023-03-12"),
    ("", "2024-12-26T23:59:59+01:00", "2023-07-19"),
    ("", "2024-12-26T23:59:59+01:00", "2023-11-05"),
    ("", "2024-12-26T23:59:59+01:00", "2023-12-31"),
    ("", "2024-12-26T23:59:59+01:00", "2024-01-01"),
    ("", "2024-12-26T23:59:59+01:00", "2024-02-29"),
    ("", "2024-12-26T23:59:59+01:00", "2024-03-10"),
    ("", "2024-12-26T23:59:59+01:00", "2024-06-15"),
    ("", "2024-12-26T23:59:59+01:00", "2024-07-04"),
    ("", "2024-12-26T23:59:59+01:00", "2024-08-30"),
    ("", "2024-12-26T23:59:59+01:00", "2024-09-21"),
    ("", "2024-12-26T23:59:59+01:00", "2024-10-31"),
    ("", "2024-12-26T23:59:59+01:00", "2024-11-05"),
    ("", "2024-12-26T23:59:59+01:00", "2024-12-25"),
    ("2016-12-31T23:59:59Z", "", "2022-01-01"),
    ("2016-12-31T23:59:59Z", "", "2023-02-28"),
    ("2016-12-31T23:59:59Z", "", "2023-03-12"),
    ("2016-12-31T23:59:59Z", "", "2023-07-19"),
    ("2016-12-31T23:59:59Z", "", "2023-11-05"),
    ("2016-12-31T23:59:59Z", "", "2023-12-31"),
    ("2016-12-31T23:59:59Z", "", "2024-01-01"),
    ("2016-12-31T23:59:59Z", "", "2024-02-29"),
    ("2016-12-31T23:59:59Z", "", "2024-03-10"),
    ("2016-12-31T23:59:59Z", "", "2024-06-15"),
    ("2016-12-31T23:59:59Z", "", "2024-07-04"),
    ("2016-12-31T23:59:59Z", "", "2024-08-30"),
    ("2016-12-31T23:59:59Z", "", "2024-09-21"),
    ("2016-12-31T23:59:59Z", "", "2024-10-31"),
    ("2016-12-31T23:59:59Z", "", "2024-11-05"),
    ("2016-12-31T23:59:59Z", "", "2024-12-25"),
    ("2022-01-01T00:00:00Z", "", "2022-01-01"),
    ("2022-01-01T00:00:00Z", "", "2023-02-28"),
    ("2022-01-01T00:00:00Z", "", "2023-03-12"),
    ("2022-01-01T00:00:00Z", "", "2023-07-19"),
    ("2022-01-01T00:00:00Z", "", "2023-11-05"),
    ("2022-01-01T00:00:00Z", "", "2023-12-31"),
    ("2022-01-01T00:00:00Z", "", "2024-01-01"),
    ("2022-01-01T00:00:00Z", "", "2024-02-29"),
    ("2022-01-01T00:00:00Z", "", "2024-03-10"),
    ("2022-01-01T00:00:00Z", "", "2024-06-15"),
    ("2022-01-01T00:00:00Z", "", "2024-07-04"),
    ("2022-01-01T00:00:00Z", "", "2024-08-30"),
    ("2022-01-01T00:00:00Z", "", "2024-09-21"),
    ("2022-01-01T00:00:00Z", "", "2024-10-31"),
    ("2022-01-01T00:00:00Z", "", "2024-11-05"),
    ("2022-01-01T00:00:00Z", "", "2024-12-25"),
    ("2022-01-01T00:00:00Z", "2022-01-31T23:59:59Z", "2022-01-01"),
    ("2023-02-01T00:00:00Z", "", "2023-02-28"),
    ("2023-02-01T00:00:00Z", "", "2023-03-12"),
    ("2023-02-01T00:00:00Z", "", "2023-07-19"),
    ("2023-02-01T00:00:00Z", "", "2023-11-05"),
    ("2023-02-01T00:00:00Z", "", "2023-12-31"),
    ("2023-02-01T00:00:00Z", "", "2024-01-01"),
    ("2023-02-01T00:00:00Z", "", "2024-02-29"),
    ("2023-02-01T00:00:00Z", "", "2024-03-10"),
    ("2023-02-01T00:00:00Z", "", "2024-06-15"),
    ("2023-02-01T00:00:00Z", "", "2024-07-04"),
    ("2023-02-01T00:00:00Z", "", "2024-08-30"),
    ("2023-02-01T00:00:00Z", "", "2024-09-21"),
    ("2023-02-01T00:00:00Z", "", "2024-10-31"),
    ("2023-02-01T00:00:00Z", "", "2024-11-05"),
    ("2023-02-01T00:00:00Z", "", "2024-12-25"),
    ("2023-03-12T01:59:59-07:00", "", "2023-07-19"),
    ("2023-03-12T01:59:59-07:00", "", "2023-11-05"),
    ("2023-03-12T01:59:59-07:00", "", "2023-12-31"),
    ("2023-03-12T01:59:59-07:00", "", "2024-01-01"),
    ("2023-03-12T01:59:59-07:00", "", "2024-02-29"),
    ("2023-03-12T01:59:59-07:00", "", "2024-03-10"),
    ("2023-03-12T01:59:59-07:00", "", "2024-06-15"),
    ("2023-03-12T01:59:59-07:00", "", "2024-07-04"),
    ("2023-03-12T01:59:59-07:00", "", "2024-08-30"),
    ("2023-03-12T01:59:59-07:00", "", "2024-09-21"),
    ("2023-03-12T01:59:59-07:00", "", "2024-10-31"),
    ("2023-03-12T01:59:59-07:00", "", "2024-11-05"),
    ("2023-03-12T01:59:59-07:00", "", "2024-12-25"),
    ("2023-07-01T00:00:00+09:00", "", "2023-07-19"),
    ("2023-07-01T00:00:00+09:00", "", "2023-11-05"),
    ("2023-07-01T00:00:00+09:00", "", "2023-12-31"),
    ("2023-07-01T00:00:00+09:00", "", "2024-01-01"),
    ("2023-07-01T00:00:00+09:00", "", "2024-02-29"),
    ("2023-07-01T00:00:00+09:00", "", "2024-03-10"),
    ("2023-07-01T00:00:00+09:00", "", "2024-06-15"),
    ("2023-07-01T00:00:00+09:00", "", "2024-07-04"),
    ("2023-07-01T00:00:00+09:00", "", "2024-08-30"),
    ("2023-07-01T00:00:00+09:00", "", "2024-09-21"),
    ("2023-07-01T00:00:00+09:00", "", "2024-10-31"),
    ("2023-07-01T00:00:00+09:00", "", "2024-11-05"),
    ("2023-07-01T00:00:00+09:00", "", "2024-12-25"),
    ("2023-07-01T00:00:00+09:00", "2023-07-31T23:59:59+09:00", "2023-07-19"),
    ("2023-07-01T00:00:00-07:00", "", "2023-07-19"),
    ("2023-07-01T00:00:00-07:00", "", "2023-11-05"),
    ("2023-07-01T00:00:00-07:00", "", "2023-12-31"),
    ("2023-07-01T00:00:00-07:00", "", "2024-01-01"),
    ("2023-07-01T00:00:00-07:00", "", "2024-02-29"),
    ("2023-07-01T00:00:00-07:00", "", "2024-03-10"),
    ("2023-07-01T00:00:00-07:00", "", "2024-06-15"),
    ("2023-07-01T00:00:00-07:00", "", "2024-07-04"),
    ("2023-07-01T00:00:00-07:00", "", "2024-08-30"),
    ("2023-07-01T00:00:00-07:00", "", "2024-09-21"),
    ("2023-07-01T00:00:00-07:00", "", "2024-10-31"),
    ("2023-07-01T00:00:00-07:00", "", "2024-11-05"),
    ("2023-07-01T00:00:00-07:00", "", "2024-12-25"),
    ("2023-07-01T00:00:00-07:00", "2023-07-31T23:59:59-07:00", "2023-07-19"),
    ("2023-07-01T00:00:00Z", "", "2023-07-19"),
    ("2023-07-01T00:00:00Z", "", "2023-11-05"),
    ("2023-07-01T00:00:00Z", "", "2023-12-31"),
    ("2023-07-01T00:00:00Z", "", "2024-01-01"),
    ("2023-07-01T00:00:00Z", "", "2024-02-29"),
    ("2023-07-01T00:00:00Z", "", "2024-03-10"),
    ("2023-07-01T00:00:00Z", "", "2024-06-15"),
    ("2023-07-01T00:00:00Z", "", "2024-07-04"),
    ("2023-07-01T00:00:00Z", "", "2024-08-30"),
    ("2023-07-01T00:00:00Z", "", "2024-09-21"),
    ("2023-07-01T00:00:00Z", "", "2024-10-31"),
    ("2023-07-01T00:00:00Z", "", "2024-11-05"),
    ("2023-07-01T00:00:00Z", "", "2024-12-25"),
    ("2023-07-01T00:00:00Z", "2023-07-31T23:59:59Z", "2023-07-19"),
    ("2023-11-05T00:59:59-07:00", "", "2023-12-31"),
    ("2023-11-05T00:59:59-07:00", "", "2024-01-01"),
    ("2023-11-05T00:59:59-07:00", "", "2024-02-29"),
    ("2023-11-05T00:59:59-07:00", "", "2024-03-10"),
    ("2023-11-05T00:59:59-07:00", "", "2024-06-15"),
    ("2023-11-05T00:59:59-07:00", "", "2024-07-04"),
    ("2023-11-05T00:59:59-07:00", "", "2024-08-30"),
    ("2023-11-05T00:59:59-07:00", "", "2024-09-21"),
    ("2023-11-05T00:59:59-07:00", "", "2024-10-31"),
    ("2023-11-05T00:59:59-07:00", "", "2024-11-05"),
    ("2023-11-05T00:59:59-07:00", "", "2024-12-25"),
    ("2023-12-01T00:00:00Z", "", "2023-12-31"),
    ("2023-12-01T00:00:00Z", "", "2024-01-01"),
    ("2023-12-01T00:00:00Z", "", "2024-02-29"),
    ("2023-12-01T00:00:00Z", "", "2024-03-10"),
    ("2023-12-01T00:00:00Z", "", "2024-06-15"),
    ("2023-12-01T00:00:00Z", "", "2024-07-04"),
    ("2023-12-01T00:00:00Z", "", "2024-08-30"),
    ("2023-12-01T00:00:00Z", "", "2024-09-21"),
    ("2023-12-01T00:00:00Z", "", "2024-10-31"),
    ("2023-12-01T00:00:00Z", "", "2024-11-05"),
    ("2023-12-01T00:00:00Z", "", "2024-12-25"),
    ("2024-01-01T00:00:00Z", "", "2024-01-01"),
    ("2024-01-01T00:00:00Z", "", "2024-02-29"),
    ("2024-01-01T00:00:00Z", "", "2024-03-10"),
    ("2024-01-01T00:00:00Z", "", "2024-06-15"),
    ("2024-01-01T00:00:00Z", "", "2024-07-04"),
    ("2024-01-01T00:00:00Z", "", "2024-08-30"),
    ("2024-01-01T00:00:00Z", "", "2024-09-21"),
    ("2024-01-01T00:00:00Z", "", "2024-10-31"),
    ("2024-01-01T00:00:00Z", "", "2024-11-05"),
    ("2024-01-01T00:00:00Z", "", "2024-12-25"),
    ("2024-01-01T00:00:00Z", "2024-01-31T23:59:59Z", "2024-01-01"),
    ("2024-02-01T00:00:00-08:00", "", "2024-02-29"),
    ("2024-02-01T00:00:00-08:00", "", "2024-03-10"),
    ("2024-02-01T00:00:00-08:00", "", "2024-06-15"),
    ("2024-02-01T00:00:00-08:00", "", "2024-07-04"),
    ("2024-02-01T00:00:00-08:00", "", "2024-08-30"),
    ("2024-02-01T00:00:00-08:00", "", "2024-09-21"),
    ("2024-02-01T00:00:00-08:00", "", "2024-10-31"),
    ("2024-02-01T00:00:00-08:00", "", "2024-11-05"),
    ("2024-02-01T00:00:00-08:00", "", "2024-12-25"),
    ("2024-02-01T00:00:00-08:00", "2024-02-29T23:59:59-08:00", "2024-02-29"),
    ("2024-02-01T00:00:00Z", "", "2024-02-29"),
    ("2024-02-01T00:00:00Z", "", "2024-03-10"),
    ("2024-02-01T00:00:00Z", "", "2024-06-15"),
    ("2024-02-01T00:00:00Z", "", "2024-07-04"),
    ("2024-02-01T00:00:00Z", "", "2024-08-30"),
    ("2024-02-01T00:00:00Z", "", "2024-09-21"),
    ("2024-02-01T00:00:00Z", "", "2024-10-31"),
    ("2024-02-01T00:00:00Z", "", "2024-11-05"),
    ("2024-02-01T00:00:00Z", "", "2024-12-25"),
    ("2024-03-09T00:00:00-08:00", "", "2024-03-10"),
    ("2024-03-09T00:00:00-08:00", "", "2024-06-15"),
    ("2024-03-09T00:00:00-08:00", "", "2024-07-04"),
    ("2024-03-09T00:00:00-08:00", "", "2024-08-30"),
    ("2024-03-09T00:00:00-08:00", "", "2024-09-21"),
    ("2024-03-09T00:00:00-08:00", "", "2024-10-31"),
    ("2024-03-09T00:00:00-08:00", "", "2024-11-05"),
    ("2024-03-09T00:00:00-08:00", "", "2024-12-25"),
    ("2024-03-09T00:00:00-08:00", "2024-03-11T23:59:59-07:00", "2024-03-10"),
    ("2024-06-01T00:00:00+09:00", "", "2024-06-15"),
    ("2024-06-01T00:00:00+09:00", "", "2024-07-04"),
    ("2024-06-01T00:00:00+09:00", "", "2024-08-30"),
    ("2024-06-01T00:00:00+09:00", "", "2024-09-21"),
    ("2024-06-01T00:00:00+09:00", "", "2024-10-31"),
    ("2024-06-01T00:00:00+09:00", "", "2024-11-05"),
    ("2024-06-01T00:00:00+09:00", "", "2024-12-25"),
    ("2024-07-01T00:00:00-07:00", "", "2024-07-04"),
    ("2024-07-01T00:00:00-07:00", "", "2024-08-30"),
    ("2024-07-01T00:00:00-07:00", "", "2024-09-21"),
    ("2024-07-01T00:00:00-07:00", "", "2024-10-31"),
    ("2024-07-01T00:00:00-07:00", "", "2024-11-05"),
    ("2024-07-01T00:00:00-07:00", "", "2024-12-25"),
    ("2024-07-01T00:00:00-07:00", "2024-07-04T23:59:59-07:00", "2024-07-04"),
    ("2024-08-15T00:00:00-04:00", "", "2024-08-30"),
    ("2024-08-15T00:00:00-04:00", "", "2024-09-21"),
    ("2024-08-15T00:00:00-04:00", "", "2024-10-31"),
    ("2024-08-15T00:00:00-04:00", "", "2024-11-05"),
    ("2024-08-15T00:00:00-04:00", "", "2024-12-25"),
    ("2024-08-15T00:00:00-04:00", "2024-08-30T23:59:59-04:00", "2024-08-30"),
    ("2024-09-20T00:00:00-03:00", "", "2024-09-21"),
    ("2024-09-20T00:00:00-03:00", "", "2024-10-31"),
    ("2024-09-20T00:00:00-03:00", "", "2024-11-05"),
    ("2024-09-20T00:00:00-03:00", "", "2024-12-25"),
    ("2024-09-20T00:00:00-03:00", "2024-09-22T23:59:59-03:00", "2024-09-21"),
    ("2024-10-01T00:00:00+00:00", "", "2024-10-31"),
    ("2024-10-01T00:00:00+00:00", "", "2024-11-05"),
    ("2024-10-01T00:00:00+00:00", "", "2024-12-25"),
    ("2024-11-01T00:00:00+01:00", "", "2024-11-05"),
    ("2024-11-01T00:00:00+01:00", "", "2024-12-25"),
    ("2024-12-24T00:00:00+01:00", "", "2024-12-25"),
    ("2024-12-24T00:00:00+01:00", "2024-12-26T23:59:59+01:00", "2024-12-25"),
})

DATE_TO_TIMESTAMP_MATCHES: Final[frozenset[MatchTriple]] = frozenset({
    ("", "2022-01-31", "2022-01-01T00:00:00Z"),
    ("", "2023-02-28", "2022-01-01T00:00:00Z"),
    ("", "2023-02-28", "2023-02-28T23:59:59Z"),
    ("", "2023-03-12", "2022-01-01T00:00:00Z"),
    ("", "2023-03-12", "2023-02-28T23:59:59Z"),
    ("", "2023-03-12", "2023-03-12T02:00:00-07:00"),
    ("", "2023-07-31", "2022-01-01T00:00:00Z"),
    ("", "2023-07-31", "2023-02-28T23:59:59Z"),
    ("", "2023-07-31", "2023-03-12T02:00:00-07:00"),
    ("", "2023-07-31", "2023-07-19T14:30:00+09:00"),
    ("", "2023-07-31", "2023-07-19T14:30:00-07:00"),
    ("", "2023-07-31", "2023-07-19T14:30:00Z"),
    ("", "2023-11-06", "2022-01-01T00:00:00Z"),
    ("", "2023-11-06", "2023-02-28T23:59:59Z"),
    ("", "2023-11-06", "2023-03-12T02:00:00-07:00"),
    ("", "2023-11-06", "2023-07-19T14:30:00+09:00"),
    ("", "2023-11-06", "2023-07-19T14:30:00-07:00"),
    ("", "2023-11-06", "2023-07-19T14:30:00Z"),
    ("", "2023-11-06", "2023-11-05T01:00:00-08:00"),
    ("", "2023-12-31", "2022-01-01T00:00:00Z"),
    ("", "2023-12-31", "2023-02-28T23:59:59Z"),
    ("", "2023-12-31", "2023-03-12T02:00:00-07:00"),
    ("", "2023-12-31", "2023-07-19T14:30:00+09:00"),
    ("", "2023-12-31", "2023-07-19T14:30:00-07:00"),
    ("", "2023-12-31", "2023-07-19T14:30:00Z"),
    ("", "2023-12-31", "2023-11-05T01:00:00-08:00"),
    ("", "2023-12-31", "2023-12-31T23:59:59Z"),
    ("", "2024-01-31", "2022-01-01T00:00:00Z"),
    ("", "2024-01-31", "2023-02-28T23:59:59Z"),
    ("", "2024-01-31", "2023-03-12T02:00:00-07:00"),
    ("", "2024-01-31", "2023-07-19T14:30:00+09:00"),
    ("", "2024-01-31", "2023-07-19T14:30:00-07:00"),
    ("", "2024-01-31", "2023-07-19T14:30:00Z"),
    ("", "2024-01-31", "2023-11-05T01:00:00-08:00"),
    ("", "2024-01-31", "2023-12-31T23:59:59Z"),
    ("", "2024-01-31", "2024-01-01T00:00:00Z"),
    ("", "2024-02-29", "2022-01-01T00:00:00Z"),
    ("", "2024-02-29", "2023-02-28T23:59:59Z"),
    ("", "2024-02-29", "2023-03-12T02:00:00-07:00"),
    ("", "2024-02-29", "2023-07-19T14:30:00+09:00"),
    ("", "2024-02-29", "2023-07-19T14:30:00-07:00"),
    ("", "2024-02-29", "2023-07-19T14:30:00Z"),
    ("", "2024-02-29", "2023-11-05T01:00:00-08:00"),
    ("", "2024-02-29", "2023-12-31T23:59:59Z"),
    ("", "2024-02-29", "2024-01-01T00:00:00Z"),
    ("", "2024-02-29", "2024-02-29T12:00:00+05:30"),
    ("", "2024-02-29", "2024-02-29T12:00:00Z"),
    ("", "2024-03-11", "2022-01-01T00:00:00Z"),
    ("", "2024-03-11", "2023-02-28T23:59:59Z"),
    ("", "2024-03-11", "2023-03-12T02:00:00-07:00"),
    ("", "2024-03-11", "2023-07-19T14:30:00+09:00"),
    ("", "2024-03-11", "2023-07-19T14:30:00-07:00"),
    ("", "2024-03-11", "2023-07-19T14:30:00Z"),
    ("", "2024-03-11", "2023-11-05T01:00:00-08:00"),
    ("", "2024-03-11", "2023-12-31T23:59:59Z"),
    ("", "2024-03-11", "2024-01-01T00:00:00Z"),
    ("", "2024-03-11", "2024-02-29T12:00:00+05:30"),
    ("", "2024-03-11", "2024-02-29T12:00:00Z"),
    ("", "2024-03-11", "2024-03-10T02:00:00-08:00"),
    ("", "2024-06-15", "2022-01-01T00:00:00Z"),
    ("", "2024-06-15", "2023-02-28T23:59:59Z"),
    ("", "2024-06-15", "2023-03-12T02:00:00-07:00"),
    ("", "2024-06-15", "2023-07-19T14:30:00+09:00"),
    ("", "2024-06-15", "2023-07-19T14:30:00-07:00"),
    ("", "2024-06-15", "2023-07-19T14:30:00Z"),
    ("", "2024-06-15", "2023-11-05T01:00:00-08:00"),
    ("", "2024-06-15", "2023-12-31T23:59:59Z"),
    ("", "2024-06-15", "2024-01-01T00:00:00Z"),
    ("", "2024-06-15", "2024-02-29T12:00:00+05:30"),
    ("", "2024-06-15", "2024-02-29T12:00:00Z"),
    ("", "2024-06-15", "2024-03-10T02:00:00-08:00"),
    ("", "2024-06-15", "2024-06-15T13:45:30+09:00"),
    ("", "2024-07-04", "2022-01-01T00:00:00Z"),
    ("", "2024-07-04", "2023-02-28T23:59:59Z"),
    ("", "2024-07-04", "2023-03-12T02:00:00-07:00"),
    ("", "2024-07-04", "2023-07-19T14:30:00+09:00"),
    ("", "2024-07-04", "2023-07-19T14:30:00-07:00"),
    ("", "2024-07-04", "2023-07-19T14:30:00Z"),
    ("", "2024-07-04", "2023-11-05T01:00:00-08:00"),
    ("", "2024-07-04", "2023-12-31T23:59:59Z"),
    ("", "2024-07-04", "2024-01-01T00:00:00Z"),
    ("", "2024-07-04", "2024-02-29T12:00:00+05:30"),
    ("", "2024-07-04", "2024-02-29T12:00:00Z"),
    ("", "2024-07-04", "2024-03-10T02:00:00-08:00"),
    ("", "2024-07-04", "2024-06-15T13:45:30+09:00"),
    ("", "2024-08-30", "2022-01-01T00:00:00Z"),
    ("", "2024-08-30", "2023-02-28T23:59:59Z"),
    ("", "2024-08-30", "2023-03-12T02:00:00-07:00"),
    ("", "2024-08-30", "2023-07-19T14:30:00+09:00"),
    ("", "2024-08-30", "2023-07-19T14:30:00-07:00"),
    ("", "2024-08-30", "2023-07-19T14:30:00Z"),
    ("", "2024-08-30", "2023-11-05T01:00:00-08:00"),
    ("", "2024-08-30", "2023-12-31T23:59:59Z"),
    ("", "2024-08-30", "2024-01-01T00:00:00Z"),
    ("", "2024-08-30", "2024-02-29T12:00:00+05:30"),
    ("", "2024-08-30", "2024-02-29T12:00:00Z"),
    ("", "2024-08-30", "2024-03-10T02:00:00-08:00"),
    ("", "2024-08-30", "2024-06-15T13:45:30+09:00"),
    ("", "2024-08-30", "2024-07-04T23:59:59-07:00"),
    ("", "2024-08-30", "2024-08-30T18:30:00-04:00"),
    ("", "2024-09-22", "2022-01-01T00:00:00Z"),
    ("", "2024-09-22", "2023-02-28T23:59:59Z"),
    ("", "2024-09-22", "2023-03-12T02:00:00-07:00"),
    ("", "2024-09-22", "2023-07-19T14:30:00+09:00"),
    ("", "2024-09-22", "2023-07-19T14:30:00-07:00"),
    ("", "2024-09-22", "2023-07-19T14:30:00Z"),
    ("", "2024-09-22", "2023-11-05T01:00:00-08:00"),
    ("", "2024-09-22", "2023-12-31T23:59:59Z"),
    ("", "2024-09-22", "2024-01-01T00:00:00Z"),
    ("", "2024-09-22", "2024-02-29T12:00:00+05:30"),
    ("", "2024-09-22", "2024-02-29T12:00:00Z"),
    ("", "2024-09-22", "2024-03-10T02:00:00-08:00"),
    ("", "2024-09-22", "2024-06-15T13:45:30+09:00"),
    ("", "2024-09-22", "2024-07-04T23:59:59-07:00"),
    ("", "2024-09-22", "2024-08-30T18:30:00-04:00"),
    ("", "2024-09-22", "2024-09-21T00:00:00-03:00"),
    ("", "2024-10-31", "2022-01-01T00:00:00Z"),
    ("", "2024-10-31", "2023-02-28T23:59:59Z"),
    ("", "2024-10-31", "2023-03-12T02:00:00-07:00"),
    ("", "2024-10-31", "2023-07-19T14:30:00+09:00"),
    ("", "2024-10-31", "2023-07-19T14:30:00-07:00"),
    ("", "2024-10-31", "2023-07-19T14:30:00Z"),
    ("", "2024-10-31", "2023-11-05T01:00:00-08:00"),
    ("", "2024-10-31", "2023-12-31T23:59:59Z"),
    ("", "2024-10-31", "2024-01-01T00:00:00Z"),
    ("", "2024-10-31", "2024-02-29T12:00:00+05:30"),
    ("", "2024-10-31", "2024-02-29T12:00:00Z"),
    ("", "2024-10-31", "2024-03-10T02:00:00-08:00"),
    ("", "2024-10-31", "2024-06-15T13:45:30+09:00"),
    ("", "2024-10-31", "2024-07-04T23:59:59-07:00"),
    ("", "2024-10-31", "2024-08-30T18:30:00-04:00"),
    ("", "2024-10-31", "2024-09-21T00:00:00-03:00"),
    ("", "2024-10-31", "2024-10-31T17:00:00+00:00"),
    ("", "2024-11-05", "2022-01-01T00:00:00Z"),
    ("", "2024-11-05", "2023-02-28T23:59:59Z"),
    ("", "2024-11-05", "2023-03-12T02:00:00-07:00"),
    ("", "2024-11-05", "2023-07-19T14:30:00+09:00"),
    ("", "2024-11-05", "2023-07-19T14:30:00-07:00"),
    ("", "2024-11-05", "2023-07-19T14:30:00Z"),
    ("", "2024-11-05", "2023-11-05T01:00:00-08:00"),
    ("", "2024-11-05", "2023-12-31T23:59:59Z"),
    ("", "2024-11-05", "2024-01-01T00:00:00Z"),
    ("", "2024-11-05", "2024-02-29T12:00:00+05:30"),
    ("", "2024-11-05", "2024-02-29T12:00:00Z"),
    ("", "2024-11-05", "2024-03-10T02:00:00-08:00"),
    ("", "2024-11-05", "2024-06-15T13:45:30+09:00"),
    ("", "2024-11-05", "2024-07-04T23:59:59-07:00"),
    ("", "2024-11-05", "2024-08-30T18:30:00-04:00"),
    ("", "2024-11-05", "2024-09-21T00:00:00-03:00"),
    ("", "2024-11-05", "2024-10-31T17:00:00+00:00"),
    ("", "2024-11-05", "2024-11-05T08:00:00+01:00"),
    ("", "2024-12-26", "2022-01-01T00:00:00Z"),
    ("", "2024-12-26", "2023-02-28T23:59:59Z"),
    ("", "2024-12-26", "2023-03-12T02:00:00-07:00"),
    ("", "2024-12-26", "2023-07-19T14:30:00+09:00"),
    ("", "2024-12-26", "2023-07-19T14:30:00-07:00"),
    ("", "2024-12-26", "2023-07-19T14:30:00Z"),
    ("", "2024-12-26", "2023-11-05T01:00:00-08:00"),
    ("", "2024-12-26", "2023-12-31T23:59:59Z"),
    ("", "2024-12-26", "2024-01-01T00:00:00Z"),
    ("", "2024-12-26", "2024-02-29T12:00:00+05:30"),
    ("", "2024-12-26", "2024-02-29T12:00:00Z"),
    ("", "2024-12-26", "2024-03-10T02:00:00-08:00"),
    ("", "2024-12-26", "2024-06-15T13:45:30+09:00"),
    ("", "2024-12-26", "2024-07-04T23:59:59-07:00"),
    ("", "2024-12-26", "2024-08-30T18:30:00-04:00"),
    ("", "2024-12-26", "2024-09-21T00:00:00-03:00"),
    ("", "2024-12-26", "2024-10-31T17:00:00+00:00"),
    ("", "2024-12-26", "2024-11-05T08:00:00+01:00"),
    ("", "2024-12-26", "2024-12-25T00:00:00-05:00"),
    ("2016-12-31", "", "2022-01-01T00:00:00Z"),
    ("2016-12-31", "", "2023-02-28T23:59:59Z"),
    ("2016-12-31", "", "2023-03-12T02:00:00-07:00"),
    ("2016-12-31", "", "2023-07-19T14:30:00+09:00"),
    ("2016-12-31", "", "2023-07-19T14:30:00-07:00"),
    ("2016-12-31", "", "2023-07-19T14:30:00Z"),
    ("2016-12-31", "", "2023-11-05T01:00:00-08:00"),
    ("2016-12-31", "", "2023-12-31T23:59:59Z"),
    ("2016-12-31", "", "2024-01-01T00:00:00Z"),
    ("2016-12-31", "", "2024-02-29T12:00:00+05:30"),
    ("2016-12-31", "", "2024-02-29T12:00:00Z"),
    ("2016-12-31", "", "2024-03-10T02:00:00-08:00"),
    ("2016-12-31", "", "2024-06-15T13:45:30+09:00"),
    ("2016-12-31", "", "2024-07-04T23:59:59-07:00"),
    ("2016-12-31", "", "2024-08-30T18:30:00-04:00"),
    ("2016-12-31", "", "2024-09-21T00:00:00-03:00"),
    ("2016-12-31", "", "2024-10-31T17:00:00+00:00"),
    ("2016-12-31", "", "2024-11-05T08:00:00+01:00"),
    ("2016-12-31", "", "2024-12-25T00:00:00-05:00"),
    ("2022-01-01", "", "2022-01-01T00:00:00Z"),
    ("2022-01-01", "", "2023-02-28T23:59:59Z"),
    ("2022-01-01", "", "2023-03-12T02:00:00-07:00"),
    ("2022-01-01", "", "2023-07-19T14:30:00+09:00"),
    ("2022-01-01", "", "2023-07-19T14:30:00-07:00"),
    ("2022-01-01", "", "2023-07-19T14:30:00Z"),
    ("2022-01-01", "", "2023-11-05T01:00:00-08:00"),
    ("2022-01-01", "", "2023-12-31T23:59:59Z"),
    ("2022-01-01", "", "2024-01-01T00:00:00Z"),
    ("2022-01-01", "", "2024-02-29T12:00:00+05:30"),
    ("2022-01-01", "", "2024-02-29T12:00:00Z"),
    ("2022-01-01", "", "2024-03-10T02:00:00-08:00"),
    ("2022-01-01", "", "2024-06-15T13:45:30+09:00"),
    ("2022-01-01", "", "2024-07-04T23:59:59-07:00"),
    ("2022-01-01", "", "2024-08-30T18:30:00-04:00"),
    ("2022-01-01", "", "2024-09-21T00:00:00-03:00"),
    ("2022-01-01", "", "2024-10-31T17:00:00+00:00"),
    ("2022-01-01", "", "2024-11-05T08:00:00+01:00"),
    ("2022-01-01", "", "2024-12-25T00:00:00-05:00"),
    ("2022-01-01", "2022-01-31", "2022-01-01T00:00:00Z"),
    ("2023-02-01", "", "2023-02-28T23:59:59Z"),
    ("2023-02-01", "", "2023-03-12T02:00:00-07:00"),
    ("2023-02-01", "", "2023-07-19T14:30:00+09:00"),
    ("2023-02-01", "", "2023-07-19T14:30:00-07:00"),
    ("2023-02-01", "", "2023-07-19T14:30:00Z"),
    ("2023-02-01", "", "2023-11-05T01:00:00-08:00"),
    ("2023-02-01", "", "2023-12-31T23:59:59Z"),
    ("2023-02-01", "", "2024-01-01T00:00:00Z"),
    ("2023-02-01", "", "2024-02-29T12:00:00+05:30"),
    ("2023-02-01", "", "2024-02-29T12:00:00Z"),
    ("2023-02-01", "", "2024-03-10T02:00:00-08:00"),
    ("2023-02-01", "", "2024-06-15T13:45:30+09:00"),
    ("2023-02-01", "", "2024-07-04T23:59:59-07:00"),
    ("2023-02-01", "", "2024-08-30T18:30:00-04:00"),
    ("2023-02-01", "", "2024-09-21T00:00:00-03:00"),
    ("2023-02-01", "", "2024-10-31T17:00:00+00:00"),
    ("2023-02-01", "", "2024-11-05T08:00:00+01:00"),
    ("2023-02-01", "", "2024-12-25T00:00:00-05:00"),
    ("2023-02-01", "2023-02-28", "2023-02-28T23:59:59Z"),
    ("2023-03-10", "", "2023-03-12T02:00:00-07:00"),
    ("2023-03-10", "", "2023-07-19T14:30:00+09:00"),
    ("2023-03-10", "", "2023-07-19T14:30:00-07:00"),
    ("2023-03-10", "", "2023-07-19T14:30:00Z"),
    ("2023-03-10", "", "2023-11-05T01:00:00-08:00"),
    ("2023-03-10", "", "2023-12-31T23:59:59Z"),
    ("2023-03-10", "", "2024-01-01T00:00:00Z"),
    ("2023-03-10", "", "2024-02-29T12:00:00+05:30"),
    ("2023-03-10", "", "2024-02-29T12:00:00Z"),
    ("2023-03-10", "", "2024-03-10T02:00:00-08:00"),
    ("2023-03-10", "", "2024-06-15T13:45:30+09:00"),
    ("2023-03-10", "", "2024-07-04T23:59:59-07:00"),
    ("2023-03-10", "", "2024-08-30T18:30:00-04:00"),
    ("2023-03-10", "", "2024-09-21T00:00:00-03:00"),
    ("2023-03-10", "", "2024-10-31T17:00:00+00:00"),
    ("2023-03-10", "", "2024-11-05T08:00:00+01:00"),
    ("2023-03-10", "", "2024-12-25T00:00:00-05:00"),
    ("2023-03-10", "2023-03-12", "2023-03-12T02:00:00-07:00"),
    ("2023-07-01", "", "2023-07-19T14:30:00+09:00"),
    ("2023-07-01", "", "2023-07-19T14:30:00-07:00"),
    ("2023-07-01", "", "2023-07-19T14:30:00Z"),
    ("2023-07-01", "", "2023-11-05T01:00:00-08:00"),
    ("2023-07-01", "", "2023-12-31T23:59:59Z"),
    ("2023-07-01", "", "2024-01-01T00:00:00Z"),
    ("2023-07-01", "", "2024-02-29T12:00:00+05:30"),
    ("2023-07-01", "", "2024-02-29T12:00:00Z"),
    ("2023-07-01", "", "2024-03-10T02:00:00-08:00"),
    ("2023-07-01", "", "2024-06-15T13:45:30+09:00"),
    ("2023-07-01", "", "2024-07-04T23:59:59-07:00"),
    ("2023-07-01", "", "2024-08-30T18:30:00-04:00"),
    ("2023-07-01", "", "2024-09-21T00:00:00-03:00"),
    ("2023-07-01", "", "2024-10-31T17:00:00+00:00"),
    ("2023-07-01", "", "2024-11-05T08:00:00+01:00"),
    ("2023-07-01", "", "2024-12-25T00:00:00-05:00"),
    ("2023-07-01", "2023-07-31", "2023-07-19T14:30:00+09:00"),
    ("2023-07-01", "2023-07-31", "2023-07-19T14:30:00-07:00"),
    ("2023-07-01", "2023-07-31", "2023-07-19T14:30:00Z"),
    ("2023-11-04", "", "2023-11-05T01:00:00-08:00"),
    ("2023-11-04", "", "2023-12-31T23:59:59Z"),
    ("2023-11-04", "", "2024-01-01T00:00:00Z"),
    ("2023-11-04", "", "2024-02-29T12:00:00+05:30"),
    ("2023-11-04", "", "2024-02-29T12:00:00Z"),
    ("2023-11-04", "", "2024-03-10T02:00:00-08:00"),
    ("2023-11-04", "", "2024-06-15T13:45:30+09:00"),
    ("2023-11-04", "", "2024-07-04T23:59:59-07:00"),
    ("2023-11-04", "", "2024-08-30T18:30:00-04:00"),
    ("2023-11-04", "", "2024-09-21T00:00:00-03:00"),
    ("2023-11-04", "", "2024-10-31T17:00:00+00:00"),
    ("2023-11-04", "", "2024-11-05T08:00:00+01:00"),
    ("2023-11-04", "", "2024-12-25T00:00:00-05:00"),
    ("2023-11-04", "2023-11-06", "2023-11-05T01:00:00-08:00"),
    ("2023-12-01", "", "2023-12-31T23:59:59Z"),
    ("2023-12-01", "", "2024-01-01T00:00:00Z"),
    ("2023-12-01", "", "2024-02-29T12:00:00+05:30"),
    ("2023-12-01", "", "2024-02-29T12:00:00Z"),
    ("2023-12-01", "", "2024-03-10T02:00:00-08:00"),
    ("2023-12-01", "", "2024-06-15T13:45:30+09:00"),
    ("2023-12-01", "", "2024-07-04T23:59:59-07:00"),
    ("2023-12-01", "", "2024-08-30T18:30:00-04:00"),
    ("2023-12-01", "", "2024-09-21T00:00:00-03:00"),
    ("2023-12-01", "", "2024-10-31T17:00:00+00:00"),
    ("2023-12-01", "", "2024-11-05T08:00:00+01:00"),
    ("2023-12-01", "", "2024-12-25T00:00:00-05:00"),
    ("2023-12-01", "2023-12-31", "2023-12-31T23:59:59Z"),
    ("2024-01-01", "", "2024-01-01T00:00:00Z"),
    ("2024-01-01", "", "2024-02-29T12:00:00+05:30"),
    ("2024-01-01", "", "2024-02-29T12:00:00Z"),
    ("2024-01-01", "", "2024-03-10T02:00:00-08:00"),
    ("2024-01-01", "", "2024-06-15T13:45:30+09:00"),
    ("2024-01-01", "", "2024-07-04T23:59:59-07:00"),
    ("2024-01-01", "", "2024-08-30T18:30:00-04:00"),
    ("2024-01-01", "", "2024-09-21T00:00:00-03:00"),
    ("2024-01-01", "", "2024-10-31T17:00:00+00:00"),
    ("2024-01-01", "", "2024-11-05T08:00:00+01:00"),
    ("2024-01-01", "", "2024-12-25T00:00:00-05:00"),
    ("2024-01-01", "2024-01-31", "2024-01-01T00:00:00Z"),
    ("2024-02-01", "", "2024-02-29T12:00:00+05:30"),
    ("2024-02-01", "", "2024-02-29T12:00:00Z"),
    ("2024-02-01", "", "2024-03-10T02:00:00-08:00"),
    ("2024-02-01", "", "2024-06-15T13:45:30+09:00"),
    ("2024-02-01", "", "2024-07-04T23:59:59-07:00"),
    ("2024-02-01", "", "2024-08-30T18:30:00-04:00"),
    ("2024-02-01", "", "2024-09-21T00:00:00-03:00"),
    ("2024-02-01", "", "2024-10-31T17:00:00+00:00"),
    ("2024-02-01", "", "2024-11-05T08:00:00+01:00"),
    ("2024-02-01", "", "2024-12-25T00:00:00-05:00"),
    ("2024-02-01", "2024-02-29", "2024-02-29T12:00:00+05:30"),
    ("2024-02-01", "2024-02-29", "2024-02-29T12:00:00Z"),
    ("2024-03-09", "", "2024-03-10T02:00:00-08:00"),
    ("2024-03-09", "", "2024-06-15T13:45:30+09:00"),
    ("2024-03-09", "", "2024-07-04T23:59:59-07:00"),
    ("2024-03-09", "", "2024-08-30T18:30:00-04:00"),
    ("2024-03-09", "", "2024-09-21T00:00:00-03:00"),
    ("2024-03-09", "", "2024-10-31T17:00:00+00:00"),
    ("2024-03-09", "", "2024-11-05T08:00:00+01:00"),
    ("2024-03-09", "", "2024-12-25T00:00:00-05:00"),
    ("2024-03-09", "2024-03-11", "2024-03-10T02:00:00-08:00"),
    ("2024-06-01", "", "2024-06-15T13:45:30+09:00"),
    ("2024-06-01", "", "2024-07-04T23:59:59-07:00"),
    ("2024-06-01", "", "2024-08-30T18:30:00-04:00"),
    ("2024-06-01", "", "2024-09-21T00:00:00-03:00"),
    ("2024-06-01", "", "2024-10-31T17:00:00+00:00"),
    ("2024-06-01", "", "2024-11-05T08:00:00+01:00"),
    ("2024-06-01", "", "2024-12-25T00:00:00-05:00"),
    ("2024-06-01", "2024-06-15", "2024-06-15T13:45:30+09:00"),
    ("2024-07-01", "", "2024-07-04T23:59:59-07:00"),
    ("2024-07-01", "", "2024-08-30T18:30:00-04:00"),
    ("2024-07-01", "", "2024-09-21T00:00:00-03:00"),
    ("2024-07-01", "", "2024-10-31T17:00:00+00:00"),
    ("2024-07-01", "", "2024-11-05T08:00:00+01:00"),
    ("2024-07-01", "", "2024-12-25T00:00:00-05:00"),
    ("2024-08-15", "", "2024-08-30T18:30:00-04:00"),
    ("2024-08-15", "", "2024-09-21T00:00:00-03:00"),
    ("2024-08-15", "", "2024-10-31T17:00:00+00:00"),
    ("2024-08-15", "", "2024-11-05T08:00:00+01:00"),
    ("2024-08-15", "", "2024-12-25T00:00:00-05:00"),
    ("2024-08-15", "2024-08-30", "2024-08-30T18:30:00-04:00"),
    ("2024-09-20", "", "2024-09-21T00:00:00-03:00"),
    ("2024-09-20", "", "2024-10-31T17:00:00+00:00"),
    ("2024-09-20", "", "2024-11-05T08:00:00+01:00"),
    ("2024-09-20", "", "2024-12-25T00:00:00-05:00"),
    ("2024-09-20", "2024-09-22", "2024-09-21T00:00:00-03:00"),
    ("2024-10-01", "", "2024-10-31T17:00:00+00:00"),
    ("2024-10-01", "", "2024-11-05T08:00:00+01:00"),
    ("2024-10-01", "", "2024-12-25T00:00:00-05:00"),
    ("2024-10-01", "2024-10-31", "2024-10-31T17:00:00+00:00"),
    ("2024-11-01", "", "2024-11-05T08:00:00+01:00"),
    ("2024-11-01", "", "2024-12-25T00:00:00-05:00"),
    ("2024-11-01", "2024-11-05", "2024-11-05T08:00:00+01:00"),
    ("2024-12-24", "", "2024-12-25T00:00:00-05:00"),
    ("2024-12-24", "2024-12-26", "2024-12-25T00:00:00-05:00"),
})

EXAMPLE_MATCHES: Final[frozenset[MatchTriple]] = (
    TIMESTAMP_TO_DATE_MATCHES | DATE_TO_TIMESTAMP_MATCHES
)
