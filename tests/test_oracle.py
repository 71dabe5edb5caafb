"""Tests for the reference conversion semantics.

Covers matching (half-open instants, closed dates), widening, the narrowing
conversion and its inverse, including ranges that cover no whole UTC day.
"""

import pytest
from hypothesis import assume, event, given

from datestamps.constants import NANOS_PER_DAY
from datestamps.instant import Instant, format_date, parse_date
from datestamps.oracle import (
    DateRange,
    InstantRange,
    assert_date,
    date_range_to_timestamp_range,
    date_span,
    matches_date,
    matches_instant,
    relative_days_range,
    timestamp_range_to_date_range,
    widen_end,
    widen_range,
    widen_start,
)
from tests.strategies import (
    aligned_instant_ranges,
    date_ranges,
    date_strings,
    instant_ranges,
    instants,
    midnight_instants,
)


def _range(start: str, end: str) -> InstantRange:
    return InstantRange(
        Instant.parse(start) if start else None,
        Instant.parse(end) if end else None,
    )


class TestMatchesInstant:
    """[start, end): inclusive start, exclusive end."""

    def test_start_inclusive(self) -> None:
        r = _range("2024-07-15T00:00:00Z", "2024-07-16T00:00:00Z")
        assert matches_instant(r, Instant.parse("2024-07-15T00:00:00Z"))

    def test_end_exclusive(self) -> None:
        r = _range("2024-07-15T00:00:00Z", "2024-07-16T00:00:00Z")
        assert not matches_instant(r, Instant.parse("2024-07-16T00:00:00Z"))
        assert matches_instant(r, Instant.parse("2024-07-15T23:59:59.999999999Z"))

    def test_before_start(self) -> None:
        r = _range("2024-07-15T00:00:00Z", "")
        assert not matches_instant(r, Instant.parse("2024-07-14T23:59:59.999999999Z"))

    def test_offsets_do_not_matter(self) -> None:
        r = _range("2024-07-15T00:00:00+10:00", "2024-07-15T01:00:00+10:00")
        assert matches_instant(r, Instant.parse("2024-07-14T14:30:00Z"))

    def test_unbounded(self) -> None:
        assert matches_instant(InstantRange(), Instant(0))

    def test_empty_when_start_equals_end(self) -> None:
        t = Instant.parse("2024-07-15T00:00:00Z")
        assert not matches_instant(InstantRange(t, t), t)


class TestMatchesDate:
    """[start, end]: both bounds inclusive."""

    def test_both_bounds_inclusive(self) -> None:
        r = DateRange("2024-07-15", "2024-07-16")
        assert matches_date(r, "2024-07-15")
        assert matches_date(r, "2024-07-16")
        assert not matches_date(r, "2024-07-14")
        assert not matches_date(r, "2024-07-17")

    def test_single_day(self) -> None:
        assert matches_date(DateRange("2024-07-15", "2024-07-15"), "2024-07-15")

    def test_unbounded(self) -> None:
        assert matches_date(DateRange(), "2024-07-15")
        assert matches_date(DateRange("", "2024-07-15"), "1900-01-01")
        assert matches_date(DateRange("2024-07-15", ""), "2199-12-31")

    def test_inverted_matches_nothing(self) -> None:
        r = DateRange("2024-07-15", "2024-07-14")
        assert not matches_date(r, "2024-07-14")
        assert not matches_date(r, "2024-07-15")

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError, match="invalid date"):
            matches_date(DateRange(), "2024-13-01")

    @given(value=midnight_instants, r=aligned_instant_ranges())
    def test_agrees_with_instant_matching_for_aligned_ranges(
        self, value: Instant, r: InstantRange
    ) -> None:
        """On day-aligned UTC ranges, date and instant matching agree."""
        dates = timestamp_range_to_date_range(r)
        assert matches_date(dates, value.date_string()) == matches_instant(r, value)


class TestWidening:
    """widen_start / widen_end / widen_range."""

    def test_widen_start_truncates_to_utc_midnight(self) -> None:
        t = widen_start(Instant.parse("2024-07-15T09:00:00+10:00"))
        assert t.format() == "2024-07-14T10:00:00+10:00"

    def test_widen_end_midnight_unchanged(self) -> None:
        t = Instant.parse("2024-07-15T00:00:00Z")
        assert widen_end(t) == t

    def test_widen_end_rounds_up(self) -> None:
        t = widen_end(Instant.parse("2024-07-15T00:00:00.000000001Z"))
        assert t.format() == "2024-07-16T00:00:00Z"

    def test_unset_bounds_stay_unset(self) -> None:
        assert widen_range(InstantRange()) == InstantRange()

    @pytest.mark.parametrize(
        ("now", "days", "widened", "dates"),
        [
            # name: utc-1
            (
                "2024-07-15T00:00:00Z",
                1,
                ("2024-07-14T00:00:00Z", "2024-07-15T00:00:00Z"),
                ("2024-07-14", "2024-07-14"),
            ),
            # utc-2
            (
                "2024-07-16T00:00:00Z",
                1,
                ("2024-07-15T00:00:00Z", "2024-07-16T00:00:00Z"),
                ("2024-07-15", "2024-07-15"),
            ),
            # aest-1
            (
                "2024-07-15T00:00:00+10:00",
                1,
                ("2024-07-13T10:00:00+10:00", "2024-07-15T10:00:00+10:00"),
                ("2024-07-13", "2024-07-14"),
            ),
            # aest-2
            (
                "2024-07-16T00:00:00+10:00",
                1,
                ("2024-07-14T10:00:00+10:00", "2024-07-16T10:00:00+10:00"),
                ("2024-07-14", "2024-07-15"),
            ),
            # morning-1
            (
                "2024-07-15T09:00:00+10:00",
                1,
                ("2024-07-13T10:00:00+10:00", "2024-07-15T10:00:00+10:00"),
                ("2024-07-13", "2024-07-14"),
            ),
            # morning-2
            (
                "2024-07-16T09:00:00+10:00",
                1,
                ("2024-07-14T10:00:00+10:00", "2024-07-16T10:00:00+10:00"),
                ("2024-07-14", "2024-07-15"),
            ),
            # afternoon-1
            (
                "2024-07-15T15:00:00+10:00",
                1,
                ("2024-07-14T10:00:00+10:00", "2024-07-16T10:00:00+10:00"),
                ("2024-07-14", "2024-07-15"),
            ),
            # afternoon-2
            (
                "2024-07-16T15:00:00+10:00",
                1,
                ("2024-07-15T10:00:00+10:00", "2024-07-17T10:00:00+10:00"),
                ("2024-07-15", "2024-07-16"),
            ),
            # three days at a negative, non-hour offset
            (
                "2024-07-16T15:00:00-11:35",
                3,
                ("2024-07-13T12:25:00-11:35", "2024-07-17T12:25:00-11:35"),
                ("2024-07-14", "2024-07-17"),
            ),
        ],
    )
    def test_relative_days_widened(
        self, now: str, days: int, widened: tuple[str, str], dates: tuple[str, str]
    ) -> None:
        """The last N days, widened, covers every overlapping UTC day."""
        r = widen_range(relative_days_range(Instant.parse(now), days))
        assert r.format() == widened
        assert timestamp_range_to_date_range(r) == DateRange(*dates)

    @given(r=instant_ranges())
    def test_idempotent(self, r: InstantRange) -> None:
        assert widen_range(widen_range(r)) == widen_range(r)

    @given(r=aligned_instant_ranges())
    def test_aligned_ranges_unchanged(self, r: InstantRange) -> None:
        assert widen_range(r) == r

    @given(r=instant_ranges(), value=instants())
    def test_widened_range_contains_original(self, r: InstantRange, value: Instant) -> None:
        if matches_instant(r, value):
            event("outcome=contained")
            assert matches_instant(widen_range(r), value)


class TestTimestampRangeToDateRange:
    """Narrowing: only whole UTC days survive."""

    @pytest.mark.parametrize(
        ("start", "end", "dates", "back"),
        [
            # utc-1
            (
                "2024-07-15T00:00:00Z",
                "2024-07-16T00:00:00Z",
                ("2024-07-15", "2024-07-15"),
                ("2024-07-15T00:00:00Z", "2024-07-16T00:00:00Z"),
            ),
            # utc-2
            (
                "2024-07-16T00:00:00Z",
                "2024-07-17T00:00:00Z",
                ("2024-07-16", "2024-07-16"),
                ("2024-07-16T00:00:00Z", "2024-07-17T00:00:00Z"),
            ),
            # aest-1: one local day, no whole UTC day
            (
                "2024-07-15T00:00:00+10:00",
                "2024-07-16T00:00:00+10:00",
                ("2024-07-15", "2024-07-14"),
                ("2024-07-15T00:00:00Z", "2024-07-15T00:00:00Z"),
            ),
            # aest-2
            (
                "2024-07-16T00:00:00+10:00",
                "2024-07-17T00:00:00+10:00",
                ("2024-07-16", "2024-07-15"),
                ("2024-07-16T00:00:00Z", "2024-07-16T00:00:00Z"),
            ),
            # morning-1
            (
                "2024-07-15T09:00:00+10:00",
                "2024-07-16T09:00:00+10:00",
                ("2024-07-15", "2024-07-14"),
                ("2024-07-15T00:00:00Z", "2024-07-15T00:00:00Z"),
            ),
            # morning-2
            (
                "2024-07-16T09:00:00+10:00",
                "2024-07-17T09:00:00+10:00",
                ("2024-07-16", "2024-07-15"),
                ("2024-07-16T00:00:00Z", "2024-07-16T00:00:00Z"),
            ),
            # afternoon-1
            (
                "2024-07-15T15:00:00+10:00",
                "2024-07-16T15:00:00+10:00",
                ("2024-07-16", "2024-07-15"),
                ("2024-07-16T00:00:00Z", "2024-07-16T00:00:00Z"),
            ),
            # afternoon-2
            (
                "2024-07-16T15:00:00+10:00",
                "2024-07-17T15:00:00+10:00",
                ("2024-07-17", "2024-07-16"),
                ("2024-07-17T00:00:00Z", "2024-07-17T00:00:00Z"),
            ),
            # three days at a negative, non-hour offset
            (
                "2024-07-16T15:00:00-11:35",
                "2024-07-19T15:00:00-11:35",
                ("2024-07-18", "2024-07-19"),
                ("2024-07-18T00:00:00Z", "2024-07-20T00:00:00Z"),
            ),
        ],
    )
    def test_examples(
        self, start: str, end: str, dates: tuple[str, str], back: tuple[str, str]
    ) -> None:
        converted = timestamp_range_to_date_range(_range(start, end))
        assert converted == DateRange(*dates)
        assert date_range_to_timestamp_range(converted).format() == back

    def test_unset_bounds(self) -> None:
        assert timestamp_range_to_date_range(InstantRange()) == DateRange("", "")

    def test_half_open_start_only(self) -> None:
        r = _range("2024-07-15T00:00:00.000000001Z", "")
        assert timestamp_range_to_date_range(r) == DateRange("2024-07-16", "")

    def test_half_open_end_only(self) -> None:
        r = _range("", "2024-07-15T00:00:00.000000001Z")
        assert timestamp_range_to_date_range(r) == DateRange("", "2024-07-14")

    def test_sub_day_range_is_inverted_and_empty(self) -> None:
        """A range covering no whole UTC day gives end = start - 1 day, returned as-is."""
        dates = timestamp_range_to_date_range(
            _range("2024-07-15T00:00:00+10:00", "2024-07-16T00:00:00+10:00")
        )
        assert dates == DateRange("2024-07-15", "2024-07-14")
        assert dates.is_empty
        assert not matches_date(dates, "2024-07-14")
        assert not matches_date(dates, "2024-07-15")

    def test_one_to_two_days_straddling_midnight_is_empty(self) -> None:
        """Longer than a day, still no whole UTC day inside."""
        dates = timestamp_range_to_date_range(
            _range("2024-07-15T00:00:01Z", "2024-07-16T23:59:59Z")
        )
        assert dates == DateRange("2024-07-16", "2024-07-15")
        assert dates.is_empty

    @given(r=aligned_instant_ranges())
    def test_lossless_for_aligned_ranges(self, r: InstantRange) -> None:
        assert date_range_to_timestamp_range(timestamp_range_to_date_range(r)) == r

    @given(r=instant_ranges(allow_unset=False))
    def test_inverted_only_by_one_day_when_at_least_a_day_long(self, r: InstantRange) -> None:
        """A range of one day or more inverts by at most the canonical one day."""
        assert r.start is not None
        assert r.end is not None
        assume(r.end.epoch_ns - r.start.epoch_ns >= NANOS_PER_DAY)
        dates = timestamp_range_to_date_range(r)
        gap = parse_date(dates.start) - parse_date(dates.end)
        event(f"empty={dates.is_empty}")
        assert gap <= NANOS_PER_DAY

    @given(r=instant_ranges(), value=date_strings)
    def test_dates_wholly_inside(self, r: InstantRange, value: str) -> None:
        """A date matches the narrowed range iff its whole day is in the original."""
        lower, upper = date_span(value)
        expected = matches_instant(r, lower) and matches_instant(r, upper)
        event(f"matches={expected}")
        assert matches_date(timestamp_range_to_date_range(r), value) == expected


class TestDateRangeToTimestampRange:
    """The inverse is lossless."""

    def test_example(self) -> None:
        r = date_range_to_timestamp_range(DateRange("2024-07-15", "2024-07-16"))
        assert r.format() == ("2024-07-15T00:00:00Z", "2024-07-17T00:00:00Z")

    def test_unset_bounds(self) -> None:
        assert date_range_to_timestamp_range(DateRange()) == InstantRange(None, None)

    def test_invalid_date(self) -> None:
        with pytest.raises(ValueError, match="invalid date"):
            date_range_to_timestamp_range(DateRange("2024-02-30", ""))

    @given(d=date_ranges())
    def test_roundtrip(self, d: DateRange) -> None:
        assert timestamp_range_to_date_range(date_range_to_timestamp_range(d)) == d


class TestHelpers:
    """assert_date, date_span, DateRange.is_empty."""

    def test_assert_date_accepts_canonical(self) -> None:
        assert_date("2024-02-29")

    @pytest.mark.parametrize("text", ["2023-02-29", "2024-7-1", "", "2024-07-15T00:00:00Z"])
    def test_assert_date_rejects(self, text: str) -> None:
        with pytest.raises(ValueError, match="invalid date"):
            assert_date(text)

    def test_date_span(self) -> None:
        lower, upper = date_span("2024-07-15")
        assert lower.format() == "2024-07-15T00:00:00Z"
        assert upper.format() == "2024-07-15T23:59:59.999999999Z"

    def test_is_empty_requires_both_bounds(self) -> None:
        assert not DateRange("2024-07-15", "").is_empty
        assert not DateRange("", "2024-07-14").is_empty
        assert not DateRange("2024-07-15", "2024-07-15").is_empty

    @given(value=date_strings)
    def test_date_strings_roundtrip(self, value: str) -> None:
        assert format_date(parse_date(value)) == value
