"""Tests for the fuzz invariants, seed corpus and random driver."""

from __future__ import annotations

import random

import pytest
from hypothesis import given

from datestamps.constants import NANOS_PER_DAY
from datestamps.enums import FuzzOutcome
from datestamps.errors import BridgeClosedError, FuzzFinding
from datestamps.fixtures import DATE_VALUES, TIMESTAMP_RANGE_VALUES
from datestamps.fuzzing import (
    OFFSET_SECONDS_EAST_OF_UTC,
    FuzzCase,
    FuzzDriver,
    FuzzStats,
    check_fuzz_case,
    random_case,
    seed_cases,
    skip_reason,
)
from datestamps.instant import Instant, parse_date
from datestamps.oracle import (
    DateRange,
    InstantRange,
    TimestampToDate,
    timestamp_range_to_date_range,
)
from datestamps.runner import range_test_cases
from tests.strategies.timestamps import fuzz_cases

JULY_15 = parse_date("2024-07-15")
HOUR = NANOS_PER_DAY // 24
DAY_RANGE = ("2024-07-15T00:00:00Z", "2024-07-16T00:00:00Z")


def _case(
    start: int, end: int, value: str, *, ignore_start: bool = False, ignore_end: bool = False
) -> FuzzCase:
    return FuzzCase(
        start, 0, end, 0, parse_date(value), ignore_start=ignore_start, ignore_end=ignore_end
    )


def _utc_dates(r: InstantRange) -> DateRange:
    return DateRange(
        "" if r.start is None else r.start.date_string(),
        "" if r.end is None else r.end.date_string(),
    )


class TestFuzzCase:
    """FuzzCase views."""

    def test_instant_range(self) -> None:
        case = FuzzCase(JULY_15, 36000, JULY_15 + NANOS_PER_DAY, -3600, JULY_15)
        r = case.instant_range()
        assert r.start == Instant(JULY_15)
        assert r.start is not None
        assert r.start.offset_seconds == 36000
        assert r.end is not None
        assert r.end.offset_seconds == -3600

    def test_ignored_bounds(self) -> None:
        case = _case(JULY_15, JULY_15, "2024-07-15", ignore_start=True)
        assert case.instant_range() == InstantRange(None, Instant(JULY_15))

    def test_value_is_utc_date(self) -> None:
        case = _case(0, 0, "2024-07-15")
        assert case.value() == "2024-07-15"
        late = FuzzCase(0, 0, 0, 0, JULY_15 + NANOS_PER_DAY - 1)
        assert late.value() == "2024-07-15"


class TestSeedCases:
    """Seed corpus expansion over offsets."""

    def test_one_case_per_fixture_pair_without_offsets(self) -> None:
        pairs = list(range_test_cases(TIMESTAMP_RANGE_VALUES, DATE_VALUES))
        assert len(list(seed_cases(offsets=()))) == len(pairs)

    def test_offset_pairs(self) -> None:
        ranges = [("2024-07-15T00:00:00+10:00", "2024-07-16T00:00:00Z")]
        cases = list(seed_cases(ranges, ["2024-07-15"], (0, 3600)))
        # 3 range variants, (1 + 2) ** 2 offset pairs each
        assert len(cases) == 27
        first = cases[0]
        assert first.start_offset == 36000
        assert first.end_offset == 0
        assert {c.start_offset for c in cases if not c.ignore_start} == {36000, 0, 3600}

    def test_default_offsets(self) -> None:
        cases = list(seed_cases([DAY_RANGE], ["2024-07-15"]))
        per_variant = (1 + len(OFFSET_SECONDS_EAST_OF_UTC)) ** 2
        assert len(cases) == 3 * per_variant

    def test_unset_bounds_are_ignored(self) -> None:
        cases = list(seed_cases([DAY_RANGE], ["2024-07-15"], ()))
        assert [(c.ignore_start, c.ignore_end) for c in cases] == [
            (False, False),
            (True, False),
            (False, True),
        ]

    def test_seeds_pass_with_oracle(self) -> None:
        for case in seed_cases(offsets=(0, 36000, -43200)):
            check_fuzz_case(case, timestamp_range_to_date_range)


class TestSkipReason:
    """Degenerate cases are skipped."""

    def test_both_ignored(self) -> None:
        case = _case(0, 0, "2024-07-15", ignore_start=True, ignore_end=True)
        assert skip_reason(case) == "both start and end are ignored"

    def test_sub_day(self) -> None:
        reason = skip_reason(_case(JULY_15, JULY_15 + NANOS_PER_DAY - 1, "2024-07-15"))
        assert reason is not None
        assert "at least one full day" in reason

    def test_inverted(self) -> None:
        assert skip_reason(_case(JULY_15, JULY_15 - NANOS_PER_DAY, "2024-07-15")) is not None

    def test_exactly_one_day(self) -> None:
        assert skip_reason(_case(JULY_15, JULY_15 + NANOS_PER_DAY, "2024-07-15")) is None

    def test_half_open_never_too_short(self) -> None:
        assert skip_reason(_case(JULY_15, JULY_15, "2024-07-15", ignore_end=True)) is None

    @pytest.mark.parametrize("offset", [30, 86400, -86400, 90061])
    def test_inexpressible_offset(self, offset: int) -> None:
        case = FuzzCase(JULY_15, offset, JULY_15 + 2 * NANOS_PER_DAY, 0, JULY_15)
        reason = skip_reason(case)
        assert reason is not None
        assert "not expressible" in reason

    def test_inexpressible_offset_on_ignored_bound(self) -> None:
        case = FuzzCase(JULY_15, 30, JULY_15, 0, JULY_15, ignore_start=True)
        assert skip_reason(case) is None


class TestCheckFuzzCase:
    """Invariant checks against good and broken converters."""

    @given(case=fuzz_cases())
    def test_oracle_never_violates(self, case: FuzzCase) -> None:
        outcome = check_fuzz_case(case, timestamp_range_to_date_range)
        if skip_reason(case) is None:
            assert outcome is not FuzzOutcome.SKIPPED
        else:
            assert outcome is FuzzOutcome.SKIPPED

    def test_skipped_case_never_converts(self) -> None:
        def explode(r: InstantRange) -> DateRange:
            msg = "should not be called"
            raise AssertionError(msg)

        case = _case(JULY_15, JULY_15 + HOUR, "2024-07-15")
        assert check_fuzz_case(case, explode) is FuzzOutcome.SKIPPED

    def test_match_and_no_match(self) -> None:
        aligned = _case(JULY_15, JULY_15 + 2 * NANOS_PER_DAY, "2024-07-16")
        assert check_fuzz_case(aligned, timestamp_range_to_date_range) is FuzzOutcome.MATCH
        outside = _case(JULY_15, JULY_15 + 2 * NANOS_PER_DAY, "2024-07-17")
        assert check_fuzz_case(outside, timestamp_range_to_date_range) is FuzzOutcome.NO_MATCH

    def test_canonical_empty_accepted(self) -> None:
        # Noon to noon covers no whole UTC day.
        case = _case(JULY_15 + 12 * HOUR, JULY_15 + 36 * HOUR, "2024-07-15")
        assert timestamp_range_to_date_range(case.instant_range()) == DateRange(
            "2024-07-16", "2024-07-15"
        )
        assert check_fuzz_case(case, timestamp_range_to_date_range) is FuzzOutcome.NO_MATCH

    def test_further_inversion_is_a_finding(self) -> None:
        case = _case(JULY_15 + 12 * HOUR, JULY_15 + 36 * HOUR, "2024-07-15")
        with pytest.raises(FuzzFinding, match="start date is after end date"):
            check_fuzz_case(case, lambda r: DateRange("2024-07-16", "2024-07-14"))

    def test_swapped_bounds_are_a_finding(self) -> None:
        case = _case(JULY_15, JULY_15 + 5 * NANOS_PER_DAY, "2024-07-16")

        def swapped(r: InstantRange) -> DateRange:
            good = timestamp_range_to_date_range(r)
            return DateRange(good.end, good.start)

        with pytest.raises(FuzzFinding, match="start date is after end date"):
            check_fuzz_case(case, swapped)

    def test_dropped_bound_is_a_finding(self) -> None:
        case = _case(JULY_15, JULY_15 + 2 * NANOS_PER_DAY, "2024-07-15")
        with pytest.raises(FuzzFinding, match="start bound presence mismatch"):
            check_fuzz_case(case, lambda r: DateRange("", "2024-07-16"))

    def test_invented_bound_is_a_finding(self) -> None:
        case = _case(JULY_15, JULY_15 + 2 * NANOS_PER_DAY, "2024-07-15", ignore_end=True)
        with pytest.raises(FuzzFinding, match="end bound presence mismatch"):
            check_fuzz_case(case, lambda r: DateRange("2024-07-15", "2024-07-16"))

    def test_non_canonical_date_is_a_finding(self) -> None:
        case = _case(JULY_15, JULY_15 + 2 * NANOS_PER_DAY, "2024-07-15")
        with pytest.raises(FuzzFinding, match="not a canonical date"):
            check_fuzz_case(case, lambda r: DateRange("2024-7-15", "2024-07-16"))

    def test_truncation_is_a_containment_finding(self) -> None:
        case = _case(JULY_15 + 12 * HOUR, JULY_15 + 60 * HOUR, "2024-07-15")
        with pytest.raises(FuzzFinding, match="spans") as exc_info:
            check_fuzz_case(case, _utc_dates)
        context = exc_info.value.context
        assert context is not None
        assert context.expected is False
        assert context.actual is True

    def test_offsets_do_not_change_the_outcome(self) -> None:
        local = FuzzCase(JULY_15, 36000, JULY_15 + 2 * NANOS_PER_DAY, -43200, JULY_15)
        utc = FuzzCase(JULY_15, 0, JULY_15 + 2 * NANOS_PER_DAY, 0, JULY_15)
        assert check_fuzz_case(local, timestamp_range_to_date_range) is check_fuzz_case(
            utc, timestamp_range_to_date_range
        )

    def test_bridge_errors_propagate(self) -> None:
        def closed(r: InstantRange) -> DateRange:
            msg = "gone"
            raise BridgeClosedError(msg)

        case = _case(JULY_15, JULY_15 + 2 * NANOS_PER_DAY, "2024-07-15")
        with pytest.raises(BridgeClosedError):
            check_fuzz_case(case, closed)


class TestRandomCase:
    """Random generation."""

    def test_fresh_cases_use_expressible_offsets(self) -> None:
        rng = random.Random(3)
        for _ in range(200):
            case = random_case(rng)
            assert case.start_offset in OFFSET_SECONDS_EAST_OF_UTC
            assert case.end_offset in OFFSET_SECONDS_EAST_OF_UTC

    def test_same_seed_same_cases(self) -> None:
        seeds = tuple(seed_cases(offsets=()))
        rng_a, rng_b = random.Random(11), random.Random(11)
        a = [random_case(rng_a, seeds) for _ in range(100)]
        b = [random_case(rng_b, seeds) for _ in range(100)]
        assert a == b


class TestFuzzStats:
    """Outcome counters."""

    def test_record(self) -> None:
        stats = FuzzStats()
        outcomes = (FuzzOutcome.SKIPPED, FuzzOutcome.MATCH, FuzzOutcome.NO_MATCH, FuzzOutcome.MATCH)
        for outcome in outcomes:
            stats.record(outcome)
        assert (stats.iterations, stats.skipped, stats.matched, stats.unmatched) == (4, 1, 2, 1)
        assert stats.checked == 3
        assert stats.summary() == (
            "4 iterations: 3 checked (2 matched, 1 unmatched), 1 skipped, 0 findings"
        )


class TestFuzzDriver:
    """Random-search driver."""

    def test_oracle_has_no_findings(self) -> None:
        stats = FuzzDriver(timestamp_range_to_date_range, seed=1).run(2000)
        assert stats.findings == []
        assert stats.iterations == 2000
        assert stats.skipped + stats.matched + stats.unmatched == 2000
        assert stats.matched > 0
        assert stats.unmatched > 0

    def test_deterministic_by_seed(self) -> None:
        def recording(log: list[InstantRange]) -> TimestampToDate:
            def convert(r: InstantRange) -> DateRange:
                log.append(r)
                return timestamp_range_to_date_range(r)

            return convert

        first: list[InstantRange] = []
        second: list[InstantRange] = []
        FuzzDriver(recording(first), seed=42).run(300)
        FuzzDriver(recording(second), seed=42).run(300)
        assert first
        assert [r.format() for r in first] == [r.format() for r in second]

    def test_stops_on_first_finding(self) -> None:
        stats = FuzzDriver(_utc_dates, seed=5).run(5000)
        assert len(stats.findings) == 1
        assert stats.iterations < 5000

    def test_collects_all_findings(self) -> None:
        def broken(r: InstantRange) -> DateRange:
            return DateRange("x", "y")

        stats = FuzzDriver(broken, seed=5, stop_on_finding=False).run(300)
        assert stats.iterations == 300
        assert len(stats.findings) == stats.checked
        assert stats.findings

    def test_zero_iterations(self) -> None:
        assert FuzzDriver(timestamp_range_to_date_range, seed=1).run(0).iterations == 0

    def test_negative_iterations(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            FuzzDriver(timestamp_range_to_date_range).run(-1)

    def test_custom_seeds(self) -> None:
        seeds = [_case(JULY_15, JULY_15 + 3 * NANOS_PER_DAY, "2024-07-16")]
        stats = FuzzDriver(timestamp_range_to_date_range, seeds=seeds, seed=9).run(500)
        assert stats.findings == []
