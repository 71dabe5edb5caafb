"""Property checks on arbitrary timestamp ranges (fuzz mode).

Where fixture mode compares against a fixed table, fuzz mode generates
ranges and checks invariants that must hold for ANY input:

    (a) A date bound is set exactly when the input bound is set.
    (b) Every set date bound is a canonical "YYYY-MM-DD" date.
    (c) start_date <= end_date, except for the canonical empty encoding
        (end_date == start_date - 1 day) of a range that covers no whole
        UTC day.
    (d) A date value matches the converted range exactly when both its
        earliest and its latest representable instant match the ORIGINAL
        range. Otherwise adjacent ranges would not stay contiguous.

Degenerate cases (no bounds at all, or a range shorter than one day) are
skipped rather than checked.

Case Generation:
    seed_cases() expands the fixture tables over a set of representative
    UTC offsets. random_case() mutates seeds or draws fresh ranges, and
    FuzzDriver runs either against a converter and collects FuzzStats.
    Coverage-guided engines (Hypothesis, Atheris) drive check_fuzz_case
    directly.

Python 3.13+.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from datestamps.constants import NANOS_PER_DAY, NANOS_PER_SECOND, SECONDS_PER_DAY
from datestamps.enums import FuzzOutcome
from datestamps.errors import FuzzFinding, MismatchContext
from datestamps.fixtures import DATE_VALUES, TIMESTAMP_RANGE_VALUES
from datestamps.instant import Instant, format_date, parse_date
from datestamps.oracle import (
    InstantRange,
    TimestampToDate,
    assert_date,
    date_span,
    matches_date,
    matches_instant,
    timestamp_range_to_date_range,
)
from datestamps.runner import range_test_cases

__all__ = [
    "OFFSET_SECONDS_EAST_OF_UTC",
    "FuzzCase",
    "FuzzDriver",
    "FuzzStats",
    "check_fuzz_case",
    "random_case",
    "seed_cases",
    "skip_reason",
]

logger = logging.getLogger(__name__)

OFFSET_SECONDS_EAST_OF_UTC: tuple[int, ...] = (
    -43200,
    -36000,
    -32400,
    -25200,
    -18000,
    -14400,
    -7200,
    0,
    3600,
    7200,
    14400,
    18000,
    25200,
    32400,
    43200,
)
"""Representative fixed offsets, from UTC-12 to UTC+12."""

# Fresh ranges stay well inside the years RFC 3339 can express.
_EPOCH_MIN: int = parse_date("1900-01-01")
_EPOCH_MAX: int = parse_date("2200-01-01")

_JITTER_UNITS: tuple[int, ...] = (1, NANOS_PER_SECOND, 3600 * NANOS_PER_SECOND, NANOS_PER_DAY)

_PROGRESS_INTERVAL: int = 10_000


@dataclass(frozen=True, slots=True)
class FuzzCase:
    """One fuzz input: a possibly half-unbounded range and a date value.

    Epochs are nanoseconds since the Unix epoch; offsets are seconds east
    of UTC and only affect how the bounds are written on the wire. The
    epoch and offset of an ignored bound are meaningless.
    """

    start_epoch_ns: int
    start_offset: int
    end_epoch_ns: int
    end_offset: int
    value_epoch_ns: int
    ignore_start: bool = False
    ignore_end: bool = False

    def instant_range(self) -> InstantRange:
        return InstantRange(
            None if self.ignore_start else Instant(self.start_epoch_ns, self.start_offset),
            None if self.ignore_end else Instant(self.end_epoch_ns, self.end_offset),
        )

    def value(self) -> str:
        """The UTC date containing value_epoch_ns."""
        return format_date(self.value_epoch_ns)


def seed_cases(
    ranges: Iterable[tuple[str, str]] = TIMESTAMP_RANGE_VALUES,
    values: Iterable[str] = DATE_VALUES,
    offsets: Sequence[int] = OFFSET_SECONDS_EAST_OF_UTC,
) -> Iterator[FuzzCase]:
    """Seed corpus: every fixture case, re-expressed at every offset pair.

    For each bound, the first variant keeps the fixture's own offset and the
    rest use each of offsets in turn. Pass offsets=() for one case per
    fixture pair.
    """
    for (start, end), value in range_test_cases(ranges, values):
        start_t = Instant.parse(start) if start else Instant(0)
        end_t = Instant.parse(end) if end else Instant(0)
        value_ns = parse_date(value)
        for start_offset in (start_t.offset_seconds, *offsets):
            for end_offset in (end_t.offset_seconds, *offsets):
                yield FuzzCase(
                    start_t.epoch_ns,
                    start_offset,
                    end_t.epoch_ns,
                    end_offset,
                    value_ns,
                    ignore_start=not start,
                    ignore_end=not end,
                )


def _offset_supported(offset: int) -> bool:
    return abs(offset) < SECONDS_PER_DAY and offset % 60 == 0


def skip_reason(case: FuzzCase) -> str | None:
    """Why case is not worth checking, or None if it is.

    Skipped: both bounds ignored; an offset RFC 3339 cannot express (whole
    minutes within a day); or both bounds set less than one day apart,
    which includes end <= start.
    """
    if case.ignore_start and case.ignore_end:
        return "both start and end are ignored"
    if not case.ignore_start and not _offset_supported(case.start_offset):
        return f"start offset {case.start_offset}s is not expressible in RFC 3339"
    if not case.ignore_end and not _offset_supported(case.end_offset):
        return f"end offset {case.end_offset}s is not expressible in RFC 3339"
    if (
        not case.ignore_start
        and not case.ignore_end
        and case.end_epoch_ns - case.start_epoch_ns < NANOS_PER_DAY
    ):
        return (
            f"end ({Instant(case.end_epoch_ns).format()}) is not at least one full day "
            f"after start ({Instant(case.start_epoch_ns).format()})"
        )
    return None


def check_fuzz_case(case: FuzzCase, convert: TimestampToDate) -> FuzzOutcome:
    """Check the fuzz invariants for one case.

    Returns:
        SKIPPED for degenerate cases, otherwise whether the value matched

    Raises:
        FuzzFinding: If convert violates an invariant
        BridgeError: If convert is a bridge that failed
    """
    reason = skip_reason(case)
    if reason is not None:
        logger.debug("Skipping fuzz case: %s", reason)
        return FuzzOutcome.SKIPPED

    r = case.instant_range()
    value = case.value()
    converted = convert(r)
    context = MismatchContext(r.format(), value, (converted.start, converted.end))

    # (a) bound presence
    if case.ignore_start != (converted.start == ""):
        msg = (
            f"start bound presence mismatch: ignore_start={case.ignore_start} "
            f"({context.describe()})"
        )
        raise FuzzFinding(msg, context)
    if case.ignore_end != (converted.end == ""):
        msg = (
            f"end bound presence mismatch: ignore_end={case.ignore_end} ({context.describe()})"
        )
        raise FuzzFinding(msg, context)

    # (b) canonical dates
    for bound in (converted.start, converted.end):
        if not bound:
            continue
        try:
            assert_date(bound)
        except ValueError as e:
            msg = f"converted bound is not a canonical date: {e} ({context.describe()})"
            raise FuzzFinding(msg, context) from e

    # (c) ordering
    if converted.start and converted.end:
        start_ns, end_ns = parse_date(converted.start), parse_date(converted.end)
        if start_ns > end_ns and not (
            timestamp_range_to_date_range(r).is_empty and end_ns == start_ns - NANOS_PER_DAY
        ):
            msg = f"start date is after end date ({context.describe()})"
            raise FuzzFinding(msg, context)

    # (d) containment
    matches = matches_date(converted, value)
    lower, upper = date_span(value)
    expected = matches_instant(r, lower) and matches_instant(r, upper)
    if matches != expected:
        context = MismatchContext(r.format(), value, context.converted, expected, matches)
        msg = (
            f"{context.describe()}; date {value} spans {lower.format()} to "
            f"{upper.format()} (inclusive)"
        )
        raise FuzzFinding(msg, context)

    return FuzzOutcome.MATCH if matches else FuzzOutcome.NO_MATCH


# --- Random generation ---


def _jitter(rng: random.Random, epoch_ns: int) -> int:
    return epoch_ns + rng.randint(-48, 48) * rng.choice(_JITTER_UNITS)


def _mutate(rng: random.Random, seed: FuzzCase) -> FuzzCase:
    start = _jitter(rng, seed.start_epoch_ns) if rng.random() < 0.5 else seed.start_epoch_ns
    end = _jitter(rng, seed.end_epoch_ns) if rng.random() < 0.5 else seed.end_epoch_ns
    value = _jitter(rng, seed.value_epoch_ns) if rng.random() < 0.3 else seed.value_epoch_ns
    return FuzzCase(
        start,
        rng.choice(OFFSET_SECONDS_EAST_OF_UTC) if rng.random() < 0.5 else seed.start_offset,
        end,
        rng.choice(OFFSET_SECONDS_EAST_OF_UTC) if rng.random() < 0.5 else seed.end_offset,
        value,
        ignore_start=seed.ignore_start if rng.random() < 0.9 else not seed.ignore_start,
        ignore_end=seed.ignore_end if rng.random() < 0.9 else not seed.ignore_end,
    )


def _fresh(rng: random.Random) -> FuzzCase:
    start = rng.randrange(_EPOCH_MIN, _EPOCH_MAX)
    if rng.random() < 0.3:
        start -= start % NANOS_PER_DAY
    # Mostly short ranges: the interesting cases are within a day or two of a midnight.
    span = NANOS_PER_DAY * (3 if rng.random() < 0.7 else 90)
    end = start + rng.randrange(span)
    if rng.random() < 0.3:
        end -= end % NANOS_PER_DAY
    value = rng.randrange(start - 2 * NANOS_PER_DAY, end + 2 * NANOS_PER_DAY)
    return FuzzCase(
        start,
        rng.choice(OFFSET_SECONDS_EAST_OF_UTC),
        end,
        rng.choice(OFFSET_SECONDS_EAST_OF_UTC),
        value,
        ignore_start=rng.random() < 0.15,
        ignore_end=rng.random() < 0.15,
    )


def random_case(rng: random.Random, seeds: Sequence[FuzzCase] = ()) -> FuzzCase:
    """Draw a case: a mutated seed (when seeds are given) or a fresh range."""
    if seeds and rng.random() < 0.5:
        return _mutate(rng, rng.choice(seeds))
    return _fresh(rng)


@dataclass(slots=True)
class FuzzStats:
    """Counters for one FuzzDriver run."""

    iterations: int = 0
    skipped: int = 0
    matched: int = 0
    unmatched: int = 0
    findings: list[FuzzFinding] = field(default_factory=list)

    @property
    def checked(self) -> int:
        return self.iterations - self.skipped

    def record(self, outcome: FuzzOutcome) -> None:
        self.iterations += 1
        match outcome:
            case FuzzOutcome.SKIPPED:
                self.skipped += 1
            case FuzzOutcome.MATCH:
                self.matched += 1
            case FuzzOutcome.NO_MATCH:
                self.unmatched += 1

    def summary(self) -> str:
        return (
            f"{self.iterations} iterations: {self.checked} checked "
            f"({self.matched} matched, {self.unmatched} unmatched), "
            f"{self.skipped} skipped, {len(self.findings)} findings"
        )


class FuzzDriver:
    """Random-search fuzzer for a TimestampToDate implementation.

    Args:
        convert: Implementation under test
        seeds: Mutation pool (defaults to one seed per fixture case)
        seed: Random seed, for reproducible runs
        stop_on_finding: Stop at the first finding instead of collecting all

    Example:
        >>> from datestamps.oracle import timestamp_range_to_date_range
        >>> stats = FuzzDriver(timestamp_range_to_date_range, seed=1).run(100)
        >>> stats.findings
        []
    """

    __slots__ = ("_convert", "_rng", "_seeds", "_stop_on_finding")

    def __init__(
        self,
        convert: TimestampToDate,
        *,
        seeds: Sequence[FuzzCase] | None = None,
        seed: int | None = None,
        stop_on_finding: bool = True,
    ) -> None:
        self._convert = convert
        self._seeds = tuple(seed_cases(offsets=())) if seeds is None else tuple(seeds)
        self._rng = random.Random(seed)  # noqa: S311 - test input generation, not crypto
        self._stop_on_finding = stop_on_finding

    def run(self, iterations: int) -> FuzzStats:
        """Check iterations random cases.

        Raises:
            ValueError: If iterations is negative
            BridgeError: If the converter is a bridge that failed
        """
        if iterations < 0:
            msg = f"iterations must be non-negative, got {iterations}"
            raise ValueError(msg)

        stats = FuzzStats()
        for _ in range(iterations):
            case = random_case(self._rng, self._seeds)
            try:
                stats.record(check_fuzz_case(case, self._convert))
            except FuzzFinding as finding:
                stats.iterations += 1
                stats.findings.append(finding)
                logger.error("Fuzz finding for %r: %s", case, finding)
                if self._stop_on_finding:
                    break
            if stats.iterations % _PROGRESS_INTERVAL == 0:
                logger.info("Fuzzing: %s", stats.summary())

        logger.info("Fuzzing finished: %s", stats.summary())
        return stats
