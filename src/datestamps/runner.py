"""Fixture-driven conformance runs against a conversion implementation.

Each run enumerates every (range, value) pair from the fixture tables, with
and without each bound, converts the range with the implementation under
test, and checks whether the value matches the converted range exactly when
the expected-match table says it should.

Failure Handling:
    - ConformanceFailure (domain): recorded on the case; the run continues.
    - BridgeError (infrastructure): propagates and aborts the run.
    - ValueError from a fixture: propagates; the fixture table is broken.

The observed matches are collected as well, so a new fixture table can be
generated from a known-good implementation (format_actual_matches).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from datestamps.errors import ConformanceFailure, MismatchContext
from datestamps.fixtures import (
    DATE_RANGE_VALUES,
    DATE_TO_TIMESTAMP_MATCHES,
    DATE_VALUES,
    TIMESTAMP_RANGE_VALUES,
    TIMESTAMP_TO_DATE_MATCHES,
    TIMESTAMP_VALUES,
)
from datestamps.instant import Instant
from datestamps.oracle import (
    DateRange,
    DateToTimestamp,
    InstantRange,
    TimestampToDate,
    assert_date,
    matches_date,
    matches_instant,
)

__all__ = [
    "CaseResult",
    "ConformanceReport",
    "bridge_converter",
    "check_date_to_timestamp_case",
    "check_timestamp_to_date_case",
    "range_test_cases",
    "run_date_to_timestamp",
    "run_timestamp_to_date",
]

logger = logging.getLogger(__name__)

type Bounds = tuple[str, str]
type MatchTable = frozenset[tuple[str, str, str]] | set[tuple[str, str, str]]


def range_test_cases(
    ranges: Iterable[Bounds], values: Iterable[str]
) -> Iterator[tuple[Bounds, str]]:
    """Yield each distinct (range, value) case.

    Every range is tried as given, with its start cleared, and with its end
    cleared. Duplicates (e.g. two ranges sharing an end) are yielded once.
    """
    values = tuple(values)
    seen: set[tuple[str, str, str]] = set()
    for start, end in ranges:
        for bounds in ((start, end), ("", end), (start, "")):
            for value in values:
                key = (*bounds, value)
                if key in seen:
                    continue
                seen.add(key)
                yield bounds, value


@dataclass(frozen=True, slots=True)
class CaseResult:
    """Outcome of one conformance case.

    Attributes:
        bounds: The input range, as fixture text
        value: The value matched against the converted range
        converted: The converted range, as text
        expected: Whether the match table lists this case
        actual: Observed match (None if the case failed before matching)
        failure: The recorded failure, if any
    """

    bounds: Bounds
    value: str
    converted: Bounds
    expected: bool
    actual: bool | None
    failure: ConformanceFailure | None = None

    @property
    def passed(self) -> bool:
        """True if the case produced no failure."""
        return self.failure is None

    def raise_for_failure(self) -> None:
        """Re-raise the recorded failure, if any."""
        if self.failure is not None:
            raise self.failure


@dataclass(frozen=True, slots=True)
class ConformanceReport:
    """All case results of one run."""

    name: str
    results: tuple[CaseResult, ...]

    @property
    def failures(self) -> tuple[CaseResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    @property
    def success(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def actual_matches(self) -> frozenset[tuple[str, str, str]]:
        """Every case that was observed to match."""
        return frozenset(
            (*result.bounds, result.value) for result in self.results if result.actual
        )

    def format_actual_matches(self) -> str:
        """The observed matches as sorted Python tuple literals, one per line.

        Suitable for pasting into a fixture match table.
        """
        return "\n".join(
            f'("{start}", "{end}", "{value}"),'
            for start, end, value in sorted(self.actual_matches)
        )

    def summary(self) -> str:
        failed = len(self.failures)
        return f"{self.name}: {len(self.results)} cases, {failed} failed"


# --- Timestamp ranges, date values ---


def _parse_instant_bound(text: str) -> Instant | None:
    return Instant.parse(text) if text else None


def _checked_date(text: str, what: str, context: MismatchContext) -> None:
    try:
        assert_date(text)
    except ValueError as e:
        msg = f"{what} is not a valid date: {e} ({context.describe()})"
        raise ConformanceFailure(msg, context) from e


def _timestamp_to_date(
    bounds: Bounds, value: str, expected: bool, convert: TimestampToDate
) -> CaseResult:
    start, end = bounds
    r = InstantRange(_parse_instant_bound(start), _parse_instant_bound(end))
    assert_date(value)

    converted = convert(r)
    context = MismatchContext(bounds, value, (converted.start, converted.end), expected)
    if (not start) != (not converted.start):
        msg = f"start bound set mismatch for input {start!r} ({context.describe()})"
        raise ConformanceFailure(msg, context)
    if (not end) != (not converted.end):
        msg = f"end bound set mismatch for input {end!r} ({context.describe()})"
        raise ConformanceFailure(msg, context)
    if start:
        _checked_date(converted.start, "converted start", context)
    if end:
        _checked_date(converted.end, "converted end", context)

    try:
        actual = matches_date(converted, value)
    except ValueError as e:
        msg = f"converted range is not comparable: {e} ({context.describe()})"
        raise ConformanceFailure(msg, context) from e

    result = CaseResult(bounds, value, (converted.start, converted.end), expected, actual)
    if actual != expected:
        context = MismatchContext(bounds, value, result.converted, expected, actual)
        raise ConformanceFailure(context.describe(), context)
    return result


def check_timestamp_to_date_case(
    bounds: Bounds,
    value: str,
    matches: MatchTable,
    convert: TimestampToDate,
) -> CaseResult:
    """Check one timestamp-range / date-value case.

    Args:
        bounds: RFC 3339 start and end ("" for unset)
        value: Date string
        matches: Expected-match table
        convert: Implementation under test

    Returns:
        The case result; a domain mismatch is recorded, not raised

    Raises:
        BridgeError: If convert is a bridge that failed
        ValueError: If a fixture value is malformed
    """
    expected = (*bounds, value) in matches
    try:
        return _timestamp_to_date(bounds, value, expected, convert)
    except ConformanceFailure as failure:
        context = failure.context
        converted = context.converted if context is not None else ("", "")
        actual = context.actual if context is not None else None
        return CaseResult(bounds, value, converted, expected, actual, failure)


# --- Date ranges, timestamp values ---


def _format_bound(t: Instant | None) -> str:
    return "" if t is None else t.format()


def _date_to_timestamp(
    bounds: Bounds, value: str, expected: bool, convert: DateToTimestamp
) -> CaseResult:
    start, end = bounds
    instant = Instant.parse(value)
    if start:
        assert_date(start)
    if end:
        assert_date(end)

    converted = convert(DateRange(start, end))
    text = (_format_bound(converted.start), _format_bound(converted.end))
    context = MismatchContext(bounds, value, text, expected)
    if (not start) != (converted.start is None):
        msg = f"start bound set mismatch for input {start!r} ({context.describe()})"
        raise ConformanceFailure(msg, context)
    if (not end) != (converted.end is None):
        msg = f"end bound set mismatch for input {end!r} ({context.describe()})"
        raise ConformanceFailure(msg, context)

    actual = matches_instant(converted, instant)
    if actual != expected:
        context = MismatchContext(bounds, value, text, expected, actual)
        raise ConformanceFailure(context.describe(), context)
    return CaseResult(bounds, value, text, expected, actual)


def check_date_to_timestamp_case(
    bounds: Bounds,
    value: str,
    matches: MatchTable,
    convert: DateToTimestamp,
) -> CaseResult:
    """Check one date-range / timestamp-value case.

    Also checks that exactly the set input bounds come back set.
    """
    expected = (*bounds, value) in matches
    try:
        return _date_to_timestamp(bounds, value, expected, convert)
    except ConformanceFailure as failure:
        context = failure.context
        converted = context.converted if context is not None else ("", "")
        actual = context.actual if context is not None else None
        return CaseResult(bounds, value, converted, expected, actual, failure)


# --- Runs ---


def _finish(report: ConformanceReport) -> ConformanceReport:
    logger.debug("%s actual matches:\n%s", report.name, report.format_actual_matches())
    for result in report.failures:
        logger.debug("%s failure: %s", report.name, result.failure)
    logger.info("%s", report.summary())
    return report


def run_timestamp_to_date(
    convert: TimestampToDate,
    *,
    ranges: Iterable[Bounds] = TIMESTAMP_RANGE_VALUES,
    values: Iterable[str] = DATE_VALUES,
    matches: MatchTable = TIMESTAMP_TO_DATE_MATCHES,
) -> ConformanceReport:
    """Run every timestamp-range / date-value case against convert.

    Raises:
        BridgeError: If convert is a bridge that failed (aborts the run)
    """
    results = tuple(
        check_timestamp_to_date_case(bounds, value, matches, convert)
        for bounds, value in range_test_cases(ranges, values)
    )
    return _finish(ConformanceReport("timestamp-to-date", results))


def run_date_to_timestamp(
    convert: DateToTimestamp,
    *,
    ranges: Iterable[Bounds] = DATE_RANGE_VALUES,
    values: Iterable[str] = TIMESTAMP_VALUES,
    matches: MatchTable = DATE_TO_TIMESTAMP_MATCHES,
) -> ConformanceReport:
    """Run every date-range / timestamp-value case against convert.

    Raises:
        BridgeError: If convert is a bridge that failed (aborts the run)
    """
    results = tuple(
        check_date_to_timestamp_case(bounds, value, matches, convert)
        for bounds, value in range_test_cases(ranges, values)
    )
    return _finish(ConformanceReport("date-to-timestamp", results))


def bridge_converter[InputT, OutputT](
    call: Callable[..., OutputT], timeout: float | None = None
) -> Callable[[InputT], OutputT]:
    """Adapt a bridge call into a converter, optionally with a per-call timeout.

    Example:
        >>> codec = TimestampToDateCodec()
        >>> with ProcessBridge("./convert", codec=codec) as bridge:  # doctest: +SKIP
        ...     report = run_timestamp_to_date(bridge_converter(bridge.call, timeout=5))
    """
    if timeout is None:
        return call

    def convert(value: InputT) -> OutputT:
        return call(value, timeout=timeout)

    return convert
