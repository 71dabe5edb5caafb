#!/usr/bin/env python3
"""External Conversion Command Conformance Fuzzer (Atheris).

Targets: an external timestamp-range to date-range command, reached through
datestamps.bridge.ProcessBridge. The command is read from
DATESTAMPS_FUZZ_OPTIONS (base64 JSON {"cmd", "args", "dir"}), which
datestamps-fuzz --engine atheris sets before running this file.

Every generated case is checked with datestamps.fuzzing.check_fuzz_case:
bound presence, canonical dates, ordering (allowing the canonical empty
encoding) and containment against the original instant range.

Case kinds (round-robin, weighted):
- aligned: both bounds on UTC midnights, 1 to 60 days apart
- sub_day: less than one day apart, or inverted (always skipped)
- one_to_two_days: the narrow band where narrowing can empty a range
- long: up to 400 days
- half_open: exactly one bound set
- seed_mutation: a fixture case with jittered bounds and offsets

Metrics:
- Case kind coverage and outcome distribution
- Performance profiling (mean/median/p99/max)
- Real memory usage (RSS via psutil)
- Error distribution

Requires Python 3.13+ (uses PEP 695 type aliases).
"""

from __future__ import annotations

import argparse
import atexit
import gc
import logging
import pathlib
import sys
import time
from dataclasses import asdict, dataclass
from typing import Any

# --- Dependency Checks ---
_psutil_mod: Any = None
_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for require_modules
    import psutil as _psutil_mod  # type: ignore[no-redef]
except ImportError:
    pass

try:  # noqa: SIM105 - need module ref for require_modules
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

from fuzz_common import (  # noqa: E402 - after dependency capture  # pylint: disable=C0413
    GC_INTERVAL,
    FuzzRun,
    build_report,
    kind_for,
    kind_rotation,
    publish_report,
    require_modules,
)

require_modules({"psutil": _psutil_mod, "atheris": _atheris_mod})

import atheris  # noqa: E402  # pylint: disable=C0412,C0413

# --- Domain Metrics ---


@dataclass
class ConformanceMetrics:
    """Domain-specific metrics for the conformance fuzzer."""

    canonical_empty_checked: int = 0
    half_open_checked: int = 0
    bridge_calls: int = 0


# --- Global State ---

_run = FuzzRun(target="conformance")
_domain = ConformanceMetrics()


# --- Suppress logging and instrument imports ---
logging.getLogger("datestamps").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["datestamps"]):
    from datestamps.bridge import ProcessBridge
    from datestamps.codec import TimestampToDateCodec
    from datestamps.configuration import load_options
    from datestamps.constants import NANOS_PER_DAY, NANOS_PER_SECOND
    from datestamps.enums import FuzzOutcome
    from datestamps.errors import BridgeError, FuzzFinding
    from datestamps.fuzzing import (
        OFFSET_SECONDS_EAST_OF_UTC,
        FuzzCase,
        check_fuzz_case,
        seed_cases,
    )
    from datestamps.instant import parse_date
    from datestamps.oracle import DateRange, InstantRange, timestamp_range_to_date_range


_EPOCH_MIN = parse_date("1900-01-01")
_EPOCH_MAX = parse_date("2200-01-01")
_CALL_TIMEOUT_SECONDS = 10.0

_SEEDS: tuple[FuzzCase, ...] = tuple(seed_cases(offsets=()))

# --- Case kind weights ---
_KIND_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("aligned", 10),
    ("sub_day", 3),
    ("one_to_two_days", 15),
    ("long", 8),
    ("half_open", 8),
    ("seed_mutation", 12),
)

_KIND_ROTATION: tuple[str, ...] = kind_rotation(_KIND_WEIGHTS)

_bridge: ProcessBridge[InstantRange, DateRange] | None = None


# --- Case Construction ---


def _offset(fdp: atheris.FuzzedDataProvider) -> int:
    """UTC, a representative offset, or any whole-minute offset."""
    match fdp.ConsumeIntInRange(0, 2):
        case 0:
            return 0
        case 1:
            return fdp.PickValueInList(list(OFFSET_SECONDS_EAST_OF_UTC))
        case _:
            return fdp.ConsumeIntInRange(-1439, 1439) * 60


def _start(fdp: atheris.FuzzedDataProvider) -> int:
    start = fdp.ConsumeIntInRange(_EPOCH_MIN, _EPOCH_MAX)
    if fdp.ConsumeBool():
        start -= start % NANOS_PER_SECOND
    return start


def _value_near(fdp: atheris.FuzzedDataProvider, start: int, end: int) -> int:
    return fdp.ConsumeIntInRange(start - 3 * NANOS_PER_DAY, end + 3 * NANOS_PER_DAY)


def _build_case(kind: str, fdp: atheris.FuzzedDataProvider) -> FuzzCase:
    if kind == "seed_mutation":
        seed = _SEEDS[fdp.ConsumeIntInRange(0, len(_SEEDS) - 1)]
        jitter = 2 * NANOS_PER_DAY
        return FuzzCase(
            seed.start_epoch_ns + fdp.ConsumeIntInRange(-jitter, jitter),
            _offset(fdp),
            seed.end_epoch_ns + fdp.ConsumeIntInRange(-jitter, jitter),
            _offset(fdp),
            seed.value_epoch_ns,
            ignore_start=seed.ignore_start,
            ignore_end=seed.ignore_end,
        )

    start = _start(fdp)
    ignore_start = ignore_end = False
    match kind:
        case "aligned":
            start -= start % NANOS_PER_DAY
            end = start + fdp.ConsumeIntInRange(1, 60) * NANOS_PER_DAY
        case "sub_day":
            end = start + fdp.ConsumeIntInRange(-NANOS_PER_DAY, NANOS_PER_DAY - 1)
        case "one_to_two_days":
            end = start + fdp.ConsumeIntInRange(NANOS_PER_DAY, 2 * NANOS_PER_DAY)
        case "long":
            end = start + fdp.ConsumeIntInRange(NANOS_PER_DAY, 400 * NANOS_PER_DAY)
        case _:  # half_open
            end = start + fdp.ConsumeIntInRange(0, 30 * NANOS_PER_DAY)
            ignore_start = fdp.ConsumeBool()
            ignore_end = not ignore_start

    return FuzzCase(
        start,
        _offset(fdp),
        end,
        _offset(fdp),
        _value_near(fdp, start, end),
        ignore_start=ignore_start,
        ignore_end=ignore_end,
    )


def _convert(r: InstantRange) -> DateRange:
    if _bridge is None:
        msg = "bridge not started; run via main()"
        raise RuntimeError(msg)
    _domain.bridge_calls += 1
    return _bridge.call(r, timeout=_CALL_TIMEOUT_SECONDS)


def _record_domain(case: FuzzCase, outcome: FuzzOutcome) -> None:
    if outcome is FuzzOutcome.SKIPPED:
        return
    if case.ignore_start or case.ignore_end:
        _domain.half_open_checked += 1
    elif timestamp_range_to_date_range(case.instant_range()).is_empty:
        _domain.canonical_empty_checked += 1


# --- Reporting ---

_REPORT_PATH = pathlib.Path(".fuzz_atheris_corpus") / "conformance" / "report.json"


def _report() -> dict[str, Any]:
    return build_report(_run, asdict(_domain))


def _emit_final_report() -> None:
    _run.status = "complete"
    publish_report(_report(), _REPORT_PATH, final=True)


def _close_bridge() -> None:
    if _bridge is not None:
        _bridge.close()


def test_one_input(data: bytes) -> None:
    """Atheris entry point: check one generated case against the command."""
    iteration = _run.begin()
    if iteration % _run.report_every == 0:
        publish_report(_report(), _REPORT_PATH)

    started = time.perf_counter()
    kind = kind_for(_run, _KIND_ROTATION)
    _run.kinds[kind] += 1

    fdp = atheris.FuzzedDataProvider(data)
    if fdp.remaining_bytes() < 8:
        return

    try:
        case = _build_case(kind, fdp)
        outcome = check_fuzz_case(case, _convert)
        _run.outcomes[outcome] += 1
        _record_domain(case, outcome)
    except FuzzFinding as finding:
        _run.findings += 1
        _run.error(finding)
        print(f"\nFINDING ({kind}): {finding}", file=sys.stderr, flush=True)
        raise
    except BridgeError as e:
        # The command died or misbehaved; nothing further can be checked.
        _run.findings += 1
        _run.error(e)
        raise
    finally:
        _run.finish(kind, started, data)
        if iteration % GC_INTERVAL == 0:
            gc.collect()


def main() -> None:
    """Entry point with argparse CLI; remaining arguments go to libFuzzer."""
    global _bridge  # noqa: PLW0603  # pylint: disable=global-statement

    parser = argparse.ArgumentParser(
        description="External Conversion Command Conformance Fuzzer"
    )
    parser.add_argument(
        "--checkpoint-interval",
        type=int,
        default=500,
        help="Emit JSON report every N iterations (default: 500)",
    )

    args, remaining = parser.parse_known_args()
    if args.checkpoint_interval <= 0:
        parser.error("--checkpoint-interval must be positive")
    _run.report_every = args.checkpoint_interval

    try:
        options = load_options()
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    if options is None:
        print(
            "SKIP: DATESTAMPS_FUZZ_OPTIONS is not set "
            "(run via: datestamps-fuzz --engine atheris COMMAND)",
            file=sys.stderr,
        )
        sys.exit(0)

    sys.argv = [sys.argv[0], *remaining]

    print("=" * 80)
    print("External Conversion Command Conformance Fuzzer (Atheris)")
    print("=" * 80)
    print(f"Command:     {options.cmd} {' '.join(options.args)}")
    print(f"Rotation:    {len(_KIND_ROTATION)} slots, {len(_KIND_WEIGHTS)} case kinds")
    print(f"Seeds:       {len(_SEEDS)} fixture cases")
    print("=" * 80, flush=True)

    _bridge = ProcessBridge(
        options.cmd,
        options.args,
        codec=TimestampToDateCodec(),
        cwd=options.dir or None,
    ).start()
    atexit.register(_emit_final_report)
    atexit.register(_close_bridge)

    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
