"""Command-line entry points.

datestamps-verify:
    Run every fixture case against an external command and report
    mismatches.

        datestamps-verify ./convert --utc
        datestamps-verify --inverse python -m datestamps.reference --inverse

datestamps-fuzz:
    Fuzz an external command. The random engine runs in-process; the
    hypothesis and atheris engines hand the command to the fuzz targets of
    a source checkout through the environment and run them as a child
    process, forwarding SIGTERM.

        datestamps-fuzz --iterations 100000 ./convert
        datestamps-fuzz --engine atheris ./convert

Exit Codes:
    0   Full conformance (or no findings)
    1   Mismatches, findings, or a run-level error ("ERROR: ..." on stderr)
    2   Usage error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import os
import signal
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from datestamps.bridge import run_bridge
from datestamps.codec import DateToTimestampCodec, TimestampToDateCodec
from datestamps.configuration import Options, encode_options
from datestamps.constants import FUZZ_EXAMPLES_ENV_VAR, OPTIONS_ENV_VAR
from datestamps.errors import BridgeError
from datestamps.fuzzing import FuzzDriver, FuzzStats
from datestamps.oracle import DateRange
from datestamps.runner import (
    ConformanceReport,
    bridge_converter,
    run_date_to_timestamp,
    run_timestamp_to_date,
)

__all__ = ["fuzz_main", "verify_main"]

logger = logging.getLogger(__name__)

# src/datestamps/cli.py -> checkout root
_SOURCE_ROOT = Path(__file__).resolve().parents[2]

_DEFAULT_TIMEOUT_SECONDS = 10.0
_DEFAULT_ITERATIONS = 10_000


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _add_command_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log bridge traffic and the observed match table",
    )
    parser.add_argument("command", help="External conversion command")
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Arguments for the external command",
    )


def _print_report(report: ConformanceReport) -> None:
    for result in report.failures:
        print(f"FAIL {result.failure}")
    print(report.summary())


# --- datestamps-verify ---


def verify_main(args: Sequence[str] | None = None) -> int:
    """Run the fixture suite against an external command.

    Returns:
        Exit code: 0 full conformance, 1 mismatches or error, 2 usage error
    """
    parser = argparse.ArgumentParser(
        prog="datestamps-verify",
        description="Check an external timestamp-range/date-range converter against fixtures",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=_DEFAULT_TIMEOUT_SECONDS,
        metavar="S",
        help=f"Seconds to wait for each response (default: {_DEFAULT_TIMEOUT_SECONDS})",
    )
    parser.add_argument(
        "--inverse",
        action="store_true",
        help="The command converts date ranges to timestamp ranges",
    )
    _add_command_arguments(parser)
    parsed = parser.parse_args(args)
    _configure_logging(parsed.verbose)

    if parsed.timeout <= 0:
        parser.error("--timeout must be positive")

    try:
        if parsed.inverse:
            report = run_bridge(
                parsed.command,
                parsed.args,
                DateToTimestampCodec(),
                lambda call: run_date_to_timestamp(bridge_converter(call, parsed.timeout)),
            )
        else:
            report = run_bridge(
                parsed.command,
                parsed.args,
                TimestampToDateCodec(),
                lambda call: run_timestamp_to_date(bridge_converter(call, parsed.timeout)),
            )
    except BridgeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    _print_report(report)
    if not report.success:
        print(
            f"ERROR: {len(report.failures)} of {len(report.results)} cases failed",
            file=sys.stderr,
        )
        return 1
    return 0


# --- datestamps-fuzz ---


def _print_stats(stats: FuzzStats) -> None:
    for finding in stats.findings:
        print(f"FINDING {finding}")
    print(stats.summary())


def _fuzz_random(parsed: argparse.Namespace) -> int:
    def fuzz(call: Callable[..., DateRange]) -> FuzzStats:
        driver = FuzzDriver(bridge_converter(call, parsed.timeout), seed=parsed.seed)
        return driver.run(parsed.iterations)

    try:
        stats = run_bridge(parsed.command, parsed.args, TimestampToDateCodec(), fuzz)
    except BridgeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    _print_stats(stats)
    return 1 if stats.findings else 0


def _run_target(argv: list[str], env: dict[str, str]) -> int:
    """Run a fuzz target to completion, forwarding SIGTERM to it.

    SIGINT from a terminal reaches the whole process group, so the target
    sees it directly; this process just keeps waiting for the target to
    wind down and report.
    """
    logger.info("Running %s", " ".join(argv))
    process = subprocess.Popen(argv, env=env, cwd=_SOURCE_ROOT)  # noqa: S603
    previous = signal.signal(
        signal.SIGTERM, lambda signum, _frame: process.send_signal(signum)
    )
    try:
        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                continue
    finally:
        signal.signal(signal.SIGTERM, previous)


def _fuzz_external(parsed: argparse.Namespace) -> int:
    options = Options(parsed.command, tuple(parsed.args), os.getcwd())
    env = dict(os.environ)
    env[OPTIONS_ENV_VAR] = encode_options(options)

    if parsed.engine == "hypothesis":
        target = _SOURCE_ROOT / "tests" / "fuzz" / "test_external_conformance.py"
        env[FUZZ_EXAMPLES_ENV_VAR] = str(parsed.iterations)
        argv = [sys.executable, "-m", "pytest", str(target), "-m", "fuzz", "-q"]
        if parsed.seed is not None:
            argv.append(f"--hypothesis-seed={parsed.seed}")
    else:
        target = _SOURCE_ROOT / "fuzz_atheris" / "fuzz_conformance.py"
        argv = [sys.executable, str(target), f"-runs={parsed.iterations}"]
        if parsed.seed is not None:
            argv.append(f"-seed={parsed.seed}")

    if not target.is_file():
        print(
            f"ERROR: fuzz target not found: {target} "
            f"(the {parsed.engine} engine needs a source checkout)",
            file=sys.stderr,
        )
        return 1
    return _run_target(argv, env)


def fuzz_main(args: Sequence[str] | None = None) -> int:
    """Fuzz an external command.

    Returns:
        Exit code: 0 no findings, 1 findings or error, 2 usage error
    """
    parser = argparse.ArgumentParser(
        prog="datestamps-fuzz",
        description="Fuzz an external timestamp-range/date-range converter",
    )
    parser.add_argument(
        "--engine",
        choices=("random", "hypothesis", "atheris"),
        default="random",
        help="Case generator (default: random, in-process)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=_DEFAULT_ITERATIONS,
        metavar="N",
        help=f"Number of cases to try (default: {_DEFAULT_ITERATIONS})",
    )
    parser.add_argument("--seed", type=int, default=None, metavar="N", help="Random seed")
    parser.add_argument(
        "--timeout",
        type=float,
        default=_DEFAULT_TIMEOUT_SECONDS,
        metavar="S",
        help=f"Seconds to wait for each response (default: {_DEFAULT_TIMEOUT_SECONDS})",
    )
    _add_command_arguments(parser)
    parsed = parser.parse_args(args)
    _configure_logging(parsed.verbose)

    if parsed.iterations < 0:
        parser.error("--iterations must be non-negative")
    if parsed.timeout <= 0:
        parser.error("--timeout must be positive")
    if not parsed.command:
        parser.error("command must not be empty")

    if parsed.engine == "random":
        return _fuzz_random(parsed)
    return _fuzz_external(parsed)
