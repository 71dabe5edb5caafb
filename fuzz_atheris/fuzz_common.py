"""Run bookkeeping for the Atheris conformance fuzzer.

Tracks what each libFuzzer iteration did (case kind, outcome, error type,
wall time, process RSS) and turns it into the JSON report the fuzzer prints
between marker lines and mirrors to disk. Case kinds are drawn from a fixed
weighted rotation instead of from the fuzzed bytes.

Not a fuzz target itself.
"""

from __future__ import annotations

import functools
import hashlib
import heapq
import itertools
import json
import statistics
import sys
import time
from collections import Counter, defaultdict, deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pathlib
    from collections.abc import Mapping, Sequence

try:
    import psutil
except ImportError:
    psutil = None  # type: ignore[assignment]


type Report = dict[str, Any]
type SlowEntry = tuple[float, str, str]  # (elapsed_ms, kind, input digest)

GC_INTERVAL = 256
"""Iterations between forced collections; instrumentation leaves cycles behind."""

RSS_SAMPLE_INTERVAL = 100
"""Iterations between RSS samples."""

SLOWEST_KEPT = 10
LEAK_THRESHOLD_MB = 10.0

_MB = 1024 * 1024


# --- Dependencies ---


def require_modules(modules: Mapping[str, Any]) -> None:
    """Exit with an install hint unless every module imported.

    Args:
        modules: Distribution name to module object, None where the import failed
    """
    missing = sorted(name for name, module in modules.items() if module is None)
    if not missing:
        return
    rule = "-" * 80
    print(rule, file=sys.stderr)
    print(f"ERROR: fuzzing needs {', '.join(missing)}", file=sys.stderr)
    print("Install with: uv sync --group atheris", file=sys.stderr)
    print(rule, file=sys.stderr)
    sys.exit(1)


@functools.cache
def _this_process() -> psutil.Process:
    return psutil.Process()


def rss_mb() -> float:
    """Resident set size of this process in MiB."""
    return _this_process().memory_info().rss / _MB


# --- Run state ---


@dataclass
class FuzzRun:
    """Counters and samples for one fuzzing session."""

    target: str
    report_every: int = 500

    iterations: int = 0
    findings: int = 0
    status: str = "incomplete"

    kinds: Counter[str] = field(default_factory=Counter)
    outcomes: Counter[str] = field(default_factory=Counter)
    errors: Counter[str] = field(default_factory=Counter)
    kind_ms: defaultdict[str, float] = field(default_factory=lambda: defaultdict(float))

    timings_ms: deque[float] = field(default_factory=lambda: deque(maxlen=10_000))
    rss_samples_mb: deque[float] = field(default_factory=lambda: deque(maxlen=1_000))
    baseline_rss_mb: float = 0.0
    slowest: list[SlowEntry] = field(default_factory=list)

    def begin(self) -> int:
        """Count a new iteration and return its 1-based number."""
        if self.iterations == 0:
            self.baseline_rss_mb = rss_mb()
        self.iterations += 1
        self.status = "running"
        return self.iterations

    def finish(self, kind: str, started: float, data: bytes) -> None:
        """Record wall time and periodic RSS for the iteration that began at started."""
        elapsed = (time.perf_counter() - started) * 1000
        self.timings_ms.append(elapsed)
        self.kind_ms[kind] += elapsed

        entry = (elapsed, kind, hashlib.sha256(data).hexdigest()[:16])
        if len(self.slowest) < SLOWEST_KEPT:
            heapq.heappush(self.slowest, entry)
        elif elapsed > self.slowest[0][0]:
            heapq.heapreplace(self.slowest, entry)

        if self.iterations % RSS_SAMPLE_INTERVAL == 0:
            self.rss_samples_mb.append(rss_mb())

    def error(self, exc: BaseException) -> None:
        self.errors[type(exc).__name__] += 1


# --- Case kind rotation ---


def kind_rotation(weights: Sequence[tuple[str, int]]) -> tuple[str, ...]:
    """Expand (kind, weight) pairs into one full rotation."""
    return tuple(itertools.chain.from_iterable(itertools.repeat(k, w) for k, w in weights))


def kind_for(run: FuzzRun, rotation: Sequence[str]) -> str:
    """Kind for the current iteration.

    Picking by iteration number keeps the mix at the configured weights;
    picking from fuzzed bytes lets coverage feedback skew it toward the
    cheapest kind.
    """
    return rotation[(run.iterations - 1) % len(rotation)]


# --- Report ---


def _timing_summary(samples: Sequence[float]) -> Report:
    summary: Report = {
        "time_mean_ms": round(statistics.fmean(samples), 3),
        "time_median_ms": round(statistics.median(samples), 3),
        "time_max_ms": round(max(samples), 3),
    }
    if len(samples) >= 100:
        summary["time_p99_ms"] = round(statistics.quantiles(samples, n=100)[-1], 3)
    return summary


def _memory_summary(samples: Sequence[float], baseline: float) -> Report:
    peak = max(samples)
    summary: Report = {"rss_peak_mb": round(peak, 2), "rss_delta_mb": round(peak - baseline, 2)}
    if len(samples) >= 40:
        # Compare the last quarter of samples with the first.
        n = len(samples) // 4
        growth = statistics.fmean(samples[-n:]) - statistics.fmean(samples[:n])
        summary["rss_growth_mb"] = round(growth, 2)
        summary["leak_suspected"] = growth > LEAK_THRESHOLD_MB
    return summary


def build_report(run: FuzzRun, extra: Mapping[str, Any] | None = None) -> Report:
    """Flatten run state (plus target-specific extra fields) into a JSON-able dict."""
    report: Report = {
        "target": run.target,
        "status": run.status,
        "iterations": run.iterations,
        "findings": run.findings,
        "kinds": dict(run.kinds),
        "outcomes": dict(run.outcomes),
        "errors": dict(run.errors),
        "kind_wall_ms": {kind: round(ms, 1) for kind, ms in run.kind_ms.items()},
        "slowest_ms": [round(entry[0], 2) for entry in sorted(run.slowest, reverse=True)],
    }
    if run.timings_ms:
        report.update(_timing_summary(list(run.timings_ms)))
    if run.rss_samples_mb:
        report.update(_memory_summary(list(run.rss_samples_mb), run.baseline_rss_mb))
    if extra:
        report.update(extra)
    return report


def publish_report(report: Report, path: pathlib.Path, *, final: bool = False) -> None:
    """Print report between marker lines on stderr and write it to path.

    A failed write is reported as a warning; the fuzzing run goes on.
    """
    marker = "SUMMARY" if final else "CHECKPOINT"
    text = json.dumps(report, sort_keys=True)
    print(f"\n[{marker}-JSON-BEGIN]{text}[{marker}-JSON-END]", file=sys.stderr, flush=True)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        print(f"WARNING: could not write {path}: {e}", file=sys.stderr)
