"""Tests for the Atheris fuzzer's run bookkeeping (fuzz_atheris/fuzz_common.py)."""

from __future__ import annotations

import json
import time
from pathlib import Path

import pytest

from fuzz_atheris.fuzz_common import (
    SLOWEST_KEPT,
    FuzzRun,
    build_report,
    kind_for,
    kind_rotation,
    publish_report,
    require_modules,
)


class TestKindRotation:
    """Weighted round-robin case kinds."""

    def test_expands_weights_in_order(self) -> None:
        assert kind_rotation([("a", 2), ("b", 1), ("c", 0)]) == ("a", "a", "b")

    def test_kind_follows_iteration_number(self) -> None:
        rotation = kind_rotation([("a", 2), ("b", 1)])
        run = FuzzRun(target="t")
        picked = []
        for _ in range(6):
            run.iterations += 1
            picked.append(kind_for(run, rotation))
        assert picked == ["a", "a", "b", "a", "a", "b"]


class TestFuzzRun:
    """Per-iteration recording."""

    def test_finish_records_time_per_kind(self) -> None:
        run = FuzzRun(target="t")
        run.iterations = 1
        run.finish("aligned", time.perf_counter(), b"x")
        run.finish("aligned", time.perf_counter(), b"y")
        assert len(run.timings_ms) == 2
        assert set(run.kind_ms) == {"aligned"}
        assert len(run.slowest) == 2

    def test_slowest_is_bounded(self) -> None:
        run = FuzzRun(target="t")
        run.iterations = 1
        for i in range(SLOWEST_KEPT + 5):
            run.finish("long", time.perf_counter() - i, bytes([i]))
        assert len(run.slowest) == SLOWEST_KEPT
        assert min(entry[0] for entry in run.slowest) >= 5000

    def test_errors_counted_by_type(self) -> None:
        run = FuzzRun(target="t")
        run.error(ValueError("a"))
        run.error(ValueError("b"))
        run.error(KeyError("c"))
        assert run.errors == {"ValueError": 2, "KeyError": 1}

    def test_begin_samples_baseline_rss(self) -> None:
        pytest.importorskip("psutil")
        run = FuzzRun(target="t")
        assert run.begin() == 1
        assert run.begin() == 2
        assert run.baseline_rss_mb > 0
        assert run.status == "running"


class TestReport:
    """JSON report building and publishing."""

    def test_build_report(self) -> None:
        run = FuzzRun(target="conformance", iterations=3, findings=1)
        run.kinds["aligned"] += 3
        run.outcomes["matched"] += 2
        report = build_report(run, {"bridge_calls": 2})
        assert report["target"] == "conformance"
        assert report["kinds"] == {"aligned": 3}
        assert report["outcomes"] == {"matched": 2}
        assert report["bridge_calls"] == 2
        assert "time_mean_ms" not in report
        assert "rss_peak_mb" not in report

    def test_timing_summary(self) -> None:
        run = FuzzRun(target="t")
        run.timings_ms.extend(float(i) for i in range(1, 101))
        report = build_report(run)
        assert report["time_max_ms"] == 100.0
        assert report["time_median_ms"] == 50.5
        assert "time_p99_ms" in report

    def test_leak_flag(self) -> None:
        run = FuzzRun(target="t", baseline_rss_mb=100.0)
        run.rss_samples_mb.extend([100.0] * 20 + [150.0] * 20)
        report = build_report(run)
        assert report["rss_peak_mb"] == 150.0
        assert report["rss_delta_mb"] == 50.0
        assert report["leak_suspected"] is True

    def test_publish_writes_markers_and_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "out" / "report.json"
        publish_report({"iterations": 5}, path)
        publish_report({"iterations": 6}, path, final=True)
        err = capsys.readouterr().err
        assert '[CHECKPOINT-JSON-BEGIN]{"iterations": 5}[CHECKPOINT-JSON-END]' in err
        assert '[SUMMARY-JSON-BEGIN]{"iterations": 6}[SUMMARY-JSON-END]' in err
        assert json.loads(path.read_text(encoding="utf-8")) == {"iterations": 6}

    def test_unwritable_report_is_a_warning(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        publish_report({}, blocker / "report.json")
        assert "WARNING: could not write" in capsys.readouterr().err


class TestRequireModules:
    """Dependency gate."""

    def test_all_present(self) -> None:
        require_modules({"json": json})

    def test_missing_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            require_modules({"atheris": None, "json": json})
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "fuzzing needs atheris" in err
        assert "uv sync --group atheris" in err
