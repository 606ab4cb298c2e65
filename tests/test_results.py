"""Tests for run results collection and emission."""

import json
from io import StringIO

import pytest
import yaml

from benchscore.benchmarks.base import Benchmark
from benchscore.benchmarks.errors import RunError
from benchscore.benchmarks.hooks import RunHooks, combine_hooks
from benchscore.benchmarks.results import OutputFormat, RunResults
from benchscore.benchmarks.runner import Runner
from benchscore.benchmarks.suite import Suite
from benchscore.models.config_models import RunConfig


def _failed_results():
    results = RunResults()
    hooks = results.hooks()
    hooks.on_step("Regex", 50.0)
    hooks.on_result("Regex", 1840.2)
    hooks.on_step("JSON", 100.0)
    hooks.on_error("JSON", RunError("JSON", ValueError("bad document")))
    return results


def test_hooks_record_notifications():
    """Test that the hooks returned by RunResults record every event."""
    results = _failed_results()

    assert results.steps == [("Regex", 50.0), ("JSON", 100.0)]
    assert results.results == [("Regex", 1840.2)]
    [(failed, message)] = results.errors
    assert failed == "JSON"
    assert "bad document" in message
    assert results.score is None
    assert not results.success
    assert "Regex" in results
    assert "JSON" not in results
    assert len(results) == 1


def test_add_result_and_finalize():
    """Test adding results and finalization."""
    results = RunResults()
    results.add_result("Sieve", 3000.0)
    results.add_error("NBody", "diverged")
    results.set_score(1234.5)

    assert results.results == [("Sieve", 3000.0)]
    assert results.errors == [("NBody", "diverged")]
    assert results.steps == []

    results.finalize()
    data = results.to_dict()
    assert data["metadata"]["timestamp_end"] is not None
    assert data["score"] == 1234.5


def test_generate_summary():
    """Test results summary generation."""
    results = _failed_results()
    results.add_result("Zlib", 900.0)

    summary = results.to_dict()["summary"]
    assert summary["total_benchmarks"] == 3
    assert summary["passed"] == 2
    assert summary["failed"] == 1
    assert summary["success_rate"] == 2 / 3


def test_metadata_includes_host():
    """Test that reports carry the host they were measured on."""
    meta = RunResults().to_dict()["metadata"]

    assert meta["benchscore_version"]
    assert meta["host"]["cpu_logical_cores"] >= 1
    assert meta["host"]["memory_total_gb"] > 0


def test_emit_json():
    """Test JSON emission."""
    results = RunResults()
    results.add_result("Regex", 1000.0)
    results.set_score(1000.0)

    output = StringIO()
    results.emit(output, format=OutputFormat.JSON)

    data = json.loads(output.getvalue())
    assert data["results"] == [{"name": "Regex", "score": 1000.0}]
    assert data["errors"] is None
    assert data["score"] == 1000.0


def test_emit_yaml():
    """Test YAML emission."""
    results = _failed_results()

    output = StringIO()
    results.emit(output, format=OutputFormat.YAML)

    data = yaml.safe_load(output.getvalue())
    assert data["results"] == [{"name": "Regex", "score": 1840.2}]
    assert [e["name"] for e in data["errors"]] == ["JSON"]
    assert data["score"] is None


def test_emit_to_file(tmp_path):
    """Test emission to a file path."""
    results = RunResults()
    results.add_result("Sieve", 42.0)

    path = tmp_path / "report.json"
    results.emit_json(path)

    data = json.loads(path.read_text())
    assert data["results"] == [{"name": "Sieve", "score": 42.0}]


def test_emit_text():
    """Test the human-readable report."""
    results = RunResults()
    results.hooks().on_step("Regex", 100.0)
    results.add_result("Regex", 1840.2)
    results.set_score(1840.2)

    output = StringIO()
    results.emit(output, format=OutputFormat.TEXT)
    text = output.getvalue()

    assert "Regex" in text
    assert "1840" in text
    assert "Score: 1840" in text


def test_emit_text_failed_run():
    """Test that a failed run reports no score in text form."""
    output = StringIO()
    _failed_results().emit(output, format=OutputFormat.TEXT)
    text = output.getvalue()

    assert "*error*" in text
    assert "Score: n/a (run had errors)" in text


def test_collects_a_real_run(timer, clock):
    """Test RunResults wired into the runner."""
    suite = Suite("S", [Benchmark("A", reference=100.0, run=clock.work(0.05))])
    results = RunResults()

    Runner(RunConfig(seed=None), timer=timer).run_all([suite], results.hooks())

    assert results.steps == [("A", 100.0)]
    assert results.success
    assert results.score is not None
    assert abs(results.score - 2000.0) < 1e-6


def test_combine_hooks_fans_out_in_order():
    """Test that combined hooks call each hook set in order."""
    calls = []
    first = RunHooks(on_result=lambda n, s: calls.append(("first", n, s)))
    second = RunHooks(
        on_result=lambda n, s: calls.append(("second", n, s)),
        on_score=lambda s: calls.append(("score", s)),
    )

    combined = combine_hooks(first, second)
    combined.on_result("A", 1.0)
    combined.on_score(2.0)

    assert calls == [("first", "A", 1.0), ("second", "A", 1.0), ("score", 2.0)]
    assert combined.on_step is None
    assert combined.on_error is None


def test_same_name_in_two_suites_is_kept_apart(timer, clock):
    """Test that equal benchmark names in different suites both get reported."""
    suites = [
        Suite("A", [Benchmark("Run", reference=100.0, run=clock.work(0.05))]),
        Suite("B", [Benchmark("Run", reference=100.0, run=clock.work(0.2))]),
    ]
    results = RunResults()

    Runner(RunConfig(seed=None), timer=timer).run_all(suites, results.hooks())

    assert [name for name, _ in results.results] == ["Run", "Run"]
    assert [score for _, score in results.results] == [
        pytest.approx(2000.0),
        pytest.approx(500.0),
    ]
    assert results.steps == [("Run", 50.0), ("Run", 100.0)]
    assert len(results) == 2

    data = results.to_dict()
    assert data["summary"]["total_benchmarks"] == 2
    assert data["summary"]["passed"] == 2
    assert len(data["results"]) == 2
    assert results.score == pytest.approx(1000.0)


def test_same_name_failing_in_one_suite_only(timer, clock):
    """Test that a failure is attributed to the right occurrence of a name."""

    def crash():
        raise RuntimeError("workload crashed")

    suites = [
        Suite("A", [Benchmark("Run", reference=100.0, run=clock.work(0.05))]),
        Suite("B", [Benchmark("Run", reference=100.0, run=crash)]),
    ]
    results = RunResults()

    Runner(RunConfig(seed=None), timer=timer).run_all(suites, results.hooks())

    assert results.results == [("Run", pytest.approx(2000.0))]
    assert [name for name, _ in results.errors] == ["Run"]
    assert results.to_dict()["summary"]["total_benchmarks"] == 2

    output = StringIO()
    results.emit(output, format=OutputFormat.TEXT)
    text = output.getvalue()
    assert "2000" in text
    assert "*error*" in text
