"""Tests for the runner: progress, run-wide success and the overall score."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from benchscore.benchmarks.base import Benchmark
from benchscore.benchmarks.errors import BenchmarkError, DuplicateSuiteError
from benchscore.benchmarks.hooks import RunHooks
from benchscore.benchmarks.runner import Runner, run_all
from benchscore.benchmarks.suite import Suite
from benchscore.models.config_models import RunConfig


def _fail():
    raise RuntimeError("workload crashed")


def _suite(clock, name, *costs, reference=100.0):
    """Suite of benchmarks taking the given fake seconds per iteration."""
    return Suite(
        name,
        [
            Benchmark(f"{name}{i}", reference=reference, run=clock.work(cost))
            for i, cost in enumerate(costs)
        ],
    )


@pytest.fixture
def runner(timer):
    """Runner on the fake-clock timer, no reseeding."""
    return Runner(RunConfig(seed=None), timer=timer)


@pytest.fixture
def hooks():
    """RunHooks whose hooks are all mocks."""
    return RunHooks(
        on_step=MagicMock(),
        on_error=MagicMock(),
        on_result=MagicMock(),
        on_score=MagicMock(),
    )


def test_overall_score_is_geomean_of_suite_scores(clock, runner, hooks):
    """Test suites scoring 100 and 400 give an overall score of 200."""
    # reference 100 ms: 1000 ms/iter scores 100, 250 ms/iter scores 400
    suites = [_suite(clock, "Slow", 1.0), _suite(clock, "Fast", 0.25)]
    runner.run_all(suites, hooks)

    hooks.on_score.assert_called_once()
    assert hooks.on_score.call_args.args[0] == pytest.approx(200.0)


def test_overall_score_is_geomean_of_suite_geomeans(clock, runner, hooks):
    """Test the two-level aggregation benchmark -> suite -> overall."""
    suites = [
        _suite(clock, "A", 0.05, 0.2),  # 2000, 500 -> 1000
        _suite(clock, "B", 0.01),  # 10000
    ]
    runner.run_all(suites, hooks)

    assert hooks.on_score.call_args.args[0] == pytest.approx(
        (1000.0 * 10000.0) ** 0.5
    )
    results = {c.args[0]: c.args[1] for c in hooks.on_result.call_args_list}
    assert results["A0"] == pytest.approx(2000.0)
    assert results["A1"] == pytest.approx(500.0)
    assert results["B0"] == pytest.approx(10000.0)


def test_any_failure_suppresses_overall_score(clock, runner, hooks):
    """Test that one failing benchmark in one suite voids the overall score."""
    good = _suite(clock, "A", 0.05, 0.1)
    bad = Suite("B", [Benchmark("Z", reference=10.0, run=_fail)])
    runner.run_all([good, bad], hooks)

    hooks.on_score.assert_not_called()
    hooks.on_error.assert_called_once()
    name, error = hooks.on_error.call_args.args
    assert name == "Z"
    assert isinstance(error, BenchmarkError)
    assert hooks.on_result.call_count == 2


def test_failure_in_first_suite_does_not_stop_later_suites(clock, runner, hooks):
    """Test failure isolation across suites."""
    bad = Suite("Bad", [Benchmark("Z", reference=10.0, run=_fail)])
    later = _suite(clock, "Later", 0.05)
    runner.run_all([bad, later], hooks)

    hooks.on_result.assert_called_once()
    assert hooks.on_result.call_args.args[0] == "Later0"
    hooks.on_score.assert_not_called()


def test_progress_is_global_and_reaches_100(clock, runner):
    """Test percentages increase across suites and end at exactly 100."""
    steps = []
    suites = [
        _suite(clock, "A", 0.05, 0.05, 0.05),
        Suite("B", [Benchmark("Z", reference=10.0, run=_fail)]),
        _suite(clock, "C", 0.05, 0.05, 0.05, 0.05),
    ]
    runner.run_all(suites, RunHooks(on_step=lambda n, p: steps.append((n, p))))

    names = [name for name, _ in steps]
    percentages = [pct for _, pct in steps]
    assert names == ["A0", "A1", "A2", "Z", "C0", "C1", "C2", "C3"]
    assert percentages == sorted(percentages)
    assert percentages[0] == pytest.approx(100 / 8)
    assert percentages[-1] == 100.0
    assert all(p < 100.0 for p in percentages[:-1])


def test_each_step_precedes_its_outcome(clock, runner):
    """Test the combined notification stream ordering."""
    events = []
    hooks = RunHooks(
        on_step=lambda n, p: events.append(("step", n)),
        on_error=lambda n, e: events.append(("error", n)),
        on_result=lambda n, s: events.append(("result", n)),
        on_score=lambda s: events.append(("score",)),
    )
    suites = [
        _suite(clock, "A", 0.05),
        Suite("B", [Benchmark("Z", reference=10.0, run=_fail)]),
    ]
    runner.run_all(suites, hooks)

    assert events == [("step", "A0"), ("result", "A0"), ("step", "Z"), ("error", "Z")]


def test_hooks_are_optional(clock, runner):
    """Test that a run without hooks, or with partial hooks, works."""
    suites = [_suite(clock, "A", 0.05)]
    runner.run_all(suites)
    runner.run_all(suites, RunHooks())

    scores = []
    runner.run_all(suites, RunHooks(on_score=scores.append))
    assert scores == [pytest.approx(2000.0)]


def test_duck_typed_hooks_object(clock, runner):
    """Test any object exposing some of the hook attributes is accepted."""
    scores = []
    hooks = SimpleNamespace(on_score=scores.append)
    runner.run_all([_suite(clock, "A", 0.05)], hooks)
    assert scores == [pytest.approx(2000.0)]


def test_each_run_starts_clean(clock, runner):
    """Test that a failed run does not leak its state into the next run."""
    bad = Suite("B", [Benchmark("Z", reference=10.0, run=_fail)])
    good = _suite(clock, "A", 0.05)

    first = []
    runner.run_all([bad], RunHooks(on_score=first.append))
    second = []
    steps = []
    runner.run_all(
        [good],
        RunHooks(on_score=second.append, on_step=lambda n, p: steps.append(p)),
    )

    assert first == []
    assert second == [pytest.approx(2000.0)]
    assert steps == [100.0]


def test_empty_run_reports_nothing(runner, hooks):
    """Test that no suites means no notifications and no overall score."""
    runner.run_all([], hooks)
    hooks.on_step.assert_not_called()
    hooks.on_score.assert_not_called()


def test_duplicate_suite_names_rejected_before_running(clock, runner, hooks):
    """Test that suite names must be unique within a run."""
    with pytest.raises(DuplicateSuiteError):
        runner.run_all([_suite(clock, "A", 0.05), _suite(clock, "A", 0.05)], hooks)
    hooks.on_step.assert_not_called()


def test_run_all_returns_none_and_uses_config(clock):
    """Test the module-level entry point with a real timer configuration."""
    suite = Suite("Real", [Benchmark("Sum", reference=1.0, run=lambda: sum(range(50)))])
    scores = []
    config = RunConfig(min_duration=0.001, min_iterations=2, warmup_iterations=0)

    assert run_all([suite], RunHooks(on_score=scores.append), config) is None
    assert len(scores) == 1
    assert scores[0] > 0
