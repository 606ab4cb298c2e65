"""Notification hooks connecting the engine to its caller.

Usage:
    from benchscore.benchmarks.hooks import RunHooks

    hooks = RunHooks(
        on_step=lambda name, pct: print(f"Running: {round(pct)}% completed."),
        on_result=lambda name, score: print(f"{name}: {score}"),
    )

Every hook is optional; a missing one is a no-op. Any object with the
four attributes below can be passed where RunHooks is expected.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from benchscore.benchmarks.errors import BenchmarkError

StepHook = Callable[[str, float], None]
ErrorHook = Callable[[str, BenchmarkError], None]
ResultHook = Callable[[str, float], None]
ScoreHook = Callable[[float], None]


@dataclass
class RunHooks:
    """Caller-supplied notification hooks for a run.

    Attributes:
        on_step: Called with (benchmark name, global percentage) before each
            benchmark executes.
        on_error: Called with (benchmark name, error) when a lifecycle fails.
        on_result: Called with (benchmark name, score) on success.
        on_score: Called once with the overall score, only if every
            benchmark in every suite succeeded.
    """

    on_step: StepHook | None = None
    on_error: ErrorHook | None = None
    on_result: ResultHook | None = None
    on_score: ScoreHook | None = None


class SuiteNotifier(Protocol):
    """Per-benchmark notifications emitted by a running Suite."""

    def step(self, name: str) -> None: ...

    def error(self, name: str, error: BenchmarkError) -> None: ...

    def result(self, name: str, score: float) -> None: ...


def combine_hooks(*hooks: RunHooks) -> RunHooks:
    """Return RunHooks that forward every notification to each of ``hooks``.

    Hooks are called in the order given.
    """

    def fan_out(attr: str):
        targets = [getattr(h, attr) for h in hooks if getattr(h, attr, None)]
        if not targets:
            return None

        def forward(*args):
            for target in targets:
                target(*args)

        return forward

    return RunHooks(
        on_step=fan_out("on_step"),
        on_error=fan_out("on_error"),
        on_result=fan_out("on_result"),
        on_score=fan_out("on_score"),
    )
