"""Benchmark definition and lifecycle execution."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from benchscore.benchmarks.errors import (
    RunError,
    SetupError,
    TeardownError,
    TimerAbort,
)
from benchscore.benchmarks.timer import Timer
from benchscore.models.score_models import Measurement
from benchscore.utils.logger import Logger

Action = Callable[[], Any]


@dataclass(frozen=True)
class Benchmark:
    """A named unit of work with a setup/run/teardown lifecycle.

    Workloads are plain callables, so no subclassing is needed:

        >>> Benchmark("Sort", reference=2.5, run=lambda: sorted(data))

    Lifecycle (see execute()):
        1. setup()    - once, optional
        2. run()      - repeatedly, under Timer control
        3. teardown() - once, optional, on both success and run failure

    Attributes:
        name: Identifier, unique within the owning suite.
        reference: Reference time per iteration in milliseconds. A run at
            exactly this speed scores the normalization constant.
        run: Zero-argument workload. Must be safe to call repeatedly.
        setup: Optional zero-argument preparation step.
        teardown: Optional zero-argument cleanup step.
        min_duration: Optional override of the Timer duration floor (s).
        min_iterations: Optional override of the Timer iteration floor.
    """

    name: str
    reference: float
    run: Action
    setup: Action | None = None
    teardown: Action | None = None
    min_duration: float | None = None
    min_iterations: int | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Benchmark name must not be empty")
        if not self.reference > 0:
            raise ValueError(
                f"{self.name}: reference must be positive, got {self.reference}"
            )
        if not callable(self.run):
            raise TypeError(f"{self.name}: run must be callable")
        for label, action in (("setup", self.setup), ("teardown", self.teardown)):
            if action is not None and not callable(action):
                raise TypeError(f"{self.name}: {label} must be callable or None")
        if self.min_duration is not None and self.min_duration <= 0:
            raise ValueError(
                f"{self.name}: min_duration must be positive, got {self.min_duration}"
            )
        if self.min_iterations is not None and self.min_iterations < 1:
            raise ValueError(
                f"{self.name}: min_iterations must be >= 1, got {self.min_iterations}"
            )

    def execute(self, timer: Timer) -> Measurement:
        """Run the full lifecycle and return the timing.

        Args:
            timer: Timer controlling the repeated run action.

        Returns:
            Measurement of the timed run.

        Raises:
            SetupError: setup() failed; run and teardown were skipped.
            RunError: run() failed; teardown still ran.
            TeardownError: teardown() failed after a successful run.
        """
        log = Logger.component(f"benchmark.{self.name}")

        if self.setup is not None:
            try:
                self.setup()
            except Exception as e:
                raise SetupError(self.name, e) from e

        log.debug("Running benchmark...")
        try:
            sample = timer.measure(
                self.run,
                min_duration=self.min_duration,
                min_iterations=self.min_iterations,
            )
        except TimerAbort as abort:
            cause = abort.__cause__ or abort
            error = RunError(self.name, cause, iterations=abort.iterations)
            try:
                self._teardown()
            except TeardownError as teardown_error:
                log.error(f"Teardown after failed run also failed: {teardown_error}")
            raise error from cause

        self._teardown()
        log.debug(f"Benchmark complete: {sample.per_iteration_ms:.4f} ms/iteration")

        return Measurement(
            benchmark=self.name,
            elapsed_ms=sample.elapsed_ms,
            iterations=sample.iterations,
        )

    def _teardown(self) -> None:
        if self.teardown is None:
            return
        try:
            self.teardown()
        except Exception as e:
            raise TeardownError(self.name, e) from e
