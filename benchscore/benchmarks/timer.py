"""Repeated-execution timer for benchmark run actions."""

import time
from collections.abc import Callable
from typing import Any

from benchscore.benchmarks.errors import TimerAbort
from benchscore.models.score_models import TimingSample
from benchscore.utils.logger import Logger


class Timer:
    """Times a run action until duration and iteration floors are crossed.

    A single invocation of a fast workload cannot be timed with enough
    resolution, so the action is repeated until the accumulated wall time
    reaches ``min_duration`` seconds and at least ``min_iterations``
    invocations have been made. Slow workloads stop on the iteration
    floor, fast ones on the duration floor.

    Example:
        >>> timer = Timer(min_duration=0.5, min_iterations=16)
        >>> sample = timer.measure(lambda: sorted(range(1000)))
        >>> sample.iterations >= 16
        True
    """

    def __init__(
        self,
        min_duration: float = 1.0,
        min_iterations: int = 32,
        warmup_iterations: int = 1,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        """Initialize the timer.

        Args:
            min_duration: Minimum accumulated wall time in seconds.
            min_iterations: Minimum number of timed invocations.
            warmup_iterations: Untimed invocations before measuring.
            clock: Monotonic clock returning seconds.

        Raises:
            ValueError: If any floor is out of range.
        """
        _check_floors(min_duration, min_iterations)
        if warmup_iterations < 0:
            raise ValueError(f"warmup_iterations must be >= 0, got {warmup_iterations}")

        self.min_duration = min_duration
        self.min_iterations = min_iterations
        self.warmup_iterations = warmup_iterations
        self._clock = clock

    def measure(
        self,
        action: Callable[[], Any],
        min_duration: float | None = None,
        min_iterations: int | None = None,
    ) -> TimingSample:
        """Run ``action`` repeatedly and return the accumulated timing.

        Args:
            action: Zero-argument callable to time.
            min_duration: Per-call override of the duration floor.
            min_iterations: Per-call override of the iteration floor.

        Returns:
            TimingSample with elapsed milliseconds and iteration count.

        Raises:
            TimerAbort: If ``action`` raises; chained to the original error.
        """
        duration_floor = self.min_duration if min_duration is None else min_duration
        iteration_floor = (
            self.min_iterations if min_iterations is None else min_iterations
        )
        _check_floors(duration_floor, iteration_floor)

        for _ in range(self.warmup_iterations):
            try:
                action()
            except Exception as e:
                raise TimerAbort(0) from e

        iterations = 0
        elapsed = 0.0
        while elapsed < duration_floor or iterations < iteration_floor:
            start = self._clock()
            try:
                action()
            except Exception as e:
                raise TimerAbort(iterations) from e
            elapsed += self._clock() - start
            iterations += 1

        Logger.component("timer").debug(
            f"{iterations} iterations in {elapsed * 1000:.3f} ms"
        )
        return TimingSample(elapsed_ms=elapsed * 1000, iterations=iterations)


def _check_floors(min_duration: float, min_iterations: int) -> None:
    if min_duration <= 0:
        raise ValueError(f"min_duration must be positive, got {min_duration}")
    if min_iterations < 1:
        raise ValueError(f"min_iterations must be >= 1, got {min_iterations}")
