"""Shared fixtures for benchscore tests."""

import logging

import pytest

from benchscore.benchmarks.timer import Timer
from benchscore.utils.logger import Logger


class FakeClock:
    """Deterministic clock; workloads advance it instead of burning CPU."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def work(self, seconds: float):
        """Return a run action that takes exactly ``seconds`` of fake time."""

        def action() -> None:
            self.advance(seconds)

        return action


@pytest.fixture
def clock():
    """A fresh fake clock."""
    return FakeClock()


@pytest.fixture
def timer(clock):
    """Timer on the fake clock: 0.1s floor, 4 iterations, no warmup."""
    return Timer(min_duration=0.1, min_iterations=4, warmup_iterations=0, clock=clock)


@pytest.fixture(autouse=True)
def reset_logger():
    """Return the benchscore logger to its unconfigured state after each test."""
    yield
    logger = logging.getLogger("benchscore")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    Logger._configured = False
