"""Exceptions raised by the benchmark engine.

Benchmark-level failures (BenchmarkError and subclasses) are isolated by
Suite and reported through hooks. Registration errors are raised to the
caller before any benchmark runs.
"""

from enum import Enum


class Phase(Enum):
    """Lifecycle phase in which a benchmark failed."""

    SETUP = "setup"
    RUN = "run"
    TEARDOWN = "teardown"


class BenchmarkError(Exception):
    """Base exception for a failed benchmark lifecycle.

    The original exception is chained as ``__cause__``.
    """

    phase: Phase

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(
            f"{name}: {self.phase.value} failed: {type(cause).__name__}: {cause}"
        )


class SetupError(BenchmarkError):
    """Raised when a benchmark's setup action fails."""

    phase = Phase.SETUP


class RunError(BenchmarkError):
    """Raised when a benchmark's run action fails.

    ``iterations`` is the number of timed invocations that completed
    before the failure; it is informational and never scored.
    """

    phase = Phase.RUN

    def __init__(self, name: str, cause: BaseException, iterations: int = 0) -> None:
        self.iterations = iterations
        super().__init__(name, cause)


class TeardownError(BenchmarkError):
    """Raised when a benchmark's teardown action fails."""

    phase = Phase.TEARDOWN


class TimerAbort(Exception):
    """Raised by Timer when the run action fails mid-measurement."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"run action failed after {iterations} iterations")


class RegistryError(Exception):
    """Base exception for registration errors."""

    pass


class DuplicateBenchmarkError(RegistryError):
    """Raised when a suite contains two benchmarks with the same name."""

    def __init__(self, suite: str, name: str) -> None:
        self.suite = suite
        self.name = name
        super().__init__(f"Benchmark name collision in suite '{suite}': '{name}'")


class DuplicateSuiteError(RegistryError):
    """Raised when two suites share a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Suite name collision: '{name}'")


class SuiteNotFoundError(RegistryError):
    """Raised when a requested suite is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Suite not found: '{name}'")
