"""Benchmark suites: ordered benchmarks with failure isolation."""

import random
from collections.abc import Iterable, Iterator

from benchscore.benchmarks.base import Benchmark
from benchscore.benchmarks.errors import BenchmarkError, DuplicateBenchmarkError
from benchscore.benchmarks.hooks import SuiteNotifier
from benchscore.benchmarks.scoring import Scorer
from benchscore.benchmarks.timer import Timer
from benchscore.models.score_models import SuiteScore
from benchscore.utils.logger import Logger


class Suite:
    """A named, ordered collection of benchmarks.

    Registration order is execution order. A suite is read-only once
    constructed.

    Example:
        >>> suite = Suite("Text", [regex_bench, json_bench])
        >>> result = suite.run(notifier)
        >>> result.score  # None if any benchmark failed
    """

    def __init__(self, name: str, benchmarks: Iterable[Benchmark]) -> None:
        """Initialize the suite.

        Args:
            name: Suite name.
            benchmarks: Benchmarks in execution order.

        Raises:
            ValueError: If the name or the benchmark list is empty.
            DuplicateBenchmarkError: If two benchmarks share a name.
        """
        if not name:
            raise ValueError("Suite name must not be empty")

        self._name = name
        self._benchmarks = tuple(benchmarks)
        if not self._benchmarks:
            raise ValueError(f"Suite '{name}' must contain at least one benchmark")

        seen: set[str] = set()
        for benchmark in self._benchmarks:
            if benchmark.name in seen:
                raise DuplicateBenchmarkError(name, benchmark.name)
            seen.add(benchmark.name)

    @property
    def name(self) -> str:
        """Suite name."""
        return self._name

    @property
    def benchmarks(self) -> tuple[Benchmark, ...]:
        """Benchmarks in execution order."""
        return self._benchmarks

    def run(
        self,
        notify: SuiteNotifier,
        timer: Timer | None = None,
        scorer: Scorer | None = None,
        seed: int | None = None,
    ) -> SuiteScore:
        """Run every benchmark in order, isolating failures.

        Args:
            notify: Receives step/result/error notifications.
            timer: Timer to measure with (default Timer()).
            scorer: Scorer to score with (default Scorer()).
            seed: If set, the random module is reseeded before each
                benchmark so randomized workloads are reproducible.

        Returns:
            SuiteScore; ``score`` is None unless every benchmark succeeded.
        """
        timer = timer or Timer()
        scorer = scorer or Scorer()
        log = Logger.component("suite")

        result = SuiteScore(suite=self._name)
        log.info(f"Running suite {self._name} ({len(self)} benchmarks)")

        for benchmark in self._benchmarks:
            notify.step(benchmark.name)

            if seed is not None:
                random.seed(seed)

            try:
                measurement = benchmark.execute(timer)
            except BenchmarkError as e:
                log.warning(f"{self._name}/{e}")
                result.errors[benchmark.name] = str(e)
                notify.error(benchmark.name, e)
                continue

            score = scorer.score_of(
                measurement.elapsed_ms, benchmark.reference, measurement.iterations
            )
            result.benchmark_scores[benchmark.name] = score
            notify.result(benchmark.name, score)

        if not result.errors:
            result.score = scorer.aggregate(result.benchmark_scores.values())
            log.info(f"Suite {self._name} score: {result.score:.1f}")
        else:
            log.info(
                f"Suite {self._name} has no score: "
                f"{len(result.errors)} of {len(self)} benchmarks failed"
            )

        return result

    def __len__(self) -> int:
        """Return number of benchmarks."""
        return len(self._benchmarks)

    def __iter__(self) -> Iterator[Benchmark]:
        return iter(self._benchmarks)

    def __repr__(self) -> str:
        return f"Suite({self._name!r}, {len(self)} benchmarks)"
