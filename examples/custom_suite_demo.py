#!/usr/bin/env python3
"""Demo script showing how to define, run and report a custom suite."""

import sys

from benchscore.benchmarks import (
    Benchmark,
    OutputFormat,
    RunHooks,
    RunResults,
    Suite,
    combine_hooks,
    format_score,
    run_all,
)
from benchscore.models import RunConfig


class SortWorkload:
    """Sort a shuffled list; setup builds the data once per benchmark."""

    def __init__(self, size: int = 20_000) -> None:
        self.size = size
        self._data: list[int] = []

    def setup(self) -> None:
        import random

        self._data = list(range(self.size))
        random.shuffle(self._data)

    def run(self) -> None:
        sorted(self._data)

    def teardown(self) -> None:
        self._data = []


def main():
    """Run a two-benchmark suite and print scores plus a YAML report."""
    print("=" * 60)
    print("Custom Suite Demo")
    print("=" * 60)
    print()

    workload = SortWorkload()
    suite = Suite(
        "Sorting",
        [
            Benchmark(
                "Sort",
                reference=2.0,
                run=workload.run,
                setup=workload.setup,
                teardown=workload.teardown,
            ),
            Benchmark("Sum", reference=0.5, run=lambda: sum(range(100_000))),
        ],
    )

    console = RunHooks(
        on_result=lambda name, score: print(f"  {name}: {format_score(score)}"),
        on_error=lambda name, error: print(f"  {name}: *error* ({error})"),
        on_score=lambda score: print(f"\nScore: {format_score(score)}"),
    )
    results = RunResults()

    # Short floors keep the demo quick; scores are noisier than a full run
    config = RunConfig(min_duration=0.2, min_iterations=8)
    run_all([suite], combine_hooks(console, results.hooks()), config)

    print()
    print("=" * 60)
    print("YAML report:")
    print("=" * 60)
    results.emit(sys.stdout, format=OutputFormat.YAML)


if __name__ == "__main__":
    main()
