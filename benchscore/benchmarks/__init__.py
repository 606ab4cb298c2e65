"""Benchmark engine for benchscore.

This module provides:
- Benchmark: A named workload with setup/run/teardown
- Timer: Repeated timing until duration and iteration floors are met
- Scorer: Reference-time normalization and geometric-mean aggregation
- Suite: Ordered benchmarks with failure isolation
- Runner / run_all: Runs suites, reports through RunHooks
- SuiteRegistry: Explicit suite registration
- RunResults: Collects a run and emits JSON/YAML/text

Quick Start:
    from benchscore.benchmarks import Benchmark, RunResults, Suite, run_all

    suite = Suite("Sorting", [Benchmark("Sort", reference=2.0, run=work)])
    results = RunResults()
    run_all([suite], results.hooks())
    results.emit_stdout()
"""

from benchscore.benchmarks.base import Benchmark
from benchscore.benchmarks.errors import (
    BenchmarkError,
    DuplicateBenchmarkError,
    DuplicateSuiteError,
    Phase,
    RegistryError,
    RunError,
    SetupError,
    SuiteNotFoundError,
    TeardownError,
)
from benchscore.benchmarks.hooks import RunHooks, combine_hooks
from benchscore.benchmarks.registry import SuiteRegistry, default_registry
from benchscore.benchmarks.results import OutputFormat, RunResults
from benchscore.benchmarks.runner import Runner, run_all
from benchscore.benchmarks.scoring import (
    NORMALIZATION_CONSTANT,
    Scorer,
    format_score,
    geometric_mean,
)
from benchscore.benchmarks.suite import Suite
from benchscore.benchmarks.timer import Timer

__all__ = [
    "NORMALIZATION_CONSTANT",
    # Definition
    "Benchmark",
    # Errors
    "BenchmarkError",
    "DuplicateBenchmarkError",
    "DuplicateSuiteError",
    "OutputFormat",
    "Phase",
    "RegistryError",
    "RunError",
    # Execution
    "RunHooks",
    "RunResults",
    "Runner",
    "Scorer",
    "SetupError",
    "Suite",
    "SuiteNotFoundError",
    "SuiteRegistry",
    "TeardownError",
    "Timer",
    "combine_hooks",
    "default_registry",
    "format_score",
    "geometric_mean",
    "run_all",
]
