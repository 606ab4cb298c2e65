"""Built-in workload suites.

Each module exposes ``build_suite()``; suites are registered as factories
so their data is only generated when a suite is selected.
"""

from benchscore.benchmarks.registry import SuiteRegistry
from benchscore.workloads import crypto, numeric, text


def register_builtin_suites(registry: SuiteRegistry) -> None:
    """Register the Text, Crypto and Numeric suites, in that order."""
    for module in (text, crypto, numeric):
        registry.suite(module.SUITE_NAME)(module.build_suite)


__all__ = ["register_builtin_suites"]
