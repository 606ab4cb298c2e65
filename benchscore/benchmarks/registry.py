"""Registry for explicit registration of benchmark suites.

Usage:
    from benchscore.benchmarks.registry import SuiteRegistry

    registry = SuiteRegistry()

    # Register a ready-made suite
    registry.register(Suite("Sorting", [sort_bench]))

    # Or register a factory; it is built on first access
    @registry.suite("Text")
    def text_suite() -> Suite:
        return Suite("Text", [...])

    suites = registry.get_all_suites()
"""

from collections.abc import Callable, Iterable
from typing import Any

from benchscore.benchmarks.errors import DuplicateSuiteError, SuiteNotFoundError
from benchscore.benchmarks.suite import Suite

SuiteFactory = Callable[[], Suite]


class SuiteRegistry:
    """Name-keyed, ordered collection of suites.

    Suites are registered in code, never discovered from disk. Factories
    let expensive workload data be built only when a suite is selected.
    Registration order is the default run order.

    Raises DuplicateSuiteError if two suites share a name.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._factories: dict[str, SuiteFactory] = {}
        self._built: dict[str, Suite] = {}

    def register(self, suite: Suite) -> Suite:
        """Register a constructed suite.

        Args:
            suite: The suite to add.

        Returns:
            The same suite.

        Raises:
            DuplicateSuiteError: If the name is already registered.
        """
        self._check_free(suite.name)
        self._factories[suite.name] = lambda: suite
        self._built[suite.name] = suite
        return suite

    def suite(self, name: str) -> Callable[[SuiteFactory], SuiteFactory]:
        """Decorator registering a suite factory under ``name``.

        Raises:
            DuplicateSuiteError: If the name is already registered.
        """

        def decorator(factory: SuiteFactory) -> SuiteFactory:
            self._check_free(name)
            self._factories[name] = factory
            return factory

        return decorator

    def _check_free(self, name: str) -> None:
        if name in self._factories:
            raise DuplicateSuiteError(name)

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def get_suite(self, name: str) -> Suite:
        """Get a suite by name, building it on first access.

        Args:
            name: Suite name; matched case-insensitively if no exact match.

        Raises:
            SuiteNotFoundError: If no suite has that name.
            ValueError: If a factory returns a suite with a different name.
        """
        key = self._resolve(name)
        if key not in self._built:
            suite = self._factories[key]()
            if suite.name != key:
                raise ValueError(
                    f"Factory registered as '{key}' built suite '{suite.name}'"
                )
            self._built[key] = suite
        return self._built[key]

    def get_suites(self, names: Iterable[str]) -> list[Suite]:
        """Get several suites in the given order."""
        return [self.get_suite(name) for name in names]

    def get_all_suites(self) -> list[Suite]:
        """Get every registered suite in registration order."""
        return [self.get_suite(name) for name in self._factories]

    def count_benchmarks(self, names: Iterable[str] | None = None) -> int:
        """Count benchmarks across the named suites (default: all)."""
        suites = self.get_all_suites() if names is None else self.get_suites(names)
        return sum(len(suite) for suite in suites)

    def list_suites(self) -> list[dict[str, Any]]:
        """Get a summary of all registered suites.

        Returns:
            List of dicts with name and benchmarks (name, reference).
        """
        return [
            {
                "name": suite.name,
                "benchmarks": [
                    {"name": b.name, "reference": b.reference} for b in suite
                ],
            }
            for suite in self.get_all_suites()
        ]

    def _resolve(self, name: str) -> str:
        if name in self._factories:
            return name
        lowered = name.lower()
        for registered in self._factories:
            if registered.lower() == lowered:
                return registered
        raise SuiteNotFoundError(name)

    @property
    def names(self) -> list[str]:
        """Registered suite names in registration order."""
        return list(self._factories)

    def __len__(self) -> int:
        """Return number of registered suites."""
        return len(self._factories)

    def __contains__(self, name: str) -> bool:
        """Check if a suite is registered (exact name)."""
        return name in self._factories


_DEFAULT_REGISTRY: SuiteRegistry | None = None


def default_registry() -> SuiteRegistry:
    """Return the registry holding the built-in workload suites."""
    global _DEFAULT_REGISTRY

    if _DEFAULT_REGISTRY is None:
        from benchscore.workloads import register_builtin_suites

        registry = SuiteRegistry()
        register_builtin_suites(registry)
        _DEFAULT_REGISTRY = registry
    return _DEFAULT_REGISTRY
