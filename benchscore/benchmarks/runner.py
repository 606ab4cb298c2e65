"""Runner for executing suites and reporting through hooks.

Usage:
    from benchscore.benchmarks.runner import Runner
    from benchscore.benchmarks.hooks import RunHooks
    from benchscore.models import RunConfig

    runner = Runner(RunConfig(min_duration=0.5))
    runner.run_all(suites, RunHooks(on_score=print))
"""

from collections.abc import Sequence

from benchscore.benchmarks.errors import BenchmarkError, DuplicateSuiteError
from benchscore.benchmarks.hooks import RunHooks
from benchscore.benchmarks.scoring import Scorer
from benchscore.benchmarks.suite import Suite
from benchscore.benchmarks.timer import Timer
from benchscore.models.config_models import RunConfig
from benchscore.utils.logger import Logger


class _RunContext:
    """Mutable state for one run_all() call.

    Implements SuiteNotifier so suites report into it; it translates
    per-benchmark steps into global progress and forwards to the caller.
    """

    def __init__(self, hooks: RunHooks, total: int) -> None:
        self.on_step = getattr(hooks, "on_step", None)
        self.on_error = getattr(hooks, "on_error", None)
        self.on_result = getattr(hooks, "on_result", None)
        self.total = total
        self.completed = 0
        self.success = True
        self.suite_scores: list[float] = []

    @property
    def percentage(self) -> float:
        return self.completed / self.total * 100

    def step(self, name: str) -> None:
        self.completed += 1
        if self.on_step is not None:
            self.on_step(name, self.percentage)

    def error(self, name: str, error: BenchmarkError) -> None:
        self.success = False
        if self.on_error is not None:
            self.on_error(name, error)

    def result(self, name: str, score: float) -> None:
        if self.on_result is not None:
            self.on_result(name, score)


class Runner:
    """Runs suites in order and computes the overall score.

    Progress is a single counter across all suites. Any benchmark error
    anywhere marks the run failed, and a failed run never reports an
    overall score.

    Example:
        >>> results = RunResults()
        >>> Runner().run_all(default_registry().get_all_suites(), results.hooks())
        >>> results.emit_stdout()
    """

    def __init__(
        self, config: RunConfig | None = None, timer: Timer | None = None
    ) -> None:
        """Initialize the runner.

        Args:
            config: Timing/scoring configuration (default RunConfig()).
            timer: Timer to use instead of the one built from ``config``.
        """
        self.config = config or RunConfig()
        self._timer = timer

    def run_all(self, suites: Sequence[Suite], hooks: RunHooks | None = None) -> None:
        """Run every suite and report exclusively through ``hooks``.

        Args:
            suites: Suites in execution order.
            hooks: Notification hooks; missing hooks are no-ops.

        Raises:
            DuplicateSuiteError: If two suites share a name.
        """
        hooks = hooks or RunHooks()
        log = Logger.component("runner")

        names: set[str] = set()
        for suite in suites:
            if suite.name in names:
                raise DuplicateSuiteError(suite.name)
            names.add(suite.name)

        total = sum(len(suite) for suite in suites)
        if total == 0:
            log.info("No suites to run")
            return

        context = _RunContext(hooks, total)
        timer = self._timer or self.config.timer()
        scorer: Scorer = self.config.scorer()

        log.info(f"Running {len(suites)} suites, {total} benchmarks")
        for suite in suites:
            suite_result = suite.run(
                context, timer=timer, scorer=scorer, seed=self.config.seed
            )
            if suite_result.score is not None:
                context.suite_scores.append(suite_result.score)

        if not context.success:
            log.warning("Run had errors; no overall score")
            return

        overall = scorer.aggregate(context.suite_scores)
        log.info(f"Overall score: {overall:.1f}")
        on_score = getattr(hooks, "on_score", None)
        if on_score is not None:
            on_score(overall)


def run_all(
    suites: Sequence[Suite],
    hooks: RunHooks | None = None,
    config: RunConfig | None = None,
) -> None:
    """Run ``suites`` with a fresh Runner. See Runner.run_all()."""
    Runner(config).run_all(suites, hooks)
