"""Run command - execute benchmark suites and print progress and scores.

CLI Examples:
    benchscore run                              # All built-in suites
    benchscore run -s Text -s Numeric           # Selected suites, in order
    benchscore run --min-duration 0.2           # Shorter measurement floor
    benchscore run --format json -o out.json    # Also write a JSON report
"""

import math
import sys
import traceback

import click

from benchscore.benchmarks.errors import BenchmarkError, SuiteNotFoundError
from benchscore.benchmarks.hooks import RunHooks, combine_hooks
from benchscore.benchmarks.registry import SuiteRegistry
from benchscore.benchmarks.results import OutputFormat, RunResults
from benchscore.benchmarks.runner import Runner
from benchscore.benchmarks.scoring import format_score
from benchscore.models.config_models import RunConfig


class ConsoleReporter:
    """Prints one line per notification, in the classic harness format.

    Running: 14% completed.
    Regex: 1032
    JSON: *error*
    Score: 987
    """

    def __init__(self, debug: bool = False) -> None:
        self.debug = debug

    def hooks(self) -> RunHooks:
        """Return RunHooks that print to the console."""
        return RunHooks(
            on_step=self.on_step,
            on_error=self.on_error,
            on_result=self.on_result,
            on_score=self.on_score,
        )

    def on_step(self, name: str, percentage: float) -> None:
        del name
        click.echo(f"Running: {math.floor(percentage + 0.5)}% completed.")

    def on_result(self, name: str, score: float) -> None:
        click.echo(f"{name}: {format_score(score)}")

    def on_error(self, name: str, error: BenchmarkError) -> None:
        click.echo(f"{name}: *error*")
        if self.debug:
            click.echo(f"  {error}", err=True)
            traceback.print_exception(error.cause, file=sys.stderr)

    def on_score(self, score: float) -> None:
        click.echo(f"Score: {format_score(score)}")


def run_benchmarks(
    registry: SuiteRegistry,
    suite_names: tuple[str, ...],
    config: RunConfig,
    output_format: str | None = None,
    output: str | None = None,
    debug: bool = False,
) -> bool:
    """Run the selected suites and report to the console.

    Args:
        registry: Registry to select suites from.
        suite_names: Suite names in run order; empty means all suites.
        config: Timing and scoring configuration.
        output_format: "text", "json" or "yaml" report after the run.
        output: File for the report (default stdout).
        debug: Print error details and tracebacks.

    Returns:
        True if every benchmark succeeded.
    """
    try:
        suites = (
            registry.get_suites(suite_names)
            if suite_names
            else registry.get_all_suites()
        )
    except SuiteNotFoundError as e:
        valid = ", ".join(registry.names)
        click.echo(f"Error: {e}. Valid: {valid}", err=True)
        sys.exit(2)

    results = RunResults()
    hooks = combine_hooks(ConsoleReporter(debug=debug).hooks(), results.hooks())
    Runner(config).run_all(suites, hooks)

    if output_format or output:
        fmt = OutputFormat(output_format or "json")
        if output:
            results.emit(output, fmt)
            click.echo(f"\nResults saved to: {output}")
        else:
            results.emit(sys.stdout, fmt)

    return results.success
