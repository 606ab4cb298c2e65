#!/usr/bin/env python3
"""benchscore CLI - Command-line interface for benchscore."""

import sys

import click

from benchscore.utils.env import get_env
from benchscore.utils.logger import Logger


@click.group()
def benchscore():
    """Benchmark execution and scoring harness."""
    if not Logger.is_configured():
        # WARNING by default so stdout carries only benchmark output
        Logger.configure(
            level=get_env("BENCHSCORE_LOG_LEVEL", default="WARNING"), timestamps=True
        )


@benchscore.command()
@click.option(
    "--suite",
    "-s",
    "suites",
    multiple=True,
    help="Suite to run (repeatable, run in the given order). Default: all.",
)
@click.option(
    "--min-duration",
    type=float,
    default=None,
    help="Minimum measured time per benchmark in seconds "
    "[env BENCHSCORE_MIN_DURATION, default 1.0]",
)
@click.option(
    "--min-iterations",
    type=int,
    default=None,
    help="Minimum timed iterations per benchmark "
    "[env BENCHSCORE_MIN_ITERATIONS, default 32]",
)
@click.option(
    "--warmup",
    type=int,
    default=None,
    help="Untimed warmup iterations [env BENCHSCORE_WARMUP_ITERATIONS, default 1]",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for the random module before each benchmark [env BENCHSCORE_SEED]",
)
@click.option(
    "--no-seed",
    is_flag=True,
    help="Do not reseed the random module between benchmarks",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default=None,
    help="Emit a full report after the run",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write the report to a file instead of stdout",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging and print error tracebacks",
)
def run(
    suites,
    min_duration,
    min_iterations,
    warmup,
    seed,
    no_seed,
    output_format,
    output,
    debug,
):
    r"""Run benchmark suites and print scores.

    \b
    Examples:
      benchscore run                          # Run every built-in suite
      benchscore run -s Text -s Crypto        # Run selected suites
      benchscore run --min-duration 0.2       # Faster, noisier run
      benchscore run --format yaml -o r.yaml  # Save a YAML report
    """
    from pydantic import ValidationError

    from benchscore.benchmarks.registry import default_registry
    from benchscore.commands.run_cmd import run_benchmarks
    from benchscore.models.config_models import RunConfig
    from benchscore.utils.env import EnvVarError

    if debug:
        Logger.set_level("DEBUG")

    try:
        config = RunConfig.from_env(
            min_duration=min_duration,
            min_iterations=min_iterations,
            warmup_iterations=warmup,
            seed=seed,
        )
    except (ValidationError, EnvVarError) as e:
        click.echo(f"Error: Invalid run configuration: {e}", err=True)
        sys.exit(2)

    if no_seed:
        config = config.model_copy(update={"seed": None})

    success = run_benchmarks(
        default_registry(),
        suites,
        config,
        output_format=output_format,
        output=output,
        debug=debug,
    )
    if not success:
        sys.exit(1)


@benchscore.command(name="list")
def list_command():
    """List suites and their benchmarks."""
    from benchscore.benchmarks.registry import default_registry
    from benchscore.commands.list_cmd import list_suites

    list_suites(default_registry())


@benchscore.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display benchscore version information."""
    from benchscore.commands.version_cmd import run_version

    if verbose:
        Logger.set_level("DEBUG")

    run_version(verbose=verbose)


if __name__ == "__main__":
    benchscore()
