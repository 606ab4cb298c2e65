"""List command - displays registered suites and their benchmarks."""

import click

from benchscore.benchmarks.registry import SuiteRegistry


def list_suites(registry: SuiteRegistry) -> None:
    """Print every suite with its benchmarks and reference times."""
    click.echo("Available Suites:")
    click.echo("-" * 50)

    suites = registry.list_suites()
    if not suites:
        click.echo("  No suites registered.")
        return

    for suite in suites:
        click.echo(f"  {suite['name']}")
        for bench in suite["benchmarks"]:
            click.echo(f"      {bench['name']:<20} reference {bench['reference']} ms")
        click.echo()

    click.echo("-" * 50)
    click.echo(
        f"Total: {len(registry)} suites, {registry.count_benchmarks()} benchmarks"
    )
