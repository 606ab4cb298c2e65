"""
Version command - displays benchscore version information
"""

import click

from benchscore.version import BENCHSCORE_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display benchscore version information.

    Args:
        verbose: If True, show additional details like full hash and date
    """
    if verbose:
        click.echo(f"benchscore version {BENCHSCORE_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        major, minor, patch = BENCHSCORE_VERSION.semver()
        click.echo(f"  Semantic Version: {major}.{minor}.{patch}")
        click.echo(f"  Build Date:       {BENCHSCORE_VERSION.date_string()}")
        click.echo(f"  Package Hash:     {BENCHSCORE_VERSION.hash}")
    else:
        click.echo(f"benchscore {BENCHSCORE_VERSION}")
