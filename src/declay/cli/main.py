"""declay CLI entry point: Click group with subcommands."""

import logging

import click

from declay import __version__


@click.group()
@click.version_option(version=__version__, prog_name="declay")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """declay - build widget trees from XML layouts with CSS-like styles."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from declay.cli.inspect import inspect  # noqa: E402
from declay.cli.styles import styles  # noqa: E402
from declay.cli.validate import validate  # noqa: E402

cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(styles)
