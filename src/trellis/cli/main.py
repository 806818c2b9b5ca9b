"""Trellis CLI entry point: Click group with subcommands."""

import logging

import click

from trellis import __version__


@click.group()
@click.version_option(version=__version__, prog_name="trellis")
@click.option(
    "--log-level",
    default="WARNING",
    envvar="TRELLIS_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(log_level: str) -> None:
    """Trellis - markup templates and attribute cascades for UI component trees."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from trellis.cli.inspect import inspect  # noqa: E402
from trellis.cli.resolve import resolve  # noqa: E402
from trellis.cli.validate import validate  # noqa: E402

cli.add_command(inspect)
cli.add_command(validate)
cli.add_command(resolve)
