"""ICSS CLI entry point: Click group with subcommands."""

import logging

import click

from icss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="icss")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler progress to stderr")
def cli(verbose: bool) -> None:
    """ICSS - compile stylesheets with variables and conditionals to CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from icss.cli.check import check  # noqa: E402
from icss.cli.build import compile_command  # noqa: E402

cli.add_command(check)
cli.add_command(compile_command)
