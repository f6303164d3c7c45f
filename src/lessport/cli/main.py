"""lessport CLI entry point: Click group with subcommands."""

import logging

import click

from lessport import __version__
from lessport.config import LessPortConfig


@click.group()
@click.version_option(version=__version__, prog_name="lessport")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """lessport - compare Sass- and Less-compiled Bootstrap CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj.setdefault("config", LessPortConfig())


# Import and register subcommands
from lessport.cli.format_css import format_css  # noqa: E402
from lessport.cli.download import download  # noqa: E402
from lessport.cli.compare import compare  # noqa: E402

cli.add_command(format_css)
cli.add_command(download)
cli.add_command(compare)
