"""CLI command: lessport compare -- diff normalized Sass CSS against Less CSS."""

from __future__ import annotations

import sys

import click

from lessport.errors import LessPortError
from lessport.reference import compare_css


@click.command()
@click.argument("sass_css", type=click.Path(exists=True, dir_okay=False))
@click.argument("less_css", type=click.Path(exists=True, dir_okay=False))
def compare(sass_css: str, less_css: str) -> None:
    """Compare a Sass-compiled CSS file with a Less-compiled one.

    The Sass file is normalized in memory first. Exits with status 1 when
    the files differ.
    """
    try:
        diff = compare_css(sass_css, less_css)
    except LessPortError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not diff:
        click.echo("No differences.")
        return

    click.echo("".join(diff), nl=False)
    sys.exit(1)
