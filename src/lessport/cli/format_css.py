"""CLI command: lessport format-css -- normalize a Sass-compiled reference file."""

from __future__ import annotations

import functools
import sys
from dataclasses import replace

import click

from lessport._http import HttpClient
from lessport.errors import LessPortError, MissingInputError
from lessport.reference import format_reference_css
from lessport.tags import fetch_tag_data


@click.command("format-css")
@click.argument("version", required=False)
@click.option(
    "--reference-dir",
    default=None,
    help="Directory holding bootstrap-<version>.css",
)
@click.pass_context
def format_css(ctx: click.Context, version: str | None, reference_dir: str | None) -> None:
    """Format a Sass-compiled Bootstrap CSS file for comparison with Less output.

    VERSION defaults to the newest Bootstrap tag.
    """
    config = ctx.obj["config"]
    if reference_dir:
        config = replace(config, reference_dir=reference_dir)

    with HttpClient(config) as client:
        resolve = functools.partial(fetch_tag_data, client=client, config=config)
        try:
            path = format_reference_css(version, config=config, resolve=resolve)
        except MissingInputError as exc:
            click.echo(str(exc), err=True)
            sys.exit(1)
        except LessPortError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)

    click.echo(f"Formatted {path}")
