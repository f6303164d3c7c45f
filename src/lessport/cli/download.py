"""CLI command: lessport download -- fetch a Bootstrap release archive."""

from __future__ import annotations

import functools
import sys

import click

from lessport._http import HttpClient
from lessport.errors import LessPortError
from lessport.reference import download_release
from lessport.tags import fetch_tag_data


@click.command()
@click.argument("version", required=False)
@click.option(
    "--dest",
    default="./",
    show_default=True,
    help="Directory to save the archive in (with trailing slash)",
)
@click.pass_context
def download(ctx: click.Context, version: str | None, dest: str) -> None:
    """Download the source archive of a Bootstrap release."""
    config = ctx.obj["config"]

    with HttpClient(config) as client:
        resolve = functools.partial(fetch_tag_data, client=client, config=config)
        try:
            archive = download_release(version, dest, client=client, resolve=resolve)
        except (LessPortError, ValueError, OSError) as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)

    click.echo(str(archive))
