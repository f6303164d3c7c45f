"""Reference-file workflows: format Sass-compiled CSS, download releases, compare."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Callable, Optional

from lessport import fs
from lessport._http import HttpClient
from lessport.config import LessPortConfig
from lessport.errors import LessPortError, MissingInputError, ResolutionError, prefix_message
from lessport.normalize import normalize
from lessport.tags import TagData

log = logging.getLogger(__name__)

Resolver = Callable[[Optional[str]], TagData]


def reference_css_path(name: str, config: LessPortConfig) -> Path:
    """Return ``<reference_dir>/bootstrap-<name>.css``."""
    return Path(config.reference_dir) / f"bootstrap-{name}.css"


def _resolve(version: str | None, resolve: Resolver) -> TagData:
    try:
        return resolve(version)
    except (LessPortError, OSError) as exc:
        raise ResolutionError(
            prefix_message(f"Error fetching Bootstrap tag data for version {version}", exc),
            cause=exc,
        ) from exc


def format_reference_css(
    version: str | None,
    *,
    config: LessPortConfig,
    resolve: Resolver,
) -> Path:
    """Normalize the Sass-compiled reference CSS for *version* in place.

    Raises :class:`MissingInputError` if the reference file has not been
    copied into ``config.reference_dir`` yet.
    """
    tag = _resolve(version, resolve)
    path = reference_css_path(tag.name, config)

    if not fs.path_exists(path):
        raise MissingInputError(
            f'Path "{path}" does not exist. Have you copied the Bootstrap CSS file '
            "to the reference directory yet?",
            path=str(path),
        )

    contents = fs.read_text(path)
    log.info("Formatting Sass-compiled CSS...")
    fs.write_text(path, normalize(contents))
    log.info("Done.")
    return path


def download_release(
    version: str | None,
    download_path: str,
    *,
    client: HttpClient,
    resolve: Resolver,
) -> Path:
    """Download the zipball of *version* as ``<download_path>bootstrap-<name>.zip``."""
    tag = _resolve(version, resolve)
    if not tag.zipball_url:
        raise ResolutionError(f"Tag {tag.name} has no zipball URL")
    return client.download(tag.zipball_url, download_path, f"bootstrap-{tag.name}")


def compare_css(sass_path: str, less_path: str) -> list[str]:
    """Diff normalized Sass-compiled CSS against Less-compiled CSS.

    Returns unified-diff lines; an empty list means the files match.
    """
    sass = normalize(fs.read_text(sass_path)).splitlines(keepends=True)
    less = fs.read_text(less_path).splitlines(keepends=True)
    return list(difflib.unified_diff(less, sass, fromfile=less_path, tofile=sass_path))
