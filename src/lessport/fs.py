"""Filesystem helpers that report failures as lessport errors."""
from __future__ import annotations

import os
from pathlib import Path

from lessport.errors import FileAccessError, prefix_message


def path_exists(path: str | os.PathLike[str]) -> bool:
    return os.path.exists(path)


def read_text(path: str | os.PathLike[str]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise FileAccessError(
            prefix_message(f'Error reading file "{path}"', exc), path=str(path), cause=exc
        ) from exc


def write_text(path: str | os.PathLike[str], text: str) -> None:
    try:
        # newline="" keeps "\n" as-is on every platform
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise FileAccessError(
            prefix_message(f'Error writing file "{path}"', exc), path=str(path), cause=exc
        ) from exc
