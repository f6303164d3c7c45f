"""Selector-group sorting pass.

A selector group is a run of consecutive, equally indented lines that look
like selectors and end in an opening brace::

    .foo,
    .bar {

The selectors of each group are sorted and written one per line so that
Sass and Less output line up regardless of the order the compiler emitted
them in.
"""

from __future__ import annotations

import re
import string

__all__ = ["sort_selectors"]

_SELECTOR_START = frozenset("[.*:-" + string.ascii_lowercase)
_WHITESPACE_RE = re.compile(r"\s+")


def _indent_of(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" "))]


def _starts_selector(line: str, indent: str) -> bool:
    """Return True if *line* has exactly *indent* followed by a selector character."""
    if not line.startswith(indent):
        return False
    rest = line[len(indent):]
    return rest[:1] in _SELECTOR_START or rest.startswith("@-")


def _brace_position(line: str, indent: str) -> int:
    """Index of the ` {` closing the selector text on *line*, or -1.

    The selector text may not contain ``;`` or ``/``, so only the part of the
    line before the first of those is searched.
    """
    end = len(line)
    for stop in (";", "/"):
        idx = line.find(stop, len(indent))
        if idx != -1:
            end = min(end, idx)
    # The selector needs at least one character before the brace.
    return line.rfind(" {", len(indent) + 1, end + 1)


def _can_continue(line: str, indent: str) -> bool:
    rest = line[len(indent):]
    return ";" not in rest and "/" not in rest


def _format_group(selector_text: str, indent: str) -> str:
    selectors = sorted(
        _WHITESPACE_RE.sub(" ", selector).strip()
        for selector in selector_text.replace("\n", " ").split(",")
    )
    return indent + f",\n{indent}".join(selectors)


def sort_selectors(text: str) -> str:
    """Sort the selectors of every selector group in *text*."""
    lines = text.split("\n")
    out: list[str] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        indent = _indent_of(line)
        if not _starts_selector(line, indent):
            out.append(line)
            i += 1
            continue

        # Longest run of selector-looking lines sharing this indent.
        run_end = i
        while (
            _can_continue(lines[run_end], indent)
            and run_end + 1 < len(lines)
            and _starts_selector(lines[run_end + 1], indent)
        ):
            run_end += 1

        # Back off to the last line in the run that opens a block.
        last, brace = run_end, -1
        while last >= i:
            brace = _brace_position(lines[last], indent)
            if brace != -1:
                break
            last -= 1

        if brace == -1:
            out.append(line)
            i += 1
            continue

        selector_text = "\n".join(lines[i:last] + [lines[last][:brace]])
        out.append(_format_group(selector_text, indent) + lines[last][brace:])
        i = last + 1
    return "\n".join(out)
