"""Ordered rule table that reshapes Sass-compiled Bootstrap CSS.

Order matters: the newline collapse runs first so that the line-anchored
prefix rules see one declaration per line.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from lessport.normalize.model import LiteralRule, PatternRule, Rule

__all__ = ["RULES", "COLOR_FIXES", "apply_rules"]

# Hex colors the Sass and Less compilers round differently.
COLOR_FIXES: tuple[tuple[str, str], ...] = (
    ("#19692c", "#19692b"),
    ("#ba8b00", "#b98b00"),
    ("#ececf6", "#ececf5"),
    ("#040505", "#040405"),
)

_PREFIXED_DUPLICATE_RE = re.compile(
    r"""
    (?:^\ *-(?:webkit|moz|ms)-(.*?:\ .*?;\n))+   # one or more prefixed lines
    (?=\ *\1)                                    # followed by the bare declaration
    """,
    re.MULTILINE | re.VERBOSE,
)

_MS_FLEXBOX_RE = re.compile(
    r"^ *-ms-flex-.*\n|^ *display: -ms-(?:inline-)?flexbox.*\n",
    re.MULTILINE,
)

_WEBKIT_TRANSFORM_RE = re.compile(
    r"^.*? -webkit-(?:transform|sticky).*;\n",
    re.MULTILINE,
)

_PREFIXED_LEFTOVERS_RE = re.compile(
    r"""
    ^\ *-webkit-box-.*\n                                # old flexbox properties
    | ^.*?:-(?:webkit|moz|ms)-.*?placeholder[^}]+\}\n   # placeholder blocks
    | ^@-webkit-keyframes[\s\S]+?\n\}\n                 # keyframes blocks
    """,
    re.MULTILINE | re.VERBOSE,
)

_SUPPORTS_RE = re.compile(r"^@supports \(\(.*?\) or \((.*?)\)\) \{", re.MULTILINE)

_REPEATING_DECIMAL_RE = re.compile(r"(\d+)\.(\d)\2\2\2\2(\d%)", re.ASCII)


RULES: tuple[Rule, ...] = (
    PatternRule("collapse blank lines", re.compile(r"\n+"), "\n"),
    PatternRule("add leading zeroes", re.compile(r"([^\w\d])\.(\d)", re.ASCII), r"\g<1>0.\2"),
    PatternRule("strip prefixed duplicates", _PREFIXED_DUPLICATE_RE, ""),
    PatternRule("strip ms flexbox", _MS_FLEXBOX_RE, ""),
    PatternRule("strip webkit transform and sticky", _WEBKIT_TRANSFORM_RE, ""),
    PatternRule("strip prefixed leftovers", _PREFIXED_LEFTOVERS_RE, ""),
    PatternRule("simplify @supports", _SUPPORTS_RE, r"@supports (\1) {"),
    PatternRule("strip sourcemap comments", re.compile(r"/\*#.*\n?"), ""),
    *(LiteralRule(f"fix color {old}", old, new) for old, new in COLOR_FIXES),
    PatternRule(
        "extend repeating decimals",
        _REPEATING_DECIMAL_RE,
        lambda m: f"{m.group(1)}.{m.group(2) * 7}{m.group(3)}",
    ),
    LiteralRule("fix 42.857143%", "42.857143%", "42.85714286%"),
    LiteralRule(
        "tap highlight transparent",
        "-webkit-tap-highlight-color: rgba(0, 0, 0, 0);",
        "-webkit-tap-highlight-color: transparent;",
    ),
)


def apply_rules(text: str, rules: Iterable[Rule] = RULES) -> str:
    """Run *text* through each rule in order and return the result."""
    for rule in rules:
        text = rule.apply(text)
    return text
