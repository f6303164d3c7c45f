"""Rule types for the CSS normalizer: LiteralRule and PatternRule."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Union


@dataclass(frozen=True)
class LiteralRule:
    """Replace a plain substring.

    ``count`` follows :meth:`str.replace`: ``-1`` replaces every occurrence,
    ``1`` only the first.
    """

    description: str
    old: str
    new: str
    count: int = -1

    def apply(self, text: str) -> str:
        return text.replace(self.old, self.new, self.count)


@dataclass(frozen=True)
class PatternRule:
    """Substitute every match of a compiled regular expression.

    ``replacement`` is either a template (``\\1``, ``\\g<name>``) or a
    callable receiving the match object.
    """

    description: str
    pattern: re.Pattern[str]
    replacement: Union[str, Callable[[re.Match[str]], str]]

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


Rule = Union[LiteralRule, PatternRule]
