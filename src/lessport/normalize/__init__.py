from lessport.normalize.model import LiteralRule, PatternRule, Rule
from lessport.normalize.rules import COLOR_FIXES, RULES, apply_rules
from lessport.normalize.selectors import sort_selectors

__all__ = [
    "COLOR_FIXES",
    "LiteralRule",
    "PatternRule",
    "RULES",
    "Rule",
    "apply_rules",
    "normalize",
    "sort_selectors",
]


def normalize(text: str) -> str:
    """Reshape Sass-compiled CSS so it can be diffed against Less-compiled CSS.

    Applies :data:`RULES` in order, then sorts selector groups. Pure: the
    same input always yields the same output.
    """
    return sort_selectors(apply_rules(text))
