"""Tests for selector sorting and the full normalize pipeline."""

from lessport.normalize import normalize, sort_selectors


SAMPLE = (
    ":root {\n"
    "  --blue: #007bff;\n"
    "}\n"
    "\n"
    "\n"
    ".btn-success:focus, .btn-success.focus {\n"
    "  box-shadow: 0 0 0 .2rem #19692c;\n"
    "}\n"
    ".sticky-top {\n"
    "  position: -webkit-sticky;\n"
    "  position: sticky;\n"
    "}\n"
    ".col-2 {\n"
    "  -ms-flex: 0 0 16.666667%;\n"
    "  flex: 0 0 16.666667%;\n"
    "  max-width: 16.666667%;\n"
    "}\n"
    "/*# sourceMappingURL=bootstrap.css.map */"
)

EXPECTED = (
    ":root {\n"
    "  --blue: #007bff;\n"
    "}\n"
    ".btn-success.focus,\n"
    ".btn-success:focus {\n"
    "  box-shadow: 0 0 0 0.2rem #19692b;\n"
    "}\n"
    ".sticky-top {\n"
    "  position: sticky;\n"
    "}\n"
    ".col-2 {\n"
    "  flex: 0 0 16.66666667%;\n"
    "  max-width: 16.66666667%;\n"
    "}\n"
)


# ---------------------------------------------------------------------------
# Selector sorting
# ---------------------------------------------------------------------------


class TestSortSelectors:
    def test_sorts_multiline_group(self):
        assert sort_selectors(".foo,\n.bar {\n  color: red;\n}\n") == ".bar,\n.foo {\n  color: red;\n}\n"

    def test_splits_single_line_group(self):
        assert sort_selectors("b, a, .c {\n}\n") == ".c,\na,\nb {\n}\n"

    def test_keeps_indentation(self):
        src = "@media (min-width: 576px) {\n  .b,\n  .a {\n    top: 0;\n  }\n}\n"
        expected = "@media (min-width: 576px) {\n  .a,\n  .b {\n    top: 0;\n  }\n}\n"
        assert sort_selectors(src) == expected

    def test_collapses_whitespace_inside_selectors(self):
        assert sort_selectors(".c,\n.a  >  .b {\n}\n") == ".a > .b,\n.c {\n}\n"

    def test_single_selector_untouched(self):
        src = ".navbar {\n  display: flex;\n}\n"
        assert sort_selectors(src) == src

    def test_declarations_are_not_selectors(self):
        src = "a {\n  color: red;\n  border-top: 0;\n}\n"
        assert sort_selectors(src) == src

    def test_run_without_brace_untouched(self):
        src = "b,\na,\n}\n"
        assert sort_selectors(src) == src

    def test_plain_string_ordering(self):
        assert sort_selectors("b,\n[data-x] {\n}\n") == "[data-x],\nb {\n}\n"

    def test_mixed_indent_not_joined(self):
        src = ".b,\n  .a {\n}\n"
        assert sort_selectors(src) == src

    def test_pseudo_elements(self):
        assert sort_selectors("::before,\n::after {\n}\n") == "::after,\n::before {\n}\n"

    def test_backs_off_to_last_line_opening_a_block(self):
        src = ".b,\n.a { top: 0 }\n.c\n"
        assert sort_selectors(src) == ".a,\n.b { top: 0 }\n.c\n"


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------


class TestNormalize:
    def test_sample(self):
        assert normalize(SAMPLE) == EXPECTED

    def test_idempotent(self):
        once = normalize(SAMPLE)
        assert normalize(once) == once

    def test_idempotent_with_repeated_tap_highlight(self):
        src = (
            "a {\n  -webkit-tap-highlight-color: rgba(0, 0, 0, 0);\n}\n"
            "b {\n  -webkit-tap-highlight-color: rgba(0, 0, 0, 0);\n}\n"
        )
        once = normalize(src)
        assert normalize(once) == once
        assert once.count("-webkit-tap-highlight-color: transparent;") == 2

    def test_pure(self):
        src = str(SAMPLE)
        assert normalize(src) == normalize(src)
        assert src == SAMPLE

    def test_prefixed_duplicate(self):
        assert normalize("-webkit-flex: 1;\nflex: 1;\n") == "flex: 1;\n"

    def test_leading_zero(self):
        assert normalize("color:.5;") == "color:0.5;"
        assert normalize("color:1.5;") == "color:1.5;"

    def test_color_global(self):
        assert normalize("#19692c, #19692c") == "#19692b, #19692b"

    def test_selector_block(self):
        assert normalize(".foo,\n.bar {\n") == ".bar,\n.foo {\n"

    def test_fractional_percentage_not_extended(self):
        assert normalize("42.857143%") == "42.85714286%"
        assert normalize("42.85714286%") == "42.85714286%"

    def test_supports_then_sort(self):
        src = "@supports ((position: -webkit-sticky) or (position: sticky)) {\n  .sticky-top {\n    position: sticky;\n  }\n}\n"
        expected = "@supports (position: sticky) {\n  .sticky-top {\n    position: sticky;\n  }\n}\n"
        assert normalize(src) == expected

    def test_empty(self):
        assert normalize("") == ""
