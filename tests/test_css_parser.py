"""Tests for CSS rule construction."""

import unittest

from htmlcss import (
    AdjacentSelector,
    ChildSelector,
    ClassSelector,
    CSSParser,
    DescendantSelector,
    GeneralSiblingSelector,
    IdSelector,
    Rule,
    TypeSelector,
    UniversalSelector,
)


def parse(css):
    return CSSParser(css).parse()


class TestSelectors(unittest.TestCase):
    def test_type_selector(self):
        rules = parse("div { color: red; }")
        assert rules == [Rule([TypeSelector("div")], {"color": "red"})]

    def test_class_selector(self):
        rules = parse(".container { width: 100%; }")
        assert len(rules) == 1
        assert rules[0].selectors == (ClassSelector("container"),)
        assert rules[0].declarations == {"width": "100%"}

    def test_id_selector(self):
        rules = parse("#main { display: block; }")
        assert rules[0].selectors == (IdSelector("main"),)
        assert rules[0].declarations == {"display": "block"}

    def test_universal_selector(self):
        rules = parse("* { box-sizing: border-box; }")
        assert rules[0].selectors == (UniversalSelector(),)
        assert rules[0].declarations == {"box-sizing": "border-box"}

    def test_selector_list(self):
        rules = parse("div, p, span { margin: 0; }")
        assert rules[0].selectors == (TypeSelector("div"), TypeSelector("p"), TypeSelector("span"))

    def test_descendant_selector(self):
        rules = parse("div p { font-size: 14px; }")
        assert rules[0].selectors == (DescendantSelector(TypeSelector("div"), TypeSelector("p")),)

    def test_child_selector(self):
        rules = parse("div > p { margin: 10px; }")
        assert rules[0].selectors == (ChildSelector(TypeSelector("div"), TypeSelector("p")),)

    def test_sibling_selectors(self):
        rules = parse("h1 + p, h1 ~ ul { color: red; }")
        assert rules[0].selectors == (
            AdjacentSelector(TypeSelector("h1"), TypeSelector("p")),
            GeneralSiblingSelector(TypeSelector("h1"), TypeSelector("ul")),
        )

    def test_combinators_left_associate(self):
        rules = parse("div p > span { color: red; }")
        expected = ChildSelector(
            DescendantSelector(TypeSelector("div"), TypeSelector("p")),
            TypeSelector("span"),
        )
        assert rules[0].selectors == (expected,)

    def test_compound_without_whitespace_is_descendant(self):
        # No compound selectors: "a.b" chains like "a .b".
        rules = parse("a.external { color: blue; }")
        assert rules[0].selectors == (DescendantSelector(TypeSelector("a"), ClassSelector("external")),)

    def test_combinator_without_right_side_is_ignored(self):
        rules = parse("div > { color: red; }")
        assert rules[0].selectors == (TypeSelector("div"),)

    def test_comments_inside_selectors(self):
        rules = parse("div /* x */ > /* y */ p { color: red; }")
        assert rules[0].selectors == (ChildSelector(TypeSelector("div"), TypeSelector("p")),)

    def test_selector_to_css(self):
        rules = parse("ul li > a.x + *, #id ~ p { color: red; }")
        assert [selector.to_css() for selector in rules[0].selectors] == [
            "ul li > a .x + *",
            "#id ~ p",
        ]


class TestDeclarations(unittest.TestCase):
    def test_multiple_declarations(self):
        rules = parse("div { color: red; background: blue; font-size: 16px; }")
        assert rules[0].declarations == {"color": "red", "background": "blue", "font-size": "16px"}

    def test_last_duplicate_wins(self):
        rules = parse("div { color: red; color: blue; }")
        assert rules[0].declarations == {"color": "blue"}

    def test_multi_token_values(self):
        rules = parse("div { margin: 0 auto; border: 1px solid #ddd; font-family: \"Helvetica Neue\", sans-serif; }")
        assert rules[0].declarations == {
            "margin": "0 auto",
            "border": "1px solid #ddd",
            "font-family": '"Helvetica Neue", sans-serif',
        }

    def test_function_values_keep_parens(self):
        rules = parse("div { color: rgb(0, 128, 255); background: url(a.png) no-repeat; }")
        assert rules[0].declarations == {
            "color": "rgb(0, 128, 255)",
            "background": "url(a.png) no-repeat",
        }

    def test_whitespace_collapses_and_comments_drop(self):
        rules = parse("div { margin :  1px /* a */  2px ; }")
        assert rules[0].declarations == {"margin": "1px 2px"}

    def test_numbers_are_normalized(self):
        rules = parse("p { line-height: 1.50; width: 10.0px; opacity: .5; }")
        assert rules[0].declarations == {"line-height": "1.5", "width": "10px", "opacity": "0.5"}

    def test_tiny_and_negative_zero_numbers(self):
        rules = parse("p { width: 0.00001px; height: 0.0000001px; margin: -0; }")
        assert rules[0].declarations == {"width": "0.00001px", "height": "0.0000001px", "margin": "-0"}

    def test_important(self):
        rules = parse("p { color: red !important; }")
        assert rules[0].declarations == {"color": "red !important"}

    def test_last_declaration_without_semicolon(self):
        rules = parse("p { color: red; margin: 0 }")
        assert rules[0].declarations == {"color": "red", "margin": "0"}

    def test_malformed_declarations_are_dropped(self):
        rules = parse("p { : red; color red; 12: x; margin: ; padding: 1px; }")
        assert rules[0].declarations == {"padding": "1px"}

    def test_empty_block(self):
        rules = parse("p {}")
        assert rules == [Rule([TypeSelector("p")])]

    def test_missing_closing_brace(self):
        rules = parse("p { color: red;")
        assert rules == [Rule([TypeSelector("p")], {"color": "red"})]


class TestRecovery(unittest.TestCase):
    def test_multiple_rules(self):
        css = """
            div { color: red; }
            .container { width: 100%; }
            #main { display: block; }
        """
        rules = parse(css)
        assert [rule.selectors[0] for rule in rules] == [
            TypeSelector("div"),
            ClassSelector("container"),
            IdSelector("main"),
        ]

    def test_empty_input(self):
        assert parse("") == []
        assert parse("   /* only a comment */  ") == []

    def test_garbage_between_rules_is_skipped(self):
        rules = parse("div { color: red; } } ;; ) p { margin: 0; }")
        assert [rule.selectors for rule in rules] == [(TypeSelector("div"),), (TypeSelector("p"),)]

    def test_selector_without_block_is_skipped(self):
        rules = parse("div, ; p { color: red; }")
        assert rules[-1] == Rule([TypeSelector("p")], {"color": "red"})

    def test_at_rule_keyword_is_opaque(self):
        rules = parse("@import url(x.css); p { color: red; }")
        assert rules[-1] == Rule([TypeSelector("p")], {"color": "red"})

    def test_nested_block_terminates(self):
        rules = parse("@media screen { div { color: red; } } p { margin: 0; }")
        assert rules[-1] == Rule([TypeSelector("p")], {"margin": "0"})

    def test_rules_are_never_empty(self):
        for rule in parse(". { a: b } { c: d } ,,, { e: f }"):
            assert rule.selectors

    def test_empty_selector_list_rejected(self):
        with self.assertRaises(ValueError):
            Rule([], {})


if __name__ == "__main__":
    unittest.main()
