"""Seeded random inputs: every parse must terminate and return a list."""

import random
import unittest

from htmlcss import CSSParser, CSSTokenizer, HTMLParser, HTMLTokenizer, NestingDepthError

TAGS = ["div", "span", "p", "a", "img", "br", "ul", "li", "table", "td", "input", "DIV", "Br"]
ATTRIBUTES = ["id", "class", "href", "src", "data-x", "disabled", "x"]
ATTRIBUTE_VALUES = ["x", "\"y z\"", "'q", ""]
HTML_FRAGMENTS = ["<", ">", "/", "/>", "</", "<!", "<!--", "-->", "<!DOCTYPE", "=", '"', "'", " ", "\n", "&amp;", "\x00", "\ufeff"]
CSS_FRAGMENTS = [
    "{", "}", "(", ")", "[", "]", ":", ";", ",", ".", "#", "@", "*", ">", "+", "~", "-", "-.", "/*", "*/",
    '"', "'", "\\", "url(", "url('", " ", "\n", "%", "!important", "1.2.3", "px", "em",
]
CSS_WORDS = ["div", "color", "red", "margin", "0", "10px", "50%", "#fff", "@media", "screen", "a", "b"]


def random_html(rng):
    parts = []
    for _ in range(rng.randint(0, 40)):
        roll = rng.random()
        if roll < 0.3:
            tag = rng.choice(TAGS)
            attrs = "".join(
                f" {rng.choice(ATTRIBUTES)}={rng.choice(ATTRIBUTE_VALUES)}"
                for _ in range(rng.randint(0, 3))
            )
            parts.append(f"<{tag}{attrs}{rng.choice(['>', '/>', ''])}")
        elif roll < 0.5:
            parts.append(f"</{rng.choice(TAGS)}>")
        elif roll < 0.75:
            parts.append(rng.choice(HTML_FRAGMENTS))
        else:
            parts.append(rng.choice(["text", " more ", "x<y", "a > b"]))
    return "".join(parts)


def random_css(rng):
    parts = []
    for _ in range(rng.randint(0, 60)):
        if rng.random() < 0.5:
            parts.append(rng.choice(CSS_FRAGMENTS))
        else:
            parts.append(rng.choice(CSS_WORDS))
        if rng.random() < 0.3:
            parts.append(" ")
    return "".join(parts)


class TestRobustness(unittest.TestCase):
    def test_random_html(self):
        rng = random.Random(1234)
        for _ in range(500):
            html = random_html(rng)
            tokens = list(HTMLTokenizer(html))
            assert all(token is not None for token in tokens)
            try:
                nodes = HTMLParser(html).parse()
            except NestingDepthError:
                self.fail(f"unexpected depth error for {html!r}")
            assert isinstance(nodes, list)

    def test_random_css(self):
        rng = random.Random(5678)
        for _ in range(500):
            css = random_css(rng)
            list(CSSTokenizer(css))
            rules = CSSParser(css).parse()
            assert isinstance(rules, list)
            for rule in rules:
                assert rule.selectors

    def test_tokens_stay_within_input(self):
        rng = random.Random(42)
        for _ in range(200):
            html = random_html(rng)
            for token in HTMLTokenizer(html):
                data = getattr(token, "data", None)
                if data is not None:
                    assert data in html
            css = random_css(rng)
            for token in CSSTokenizer(css):
                if isinstance(token.value, str):
                    assert token.value in css

    def test_every_single_character(self):
        for code in range(0, 256):
            char = chr(code)
            assert isinstance(HTMLParser(char + "<" + char).parse(), list)
            assert isinstance(CSSParser(char + "{" + char).parse(), list)


if __name__ == "__main__":
    unittest.main()
