from .constants import DEFAULT_MAX_DEPTH, VOID_ELEMENTS
from .css_parser import CSSParser, Rule
from .css_tokenizer import CSSTokenizer
from .css_tokens import CSSToken
from .errors import NestingDepthError
from .node import CommentNode, ElementNode, Node, TextNode
from .parser import HTMLParser
from .selector import (
    AdjacentSelector,
    ChildSelector,
    ClassSelector,
    DescendantSelector,
    GeneralSiblingSelector,
    IdSelector,
    Selector,
    TypeSelector,
    UniversalSelector,
)
from .serialize import to_css, to_html, to_test_format
from .tokenizer import HTMLTokenizer
from .tokens import CharacterTokens, CommentToken, DoctypeToken, Tag

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "VOID_ELEMENTS",
    "AdjacentSelector",
    "CSSParser",
    "CSSToken",
    "CSSTokenizer",
    "CharacterTokens",
    "ChildSelector",
    "ClassSelector",
    "CommentNode",
    "CommentToken",
    "DescendantSelector",
    "DoctypeToken",
    "ElementNode",
    "GeneralSiblingSelector",
    "HTMLParser",
    "HTMLTokenizer",
    "IdSelector",
    "NestingDepthError",
    "Node",
    "Rule",
    "Selector",
    "Tag",
    "TextNode",
    "TypeSelector",
    "UniversalSelector",
    "to_css",
    "to_html",
    "to_test_format",
]
