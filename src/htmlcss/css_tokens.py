from decimal import Decimal


def format_number(value):
    """Render a float as a plain CSS number: ``10.0`` as ``10``, ``1e-05`` as ``0.00001``.

    Uses the shortest digits that round-trip, never an exponent, and keeps
    the sign of ``-0.0``.
    """
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        return text[:-2]
    return text


class CSSToken:
    __slots__ = ("kind", "unit", "value")

    IDENT = 0
    STRING = 1
    NUMBER = 2
    DIMENSION = 3
    PERCENTAGE = 4
    HASH = 5
    DELIM = 6
    LEFT_PAREN = 7
    RIGHT_PAREN = 8
    LEFT_BRACE = 9
    RIGHT_BRACE = 10
    LEFT_BRACKET = 11
    RIGHT_BRACKET = 12
    COLON = 13
    SEMICOLON = 14
    COMMA = 15
    WHITESPACE = 16
    COMMENT = 17
    AT_KEYWORD = 18
    URL = 19

    KIND_NAMES = (
        "Ident",
        "String",
        "Number",
        "Dimension",
        "Percentage",
        "Hash",
        "Delim",
        "LeftParen",
        "RightParen",
        "LeftBrace",
        "RightBrace",
        "LeftBracket",
        "RightBracket",
        "Colon",
        "Semicolon",
        "Comma",
        "Whitespace",
        "Comment",
        "AtKeyword",
        "Url",
    )

    def __init__(self, kind, value=None, unit=None):
        self.kind = kind
        # str for text-bearing kinds, float for numeric kinds, None otherwise.
        self.value = value
        self.unit = unit

    @property
    def kind_name(self):
        return self.KIND_NAMES[self.kind]

    def to_css(self):
        """Return the token's textual form as used in declaration values."""
        kind = self.kind
        if kind in (self.IDENT, self.DELIM):
            return self.value
        if kind == self.STRING:
            return f'"{self.value}"'
        if kind == self.NUMBER:
            return format_number(self.value)
        if kind == self.DIMENSION:
            return f"{format_number(self.value)}{self.unit}"
        if kind == self.PERCENTAGE:
            return f"{format_number(self.value)}%"
        if kind == self.HASH:
            return f"#{self.value}"
        if kind == self.AT_KEYWORD:
            return f"@{self.value}"
        if kind == self.URL:
            return f"url({self.value})"
        if kind == self.COMMENT:
            return f"/*{self.value}*/"
        if kind == self.WHITESPACE:
            return " "
        return _STRUCTURAL_TEXT[kind]

    def __repr__(self):
        if self.kind == self.DIMENSION:
            return f"Dimension({self.value!r}, {self.unit!r})"
        if self.value is None:
            return self.kind_name
        return f"{self.kind_name}({self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, CSSToken):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value and self.unit == other.unit

    __hash__ = None


# Single-character tokens, keyed both ways.
STRUCTURAL_TOKENS = {
    "(": CSSToken.LEFT_PAREN,
    ")": CSSToken.RIGHT_PAREN,
    "{": CSSToken.LEFT_BRACE,
    "}": CSSToken.RIGHT_BRACE,
    "[": CSSToken.LEFT_BRACKET,
    "]": CSSToken.RIGHT_BRACKET,
    ":": CSSToken.COLON,
    ";": CSSToken.SEMICOLON,
    ",": CSSToken.COMMA,
}
_STRUCTURAL_TEXT = {kind: char for char, kind in STRUCTURAL_TOKENS.items()}
