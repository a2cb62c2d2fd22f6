import re

from .css_tokens import STRUCTURAL_TOKENS, CSSToken

# A run starts on ASCII whitespace and continues over any Unicode whitespace
# except the \x1c-\x1f separators.
_WHITESPACE_START = " \t\n\r"
_WHITESPACE_PATTERN = re.compile(r"[^\S\x1c-\x1f]*")
# Identifier, hash and at-keyword bodies: letters, digits, '-' and '_'.
_NAME_PATTERN = re.compile(r"[\w-]*")
# Optional sign, digits, then at most one '.' and more digits.
_NUMBER_PATTERN = re.compile(r"-?[0-9]*(?:\.[0-9]*)?")
_UNIT_PATTERN = re.compile(r"[^\W_]*")
# A backslash hides the following character, including a quote.
_STRING_BODY_PATTERNS = {
    '"': re.compile(r'(?:[^"\\]|\\.)*', re.DOTALL),
    "'": re.compile(r"(?:[^'\\]|\\.)*", re.DOTALL),
}


class CSSTokenizer:
    """Pull tokenizer for CSS stylesheets.

    ``next_token`` returns a ``CSSToken`` or ``None`` at end of input.
    Malformed input never raises: unterminated comments, strings and
    ``url(`` bodies run to the end of the input.
    """

    __slots__ = ("buffer", "length", "pos")

    def __init__(self, css):
        self.buffer = css or ""
        self.length = len(self.buffer)
        self.pos = 0

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self):
        if self.pos >= self.length:
            return None

        c = self.buffer[self.pos]

        if c in _WHITESPACE_START:
            self.pos += 1
            self._skip_whitespace()
            return CSSToken(CSSToken.WHITESPACE)
        if c == "/" and self._peek_char(1) == "*":
            return self._consume_comment()
        kind = STRUCTURAL_TOKENS.get(c)
        if kind is not None:
            self.pos += 1
            return CSSToken(kind)
        if c in ('"', "'"):
            return self._consume_string(c)
        if c == "#":
            return self._consume_prefixed_name(CSSToken.HASH)
        if c == "@":
            return self._consume_prefixed_name(CSSToken.AT_KEYWORD)
        if self._is_number_start(c):
            return self._consume_number()
        if c.isalpha() or c in ("_", "-"):
            return self._consume_ident_or_url()

        self.pos += 1
        return CSSToken(CSSToken.DELIM, c)

    # ---------------------
    # Helper methods
    # ---------------------

    def _peek_char(self, offset=0):
        peek_pos = self.pos + offset
        if peek_pos < self.length:
            return self.buffer[peek_pos]
        return None

    def _skip_whitespace(self):
        self.pos = _WHITESPACE_PATTERN.match(self.buffer, self.pos).end()

    def _consume_pattern(self, pattern):
        match = pattern.match(self.buffer, self.pos)
        self.pos = match.end()
        return match.group()

    def _is_number_start(self, c):
        if "0" <= c <= "9":
            return True
        following = self._peek_char(1)
        if following is None:
            return False
        if c == ".":
            return "0" <= following <= "9"
        if c == "-":
            return "0" <= following <= "9" or following == "."
        return False

    # ---------------------
    # Token consumers
    # ---------------------

    def _consume_comment(self):
        start = self.pos + 2
        end = self.buffer.find("*/", start)
        if end == -1:
            self.pos = self.length
            return CSSToken(CSSToken.COMMENT, self.buffer[start:])
        self.pos = end + 2
        return CSSToken(CSSToken.COMMENT, self.buffer[start:end])

    def _consume_string(self, quote):
        self.pos += 1
        start = self.pos
        end = _STRING_BODY_PATTERNS[quote].match(self.buffer, start).end()
        if end < self.length and self.buffer[end] == quote:
            self.pos = end + 1
            return CSSToken(CSSToken.STRING, self.buffer[start:end])
        # Unterminated, possibly ending on a lone backslash.
        self.pos = self.length
        return CSSToken(CSSToken.STRING, self.buffer[start:])

    def _consume_prefixed_name(self, kind):
        prefix = self.buffer[self.pos]
        self.pos += 1
        name = self._consume_pattern(_NAME_PATTERN)
        if not name:
            return CSSToken(CSSToken.DELIM, prefix)
        return CSSToken(kind, name)

    def _consume_number(self):
        text = self._consume_pattern(_NUMBER_PATTERN)
        try:
            value = float(text)
        except ValueError:
            # Only reachable for a bare "-." prefix.
            value = 0.0

        c = self._peek_char()
        if c == "%":
            self.pos += 1
            return CSSToken(CSSToken.PERCENTAGE, value)
        if c is not None and c.isalpha():
            unit = self._consume_pattern(_UNIT_PATTERN)
            return CSSToken(CSSToken.DIMENSION, value, unit)
        return CSSToken(CSSToken.NUMBER, value)

    def _consume_ident_or_url(self):
        name = self._consume_pattern(_NAME_PATTERN)
        if name == "url" and self._peek_char() == "(":
            self.pos += 1
            return self._consume_url()
        return CSSToken(CSSToken.IDENT, name)

    def _consume_url(self):
        self._skip_whitespace()
        quote = self._peek_char()
        if quote in ('"', "'"):
            self.pos += 1
            start = self.pos
            end = self.buffer.find(quote, start)
            if end == -1:
                self.pos = self.length
                return CSSToken(CSSToken.URL, self.buffer[start:])
            self.pos = end + 1
            self._skip_whitespace()
            if self._peek_char() == ")":
                self.pos += 1
            return CSSToken(CSSToken.URL, self.buffer[start:end])

        start = self.pos
        end = self.buffer.find(")", start)
        if end == -1:
            self.pos = self.length
            return CSSToken(CSSToken.URL, self.buffer[start:].rstrip())
        self.pos = end + 1
        return CSSToken(CSSToken.URL, self.buffer[start:end].rstrip())
