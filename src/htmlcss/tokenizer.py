import re

from .tokens import CharacterTokens, CommentToken, DoctypeToken, Tag

# Tag and attribute names: letters, digits, '-' and '_'.
_NAME_PATTERN = re.compile(r"[\w-]*")
# Unicode whitespace, minus the \x1c-\x1f separators that str.isspace counts.
_WHITESPACE_PATTERN = re.compile(r"[^\S\x1c-\x1f]*")
_ATTR_VALUE_UNQUOTED_PATTERN = re.compile(r"(?:[^\s>/]|[\x1c-\x1f])*")


class HTMLTokenizer:
    """Pull tokenizer for HTML markup.

    Each call to ``next_token`` returns one of ``Tag``, ``CharacterTokens``,
    ``CommentToken`` or ``DoctypeToken``, or ``None`` once the input is
    exhausted. Whitespace between tokens is skipped, never emitted.

    The tokenizer is also an iterator. It is single-pass: tokenizing the same
    text again requires a new instance.
    """

    __slots__ = ("buffer", "length", "pos")

    def __init__(self, html):
        self.buffer = html or ""
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
        self._skip_whitespace()
        if self.pos >= self.length:
            return None
        if self.buffer[self.pos] == "<":
            return self._parse_tag_or_comment()
        return self._parse_text(self.pos)

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

    def _consume_name(self):
        match = _NAME_PATTERN.match(self.buffer, self.pos)
        self.pos = match.end()
        return match.group()

    def _consume_if(self, literal):
        if not self.buffer.startswith(literal, self.pos):
            return False
        self.pos += len(literal)
        return True

    def _consume_case_insensitive(self, literal):
        end = self.pos + len(literal)
        if end > self.length:
            return False
        if self.buffer[self.pos : end].lower() != literal.lower():
            return False
        self.pos = end
        return True

    def _consume_until(self, terminator):
        """Return text up to ``terminator`` and move past it.

        An unterminated run swallows the rest of the input.
        """
        start = self.pos
        end = self.buffer.find(terminator, start)
        if end == -1:
            self.pos = self.length
            return self.buffer[start:]
        self.pos = end + len(terminator)
        return self.buffer[start:end]

    # ---------------------
    # Token parsers
    # ---------------------

    def _parse_tag_or_comment(self):
        start = self.pos
        self.pos += 1  # '<'

        if self._consume_if("!--"):
            return CommentToken(self._consume_until("-->"))

        if self._consume_case_insensitive("!doctype"):
            # Keep everything after '<!' so the doctype keyword survives.
            self.pos = start + 2
            return DoctypeToken(self._consume_until(">"))

        is_end_tag = self._consume_if("/")
        name = self._consume_name()
        if not name:
            # Not a tag after all: the '<' is literal text.
            return self._parse_text(start)

        if is_end_tag:
            self._consume_until(">")
            return Tag(Tag.END, name)

        attrs = []
        self_closing = False
        while True:
            self._skip_whitespace()
            c = self._peek_char()
            if c is None:
                break
            if c == ">":
                self.pos += 1
                break
            if c == "/":
                self.pos += 1
                if self._peek_char() == ">":
                    self.pos += 1
                    self_closing = True
                    break
                continue
            attr = self._parse_attribute()
            if attr is None:
                # Junk where an attribute name should be ends the tag.
                self._consume_until(">")
                break
            attrs.append(attr)

        return Tag(Tag.START, name, attrs, self_closing)

    def _parse_attribute(self):
        name = self._consume_name()
        if not name:
            return None

        self._skip_whitespace()
        if not self._consume_if("="):
            return (name, "")
        self._skip_whitespace()

        quote = self._peek_char()
        if quote in ('"', "'"):
            self.pos += 1
            return (name, self._consume_until(quote))

        match = _ATTR_VALUE_UNQUOTED_PATTERN.match(self.buffer, self.pos)
        self.pos = match.end()
        return (name, match.group())

    def _parse_text(self, start):
        # Text always owns its first character, which may be a literal '<'.
        end = self.buffer.find("<", start + 1)
        if end == -1:
            end = self.length
        self.pos = end
        return CharacterTokens(self.buffer[start:end])
