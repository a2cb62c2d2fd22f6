"""CSS rule construction entry point."""

from .constants import DEFAULT_MAX_DEPTH
from .css_tokenizer import CSSTokenizer
from .css_tokens import CSSToken
from .errors import NestingDepthError
from .selector import (
    COMBINATOR_SELECTORS,
    ClassSelector,
    DescendantSelector,
    IdSelector,
    TypeSelector,
    UniversalSelector,
)

_SKIPPABLE = (CSSToken.WHITESPACE, CSSToken.COMMENT)
_SELECTOR_TERMINATORS = (CSSToken.LEFT_BRACE, CSSToken.COMMA)
_VALUE_TERMINATORS = (CSSToken.SEMICOLON, CSSToken.RIGHT_BRACE)


class Rule:
    """One style rule: a non-empty tuple of selectors and their declarations."""

    __slots__ = ("declarations", "selectors")

    def __init__(self, selectors, declarations=None):
        if not selectors:
            msg = "Rule needs at least one selector"
            raise ValueError(msg)
        self.selectors = tuple(selectors)
        self.declarations = dict(declarations) if declarations else {}

    def __repr__(self):
        return f"Rule({list(self.selectors)!r}, {self.declarations!r})"

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return self.selectors == other.selectors and self.declarations == other.declarations

    __hash__ = None


class CSSParser:
    """Rule parser with one token of lookahead.

    Anything that does not start a rule is skipped one token at a time until
    a selector followed by ``{`` is found again.
    """

    __slots__ = ("current_token", "env_debug", "max_depth", "tokenizer")

    def __init__(self, css, *, max_depth=DEFAULT_MAX_DEPTH, debug=False):
        self.env_debug = bool(debug)
        self.max_depth = max_depth
        self.tokenizer = CSSTokenizer(css)
        self.current_token = self.tokenizer.next_token()

    def debug(self, message, indent=0):
        if self.env_debug:
            print(f"{' ' * indent}CSSParser: {message}")

    def parse(self):
        rules = []
        while self.current_token is not None:
            self._skip_whitespace()
            rule = self._parse_rule()
            if rule is not None:
                rules.append(rule)
            else:
                if self.current_token is not None:
                    self.debug(f"Skipping {self.current_token!r}")
                self._advance()
        return rules

    # ---------------------
    # Helper methods
    # ---------------------

    def _advance(self):
        self.current_token = self.tokenizer.next_token()

    def _at(self, *kinds):
        token = self.current_token
        return token is not None and token.kind in kinds

    def _at_delim(self, char):
        token = self.current_token
        return token is not None and token.kind == CSSToken.DELIM and token.value == char

    def _skip_whitespace(self):
        while self._at(*_SKIPPABLE):
            self._advance()

    # ---------------------
    # Rules and selectors
    # ---------------------

    def _parse_rule(self):
        selectors = self._parse_selectors()
        if selectors is None:
            return None

        self._skip_whitespace()
        if not self._at(CSSToken.LEFT_BRACE):
            self.debug(f"Selectors {selectors!r} not followed by '{{'")
            return None
        self._advance()

        declarations = self._parse_declarations()

        # A missing closing brace at end of input is tolerated.
        if self._at(CSSToken.RIGHT_BRACE):
            self._advance()

        return Rule(selectors, declarations)

    def _parse_selectors(self):
        selectors = []
        while True:
            self._skip_whitespace()
            selector = self._parse_selector()
            if selector is None:
                break
            selectors.append(selector)

            self._skip_whitespace()
            if not self._at(CSSToken.COMMA):
                break
            self._advance()

        return selectors or None

    def _parse_selector(self):
        self._skip_whitespace()
        selector = self._parse_simple_selector()
        if selector is None:
            return None

        depth = 0
        while True:
            self._skip_whitespace()
            token = self.current_token
            if token is None or token.kind in _SELECTOR_TERMINATORS:
                break

            if token.kind == CSSToken.DELIM and token.value in COMBINATOR_SELECTORS:
                combinator = COMBINATOR_SELECTORS[token.value]
                self._advance()
                self._skip_whitespace()
                right = self._parse_simple_selector()
                if right is None:
                    continue
            else:
                right = self._parse_simple_selector()
                if right is None:
                    break
                combinator = DescendantSelector

            depth += 1
            if depth > self.max_depth:
                raise NestingDepthError(depth, self.max_depth)
            selector = combinator(selector, right)

        return selector

    def _parse_simple_selector(self):
        token = self.current_token
        if token is None:
            return None

        if token.kind == CSSToken.IDENT:
            self._advance()
            return TypeSelector(token.value)
        if token.kind == CSSToken.HASH:
            self._advance()
            return IdSelector(token.value)
        if self._at_delim("."):
            self._advance()
            if self._at(CSSToken.IDENT):
                name = self.current_token.value
                self._advance()
                return ClassSelector(name)
            return None
        if self._at_delim("*"):
            self._advance()
            return UniversalSelector()
        return None

    # ---------------------
    # Declarations
    # ---------------------

    def _parse_declarations(self):
        declarations = {}
        while True:
            self._skip_whitespace()
            if self.current_token is None or self._at(CSSToken.RIGHT_BRACE):
                break

            start_token = self.current_token
            declaration = self._parse_declaration()
            if declaration is not None:
                name, value = declaration
                declarations[name] = value
            else:
                self.debug("Dropping malformed declaration", indent=2)
                if self.current_token is start_token:
                    # Nothing was consumed; step over the offending token.
                    self._advance()

            if self._at(CSSToken.SEMICOLON):
                self._advance()

        return declarations

    def _parse_declaration(self):
        if not self._at(CSSToken.IDENT):
            return None
        name = self.current_token.value
        self._advance()

        self._skip_whitespace()
        if not self._at(CSSToken.COLON):
            return None
        self._advance()
        self._skip_whitespace()

        parts = []
        while self.current_token is not None and not self._at(*_VALUE_TERMINATORS):
            token = self.current_token
            self._advance()
            if token.kind == CSSToken.WHITESPACE:
                if parts and parts[-1] != " ":
                    parts.append(" ")
            elif token.kind != CSSToken.COMMENT:
                parts.append(token.to_css())

        value = "".join(parts).strip()
        if not value:
            return None
        return name, value
