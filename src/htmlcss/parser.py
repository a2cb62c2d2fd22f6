"""HTML tree construction entry point."""

from .constants import DEFAULT_MAX_DEPTH, VOID_ELEMENTS
from .errors import NestingDepthError
from .node import CommentNode, ElementNode, TextNode
from .tokenizer import HTMLTokenizer
from .tokens import CharacterTokens, CommentToken, DoctypeToken, Tag


class HTMLParser:
    """Tree builder over ``HTMLTokenizer``.

    Open elements are tracked on an explicit stack, so nesting is bounded by
    ``max_depth`` alone. An element is closed only by an end tag with exactly
    its name, or by end of input.
    Other end tags inside it are kept as literal ``</name>`` text.
    """

    __slots__ = ("current_token", "env_debug", "max_depth", "tokenizer")

    def __init__(self, html, *, max_depth=DEFAULT_MAX_DEPTH, debug=False):
        self.env_debug = bool(debug)
        self.max_depth = max_depth
        self.tokenizer = HTMLTokenizer(html)
        self.current_token = self.tokenizer.next_token()

    def debug(self, message, indent=0):
        # Skip the formatting cost entirely when debugging is off.
        if self.env_debug:
            print(f"{' ' * indent}HTMLParser: {message}")

    def parse(self):
        nodes = []
        while self.current_token is not None:
            token = self.current_token
            if isinstance(token, Tag):
                if token.kind == Tag.END:
                    self.debug(f"Stopping at unmatched </{token.name}> at root level")
                    break
                nodes.append(self._parse_element(token, 1))
            else:
                self._parse_leaf(nodes, token, 0)
        return nodes

    def _advance(self):
        self.current_token = self.tokenizer.next_token()

    def _parse_leaf(self, children, token, depth):
        """Consume a text, comment or doctype token into ``children``."""
        self._advance()
        if isinstance(token, CharacterTokens):
            if token.data.strip():
                children.append(TextNode(token.data))
        elif isinstance(token, CommentToken):
            children.append(CommentNode(token.data))
        elif isinstance(token, DoctypeToken):
            self.debug(f"Skipping doctype {token.data!r}", indent=depth * 2)

    def _open_element(self, tag, depth):
        """Build the element for a start tag; report whether it takes children."""
        if depth > self.max_depth:
            raise NestingDepthError(depth, self.max_depth)

        # dict() keeps the last value of a duplicated attribute.
        element = ElementNode(tag.name, dict(tag.attrs))
        self._advance()
        return element, not (tag.self_closing or tag.name.lower() in VOID_ELEMENTS)

    def _parse_element(self, tag, depth):
        root, has_children = self._open_element(tag, depth)
        if not has_children:
            return root

        # Innermost open element last.
        open_elements = [root]
        while self.current_token is not None:
            token = self.current_token
            element = open_elements[-1]
            level = depth + len(open_elements) - 1
            if isinstance(token, Tag) and token.kind == Tag.END:
                self._advance()
                if token.name == element.tag_name:
                    open_elements.pop()
                    if not open_elements:
                        return root
                    continue
                self.debug(
                    f"Keeping mismatched </{token.name}> inside <{element.tag_name}> as text",
                    indent=level * 2,
                )
                element.append_child(TextNode(f"</{token.name}>"))
                continue
            if isinstance(token, Tag):
                child, has_children = self._open_element(token, level + 1)
                element.append_child(child)
                if has_children:
                    open_elements.append(child)
            else:
                self._parse_leaf(element.children, token, level)

        while open_elements:
            level = depth + len(open_elements) - 1
            self.debug(f"End of input closes <{open_elements.pop().tag_name}>", indent=level * 2)
        return root
