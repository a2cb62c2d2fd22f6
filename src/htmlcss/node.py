class Node:
    """Base class for parsed HTML nodes.

    - name: the tag name for elements, ``#text`` or ``#comment`` otherwise
    - children: list of child nodes (always empty for text and comments)

    Nodes own their children outright. There are no parent or sibling
    back-references, so a parsed tree can never contain a cycle.
    """

    __slots__ = ("name",)

    children = ()

    def __init__(self, name):
        # Empty names would make serialized output ambiguous.
        if not name:
            msg = "Empty name passed to Node constructor"
            raise ValueError(msg)
        self.name = name

    def iter(self):
        """Yield this node and every descendant in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def text_content(self):
        return "".join(node.data for node in self.iter() if node.name == "#text")


class ElementNode(Node):
    __slots__ = ("attributes", "children")

    def __init__(self, tag_name, attributes=None, children=None):
        super().__init__(tag_name)
        self.attributes = dict(attributes) if attributes else {}
        self.children = list(children) if children else []

    @property
    def tag_name(self):
        return self.name

    def append_child(self, child):
        self.children.append(child)

    def find_all(self, tag_name):
        """Return every descendant element named ``tag_name`` (case-insensitive)."""
        wanted = tag_name.lower()
        return [
            node
            for node in self.iter()
            if node is not self and isinstance(node, ElementNode) and node.name.lower() == wanted
        ]

    def __repr__(self):
        return f"ElementNode({self.name!r}, {self.attributes!r}, {self.children!r})"

    def __eq__(self, other):
        if not isinstance(other, ElementNode):
            return NotImplemented
        return (
            self.name == other.name
            and self.attributes == other.attributes
            and self.children == other.children
        )

    __hash__ = None


class TextNode(Node):
    __slots__ = ("data",)

    def __init__(self, data):
        super().__init__("#text")
        self.data = data

    def __repr__(self):
        return f"TextNode({self.data!r})"

    def __eq__(self, other):
        if not isinstance(other, TextNode):
            return NotImplemented
        return self.data == other.data

    __hash__ = None


class CommentNode(Node):
    __slots__ = ("data",)

    def __init__(self, data):
        super().__init__("#comment")
        self.data = data

    def __repr__(self):
        return f"CommentNode({self.data!r})"

    def __eq__(self, other):
        if not isinstance(other, CommentNode):
            return NotImplemented
        return self.data == other.data

    __hash__ = None
