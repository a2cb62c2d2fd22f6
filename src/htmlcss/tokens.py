class Tag:
    __slots__ = ("attrs", "kind", "name", "self_closing")

    START = 0
    END = 1

    def __init__(self, kind, name, attrs=None, self_closing=False):
        self.kind = kind
        self.name = name
        # Ordered (name, value) pairs; duplicates are kept.
        self.attrs = attrs if attrs is not None else []
        self.self_closing = bool(self_closing)

    def __repr__(self):
        if self.kind == self.END:
            return f"<end:{self.name}>"
        attrs = " ".join(f"{name}={value!r}" for name, value in self.attrs)
        closing = " /" if self.self_closing else ""
        return f"<start:{self.name}{closing} {attrs}>"

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.name == other.name
            and list(self.attrs) == list(other.attrs)
            and self.self_closing == other.self_closing
        )

    __hash__ = None


class CharacterTokens:
    __slots__ = ("data",)

    def __init__(self, data):
        self.data = data

    def __repr__(self):
        return f"CharacterTokens({self.data!r})"

    def __eq__(self, other):
        if not isinstance(other, CharacterTokens):
            return NotImplemented
        return self.data == other.data

    __hash__ = None


class CommentToken:
    __slots__ = ("data",)

    def __init__(self, data):
        self.data = data

    def __repr__(self):
        return f"CommentToken({self.data!r})"

    def __eq__(self, other):
        if not isinstance(other, CommentToken):
            return NotImplemented
        return self.data == other.data

    __hash__ = None


class DoctypeToken:
    """Raw doctype text between ``<!`` and ``>``, e.g. ``DOCTYPE html``."""

    __slots__ = ("data",)

    def __init__(self, data):
        self.data = data

    def __repr__(self):
        return f"DoctypeToken({self.data!r})"

    def __eq__(self, other):
        if not isinstance(other, DoctypeToken):
            return NotImplemented
        return self.data == other.data

    __hash__ = None
