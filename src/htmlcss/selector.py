"""CSS selector trees.

Simple selectors (type, class, id, universal) are leaves. Combinator
selectors hold a ``left`` and ``right`` selector and are built
left-associatively, so ``div p > span`` is
``ChildSelector(DescendantSelector(div, p), span)``.
"""


class Selector:
    __slots__ = ()

    def to_css(self):
        raise NotImplementedError

    def __str__(self):
        return self.to_css()


class TypeSelector(Selector):
    __slots__ = ("name",)

    def __init__(self, name):
        self.name = name

    def to_css(self):
        return self.name

    def __repr__(self):
        return f"Type({self.name!r})"

    def __eq__(self, other):
        if type(other) is not TypeSelector:
            return NotImplemented
        return self.name == other.name

    __hash__ = None


class ClassSelector(Selector):
    __slots__ = ("name",)

    def __init__(self, name):
        self.name = name

    def to_css(self):
        return f".{self.name}"

    def __repr__(self):
        return f"Class({self.name!r})"

    def __eq__(self, other):
        if type(other) is not ClassSelector:
            return NotImplemented
        return self.name == other.name

    __hash__ = None


class IdSelector(Selector):
    __slots__ = ("name",)

    def __init__(self, name):
        self.name = name

    def to_css(self):
        return f"#{self.name}"

    def __repr__(self):
        return f"Id({self.name!r})"

    def __eq__(self, other):
        if type(other) is not IdSelector:
            return NotImplemented
        return self.name == other.name

    __hash__ = None


class UniversalSelector(Selector):
    __slots__ = ()

    def to_css(self):
        return "*"

    def __repr__(self):
        return "Universal"

    def __eq__(self, other):
        if type(other) is not UniversalSelector:
            return NotImplemented
        return True

    __hash__ = None


class CombinatorSelector(Selector):
    """A binary relation between two selectors.

    Subclasses set ``combinator`` to the separator used when serializing.
    """

    __slots__ = ("left", "right")

    combinator = None
    label = None

    def __init__(self, left, right):
        self.left = left
        self.right = right

    def to_css(self):
        return f"{self.left.to_css()}{self.combinator}{self.right.to_css()}"

    def __repr__(self):
        return f"{self.label}({self.left!r}, {self.right!r})"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    __hash__ = None


class DescendantSelector(CombinatorSelector):
    __slots__ = ()
    combinator = " "
    label = "Descendant"


class ChildSelector(CombinatorSelector):
    __slots__ = ()
    combinator = " > "
    label = "Child"


class AdjacentSelector(CombinatorSelector):
    __slots__ = ()
    combinator = " + "
    label = "Adjacent"


class GeneralSiblingSelector(CombinatorSelector):
    __slots__ = ()
    combinator = " ~ "
    label = "GeneralSibling"


COMBINATOR_SELECTORS = {
    ">": ChildSelector,
    "+": AdjacentSelector,
    "~": GeneralSiblingSelector,
}
