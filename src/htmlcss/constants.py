"""HTML and CSS parsing constants.

Usage:
    from htmlcss.constants import VOID_ELEMENTS, DEFAULT_MAX_DEPTH

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
"""

# Elements that never have children or a matching end tag. Lookups are
# done on the lowercased tag name.
VOID_ELEMENTS = frozenset({
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
})

# Ceiling for open elements (HTML) and chained combinators (CSS). Kept well
# below the interpreter's default recursion limit.
DEFAULT_MAX_DEPTH = 256