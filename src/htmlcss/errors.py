class NestingDepthError(Exception):
    """Raised when input nests deeper than the parser's ``max_depth``.

    This is the only error the parsers raise: every other malformed
    construct degrades to a best-effort token or node.
    """

    def __init__(self, depth, limit):
        self.depth = depth
        self.limit = limit
        super().__init__(f"input too deeply nested (depth {depth} exceeds limit {limit})")

    def __repr__(self):
        return f"NestingDepthError(depth={self.depth}, limit={self.limit})"
