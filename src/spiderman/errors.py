"""Errors raised while expanding or resolving a wrapped AST."""


class SpidermanError(Exception):
    """Base for all errors raised on a malformed or unsupported AST."""

    def __init__(self, msg: str, digest: str):
        self.msg: str = msg
        self.digest: str = digest
        super().__init__(msg + ": " + digest)


class UnsupportedNodeKind(SpidermanError):
    """Node kind outside the SpiderMonkey grammar table."""

    def __init__(self, kind: str, digest: str):
        self.kind: str = kind
        super().__init__("unsupported node kind", digest)


class MissingChild(SpidermanError):
    """Required child position is absent or null; digest is the parent's."""

    def __init__(self, digest: str):
        super().__init__("missing child", digest)


class NoEnclosingScope(SpidermanError):
    """Scope requested on a parentless node that does not introduce one."""

    def __init__(self, digest: str):
        super().__init__("no enclosing scope", digest)
