class VfsPathError(ValueError):
    """Base class for errors raised by vfspath. Subclass of ValueError."""


class MalformedPatternError(VfsPathError):
    """Raised when a shell pattern is malformed.

    The result only depends on the pattern, so retrying the same call
    cannot succeed.
    """
    def __init__(self, pattern: str | None = None) -> None:
        self.pattern = pattern
        if pattern is None:
            super().__init__("syntax error in pattern")
        else:
            super().__init__(f"syntax error in pattern: {pattern!r}")


class UnrelatablePathError(VfsPathError):
    """Raised when a target path cannot be made relative to a base path."""
    def __init__(self, basepath: str, targpath: str) -> None:
        self.basepath = basepath
        self.targpath = targpath
        super().__init__(f"Rel: can't make {targpath} relative to {basepath}")
