"""Exceptions raised while reading qualified names."""


class QualifiedNameError(ValueError):
    """Base class for qualified name problems."""


class AmbiguousNameError(QualifiedNameError):
    """Raised when a raw name yields no identifier token at all."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Cannot extract an identifier from {raw!r}")
