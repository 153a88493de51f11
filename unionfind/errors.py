"""
Errors raised by the union-find structures.
"""


class UnionFindError(Exception):
    """Base class for every error raised by this package."""

    pass


class InvalidArgumentError(UnionFindError, ValueError):
    """Raised for a missing element, a missing representative or a bad configuration."""

    pass


class NotFoundError(UnionFindError, LookupError):
    """Raised when an element or a representative is not tracked by the structure."""

    pass


class ConcurrentModificationError(UnionFindError, RuntimeError):
    """Raised when the structure is modified while it is being traversed."""

    pass
