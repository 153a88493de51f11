"""
Fail-fast iteration over a structure that counts its own modifications.
"""

from typing import Callable, Generic, Iterator, TypeVar

from .errors import ConcurrentModificationError

T = TypeVar("T")


class FailFastIterator(Generic[T]):
    """
    Wraps an iterator and stops with an error once the owner has changed.

    The modification count is captured when the iterator is created and
    compared before every step, so the wrapped iterator is never advanced
    over a structure that was modified in the meantime.

    Args:
        iterator: The underlying iterator, typically over dictionary keys.
        modifications: Returns the owner's current modification count.
    """

    def __init__(self, iterator: Iterator[T], modifications: Callable[[], int]):
        self._iterator = iterator
        self._modifications = modifications
        self._expected = modifications()

    def __iter__(self) -> "FailFastIterator[T]":
        return self

    def __next__(self) -> T:
        self.check_for_comodification()
        return next(self._iterator)

    def check_for_comodification(self) -> None:
        if self._modifications() != self._expected:
            raise ConcurrentModificationError(
                "Structure was modified during iteration"
            )
