"""
Union-Find (Disjoint Set Union) with element deletion.

HashUnionFindSet tracks a partition of hashable elements:
- add(e) / remove(e): insert or delete a single element
- find(e): representative value of the set containing e
- union(e1, e2): merge the sets containing e1 and e2
- connected(e1, e2): are e1 and e2 in the same set?

Each set is a tree of representative nodes (see forest.py). Elements point at
a node that is not necessarily the root: find moves the queried element up to
the root one hop at a time, retiring nodes that it empties on the way.
Deleting an element never rebuilds a set: its node is spliced out of the tree
once no element added under the node's value is left in it.

Note that find, and everything built on it (union, element_set, connected,
...), compacts the tree as a side effect. Those calls count as modifications
for iterators that are in progress.
"""

import logging
import math
from collections.abc import Iterable
from typing import Callable, Generic, Iterator

from typing_extensions import Self

from .constants import DEFAULT_LOAD_FACTOR, DEFAULT_SIZE_HINT
from .errors import InvalidArgumentError, NotFoundError
from .forest import Forest, RepresentativeNode
from .iteration import FailFastIterator
from .types import Element, RepresentativeOf, RepresentativeValue

logger = logging.getLogger(__name__)


def identity(element: Element) -> Element:
    """Representative function where each element starts as its own representative."""
    return element


class HashUnionFindSet(Generic[RepresentativeValue, Element]):
    """
    Union-Find supporting deletion, with union by size and incremental compaction.

    Elements are grouped by `representative_of` when added: an element joins
    the set of the node holding its representative value, or starts a new
    set when no such node is alive.

    Args:
        representative_of: Total function mapping an element to its initial
            representative value. Must never return None.
        elements: Optional elements to add right away.
        size_hint: Expected number of elements, must be non-negative.
        load_factor: Hash table load factor hint, must be positive.

    The hints are validated and kept for callers that carry them around,
    Python dictionaries size themselves.

    Example:
        >>> uf = HashUnionFindSet(identity, [1, 2, 3])
        >>> uf.union(1, 2)
        1
        >>> uf.connected(1, 2)
        True
        >>> uf.remove(1)
        True
        >>> uf.element_set(2)
        frozenset({2})
    """

    def __init__(
        self,
        representative_of: RepresentativeOf[Element, RepresentativeValue],
        elements: Iterable[Element] = (),
        *,
        size_hint: int = DEFAULT_SIZE_HINT,
        load_factor: float = DEFAULT_LOAD_FACTOR,
    ) -> None:
        if representative_of is None or not callable(representative_of):
            raise InvalidArgumentError("Representative function cannot be None")
        if size_hint < 0:
            raise InvalidArgumentError(f"Illegal size hint: {size_hint}")
        if not (load_factor > 0 and math.isfinite(load_factor)):
            raise InvalidArgumentError(f"Illegal load factor: {load_factor}")
        if elements is None:
            raise InvalidArgumentError("Elements cannot be None")

        self._representative_of = representative_of
        self._size_hint = size_hint
        self._load_factor = load_factor
        self._forest: Forest[RepresentativeValue, Element] = Forest()
        self._modifications = 0

        self.update(elements)

    @classmethod
    def from_iterable(
        cls,
        elements: Iterable[Element],
        representative_of: RepresentativeOf[Element, RepresentativeValue],
    ) -> Self:
        """Builds a structure holding `elements`, sized for them."""
        elements = list(elements)
        return cls(
            representative_of,
            elements,
            size_hint=max(int(len(elements) / DEFAULT_LOAD_FACTOR) + 1, DEFAULT_SIZE_HINT),
        )

    @property
    def representative_of(self) -> RepresentativeOf[Element, RepresentativeValue]:
        return self._representative_of

    @property
    def size_hint(self) -> int:
        return self._size_hint

    @property
    def load_factor(self) -> float:
        return self._load_factor

    @property
    def modifications(self) -> int:
        """Number of structural modifications so far."""
        return self._modifications

    def _modified(self) -> None:
        self._modifications += 1

    # =========================================================================
    # Container
    # =========================================================================

    def __len__(self) -> int:
        return len(self._forest)

    def __contains__(self, element: object) -> bool:
        return element in self._forest

    def __iter__(self) -> Iterator[Element]:
        """Iterates over the elements, failing if the structure changes meanwhile."""
        return FailFastIterator(iter(self._forest), lambda: self._modifications)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sets()!r})"

    def add(self, element: Element) -> bool:
        """
        Adds an element to the set of its representative value.

        A new singleton set is created when no node holds that value yet.

        Returns:
            False if the element was already present.
        """
        if element is None:
            raise InvalidArgumentError("None elements are not supported")
        if element in self._forest:
            return False

        value = self._representative_of(element)
        if value is None:
            raise InvalidArgumentError(
                f"Representative function returned None for {element!r}"
            )

        self._forest.insert(element, value)
        self._modified()
        return True

    def remove(self, element: Element) -> bool:
        """
        Removes an element, retiring its node if the node is left without
        elements of its own.

        Returns:
            False if the element was not present.
        """
        if element not in self._forest:
            return False

        value = self._forest.delete(element)
        self._forest.retire(value)
        self._modified()
        return True

    def clear(self) -> None:
        self._forest.clear()
        self._modified()

    def update(self, elements: Iterable[Element]) -> bool:
        """Adds every element. Returns True if any was added."""
        changed = False
        for element in elements:
            changed |= self.add(element)
        return changed

    def discard_all(self, elements: Iterable[Element]) -> bool:
        """Removes every element. Returns True if any was removed."""
        changed = False
        for element in elements:
            changed |= self.remove(element)
        return changed

    def retain(self, elements: Iterable[Element]) -> bool:
        """Removes every element not in `elements`. Returns True if any was removed."""
        kept = set(elements)
        return self.discard_all(
            [element for element in self._forest if element not in kept]
        )

    def discard_where(self, predicate: Callable[[Element], bool]) -> bool:
        """Removes every element matching `predicate`. Returns True if any was removed."""
        return self.discard_all([element for element in self._forest if predicate(element)])

    def copy(self) -> Self:
        """Independent copy sharing only the representative function."""
        other = type(self)(
            self._representative_of,
            size_hint=self._size_hint,
            load_factor=self._load_factor,
        )
        other._forest = self._forest.copy()
        return other

    # =========================================================================
    # Union-Find
    # =========================================================================

    def _find_root(self, element: Element) -> RepresentativeValue:
        """
        Moves the element up to the root of its tree, one hop at a time.

        Only the queried element is moved: the other elements on the path
        stay where they are, so repeated finds flatten the tree gradually.
        """
        value = self._forest.locate(element)
        while not self._forest.is_root(value):
            value = self._forest.hop(element)
            self._modified()
        return value

    def find(self, element: Element) -> RepresentativeValue:
        """
        Finds the representative value of the set containing the element.

        This is not a pure query: the element is moved to the root node.
        """
        return self._find_root(element)

    def union(self, first: Element, second: Element) -> RepresentativeValue:
        """
        Merges the sets containing both elements.

        The root of the set with more elements becomes the parent of the
        other one. On a tie the root of `first` is kept.

        Returns:
            The representative value of the merged set.
        """
        self._forest.locate(first)
        self._forest.locate(second)

        larger = self._forest.node(self._find_root(first))
        smaller = self._forest.node(self._find_root(second))
        if larger.value == smaller.value or first == second:
            return larger.value

        if larger.size < smaller.size:
            larger, smaller = smaller, larger

        logger.debug(
            f"Union: {smaller.value!r} ({smaller.size}) under "
            f"{larger.value!r} ({larger.size})"
        )
        self._forest.link(larger.value, smaller.value)
        self._modified()
        return larger.value

    def connected(self, first: Element, second: Element) -> bool:
        """Check if both elements are in the same set."""
        self._forest.locate(second)
        return self.find(first) == self.find(second)

    def number_of_sets(self) -> int:
        return sum(
            1 for value in self._forest.roots() if self._forest.node(value).is_root
        )

    def _require_root(
        self, representative: RepresentativeValue
    ) -> RepresentativeNode[RepresentativeValue, Element]:
        if representative is None or not self._forest.is_root(representative):
            raise NotFoundError(f"No such representative with value {representative!r}")
        return self._forest.node(representative)

    def representative_set_size(self, representative: RepresentativeValue) -> int:
        """Number of elements in the set identified by a root representative."""
        return self._require_root(representative).size

    def representative_set(self, representative: RepresentativeValue) -> frozenset[Element]:
        """Elements of the set identified by a root representative."""
        self._require_root(representative)
        return self._forest.members(representative)

    def element_set_size(self, element: Element) -> int:
        return self.representative_set_size(self.find(element))

    def element_set(self, element: Element) -> frozenset[Element]:
        return self.representative_set(self.find(element))

    def representatives(self) -> frozenset[RepresentativeValue]:
        """Representative values of all current sets."""
        return self._forest.roots()

    def sets(self) -> dict[RepresentativeValue, frozenset[Element]]:
        """
        Get all disjoint sets as a dictionary.

        Unlike find, this does not compact anything.

        Returns:
            Mapping from each set's representative to its members.
        """
        return {value: self._forest.members(value) for value in self._forest.roots()}
