"""
Representative forest: the arena of nodes behind HashUnionFindSet.

Every live node is stored once, keyed by its representative value. Links
between nodes (parent, children) are representative values looked up in the
arena, never direct references. The roots of the forest form the
representative table, and the element index records the node each element is
currently attributed to.

Restructuring:
    insert(element, value) - Attribute a new element to the node of a value
    delete(element)        - Forget an element
    link(parent, child)    - Attach a root under another node (union)
    hop(element)           - Move one element one level up (find compaction)
    retire(value)          - Splice a node out of the forest

Diagnostics:
    height(value)          - Longest parent chain below a node, for checking
                             how far compaction has flattened a tree

An element is native to a node when it was inserted under the node's value.
A node lives as long as it owns a native element: once the last one leaves,
the remaining elements move on and the node is spliced out, so a stale value
never keeps identifying a set.

Each node also tracks the number of elements in its whole subtree, so set
sizes are available without walking the tree.
"""

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterator

from .errors import InvalidArgumentError, NotFoundError
from .traversal import breadth_first_preorder, depth_first_preorder
from .types import Element, RepresentativeValue

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class RepresentativeNode(Generic[RepresentativeValue, Element]):
    """
    A node of the representative forest.

    Attributes:
        value: Representative value identifying the node.
        parent: Value of the parent node, None for a root.
        children: Values of the child nodes.
        owned: Elements currently attributed to this node.
        natives: How many of the owned elements were inserted under `value`.
        size: Number of elements owned by this node and all its descendants.
    """

    value: RepresentativeValue
    parent: RepresentativeValue | None = None
    children: set[RepresentativeValue] = field(default_factory=set)
    owned: set[Element] = field(default_factory=set)
    natives: int = 0
    size: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent is None


class Forest(Generic[RepresentativeValue, Element]):
    """
    Arena of representative nodes, representative table and element index.

    All the restructuring primitives keep the three consistent. The forest
    never calls back into user code: the representative value of an element
    is given when the element is inserted.
    """

    def __init__(self) -> None:
        self._nodes: dict[RepresentativeValue, RepresentativeNode] = {}
        # Representative table: the values of the nodes without a parent
        self._roots: set[RepresentativeValue] = set()
        # Element index: node each element is currently attributed to
        self._index: dict[Element, RepresentativeValue] = {}
        # Value each element was inserted under
        self._origins: dict[Element, RepresentativeValue] = {}

    # =========================================================================
    # Queries
    # =========================================================================

    def __len__(self) -> int:
        """Number of elements."""
        return len(self._index)

    def __contains__(self, element: object) -> bool:
        try:
            return element in self._index
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Element]:
        return iter(self._index)

    def locate(self, element: Element) -> RepresentativeValue:
        """Value of the node the element is currently attributed to."""
        try:
            return self._index[element]
        except (KeyError, TypeError):
            raise NotFoundError(
                f"Cannot find representative of the disjoint set for {element!r}"
            ) from None

    def node(self, value: RepresentativeValue) -> RepresentativeNode:
        try:
            return self._nodes[value]
        except KeyError:
            raise NotFoundError(f"No representative with value {value!r}") from None

    def values(self) -> frozenset[RepresentativeValue]:
        """Values of all live nodes, roots or not."""
        return frozenset(self._nodes)

    def roots(self) -> frozenset[RepresentativeValue]:
        return frozenset(self._roots)

    def is_root(self, value: RepresentativeValue) -> bool:
        return value in self._roots

    def root_of(self, value: RepresentativeValue) -> RepresentativeValue:
        """Value of the root above a node, without compacting anything."""
        node = self.node(value)
        while node.parent is not None:
            node = self._nodes[node.parent]
        return node.value

    def ancestors(self, value: RepresentativeValue) -> Iterator[RepresentativeNode]:
        """Yields the node itself, then each ancestor up to the root."""
        node: RepresentativeNode | None = self.node(value)
        while node is not None:
            yield node
            node = None if node.parent is None else self._nodes[node.parent]

    def _children(self, node: RepresentativeNode) -> Iterator[RepresentativeNode]:
        return (self._nodes[child] for child in node.children)

    def subtree(self, value: RepresentativeValue) -> Iterator[RepresentativeNode]:
        """Yields every node below and including the given one, depth-first."""
        return depth_first_preorder(self._children, self.node(value))

    def members(self, value: RepresentativeValue) -> frozenset[Element]:
        """Elements owned anywhere in the subtree of a node."""
        return frozenset(
            element for node in self.subtree(value) for element in node.owned
        )

    def height(self, value: RepresentativeValue) -> int:
        """
        Length of the longest parent chain below a node (0 for a leaf).

        Diagnostic only, nothing in the union-find operations depends on it.
        """
        return max(
            depth for _, depth in breadth_first_preorder(self._children, self.node(value))
        )

    # =========================================================================
    # Element bookkeeping
    # =========================================================================

    def insert(self, element: Element, value: RepresentativeValue) -> None:
        """
        Attributes a new element to the node of `value`.

        The node is created as a new root when no live node holds that value.
        """
        if element in self._index:
            raise InvalidArgumentError(f"{element!r} is already present")

        node = self._nodes.get(value)
        if node is None:
            node = RepresentativeNode(value)
            self._nodes[value] = node
            self._roots.add(value)

        node.owned.add(element)
        node.natives += 1
        self._index[element] = value
        self._origins[element] = value
        self._resize(value, 1)

    def delete(self, element: Element) -> RepresentativeValue:
        """
        Forgets an element. The node it was attributed to is left for the
        caller to retire.

        Returns:
            The value of the node that owned the element.
        """
        value = self.locate(element)
        node = self._nodes[value]

        del self._index[element]
        if self._origins.pop(element) == value:
            node.natives -= 1
        node.owned.remove(element)
        self._resize(value, -1)
        return value

    def _resize(self, value: RepresentativeValue, delta: int) -> None:
        for node in self.ancestors(value):
            node.size += delta

    def _move(
        self,
        element: Element,
        source: RepresentativeNode,
        target: RepresentativeNode,
    ) -> None:
        """Reattributes an element between two nodes, sizes are left to the caller."""
        origin = self._origins[element]
        source.owned.remove(element)
        if origin == source.value:
            source.natives -= 1
        target.owned.add(element)
        if origin == target.value:
            target.natives += 1
        self._index[element] = target.value

    # =========================================================================
    # Restructuring
    # =========================================================================

    def link(self, parent: RepresentativeValue, child: RepresentativeValue) -> None:
        """
        Attaches the root `child` under `parent`.

        `parent` does not have to be a root, but it must not lie in the
        subtree of `child`.
        """
        child_node = self.node(child)
        if child_node.parent is not None:
            raise InvalidArgumentError(f"Representative {child!r} is not a root")
        if self.root_of(parent) == child:
            raise InvalidArgumentError(
                f"Linking {child!r} under {parent!r} would create a cycle"
            )

        self._roots.discard(child)
        child_node.parent = parent
        self.node(parent).children.add(child)
        self._resize(parent, child_node.size)

    def hop(self, element: Element) -> RepresentativeValue:
        """
        Moves an element from its node to that node's parent.

        The departing node is retired if it is left without native elements.
        The subtree size of the parent is unchanged since the element was
        already below it.

        Returns:
            The value of the parent, which now owns the element.
        """
        value = self.locate(element)
        node = self._nodes[value]
        if node.parent is None:
            raise InvalidArgumentError(f"Representative {value!r} has no parent")
        parent = self._nodes[node.parent]

        self._move(element, node, parent)
        node.size -= 1

        self.retire(value)
        return parent.value

    def retire(self, value: RepresentativeValue) -> bool:
        """
        Splices a node out of the forest if it owns no native element anymore.

        A non-root hands its elements and children to its own parent. A root
        hands its place, elements and other children to its first child. A
        root without children that still owns elements takes the value of one
        of them instead, provided no other node holds that value. When every
        such value is taken the root keeps its own value.

        Returns:
            True if the node was removed or relabelled.
        """
        node = self.node(value)
        if node.natives:
            return False

        if node.parent is not None:
            parent = self._nodes[node.parent]
            for element in list(node.owned):
                self._move(element, node, parent)
            parent.children.discard(value)
            parent.children.update(node.children)
            for child in node.children:
                self._nodes[child].parent = parent.value
            if node.children:
                logger.debug(
                    f"Retired {value!r}: spliced {len(node.children)} children "
                    f"under {parent.value!r}"
                )
        elif node.children:
            new_root = self._nodes[next(iter(node.children))]
            new_root.parent = None
            new_root.size = node.size
            for element in list(node.owned):
                self._move(element, node, new_root)
            for child in node.children:
                if child != new_root.value:
                    self._nodes[child].parent = new_root.value
                    new_root.children.add(child)
            self._roots.discard(value)
            self._roots.add(new_root.value)
            logger.debug(f"Retired root {value!r}: promoted {new_root.value!r}")
        elif node.owned:
            free = next(
                (
                    origin
                    for element in node.owned
                    if (origin := self._origins[element]) not in self._nodes
                ),
                None,
            )
            if free is None:
                logger.debug(f"Kept root {value!r}: every element value is taken")
                return False
            self._relabel(node, free)
            return True
        else:
            self._roots.discard(value)

        node.children.clear()
        node.parent = None
        del self._nodes[value]
        return True

    def _relabel(self, node: RepresentativeNode, value: RepresentativeValue) -> None:
        """
        Gives a childless root the value of one of its elements.

        The value must not be held by another live node.
        """
        logger.debug(f"Relabelled root {node.value!r} as {value!r}")
        del self._nodes[node.value]
        self._roots.discard(node.value)

        node.value = value
        node.natives = 0
        for element in node.owned:
            self._index[element] = value
            if self._origins[element] == value:
                node.natives += 1

        self._nodes[value] = node
        self._roots.add(value)

    def clear(self) -> None:
        self._nodes.clear()
        self._roots.clear()
        self._index.clear()
        self._origins.clear()

    def copy(self) -> "Forest[RepresentativeValue, Element]":
        """Independent copy: nodes and their sets are duplicated."""
        forest: Forest[RepresentativeValue, Element] = Forest()
        forest._nodes = {
            value: RepresentativeNode(
                value=node.value,
                parent=node.parent,
                children=set(node.children),
                owned=set(node.owned),
                natives=node.natives,
                size=node.size,
            )
            for value, node in self._nodes.items()
        }
        forest._roots = set(self._roots)
        forest._index = dict(self._index)
        forest._origins = dict(self._origins)
        return forest
