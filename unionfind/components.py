"""
Connected components computed with HashUnionFindSet.
"""

from collections.abc import Set
from typing import Callable, Iterable, TypeVar

from .engine import HashUnionFindSet, identity

T = TypeVar("T")


def nodes_to_connected_components(
    nodes: Set[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> frozenset[frozenset[T]]:
    """
    Extract connected components from an undirected graph structure.

    Args:
        nodes: set of nodes in the graph.
        node_to_neighbours: Function returning the nodes a given node is linked to.
            Neighbours missing from `nodes` are added to the graph.

    Returns:
        frozenset[frozenset[T]]: set of connected components of the graph
    """
    union_find: HashUnionFindSet[T, T] = HashUnionFindSet(identity, nodes)

    for node in nodes:
        for neighbour in node_to_neighbours(node):
            union_find.add(neighbour)
            union_find.union(node, neighbour)

    return frozenset(union_find.sets().values())


def edges_to_connected_components(
    edges: Iterable[tuple[T, T]],
) -> frozenset[frozenset[T]]:
    """Connected components of the graph made of the given edges."""
    union_find: HashUnionFindSet[T, T] = HashUnionFindSet(identity)

    for source, target in edges:
        union_find.add(source)
        union_find.add(target)
        union_find.union(source, target)

    return frozenset(union_find.sets().values())
