"""
Disjoint sets with deletion.

Modules:
    engine      - HashUnionFindSet, the union-find structure
    forest      - Representative nodes and their restructuring
    iteration   - Fail-fast iterator
    traversal   - Tree traversals over the forest
    components  - Connected components of graphs
    errors      - Exceptions raised by the package
"""

from .components import edges_to_connected_components, nodes_to_connected_components
from .engine import HashUnionFindSet, identity
from .errors import (
    ConcurrentModificationError,
    InvalidArgumentError,
    NotFoundError,
    UnionFindError,
)
from .forest import Forest, RepresentativeNode
from .iteration import FailFastIterator

__all__ = [
    "ConcurrentModificationError",
    "FailFastIterator",
    "Forest",
    "HashUnionFindSet",
    "InvalidArgumentError",
    "NotFoundError",
    "RepresentativeNode",
    "UnionFindError",
    "edges_to_connected_components",
    "identity",
    "nodes_to_connected_components",
]
