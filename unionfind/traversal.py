"""
Tree traversals over the representative forest.

Traversals:
    depth_first_preorder(after, root)   - DFS yielding parent before children
    breadth_first_preorder(after, root) - BFS yielding nodes level by level

Both take an `after` function returning the children of a node, so they work
on any tree whose links are expressed as keys rather than object references.
The forest is acyclic, so no `seen` set is kept.
"""

from collections import deque
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")


def depth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """Yields parent before children, depth-first."""
    if root is None:
        return
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(after(current))


def breadth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[tuple[T, int]]:
    """Yields (node, depth) level by level, root first at depth 0."""
    if root is None:
        return
    queue: deque[tuple[T, int]] = deque([(root, 0)])
    while queue:
        current, depth = queue.popleft()
        yield current, depth
        for child in after(current):
            queue.append((child, depth + 1))
