"""Tests for unionfind/components.py"""

from unionfind import edges_to_connected_components, nodes_to_connected_components


def grid_neighbours(coord: tuple[int, int]) -> set[tuple[int, int]]:
    col, row = coord
    return {(col + 1, row), (col - 1, row), (col, row + 1), (col, row - 1)}


class TestNodesToConnectedComponents:
    def test_empty_set(self):
        result = nodes_to_connected_components(set(), grid_neighbours)
        assert result == frozenset()

    def test_single_node(self):
        result = nodes_to_connected_components({(0, 0)}, lambda coord: set())
        assert result == frozenset([frozenset({(0, 0)})])

    def test_two_separate_lines(self):
        coords = {(0, 0), (0, 1), (0, 2), (2, 0), (2, 1), (2, 2)}
        result = nodes_to_connected_components(
            coords, lambda coord: grid_neighbours(coord) & coords
        )
        expected = frozenset([
            frozenset({(0, 0), (0, 1), (0, 2)}),
            frozenset({(2, 0), (2, 1), (2, 2)}),
        ])
        assert result == expected

    def test_diagonal_is_not_adjacent(self):
        coords = {(0, 0), (1, 1)}
        result = nodes_to_connected_components(
            coords, lambda coord: grid_neighbours(coord) & coords
        )
        assert result == frozenset([frozenset({(0, 0)}), frozenset({(1, 1)})])

    def test_outside_neighbours_are_included(self):
        """Nodes that only appear as neighbours join the component."""
        graph = {"A": {"B"}, "C": set()}
        result = nodes_to_connected_components(
            set(graph), lambda node: graph.get(node, set())
        )
        assert result == frozenset([frozenset({"A", "B"}), frozenset({"C"})])


class TestEdgesToConnectedComponents:
    def test_empty(self):
        assert edges_to_connected_components([]) == frozenset()

    def test_components(self):
        result = edges_to_connected_components([(1, 2), (2, 3), (4, 5)])
        assert result == frozenset([frozenset({1, 2, 3}), frozenset({4, 5})])

    def test_self_loop(self):
        assert edges_to_connected_components([(6, 6)]) == frozenset([frozenset({6})])

    def test_cycle(self):
        result = edges_to_connected_components([("a", "b"), ("b", "c"), ("c", "a")])
        assert result == frozenset([frozenset({"a", "b", "c"})])
