"""Shared test fixtures."""

from typing import Callable, Iterable, Tuple

import pytest

from mazegraph.core.graph import (
    DirectedWeightedGraph,
    Graph,
    NonNegativeWeightedGraph,
)
from mazegraph.core.models import Coordinate2D

SCENARIO_VERTICES = ["a", "b", "c", "d", "e"]
SCENARIO_EDGES = [("a", "d"), ("a", "b"), ("a", "c"), ("b", "d"), ("d", "c"), ("d", "e")]


@pytest.fixture
def scenario_graph() -> Graph:
    """
    Fixture providing the five-vertex undirected scenario graph:
    a - b, a - c, a - d, b - d, d - c, d - e
    """
    return Graph.from_edges(SCENARIO_VERTICES, SCENARIO_EDGES)


@pytest.fixture
def scenario_weighted_graph() -> NonNegativeWeightedGraph:
    """Fixture providing the scenario graph with every edge weighted 1."""
    return NonNegativeWeightedGraph.from_edges(
        SCENARIO_VERTICES, [(u, v, 1) for u, v in SCENARIO_EDGES]
    )


@pytest.fixture
def road_graph() -> NonNegativeWeightedGraph:
    """
    Fixture providing a weighted graph where the fewest-edges route is not the cheapest:

    s --10-- t
    |        |
    1        1
    |        |
    x --2--- y
    """
    return NonNegativeWeightedGraph.from_edges(
        ["s", "t", "x", "y"],
        [("s", "t", 10), ("s", "x", 1), ("x", "y", 2), ("y", "t", 1)],
    )


@pytest.fixture
def signed_graph() -> DirectedWeightedGraph:
    """Fixture providing a directed signed graph without negative cycles."""
    return DirectedWeightedGraph.from_edges(
        ["s", "a", "b", "t"],
        [("s", "a", 4), ("s", "b", 2), ("b", "a", -3), ("a", "t", 1), ("b", "t", 5)],
    )


def _build_grid(
    width: int,
    height: int,
    walls: Iterable[Tuple[int, int]] = (),
    diagonal: bool = False,
) -> NonNegativeWeightedGraph:
    """
    Build a grid of Coordinate2D vertices.

    Straight steps cost 10, diagonal steps cost 15 so that octile and Euclidean
    estimates scaled by 10 stay admissible.
    """
    blocked = set(walls)
    graph = NonNegativeWeightedGraph()
    cells = [
        Coordinate2D(x, y)
        for y in range(height)
        for x in range(width)
        if (x, y) not in blocked
    ]
    for cell in cells:
        graph.add_vertex(cell)

    steps = [(1, 0, 10), (0, 1, 10)]
    if diagonal:
        steps += [(1, 1, 15), (1, -1, 15)]
    for cell in cells:
        for dx, dy, cost in steps:
            graph.add_edge(cell, Coordinate2D(cell.x + dx, cell.y + dy), cost)
    return graph


@pytest.fixture
def grid_builder() -> Callable[..., NonNegativeWeightedGraph]:
    """Fixture providing the coordinate grid builder."""
    return _build_grid
