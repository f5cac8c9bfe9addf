"""
Tests for all-pairs shortest paths.
"""

import pytest

from mazegraph.core.exceptions import GraphOperationError
from mazegraph.core.graph import DirectedGraph, DirectedWeightedGraph, WeightedGraph
from mazegraph.core.graph_paths import PathFinding
from mazegraph.core.graph_paths.algorithms import (
    AllPairsTable,
    DijkstraFinder,
    FloydWarshallFinder,
)
from mazegraph.core.graph_paths.utils import INFINITY


def test_all_pairs_distances_on_road_graph(road_graph):
    """Test the full distance table of a small undirected graph."""
    distances = FloydWarshallFinder(road_graph).all_pairs_distances()

    assert distances["s"] == {"s": 0.0, "t": 4.0, "x": 1.0, "y": 3.0}
    assert distances["t"]["x"] == 3.0
    for u in road_graph:
        for v in road_graph:
            assert distances[u][v] == distances[v][u]


def test_all_pairs_matches_dijkstra(scenario_weighted_graph):
    """Test that every pair agrees with single-source Dijkstra."""
    distances = FloydWarshallFinder(scenario_weighted_graph).all_pairs_distances()

    for start in scenario_weighted_graph:
        assert distances[start] == DijkstraFinder(scenario_weighted_graph).shortest_distances(
            start
        )


def test_floyd_warshall_path(road_graph):
    """Test path reconstruction from the predecessor matrix."""
    result = PathFinding.floyd_warshall(road_graph, "t", "s")

    assert result.nodes == ["t", "y", "x", "s"]
    assert result.total_weight == 4.0


def test_floyd_warshall_signed_graph(signed_graph):
    """Test Floyd-Warshall with negative weights and no negative cycle."""
    result = PathFinding.floyd_warshall(signed_graph, "s", "t")

    assert result.nodes == ["s", "b", "a", "t"]
    assert result.total_weight == 0.0
    result.validate(signed_graph)


def test_unreachable_pairs_are_omitted():
    """Test that the distance table only lists reachable pairs."""
    graph = DirectedGraph.from_edges(["a", "b", "c"], [("a", "b")])

    distances = FloydWarshallFinder(graph).all_pairs_distances()

    assert distances == {"a": {"a": 0.0, "b": 1.0}, "b": {"b": 0.0}, "c": {"c": 0.0}}
    assert not PathFinding.floyd_warshall(graph, "b", "a").found


def test_self_loops_do_not_change_diagonal():
    """Test that a vertex's distance to itself stays zero."""
    graph = DirectedWeightedGraph.from_edges(["a", "b"], [("a", "a", 5), ("a", "b", 2)])

    table = FloydWarshallFinder(graph).build_table()

    assert table.distance[table.index["a"]][table.index["a"]] == 0
    assert table.path("a", "b") == ["a", "b"]


def test_cheapest_parallel_edge_seeds_matrix():
    """Test that the initial matrix keeps the cheapest of parallel edges."""
    graph = DirectedWeightedGraph.from_edges(["a", "b"], [("a", "b", 7), ("a", "b", 3)])

    assert FloydWarshallFinder(graph).all_pairs_distances()["a"]["b"] == 3.0


def test_looping_predecessor_chain_raises():
    """Test that a predecessor chain which never reaches the start is reported."""
    table = AllPairsTable(
        vertices=["a", "b", "c"],
        index={"a": 0, "b": 1, "c": 2},
        distance=[[-2, -3, -1], [INFINITY, 0, 1], [INFINITY, -4, 0]],
        predecessor=[[None, 2, 1], [None, None, 1], [None, 2, None]],
    )

    with pytest.raises(GraphOperationError, match="negative cycle"):
        table.path("a", "c")


def test_undirected_negative_edge_still_returns_result():
    """Test that an undirected negative edge does not stop the relaxation."""
    graph = WeightedGraph.from_edges(["a", "b"], [("a", "b", -1)])

    distances = FloydWarshallFinder(graph).all_pairs_distances()

    assert distances["a"]["b"] < 0


def test_empty_graph_table():
    """Test building the table of a graph without vertices."""
    table = FloydWarshallFinder(DirectedGraph()).build_table()

    assert table.vertices == []
    assert table.distance == []
