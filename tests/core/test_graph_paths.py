"""
Tests for graph path finding algorithms.
"""

import pytest

from mazegraph.core.graph import DirectedGraph, Graph, WeightedGraph
from mazegraph.core.graph_paths import (
    PathFinding,
    PathResult,
    PathType,
    manhattan_distance,
)
from mazegraph.core.models import Coordinate2D

GENERAL_PATH_TYPES = [
    PathType.DFS,
    PathType.BFS,
    PathType.DIJKSTRA,
    PathType.BELLMAN_FORD,
    PathType.FLOYD_WARSHALL,
]


@pytest.fixture
def split_graph() -> Graph:
    """
    Fixture providing a graph with two components:
    1 - 2 - 3 and 4 - 5
    """
    return Graph.from_edges([1, 2, 3, 4, 5], [(1, 2), (2, 3), (4, 5)])


@pytest.fixture
def coordinate_line() -> WeightedGraph:
    """Fixture providing three collinear coordinates joined by unit edges."""
    points = [Coordinate2D(0, 0), Coordinate2D(1, 0), Coordinate2D(2, 0)]
    return WeightedGraph.from_edges(
        points, [(points[0], points[1], 1), (points[1], points[2], 1)]
    )


def test_scenario_bfs_path(scenario_graph):
    """Test breadth-first search on the five-vertex scenario graph."""
    result = PathFinding.bfs_path(scenario_graph, "a", "e")

    assert result.nodes == ["a", "d", "e"]
    assert result.found
    assert result.length == 2
    assert result.total_weight == 2.0


def test_scenario_dfs_path(scenario_graph):
    """Test depth-first search on the five-vertex scenario graph."""
    result = PathFinding.dfs_path(scenario_graph, "a", "e")

    assert result.nodes == ["a", "d", "e"]
    result.validate(scenario_graph)


def test_scenario_dijkstra_path(scenario_weighted_graph):
    """Test Dijkstra on the scenario graph with unit weights."""
    result = PathFinding.dijkstra(scenario_weighted_graph, "a", "e")

    assert result.nodes == ["a", "d", "e"]
    assert result.total_weight == 2.0


@pytest.mark.parametrize("path_type", GENERAL_PATH_TYPES)
def test_every_algorithm_finds_valid_path(scenario_weighted_graph, path_type):
    """Test that every algorithm returns a path made of real edges."""
    result = PathFinding.find_path(scenario_weighted_graph, "b", "e", path_type=path_type)

    assert result.nodes[0] == "b"
    assert result.nodes[-1] == "e"
    result.validate(scenario_weighted_graph)


@pytest.mark.parametrize(
    "path_type", [t for t in GENERAL_PATH_TYPES if t is not PathType.DFS]
)
def test_bfs_and_weighted_algorithms_agree_on_unit_weights(scenario_graph, path_type):
    """Test that on unit weights the weighted algorithms find fewest-edge paths."""
    result = PathFinding.find_path(scenario_graph, "c", "e", path_type=path_type)

    assert result.length == PathFinding.bfs_path(scenario_graph, "c", "e").length == 2


@pytest.mark.parametrize("path_type", list(PathType))
def test_absent_vertex_gives_empty_result(scenario_graph, path_type):
    """Test that every algorithm reports an absent vertex as no path."""
    for start, end in [("a", "zzz"), ("zzz", "a"), ("zzz", "yyy")]:
        result = PathFinding.find_path(scenario_graph, start, end, path_type=path_type)
        assert result == PathResult.empty()
        assert not result.found


@pytest.mark.parametrize("path_type", GENERAL_PATH_TYPES)
def test_unreachable_target_gives_empty_result(split_graph, path_type):
    """Test searching across disconnected components."""
    result = PathFinding.find_path(split_graph, 1, 5, path_type=path_type)

    assert result.nodes == []
    assert result.total_weight == 0.0


@pytest.mark.parametrize("path_type", GENERAL_PATH_TYPES)
def test_start_equals_end(scenario_graph, path_type):
    """Test that a vertex has a zero-length path to itself."""
    result = PathFinding.find_path(scenario_graph, "c", "c", path_type=path_type)

    assert result.nodes == ["c"]
    assert result.found
    assert result.length == 0
    assert result.total_weight == 0.0


def test_a_star_start_equals_end(coordinate_line):
    """Test A* from a coordinate to itself."""
    result = PathFinding.a_star(coordinate_line, Coordinate2D(1, 0), Coordinate2D(1, 0))

    assert result.nodes == [Coordinate2D(1, 0)]
    assert result.total_weight == 0.0


@pytest.mark.parametrize("path_type", GENERAL_PATH_TYPES)
def test_directed_edges_are_respected(path_type):
    """Test that no algorithm walks a directed edge backwards."""
    graph = DirectedGraph.from_edges(["a", "b", "c"], [("a", "b"), ("b", "c")])

    assert PathFinding.find_path(graph, "a", "c", path_type=path_type).nodes == ["a", "b", "c"]
    assert not PathFinding.find_path(graph, "c", "a", path_type=path_type).found


@pytest.mark.parametrize("path_type", GENERAL_PATH_TYPES)
def test_integer_zero_vertex(path_type):
    """Test that the integer 0 is usable as a start and end vertex."""
    graph = Graph.from_edges([0, 1, 2], [(0, 1), (1, 2)])

    assert PathFinding.find_path(graph, 0, 2, path_type=path_type).nodes == [0, 1, 2]
    assert PathFinding.find_path(graph, 2, 0, path_type=path_type).nodes == [2, 1, 0]


def test_algorithms_do_not_mutate_graph(scenario_weighted_graph):
    """Test that searching leaves the graph untouched."""
    version = scenario_weighted_graph.version
    before = {v: scenario_weighted_graph.get_neighbors(v) for v in scenario_weighted_graph}

    for path_type in GENERAL_PATH_TYPES:
        PathFinding.find_path(scenario_weighted_graph, "a", "e", path_type=path_type)

    assert scenario_weighted_graph.version == version
    assert {v: scenario_weighted_graph.get_neighbors(v) for v in scenario_weighted_graph} == before


def test_find_path_defaults_to_dijkstra(road_graph):
    """Test the default algorithm of the generic interface."""
    result = PathFinding.find_path(road_graph, "s", "t")

    assert result.nodes == ["s", "x", "y", "t"]
    assert result.total_weight == 4.0


def test_find_path_dispatches_a_star_with_heuristic(coordinate_line):
    """Test passing a heuristic through the generic interface."""
    result = PathFinding.find_path(
        coordinate_line,
        Coordinate2D(0, 0),
        Coordinate2D(2, 0),
        path_type=PathType.A_STAR,
        heuristic=manhattan_distance,
    )

    assert result.nodes == [Coordinate2D(0, 0), Coordinate2D(1, 0), Coordinate2D(2, 0)]
    assert result.total_weight == 2.0


def test_find_path_rejects_unknown_type(scenario_graph):
    """Test the generic interface with an invalid algorithm."""
    with pytest.raises(ValueError, match="Unknown path type"):
        PathFinding.find_path(scenario_graph, "a", "e", path_type="dfs")


def test_find_path_rejects_heuristic_for_other_algorithms(scenario_graph):
    """Test that heuristics are only accepted by A*."""
    with pytest.raises(ValueError, match="heuristic is only supported"):
        PathFinding.find_path(
            scenario_graph, "a", "e", path_type=PathType.BFS, heuristic=manhattan_distance
        )


def test_repeated_queries_are_independent(road_graph):
    """Test that finders keep no state between calls."""
    first = PathFinding.dijkstra(road_graph, "s", "t")
    PathFinding.dijkstra(road_graph, "t", "x")
    second = PathFinding.dijkstra(road_graph, "s", "t")

    assert first == second


def test_find_path_accepts_explicit_none_heuristic(road_graph):
    """Test that heuristic=None means no heuristic for every algorithm."""
    result = PathFinding.find_path(road_graph, "s", "t", path_type=PathType.DIJKSTRA, heuristic=None)

    assert result.nodes == ["s", "x", "y", "t"]
