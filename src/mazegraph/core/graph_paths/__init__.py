"""Graph path finding functionality."""

import logging
from typing import Any, Dict, Optional, Type

from ..types import Heuristic
from .algorithms import (
    AStarFinder,
    BellmanFordFinder,
    BFSPathFinder,
    DFSPathFinder,
    DijkstraFinder,
    FloydWarshallFinder,
)
from .base import PathFinder
from .heuristics import diagonal_distance, euclidean_distance, manhattan_distance
from .models import PathResult, PathValidationError
from .types import PathType

logger = logging.getLogger(__name__)

__all__ = [
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PathType",
    "PathValidationError",
    "diagonal_distance",
    "euclidean_distance",
    "manhattan_distance",
]

_FINDERS: Dict[PathType, Type[PathFinder]] = {
    PathType.DFS: DFSPathFinder,
    PathType.BFS: BFSPathFinder,
    PathType.DIJKSTRA: DijkstraFinder,
    PathType.BELLMAN_FORD: BellmanFordFinder,
    PathType.FLOYD_WARSHALL: FloydWarshallFinder,
    PathType.A_STAR: AStarFinder,
}


class PathFinding:
    """
    Static interface for path finding operations.

    Every method takes a read-only graph plus start and end vertices and returns a
    PathResult, empty when no path exists. None of them mutate the graph or keep
    state between calls.
    """

    @staticmethod
    def dfs_path(graph: Any, start_vertex: Any, end_vertex: Any, **kwargs) -> PathResult:
        """Find some path using depth-first search."""
        return DFSPathFinder(graph, **kwargs).find_path(start_vertex, end_vertex)

    @staticmethod
    def bfs_path(graph: Any, start_vertex: Any, end_vertex: Any, **kwargs) -> PathResult:
        """Find a path with the fewest edges using breadth-first search."""
        return BFSPathFinder(graph, **kwargs).find_path(start_vertex, end_vertex)

    @staticmethod
    def dijkstra(graph: Any, start_vertex: Any, end_vertex: Any, **kwargs) -> PathResult:
        """Find the cheapest path in a graph without negative weights."""
        return DijkstraFinder(graph, **kwargs).find_path(start_vertex, end_vertex)

    @staticmethod
    def bellman_ford(graph: Any, start_vertex: Any, end_vertex: Any, **kwargs) -> PathResult:
        """Find the cheapest path in a graph that may have negative weights."""
        return BellmanFordFinder(graph, **kwargs).find_path(start_vertex, end_vertex)

    @staticmethod
    def floyd_warshall(graph: Any, start_vertex: Any, end_vertex: Any, **kwargs) -> PathResult:
        """Find the cheapest path from the all-pairs distance matrix."""
        return FloydWarshallFinder(graph, **kwargs).find_path(start_vertex, end_vertex)

    @staticmethod
    def a_star(
        graph: Any,
        start_vertex: Any,
        end_vertex: Any,
        heuristic: Optional[Heuristic] = None,
        **kwargs,
    ) -> PathResult:
        """Find the cheapest path between coordinate vertices guided by a heuristic."""
        return AStarFinder(graph, heuristic=heuristic, **kwargs).find_path(
            start_vertex, end_vertex
        )

    @classmethod
    def find_path(
        cls,
        graph: Any,
        start_vertex: Any,
        end_vertex: Any,
        path_type: PathType = PathType.DIJKSTRA,
        **kwargs,
    ) -> PathResult:
        """
        Generic path finding interface.

        Args:
            graph: Graph to search
            start_vertex: Starting vertex
            end_vertex: Target vertex
            path_type: Algorithm to use
            **kwargs: Finder options (``max_memory_mb``, and ``heuristic`` for A*)

        Raises:
            ValueError: If path_type is not a PathType
        """
        if not isinstance(path_type, PathType):
            raise ValueError(
                f"Unknown path type {path_type!r}. "
                f"Must be one of: {', '.join(t.value for t in PathType)}"
            )
        heuristic = kwargs.pop("heuristic", None)
        if heuristic is not None:
            if path_type is not PathType.A_STAR:
                raise ValueError(f"heuristic is only supported by {PathType.A_STAR.value}")
            kwargs["heuristic"] = heuristic

        logger.debug(f"Finding path {start_vertex!r} -> {end_vertex!r} with {path_type.value}")
        finder = _FINDERS[path_type](graph, **kwargs)
        return finder.find_path(start_vertex, end_vertex)
