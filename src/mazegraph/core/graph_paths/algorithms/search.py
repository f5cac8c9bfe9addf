"""
Uninformed path search: depth-first and breadth-first.

Both finders explore like the reachability traversals in ``mazegraph.core.traversal``
and additionally remember, for each vertex, the vertex that discovered it first.
The search stops as soon as the target shows up as a neighbor of the vertex being
expanded, and the path is rebuilt from those parent links.

BFS discovers every vertex through a fewest-edges route, so its path is a shortest
path by edge count. DFS only guarantees that the path is valid.
"""

import logging
from abc import abstractmethod
from collections import deque
from typing import Any, Deque, Dict

from ..base import PathFinder
from ..models import PathResult
from ..utils import path_weight, reconstruct_path

logger = logging.getLogger(__name__)


class _FrontierSearchFinder(PathFinder):
    """Shared discovery loop; subclasses choose which end of the frontier to expand."""

    name = "search"

    @abstractmethod
    def _take(self, frontier: Deque[Any]) -> Any:
        """Remove the next vertex to expand from the frontier."""

    def find_path(self, start_vertex: Any, end_vertex: Any, **kwargs) -> PathResult:
        """
        Find a path from start_vertex to end_vertex.

        Returns:
            PathResult with the discovered path, empty if either vertex is absent
            or end_vertex is never discovered
        """
        if not self.has_vertices(start_vertex, end_vertex):
            logger.debug(f"{self.name}: {start_vertex!r} or {end_vertex!r} not in graph")
            return PathResult.empty()
        if start_vertex == end_vertex:
            return PathResult(nodes=[start_vertex], total_weight=0.0)

        with self._search_context():
            found = {start_vertex}
            frontier: Deque[Any] = deque([start_vertex])
            parents: Dict[Any, Any] = {}

            while frontier:
                self.memory_manager.check_memory()
                vertex = self._take(frontier)

                for entry in self.graph.get_adjacency(vertex):
                    neighbor = entry.target
                    if neighbor not in found:
                        found.add(neighbor)
                        frontier.append(neighbor)
                        parents[neighbor] = vertex

                    if neighbor == end_vertex:
                        nodes = reconstruct_path(parents, start_vertex, end_vertex)
                        logger.debug(
                            f"{self.name}: reached {end_vertex!r} after discovering "
                            f"{len(found)} vertices"
                        )
                        return PathResult(nodes=nodes, total_weight=path_weight(self.graph, nodes))

        logger.debug(f"{self.name}: {end_vertex!r} not reachable from {start_vertex!r}")
        return PathResult.empty()


class DFSPathFinder(_FrontierSearchFinder):
    """Depth-first path search using a last-in-first-out frontier."""

    name = "dfs"

    def _take(self, frontier: Deque[Any]) -> Any:
        return frontier.pop()


class BFSPathFinder(_FrontierSearchFinder):
    """Breadth-first path search using a first-in-first-out frontier."""

    name = "bfs"

    def _take(self, frontier: Deque[Any]) -> Any:
        return frontier.popleft()
