"""
Single-source shortest path algorithms: Dijkstra and Bellman-Ford.

Both finders work on every graph variant; unweighted edges cost 1. Dijkstra
requires non-negative weights and raises ``NegativeWeightError`` as soon as it
relaxes a negative edge. Bellman-Ford accepts signed weights but does not detect
negative cycles.
"""

import logging
from abc import abstractmethod
from typing import Any, Dict, Tuple

from ...exceptions import NegativeWeightError
from ..base import PathFinder
from ..models import PathResult
from ..utils import INFINITY, PriorityQueue, edge_weight, reconstruct_path

logger = logging.getLogger(__name__)

Distances = Dict[Any, float]
Parents = Dict[Any, Any]


class _SingleSourceFinder(PathFinder):
    """Shared path extraction for finders that compute distances from one source."""

    name = "single_source"

    @abstractmethod
    def _compute(self, start_vertex: Any) -> Tuple[Distances, Parents]:
        """Compute distances and parent links from start_vertex."""

    def shortest_distances(self, start_vertex: Any) -> Distances:
        """
        Compute the distance from start_vertex to every vertex in the graph.

        Returns:
            Mapping of vertex to distance; unreachable vertices map to infinity.
            Empty if start_vertex is absent.
        """
        if not self.graph.has_vertex(start_vertex):
            return {}
        with self._search_context():
            distances, _ = self._compute(start_vertex)
        return distances

    def find_path(self, start_vertex: Any, end_vertex: Any, **kwargs) -> PathResult:
        """
        Find the cheapest path from start_vertex to end_vertex.

        Returns:
            PathResult whose total_weight is the path cost, empty if either vertex
            is absent or end_vertex is unreachable
        """
        if not self.has_vertices(start_vertex, end_vertex):
            logger.debug(f"{self.name}: {start_vertex!r} or {end_vertex!r} not in graph")
            return PathResult.empty()
        if start_vertex == end_vertex:
            return PathResult(nodes=[start_vertex], total_weight=0.0)

        logger.debug(f"Starting {self.name} from {start_vertex!r} to {end_vertex!r}")
        with self._search_context():
            distances, parents = self._compute(start_vertex)

        if distances.get(end_vertex, INFINITY) == INFINITY:
            logger.debug(f"{self.name}: {end_vertex!r} not reachable from {start_vertex!r}")
            return PathResult.empty()

        nodes = reconstruct_path(parents, start_vertex, end_vertex)
        logger.debug(f"{self.name}: total distance {distances[end_vertex]}")
        return PathResult(nodes=nodes, total_weight=float(distances[end_vertex]))


class DijkstraFinder(_SingleSourceFinder):
    """
    Dijkstra's algorithm over a min-priority frontier ordered by tentative distance.

    The whole reachable part of the graph is settled before a path is extracted,
    which is what makes ``shortest_distances`` and ``find_path`` share one pass.
    """

    name = "dijkstra"

    def _compute(self, start_vertex: Any) -> Tuple[Distances, Parents]:
        distances: Distances = {vertex: INFINITY for vertex in self.graph.get_vertices()}
        distances[start_vertex] = 0.0
        parents: Parents = {}

        pq = PriorityQueue()
        pq.add_or_update(start_vertex, 0.0)
        settled = 0

        while not pq.empty():
            self.memory_manager.check_memory()
            current = pq.pop()
            if current is None:
                break
            current_dist, vertex = current
            settled += 1

            for entry in self.graph.get_adjacency(vertex):
                weight = edge_weight(entry)
                if weight < 0:
                    raise NegativeWeightError(
                        f"Negative weight {weight} found on edge {vertex!r} -> {entry.target!r}"
                    )

                new_dist = current_dist + weight
                if new_dist < distances.get(entry.target, INFINITY):
                    distances[entry.target] = new_dist
                    parents[entry.target] = vertex
                    pq.add_or_update(entry.target, new_dist)

        logger.debug(f"dijkstra: settled {settled} vertices from {start_vertex!r}")
        return distances, parents


class BellmanFordFinder(_SingleSourceFinder):
    """
    Bellman-Ford relaxation over every edge, repeated once per vertex.

    Running |V| rounds is one more than the |V| - 1 needed for a graph without
    negative cycles. Negative cycles are not detected: distances on them keep
    shrinking, and a path whose parent chain loops raises ``GraphOperationError``
    during reconstruction.
    """

    name = "bellman_ford"

    def _compute(self, start_vertex: Any) -> Tuple[Distances, Parents]:
        vertices = self.graph.get_vertices()
        distances: Distances = {vertex: INFINITY for vertex in vertices}
        distances[start_vertex] = 0.0
        parents: Parents = {}

        for _ in range(len(vertices)):
            self.memory_manager.check_memory()
            for vertex in vertices:
                if distances[vertex] == INFINITY:
                    continue
                for entry in self.graph.get_adjacency(vertex):
                    new_dist = distances[vertex] + edge_weight(entry)
                    if new_dist < distances.get(entry.target, INFINITY):
                        distances[entry.target] = new_dist
                        parents[entry.target] = vertex

        return distances, parents
