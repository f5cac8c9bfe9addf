"""
A* search for graphs whose vertices carry 2D coordinates.

A* is Dijkstra with a reordered frontier: a vertex's priority is its true
accumulated cost ``g`` plus ``heuristic(vertex, end)``. The ``g`` values themselves
only ever hold real edge costs. The search stops as soon as the end vertex is
popped. Vertices are reopened when a cheaper route to them turns up later, so any
admissible heuristic (one that never overestimates) yields an optimal path.
"""

import logging
import math
from numbers import Real
from typing import Any, Dict, Optional, Tuple

from ...exceptions import NegativeWeightError, ValidationError
from ...types import Heuristic
from ..base import PathFinder
from ..heuristics import euclidean_distance
from ..models import PathResult
from ..utils import INFINITY, PriorityQueue, edge_weight, reconstruct_path

logger = logging.getLogger(__name__)


def _coordinates(vertex: Any) -> Tuple[float, float]:
    """Read numeric x/y from a vertex."""
    x = getattr(vertex, "x", None)
    y = getattr(vertex, "y", None)
    for value in (x, y):
        if not isinstance(value, Real) or isinstance(value, bool):
            raise ValidationError(f"A* vertices need numeric x and y coordinates, got {vertex!r}")
    return x, y


class AStarFinder(PathFinder):
    """A* path finder with a pluggable coordinate heuristic."""

    name = "a_star"

    def __init__(
        self,
        graph: Any,
        heuristic: Optional[Heuristic] = None,
        max_memory_mb: Optional[float] = None,
    ):
        """
        Initialize finder.

        Args:
            graph: Graph whose vertices expose numeric ``x`` and ``y``
            heuristic: ``(x1, y1, x2, y2) -> float`` estimate, defaults to
                Euclidean distance
            max_memory_mb: Optional memory limit in MB
        """
        super().__init__(graph, max_memory_mb)
        self.heuristic = heuristic or euclidean_distance

    def _estimate(self, heuristic: Heuristic, vertex: Any, goal: Tuple[float, float]) -> float:
        x, y = _coordinates(vertex)
        estimate = heuristic(x, y, goal[0], goal[1])
        if not isinstance(estimate, Real) or math.isnan(estimate) or estimate < 0:
            raise ValidationError(
                f"Heuristic must return a non-negative number, got {estimate!r} for {vertex!r}"
            )
        return float(estimate)

    def find_path(
        self,
        start_vertex: Any,
        end_vertex: Any,
        heuristic: Optional[Heuristic] = None,
        **kwargs,
    ) -> PathResult:
        """
        Find the cheapest path from start_vertex to end_vertex.

        Args:
            start_vertex: Starting vertex
            end_vertex: Target vertex
            heuristic: Overrides the finder's heuristic for this call

        Returns:
            PathResult whose total_weight is the true path cost, empty if either
            vertex is absent or end_vertex is unreachable

        Raises:
            ValidationError: If a vertex lacks coordinates or the heuristic
                returns a negative or NaN estimate
            NegativeWeightError: If a negative edge is relaxed
        """
        heuristic = heuristic or self.heuristic
        if not self.has_vertices(start_vertex, end_vertex):
            logger.debug(f"{self.name}: {start_vertex!r} or {end_vertex!r} not in graph")
            return PathResult.empty()

        goal = _coordinates(end_vertex)
        if start_vertex == end_vertex:
            return PathResult(nodes=[start_vertex], total_weight=0.0)

        with self._search_context():
            g_score: Dict[Any, float] = {start_vertex: 0.0}
            parents: Dict[Any, Any] = {}
            pq = PriorityQueue()
            pq.add_or_update(start_vertex, self._estimate(heuristic, start_vertex, goal))
            expanded = 0

            while not pq.empty():
                self.memory_manager.check_memory()
                current = pq.pop()
                if current is None:
                    break
                _, vertex = current
                if vertex == end_vertex:
                    break
                expanded += 1

                for entry in self.graph.get_adjacency(vertex):
                    weight = edge_weight(entry)
                    if weight < 0:
                        raise NegativeWeightError(
                            f"Negative weight {weight} found on edge {vertex!r} -> {entry.target!r}"
                        )

                    tentative_g = g_score[vertex] + weight
                    if tentative_g < g_score.get(entry.target, INFINITY):
                        g_score[entry.target] = tentative_g
                        parents[entry.target] = vertex
                        f_score = tentative_g + self._estimate(heuristic, entry.target, goal)
                        pq.add_or_update(entry.target, f_score)

        logger.debug(f"{self.name}: expanded {expanded} vertices")
        if end_vertex not in g_score:
            logger.debug(f"{self.name}: {end_vertex!r} not reachable from {start_vertex!r}")
            return PathResult.empty()

        nodes = reconstruct_path(parents, start_vertex, end_vertex)
        return PathResult(nodes=nodes, total_weight=float(g_score[end_vertex]))
