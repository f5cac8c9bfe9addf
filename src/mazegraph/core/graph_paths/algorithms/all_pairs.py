"""
Floyd-Warshall all-pairs shortest paths.

Vertices are indexed by their position in ``graph.get_vertices()`` for the duration
of a call. The distance matrix starts with 0 on the diagonal, the cheapest direct
weight between adjacent vertices and infinity elsewhere, then runs the canonical
k/i/j relaxation. A predecessor matrix is maintained alongside the distances:
``predecessor[i][j]`` is the index of the vertex just before ``j`` on the best known
route from ``i``. Paths are rebuilt from that matrix only.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ...exceptions import GraphOperationError
from ..base import PathFinder
from ..models import PathResult
from ..utils import INFINITY, edge_weight

logger = logging.getLogger(__name__)


@dataclass
class AllPairsTable:
    """
    Relaxed distance and predecessor matrices for one graph snapshot.

    Attributes:
        vertices: Vertex for each matrix index
        index: Matrix index for each vertex
        distance: distance[i][j] is the best known cost from i to j
        predecessor: predecessor[i][j] is the index before j on that route, or None
    """

    vertices: List[Any]
    index: Dict[Any, int]
    distance: List[List[float]]
    predecessor: List[List[Optional[int]]]

    def path(self, start_vertex: Any, end_vertex: Any) -> List[Any]:
        """
        Rebuild the route from start_vertex to end_vertex.

        Raises:
            GraphOperationError: If the predecessor chain loops (negative cycle)
        """
        i = self.index[start_vertex]
        j = self.index[end_vertex]
        if self.distance[i][j] == INFINITY:
            return []

        route = [j]
        current = j
        while current != i:
            previous = self.predecessor[i][current]
            if previous is None:
                return []
            current = previous
            route.append(current)
            if len(route) > len(self.vertices):
                raise GraphOperationError(
                    f"Predecessor chain from {start_vertex!r} to {end_vertex!r} does not "
                    f"terminate; the graph has a negative cycle"
                )
        route.reverse()
        return [self.vertices[k] for k in route]


class FloydWarshallFinder(PathFinder):
    """All-pairs shortest paths; signed weights allowed, negative cycles not detected."""

    name = "floyd_warshall"

    def build_table(self) -> AllPairsTable:
        """Build and relax the distance and predecessor matrices."""
        with self._search_context():
            vertices = self.graph.get_vertices()
            index = {vertex: i for i, vertex in enumerate(vertices)}
            n = len(vertices)

            distance: List[List[float]] = []
            predecessor: List[List[Optional[int]]] = []
            for i, vertex in enumerate(vertices):
                row = [INFINITY] * n
                row_predecessor: List[Optional[int]] = [None] * n
                row[i] = 0
                for entry in self.graph.get_adjacency(vertex):
                    j = index.get(entry.target)
                    if j is None or j == i:
                        continue
                    weight = edge_weight(entry)
                    if weight < row[j]:
                        row[j] = weight
                        row_predecessor[j] = i
                distance.append(row)
                predecessor.append(row_predecessor)
                self.memory_manager.check_memory()

            for k in range(n):
                self.memory_manager.check_memory(force=True)
                distance_k = distance[k]
                predecessor_k = predecessor[k]
                for i in range(n):
                    distance_ik = distance[i][k]
                    if distance_ik == INFINITY:
                        continue
                    distance_i = distance[i]
                    predecessor_i = predecessor[i]
                    for j in range(n):
                        candidate = distance_ik + distance_k[j]
                        if candidate < distance_i[j]:
                            distance_i[j] = candidate
                            predecessor_i[j] = predecessor_k[j]

        logger.debug(f"floyd_warshall: relaxed {n}x{n} matrix")
        return AllPairsTable(
            vertices=vertices, index=index, distance=distance, predecessor=predecessor
        )

    def all_pairs_distances(self) -> Dict[Any, Dict[Any, float]]:
        """
        Compute the distance between every ordered pair of vertices.

        Returns:
            ``{u: {v: distance}}`` containing only reachable pairs
        """
        table = self.build_table()
        return {
            u: {
                v: float(table.distance[i][j])
                for j, v in enumerate(table.vertices)
                if table.distance[i][j] != INFINITY
            }
            for i, u in enumerate(table.vertices)
        }

    def find_path(self, start_vertex: Any, end_vertex: Any, **kwargs) -> PathResult:
        """
        Find the cheapest path from start_vertex to end_vertex.

        Returns:
            PathResult whose total_weight is the relaxed matrix distance, empty if
            either vertex is absent or end_vertex is unreachable
        """
        if not self.has_vertices(start_vertex, end_vertex):
            logger.debug(f"{self.name}: {start_vertex!r} or {end_vertex!r} not in graph")
            return PathResult.empty()
        if start_vertex == end_vertex:
            return PathResult(nodes=[start_vertex], total_weight=0.0)

        table = self.build_table()
        nodes = table.path(start_vertex, end_vertex)
        if not nodes:
            logger.debug(f"{self.name}: {end_vertex!r} not reachable from {start_vertex!r}")
            return PathResult.empty()

        total = table.distance[table.index[start_vertex]][table.index[end_vertex]]
        return PathResult(nodes=nodes, total_weight=float(total))
