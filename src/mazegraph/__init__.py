"""
mazegraph - Graph containers and path finding algorithms

This package provides adjacency list graphs in unweighted, weighted, directed and
non-negative weighted flavours, together with a suite of algorithms that run
uniformly over all of them:

- Reachability and traversal (DFS, BFS)
- Path search (DFS, BFS)
- Shortest paths (Dijkstra, Bellman-Ford, Floyd-Warshall)
- A* over coordinate vertices with pluggable distance heuristics

Example:
    >>> from mazegraph import Graph, PathFinding
    >>> graph = Graph.from_edges("abcde", [("a", "d"), ("a", "b"), ("d", "e")])
    >>> PathFinding.bfs_path(graph, "a", "e").nodes
    ['a', 'd', 'e']
"""

__version__ = "0.1.0"
__author__ = "mazegraph contributors"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("mazegraph requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import (
    DirectedGraph,
    DirectedNonNegativeWeightedGraph,
    DirectedWeightedGraph,
    Graph,
    NonNegativeWeightedGraph,
    WeightedGraph,
)
from .core.models import Coordinate2D
from .core.traversal import reachable_bfs, reachable_dfs
from .core.graph_paths import PathFinding, PathResult, PathType

__all__ = [
    "Coordinate2D",
    "DirectedGraph",
    "DirectedNonNegativeWeightedGraph",
    "DirectedWeightedGraph",
    "Graph",
    "NonNegativeWeightedGraph",
    "PathFinding",
    "PathResult",
    "PathType",
    "WeightedGraph",
    "reachable_bfs",
    "reachable_dfs",
]
