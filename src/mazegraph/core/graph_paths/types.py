"""Type definitions for graph path finding."""

from enum import Enum


class PathType(Enum):
    """Enumeration of path finding algorithms."""

    DFS = "dfs"  # Any path, no optimality
    BFS = "bfs"  # Fewest edges
    DIJKSTRA = "dijkstra"  # Non-negative weights only
    BELLMAN_FORD = "bellman_ford"  # Supports negative weights
    FLOYD_WARSHALL = "floyd_warshall"  # All pairs, supports negative weights
    A_STAR = "a_star"  # Non-negative weights, coordinate vertices
