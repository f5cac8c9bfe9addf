"""
Graph traversal using the iterator pattern.

This module provides depth-first and breadth-first traversal over any structure
satisfying ``GraphProtocol``. Both strategies share the same discovery rule: a
vertex enters the frontier at most once, guarded by a "found" set, so traversal
terminates in O(V + E) without revisits. They only differ in the frontier
discipline (stack versus queue).
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Iterator, Set, Tuple

from .types import GraphProtocol, ensure_graph


class GraphIterator(ABC):
    """Base class for graph traversal iterators."""

    def __init__(self, graph: GraphProtocol, start_vertex: Any):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            start_vertex: Starting vertex for traversal
        """
        self.graph = ensure_graph(graph)
        self.start = start_vertex
        self.found: Set[Any] = set()

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[Any, int]]:
        """
        Get iterator for traversal.

        Returns:
            Iterator yielding tuples of (vertex, depth) in expansion order
        """
        pass


class BFSIterator(GraphIterator):
    """Breadth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[Any, int]]:
        """
        Traverse graph in breadth-first order.

        Yields:
            Tuples of (vertex, depth) in BFS order
        """
        if not self.graph.has_vertex(self.start):
            return

        queue = deque([(self.start, 0)])
        self.found.add(self.start)

        while queue:
            vertex, depth = queue.popleft()
            yield vertex, depth

            for entry in self.graph.get_adjacency(vertex):
                if entry.target not in self.found:
                    self.found.add(entry.target)
                    queue.append((entry.target, depth + 1))


class DFSIterator(GraphIterator):
    """Depth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[Any, int]]:
        """
        Traverse graph in depth-first order.

        The most recently discovered vertex is expanded first, so the last
        neighbor in an adjacency list is followed before the first one.

        Yields:
            Tuples of (vertex, depth) in DFS order
        """
        if not self.graph.has_vertex(self.start):
            return

        stack = [(self.start, 0)]
        self.found.add(self.start)

        while stack:
            vertex, depth = stack.pop()
            yield vertex, depth

            for entry in self.graph.get_adjacency(vertex):
                if entry.target not in self.found:
                    self.found.add(entry.target)
                    stack.append((entry.target, depth + 1))


def reachable_dfs(graph: GraphProtocol, start_vertex: Any) -> Set[Any]:
    """
    Find every vertex reachable from ``start_vertex`` using depth-first search.

    Returns:
        Set of reachable vertices including the start, empty if the start is absent
    """
    iterator = DFSIterator(graph, start_vertex)
    for _ in iterator:
        pass
    return iterator.found


def reachable_bfs(graph: GraphProtocol, start_vertex: Any) -> Set[Any]:
    """
    Find every vertex reachable from ``start_vertex`` using breadth-first search.

    Returns:
        Set of reachable vertices including the start, empty if the start is absent
    """
    iterator = BFSIterator(graph, start_vertex)
    for _ in iterator:
        pass
    return iterator.found
