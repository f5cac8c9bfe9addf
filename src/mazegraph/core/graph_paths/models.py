"""
Data models for graph path finding.

This module provides the core data structures used throughout the path finding package:
- PathResult: Container for path finding results with validation
- PathValidationError: Exception for path validation failures

Every algorithm returns a PathResult. "No path" is an empty result whose ``found``
flag is False, which keeps it distinct from the zero-length path ``[start]``.

Example:
    >>> result = PathFinding.bfs_path(graph, "a", "e")
    >>> result.found
    True
    >>> result.nodes
    ['a', 'd', 'e']
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Tuple

from ..types import GraphProtocol
from .utils import EPSILON, edge_weight


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Consecutive vertices that are not adjacent in the graph
    - Vertices missing from the graph
    - Total weight inconsistent with the edges along the path
    """

    pass


@dataclass
class PathResult:
    """
    Container for path finding results.

    Attributes:
        nodes: Vertices from start to end inclusive, empty when no path exists
        total_weight: Sum of edge weights along the path (edges count as 1 in
            unweighted graphs)

    Example:
        >>> result = PathResult(nodes=["a", "d", "e"], total_weight=2.0)
        >>> result.length
        2
        >>> result.edges
        [('a', 'd'), ('d', 'e')]
    """

    nodes: List[Any] = field(default_factory=list)
    total_weight: float = 0.0

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.nodes, list):
            raise TypeError("nodes must be a list")

        if not isinstance(self.total_weight, (int, float)) or isinstance(self.total_weight, bool):
            raise TypeError("total_weight must be a numeric value")

        if not self.nodes and self.total_weight != 0:
            raise ValueError("an empty path cannot carry a weight")

    @classmethod
    def empty(cls) -> "PathResult":
        """Result used when no path exists."""
        return cls(nodes=[], total_weight=0.0)

    @property
    def found(self) -> bool:
        """Whether a path exists (a single-vertex path counts)."""
        return bool(self.nodes)

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return max(len(self.nodes) - 1, 0)

    @property
    def edges(self) -> List[Tuple[Any, Any]]:
        """Consecutive ``(u, v)`` pairs along the path."""
        return list(zip(self.nodes, self.nodes[1:]))

    def __len__(self) -> int:
        """Return the number of vertices in the path."""
        return len(self.nodes)

    def __getitem__(self, index: int) -> Any:
        """Get a vertex from the path by index."""
        return self.nodes[index]

    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over the path vertices."""
        return iter(self.nodes)

    def validate(self, graph: GraphProtocol, weight_epsilon: float = EPSILON) -> None:
        """
        Validate the path against a graph.

        Checks that every vertex exists, that each consecutive pair is joined by
        an edge, and that ``total_weight`` equals the sum of the cheapest edge
        between each pair.

        Args:
            graph: The graph the path was computed on
            weight_epsilon: Precision for weight comparisons

        Raises:
            PathValidationError: If any validation check fails
        """
        if weight_epsilon <= 0:
            raise ValueError("weight_epsilon must be positive")

        if not self.nodes:
            return

        for vertex in self.nodes:
            if not graph.has_vertex(vertex):
                raise PathValidationError(f"Vertex {vertex!r} not in graph")

        calculated_weight = 0.0
        for i, (u, v) in enumerate(self.edges):
            weights = [edge_weight(entry) for entry in graph.get_adjacency(u) if entry.target == v]
            if not weights:
                raise PathValidationError(
                    f"Path discontinuity between positions {i} and {i + 1}: "
                    f"no edge {u!r} -> {v!r}"
                )
            calculated_weight += min(weights)

        if abs(calculated_weight - self.total_weight) > weight_epsilon:
            raise PathValidationError(
                f"Weight mismatch: calculated {calculated_weight} != stored {self.total_weight}"
            )
