"""
Core type definitions and protocols.

This module provides the protocol every algorithm relies on. Algorithms only need
vertex enumeration and adjacency lookup, so any structure exposing these methods
can be searched without inheriting from the graph classes.
"""

from typing import Any, Callable, Hashable, Iterator, List, Protocol, TypeVar, runtime_checkable

from .exceptions import InvalidArgumentError
from .models import Adjacency

# Vertex values only need equality and a stable hash
V = TypeVar("V", bound=Hashable)

# heuristic(x1, y1, x2, y2) -> estimated remaining cost
Heuristic = Callable[[float, float, float, float], float]


@runtime_checkable
class GraphProtocol(Protocol):
    """Protocol defining the read-only graph operations used by algorithms."""

    def get_adjacency(self, vertex: Any) -> List[Adjacency]:
        """Get the outgoing adjacency entries of a vertex."""
        ...

    def get_vertices(self) -> List[Any]:
        """Get all vertices in a stable order."""
        ...

    def has_vertex(self, vertex: Any) -> bool:
        """Check if a vertex exists."""
        ...

    def __iter__(self) -> Iterator[Any]:
        """Iterate over vertices."""
        ...


def ensure_graph(graph: Any) -> GraphProtocol:
    """
    Check that an algorithm received a usable graph.

    Raises:
        InvalidArgumentError: If graph is None or does not implement GraphProtocol
    """
    if graph is None:
        raise InvalidArgumentError("graph must not be None")
    if not isinstance(graph, GraphProtocol):
        raise InvalidArgumentError(
            f"graph must provide get_adjacency, get_vertices and has_vertex, "
            f"got {type(graph).__name__}"
        )
    return graph
