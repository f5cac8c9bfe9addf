"""
Graph containers with an adjacency list representation.

This module provides a single adjacency list core, ``BaseGraph``, that stores each
vertex's outgoing edges as ``Adjacency(target, weight)`` entries in insertion order.
The public variants only differ in how edges are inserted:

- ``Graph`` / ``DirectedGraph``: unweighted edges
- ``WeightedGraph`` / ``DirectedWeightedGraph``: signed integer weights
- ``NonNegativeWeightedGraph`` / ``DirectedNonNegativeWeightedGraph``: integer
  weights in ``[0, UINT_MAX)``, the precondition for Dijkstra and A*

Undirected variants record an edge in both endpoints' adjacency lists. Edges are
only recorded between vertices that were previously added; anything else is a
silent no-op. Parallel edges are kept.

Graphs are not thread-safe and must not be mutated while an algorithm runs.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Protocol,
    Tuple,
    Type,
    TypeVar,
)

from .exceptions import NegativeWeightError, ValidationError
from .models import Adjacency
from .types import V

logger = logging.getLogger(__name__)

# Exclusive upper bound for non-negative weights
UINT_MAX = 2**32 - 1

G = TypeVar("G", bound="BaseGraph")


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    VERTEX_ADDED = auto()
    EDGE_ADDED = auto()


class GraphStateListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, change_type: GraphEvent, details: dict) -> None:
        """Called when the graph state changes."""


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    adjacency: Dict[Any, List[Adjacency]] = field(default_factory=dict)
    edge_count: int = 0
    version: int = 0


class BaseGraph(Generic[V]):
    """
    Adjacency list core shared by every graph variant.

    Subclasses set ``directed`` and ``weighted`` and expose an ``add_edge`` with
    the signature that fits them; they all funnel into ``_insert_edge``.

    Attributes:
        directed (bool): Whether edges are recorded only from source to target
        weighted (bool): Whether edges carry an integer weight
        _state (GraphState): Internal state of the graph
        _listeners (List[GraphStateListener]): State change listeners
    """

    directed: bool = False
    weighted: bool = False

    def __init__(self, vertices: Optional[Iterable[V]] = None):
        """
        Initialize an empty graph, optionally seeded with vertices.

        Args:
            vertices: Vertices to add, in order
        """
        self._state = GraphState()
        self._listeners: List[GraphStateListener] = []
        for vertex in vertices or ():
            self.add_vertex(vertex)

    @property
    def version(self) -> int:
        """Counter bumped by every mutation that changed the graph."""
        return self._state.version

    def add_state_listener(self, listener: GraphStateListener) -> None:
        """Add a listener for state changes."""
        self._listeners.append(listener)

    def remove_state_listener(self, listener: GraphStateListener) -> None:
        """Remove a state change listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_state_change(self, change_type: GraphEvent, details: dict) -> None:
        """Bump the version and notify listeners of a state change."""
        self._state.version += 1
        for listener in self._listeners:
            listener.on_state_change(change_type, details)

    def add_vertex(self, vertex: V) -> None:
        """
        Add a vertex with no neighbors.

        Adding a vertex that is already present is a no-op.

        Args:
            vertex: Hashable vertex value
        """
        if vertex in self._state.adjacency:
            return
        self._state.adjacency[vertex] = []
        self._notify_state_change(GraphEvent.VERTEX_ADDED, {"vertex": vertex})

    def _validate_weight(self, weight: Any) -> None:
        """Check a weight against the rules of this variant."""
        if not self.weighted:
            return
        if not isinstance(weight, int) or isinstance(weight, bool):
            raise ValidationError(f"Edge weight must be an integer, got {weight!r}")

    def _insert_edge(self, u: V, v: V, weight: Optional[int]) -> None:
        """Record an edge, honouring direction and the vertex presence rule."""
        self._validate_weight(weight)

        adjacency = self._state.adjacency
        if u not in adjacency or v not in adjacency:
            logger.debug(f"Ignoring edge {u!r} -> {v!r}: endpoint not in graph")
            return

        adjacency[u].append(Adjacency(v, weight))
        self._state.edge_count += 1
        if not self.directed:
            adjacency[v].append(Adjacency(u, weight))
            self._state.edge_count += 1

        self._notify_state_change(
            GraphEvent.EDGE_ADDED, {"from_vertex": u, "to_vertex": v, "weight": weight}
        )

    def get_adjacency(self, vertex: V) -> List[Adjacency]:
        """
        Get the adjacency entries of a vertex.

        Returns:
            A copy of the vertex's adjacency list in insertion order, or an empty
            list if the vertex is absent
        """
        return list(self._state.adjacency.get(vertex, ()))

    def get_vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        return list(self._state.adjacency)

    def has_vertex(self, vertex: V) -> bool:
        """Check if a vertex exists in the graph."""
        return vertex in self._state.adjacency

    def has_edge(self, from_vertex: V, to_vertex: V) -> bool:
        """Check if an edge is recorded from one vertex to another."""
        return any(
            entry.target == to_vertex for entry in self._state.adjacency.get(from_vertex, ())
        )

    def get_edge_weight(self, from_vertex: V, to_vertex: V) -> Optional[int]:
        """
        Get the weight of the cheapest recorded edge between two vertices.

        Unweighted edges count as weight 1.

        Returns:
            The smallest weight among parallel edges, or None if there is no edge
        """
        weights = [
            1 if entry.weight is None else entry.weight
            for entry in self._state.adjacency.get(from_vertex, ())
            if entry.target == to_vertex
        ]
        return min(weights) if weights else None

    def edge_count(self) -> int:
        """Get the number of adjacency entries (undirected edges count twice)."""
        return self._state.edge_count

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._state.adjacency))

    def __len__(self) -> int:
        return len(self._state.adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._state.adjacency

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={len(self)}, "
            f"adjacency_entries={self._state.edge_count})"
        )


class Graph(BaseGraph[V]):
    """
    Unweighted, undirected graph.

    Example:
        >>> graph = Graph(["a", "b"])
        >>> graph.add_edge("a", "b")
        >>> graph.get_neighbors("b")
        ['a']
    """

    def add_edge(self, u: V, v: V) -> None:
        """
        Add an edge between ``u`` and ``v``.

        The edge is only added if both vertices already exist.

        Args:
            u: First endpoint (the source for directed graphs)
            v: Second endpoint (the target for directed graphs)
        """
        self._insert_edge(u, v, None)

    def get_neighbors(self, vertex: V) -> List[V]:
        """Get the neighbors of a vertex in insertion order, empty if absent."""
        return [entry.target for entry in self._state.adjacency.get(vertex, ())]

    @classmethod
    def from_edges(
        cls: Type[G], vertices: Iterable[V], edges: Iterable[Tuple[V, V]]
    ) -> G:
        """Create a graph from vertices and ``(u, v)`` pairs."""
        graph = cls(vertices)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph


class DirectedGraph(Graph[V]):
    """Unweighted graph where ``add_edge(u, v)`` only makes ``v`` a neighbor of ``u``."""

    directed = True


class WeightedGraph(BaseGraph[V]):
    """
    Undirected graph whose edges carry a signed integer weight.

    Example:
        >>> graph = WeightedGraph(["a", "b"])
        >>> graph.add_edge("a", "b", -3)
        >>> graph.get_neighbors("a")
        [('b', -3)]
    """

    weighted = True

    def add_edge(self, u: V, v: V, weight: int) -> None:
        """
        Add a weighted edge between ``u`` and ``v``.

        The edge is only added if both vertices already exist. For undirected
        variants the same weight is recorded in both adjacency lists.

        Args:
            u: First endpoint (the source for directed graphs)
            v: Second endpoint (the target for directed graphs)
            weight: Integer edge weight

        Raises:
            ValidationError: If the weight is not accepted by this variant
        """
        self._insert_edge(u, v, weight)

    def get_neighbors(self, vertex: V) -> List[Tuple[V, int]]:
        """Get ``(neighbor, weight)`` pairs in insertion order, empty if absent."""
        return [(entry.target, entry.weight) for entry in self._state.adjacency.get(vertex, ())]

    @classmethod
    def from_edges(
        cls: Type[G], vertices: Iterable[V], edges: Iterable[Tuple[V, V, int]]
    ) -> G:
        """Create a graph from vertices and ``(u, v, weight)`` triples."""
        graph = cls(vertices)
        for u, v, weight in edges:
            graph.add_edge(u, v, weight)
        return graph


class DirectedWeightedGraph(WeightedGraph[V]):
    """Weighted graph where edges are recorded only from source to target."""

    directed = True


class NonNegativeWeightedGraph(WeightedGraph[V]):
    """
    Weighted graph restricted to weights in ``[0, UINT_MAX)``.

    Non-negative weights are the precondition for Dijkstra and A*. A rejected
    weight raises before anything is inserted; it is never clamped.
    """

    def _validate_weight(self, weight: Any) -> None:
        super()._validate_weight(weight)
        if weight < 0:
            raise NegativeWeightError(f"Edge weight must be non-negative, got {weight}")
        if weight >= UINT_MAX:
            raise ValidationError(f"Edge weight must be below {UINT_MAX}, got {weight}")


class DirectedNonNegativeWeightedGraph(NonNegativeWeightedGraph[V]):
    """Non-negative weighted graph where edges are recorded only from source to target."""

    directed = True
