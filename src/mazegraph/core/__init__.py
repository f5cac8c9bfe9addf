"""Core graph functionality."""

from .exceptions import (
    GraphOperationError,
    InvalidArgumentError,
    NegativeWeightError,
    ValidationError,
)
from .models import Adjacency, Coordinate2D
from .types import GraphProtocol, Heuristic
from .graph import (
    UINT_MAX,
    BaseGraph,
    DirectedGraph,
    DirectedNonNegativeWeightedGraph,
    DirectedWeightedGraph,
    Graph,
    GraphEvent,
    GraphStateListener,
    NonNegativeWeightedGraph,
    WeightedGraph,
)
from .traversal import BFSIterator, DFSIterator, reachable_bfs, reachable_dfs

__all__ = [
    "Adjacency",
    "BaseGraph",
    "BFSIterator",
    "Coordinate2D",
    "DFSIterator",
    "DirectedGraph",
    "DirectedNonNegativeWeightedGraph",
    "DirectedWeightedGraph",
    "Graph",
    "GraphEvent",
    "GraphOperationError",
    "GraphProtocol",
    "GraphStateListener",
    "Heuristic",
    "InvalidArgumentError",
    "NegativeWeightError",
    "NonNegativeWeightedGraph",
    "UINT_MAX",
    "ValidationError",
    "WeightedGraph",
    "reachable_bfs",
    "reachable_dfs",
]
