"""
Value types shared by the graph containers and the path finding algorithms.

This module defines:
- Adjacency: a single entry of a vertex's adjacency list
- Coordinate2D: a 2D point usable as a graph vertex, consumed by A* heuristics
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, NamedTuple, Optional, Tuple

from .exceptions import ValidationError


class Adjacency(NamedTuple):
    """
    One outgoing entry in an adjacency list.

    Attributes:
        target: The neighboring vertex
        weight: Edge weight for weighted graphs, ``None`` for unweighted ones
    """

    target: Any
    weight: Optional[int] = None


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Coordinate2D:
    """
    Immutable 2D coordinate vertex.

    Equality and hashing are by value, so two coordinates with the same ``x`` and
    ``y`` identify the same vertex in any graph variant.

    Attributes:
        x: Horizontal component
        y: Vertical component

    Example:
        >>> graph = Graph()
        >>> graph.add_vertex(Coordinate2D(0, 0))
        >>> Coordinate2D(0, 0) in graph
        True
    """

    x: float
    y: float

    def __post_init__(self):
        """Validate coordinate components."""
        if not _is_number(self.x):
            raise ValidationError(f"x must be a real number, got {self.x!r}")
        if not _is_number(self.y):
            raise ValidationError(f"y must be a real number, got {self.y!r}")

    def as_tuple(self) -> Tuple[float, float]:
        """Return the coordinate as an ``(x, y)`` tuple."""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
