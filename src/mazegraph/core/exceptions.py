"""
Custom exceptions for the graph and path finding system.

This module defines the hierarchy of custom exceptions used throughout the package.
Invalid references (edges between absent vertices, neighbors of an absent vertex)
and "no path" outcomes are not errors and never raise; the exceptions below cover
precondition violations and algorithms that cannot complete.
"""


class ValidationError(Exception):
    """
    Raised when an input fails a precondition.

    Examples:
        * Non-integer edge weight
        * Weight outside the range accepted by the graph variant
        * Coordinate vertex with non-numeric components
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class NegativeWeightError(ValidationError):
    """
    Raised when a negative weight reaches a component that forbids it.

    Examples:
        * Inserting a negative edge into a non-negative weighted graph
        * Dijkstra or A* relaxing a negative edge
    """


class InvalidArgumentError(ValidationError):
    """
    Raised when an algorithm receives something that is not a graph.

    Examples:
        * ``None`` passed as the graph
        * An object missing adjacency or vertex enumeration
    """


class GraphOperationError(Exception):
    """
    Raised when a graph algorithm cannot complete.

    Examples:
        * Parent chain that loops back on itself after negative cycles
        * Predecessor matrix that never reaches the start vertex
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"
