"""
Distance heuristics for A*.

Each heuristic is a pure function ``(x1, y1, x2, y2) -> float`` estimating the
remaining cost between two coordinates. Which one is admissible depends on how a
graph lets you move:

- ``manhattan_distance``: 4-directional grids with unit steps
- ``diagonal_distance``: 8-directional grids where a diagonal step costs sqrt(2)
- ``euclidean_distance``: any movement; never overestimates straight-line cost
"""

import math


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Straight-line distance between two points."""
    return math.hypot(x1 - x2, y1 - y2)


def manhattan_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Sum of the absolute axis differences."""
    return float(abs(x1 - x2) + abs(y1 - y2))


def diagonal_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Octile distance: straight moves cost 1, diagonal moves cost sqrt(2).

    Equivalent to ``max(dx, dy) + (sqrt(2) - 1) * min(dx, dy)``.
    """
    dx = abs(x1 - x2)
    dy = abs(y1 - y2)
    return (dx + dy) + (math.sqrt(2) - 2) * min(dx, dy)


# Alias under the name commonly used for 8-directional grids
octile_distance = diagonal_distance
