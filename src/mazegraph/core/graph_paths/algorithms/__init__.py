"""Path finding algorithm implementations."""

from .a_star import AStarFinder
from .all_pairs import AllPairsTable, FloydWarshallFinder
from .search import BFSPathFinder, DFSPathFinder
from .shortest_path import BellmanFordFinder, DijkstraFinder

__all__ = [
    "AStarFinder",
    "AllPairsTable",
    "BFSPathFinder",
    "BellmanFordFinder",
    "DFSPathFinder",
    "DijkstraFinder",
    "FloydWarshallFinder",
]
