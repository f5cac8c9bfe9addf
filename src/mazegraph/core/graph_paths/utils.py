"""
Utility functions for path finding operations.
"""

import gc
import logging
import os
import time
from heapq import heappop, heappush
from typing import Any, Dict, List, Mapping, Optional, Tuple

import psutil

from ..exceptions import GraphOperationError
from ..models import Adjacency

logger = logging.getLogger(__name__)

# Constants
EPSILON = 1e-10  # Floating point comparison tolerance
INFINITY = float("inf")  # Logical infinity for unreached vertices


def edge_weight(entry: Adjacency) -> int:
    """Get the weight of an adjacency entry; unweighted edges cost 1."""
    return 1 if entry.weight is None else entry.weight


def path_weight(graph: Any, nodes: List[Any]) -> float:
    """Sum the cheapest edge between each consecutive pair of vertices."""
    total = 0.0
    for u, v in zip(nodes, nodes[1:]):
        total += min(edge_weight(entry) for entry in graph.get_adjacency(u) if entry.target == v)
    return total


def reconstruct_path(parents: Mapping[Any, Any], start: Any, end: Any) -> List[Any]:
    """
    Walk parent links from ``end`` back to ``start`` and return the path in order.

    The start vertex has no entry in ``parents``; that absence is what ends the
    walk, so no vertex value is ever reserved as a "no parent" marker.

    Args:
        parents: Mapping of vertex to the vertex it was reached from
        start: Path origin
        end: Path destination

    Returns:
        Vertices from start to end inclusive, or an empty list if the chain from
        end never reaches start

    Raises:
        GraphOperationError: If the parent chain loops
    """
    chain = [end]
    seen = {end}
    current = end
    while current != start:
        if current not in parents:
            return []
        current = parents[current]
        if current in seen:
            raise GraphOperationError(f"Parent chain from {end!r} loops at {current!r}")
        seen.add(current)
        chain.append(current)
    chain.reverse()
    return chain


class PriorityQueue:
    """
    Min-priority queue with decrease-key.

    Entries with equal priority pop in insertion order. Superseded entries stay
    in the heap and are skipped lazily on pop.
    """

    def __init__(self, maxsize: Optional[int] = None):
        """Create an empty queue; ``maxsize`` caps live entries, None means no cap."""
        self._queue: List[Tuple[float, int, Any]] = []
        self._entry_finder: Dict[Any, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties
        self._maxsize = maxsize

    def add_or_update(self, item: Any, priority: float) -> bool:
        """
        Insert an item or lower its priority.

        Returns:
            True if the item was inserted or its priority lowered
        """
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            if priority >= old_priority:
                return False
        elif self._maxsize is not None and len(self._entry_finder) >= self._maxsize:
            raise GraphOperationError(f"Priority queue exceeded {self._maxsize} entries")

        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, (priority, self._counter, item))
        self._counter += 1
        return True

    def pop(self) -> Optional[Tuple[float, Any]]:
        """Remove and return ``(priority, item)`` with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, count):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def __contains__(self, item: Any) -> bool:
        return item in self._entry_finder

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


class MemoryManager:
    """Memory budget guard for path finding searches."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager; no budget means checks are free."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._last_check = time.time()
        self._check_interval = 0.1  # Check memory every 100ms

    def check_memory(self, force: bool = False) -> None:
        """
        Check if memory growth since the search started exceeds the budget.

        Raises:
            MemoryError: If the budget is exceeded even after a collection
        """
        if not self.max_memory:
            return

        current_time = time.time()
        if not force and current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()

        if current - self.start_memory > self.max_memory:
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.debug(f"Memory budget exceeded: {current / 1024 / 1024:.1f}MB in use")
                raise MemoryError(
                    f"Memory usage grew by {(current - self.start_memory) / 1024 / 1024:.1f}MB, "
                    f"exceeding limit of {self.max_memory / 1024 / 1024:.1f}MB"
                )

    def reset(self) -> None:
        """Start tracking a new search from the current usage."""
        if not self.max_memory:
            return
        self.start_memory = get_memory_usage()
        self._last_check = time.time()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
