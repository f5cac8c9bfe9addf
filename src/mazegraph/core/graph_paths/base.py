from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Generator, Optional

from mazegraph.core.graph_paths.models import PathResult
from mazegraph.core.graph_paths.utils import MemoryManager
from mazegraph.core.types import GraphProtocol, ensure_graph


class PathFinder(ABC):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: GraphProtocol, max_memory_mb: Optional[float] = None):
        """Initialize finder with graph and an optional memory budget."""
        self.graph = ensure_graph(graph)
        self.memory_manager = MemoryManager(max_memory_mb)

    @contextmanager
    def _search_context(self) -> Generator[None, None, None]:
        """Context manager for search state."""
        self.memory_manager.reset()
        yield

    @abstractmethod
    def find_path(self, start_vertex: Any, end_vertex: Any, **kwargs) -> PathResult:
        """Find path between vertices; an empty result means no path."""
        pass

    def has_vertices(self, start_vertex: Any, end_vertex: Any) -> bool:
        """Check that both endpoints exist in the graph."""
        return self.graph.has_vertex(start_vertex) and self.graph.has_vertex(end_vertex)
