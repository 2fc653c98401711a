"""
Exception types raised by the antennagraph package.

Lookups and store operations report absent inputs through their return
values (None / False). Exceptions are reserved for the failures a caller
has to handle explicitly: memory exhaustion, invalid arguments, unknown
vertex ids and unreadable map sources.
"""


class GraphError(Exception):
    """Base exception for graph operations."""
    pass


class AllocationError(GraphError):
    """Raised when a vertex or edge cannot be allocated."""
    pass


class InvalidArgumentError(GraphError, ValueError):
    """Raised when an operation receives an unusable argument."""
    pass


class VertexNotFoundError(GraphError, KeyError):
    """Raised when a vertex id is not in the graph."""

    def __init__(self, vertex_id: int):
        self.vertex_id = vertex_id
        super().__init__(f"Vertex not found: {vertex_id}")

    def __str__(self) -> str:
        return self.args[0]


class GridIOError(GraphError, OSError):
    """Raised when a map source cannot be opened or read."""

    def __init__(self, source, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read map '{source}': {reason}")

    def __str__(self) -> str:
        return self.args[0]
