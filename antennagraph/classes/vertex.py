"""
Vertex representation for the antenna graph.

A vertex is one antenna on the map: a single-character frequency placed at
integer grid coordinates, plus the outgoing adjacency list and the visited
flag used by the traversal engine.
"""

import logging
from typing import List

from .edge import pyedge
from .exceptions import AllocationError, InvalidArgumentError

logger = logging.getLogger(__name__)


class pyvertex:
    """
    Antenna vertex.

    Identity is the object itself; ``lVertexID`` is the caller-assigned key
    used by id lookups. Edges in ``aEdge`` are ordered head first, so the
    most recently added edge is the first one a traversal sees.
    """

    def __init__(self, lVertexID: int, cFrequency: str, iX: int, iY: int):
        self.lVertexID = lVertexID
        self.cFrequency = cFrequency
        self.iX = iX
        self.iY = iY
        self.iFlag_visited = False
        self.aEdge: List[pyedge] = []

    def get_unvisited_neighbor(self):
        """
        Return the first target in adjacency order that is not visited.

        Returns:
            The neighbouring vertex, or None when every neighbour is visited
        """
        for pEdge in self.aEdge:
            if not pEdge.pVertex_end.iFlag_visited:
                return pEdge.pVertex_end
        return None

    def __repr__(self) -> str:
        return (f"pyvertex(id={self.lVertexID}, freq={self.cFrequency!r}, "
                f"x={self.iX}, y={self.iY}, edges={len(self.aEdge)})")


def check_frequency(cFrequency) -> None:
    """Raise InvalidArgumentError unless the frequency is exactly one character."""
    if not isinstance(cFrequency, str) or len(cFrequency) != 1:
        raise InvalidArgumentError(f"Frequency must be a single character, got {cFrequency!r}")


def create_vertex(lVertexID: int, cFrequency: str, iX: int, iY: int) -> pyvertex:
    """
    Allocate a vertex with an empty adjacency list and a cleared visited flag.

    Args:
        lVertexID: Caller-assigned vertex id, unique within its graph
        cFrequency: Single-character frequency label
        iX: Column coordinate
        iY: Row coordinate

    Returns:
        The new vertex

    Raises:
        InvalidArgumentError: If the frequency is not exactly one character
        AllocationError: If the interpreter runs out of memory
    """
    check_frequency(cFrequency)

    try:
        return pyvertex(lVertexID, cFrequency, iX, iY)
    except MemoryError as e:
        logger.error(f"Out of memory creating vertex {lVertexID}")
        raise AllocationError(f"Cannot allocate vertex {lVertexID}") from e
