"""
Core graph aggregate for antenna maps.

This module provides the container that owns every vertex (and through them
every edge) without the higher level store, loader or traversal operations.
"""

import logging
from typing import List, Optional

from ..classes.vertex import pyvertex

logger = logging.getLogger(__name__)


class AntennaGraph:
    """
    Owning container for the vertices of an antenna map.

    This class keeps:
    - The vertex list in insertion order
    - The map dimensions (rows and columns), which only ever grow
    - Basic counting helpers shared by the stores and the traversal engine
    """

    def __init__(self):
        self.aVertex: List[pyvertex] = []
        self.nRow = 0
        self.nColumn = 0

    @property
    def nVertex(self) -> int:
        return len(self.aVertex)

    def __contains__(self, vertex) -> bool:
        return any(pVertex is vertex for pVertex in self.aVertex)

    def get_vertices(self) -> List[pyvertex]:
        """
        Get the vertices in insertion order.

        Returns:
            A copy of the vertex list
        """
        return self.aVertex.copy()

    def get_vertex_by_id(self, vertex_id: int) -> Optional[pyvertex]:
        """
        Get a vertex by its id.

        Args:
            vertex_id: Caller-assigned vertex id

        Returns:
            The first vertex with that id in insertion order, or None
        """
        for pVertex in self.aVertex:
            if pVertex.lVertexID == vertex_id:
                return pVertex
        return None

    def get_vertex_by_coordinates(self, iX: int, iY: int) -> Optional[pyvertex]:
        """
        Get a vertex by its grid coordinates.

        Args:
            iX: Column coordinate
            iY: Row coordinate

        Returns:
            The first vertex at (iX, iY) in insertion order, or None
        """
        for pVertex in self.aVertex:
            if pVertex.iX == iX and pVertex.iY == iY:
                return pVertex
        return None

    def get_edge_count(self) -> int:
        """Total number of directed edges over every adjacency list."""
        return sum(len(pVertex.aEdge) for pVertex in self.aVertex)

    def expand_dimensions(self, nRow: int, nColumn: int):
        """
        Grow the recorded map dimensions to at least the given values.

        Args:
            nRow: Candidate row count
            nColumn: Candidate column count
        """
        if nRow > self.nRow:
            self.nRow = nRow
        if nColumn > self.nColumn:
            self.nColumn = nColumn

    def clear(self):
        """
        Tear the graph down: drop every edge, every vertex and the dimensions.
        """
        nVertex = len(self.aVertex)
        for pVertex in self.aVertex:
            pVertex.aEdge.clear()
        self.aVertex.clear()
        self.nRow = 0
        self.nColumn = 0
        logger.debug(f"Cleared graph holding {nVertex} vertices")
