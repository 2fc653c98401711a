"""
Vertex operations for antenna graphs.

This module provides creation, insertion, lookup, relabelling and removal of
vertices. Removal cascades through the edge store so that no adjacency list
is left pointing at a vertex that has left the graph.
"""

import logging
from typing import Optional

from ..classes.exceptions import VertexNotFoundError
from ..classes.vertex import check_frequency, create_vertex, pyvertex
from ..core.graph import AntennaGraph
from .edge_store import EdgeStore

logger = logging.getLogger(__name__)


class VertexStore:
    """
    Manages the vertex collection of a graph.

    This class provides methods for:
    - Creating and appending vertices
    - Looking vertices up by id or coordinates
    - Changing a vertex frequency
    - Removing a vertex together with every edge that touches it
    """

    def __init__(self, graph: AntennaGraph, edge_store: EdgeStore):
        """
        Initialize the vertex store.

        Args:
            graph: AntennaGraph instance whose vertices are managed
            edge_store: EdgeStore used to clean edges on removal
        """
        self.graph = graph
        self.edge_store = edge_store

    @staticmethod
    def create_vertex(vertex_id: int, frequency: str, iX: int, iY: int) -> pyvertex:
        """Allocate a detached vertex, see classes.vertex.create_vertex."""
        return create_vertex(vertex_id, frequency, iX, iY)

    def add_vertex(self, vertex: Optional[pyvertex]) -> bool:
        """
        Append a vertex to the graph.

        The graph dimensions grow to at least the vertex coordinates. Ids are
        not checked for uniqueness; id lookups return the first match.

        Args:
            vertex: Vertex to append

        Returns:
            True on success, False if vertex is missing
        """
        if vertex is None:
            return False

        self.graph.expand_dimensions(vertex.iY, vertex.iX)
        self.graph.aVertex.append(vertex)
        return True

    def get_vertex_by_id(self, vertex_id: int) -> Optional[pyvertex]:
        return self.graph.get_vertex_by_id(vertex_id)

    def get_vertex_by_coordinates(self, iX: int, iY: int) -> Optional[pyvertex]:
        return self.graph.get_vertex_by_coordinates(iX, iY)

    def require_vertex_by_id(self, vertex_id: int) -> pyvertex:
        """
        Get a vertex by id, raising when it does not exist.

        Raises:
            VertexNotFoundError: If no vertex has that id
        """
        pVertex = self.graph.get_vertex_by_id(vertex_id)
        if pVertex is None:
            raise VertexNotFoundError(vertex_id)
        return pVertex

    @staticmethod
    def set_vertex_frequency(vertex: Optional[pyvertex], frequency: str) -> bool:
        """
        Change the frequency label of a vertex.

        Existing edges are kept as they are; call build_adjacency again to
        link the vertex under its new frequency.

        Args:
            vertex: Vertex to relabel
            frequency: New frequency character

        Returns:
            True on success, False if vertex is missing

        Raises:
            InvalidArgumentError: If the frequency is not exactly one character
        """
        if vertex is None:
            return False

        check_frequency(frequency)
        vertex.cFrequency = frequency
        return True

    def remove_vertex_by_id(self, vertex_id: int) -> bool:
        """
        Remove a vertex and every edge that starts or ends at it.

        Args:
            vertex_id: Id of the vertex to remove

        Returns:
            True on success, False if no vertex has that id (graph unchanged)
        """
        for index, pVertex in enumerate(self.graph.aVertex):
            if pVertex.lVertexID == vertex_id:
                break
        else:
            logger.warning(f"Cannot remove vertex {vertex_id}: not found")
            return False

        self.edge_store.remove_edges_to_vertex(pVertex)
        self.edge_store.free_adjacency(pVertex)
        del self.graph.aVertex[index]

        logger.debug(f"Removed vertex {vertex_id}, {self.graph.nVertex} vertices remain")
        return True
