"""
Edge operations for antenna graphs.

This module provides insertion and removal of edges and the derivation of
adjacency from grid coordinates and frequency labels.
"""

import logging
from typing import Optional, Tuple

from ..classes.config import GridConfig
from ..classes.edge import pyedge
from ..classes.exceptions import AllocationError
from ..classes.vertex import pyvertex
from ..core.graph import AntennaGraph

logger = logging.getLogger(__name__)

# N, S, W, E first, then NW, NE, SW, SE. The first four are orthogonal.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, -1), (0, 1), (-1, 0), (1, 0),
    (-1, -1), (1, -1), (-1, 1), (1, 1),
)
N_ORTHOGONAL = 4


class EdgeStore:
    """
    Manages the per-vertex adjacency lists of a graph.

    This class provides methods for:
    - Adding a single directed edge
    - Building same-frequency adjacency from the 8-neighbourhood
    - Removing every edge that targets a vertex
    - Freeing a vertex's own adjacency list
    """

    def __init__(self, graph: AntennaGraph, config: Optional[GridConfig] = None):
        """
        Initialize the edge store.

        Args:
            graph: AntennaGraph instance whose edges are managed
            config: Weights for orthogonal and diagonal neighbours
        """
        self.graph = graph
        self.config = config or GridConfig()

    def add_edge(self, origin: Optional[pyvertex], destination: Optional[pyvertex],
                 weight: float) -> bool:
        """
        Prepend a directed edge to the origin's adjacency list.

        Args:
            origin: Vertex owning the new edge
            destination: Target vertex
            weight: Edge weight

        Returns:
            True on success, False if either endpoint is missing

        Raises:
            AllocationError: If the edge cannot be allocated
        """
        if origin is None or destination is None:
            return False

        try:
            pEdge = pyedge(destination, weight)
        except MemoryError as e:
            logger.error(f"Out of memory adding edge {origin.lVertexID} -> {destination.lVertexID}")
            raise AllocationError(
                f"Cannot allocate edge {origin.lVertexID} -> {destination.lVertexID}") from e

        origin.aEdge.insert(0, pEdge)
        return True

    def build_adjacency(self) -> bool:
        """
        Connect every pair of same-frequency vertices that are grid neighbours.

        Each vertex looks at its 8 neighbours. A pair is only created from the
        vertex with the lower id, and then in both directions, so every link
        is stored exactly once per direction when ids grow with insertion.

        Returns:
            True once every vertex has been examined
        """
        nCreated = 0

        for pVertex in self.graph.aVertex:
            for i, (dx, dy) in enumerate(NEIGHBOR_OFFSETS):
                pNeighbor = self.graph.get_vertex_by_coordinates(pVertex.iX + dx, pVertex.iY + dy)
                if pNeighbor is None or pNeighbor.cFrequency != pVertex.cFrequency:
                    continue

                if pNeighbor.lVertexID > pVertex.lVertexID:
                    dWeight = (self.config.orthogonal_weight if i < N_ORTHOGONAL
                               else self.config.diagonal_weight)
                    self.add_edge(pVertex, pNeighbor, dWeight)
                    self.add_edge(pNeighbor, pVertex, dWeight)
                    nCreated += 1

        logger.debug(f"Built {nCreated} bidirectional links over {self.graph.nVertex} vertices")
        return True

    def remove_edges_to_vertex(self, target: Optional[pyvertex]) -> bool:
        """
        Remove every edge in the graph whose target is the given vertex.

        The relative order of the remaining edges is preserved.

        Args:
            target: Vertex whose incoming edges are removed

        Returns:
            True on success, False if target is missing
        """
        if target is None:
            return False

        nRemoved = 0
        for pVertex in self.graph.aVertex:
            aKeep = [pEdge for pEdge in pVertex.aEdge if pEdge.pVertex_end is not target]
            nRemoved += len(pVertex.aEdge) - len(aKeep)
            pVertex.aEdge[:] = aKeep

        logger.debug(f"Removed {nRemoved} edges targeting vertex {target.lVertexID}")
        return True

    def free_adjacency(self, vertex: Optional[pyvertex]) -> bool:
        """
        Drop every edge in the vertex's own adjacency list.

        Edges elsewhere that target this vertex are left alone; use
        remove_edges_to_vertex for those.

        Args:
            vertex: Vertex whose outgoing edges are dropped

        Returns:
            True on success, False if vertex is missing
        """
        if vertex is None:
            return False

        vertex.aEdge.clear()
        return True
