"""
Main facade class for antenna map analysis.

This module provides the pyantennagraph class that wires the graph aggregate
to the vertex and edge stores, the grid loader and the traversal engine.
"""

import logging
from typing import Callable, List, Optional

import numpy as np

from ..classes.config import GridConfig
from ..classes.edge import pyedge
from ..classes.vertex import pyvertex
from ..analysis.traversal import PathCallback, TraversalEngine, VertexCallback
from ..formats import export_grid
from ..formats.read_grid import GridLoader, GridSource
from ..operations.edge_store import EdgeStore
from ..operations.vertex_store import VertexStore
from .graph import AntennaGraph

logger = logging.getLogger(__name__)


class pyantennagraph:
    """
    Main facade class for antenna map analysis.

    Holds one AntennaGraph and delegates to the specialised components.
    """

    def __init__(self, config: Optional[GridConfig] = None):
        """
        Initialize an empty antenna graph.

        Args:
            config: Map format and adjacency weights, defaults to GridConfig()
        """
        self.config = config or GridConfig()

        self._graph = AntennaGraph()
        self._edges = EdgeStore(self._graph, self.config)
        self._vertices = VertexStore(self._graph, self._edges)
        self._loader = GridLoader(self._graph, self._vertices, self.config)
        self._traversal = TraversalEngine(self._graph)

    # ========================================================================
    # GRAPH STATE
    # ========================================================================

    @property
    def graph(self) -> AntennaGraph:
        return self._graph

    @property
    def aVertex(self) -> List[pyvertex]:
        return self._graph.aVertex

    @property
    def nVertex(self) -> int:
        return self._graph.nVertex

    @property
    def nRow(self) -> int:
        return self._graph.nRow

    @property
    def nColumn(self) -> int:
        return self._graph.nColumn

    def get_vertices(self) -> List[pyvertex]:
        return self._graph.get_vertices()

    def get_edge_count(self) -> int:
        return self._graph.get_edge_count()

    def clear(self):
        """Drop every vertex and edge and reset the dimensions."""
        self._graph.clear()

    # ========================================================================
    # VERTEX OPERATIONS
    # ========================================================================

    def create_vertex(self, vertex_id: int, frequency: str, iX: int, iY: int) -> pyvertex:
        return self._vertices.create_vertex(vertex_id, frequency, iX, iY)

    def add_vertex(self, vertex: Optional[pyvertex]) -> bool:
        return self._vertices.add_vertex(vertex)

    def add_new_vertex(self, vertex_id: int, frequency: str, iX: int, iY: int) -> pyvertex:
        """Create a vertex and append it to the graph."""
        pVertex = self._vertices.create_vertex(vertex_id, frequency, iX, iY)
        self._vertices.add_vertex(pVertex)
        return pVertex

    def get_vertex_by_id(self, vertex_id: int) -> Optional[pyvertex]:
        return self._vertices.get_vertex_by_id(vertex_id)

    def get_vertex_by_coordinates(self, iX: int, iY: int) -> Optional[pyvertex]:
        return self._vertices.get_vertex_by_coordinates(iX, iY)

    def require_vertex_by_id(self, vertex_id: int) -> pyvertex:
        return self._vertices.require_vertex_by_id(vertex_id)

    def set_vertex_frequency(self, vertex: Optional[pyvertex], frequency: str) -> bool:
        return self._vertices.set_vertex_frequency(vertex, frequency)

    def remove_vertex_by_id(self, vertex_id: int) -> bool:
        return self._vertices.remove_vertex_by_id(vertex_id)

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def add_edge(self, origin: Optional[pyvertex], destination: Optional[pyvertex],
                 weight: float) -> bool:
        return self._edges.add_edge(origin, destination, weight)

    def build_adjacency(self) -> bool:
        return self._edges.build_adjacency()

    def remove_edges_to_vertex(self, target: Optional[pyvertex]) -> bool:
        return self._edges.remove_edges_to_vertex(target)

    def free_adjacency(self, vertex: Optional[pyvertex]) -> bool:
        return self._edges.free_adjacency(vertex)

    # ========================================================================
    # MAP INPUT & OUTPUT
    # ========================================================================

    def load_grid(self, source: Optional[GridSource]) -> bool:
        """Add the vertices of a text map, see GridLoader.load_grid."""
        return self._loader.load_grid(source)

    def render_map(self) -> List[str]:
        return export_grid.render_map(self._graph, self.config.empty_marker)

    def list_vertices(self, on_vertex: Callable[[pyvertex], None]) -> int:
        return export_grid.list_vertices(self._graph, on_vertex)

    def list_edges(self, on_edge: Callable[[pyvertex, pyedge], None]) -> int:
        return export_grid.list_edges(self._graph, on_edge)

    def to_weight_matrix(self) -> np.ndarray:
        return export_grid.to_weight_matrix(self._graph)

    # ========================================================================
    # TRAVERSAL & PATH FINDING
    # ========================================================================

    def reset_visited(self):
        self._traversal.reset_visited()

    def depth_first_traversal(self, start: Optional[pyvertex],
                              on_vertex: Optional[VertexCallback] = None) -> int:
        return self._traversal.depth_first_traversal(start, on_vertex)

    def breadth_first_traversal(self, start: Optional[pyvertex],
                                on_vertex: Optional[VertexCallback] = None) -> int:
        return self._traversal.breadth_first_traversal(start, on_vertex)

    def find_all_paths(self, current: Optional[pyvertex], destination: Optional[pyvertex],
                       path: Optional[List[pyvertex]] = None, position: int = 0,
                       on_path: Optional[PathCallback] = None) -> int:
        return self._traversal.find_all_paths(current, destination, path, position, on_path)

    def collect_all_paths(self, start: Optional[pyvertex],
                          destination: Optional[pyvertex]) -> List[List[pyvertex]]:
        return self._traversal.collect_all_paths(start, destination)

    def get_reachable_vertices(self, start: Optional[pyvertex]) -> List[pyvertex]:
        return self._traversal.get_reachable_vertices(start)
