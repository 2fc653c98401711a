"""
antennagraph - Antenna Map Graph Analysis Library

A Python library that reads a text map of antennas, links neighbouring
antennas that share a frequency, and searches the resulting graph.

Main Classes:
    pyantennagraph: Main class for antenna map analysis (facade)
    pyvertex: Antenna vertex with frequency and grid coordinates
    pyedge: Directed weighted edge between antennas
    GridConfig: Map format and adjacency weights

Example:
    >>> from antennagraph import pyantennagraph
    >>> graph = pyantennagraph()
    >>> graph.load_grid("mapa_antenas.txt")
    >>> graph.build_adjacency()
    >>> graph.reset_visited()
    >>> graph.depth_first_traversal(graph.get_vertex_by_id(5))
"""

__version__ = "0.1.0"

from antennagraph.classes.vertex import pyvertex, create_vertex
from antennagraph.classes.edge import pyedge
from antennagraph.classes.config import GridConfig
from antennagraph.classes.exceptions import (
    GraphError,
    AllocationError,
    InvalidArgumentError,
    VertexNotFoundError,
    GridIOError,
)
from antennagraph.core.graph import AntennaGraph
from antennagraph.core.antennagraph import pyantennagraph

__all__ = [
    'pyantennagraph',
    'AntennaGraph',
    'pyvertex',
    'create_vertex',
    'pyedge',
    'GridConfig',
    'GraphError',
    'AllocationError',
    'InvalidArgumentError',
    'VertexNotFoundError',
    'GridIOError',
]
