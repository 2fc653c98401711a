"""
Store operations that modify antenna graphs.

This module contains the vertex store and the edge store, including the
derivation of adjacency from grid positions and frequencies.
"""

from .edge_store import EdgeStore, NEIGHBOR_OFFSETS
from .vertex_store import VertexStore

__all__ = ['EdgeStore', 'VertexStore', 'NEIGHBOR_OFFSETS']
