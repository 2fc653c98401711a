"""
Reading and writing antenna maps.

This module contains the text map loader and the rendering and listing
helpers that hand graph records to caller supplied callbacks.
"""

from .read_grid import GridLoader
from .export_grid import (
    format_vertex,
    format_edge,
    format_path,
    list_vertices,
    list_edges,
    render_map,
    to_weight_matrix,
)

__all__ = [
    'GridLoader',
    'format_vertex',
    'format_edge',
    'format_path',
    'list_vertices',
    'list_edges',
    'render_map',
    'to_weight_matrix',
]
