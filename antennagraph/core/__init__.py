"""
Core graph data structures and management.

This module contains the graph aggregate that owns every vertex and edge.
The pyantennagraph facade lives in antennagraph.core.antennagraph.
"""

from .graph import AntennaGraph

__all__ = ['AntennaGraph']
