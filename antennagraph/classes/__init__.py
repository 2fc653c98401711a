"""
Core data classes for antenna map representation.

This module contains the fundamental data structures, configuration and
exception types used throughout the antennagraph library.
"""

from .vertex import pyvertex, create_vertex
from .edge import pyedge
from .config import GridConfig
from .exceptions import (
    GraphError,
    AllocationError,
    InvalidArgumentError,
    VertexNotFoundError,
    GridIOError,
)

__all__ = [
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
