"""
Search algorithms over antenna graphs.

This module contains depth-first and breadth-first traversal and simple
path enumeration.
"""

from .traversal import TraversalEngine

__all__ = ['TraversalEngine']
