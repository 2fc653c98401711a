"""
Traversal and path enumeration for antenna graphs.

This module provides depth-first and breadth-first traversal and exhaustive
simple-path enumeration. All three share the per-vertex visited flag.
"""

import logging
from collections import deque
from typing import Callable, List, Optional

from ..classes.vertex import pyvertex
from ..core.graph import AntennaGraph

logger = logging.getLogger(__name__)

VertexCallback = Callable[[pyvertex], None]
PathCallback = Callable[[List[pyvertex]], None]


class TraversalEngine:
    """
    Graph search algorithms over the vertex visited flags.

    This class provides methods for:
    - Resetting visited flags
    - Depth-first traversal
    - Breadth-first traversal
    - Enumerating every simple path between two vertices

    Missing start or destination vertices are treated as nothing to do.
    """

    def __init__(self, graph: AntennaGraph):
        """
        Initialize the traversal engine.

        Args:
            graph: AntennaGraph instance to search
        """
        self.graph = graph

    def reset_visited(self):
        """Clear the visited flag of every vertex."""
        for pVertex in self.graph.aVertex:
            pVertex.iFlag_visited = False

    def depth_first_traversal(self, start: Optional[pyvertex],
                              on_vertex: Optional[VertexCallback] = None) -> int:
        """
        Depth-first walk from a start vertex.

        After each branch is exhausted the walk rescans the parent's adjacency
        list from its head for the first unvisited neighbour, rather than
        resuming where it left off. The visit order is the same as the
        recursive formulation; an explicit stack keeps long walks clear of
        the interpreter recursion limit.

        Args:
            start: Vertex to start from
            on_vertex: Called once per visited vertex, in visit order

        Returns:
            Number of vertices visited, 0 if start is missing or already visited
        """
        if start is None or start.iFlag_visited:
            return 0

        start.iFlag_visited = True
        if on_vertex is not None:
            on_vertex(start)
        nCount = 1

        aStack = [start]
        while aStack:
            pNeighbor = aStack[-1].get_unvisited_neighbor()
            if pNeighbor is None:
                aStack.pop()
                continue

            pNeighbor.iFlag_visited = True
            if on_vertex is not None:
                on_vertex(pNeighbor)
            nCount += 1
            aStack.append(pNeighbor)

        logger.debug(f"DFS from vertex {start.lVertexID} visited {nCount} vertices")
        return nCount

    def breadth_first_traversal(self, start: Optional[pyvertex],
                                on_vertex: Optional[VertexCallback] = None) -> int:
        """
        Breadth-first walk from a start vertex.

        Vertices are marked when enqueued and emitted when dequeued, with
        neighbours taken in adjacency order.

        Args:
            start: Vertex to start from
            on_vertex: Called once per dequeued vertex

        Returns:
            Number of vertices visited, 0 if start is missing
        """
        if start is None:
            return 0

        nCount = 0
        start.iFlag_visited = True
        queue = deque([start])

        while queue:
            pVertex = queue.popleft()
            if on_vertex is not None:
                on_vertex(pVertex)
            nCount += 1

            for pEdge in pVertex.aEdge:
                if not pEdge.pVertex_end.iFlag_visited:
                    pEdge.pVertex_end.iFlag_visited = True
                    queue.append(pEdge.pVertex_end)

        logger.debug(f"BFS from vertex {start.lVertexID} visited {nCount} vertices")
        return nCount

    def find_all_paths(self, current: Optional[pyvertex], destination: Optional[pyvertex],
                       path: Optional[List[pyvertex]] = None, position: int = 0,
                       on_path: Optional[PathCallback] = None) -> int:
        """
        Count every simple path from current to destination.

        The current vertex is marked and stored at path[position]. Reaching
        the destination emits path[0..position]; otherwise every unvisited
        target in adjacency order is explored. The mark is undone before
        returning, so a finished top-level call leaves every flag cleared.

        Args:
            current: Vertex being explored
            destination: Vertex that ends a path
            path: Buffer holding the path so far; it is written in place and
                  only grows when position is past its end
            position: Index of current in the path buffer
            on_path: Called with a copy of each complete path

        Returns:
            Number of complete paths found from current
        """
        if current is None or destination is None:
            return 0
        if path is None:
            path = []

        current.iFlag_visited = True
        if position < len(path):
            path[position] = current
        else:
            path.extend([None] * (position - len(path)))
            path.append(current)

        nPath = 0
        if current is destination:
            if on_path is not None:
                on_path(path[:position + 1])
            nPath = 1
        else:
            for pEdge in current.aEdge:
                if not pEdge.pVertex_end.iFlag_visited:
                    nPath += self.find_all_paths(pEdge.pVertex_end, destination,
                                                 path, position + 1, on_path)

        current.iFlag_visited = False
        return nPath

    def collect_all_paths(self, start: Optional[pyvertex],
                          destination: Optional[pyvertex]) -> List[List[pyvertex]]:
        """
        Find all simple paths between two vertices.

        Args:
            start: Starting vertex
            destination: Target vertex

        Returns:
            List of paths, where each path is a list of vertices
        """
        aPath: List[List[pyvertex]] = []
        self.reset_visited()
        self.find_all_paths(start, destination, [], 0, aPath.append)
        return aPath

    def get_reachable_vertices(self, start: Optional[pyvertex]) -> List[pyvertex]:
        """
        Get every vertex reachable from start, in breadth-first order.

        Visited flags are cleared before and after the search.
        """
        aReachable: List[pyvertex] = []
        self.reset_visited()
        self.breadth_first_traversal(start, aReachable.append)
        self.reset_visited()
        return aReachable
