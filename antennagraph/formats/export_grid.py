"""
Render and list the contents of an antenna graph.

The graph code never prints. These helpers hand vertex, edge and path
records to caller supplied callbacks, and provide the default text layout
used by the command line.
"""

import logging
from typing import Callable, List, Sequence

import numpy as np

from ..classes.edge import pyedge
from ..classes.vertex import pyvertex
from ..core.graph import AntennaGraph

logger = logging.getLogger(__name__)

EdgeCallback = Callable[[pyvertex, pyedge], None]


def format_vertex(pVertex: pyvertex) -> str:
    return f"ID: {pVertex.lVertexID}  Freq: {pVertex.cFrequency}  Coord: ({pVertex.iX},{pVertex.iY})"


def format_edge(pEdge: pyedge) -> str:
    pTarget = pEdge.pVertex_end
    return f"  -> {pTarget.lVertexID} ({pTarget.cFrequency}) weight {pEdge.dWeight:.1f}"


def format_path(aPath: Sequence[pyvertex]) -> str:
    aStep = [f"ID: {pVertex.lVertexID} ({pVertex.cFrequency})" for pVertex in aPath]
    return " -> ".join(aStep + ["END"])


def list_vertices(graph: AntennaGraph, on_vertex: Callable[[pyvertex], None]) -> int:
    """
    Emit every vertex in insertion order.

    Returns:
        Number of vertices emitted
    """
    for pVertex in graph.aVertex:
        on_vertex(pVertex)
    return graph.nVertex


def list_edges(graph: AntennaGraph, on_edge: EdgeCallback) -> int:
    """
    Emit every edge as (origin vertex, edge), vertex by vertex in adjacency order.

    Returns:
        Number of edges emitted
    """
    nEdge = 0
    for pVertex in graph.aVertex:
        for pEdge in pVertex.aEdge:
            on_edge(pVertex, pEdge)
            nEdge += 1
    return nEdge


def render_map(graph: AntennaGraph, empty_marker: str = ".") -> List[str]:
    """
    Rebuild the text map from vertex coordinates.

    The canvas covers the recorded dimensions and every vertex position.
    Vertices with negative coordinates cannot be drawn and are skipped; when
    two vertices share a cell the one added last wins.

    Args:
        graph: AntennaGraph instance to draw
        empty_marker: Character for cells with no vertex

    Returns:
        One string per map row
    """
    aVertex = [pVertex for pVertex in graph.aVertex if pVertex.iX >= 0 and pVertex.iY >= 0]
    if len(aVertex) < graph.nVertex:
        logger.warning(f"Skipped {graph.nVertex - len(aVertex)} vertices with negative coordinates")

    nRow = max([graph.nRow] + [pVertex.iY + 1 for pVertex in aVertex])
    nColumn = max([graph.nColumn] + [pVertex.iX + 1 for pVertex in aVertex])

    aCell = np.full((nRow, nColumn), empty_marker, dtype="<U1")
    for pVertex in aVertex:
        aCell[pVertex.iY, pVertex.iX] = pVertex.cFrequency

    return ["".join(aRow) for aRow in aCell]


def to_weight_matrix(graph: AntennaGraph) -> np.ndarray:
    """
    Dense weight matrix of the graph.

    Rows and columns follow vertex insertion order; entry [i, j] is the
    weight of the edge from vertex i to vertex j, 0.0 where there is none.

    Returns:
        Array of shape (nVertex, nVertex)
    """
    aIndex = {id(pVertex): i for i, pVertex in enumerate(graph.aVertex)}
    aWeight = np.zeros((graph.nVertex, graph.nVertex), dtype=float)

    for i, pVertex in enumerate(graph.aVertex):
        for pEdge in pVertex.aEdge:
            aWeight[i, aIndex[id(pEdge.pVertex_end)]] = pEdge.dWeight

    return aWeight
