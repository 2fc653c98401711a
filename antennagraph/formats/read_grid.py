"""
Read a text antenna map into a graph.

Every character of the map that is not the empty marker becomes a vertex at
(column, row) whose frequency is that character.
"""

import logging
import os
from typing import Iterable, Optional, Union

from ..classes.config import GridConfig
from ..classes.exceptions import AllocationError, GraphError, GridIOError
from ..core.graph import AntennaGraph
from ..operations.vertex_store import VertexStore

logger = logging.getLogger(__name__)

GridSource = Union[str, "os.PathLike[str]", Iterable[str]]


class GridLoader:
    """
    Populates a graph from a line oriented map source.

    The loader only needs sequential line access: a file path, an open text
    file or any iterable of strings.
    """

    def __init__(self, graph: AntennaGraph, vertex_store: VertexStore,
                 config: Optional[GridConfig] = None):
        """
        Initialize the grid loader.

        Args:
            graph: AntennaGraph instance to populate
            vertex_store: VertexStore used to create and append vertices
            config: Empty marker and file encoding
        """
        self.graph = graph
        self.vertex_store = vertex_store
        self.config = config or GridConfig()

    def load_grid(self, source: Optional[GridSource]) -> bool:
        """
        Add a vertex for every occupied cell of the map.

        Ids continue from the current vertex count plus one. Rows are counted
        from zero for this source; the graph dimensions grow to cover every
        line read. Vertices added before a failure stay in the graph.

        Args:
            source: Path to a map file, or an iterable of map lines

        Returns:
            True once the whole source has been read, False if source is missing

        Raises:
            GridIOError: If the path cannot be opened or read
            AllocationError: If a vertex cannot be created
            GraphError: If a vertex cannot be added to the graph
        """
        if source is None:
            logger.warning("No map source given, nothing loaded")
            return False

        if isinstance(source, (str, os.PathLike)):
            try:
                with open(source, "r", encoding=self.config.encoding) as pFile:
                    return self._load_lines(pFile)
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Error opening map file {source}: {e}")
                raise GridIOError(source, str(e)) from e

        return self._load_lines(source)

    def _load_lines(self, aLine: Iterable[str]) -> bool:
        lVertexID = self.graph.nVertex + 1
        iRow = 0
        nAdded = 0

        for sLine in aLine:
            sLine = sLine.rstrip("\r\n")

            for iColumn, cChar in enumerate(sLine):
                if cChar == self.config.empty_marker:
                    continue

                try:
                    pVertex = self.vertex_store.create_vertex(lVertexID, cChar, iColumn, iRow)
                except AllocationError:
                    logger.error(f"Failed to create vertex at ({iColumn},{iRow})")
                    raise

                if not self.vertex_store.add_vertex(pVertex):
                    logger.error(f"Failed to add vertex {lVertexID} to the graph")
                    raise GraphError(f"Cannot add vertex {lVertexID} at ({iColumn},{iRow})")

                lVertexID += 1
                nAdded += 1

            iRow += 1
            self.graph.expand_dimensions(iRow, len(sLine))

        logger.debug(f"Loaded {nAdded} vertices from {iRow} map lines "
                     f"({self.graph.nRow} rows x {self.graph.nColumn} columns)")
        return True
