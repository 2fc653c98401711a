"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import io
from pathlib import Path

import pytest

from antennagraph import pyantennagraph


def make_graph(*rows: str, link: bool = True) -> pyantennagraph:
    """Load the given map rows into a fresh graph, optionally linking it."""
    graph = pyantennagraph()
    graph.load_grid(io.StringIO("\n".join(rows)))
    if link:
        graph.build_adjacency()
    return graph


@pytest.fixture
def grid_factory():
    """Return a helper that builds a graph from map rows."""
    return make_graph


@pytest.fixture
def empty_graph() -> pyantennagraph:
    """Return a graph with no vertices."""
    return pyantennagraph()


@pytest.fixture
def full_grid() -> pyantennagraph:
    """Return a linked 3x3 map holding a single frequency."""
    return make_graph("AAA", "AAA", "AAA")


@pytest.fixture
def mixed_grid() -> pyantennagraph:
    """Return the unlinked 3x3 map with two frequencies on the diagonals."""
    return make_graph("A.B", ".A.", "B.A", link=False)


@pytest.fixture
def map_file(tmp_path: Path) -> Path:
    """Write a small antenna map to disk and return its path."""
    path = tmp_path / "mapa_antenas.txt"
    path.write_text("..0.\n.00.\n....\nA..A\n", encoding="utf-8")
    return path
