"""
Unit tests for vertex creation, lookup, relabelling and removal.
"""

import pytest

import antennagraph.classes.vertex as vertex_module
from antennagraph import (
    AllocationError,
    InvalidArgumentError,
    VertexNotFoundError,
    create_vertex,
    pyantennagraph,
)


class TestCreateVertex:
    """Test vertex allocation."""

    def test_new_vertex_is_detached(self):
        """A new vertex has no edges and is not visited."""
        v = create_vertex(7, "A", 3, 4)
        assert (v.lVertexID, v.cFrequency, v.iX, v.iY) == (7, "A", 3, 4)
        assert v.aEdge == []
        assert v.iFlag_visited is False

    @pytest.mark.parametrize("frequency", ["", "AB", None])
    def test_frequency_must_be_one_character(self, frequency):
        """Frequencies other than a single character are rejected."""
        with pytest.raises(InvalidArgumentError):
            create_vertex(1, frequency, 0, 0)

    def test_memory_error_becomes_allocation_error(self, monkeypatch):
        """Running out of memory surfaces as a recoverable AllocationError."""
        def _raise(*args):
            raise MemoryError

        monkeypatch.setattr(vertex_module, "pyvertex", _raise)
        with pytest.raises(AllocationError):
            create_vertex(1, "A", 0, 0)


class TestAddAndFind:
    """Test insertion and lookups."""

    def test_added_vertex_found_by_id_and_coordinates(self, empty_graph):
        """A vertex added to the graph is found by id and by coordinates."""
        v = empty_graph.create_vertex(17, "0", 3, 3)
        assert empty_graph.add_vertex(v) is True
        assert empty_graph.get_vertex_by_id(17) is v
        assert empty_graph.get_vertex_by_coordinates(3, 3) is v
        assert empty_graph.nVertex == 1

    def test_add_missing_vertex_fails(self, empty_graph):
        """Adding None reports failure and leaves the graph empty."""
        assert empty_graph.add_vertex(None) is False
        assert empty_graph.nVertex == 0

    def test_insertion_order_is_kept(self, empty_graph):
        """Vertices are appended at the tail."""
        for i, freq in enumerate("XYZ", start=1):
            empty_graph.add_new_vertex(i, freq, i, 0)
        assert [v.lVertexID for v in empty_graph.get_vertices()] == [1, 2, 3]

    def test_vertex_list_accessors(self, empty_graph):
        """nVertex and get_vertices cover counting and listing; the copy is detached."""
        empty_graph.add_new_vertex(1, "A", 0, 0)
        vertices = empty_graph.get_vertices()
        vertices.clear()
        assert empty_graph.nVertex == 1
        assert empty_graph.get_vertices()[0].lVertexID == 1

    def test_dimensions_grow_with_coordinates(self, empty_graph):
        """Rows and columns become at least the vertex y and x."""
        empty_graph.add_new_vertex(16, "A", 13, 2)
        assert (empty_graph.nRow, empty_graph.nColumn) == (2, 13)
        empty_graph.add_new_vertex(17, "A", 1, 1)
        assert (empty_graph.nRow, empty_graph.nColumn) == (2, 13)

    def test_missing_lookups_return_none(self, empty_graph):
        """Lookups on absent ids or coordinates return None."""
        empty_graph.add_new_vertex(1, "A", 0, 0)
        assert empty_graph.get_vertex_by_id(99) is None
        assert empty_graph.get_vertex_by_coordinates(5, 5) is None

    def test_duplicate_coordinates_return_first(self, empty_graph):
        """Duplicate coordinates are accepted; lookup returns the first added."""
        first = empty_graph.add_new_vertex(1, "A", 2, 2)
        empty_graph.add_new_vertex(2, "B", 2, 2)
        assert empty_graph.get_vertex_by_coordinates(2, 2) is first

    def test_require_vertex_raises_when_missing(self, empty_graph):
        """require_vertex_by_id raises VertexNotFoundError for unknown ids."""
        with pytest.raises(VertexNotFoundError) as excinfo:
            empty_graph.require_vertex_by_id(42)
        assert excinfo.value.vertex_id == 42
        assert "42" in str(excinfo.value)


class TestSetFrequency:
    """Test relabelling."""

    def test_set_frequency(self, empty_graph):
        v = empty_graph.add_new_vertex(1, "A", 0, 0)
        assert empty_graph.set_vertex_frequency(v, "B") is True
        assert v.cFrequency == "B"

    def test_set_frequency_on_missing_vertex(self, empty_graph):
        assert empty_graph.set_vertex_frequency(None, "B") is False

    @pytest.mark.parametrize("frequency", ["", "AB", None, 7])
    def test_invalid_frequency_is_rejected(self, empty_graph, frequency):
        """Relabelling enforces the same single-character rule as creation."""
        v = empty_graph.add_new_vertex(1, "A", 0, 0)
        with pytest.raises(InvalidArgumentError):
            empty_graph.set_vertex_frequency(v, frequency)
        assert v.cFrequency == "A"


class TestRemoveVertex:
    """Test removal with edge cleanup."""

    def test_removed_vertex_leaves_no_incoming_edges(self, full_grid):
        """After removal no adjacency list targets the removed vertex."""
        assert full_grid.remove_vertex_by_id(5) is True
        assert full_grid.get_vertex_by_id(5) is None
        for v in full_grid.aVertex:
            assert all(edge.pVertex_end.lVertexID != 5 for edge in v.aEdge)

    def test_edge_count_drops_by_incident_edges(self, full_grid):
        """Removing the centre drops its 8 outgoing and 8 incoming edges."""
        assert full_grid.get_edge_count() == 40
        full_grid.remove_vertex_by_id(5)
        assert full_grid.get_edge_count() == 24

    def test_removing_corner(self, full_grid):
        """A corner takes part in 3 links, so 6 directed edges disappear."""
        full_grid.remove_vertex_by_id(1)
        assert full_grid.get_edge_count() == 34
        assert full_grid.nVertex == 8

    def test_remove_unknown_id_leaves_graph_unchanged(self, full_grid):
        """A failed removal changes nothing."""
        before = [(v.lVertexID, len(v.aEdge)) for v in full_grid.aVertex]
        assert full_grid.remove_vertex_by_id(99) is False
        assert [(v.lVertexID, len(v.aEdge)) for v in full_grid.aVertex] == before

    def test_dimensions_are_not_shrunk(self, full_grid):
        """Removing vertices never shrinks the recorded dimensions."""
        full_grid.remove_vertex_by_id(9)
        assert (full_grid.nRow, full_grid.nColumn) == (3, 3)

    def test_next_load_continues_after_count(self, grid_factory):
        """Ids assigned by a later load continue from the current vertex count."""
        graph = grid_factory("AA", link=False)
        graph.remove_vertex_by_id(1)
        graph.load_grid(["B"])
        assert [v.lVertexID for v in graph.aVertex] == [2, 2]


def test_clear_drops_everything(full_grid):
    """Tearing the graph down removes vertices, edges and dimensions."""
    vertices = full_grid.get_vertices()
    full_grid.clear()
    assert full_grid.nVertex == 0
    assert (full_grid.nRow, full_grid.nColumn) == (0, 0)
    assert all(v.aEdge == [] for v in vertices)


def test_facade_keeps_graph_state(empty_graph):
    """The facade exposes the live aggregate."""
    assert isinstance(empty_graph, pyantennagraph)
    v = empty_graph.add_new_vertex(1, "A", 0, 0)
    assert empty_graph.graph.aVertex == [v]
    assert v in empty_graph.graph
