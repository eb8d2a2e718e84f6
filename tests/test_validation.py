"""Tests for input validation module."""

import pytest

from graph_traversal import Edge
from graph_traversal.validation import (
    InvalidLinkError,
    InvalidVertexError,
    ValidationError,
    get_link_endpoint,
    resolve_links,
    validate_vertex_count,
    validate_vertex_index,
)


class TestVertexValidation:
    """Tests for vertex index and count validation."""

    def test_valid_index(self):
        """In-range index is returned unchanged."""
        assert validate_vertex_index(2, 3) == 2

    @pytest.mark.parametrize("vertex", [-1, 3, 100])
    def test_out_of_range(self, vertex):
        """Out-of-range index raises InvalidVertexError."""
        with pytest.raises(InvalidVertexError, match=r"out of bounds \[0, 3\)"):
            validate_vertex_index(vertex, 3)

    @pytest.mark.parametrize("vertex", [1.0, "1", None, True])
    def test_non_integer(self, vertex):
        """Non-integer index raises InvalidVertexError."""
        with pytest.raises(InvalidVertexError, match="must be an integer"):
            validate_vertex_index(vertex, 3)

    def test_invalid_vertex_is_index_and_value_error(self):
        """InvalidVertexError is catchable as IndexError and ValueError."""
        assert issubclass(InvalidVertexError, IndexError)
        assert issubclass(InvalidVertexError, ValidationError)
        assert issubclass(ValidationError, ValueError)

    def test_vertex_count(self):
        """Non-negative counts pass; others raise."""
        assert validate_vertex_count(0) == 0
        with pytest.raises(ValidationError):
            validate_vertex_count(-2)
        with pytest.raises(ValidationError):
            validate_vertex_count(2.0)


class TestResolveLinks:
    """Tests for turning link-like objects into edges."""

    def test_mixed_link_types(self):
        """Edges, tuples and dicts resolve to Edge objects in order."""
        links = [Edge(0, 1), (1, 2), {"source": 2, "target": 0}]
        assert resolve_links(links, vertex_count=3) == [Edge(0, 1), Edge(1, 2), Edge(2, 0)]

    def test_out_of_range_source(self):
        """Out-of-bounds source raises InvalidLinkError."""
        with pytest.raises(InvalidLinkError, match="link 0: source 7"):
            resolve_links([{"source": 7, "target": 0}], vertex_count=3)

    def test_every_bad_link_reported(self):
        """All problems are listed in one error, not just the first."""
        links = [{"source": 0, "target": 1}, {"source": None, "target": 9}, (5, 0)]
        with pytest.raises(InvalidLinkError) as exc_info:
            resolve_links(links, vertex_count=2)
        message = str(exc_info.value)
        assert "link 1: source missing, target 9" in message
        assert "link 2: source 5" in message
        assert "link 0" not in message

    def test_get_link_endpoint(self):
        """Endpoints are read from attributes, dict keys or pairs."""
        assert get_link_endpoint(Edge(4, 5), "target") == 5
        assert get_link_endpoint({"source": 3}, "source") == 3
        assert get_link_endpoint((1, 2), "source") == 1
        assert get_link_endpoint(object(), "source") is None
