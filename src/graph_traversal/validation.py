"""
Input validation utilities for graph traversal.

Provides centralized validation functions for vertex indices, vertex counts
and edge lists. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .types import Edge


class ValidationError(ValueError):
    """Base exception for traversal input validation errors."""

    pass


class InvalidVertexError(ValidationError, IndexError):
    """Raised when a vertex index is outside [0, vertex_count)."""

    pass


class InvalidLinkError(ValidationError):
    """Raised when a link references invalid vertices."""

    pass


def validate_vertex_count(count: int) -> int:
    """
    Validate a vertex count.

    Args:
        count: Number of vertices

    Returns:
        Validated vertex count

    Raises:
        ValidationError: If count is not a non-negative integer
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError(f"vertex count must be an integer, got {count!r}")
    if count < 0:
        raise ValidationError(f"vertex count must be >= 0, got {count}")
    return count


def validate_vertex_index(vertex: int, vertex_count: int) -> int:
    """
    Validate that a vertex index is within bounds.

    Args:
        vertex: Vertex index to check
        vertex_count: Number of vertices in the graph

    Returns:
        Validated vertex index

    Raises:
        InvalidVertexError: If vertex is not an int in [0, vertex_count)
    """
    if isinstance(vertex, bool) or not isinstance(vertex, int):
        raise InvalidVertexError(f"vertex index must be an integer, got {vertex!r}")
    if vertex < 0 or vertex >= vertex_count:
        raise InvalidVertexError(
            f"vertex index {vertex} out of bounds [0, {vertex_count})"
        )
    return vertex


def resolve_links(links: Sequence[Any], vertex_count: int) -> list[Edge]:
    """
    Turn link-like objects into edges, checking both endpoints.

    Args:
        links: Edge objects, (source, target) tuples, dicts with
            source/target keys, or objects with source/target attributes
        vertex_count: Number of vertices in the graph

    Returns:
        One Edge per link, in input order

    Raises:
        InvalidLinkError: Listing every link with a missing or
            out-of-range endpoint
    """
    edges: list[Edge] = []
    problems: list[str] = []

    for i, link in enumerate(links):
        src = get_link_endpoint(link, "source")
        tgt = get_link_endpoint(link, "target")
        bad = [
            f"{attr} {value if value is not None else 'missing'}"
            for attr, value in (("source", src), ("target", tgt))
            if value is None or not 0 <= value < vertex_count
        ]
        if bad:
            problems.append(f"link {i}: " + ", ".join(bad))
        else:
            edges.append(Edge(src, tgt))  # type: ignore[arg-type]

    if problems:
        raise InvalidLinkError(
            f"links out of bounds [0, {vertex_count}):\n" + "\n".join(problems)
        )
    return edges


def get_link_endpoint(link: Any, attr: str) -> Optional[int]:
    """Extract the source or target index from a link-like object."""
    if hasattr(link, attr):
        val = getattr(link, attr, None)
    elif isinstance(link, dict):
        val = link.get(attr)
    elif isinstance(link, (tuple, list)) and len(link) == 2:
        val = link[0] if attr == "source" else link[1]
    else:
        val = None

    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, int):
        return val
    index = getattr(val, "index", None)
    if isinstance(index, int):
        return index
    return None


__all__ = [
    "ValidationError",
    "InvalidVertexError",
    "InvalidLinkError",
    "validate_vertex_count",
    "validate_vertex_index",
    "resolve_links",
    "get_link_endpoint",
]
