"""
Adjacency-list directed graph.

A concrete implementation of the ``GraphLike`` protocol. Out-edges of each
vertex are kept in insertion order, which is the order the traversal engine
observes when it scans a vertex.
"""

from __future__ import annotations

import warnings
from typing import Any, Iterable, Iterator, Sequence

import numpy as np

from .types import Edge, LinkLike
from .validation import (
    ValidationError,
    resolve_links,
    validate_vertex_count,
    validate_vertex_index,
)


class WeightIgnoredWarning(UserWarning):
    """Warning issued when edge weights are dropped while building a graph."""

    pass


class AdjacencyGraph:
    """
    Directed graph with vertices labeled 0..n-1 and ordered adjacency lists.

    Parallel edges and self-loops are allowed and kept as separate entries.

    Example:
        graph = AdjacencyGraph(3, [(0, 1), (1, 2)])
        graph.add_edge(2, 0)
        list(graph.out_edges(2))  # [Edge(2 -> 0)]
    """

    def __init__(self, num_vertices: int, edges: Iterable[LinkLike] = ()) -> None:
        """
        Initialize graph.

        Args:
            num_vertices: Number of vertices
            edges: Initial edges as Edge objects or (source, target) pairs

        Raises:
            ValidationError: If num_vertices is negative
            InvalidVertexError: If an edge endpoint is out of range
        """
        n = validate_vertex_count(num_vertices)
        self._adj: list[list[Edge]] = [[] for _ in range(n)]
        for source, target in edges:
            self.add_edge(source, target)

    @classmethod
    def from_links(cls, num_vertices: int, links: Sequence[LinkLike]) -> AdjacencyGraph:
        """
        Build a graph from link-like objects.

        Args:
            num_vertices: Number of vertices
            links: Dicts with source/target keys, objects with source/target
                attributes, Edge objects or (source, target) tuples

        Raises:
            InvalidLinkError: If any link references a vertex out of range
        """
        edges = resolve_links(links, validate_vertex_count(num_vertices))
        graph = cls(num_vertices)
        for edge in edges:
            graph._adj[edge.source].append(edge)
        return graph

    @classmethod
    def from_matrix(cls, matrix: Any) -> AdjacencyGraph:
        """
        Build a graph from a square adjacency matrix.

        Every non-zero entry ``matrix[i, j]`` becomes an edge ``i -> j``; the
        out-edges of a row are ordered by column index. Entries other than
        0 and 1 are treated as plain edges and their weights are dropped.

        Args:
            matrix: Square array-like of numbers

        Raises:
            ValidationError: If the matrix is not square
        """
        arr = np.asarray(matrix)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValidationError(f"adjacency matrix must be square, got shape {arr.shape}")

        nonzero = arr != 0
        if np.any(arr[nonzero] != 1):
            warnings.warn(
                "Adjacency matrix contains weights other than 0/1. "
                "Weights are ignored; each non-zero entry becomes one edge.",
                WeightIgnoredWarning,
                stacklevel=2,
            )

        graph = cls(int(arr.shape[0]))
        rows, cols = np.nonzero(nonzero)
        for i, j in zip(rows.tolist(), cols.tolist()):
            graph._adj[i].append(Edge(i, j))
        return graph

    def to_matrix(self) -> np.ndarray:
        """Return the adjacency matrix, counting parallel edges."""
        n = len(self._adj)
        matrix = np.zeros((n, n), dtype=int)
        for edge in self.edges():
            matrix[edge.source, edge.target] += 1
        return matrix

    def add_edge(self, source: int, target: int) -> Edge:
        """Append edge ``source -> target`` and return it."""
        n = len(self._adj)
        validate_vertex_index(source, n)
        validate_vertex_index(target, n)
        edge = Edge(source, target)
        self._adj[source].append(edge)
        return edge

    def vertex_count(self) -> int:
        return len(self._adj)

    def out_edges(self, vertex: int) -> Iterator[Edge]:
        """Iterate over edges leaving ``vertex`` in insertion order."""
        validate_vertex_index(vertex, len(self._adj))
        return iter(self._adj[vertex])

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, grouped by source vertex."""
        for out in self._adj:
            yield from out

    @property
    def num_edges(self) -> int:
        return sum(len(out) for out in self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"AdjacencyGraph(vertices={len(self._adj)}, edges={self.num_edges})"


__all__ = [
    "AdjacencyGraph",
    "WeightIgnoredWarning",
]
