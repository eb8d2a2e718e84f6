"""
Common types for graph traversal.

This module provides the fundamental types shared by the traversal engine,
the graph container and the exporters:
- Edge: Directed edge between two vertex indices
- Color: Traversal state of a vertex
- EdgeKind: Category assigned to an edge by depth-first classification
- GraphLike: Protocol the traversal engine consumes
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable, NamedTuple, Protocol, Union


class Color(IntEnum):
    """
    Traversal state of a vertex.

    - undiscovered: Not visited yet
    - discovered: On the active traversal path (pushed, not yet popped)
    - finished: Fully processed (popped)
    """

    undiscovered = 0
    discovered = 1
    finished = 2


class EdgeKind(IntEnum):
    """
    Depth-first edge categories, in classification priority order.

    - tree: Edge used to discover a new vertex
    - back: Edge to an ancestor of its source (or a self-loop)
    - forward: Edge to a proper descendant that is not a direct tree child
    - cross: Edge between vertices with no ancestor/descendant relation
    """

    tree = 0
    back = 1
    forward = 2
    cross = 3


class Edge(NamedTuple):
    """
    Directed edge between two vertex indices.

    Attributes:
        source: Index of the vertex the edge leaves
        target: Index of the vertex the edge enters
    """

    source: int
    target: int

    def __repr__(self) -> str:
        return f"Edge({self.source} -> {self.target})"


class GraphLike(Protocol):
    """Protocol for graphs the traversal engine can walk.

    ``out_edges`` must be a pure, repeatable read: the engine enumerates the
    edges of a vertex more than once and relies on seeing the same order
    every time.
    """

    def vertex_count(self) -> int:
        """Return the number of vertices, labeled 0..vertex_count()-1."""
        ...

    def out_edges(self, vertex: int) -> Iterable[Edge]:
        """Return the edges leaving ``vertex`` in a fixed order."""
        ...


# Links accepted by graph constructors: Edge, (source, target) tuple,
# dict with source/target keys, or any object with those attributes
LinkLike = Union[Edge, tuple[int, int], dict[str, Any], Any]


__all__ = [
    "Color",
    "EdgeKind",
    "Edge",
    "GraphLike",
    "LinkLike",
]
