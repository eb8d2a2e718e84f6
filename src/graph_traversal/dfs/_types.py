"""Internal data structures for depth-first search."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..types import Color, Edge, EdgeKind


class TraversalStateError(RuntimeError):
    """Raised when an engine is queried before, or run after, its traversal."""

    pass


@dataclass
class VertexData:
    """Per-vertex traversal record.

    Attributes:
        index: Vertex index this record belongs to.
        color: Traversal state.
        parent: Index of the DFS-tree parent. None for the source and for
            vertices never reached.
        distance: Tree depth from the source in tree-edge hops; infinite
            while undiscovered.
        discover_time: Counter value stamped on discovery.
        finish_time: Counter value stamped when the vertex is popped.
    """

    index: int
    color: Color = Color.undiscovered
    parent: Optional[int] = None
    distance: float = math.inf
    discover_time: int = 0
    finish_time: int = 0

    @property
    def reached(self) -> bool:
        return self.color is not Color.undiscovered


@dataclass
class EdgeClassification:
    """Edges leaving reached vertices, partitioned by kind.

    Each list keeps the order in which the classification pass met its
    edges: vertices in ascending index order, then graph edge order.
    """

    tree: list[Edge] = field(default_factory=list)
    back: list[Edge] = field(default_factory=list)
    forward: list[Edge] = field(default_factory=list)
    cross: list[Edge] = field(default_factory=list)

    def add(self, kind: EdgeKind, edge: Edge) -> None:
        self.edges_of(kind).append(edge)

    def edges_of(self, kind: EdgeKind) -> list[Edge]:
        if kind is EdgeKind.tree:
            return self.tree
        if kind is EdgeKind.back:
            return self.back
        if kind is EdgeKind.forward:
            return self.forward
        return self.cross

    def copy(self) -> EdgeClassification:
        return EdgeClassification(
            tree=list(self.tree),
            back=list(self.back),
            forward=list(self.forward),
            cross=list(self.cross),
        )

    def kind_of(self, edge: Edge) -> Optional[EdgeKind]:
        """Return the kind recorded for ``edge``, or None if never classified."""
        for kind in EdgeKind:
            if edge in self.edges_of(kind):
                return kind
        return None

    def counts(self) -> dict[EdgeKind, int]:
        return {kind: len(self.edges_of(kind)) for kind in EdgeKind}

    def __iter__(self) -> Iterator[tuple[EdgeKind, Edge]]:
        for kind in EdgeKind:
            for edge in self.edges_of(kind):
                yield kind, edge

    def __len__(self) -> int:
        return len(self.tree) + len(self.back) + len(self.forward) + len(self.cross)
