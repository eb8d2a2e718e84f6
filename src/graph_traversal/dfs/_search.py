"""Iterative depth-first search with edge classification.

The traversal keeps the active path on an explicit fixed-capacity stack
instead of the call stack. A vertex is stamped on discovery, descended into
immediately, and finished when its edge scan finds nothing new. Its tree
parent is the vertex exposed at the stack top after it is popped.

A second pass then classifies every edge leaving a reached vertex by
walking parent pointers:

    tree     parent[v] == u
    back     v == u, or v is an ancestor of u
    forward  u is a proper ancestor of v
    cross    anything else
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator, Optional

from typing_extensions import Self

from ..stack import ArrayStack
from ..types import Color, Edge, EdgeKind, GraphLike
from ..validation import validate_vertex_index
from ._types import EdgeClassification, TraversalStateError, VertexData

# Engine lifecycle states
_PENDING = "pending"
_DONE = "done"
_FAILED = "failed"

# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def depth_first_search(graph: GraphLike, source: int = 0) -> DepthFirstSearch:
    """Run a depth-first search from ``source`` and return the finished engine.

    Args:
        graph: Graph exposing ``vertex_count()`` and ``out_edges(vertex)``.
        source: Index of the vertex to start from.

    Returns:
        DepthFirstSearch whose traversal and classification are complete.

    Raises:
        InvalidVertexError: If ``source`` is not a vertex of ``graph``.
    """
    return DepthFirstSearch(graph, source).run()


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class DepthFirstSearch:
    """
    Single-source depth-first search over a directed graph.

    One instance performs exactly one traversal. Vertex records, the time
    counter and the edge lists belong to the instance and are mutated in
    place by ``run()``; the instance is not safe to share between threads.

    Example:
        graph = AdjacencyGraph(3, [(0, 1), (1, 2), (2, 0)])
        search = DepthFirstSearch(graph, source=0).run()
        search.path_from_source(2)   # "0 1 2"
        search.back_edges            # (Edge(2 -> 0),)
        search.tree_to_string()      # "( [0,0,5] ( [1,1,4] ( [2,2,3] ) ) ) "
    """

    def __init__(self, graph: GraphLike, source: int = 0) -> None:
        """
        Bind the engine to a graph and a source vertex.

        Args:
            graph: Graph exposing ``vertex_count()`` and ``out_edges(vertex)``.
            source: Index of the vertex to start from (default 0).

        Raises:
            InvalidVertexError: If ``source`` is not in [0, vertex_count).
        """
        self._graph = graph
        self._n = graph.vertex_count()
        self._source = validate_vertex_index(source, self._n)

        self._vertices: list[VertexData] = [VertexData(i) for i in range(self._n)]
        self._time = 0
        self._classification = EdgeClassification()
        self._state = _PENDING

    # -------------------------------------------------------------------
    # Running
    # -------------------------------------------------------------------

    def run(self) -> Self:
        """
        Traverse the graph from the source, then classify every reached edge.

        Returns:
            self, for chaining.

        Raises:
            TraversalStateError: If this engine has already run, or an earlier
                run on it failed.
        """
        if self._state != _PENDING:
            raise TraversalStateError(
                "traversal already ran on this engine; create a new DepthFirstSearch"
            )
        # Stays failed unless both passes complete
        self._state = _FAILED
        self._traverse()
        self._classify_edges()
        self._state = _DONE
        return self

    @property
    def has_run(self) -> bool:
        """True once traversal and classification have both completed."""
        return self._state == _DONE

    @property
    def failed(self) -> bool:
        return self._state == _FAILED

    def _traverse(self) -> None:
        stack: ArrayStack[int] = ArrayStack(self._n)
        source = self._source

        stack.push(source)
        self._discover(source, distance=0)

        while not stack.is_empty():
            current = stack.peek()
            edges = self._out_edges(current)
            edge = next(edges, None)

            while edge is not None:
                adjacent = edge.target
                if self._vertices[adjacent].color is Color.undiscovered:
                    stack.push(adjacent)
                    self._time += 1
                    self._discover(adjacent, distance=self._vertices[current].distance + 1)
                    # Descend now; the rest of current's edges are rescanned
                    # once adjacent is finished
                    current = adjacent
                    edges = self._out_edges(current)
                edge = next(edges, None)

            finished = stack.pop()
            if finished != source:
                self._vertices[finished].parent = stack.peek()
            self._time += 1
            self._finish(finished)

    def _discover(self, vertex: int, distance: float) -> None:
        record = self._vertices[vertex]
        record.color = Color.discovered
        record.distance = distance
        record.discover_time = self._time

    def _finish(self, vertex: int) -> None:
        record = self._vertices[vertex]
        record.color = Color.finished
        record.finish_time = self._time

    def _classify_edges(self) -> None:
        for record in self._vertices:
            if not record.reached:
                continue
            for edge in self._out_edges(record.index):
                self._classification.add(self._classify(edge), edge)

    def _classify(self, edge: Edge) -> EdgeKind:
        u, v = edge
        if self._vertices[v].parent == u:
            return EdgeKind.tree
        if u == v or self._is_ancestor(v, u):
            return EdgeKind.back
        if self._is_ancestor(u, v):
            return EdgeKind.forward
        return EdgeKind.cross

    def _is_ancestor(self, ancestor: int, vertex: int) -> bool:
        """True if ``ancestor`` is on the parent chain above ``vertex``."""
        parent = self._vertices[vertex].parent
        while parent is not None:
            if parent == ancestor:
                return True
            parent = self._vertices[parent].parent
        return False

    def _out_edges(self, vertex: int) -> Iterator[Edge]:
        # Only the endpoint is read; the scanned vertex is the source
        for _, target in self._graph.out_edges(vertex):
            validate_vertex_index(target, self._n)
            yield Edge(vertex, target)

    def _records(self) -> list[VertexData]:
        """Vertex records, readable before a run but not after a failed one."""
        if self._state == _FAILED:
            self._require_run()
        return self._vertices

    def _require_run(self) -> None:
        if self._state == _FAILED:
            raise TraversalStateError(
                "traversal failed; its records are incomplete, create a new DepthFirstSearch"
            )
        if self._state != _DONE:
            raise TraversalStateError("traversal has not run yet; call run() first")

    # -------------------------------------------------------------------
    # Vertex metadata
    # -------------------------------------------------------------------

    @property
    def graph(self) -> GraphLike:
        return self._graph

    @property
    def source(self) -> int:
        return self._source

    def vertex(self, vertex: int) -> VertexData:
        """Return a copy of the traversal record of ``vertex``."""
        validate_vertex_index(vertex, self._n)
        return replace(self._records()[vertex])

    @property
    def vertices(self) -> tuple[VertexData, ...]:
        return tuple(replace(record) for record in self._records())

    @property
    def distances(self) -> list[float]:
        return [record.distance for record in self._records()]

    @property
    def parents(self) -> list[Optional[int]]:
        return [record.parent for record in self._records()]

    @property
    def discover_times(self) -> list[int]:
        return [record.discover_time for record in self._records()]

    @property
    def finish_times(self) -> list[int]:
        return [record.finish_time for record in self._records()]

    def reached_vertices(self) -> list[int]:
        """Indices of vertices reachable from the source, ascending."""
        self._require_run()
        return [record.index for record in self._vertices if record.reached]

    def tree_children(self, vertex: int) -> list[int]:
        """Tree children of ``vertex`` in discovery order."""
        self._require_run()
        validate_vertex_index(vertex, self._n)
        return [
            edge.target
            for edge in self._out_edges(vertex)
            if self._vertices[edge.target].parent == vertex
        ]

    # -------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------

    def has_path_to(self, vertex: int) -> bool:
        self._require_run()
        validate_vertex_index(vertex, self._n)
        return self._vertices[vertex].reached

    def path_to(self, vertex: int) -> Optional[list[int]]:
        """
        Tree path from the source to ``vertex``.

        Returns:
            Vertex indices from source to ``vertex`` inclusive, or None if
            ``vertex`` was not reached.

        Raises:
            InvalidVertexError: If ``vertex`` is out of range.
            TraversalStateError: If the traversal has not run.
        """
        if not self.has_path_to(vertex):
            return None

        path = [vertex]
        parent = self._vertices[vertex].parent
        while parent is not None:
            path.append(parent)
            parent = self._vertices[parent].parent
        path.reverse()
        return path

    def path_from_source(self, vertex: int) -> str:
        """Tree path from the source to ``vertex`` as space-separated ids,
        or a "No path" message if ``vertex`` was not reached."""
        path = self.path_to(vertex)
        if path is None:
            return f"No path from source vertex to vertex {vertex}."
        return " ".join(str(v) for v in path)

    # -------------------------------------------------------------------
    # Tree rendering
    # -------------------------------------------------------------------

    def tree_to_string(self) -> str:
        """
        Render the DFS tree in parenthesized form.

        Each subtree is ``"( [v,discover,finish] " + children + ") "`` with
        children in the order their tree edges appear in ``v``'s edge list.
        """
        self._require_run()

        parts = [self._tree_label(self._source)]
        pending = [(self._source, self._out_edges(self._source))]
        while pending:
            vertex, edges = pending[-1]
            for edge in edges:
                child = edge.target
                if self._vertices[child].parent == vertex:
                    parts.append(self._tree_label(child))
                    pending.append((child, self._out_edges(child)))
                    break
            else:
                pending.pop()
                parts.append(") ")
        return "".join(parts)

    def _tree_label(self, vertex: int) -> str:
        record = self._vertices[vertex]
        return f"( [{vertex},{record.discover_time},{record.finish_time}] "

    # -------------------------------------------------------------------
    # Edge classification
    # -------------------------------------------------------------------

    @property
    def classification(self) -> EdgeClassification:
        """Copy of the classified edge lists."""
        self._require_run()
        return self._classification.copy()

    @property
    def tree_edges(self) -> tuple[Edge, ...]:
        self._require_run()
        return tuple(self._classification.tree)

    @property
    def back_edges(self) -> tuple[Edge, ...]:
        self._require_run()
        return tuple(self._classification.back)

    @property
    def forward_edges(self) -> tuple[Edge, ...]:
        self._require_run()
        return tuple(self._classification.forward)

    @property
    def cross_edges(self) -> tuple[Edge, ...]:
        self._require_run()
        return tuple(self._classification.cross)

    def edge_kind(self, source: int, target: int) -> Optional[EdgeKind]:
        """Kind recorded for edge ``source -> target``, or None if it was
        never classified (absent, or leaving an unreached vertex)."""
        self._require_run()
        return self._classification.kind_of(Edge(source, target))

    def __repr__(self) -> str:
        return f"DepthFirstSearch(vertices={self._n}, source={self._source}, {self._state})"
