"""Depth-first search module.

Iterative single-source depth-first search over a directed graph. Produces
discovery/finish timestamps, tree parents and depths for every reached
vertex, and partitions the reached edges into tree, back, forward and cross
edges.

Public API:
    depth_first_search(graph, source=0) -> DepthFirstSearch
    DepthFirstSearch(graph, source=0).run() -> DepthFirstSearch
"""

from ._search import DepthFirstSearch, depth_first_search
from ._types import EdgeClassification, TraversalStateError, VertexData

__all__ = [
    "depth_first_search",
    "DepthFirstSearch",
    "EdgeClassification",
    "TraversalStateError",
    "VertexData",
]
