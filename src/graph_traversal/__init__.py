"""
graph-traversal: Depth-first search with edge classification.

This package runs an iterative depth-first search over a directed graph
from one source vertex and reports:
- discovery/finish timestamps, tree parents and tree depths per vertex
- tree, back, forward and cross edge sets
- tree paths from the source and a parenthesized rendering of the DFS tree

Modules:
- dfs: The traversal engine
- graph: Adjacency-list graph container
- stack: Fixed-capacity LIFO stack used by the engine
- export: DOT (Graphviz) export of a finished traversal
"""

__version__ = "0.1.0"

# Traversal engine
from .dfs import (
    DepthFirstSearch,
    EdgeClassification,
    TraversalStateError,
    VertexData,
    depth_first_search,
)

# Graph container
from .graph import AdjacencyGraph, WeightIgnoredWarning

# Stack
from .stack import ArrayStack, CapacityExceededError, EmptyStackError, StackError

# Shared types
from .types import Color, Edge, EdgeKind, GraphLike, LinkLike

# Validation utilities
from .validation import (
    InvalidLinkError,
    InvalidVertexError,
    ValidationError,
    resolve_links,
    validate_vertex_count,
    validate_vertex_index,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Color",
    "Edge",
    "EdgeKind",
    "GraphLike",
    "LinkLike",
    # Traversal engine
    "DepthFirstSearch",
    "EdgeClassification",
    "TraversalStateError",
    "VertexData",
    "depth_first_search",
    # Graph container
    "AdjacencyGraph",
    "WeightIgnoredWarning",
    # Stack
    "ArrayStack",
    "StackError",
    "CapacityExceededError",
    "EmptyStackError",
    # Validation
    "ValidationError",
    "InvalidVertexError",
    "InvalidLinkError",
    "validate_vertex_count",
    "validate_vertex_index",
    "resolve_links",
]
