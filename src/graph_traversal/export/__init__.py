"""
Export functionality for traversal results.

Example usage:
    from graph_traversal import AdjacencyGraph, depth_first_search
    from graph_traversal.export import to_dot

    graph = AdjacencyGraph(3, [(0, 1), (1, 2), (2, 0)])
    dot_content = to_dot(depth_first_search(graph))
    with open("dfs.dot", "w") as f:
        f.write(dot_content)
"""

from .dot import DEFAULT_EDGE_STYLES, to_dot

__all__ = [
    "DEFAULT_EDGE_STYLES",
    "to_dot",
]
