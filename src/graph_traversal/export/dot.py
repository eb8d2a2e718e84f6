"""
DOT (Graphviz) export for depth-first search results.

Generates a ``digraph`` in which every vertex is labeled with its
discover/finish times and every classified edge is styled by its kind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..types import EdgeKind

if TYPE_CHECKING:
    from ..dfs import DepthFirstSearch


DEFAULT_EDGE_STYLES: dict[EdgeKind, dict[str, str]] = {
    EdgeKind.tree: {"style": "bold"},
    EdgeKind.back: {"style": "dashed"},
    EdgeKind.forward: {"style": "dotted"},
    EdgeKind.cross: {"color": "gray"},
}


def to_dot(
    search: DepthFirstSearch,
    *,
    name: str = "G",
    include_unreached: bool = False,
    edge_styles: Optional[dict[EdgeKind, dict[str, str]]] = None,
    graph_attrs: Optional[dict[str, str]] = None,
) -> str:
    """
    Export a finished depth-first search to DOT (Graphviz) format.

    Args:
        search: A DepthFirstSearch after run()
        name: Name of the graph (default "G")
        include_unreached: Also emit vertices the search never reached
        edge_styles: Per-kind edge attributes, merged over the defaults
        graph_attrs: Additional graph-level attributes

    Returns:
        DOT format string representation of the traversal

    Raises:
        TraversalStateError: If the search has not run
    """
    classification = search.classification

    styles = {kind: dict(attrs) for kind, attrs in DEFAULT_EDGE_STYLES.items()}
    if edge_styles:
        for kind, attrs in edge_styles.items():
            styles[kind].update(attrs)

    lines = [f"digraph {_dot_id(name)} {{"]
    if graph_attrs:
        lines.append(f"  graph{_attr_list(graph_attrs)};")
    lines.append("  node [shape=circle];")
    lines.append("")

    # Vertices
    for record in search.vertices:
        if record.reached:
            label = f"{record.index}\\n{record.discover_time}/{record.finish_time}"
            attrs = {"label": label}
            if record.index == search.source:
                attrs["peripheries"] = "2"
        elif include_unreached:
            attrs = {"style": "dashed"}
        else:
            continue
        lines.append(f"  {record.index}{_attr_list(attrs)};")

    lines.append("")

    # Edges, grouped by kind
    for kind, edge in classification:
        attrs = {"class": kind.name}
        attrs.update(styles[kind])
        lines.append(f"  {edge.source} -> {edge.target}{_attr_list(attrs)};")

    lines.append("}")

    return "\n".join(lines)


def _dot_id(value: str) -> str:
    """Return value as a DOT ID, quoted unless it is a bare word or number.

    Backslashes are left alone so label escapes such as ``\\n`` reach Graphviz.
    """
    if value.isidentifier() or value.isdigit():
        return value
    return '"' + value.replace('"', '\\"') + '"'


def _attr_list(attrs: dict[str, str]) -> str:
    return " [" + ", ".join(f"{key}={_dot_id(value)}" for key, value in attrs.items()) + "]"


__all__ = [
    "DEFAULT_EDGE_STYLES",
    "to_dot",
]
