"""Tests for DOT export of traversal results."""

import pytest

from graph_traversal import (
    AdjacencyGraph,
    DepthFirstSearch,
    EdgeKind,
    TraversalStateError,
    depth_first_search,
)
from graph_traversal.export import DEFAULT_EDGE_STYLES, to_dot

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mixed_search():
    """A traversal with one edge of every kind and an unreached vertex."""
    graph = AdjacencyGraph(
        5,
        [(0, 1), (1, 2), (2, 0), (0, 2), (0, 3), (3, 2), (4, 0)],
    )
    return depth_first_search(graph)


class TestDotExport:
    """Tests for to_dot."""

    def test_kinds_present(self, mixed_search):
        """Fixture really covers all four kinds."""
        counts = mixed_search.classification.counts()
        assert all(counts[kind] >= 1 for kind in EdgeKind)

    def test_digraph_header(self, mixed_search):
        dot = to_dot(mixed_search)
        assert dot.startswith("digraph G {")
        assert dot.rstrip().endswith("}")

    def test_custom_name_quoted(self, mixed_search):
        dot = to_dot(mixed_search, name="my graph")
        assert dot.startswith('digraph "my graph" {')

    def test_vertex_labels_carry_times(self, mixed_search):
        dot = to_dot(mixed_search)
        record = mixed_search.vertex(1)
        assert f'label="1\\n{record.discover_time}/{record.finish_time}"' in dot

    def test_source_marked(self, mixed_search):
        dot = to_dot(mixed_search)
        assert "peripheries=2" in dot

    def test_edges_styled_by_kind(self, mixed_search):
        dot = to_dot(mixed_search)
        assert "0 -> 1 [class=tree, style=bold];" in dot
        assert "2 -> 0 [class=back, style=dashed];" in dot
        assert "0 -> 2 [class=forward, style=dotted];" in dot
        assert "3 -> 2 [class=cross, color=gray];" in dot

    def test_unreached_omitted_by_default(self, mixed_search):
        dot = to_dot(mixed_search)
        assert "  4" not in dot
        assert "4 -> 0" not in dot

    def test_include_unreached(self, mixed_search):
        dot = to_dot(mixed_search, include_unreached=True)
        assert "  4 [style=dashed];" in dot
        # Edges of unreached vertices are never classified
        assert "4 -> 0" not in dot

    def test_edge_style_override(self, mixed_search):
        dot = to_dot(mixed_search, edge_styles={EdgeKind.back: {"color": "red"}})
        assert "2 -> 0 [class=back, style=dashed, color=red];" in dot
        # Defaults are not mutated
        assert DEFAULT_EDGE_STYLES[EdgeKind.back] == {"style": "dashed"}

    def test_graph_attrs(self, mixed_search):
        dot = to_dot(mixed_search, graph_attrs={"rankdir": "LR"})
        assert "  graph [rankdir=LR];" in dot

    def test_requires_run(self):
        search = DepthFirstSearch(AdjacencyGraph(1))
        with pytest.raises(TraversalStateError):
            to_dot(search)

    def test_name_with_quote_escaped(self, mixed_search):
        dot = to_dot(mixed_search, name='say "hi"')
        assert dot.startswith('digraph "say \\"hi\\"" {')
