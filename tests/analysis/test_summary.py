"""Tests for decomposition-wide summaries."""

import pytest

from component_insight.analysis.summary import rank_dependencies, summarize_decomposition
from component_insight.dependencies.models import ComponentDependency


class TestRankDependencies:
    """Ranking by count descending is stable."""

    def test_orders_by_count(self):
        deps = [
            ComponentDependency("A", "B", 1),
            ComponentDependency("B", "C", 5),
            ComponentDependency("C", "A", 3),
        ]
        assert [d.count for d in rank_dependencies(deps)] == [5, 3, 1]

    def test_ties_keep_aggregation_order(self):
        deps = [
            ComponentDependency("X", "Y", 2),
            ComponentDependency("A", "B", 7),
            ComponentDependency("M", "N", 2),
            ComponentDependency("C", "D", 2),
        ]
        ranked = rank_dependencies(deps)
        assert [d.key for d in ranked] == [("A", "B"), ("X", "Y"), ("M", "N"), ("C", "D")]

    def test_does_not_mutate_input(self):
        deps = [ComponentDependency("A", "B", 1), ComponentDependency("B", "A", 2)]
        rank_dependencies(deps)
        assert deps[0].key == ("A", "B")


class TestSummarizeDecomposition:
    """Test the full per-decomposition summary."""

    def test_two_component_scenario(self, ab_decomposition, ab_edges, ab_file_lines):
        summary = summarize_decomposition(ab_decomposition, ab_edges, ab_file_lines)

        assert summary.name == "ab"
        assert summary.component_count == 2
        assert summary.edge_count == 2
        assert summary.dependency_count == 3
        assert summary.cycles.cyclic_pair_count == 1
        assert summary.cycles.cyclic_dependency_count == 3
        assert summary.cycles.links == 2

        a_to_b, b_to_a = summary.edges
        assert a_to_b.dependency.key == ("A", "B")
        assert a_to_b.dependency.paths_from == ("a/a1.py", "a/a2.py")
        assert a_to_b.coupling_percentage == pytest.approx(90.0)
        assert b_to_a.dependency.key == ("B", "A")
        assert b_to_a.coupling_percentage == pytest.approx(20.0)

    def test_graph_follows_ranked_edges(self, ab_decomposition, ab_edges, ab_file_lines):
        summary = summarize_decomposition(ab_decomposition, ab_edges, ab_file_lines)
        assert summary.graph.nodes == ("A", "B")
        assert [(e.source, e.target, e.weight, e.cyclic) for e in summary.graph.edges] == [
            ("A", "B", 2, True),
            ("B", "A", 1, True),
        ]

    def test_no_cross_component_edges(self, ab_decomposition, ab_file_lines):
        summary = summarize_decomposition(
            ab_decomposition, [("a/a1.py", "a/a2.py")], ab_file_lines
        )
        assert summary.edges == ()
        assert summary.dependency_count == 0
        assert summary.cycles.cyclic_pair_count == 0
        assert summary.graph.edges == ()

    def test_empty_input(self, ab_decomposition):
        summary = summarize_decomposition(ab_decomposition, [], {})
        assert summary.edge_count == 0
        assert summary.cycles.cyclic_dependency_count == 0

    def test_unclassified_edge_without_component_record(self, ab_decomposition, ab_file_lines):
        # Files outside the scan fall back to Unclassified, which has no record here
        summary = summarize_decomposition(
            ab_decomposition, [("a/a1.py", "vendor/lib.py")], ab_file_lines
        )
        (edge,) = summary.edges
        assert edge.dependency.key == ("A", "Unclassified")
        assert edge.coupling_percentage == pytest.approx(60.0)
        assert "Unclassified" in summary.graph.nodes

    def test_percentage_omitted_for_unknown_from_component(self, ab_decomposition):
        summary = summarize_decomposition(ab_decomposition, [("tools/x.py", "a/a1.py")], {})
        (edge,) = summary.edges
        assert edge.dependency.from_component == "Unclassified"
        assert edge.coupling_percentage is None

    def test_dependencies_property(self, ab_decomposition, ab_edges, ab_file_lines):
        summary = summarize_decomposition(ab_decomposition, ab_edges, ab_file_lines)
        assert [d.count for d in summary.dependencies] == [2, 1]
