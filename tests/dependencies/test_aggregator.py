"""Tests for component dependency aggregation."""

import random

from component_insight.dependencies.aggregator import (
    aggregate_component_dependencies,
    total_dependency_count,
)
from component_insight.dependencies.models import ComponentDependency, FileDependency


class TestAggregateComponentDependencies:
    """Test contraction of file edges into component edges."""

    def test_two_component_scenario(self, ab_edges, ab_assignment, ab_file_lines):
        deps = aggregate_component_dependencies(ab_edges, ab_assignment, ab_file_lines)

        assert [d.key for d in deps] == [("A", "B"), ("B", "A")]
        a_to_b, b_to_a = deps
        assert a_to_b.count == 2
        assert a_to_b.paths_from == ("a/a1.py", "a/a2.py")
        assert a_to_b.loc_from == 90
        assert b_to_a.count == 1
        assert b_to_a.paths_from == ("b/b3.py",)
        assert b_to_a.loc_from == 10

    def test_file_counted_once_per_target_component(self):
        assignment = {"a/x.py": "A", "b/1.py": "B", "b/2.py": "B", "b/3.py": "B"}
        edges = [("a/x.py", "b/1.py"), ("a/x.py", "b/2.py"), ("a/x.py", "b/3.py")]
        deps = aggregate_component_dependencies(edges, assignment, {"a/x.py": 40})

        assert len(deps) == 1
        assert deps[0].count == 1
        assert deps[0].loc_from == 40

    def test_duplicate_edges_fold_into_one_record(self):
        assignment = {"a/x.py": "A", "b/y.py": "B"}
        edges = [("a/x.py", "b/y.py")] * 5
        deps = aggregate_component_dependencies(edges, assignment, {"a/x.py": 7})

        assert deps == [ComponentDependency("A", "B", 1, ("a/x.py",), 7)]

    def test_intra_component_edges_dropped(self):
        assignment = {"a/x.py": "A", "a/y.py": "A"}
        deps = aggregate_component_dependencies([("a/x.py", "a/y.py")], assignment, {})
        assert deps == []

    def test_unassigned_file_goes_to_unclassified(self):
        assignment = {"a/x.py": "A"}
        edges = [("a/x.py", "vendor/lib.py"), ("tools/gen.py", "a/x.py")]
        deps = aggregate_component_dependencies(edges, assignment, {"tools/gen.py": 3})

        assert [d.key for d in deps] == [("A", "Unclassified"), ("Unclassified", "A")]
        assert deps[1].loc_from == 3

    def test_custom_unclassified_name(self):
        deps = aggregate_component_dependencies(
            [("x.py", "a/y.py")], {"a/y.py": "A"}, {}, unclassified_name="Other"
        )
        assert deps[0].from_component == "Other"

    def test_missing_loc_counts_zero(self):
        deps = aggregate_component_dependencies(
            [("a/x.py", "b/y.py")], {"a/x.py": "A", "b/y.py": "B"}, {}
        )
        assert deps[0].loc_from == 0

    def test_paths_follow_first_seen_order(self):
        assignment = {"a/1.py": "A", "a/2.py": "A", "a/3.py": "A", "b/y.py": "B"}
        edges = [("a/3.py", "b/y.py"), ("a/1.py", "b/y.py"), ("a/3.py", "b/y.py"), ("a/2.py", "b/y.py")]
        deps = aggregate_component_dependencies(edges, assignment, {})
        assert deps[0].paths_from == ("a/3.py", "a/1.py", "a/2.py")

    def test_accepts_file_dependency_records(self):
        edges = [FileDependency("a/x.py", "b/y.py")]
        deps = aggregate_component_dependencies(edges, {"a/x.py": "A", "b/y.py": "B"}, {})
        assert deps[0].key == ("A", "B")

    def test_empty_input(self):
        assert aggregate_component_dependencies([], {}, {}) == []


class TestAggregationProperties:
    """Properties that hold for arbitrary edge sets."""

    def _random_graph(self, seed):
        rng = random.Random(seed)
        files = [f"{c}/f{i}.py" for c in "ABCD" for i in range(5)]
        assignment = {f: f.split("/")[0] for f in files}
        edges = [(rng.choice(files), rng.choice(files)) for _ in range(80)]
        return files, assignment, edges

    def test_count_bounded_by_distinct_contributors(self):
        for seed in range(10):
            files, assignment, edges = self._random_graph(seed)
            deps = aggregate_component_dependencies(edges, assignment, {})

            expected = {
                (src, assignment[dst])
                for src, dst in edges
                if assignment[src] != assignment[dst]
            }
            assert total_dependency_count(deps) == len(expected)
            for dep in deps:
                assert dep.count <= len({src for src, _ in edges})

    def test_no_intra_component_records(self):
        for seed in range(10):
            _, assignment, edges = self._random_graph(seed)
            for dep in aggregate_component_dependencies(edges, assignment, {}):
                assert dep.from_component != dep.to_component

    def test_one_record_per_pair(self):
        for seed in range(10):
            _, assignment, edges = self._random_graph(seed)
            keys = [d.key for d in aggregate_component_dependencies(edges, assignment, {})]
            assert len(keys) == len(set(keys))

    def test_idempotent(self):
        _, assignment, edges = self._random_graph(42)
        lines = {f: 10 for f in assignment}
        first = aggregate_component_dependencies(edges, assignment, lines)
        second = aggregate_component_dependencies(edges, assignment, lines)
        assert first == second
        assert [d.paths_from for d in first] == [d.paths_from for d in second]


class TestTotalDependencyCount:
    def test_sums_counts(self):
        deps = [
            ComponentDependency("A", "B", 2),
            ComponentDependency("B", "A", 1),
        ]
        assert total_dependency_count(deps) == 3

    def test_empty(self):
        assert total_dependency_count([]) == 0
