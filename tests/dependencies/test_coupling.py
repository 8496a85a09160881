"""Tests for the coupling ratio calculator."""

import logging

import pytest

from component_insight.decomposition.models import (
    AssignmentMode,
    Component,
    LogicalDecomposition,
)
from component_insight.dependencies.coupling import coupling_percentage, edge_coupling
from component_insight.dependencies.models import ComponentDependency


class TestCouplingPercentage:
    """Test percentage of a component's LOC exported via one edge."""

    def test_basic_ratio(self):
        dep = ComponentDependency("A", "B", 2, ("a/a1.py", "a/a2.py"), loc_from=90)
        component = Component("A", ("a/a1.py", "a/a2.py", "a/a3.py"), lines_of_code=100)
        assert coupling_percentage(dep, component) == pytest.approx(90.0)

    def test_over_hundred_not_clamped(self):
        dep = ComponentDependency("A", "B", 1, ("a/x.py",), loc_from=120)
        component = Component("A", ("a/x.py",), lines_of_code=100)
        assert coupling_percentage(dep, component) == pytest.approx(120.0)

    def test_zero_loc_component(self):
        dep = ComponentDependency("A", "B", 1, ("a/x.py",), loc_from=0)
        assert coupling_percentage(dep, Component("A", ("a/x.py",), 0)) is None


class TestEdgeCoupling:
    """Test coupling lookup through a decomposition."""

    def test_resolves_from_component(self, ab_decomposition):
        dep = ComponentDependency("A", "B", 2, ("a/a1.py", "a/a2.py"), loc_from=90)
        assert edge_coupling(dep, ab_decomposition) == pytest.approx(90.0)

    def test_unknown_component_omits_percentage(self, caplog):
        decomposition = LogicalDecomposition(
            name="d", mode=AssignmentMode.EXPLICIT, components=(Component("B", (), 10),)
        )
        dep = ComponentDependency("Ghost", "B", 1, ("g.py",), loc_from=5)

        with caplog.at_level(logging.WARNING, logger="component_insight"):
            assert edge_coupling(dep, decomposition) is None
        assert "Ghost" in caplog.text
