"""Shared test fixtures for Component Insight."""

import pytest

from component_insight.decomposition.models import (
    ComponentDefinition,
    ComponentFilter,
    DecompositionDefinition,
    SourceFile,
)
from component_insight.decomposition.resolver import resolve_decomposition


@pytest.fixture
def ab_files():
    """Component A holds 100 LOC, component B holds 50 LOC."""
    return [
        SourceFile("a/a1.py", 60),
        SourceFile("a/a2.py", 30),
        SourceFile("a/a3.py", 10),
        SourceFile("b/b1.py", 20),
        SourceFile("b/b2.py", 20),
        SourceFile("b/b3.py", 10),
    ]


@pytest.fixture
def ab_edges():
    """a1 and a2 depend on B, b3 depends back on A."""
    return [
        ("a/a1.py", "b/b1.py"),
        ("a/a1.py", "b/b2.py"),
        ("a/a2.py", "b/b1.py"),
        ("b/b3.py", "a/a1.py"),
    ]


@pytest.fixture
def ab_definition():
    return DecompositionDefinition(
        name="ab",
        components=(
            ComponentDefinition("A", (ComponentFilter("a/.*"),)),
            ComponentDefinition("B", (ComponentFilter("b/.*"),)),
        ),
    )


@pytest.fixture
def ab_decomposition(ab_definition, ab_files):
    return resolve_decomposition(ab_definition, ab_files)


@pytest.fixture
def ab_file_lines(ab_files):
    return {f.path: f.lines_of_code for f in ab_files}


@pytest.fixture
def ab_assignment(ab_decomposition):
    return ab_decomposition.assignment()
