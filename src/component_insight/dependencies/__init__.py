"""Component dependencies: aggregation, cycles and coupling ratios."""

from .aggregator import aggregate_component_dependencies, total_dependency_count
from .coupling import coupling_percentage, edge_coupling
from .cycles import CycleSummary, analyze_cycles
from .models import ComponentDependency, FileDependency

__all__ = [
    "ComponentDependency",
    "CycleSummary",
    "FileDependency",
    "aggregate_component_dependencies",
    "analyze_cycles",
    "coupling_percentage",
    "edge_coupling",
    "total_dependency_count",
]
