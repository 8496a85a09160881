"""Decomposition-wide dependency summary."""

from typing import Iterable, List, Mapping, Tuple

from ..decomposition.models import UNCLASSIFIED, LogicalDecomposition
from ..dependencies.aggregator import aggregate_component_dependencies, total_dependency_count
from ..dependencies.coupling import edge_coupling
from ..dependencies.cycles import analyze_cycles
from ..dependencies.models import ComponentDependency
from ..logging_config import get_logger
from ..visualization.graph import build_graph_description
from .models import DecompositionSummary, DependencyEdgeReport

logger = get_logger(__name__)


def rank_dependencies(dependencies: Iterable[ComponentDependency]) -> List[ComponentDependency]:
    """Order dependencies by count, highest first.

    The sort is stable: records with equal counts keep their aggregation
    order.
    """
    return sorted(dependencies, key=lambda d: d.count, reverse=True)


def summarize_decomposition(
    decomposition: LogicalDecomposition,
    edges: Iterable[Tuple[str, str]],
    file_lines: Mapping[str, int],
    unclassified_name: str = UNCLASSIFIED,
) -> DecompositionSummary:
    """Aggregate, rank and analyze the dependencies of one decomposition.

    Args:
        decomposition: Resolved decomposition
        edges: Raw (source, target) file dependencies
        file_lines: File path -> lines of code
        unclassified_name: Component used for unassigned files

    Returns:
        DecompositionSummary with ranked edges, cycle counts and graph
    """
    dependencies = aggregate_component_dependencies(
        edges,
        decomposition.assignment(),
        file_lines,
        unclassified_name=unclassified_name,
    )
    cycles = analyze_cycles(dependencies)
    ranked = rank_dependencies(dependencies)

    reports = tuple(
        DependencyEdgeReport(dependency=dep, coupling_percentage=edge_coupling(dep, decomposition))
        for dep in ranked
    )
    graph = build_graph_description(
        decomposition.component_names,
        ranked,
        orientation=decomposition.orientation,
        cycles=cycles,
    )

    logger.debug(
        f"Decomposition '{decomposition.name}': {len(reports)} component dependencies, "
        f"{cycles.cyclic_pair_count} cyclic pairs"
    )

    return DecompositionSummary(
        decomposition=decomposition,
        edges=reports,
        dependency_count=total_dependency_count(dependencies),
        cycles=cycles,
        graph=graph,
    )
