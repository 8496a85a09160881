"""Contract file-level dependency edges into component-level edges."""

from typing import Dict, Iterable, List, Mapping, Set, Tuple

from ..decomposition.models import UNCLASSIFIED
from ..logging_config import get_logger
from .models import ComponentDependency, FileDependency

logger = get_logger(__name__)


def aggregate_component_dependencies(
    edges: Iterable[Tuple[str, str]],
    assignment: Mapping[str, str],
    file_lines: Mapping[str, int],
    unclassified_name: str = UNCLASSIFIED,
) -> List[ComponentDependency]:
    """Build one ComponentDependency per ordered pair of distinct components.

    Edges whose two files sit in the same component are dropped. A file
    missing from ``assignment`` is treated as part of the unclassified
    component. The result follows the first-seen order of each component
    pair in ``edges``, and ``paths_from`` follows the first-seen order of
    each contributing file, so identical inputs give identical output.

    Args:
        edges: Raw (source, target) file dependencies, duplicates allowed
        assignment: File path -> component name
        file_lines: File path -> lines of code (missing files count 0)
        unclassified_name: Component used for unassigned files

    Returns:
        Component dependencies in aggregation order
    """
    # dict keys keep insertion order, used here as ordered sets
    contributors: Dict[Tuple[str, str], Dict[str, None]] = {}
    unassigned: Set[str] = set()

    for edge in edges:
        source, target = FileDependency(*edge)
        from_component = _component_of(source, assignment, unclassified_name, unassigned)
        to_component = _component_of(target, assignment, unclassified_name, unassigned)
        if from_component == to_component:
            continue
        contributors.setdefault((from_component, to_component), {})[source] = None

    if unassigned:
        logger.debug(f"{len(unassigned)} file(s) without component treated as {unclassified_name}")

    dependencies = []
    for (from_component, to_component), paths in contributors.items():
        paths_from = tuple(paths)
        dependencies.append(
            ComponentDependency(
                from_component=from_component,
                to_component=to_component,
                count=len(paths_from),
                paths_from=paths_from,
                loc_from=sum(file_lines.get(path, 0) for path in paths_from),
            )
        )
    return dependencies


def total_dependency_count(dependencies: Iterable[ComponentDependency]) -> int:
    """Number of file-level dependencies behind a set of component edges."""
    return sum(d.count for d in dependencies)


def _component_of(
    path: str,
    assignment: Mapping[str, str],
    unclassified_name: str,
    unassigned: Set[str],
) -> str:
    component = assignment.get(path)
    if component is None:
        unassigned.add(path)
        return unclassified_name
    return component
