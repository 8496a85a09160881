"""Plain-text descriptions shared by the formatters."""

from typing import List, Optional

from ..analysis.models import DecompositionSummary, DependencyEdgeReport
from ..decomposition.models import AssignmentMode
from ..exceptions import DecompositionAmbiguityError

NO_DEPENDENCIES = "No component dependencies found."


def plural(count: int, word: str, plural_form: Optional[str] = None) -> str:
    if count == 1:
        return f"{count} {word}"
    return f"{count} {plural_form or word + 's'}"


def format_percentage(value: Optional[float]) -> str:
    if value is None:
        return "-"
    if abs(value) < 1.0:
        return f"{value:.2f}"
    if abs(value) < 10.0:
        return f"{value:.1f}"
    return f"{value:.0f}"


def describe_decomposition(summary: DecompositionSummary) -> str:
    decomposition = summary.decomposition
    if decomposition.mode == AssignmentMode.FOLDER_DEPTH:
        return (
            f"The decomposition is based on folder structure at level "
            f"{decomposition.folder_depth} (relative to the source code root)."
        )
    return (
        f'The "{decomposition.name}" logical decomposition is based on '
        f"{plural(summary.component_count, 'explicitly defined component')}."
    )


def describe_dependencies(summary: DecompositionSummary) -> List[str]:
    """Bullet lines summarizing the component dependencies."""
    if not summary.edges:
        return [NO_DEPENDENCIES]

    links = summary.edge_count
    lines = [
        f"Analyzed system has {plural(links, 'link')} (arrows) between components.",
        "The number on the arrow represents the number of files from referring "
        "component that depend on files in referred component.",
        f"These {plural(links, 'link')} contain "
        f"{plural(summary.dependency_count, 'dependency', 'dependencies')}.",
    ]

    cycles = summary.cycles
    if cycles.places > 0:
        places = "is 1 place" if cycles.places == 1 else f"are {cycles.places} places"
        file_dependencies = plural(
            cycles.cyclic_dependency_count, "file dependency", "file dependencies"
        )
        lines.append(
            f"There {places} ({cycles.links} links) with cyclic dependencies "
            f"({file_dependencies})."
        )
    return lines


def describe_edge_files(edge: DependencyEdgeReport) -> str:
    """E.g. "2 files (120 LOC, 35%)"."""
    dep = edge.dependency
    files = plural(dep.count, "file")
    if edge.coupling_percentage is None:
        return f"{files} ({dep.loc_from} LOC)"
    return f"{files} ({dep.loc_from} LOC, {format_percentage(edge.coupling_percentage)}%)"


def describe_error(summary: DecompositionSummary, error: DecompositionAmbiguityError) -> str:
    return f"{summary.name}: {error.message} {error.filtering_description}"
