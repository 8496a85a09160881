"""Graph description of component dependencies.

Produces the nodes and weighted directed edges of a decomposition's
dependency graph, and renders them as Graphviz DOT text. Drawing the graph
is left to Graphviz or any other consumer of the description.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..decomposition.models import RenderingOrientation
from ..dependencies.cycles import CycleSummary
from ..dependencies.models import ComponentDependency

CYCLE_COLOR = "crimson"


@dataclass(frozen=True)
class GraphEdge:
    """Directed edge weighted by the number of contributing files."""

    source: str
    target: str
    weight: int
    cyclic: bool = False


@dataclass(frozen=True)
class GraphDescription:
    """Nodes and edges of one decomposition's dependency graph."""

    nodes: tuple[str, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    orientation: RenderingOrientation = RenderingOrientation.TOP_TO_BOTTOM

    def to_dot(self, name: str = "components", highlight_cycles: bool = True) -> str:
        """Render the description as a Graphviz digraph."""
        lines = [f"digraph {_quote(name)} {{"]
        lines.append(f"  rankdir={self.orientation.value};")
        lines.append('  node [shape=box, style="rounded,filled", fillcolor="#f5f5f5"];')
        lines.append("  edge [fontsize=10];")
        lines.append("")

        for node in self.nodes:
            lines.append(f"  {_quote(node)};")

        if self.edges:
            lines.append("")
        for edge in self.edges:
            attrs = [f'label="{edge.weight}"', f"weight={edge.weight}"]
            if highlight_cycles and edge.cyclic:
                attrs.append(f"color={CYCLE_COLOR}")
                attrs.append(f"fontcolor={CYCLE_COLOR}")
            lines.append(f"  {_quote(edge.source)} -> {_quote(edge.target)} [{', '.join(attrs)}];")

        lines.append("}")
        return "\n".join(lines) + "\n"


def build_graph_description(
    component_names: Iterable[str],
    dependencies: Iterable[ComponentDependency],
    orientation: RenderingOrientation = RenderingOrientation.TOP_TO_BOTTOM,
    cycles: Optional[CycleSummary] = None,
) -> GraphDescription:
    """Describe components as nodes and dependencies as weighted edges.

    Edge endpoints missing from ``component_names`` (for example files that
    fell back to the unclassified component) are appended as extra nodes.
    """
    nodes: List[str] = list(dict.fromkeys(component_names))
    known = set(nodes)
    edges = []
    for dep in dependencies:
        for endpoint in dep.key:
            if endpoint not in known:
                known.add(endpoint)
                nodes.append(endpoint)
        edges.append(
            GraphEdge(
                source=dep.from_component,
                target=dep.to_component,
                weight=dep.count,
                cyclic=cycles.is_cyclic(dep.from_component, dep.to_component) if cycles else False,
            )
        )
    return GraphDescription(nodes=tuple(nodes), edges=tuple(edges), orientation=orientation)


def _quote(identifier: str) -> str:
    escaped = identifier.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
