"""JSON formatter for Component Insight."""

import json
from typing import Any, Dict

from ..analysis.models import AnalysisResults, DecompositionSummary
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render results as JSON."""

    def __init__(self, highlight_cycles: bool = True):
        self.highlight_cycles = highlight_cycles

    def render(self, results: AnalysisResults) -> None:
        print(self.format(results))

    def format(self, results: AnalysisResults) -> str:
        data = {
            "file_count": results.file_count,
            "raw_dependency_count": results.raw_dependency_count,
            "decompositions": [self._summary(s) for s in results.summaries],
            "failures": [
                {
                    "name": f.name,
                    "error": f.error_type,
                    "message": f.message,
                    "details": dict(f.details),
                }
                for f in results.failures
            ],
        }
        return json.dumps(data, indent=2)

    def _summary(self, summary: DecompositionSummary) -> Dict[str, Any]:
        decomposition = summary.decomposition
        return {
            "name": summary.name,
            "mode": decomposition.mode.value,
            "folder_depth": decomposition.folder_depth,
            "orientation": decomposition.orientation.value,
            "components": [
                {"name": c.name, "file_count": c.file_count, "lines_of_code": c.lines_of_code}
                for c in decomposition.components
            ],
            "edge_count": summary.edge_count,
            "dependency_count": summary.dependency_count,
            "cycles": {
                "places": summary.cycles.places,
                "links": summary.cycles.links,
                "file_dependencies": summary.cycles.cyclic_dependency_count,
                "pairs": [list(pair) for pair in summary.cycles.pairs],
            },
            "dependencies": [
                {
                    "from": edge.dependency.from_component,
                    "to": edge.dependency.to_component,
                    "count": edge.dependency.count,
                    "loc_from": edge.dependency.loc_from,
                    "coupling_percentage": (
                        round(edge.coupling_percentage, 2)
                        if edge.coupling_percentage is not None
                        else None
                    ),
                    "paths_from": list(edge.dependency.paths_from),
                }
                for edge in summary.edges
            ],
            "warnings": [
                {"message": e.message, "path": e.path, "filtering": list(e.filtering)}
                for e in summary.errors
            ],
            "graphviz": summary.graph.to_dot(
                name=summary.name, highlight_cycles=self.highlight_cycles
            ),
        }
