"""Analysis result models.

Everything here is produced once per run and never mutated; formatters
read these structures to render reports.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..decomposition.models import LogicalDecomposition
from ..dependencies.cycles import CycleSummary
from ..dependencies.models import ComponentDependency
from ..exceptions import ComponentInsightError, DecompositionAmbiguityError
from ..visualization.graph import GraphDescription


@dataclass(frozen=True)
class DependencyEdgeReport:
    """A component dependency with its coupling percentage, when computable."""

    dependency: ComponentDependency
    coupling_percentage: Optional[float] = None


@dataclass(frozen=True)
class DecompositionSummary:
    """Dependency summary of one logical decomposition."""

    decomposition: LogicalDecomposition
    edges: tuple[DependencyEdgeReport, ...] = ()  # ranked by count, descending
    dependency_count: int = 0
    cycles: CycleSummary = field(default_factory=CycleSummary)
    graph: GraphDescription = field(default_factory=GraphDescription)

    @property
    def name(self) -> str:
        return self.decomposition.name

    @property
    def component_count(self) -> int:
        return len(self.decomposition.components)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def errors(self) -> tuple[DecompositionAmbiguityError, ...]:
        return self.decomposition.errors

    @property
    def dependencies(self) -> list[ComponentDependency]:
        return [edge.dependency for edge in self.edges]


@dataclass(frozen=True)
class DecompositionFailure:
    """A decomposition that could not be analyzed."""

    name: str
    message: str
    error_type: str = "ComponentInsightError"
    details: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_error(cls, name: str, error: ComponentInsightError) -> "DecompositionFailure":
        return cls(
            name=name,
            message=str(error),
            error_type=error.kind,
            details=tuple(error.details.items()),
        )


@dataclass(frozen=True)
class AnalysisResults:
    """Summaries of every configured decomposition, in configuration order."""

    summaries: tuple[DecompositionSummary, ...] = ()
    failures: tuple[DecompositionFailure, ...] = ()
    file_count: int = 0
    raw_dependency_count: int = 0

    def summary(self, name: str) -> Optional[DecompositionSummary]:
        for s in self.summaries:
            if s.name == name:
                return s
        return None
