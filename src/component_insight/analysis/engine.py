"""Multi-decomposition analysis engine.

Each configured decomposition is resolved and summarized on its own. A
decomposition that fails is recorded as a DecompositionFailure and the
remaining ones still run.
"""

from typing import List

from ..config import AnalysisConfig
from ..decomposition.resolver import resolve_decomposition
from ..exceptions import ComponentInsightError
from ..inputs import AnalysisInput
from ..logging_config import get_logger
from .models import AnalysisResults, DecompositionFailure, DecompositionSummary
from .summary import summarize_decomposition

logger = get_logger(__name__)


class AnalysisEngine:
    """Runs every decomposition of a configuration over one scan."""

    def __init__(self, analysis_input: AnalysisInput, config: AnalysisConfig):
        self.analysis_input = analysis_input
        self.config = config

    def run(self) -> AnalysisResults:
        files = self.analysis_input.files
        edges = self.analysis_input.dependencies
        file_lines = self.analysis_input.file_lines

        if not files or not edges:
            logger.info(f"Empty input: {len(files)} files, {len(edges)} dependencies")

        summaries: List[DecompositionSummary] = []
        failures: List[DecompositionFailure] = []

        for definition in self.config.effective_decompositions():
            try:
                decomposition = resolve_decomposition(
                    definition, files, unclassified_name=self.config.unclassified_name
                )
                summaries.append(
                    summarize_decomposition(
                        decomposition,
                        edges,
                        file_lines,
                        unclassified_name=self.config.unclassified_name,
                    )
                )
            except ComponentInsightError as e:
                logger.error(f"Decomposition '{definition.name}' failed: {e}")
                failures.append(DecompositionFailure.from_error(definition.name, e))

        logger.info(
            f"Analysis complete: {len(summaries)} decompositions, {len(failures)} failed"
        )

        return AnalysisResults(
            summaries=tuple(summaries),
            failures=tuple(failures),
            file_count=len(files),
            raw_dependency_count=len(edges),
        )
