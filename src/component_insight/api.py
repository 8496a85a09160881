"""Public API for Component Insight.

Example:
    >>> from component_insight import analyze
    >>>
    >>> results = analyze(
    ...     files=[{"path": "a/x.py", "lines_of_code": 10}, {"path": "b/y.py", "lines_of_code": 5}],
    ...     dependencies=[("a/x.py", "b/y.py")],
    ... )
    >>> results.summaries[0].edges[0].dependency.count
    1
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Optional

from .analysis.engine import AnalysisEngine
from .analysis.models import AnalysisResults
from .config import AnalysisConfig, load_config
from .exceptions import ComponentInsightError
from .inputs import AnalysisInput, coerce_dependencies, coerce_files
from .logging_config import get_logger

logger = get_logger(__name__)


def analyze(
    files: Iterable[Any],
    dependencies: Iterable[Any],
    config: Optional[AnalysisConfig] = None,
    **overrides: Any,
) -> AnalysisResults:
    """Analyze component dependencies of an already scanned codebase.

    Args:
        files: SourceFile objects or ``{"path", "lines_of_code"}`` mappings
        dependencies: FileDependency objects, (source, target) pairs or
            ``{"from", "to"}`` mappings
        config: Explicit configuration; when omitted it is loaded with
            load_config(**overrides)
        **overrides: Configuration overrides (e.g., unclassified_name="Other"),
            applied on top of ``config`` when one is given

    Returns:
        AnalysisResults with one summary per decomposition

    Raises:
        ComponentInsightError: If the configuration or input is invalid
    """
    if config is None:
        config = load_config(**overrides)
    elif overrides:
        try:
            config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
        except TypeError as e:
            raise ComponentInsightError(f"Invalid configuration override: {e}")

    analysis_input = AnalysisInput(
        files=coerce_files(files),
        dependencies=coerce_dependencies(dependencies),
    )
    logger.info(
        f"Starting analysis of {len(analysis_input.files)} files, "
        f"{len(analysis_input.dependencies)} dependencies"
    )
    return AnalysisEngine(analysis_input, config).run()
