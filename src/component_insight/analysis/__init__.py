"""Decomposition summaries and the multi-decomposition engine."""

from .engine import AnalysisEngine
from .models import (
    AnalysisResults,
    DecompositionFailure,
    DecompositionSummary,
    DependencyEdgeReport,
)
from .summary import rank_dependencies, summarize_decomposition

__all__ = [
    "AnalysisEngine",
    "AnalysisResults",
    "DecompositionFailure",
    "DecompositionSummary",
    "DependencyEdgeReport",
    "rank_dependencies",
    "summarize_decomposition",
]
