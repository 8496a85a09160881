"""
Component Insight - Logical Component Dependency Analysis

Aggregates file-level static dependencies into dependencies between the
logical components of a codebase, finds cyclic component pairs and measures
how much of each component's code takes part in cross-component coupling.
"""

__version__ = "0.1.0"

from .analysis import AnalysisResults, DecompositionSummary
from .api import analyze
from .config import AnalysisConfig, load_config
from .decomposition import SourceFile
from .dependencies import ComponentDependency, FileDependency

__all__ = [
    "analyze",  # Main entry point
    "AnalysisConfig",
    "AnalysisResults",
    "ComponentDependency",
    "DecompositionSummary",
    "FileDependency",
    "SourceFile",
    "load_config",
]
