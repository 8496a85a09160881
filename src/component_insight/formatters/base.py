"""Base formatter interface for Component Insight output rendering."""

from abc import ABC, abstractmethod

from ..analysis.models import AnalysisResults


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, results: AnalysisResults) -> None:
        """Render results to stdout."""

    @abstractmethod
    def format(self, results: AnalysisResults) -> str:
        """Return formatted string representation of results."""
