"""Root of the Component Insight exception hierarchy.

Every error carries a readable message plus structured details (offending
key, path, component). Details are rendered after the message and exported
as a plain mapping for machine-readable reports.
"""

from typing import Any, Dict, Mapping, Optional


class ComponentInsightError(Exception):
    """Base exception for all Component Insight errors."""

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, str] = {key: str(value) for key, value in (details or {}).items()}

    @property
    def kind(self) -> str:
        """Exception class name, e.g. "InvalidConfigError"."""
        return type(self).__name__

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({rendered})"
