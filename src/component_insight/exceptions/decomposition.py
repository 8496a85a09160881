"""Decomposition exceptions: ambiguous file assignment, unknown components.

Neither of these stops an analysis run. Ambiguity errors are collected on the
decomposition and shown as warnings; unresolved components only cancel the
computation that needed them.
"""

from typing import Sequence

from .base import ComponentInsightError


class DecompositionError(ComponentInsightError):
    """Base class for logical decomposition errors."""

    pass


class DecompositionAmbiguityError(DecompositionError):
    """A file is selected by the filters of two or more components."""

    def __init__(self, path: str, components: Sequence[str], filtering: Sequence[str]):
        super().__init__(
            f"File {path} matches {len(components)} components: {', '.join(components)}",
            details={"path": path},
        )
        self.path = path
        self.components = tuple(components)
        self.filtering = tuple(filtering)

    @property
    def filtering_description(self) -> str:
        """All conflicting filters on one line."""
        return "; ".join(self.filtering)


class UnresolvedComponentError(DecompositionError):
    """A component name has no matching Component record."""

    def __init__(self, name: str, decomposition: str):
        super().__init__(
            f"Component '{name}' not found in decomposition '{decomposition}'",
            details={"component": name, "decomposition": decomposition},
        )
        self.name = name
        self.decomposition = decomposition
