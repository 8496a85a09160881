"""Logical decompositions: component definitions and file assignment."""

from .models import (
    UNCLASSIFIED,
    AssignmentMode,
    Component,
    ComponentDefinition,
    ComponentFilter,
    DecompositionDefinition,
    LogicalDecomposition,
    RenderingOrientation,
    SourceFile,
)
from .resolver import resolve_decomposition

__all__ = [
    "UNCLASSIFIED",
    "AssignmentMode",
    "Component",
    "ComponentDefinition",
    "ComponentFilter",
    "DecompositionDefinition",
    "LogicalDecomposition",
    "RenderingOrientation",
    "SourceFile",
    "resolve_decomposition",
]
