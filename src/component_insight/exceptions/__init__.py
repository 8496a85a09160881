"""Exception hierarchy for Component Insight."""

from .base import ComponentInsightError
from .config import ConfigurationError, InvalidConfigError, InvalidInputError
from .decomposition import (
    DecompositionAmbiguityError,
    DecompositionError,
    UnresolvedComponentError,
)

__all__ = [
    "ComponentInsightError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidInputError",
    "DecompositionError",
    "DecompositionAmbiguityError",
    "UnresolvedComponentError",
]
