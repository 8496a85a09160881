"""Output formatters for analysis results."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter
from .text import NO_DEPENDENCIES, describe_decomposition, describe_dependencies

__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "RichFormatter",
    "NO_DEPENDENCIES",
    "describe_decomposition",
    "describe_dependencies",
]
