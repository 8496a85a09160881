"""Configuration and input exceptions: settings, decomposition definitions, scan files."""

from typing import Any

from .base import ComponentInsightError


class ConfigurationError(ComponentInsightError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidInputError(ConfigurationError):
    """Raised when a scan input document cannot be used."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Invalid analysis input: {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason
