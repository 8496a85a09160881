"""Configuration loading and management for Component Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.component-insight.toml)
    3. Project config (./component-insight.toml)
    4. Explicit config file
    5. Environment variables (COMPONENT_INSIGHT_* prefix)
    6. Keyword overrides (typically CLI flags)

Logical decompositions are declared as ``[[decomposition]]`` tables:

    [[decomposition]]
    name = "primary"
    folder_depth = 1

    [[decomposition]]
    name = "layers"
    orientation = "LR"
      [[decomposition.component]]
      name = "api"
      filters = [{ path_pattern = ".*/api/.*" }]

Example:
    >>> config = load_config(unclassified_name="Other")
    >>> config.unclassified_name
    'Other'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional

from .decomposition.models import (
    UNCLASSIFIED,
    ComponentDefinition,
    ComponentFilter,
    DecompositionDefinition,
    RenderingOrientation,
)
from .exceptions import ComponentInsightError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "COMPONENT_INSIGHT_"
CONFIG_FILE_NAME = "component-insight.toml"

# Folder depth used when no decomposition is configured
DEFAULT_FOLDER_DEPTH = 1


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for an analysis run.

    Attributes:
        unclassified_name: Component receiving files no rule selects
        default_orientation: Graph orientation for decompositions without one
        highlight_cycles: Colour edges of cyclic pairs in graph descriptions
        verbosity: Logging verbosity level
        decompositions: Logical decompositions to analyze side by side
    """

    unclassified_name: str = UNCLASSIFIED
    default_orientation: RenderingOrientation = RenderingOrientation.TOP_TO_BOTTOM
    highlight_cycles: bool = True
    verbosity: Verbosity = "normal"
    decompositions: tuple[DecompositionDefinition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.unclassified_name, str) or not self.unclassified_name.strip():
            raise InvalidConfigError(
                "unclassified_name", self.unclassified_name, "expected a non-empty string"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )
        # Orientation may arrive as a string from TOML or the environment
        object.__setattr__(
            self, "default_orientation", RenderingOrientation.parse(self.default_orientation)
        )
        if not isinstance(self.highlight_cycles, bool):
            raise InvalidConfigError(
                "highlight_cycles", self.highlight_cycles, "expected true or false"
            )
        if not isinstance(self.decompositions, (list, tuple)) or not all(
            isinstance(d, DecompositionDefinition) for d in self.decompositions
        ):
            raise InvalidConfigError(
                "decompositions",
                self.decompositions,
                "declare decompositions as [[decomposition]] tables",
            )
        object.__setattr__(self, "decompositions", tuple(self.decompositions))
        names = [d.name for d in self.decompositions]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise InvalidConfigError(
                "decomposition", ", ".join(duplicates), "decomposition names must be unique"
            )

    def effective_decompositions(self) -> tuple[DecompositionDefinition, ...]:
        """Configured decompositions, or a folder-depth default."""
        if self.decompositions:
            return self.decompositions
        return (
            DecompositionDefinition(
                name="primary",
                folder_depth=DEFAULT_FOLDER_DEPTH,
                orientation=self.default_orientation,
            ),
        )


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ComponentInsightError: If a config file is missing or invalid
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILE_NAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ComponentInsightError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    default_orientation = RenderingOrientation.parse(
        merged.get("default_orientation", RenderingOrientation.TOP_TO_BOTTOM)
    )
    raw_decompositions = merged.pop("decomposition", None)
    if raw_decompositions is not None:
        merged["decompositions"] = parse_decompositions(raw_decompositions, default_orientation)

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ComponentInsightError(f"Invalid configuration: {e}")


def parse_decompositions(
    raw: Any,
    default_orientation: RenderingOrientation = RenderingOrientation.TOP_TO_BOTTOM,
) -> tuple[DecompositionDefinition, ...]:
    """Build decomposition definitions from ``[[decomposition]]`` tables.

    Raises:
        InvalidConfigError: If a table is malformed or an orientation is unknown
    """
    if not isinstance(raw, list):
        raise InvalidConfigError("decomposition", raw, "expected an array of tables")

    definitions = []
    for index, table in enumerate(raw):
        if not isinstance(table, dict):
            raise InvalidConfigError(f"decomposition[{index}]", table, "expected a table")
        components = tuple(
            _parse_component(table.get("name", index), c) for c in table.get("component", [])
        )
        try:
            folder_depth = int(table.get("folder_depth", 0))
        except (TypeError, ValueError):
            raise InvalidConfigError(
                f"decomposition[{index}].folder_depth",
                table.get("folder_depth"),
                "expected an integer",
            )
        definitions.append(
            DecompositionDefinition(
                name=str(table.get("name", "")),
                folder_depth=folder_depth,
                components=components,
                orientation=RenderingOrientation.parse(
                    table.get("orientation", default_orientation)
                ),
            )
        )
    return tuple(definitions)


def _parse_component(decomposition: Any, table: Any) -> ComponentDefinition:
    if not isinstance(table, dict) or not table.get("name"):
        raise InvalidConfigError(
            f"{decomposition}.component", table, "expected a table with a name"
        )
    filters = []
    for raw_filter in table.get("filters", []):
        if isinstance(raw_filter, str):
            raw_filter = {"path_pattern": raw_filter}
        if not isinstance(raw_filter, dict) or "path_pattern" not in raw_filter:
            raise InvalidConfigError(
                f"{decomposition}.{table['name']}.filters", raw_filter, "expected path_pattern"
            )
        filters.append(
            ComponentFilter(
                path_pattern=str(raw_filter["path_pattern"]),
                exclude=bool(raw_filter.get("exclude", False)),
                note=str(raw_filter.get("note", "")),
            )
        )
    return ComponentDefinition(name=str(table["name"]), filters=tuple(filters))


def _load_env_vars() -> dict[str, Any]:
    """Load scalar settings from COMPONENT_INSIGHT_* environment variables.

    Supported environment variables:
        COMPONENT_INSIGHT_UNCLASSIFIED_NAME: str
        COMPONENT_INSIGHT_DEFAULT_ORIENTATION: TB/BT/LR/RL
        COMPONENT_INSIGHT_HIGHLIGHT_CYCLES: bool (true/false/1/0)
        COMPONENT_INSIGHT_VERBOSITY: quiet/normal/verbose
    """
    result: dict[str, Any] = {}

    for f in fields(AnalysisConfig):
        if f.name == "decompositions":
            continue
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        value = os.environ.get(env_key)
        if value is None:
            continue
        if f.name == "highlight_cycles":
            result[f.name] = _parse_bool(env_key, value)
        else:
            result[f.name] = value

    return result


def _parse_bool(env_key: str, value: str) -> bool:
    lower = value.lower()
    if lower in ("true", "1", "yes", "on"):
        return True
    if lower in ("false", "0", "no", "off"):
        return False
    raise ComponentInsightError(f"Invalid {env_key}: expected true/false, got '{value}'")


def _load_toml_file(path: Path) -> dict:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ComponentInsightError(f"Invalid config file '{path}': {e}")
