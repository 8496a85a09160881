"""Logical decomposition models.

A logical decomposition partitions every source file into exactly one named
component. Files no component selects land in the reserved "Unclassified"
component. Definitions (what the user configured) are kept apart from the
resolved decomposition (which files ended up where).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..exceptions import (
    DecompositionAmbiguityError,
    InvalidConfigError,
    UnresolvedComponentError,
)

UNCLASSIFIED = "Unclassified"


class RenderingOrientation(Enum):
    """Preferred direction of a decomposition's dependency graph.

    Values are Graphviz ``rankdir`` codes.
    """

    TOP_TO_BOTTOM = "TB"
    BOTTOM_TO_TOP = "BT"
    LEFT_TO_RIGHT = "LR"
    RIGHT_TO_LEFT = "RL"

    @classmethod
    def parse(cls, value: object) -> RenderingOrientation:
        """Accept an orientation, its rankdir code or its name (any case)."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().upper()
        for orientation in cls:
            if text in (orientation.value, orientation.name):
                return orientation
        raise InvalidConfigError(
            "orientation",
            value,
            f"expected one of {', '.join(o.value for o in cls)}",
        )


class AssignmentMode(Enum):
    """How files are mapped to components."""

    FOLDER_DEPTH = "folder_depth"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class SourceFile:
    """A scanned source file with its size."""

    path: str
    lines_of_code: int = 0


@dataclass(frozen=True)
class ComponentFilter:
    """Path-based selection rule of an explicitly defined component.

    ``path_pattern`` is a regular expression that must match the whole path.
    """

    path_pattern: str
    exclude: bool = False
    note: str = ""

    def __post_init__(self) -> None:
        try:
            re.compile(self.path_pattern)
        except re.error as e:
            raise InvalidConfigError("path_pattern", self.path_pattern, str(e))

    def matches(self, path: str) -> bool:
        return re.fullmatch(self.path_pattern, path) is not None

    @property
    def description(self) -> str:
        kind = "exclude" if self.exclude else "include"
        text = f'{kind} path like "{self.path_pattern}"'
        if self.note:
            text += f" ({self.note})"
        return text


@dataclass(frozen=True)
class ComponentDefinition:
    """A named component selected by path filters."""

    name: str
    filters: tuple[ComponentFilter, ...] = ()

    def selects(self, path: str) -> bool:
        """True if an include filter matches and no exclude filter does."""
        included = False
        for f in self.filters:
            if not f.matches(path):
                continue
            if f.exclude:
                return False
            included = True
        return included

    @property
    def filtering(self) -> str:
        """Human-readable summary of this component's filters."""
        rules = ", ".join(f.description for f in self.filters) or "no filters"
        return f"{self.name}: {rules}"


@dataclass(frozen=True)
class DecompositionDefinition:
    """Configured strategy for one logical decomposition.

    Exactly one of ``folder_depth`` (> 0) or ``components`` must be set.
    """

    name: str
    folder_depth: int = 0
    components: tuple[ComponentDefinition, ...] = ()
    orientation: RenderingOrientation = RenderingOrientation.TOP_TO_BOTTOM

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidConfigError("decomposition.name", self.name, "name must not be empty")
        if self.folder_depth < 0:
            raise InvalidConfigError(
                f"{self.name}.folder_depth", self.folder_depth, "must be non-negative"
            )
        if self.folder_depth > 0 and self.components:
            raise InvalidConfigError(
                self.name, self.folder_depth, "use either folder_depth or explicit components"
            )
        if self.folder_depth == 0 and not self.components:
            raise InvalidConfigError(
                self.name, self.folder_depth, "needs folder_depth > 0 or explicit components"
            )
        names = [c.name for c in self.components]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise InvalidConfigError(
                f"{self.name}.components", ", ".join(duplicates), "component names must be unique"
            )

    @property
    def mode(self) -> AssignmentMode:
        if self.folder_depth > 0:
            return AssignmentMode.FOLDER_DEPTH
        return AssignmentMode.EXPLICIT


@dataclass(frozen=True)
class Component:
    """A named group of files within one decomposition."""

    name: str
    files: tuple[str, ...] = ()
    lines_of_code: int = 0

    @property
    def file_count(self) -> int:
        return len(self.files)


@dataclass(frozen=True)
class LogicalDecomposition:
    """A resolved partition of the codebase into components."""

    name: str
    mode: AssignmentMode
    components: tuple[Component, ...] = ()
    folder_depth: int = 0
    orientation: RenderingOrientation = RenderingOrientation.TOP_TO_BOTTOM
    errors: tuple[DecompositionAmbiguityError, ...] = field(default=(), compare=False)

    @property
    def component_names(self) -> list[str]:
        return [c.name for c in self.components]

    def component_by_name(self, name: str) -> Optional[Component]:
        for component in self.components:
            if component.name == name:
                return component
        return None

    def require_component(self, name: str) -> Component:
        """Like component_by_name, but raises UnresolvedComponentError."""
        component = self.component_by_name(name)
        if component is None:
            raise UnresolvedComponentError(name, self.name)
        return component

    def assignment(self) -> dict[str, str]:
        """Map each file path to the name of its component."""
        return {path: c.name for c in self.components for path in c.files}
