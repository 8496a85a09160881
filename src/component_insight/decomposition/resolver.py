"""Component assignment for logical decompositions.

Two strategies:
1. Folder depth: a file belongs to the folder at the configured depth
   relative to the source root (``src/a/x.py`` at depth 1 -> ``src``).
   Files in shallower folders use their full folder path; files directly
   in the root are unclassified.
2. Explicit: each named component selects files with path filters. A file
   selected by several components is assigned to the first one in
   declaration order and reported as a DecompositionAmbiguityError.

Files no rule selects go to the reserved Unclassified component, so the
resulting assignment is total. A folder or declared component carrying the
unclassified name is rejected.
"""

from collections import defaultdict
from pathlib import PurePosixPath
from typing import Dict, Iterable, List

from ..exceptions import DecompositionAmbiguityError, InvalidConfigError
from ..logging_config import get_logger
from .models import (
    UNCLASSIFIED,
    AssignmentMode,
    Component,
    DecompositionDefinition,
    LogicalDecomposition,
    SourceFile,
)

logger = get_logger(__name__)


def folder_component_name(path: str, depth: int) -> str:
    """Return the folder-based component of a path, or "" for root files."""
    parts = PurePosixPath(path).parts[:-1]
    if not parts:
        return ""
    return "/".join(parts[:depth])


def resolve_decomposition(
    definition: DecompositionDefinition,
    files: Iterable[SourceFile],
    unclassified_name: str = UNCLASSIFIED,
) -> LogicalDecomposition:
    """Assign every file to exactly one component.

    Args:
        definition: Configured decomposition strategy
        files: Scanned files with their lines of code
        unclassified_name: Name of the component for unselected files

    Returns:
        LogicalDecomposition with components in a stable order (named
        components first, the unclassified component last) and the
        ambiguity errors found along the way

    Raises:
        InvalidConfigError: If a folder or declared component is named like
            the unclassified component
    """
    files = list(files)
    errors: List[DecompositionAmbiguityError] = []
    assigned: Dict[str, List[SourceFile]] = defaultdict(list)

    if definition.mode == AssignmentMode.FOLDER_DEPTH:
        for source_file in files:
            name = folder_component_name(source_file.path, definition.folder_depth)
            if name == unclassified_name:
                _reject_reserved_name(
                    definition, unclassified_name, f"folder of {source_file.path}"
                )
            assigned[name or unclassified_name].append(source_file)
        ordered_names = sorted(n for n in assigned if n != unclassified_name)
    else:
        if unclassified_name in (c.name for c in definition.components):
            _reject_reserved_name(definition, unclassified_name, "declared component")
        for source_file in files:
            matches = [c for c in definition.components if c.selects(source_file.path)]
            if not matches:
                assigned[unclassified_name].append(source_file)
                continue
            if len(matches) > 1:
                errors.append(
                    DecompositionAmbiguityError(
                        source_file.path,
                        [c.name for c in matches],
                        [c.filtering for c in matches],
                    )
                )
            assigned[matches[0].name].append(source_file)
        ordered_names = [c.name for c in definition.components]

    if assigned.get(unclassified_name):
        ordered_names.append(unclassified_name)

    components = tuple(
        Component(
            name=name,
            files=tuple(f.path for f in assigned.get(name, [])),
            lines_of_code=sum(f.lines_of_code for f in assigned.get(name, [])),
        )
        for name in ordered_names
    )

    if errors:
        logger.warning(
            f"Decomposition '{definition.name}': "
            f"{len(errors)} file(s) match more than one component"
        )
    logger.debug(
        f"Resolved decomposition '{definition.name}' ({definition.mode.value}): "
        f"{len(components)} components, {len(files)} files"
    )

    return LogicalDecomposition(
        name=definition.name,
        mode=definition.mode,
        components=components,
        folder_depth=definition.folder_depth,
        orientation=definition.orientation,
        errors=tuple(errors),
    )


def _reject_reserved_name(
    definition: DecompositionDefinition, unclassified_name: str, owner: str
) -> None:
    """Raise for a real component named like the unclassified one."""
    raise InvalidConfigError(
        "unclassified_name",
        unclassified_name,
        f"collides with a {owner} in decomposition '{definition.name}'",
    )
