"""Scan input: files with lines of code and raw file dependencies.

The scanner that produces this data is external. Its output is read from a
JSON document:

    {
      "files": [{"path": "src/a/x.py", "lines_of_code": 120}],
      "dependencies": [{"from": "src/a/x.py", "to": "src/b/y.py"}]
    }

Dependencies may also be written as ``["src/a/x.py", "src/b/y.py"]``.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Tuple

from .decomposition.models import SourceFile
from .dependencies.models import FileDependency
from .exceptions import InvalidInputError
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnalysisInput:
    """Immutable snapshot of one scan."""

    files: Tuple[SourceFile, ...] = ()
    dependencies: Tuple[FileDependency, ...] = ()

    @property
    def file_lines(self) -> dict[str, int]:
        return {f.path: f.lines_of_code for f in self.files}


def load_analysis_input(path: Path) -> AnalysisInput:
    """Read a scan JSON document.

    Raises:
        InvalidInputError: If the file is unreadable or malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise InvalidInputError(str(path), f"cannot read file: {e}")
    except json.JSONDecodeError as e:
        raise InvalidInputError(str(path), f"invalid JSON: {e}")

    if not isinstance(document, dict):
        raise InvalidInputError(str(path), "expected a JSON object")

    analysis_input = AnalysisInput(
        files=coerce_files(document.get("files", []), source=str(path)),
        dependencies=coerce_dependencies(document.get("dependencies", []), source=str(path)),
    )
    logger.debug(
        f"Loaded {len(analysis_input.files)} files and "
        f"{len(analysis_input.dependencies)} dependencies from {path}"
    )
    return analysis_input


def coerce_files(items: Iterable[Any], source: str = "<input>") -> Tuple[SourceFile, ...]:
    """Accept SourceFile objects or ``{"path", "lines_of_code"}`` mappings."""
    files = []
    seen = set()
    for item in items:
        if isinstance(item, SourceFile):
            source_file = item
        elif isinstance(item, dict) and isinstance(item.get("path"), str):
            try:
                lines = int(item.get("lines_of_code", 0))
            except (TypeError, ValueError):
                raise InvalidInputError(source, f"invalid lines_of_code for {item['path']}")
            if lines < 0:
                raise InvalidInputError(source, f"negative lines_of_code for {item['path']}")
            source_file = SourceFile(path=item["path"], lines_of_code=lines)
        else:
            raise InvalidInputError(source, f"invalid file entry: {item!r}")

        if source_file.path in seen:
            raise InvalidInputError(source, f"duplicate file entry: {source_file.path}")
        seen.add(source_file.path)
        files.append(source_file)
    return tuple(files)


def coerce_dependencies(
    items: Iterable[Any], source: str = "<input>"
) -> Tuple[FileDependency, ...]:
    """Accept ``{"from", "to"}`` mappings or two-element sequences."""
    dependencies = []
    for item in items:
        if isinstance(item, dict):
            pair = (item.get("from"), item.get("to"))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            pair = tuple(item)
        else:
            raise InvalidInputError(source, f"invalid dependency entry: {item!r}")
        if not all(isinstance(p, str) and p for p in pair):
            raise InvalidInputError(source, f"invalid dependency entry: {item!r}")
        dependencies.append(FileDependency(*pair))
    return tuple(dependencies)
