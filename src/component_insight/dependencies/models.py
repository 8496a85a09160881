"""Dependency models: raw file edges and aggregated component edges."""

from dataclasses import dataclass
from typing import NamedTuple


class FileDependency(NamedTuple):
    """Raw directed edge: ``source`` depends on ``target``."""

    source: str
    target: str


@dataclass(frozen=True)
class ComponentDependency:
    """Aggregated directed dependency between two distinct components.

    ``count`` is the number of distinct files of the "from" component that
    depend on at least one file of the "to" component. ``paths_from`` lists
    those files in first-seen order and ``loc_from`` sums their lines of
    code, each file counted once.
    """

    from_component: str
    to_component: str
    count: int
    paths_from: tuple[str, ...] = ()
    loc_from: int = 0

    @property
    def key(self) -> tuple[str, str]:
        return (self.from_component, self.to_component)
