"""Cycle analysis over component dependencies.

A cyclic pair is an unordered pair of components {A, B} with edges in both
directions. Each pair is counted once, from the edge whose "from" component
sorts first.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .models import ComponentDependency


@dataclass(frozen=True)
class CycleSummary:
    """Cyclic pairs of one decomposition."""

    cyclic_pair_count: int = 0
    cyclic_dependency_count: int = 0  # sum of count over both directions of every pair
    pairs: tuple[tuple[str, str], ...] = ()

    @property
    def places(self) -> int:
        return self.cyclic_pair_count

    @property
    def links(self) -> int:
        # both directions of a pair are listed as separate links
        return self.cyclic_pair_count * 2

    def is_cyclic(self, from_component: str, to_component: str) -> bool:
        """True if the edge from_component -> to_component is part of a cyclic pair."""
        pair = tuple(sorted((from_component, to_component)))
        return pair in self.pairs


def analyze_cycles(dependencies: Iterable[ComponentDependency]) -> CycleSummary:
    """Count cyclic component pairs and the file dependencies inside them."""
    dependencies = list(dependencies)
    index: Dict[Tuple[str, str], ComponentDependency] = {d.key: d for d in dependencies}

    pairs: List[Tuple[str, str]] = []
    dependency_count = 0
    for dep in dependencies:
        if dep.from_component >= dep.to_component:
            continue
        reverse = index.get((dep.to_component, dep.from_component))
        if reverse is None:
            continue
        pairs.append((dep.from_component, dep.to_component))
        dependency_count += dep.count + reverse.count

    return CycleSummary(
        cyclic_pair_count=len(pairs),
        cyclic_dependency_count=dependency_count,
        pairs=tuple(pairs),
    )
