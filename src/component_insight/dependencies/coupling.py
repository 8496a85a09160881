"""Coupling ratio: share of a component's code behind one outgoing edge."""

from typing import Optional

from ..decomposition.models import Component, LogicalDecomposition
from ..exceptions import UnresolvedComponentError
from ..logging_config import get_logger
from .models import ComponentDependency

logger = get_logger(__name__)


def coupling_percentage(dependency: ComponentDependency, component: Component) -> Optional[float]:
    """Compute 100 * loc_from / component LOC.

    Not clamped: when per-file LOC and component totals disagree the value
    can exceed 100 and is reported as is.

    Returns:
        Percentage, or None if the component has no lines of code
    """
    if component.lines_of_code <= 0:
        return None
    return 100.0 * dependency.loc_from / component.lines_of_code


def edge_coupling(
    dependency: ComponentDependency, decomposition: LogicalDecomposition
) -> Optional[float]:
    """Coupling percentage of an edge, or None if its component is unknown."""
    try:
        component = decomposition.require_component(dependency.from_component)
    except UnresolvedComponentError as e:
        logger.warning(f"Skipping coupling percentage: {e}")
        return None
    return coupling_percentage(dependency, component)
