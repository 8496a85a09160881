"""Visualization layer: graph descriptions of component dependencies."""

from .graph import GraphDescription, GraphEdge, build_graph_description

__all__ = [
    "GraphDescription",
    "GraphEdge",
    "build_graph_description",
]
