"""Diagram container, chainable builder, formula derivation and graph export."""

from tensordiagram.diagram.diagram import (
    Contraction,
    DiagramConfig,
    Line,
    TensorDiagram,
)
from tensordiagram.diagram.graph import connected_components, diagram_to_nx_graph

__all__ = [
    "TensorDiagram",
    "DiagramConfig",
    "Contraction",
    "Line",
    "diagram_to_nx_graph",
    "connected_components",
]
