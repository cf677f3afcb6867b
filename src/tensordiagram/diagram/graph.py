"""NetworkX view of a diagram for layout and rendering collaborators.

The graph is a ``networkx.MultiGraph`` where:
- Nodes are tensor positions and carry the glyph attributes
  (``name``, ``x``, ``y``, ``shape``, ``size``, ``is_dot``, ``legs``).
- Edges are contractions, keyed by their recording position and carrying
  ``name`` and ``pos``. Parallel edges appear when two tensors share more
  than one contracted index.

The graph is a snapshot: later changes to the diagram are not reflected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from tensordiagram.diagram.diagram import TensorDiagram


def diagram_to_nx_graph(diagram: TensorDiagram) -> nx.MultiGraph:
    """Convert *diagram* to a ``networkx.MultiGraph``."""
    graph = nx.MultiGraph()
    for k, tensor in enumerate(diagram.tensors):
        graph.add_node(
            k,
            name=tensor.name,
            x=tensor.x,
            y=tensor.y,
            shape=str(tensor.shape),
            size=tensor.size,
            is_dot=tensor.is_dot,
            legs=tensor.index_names(),
        )
    for key, contraction in enumerate(diagram.contractions):
        graph.add_edge(
            contraction.source,
            contraction.target,
            key=key,
            name=contraction.name,
            pos=contraction.pos.value,
        )
    return graph


def connected_components(diagram: TensorDiagram) -> list[list[int]]:
    """Groups of tensor positions linked by contractions.

    Each group is sorted, and groups are ordered by their smallest member,
    so disconnected sub-networks come out in diagram order.
    """
    graph = diagram_to_nx_graph(diagram)
    return sorted(
        (sorted(component) for component in nx.connected_components(graph)),
        key=lambda component: component[0],
    )
