r"""tensordiagram: build tensor network diagrams and derive their formulas.

Tensors are placed on a 2D grid with named indices on their four sides.
Summing over an index name records contractions, inserting "dot" junction
tensors for traces and for indices shared by three or more tensors. The
finished diagram yields an einsum formula and a LaTeX formula, and exposes
its geometry to a separate rendering layer.

Quick start::

    from tensordiagram import TensorDiagram

    diagram = (
        TensorDiagram.new()
        .add_tensor("A", "start", left=["i"], right=["j"])
        .add_tensor("B", "right", left=["j"], right=["k"])
        .add_summation("j")
    )
    print(diagram.to_formula_einsum())  # einsum('ij,jk->ik', A, B)
    print(diagram.to_formula_latex())   # \sum_{j} A_{ij} B_{jk}
"""

from tensordiagram.core.errors import (
    DanglingContractionError,
    EmptyDiagramError,
    IndexOutOfRange,
    InvalidIndexPositionError,
    MissingPositionError,
    NoMatchingIndexError,
    TensorDiagramError,
)
from tensordiagram.core.index import Index, Position, opposite
from tensordiagram.core.tensor import Shape, Tensor, TensorOpts, create_tensor
from tensordiagram.diagram.diagram import (
    Contraction,
    DiagramConfig,
    Line,
    TensorDiagram,
)
from tensordiagram.diagram.graph import connected_components, diagram_to_nx_graph

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Position",
    "opposite",
    "Index",
    "Shape",
    "Tensor",
    "TensorOpts",
    "create_tensor",
    # Diagram
    "TensorDiagram",
    "DiagramConfig",
    "Contraction",
    "Line",
    # Graph export
    "diagram_to_nx_graph",
    "connected_components",
    # Errors
    "TensorDiagramError",
    "EmptyDiagramError",
    "IndexOutOfRange",
    "NoMatchingIndexError",
    "InvalidIndexPositionError",
    "MissingPositionError",
    "DanglingContractionError",
]
