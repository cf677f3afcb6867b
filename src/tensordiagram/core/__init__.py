"""Core diagram data types: positions, indices, tensors and errors."""

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

__all__ = [
    "Position",
    "opposite",
    "Index",
    "Shape",
    "Tensor",
    "TensorOpts",
    "create_tensor",
    "TensorDiagramError",
    "EmptyDiagramError",
    "IndexOutOfRange",
    "NoMatchingIndexError",
    "InvalidIndexPositionError",
    "MissingPositionError",
    "DanglingContractionError",
]
