"""Exceptions raised by the diagram builder.

Every error derives from :class:`TensorDiagramError` and from the builtin
exception closest in meaning, so ``except ValueError`` and friends keep
working for callers that do not know about this package.

All builder methods detect these conditions before touching the diagram,
so a failed call leaves the diagram exactly as it was.
"""

from __future__ import annotations


class TensorDiagramError(Exception):
    """Base class for all diagram construction errors."""


class EmptyDiagramError(TensorDiagramError, ValueError):
    """Relative placement (``"right"``/``"down"``) requested on an empty diagram."""


class IndexOutOfRange(TensorDiagramError, IndexError):
    """A tensor position passed to the builder is outside ``[0, len(tensors))``."""


class NoMatchingIndexError(TensorDiagramError, KeyError):
    """Summation requested over an index name that no tensor carries."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class InvalidIndexPositionError(TensorDiagramError, ValueError):
    """An index carries a side that is not one of left/right/up/down."""


class MissingPositionError(TensorDiagramError, ValueError):
    """A multi-way summation needs an explicit dot position but none was given."""


class DanglingContractionError(TensorDiagramError, ValueError):
    """A contraction names an index missing from one of its endpoint tensors."""
