"""Tensor glyphs: grid placement, visual options and attached indices.

A tensor in a diagram is pure bookkeeping. It never holds values, only the
geometry and the named legs a rendering layer needs to draw it and the
formula builders need to describe the contraction.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from tensordiagram.core.index import Index, Position

DEFAULT_SIZE = 20
"""Default visual scale of a tensor glyph."""

DEFAULT_LABEL_POS = Position.UP
"""Default side on which the tensor name is rendered."""


class Shape(str, Enum):
    """Visual kind of a tensor glyph.

    Shapes are rendering hints only. Strings outside this enum are kept
    as-is so renderers can add their own kinds.
    """

    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    DOT = "dot"
    ASYMMETRIC = "asymmetric"

    def __str__(self) -> str:
        return self.value


def _coerce_shape(shape: Shape | str) -> Shape | str:
    try:
        return Shape(shape)
    except ValueError:
        return shape


@dataclass
class TensorOpts:
    """Optional per-tensor settings for :meth:`TensorDiagram.add_tensor`.

    Attributes:
        shape:      Overrides the shape heuristic (rectangle for tensors with
                    more than one left or right leg, circle otherwise).
        show_label: Whether the tensor name is rendered.
        label_pos:  Side on which the name is rendered; ``None`` means up.
        size:       Visual scale; ``None`` means :data:`DEFAULT_SIZE`.
    """

    shape: Shape | str | None = None
    show_label: bool = True
    label_pos: Position | str | None = None
    size: float | None = None


@dataclass
class Tensor:
    """A node of the diagram placed on the integer grid.

    Attributes:
        x, y:        Grid coordinates (y grows downwards).
        name:        Tensor name, used verbatim in the formulas.
        shape:       Visual kind.
        show_label:  Whether the name is rendered.
        label_pos:   Side on which the name is rendered.
        size:        Visual scale.
        indices:     Legs in left, right, up, down block order, then in the
                     order they were appended.
        rect_height: ``max(#right legs, #left legs)`` at creation time. It is
                     a layout hint and is not refreshed when legs are added
                     later; call :meth:`recompute_rect_height` for that.
    """

    x: int
    y: int
    name: str
    shape: Shape | str = Shape.CIRCLE
    show_label: bool = True
    label_pos: Position = DEFAULT_LABEL_POS
    size: float = DEFAULT_SIZE
    indices: list[Index] = field(default_factory=list)
    rect_height: int = 0

    @property
    def is_dot(self) -> bool:
        return self.shape == Shape.DOT

    def indices_at(self, pos: Position | str) -> list[Index]:
        """Return the legs on side *pos*, in storage order."""
        pos = Position.coerce(pos)
        return [idx for idx in self.indices if idx.pos == pos]

    def index_names(self) -> list[str]:
        return [idx.name for idx in self.indices]

    def has_index(self, name: str) -> bool:
        return any(idx.name == name for idx in self.indices)

    def find_index(self, name: str) -> Index | None:
        """Return the first leg called *name*, or ``None``."""
        for idx in self.indices:
            if idx.name == name:
                return idx
        return None

    def recompute_rect_height(self) -> int:
        """Refresh :attr:`rect_height` from the current legs and return it."""
        self.rect_height = _rect_height(self.indices)
        return self.rect_height


def _rect_height(indices: Iterable[Index]) -> int:
    n_left = n_right = 0
    for idx in indices:
        if idx.pos == Position.LEFT:
            n_left += 1
        elif idx.pos == Position.RIGHT:
            n_right += 1
    return max(n_right, n_left)


def create_tensor(
    x: int,
    y: int,
    name: str,
    indices: Iterable[Index] = (),
    shape: Shape | str = Shape.CIRCLE,
    show_label: bool = True,
    label_pos: Position | str | None = DEFAULT_LABEL_POS,
    size: float | None = DEFAULT_SIZE,
) -> Tensor:
    """Build a :class:`Tensor`, computing its ``rect_height``.

    Args:
        x, y:       Grid coordinates.
        name:       Tensor name.
        indices:    Legs, already carrying their side and order.
        shape:      Visual kind.
        show_label: Whether the name is rendered.
        label_pos:  Side for the name; ``None`` falls back to up.
        size:       Visual scale; ``None`` falls back to :data:`DEFAULT_SIZE`.

    Returns:
        A new Tensor. The function has no side effects.
    """
    indices = list(indices)
    return Tensor(
        x=x,
        y=y,
        name=name,
        shape=_coerce_shape(shape),
        show_label=show_label,
        label_pos=Position.coerce(
            DEFAULT_LABEL_POS if label_pos is None else label_pos
        ),
        size=DEFAULT_SIZE if size is None else size,
        indices=indices,
        rect_height=_rect_height(indices),
    )
