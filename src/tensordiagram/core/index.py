"""Index (leg) metadata for tensor diagram glyphs.

Each index hangs off one side of a tensor glyph and is described by:
- A name, shared across tensors to denote a common dimension
- The side of the glyph it is drawn on (a :class:`Position`)
- Its rank among the indices on that side, used for layout spacing
- Whether the name is rendered next to the leg

Names are the primary user-facing handle: two indices with the same name
on different tensors can be contracted with ``add_summation()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tensordiagram.core.errors import InvalidIndexPositionError


class Position(str, Enum):
    """Side of a tensor glyph.

    The enum is string-valued so plain strings such as ``"left"`` compare
    equal to the corresponding member and can be passed anywhere a
    Position is expected.
    """

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Position | str) -> Position:
        """Convert *value* to a Position.

        Args:
            value: A Position member or one of ``"left"``, ``"right"``,
                ``"up"``, ``"down"``.

        Returns:
            The matching Position.

        Raises:
            InvalidIndexPositionError: If *value* names no side.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidIndexPositionError(
                f"Invalid position {value!r}; expected one of "
                f"{[p.value for p in cls]}"
            ) from None


_OPPOSITE: dict[Position, Position] = {
    Position.LEFT: Position.RIGHT,
    Position.RIGHT: Position.LEFT,
    Position.UP: Position.DOWN,
    Position.DOWN: Position.UP,
}


def opposite(pos: Position | str) -> Position:
    """Return the side facing *pos*: left <-> right, up <-> down.

    Raises:
        InvalidIndexPositionError: If *pos* names no side.
    """
    return _OPPOSITE[Position.coerce(pos)]


@dataclass(slots=True)
class Index:
    """One named leg on one side of a tensor glyph.

    Index is mutable: multi-way summation renames legs in place once the
    whole rename plan has been validated.

    Attributes:
        name:       Identifier; equal names across tensors mark a shared
                    dimension.
        pos:        Side of the glyph the leg is drawn on.
        order:      Zero-based rank among legs on the same side of the same
                    tensor. Per side the orders form ``0..k-1``.
        show_label: Whether the name is rendered.

    Example:
        >>> idx = Index("i", "left", 0)
        >>> idx.pos
        <Position.LEFT: 'left'>
    """

    name: str
    pos: Position
    order: int = 0
    show_label: bool = True

    def __post_init__(self) -> None:
        self.pos = Position.coerce(self.pos)

    def relabel(self, new_name: str) -> Index:
        """Return a copy of this index under a different name."""
        return Index(new_name, self.pos, self.order, self.show_label)

    def __repr__(self) -> str:
        return (
            f"Index(name={self.name!r}, pos={self.pos.value}, "
            f"order={self.order}, show_label={self.show_label})"
        )
