"""Tensor diagram container with a chainable builder API.

TensorDiagram holds tensors placed on a 2D grid, the contractions between
them and free-form decoration lines. Builder methods mutate the diagram in
place and return it, so a whole diagram reads as one expression::

    diagram = (
        TensorDiagram.new()
        .add_tensor("A", "start", left=["i"], right=["j"])
        .add_tensor("B", "right", left=["j"], right=["k"])
        .add_summation("j")
    )
    diagram.to_formula_einsum()   # "einsum('ij,jk->ik', A, B)"

Key design choices:
- Tensors are identified by their position in ``tensors``; contractions
  store those positions, never references to the Tensor objects
- Every builder method validates its input before mutating, so a raised
  error leaves the diagram unchanged
- A diagram is not thread-safe: confine it to one owner or synchronise
  externally
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any, Literal

import networkx as nx

from tensordiagram.core.errors import (
    DanglingContractionError,
    EmptyDiagramError,
    IndexOutOfRange,
    MissingPositionError,
    NoMatchingIndexError,
)
from tensordiagram.core.index import Index, Position, opposite
from tensordiagram.core.tensor import (
    Shape,
    Tensor,
    TensorOpts,
    create_tensor,
)
from tensordiagram.diagram import formula
from tensordiagram.diagram.graph import diagram_to_nx_graph

logger = logging.getLogger(__name__)

XY = tuple[int, int]
RelativePlacement = Literal["start", "right", "down"]
Placement = RelativePlacement | XY | Mapping[str, int]

DOT_NAME = "dot"
"""Name given to synthetic junction tensors created by summation."""


@dataclass
class DiagramConfig:
    """Configuration for a new :class:`TensorDiagram`.

    Attributes:
        width, height:          Canvas size handed to renderers.
        tensor_size:            Visual scale used when a tensor gets no
                                explicit size.
        validate_contractions:  If True, :meth:`TensorDiagram.add_contraction`
                                checks that both tensors carry the named
                                index and raises
                                :class:`DanglingContractionError` otherwise.
    """

    width: float = 300
    height: float = 300
    tensor_size: float = 20
    validate_contractions: bool = False


@dataclass(frozen=True, slots=True)
class Contraction:
    """A summed index shared between two tensors.

    Attributes:
        source: Position of the first tensor in ``TensorDiagram.tensors``.
        target: Position of the second tensor.
        name:   The shared index name.
        pos:    Rendering hint for where the connecting line/label goes.
    """

    source: int
    target: int
    name: str
    pos: Position = Position.UP


@dataclass(frozen=True, slots=True)
class Line:
    """Decorative segment between two grid points.

    Lines are passed through to renderers and never inspected by the
    summation or formula logic.
    """

    start: XY
    end: XY
    style: str = ""


class TensorDiagram:
    """Mutable tensor network diagram.

    Attributes:
        tensors:      Tensor glyphs; list position is the tensor's identity.
        contractions: Recorded contractions in recording order.
        lines:        Decorative lines.
        width:        Canvas width.
        height:       Canvas height.

    Args:
        tensors:      Initial tensors.
        contractions: Initial contractions (positions into *tensors*).
        lines:        Initial lines.
        config:       Canvas defaults and validation switches.
    """

    def __init__(
        self,
        tensors: Sequence[Tensor] = (),
        contractions: Sequence[Contraction] = (),
        lines: Sequence[Line] = (),
        config: DiagramConfig | None = None,
    ) -> None:
        self.config = config if config is not None else DiagramConfig()
        self.tensors: list[Tensor] = list(tensors)
        self.contractions: list[Contraction] = list(contractions)
        self.lines: list[Line] = list(lines)
        self.width = self.config.width
        self.height = self.config.height

    @classmethod
    def new(cls, config: DiagramConfig | None = None) -> TensorDiagram:
        """Create an empty diagram."""
        return cls(config=config)

    # ------------------------------------------------------------------ #
    # Accessors                                                            #
    # ------------------------------------------------------------------ #

    @property
    def last_tensor(self) -> Tensor:
        """The most recently added tensor.

        Raises:
            EmptyDiagramError: If the diagram has no tensors.
        """
        if not self.tensors:
            raise EmptyDiagramError("Diagram has no tensors yet")
        return self.tensors[-1]

    def tensor(self, i: int) -> Tensor:
        """Return the tensor at position *i*.

        Raises:
            IndexOutOfRange: If *i* is not in ``[0, len(tensors))``.
        """
        self._check_tensor_position(i)
        return self.tensors[i]

    def contraction_endpoints(self, contraction: Contraction) -> tuple[Tensor, Tensor]:
        """Resolve a contraction to its ``(source, target)`` tensors."""
        return self.tensor(contraction.source), self.tensor(contraction.target)

    def tensors_with_index(self, name: str) -> list[int]:
        """Positions of the tensors carrying an index called *name*."""
        return [k for k, t in enumerate(self.tensors) if t.has_index(name)]

    # ------------------------------------------------------------------ #
    # Builder                                                              #
    # ------------------------------------------------------------------ #

    def add_tensor(
        self,
        name: str,
        position: Placement,
        left: Sequence[str] = (),
        right: Sequence[str] = (),
        up: Sequence[str] = (),
        down: Sequence[str] = (),
        opts: TensorOpts | None = None,
        *,
        shape: Shape | str | None = None,
        show_label: bool | None = None,
        label_pos: Position | str | None = None,
        size: float | None = None,
    ) -> TensorDiagram:
        """Append a tensor with named legs on its four sides.

        Args:
            name:     Tensor name.
            position: ``(x, y)`` grid point (or a ``{"x": .., "y": ..}``
                mapping), ``"start"`` for (0, 0), or ``"right"``/``"down"``
                for one step right of / below the last tensor.
            left, right, up, down: Index names per side, in layout order.
            opts:     Shape, label and size options. Keyword arguments of
                the same name override fields of *opts*.

        Returns:
            This diagram, for chaining.

        Raises:
            EmptyDiagramError: If *position* is relative and the diagram is
                empty.
            ValueError: If *position* is not a recognised placement.
        """
        x, y = self._resolve_xy(position)

        opts = opts if opts is not None else TensorOpts()
        overrides: dict[str, Any] = {
            key: value
            for key, value in (
                ("shape", shape),
                ("show_label", show_label),
                ("label_pos", label_pos),
                ("size", size),
            )
            if value is not None
        }
        if overrides:
            opts = replace(opts, **overrides)

        indices: list[Index] = []
        for side, names in (
            (Position.LEFT, left),
            (Position.RIGHT, right),
            (Position.UP, up),
            (Position.DOWN, down),
        ):
            indices.extend(
                Index(idx_name, side, order) for order, idx_name in enumerate(names)
            )

        if opts.shape is not None:
            tensor_shape = opts.shape
        elif len(left) > 1 or len(right) > 1:
            tensor_shape = Shape.RECTANGLE
        else:
            tensor_shape = Shape.CIRCLE

        tensor = create_tensor(
            x,
            y,
            name,
            indices,
            shape=tensor_shape,
            show_label=opts.show_label,
            label_pos=opts.label_pos,
            size=opts.size if opts.size is not None else self.config.tensor_size,
        )
        self.tensors.append(tensor)
        logger.debug(
            "add_tensor: %r at (%d, %d) shape=%s legs=%s",
            name, x, y, tensor.shape, tensor.index_names(),
        )
        return self

    def add_contraction(
        self,
        i: int,
        j: int,
        name: str,
        pos: Position | str = Position.UP,
    ) -> TensorDiagram:
        """Record that index *name* is summed between tensors *i* and *j*.

        By default the tensors are not checked for an index called *name*;
        set ``DiagramConfig.validate_contractions`` to enforce it.

        Args:
            i:    Position of the source tensor.
            j:    Position of the target tensor.
            name: Shared index name.
            pos:  Side hint for drawing the contraction.

        Returns:
            This diagram, for chaining.

        Raises:
            IndexOutOfRange: If *i* or *j* is not a valid tensor position.
            DanglingContractionError: If validation is enabled and either
                tensor lacks an index called *name*.
        """
        self._check_tensor_position(i)
        self._check_tensor_position(j)
        pos = Position.coerce(pos)
        if self.config.validate_contractions:
            for k in (i, j):
                if not self.tensors[k].has_index(name):
                    raise DanglingContractionError(
                        f"Tensor {k} ({self.tensors[k].name!r}) has no index "
                        f"{name!r}; legs are {self.tensors[k].index_names()}"
                    )
        self._record_contraction(i, j, name, pos)
        return self

    def add_summation(self, name: str, position: Placement | None = None) -> TensorDiagram:
        """Sum over every index called *name*.

        The diagrammatic form depends on how many tensors carry the name:

        - one: a dot tensor is placed next to the leg and contracted with it
          (a trace-like self contraction);
        - two: a plain contraction between the two tensors;
        - three or more: a dot tensor is placed at *position* and each
          tensor's leg is renamed ``name0``, ``name1``, ... and contracted
          with a matching leg on the dot, giving a star around the dot.

        Args:
            name:     Index name to sum over.
            position: Dot placement, required for three or more tensors.
                Accepts anything :meth:`add_tensor` accepts.

        Returns:
            This diagram, for chaining.

        Raises:
            NoMatchingIndexError: If no tensor carries *name*.
            MissingPositionError: If three or more tensors carry *name* and
                *position* is None.
            InvalidIndexPositionError: If a matching index has a corrupt side.
        """
        relevant = self.tensors_with_index(name)

        if not relevant:
            raise NoMatchingIndexError(f"add_summation: no tensors with an index {name!r}")

        if len(relevant) == 1:
            self._sum_single(relevant[0], name)
        elif len(relevant) == 2:
            logger.debug("add_summation: %r is a binary contraction", name)
            self._record_contraction(relevant[0], relevant[1], name, Position.UP)
        else:
            self._sum_multi(relevant, name, position)
        return self

    def set_size(self, width: float, height: float) -> TensorDiagram:
        """Set the canvas size. No validation is performed."""
        self.width = width
        self.height = height
        return self

    def add_line(self, start: XY, end: XY, style: str = "") -> TensorDiagram:
        """Append a decorative line from *start* to *end* (grid points)."""
        self.lines.append(Line(tuple(start), tuple(end), style))
        return self

    # ------------------------------------------------------------------ #
    # Formulas                                                             #
    # ------------------------------------------------------------------ #

    def loose_indices(self) -> list[list[Index]]:
        """Per tensor, the indices not involved in any contraction."""
        return formula.loose_indices(self.tensors, self.contractions)

    def to_formula_einsum(self) -> str:
        """Formula in NumPy/PyTorch/TensorFlow einsum notation.

        E.g. ``einsum('ij,jk->ik', A, B)``.
        """
        return formula.to_formula_einsum(self.tensors, self.contractions)

    def to_formula_latex(self) -> str:
        r"""Formula in LaTeX, e.g. ``\sum_{j} A_{ij} B_{jk}``."""
        return formula.to_formula_latex(self.tensors, self.contractions)

    def to_subscripts(self) -> str:
        """Einsum subscripts with one symbol per distinct index name."""
        return formula.to_subscripts(self.tensors, self.contractions)

    def to_networkx(self) -> nx.MultiGraph:
        """Tensors as nodes, contractions as edges. See :mod:`.graph`."""
        return diagram_to_nx_graph(self)

    # ------------------------------------------------------------------ #
    # Internals                                                            #
    # ------------------------------------------------------------------ #

    def _check_tensor_position(self, i: int) -> None:
        if not 0 <= i < len(self.tensors):
            raise IndexOutOfRange(
                f"Tensor position {i} out of range for a diagram with "
                f"{len(self.tensors)} tensors"
            )

    def _resolve_xy(self, position: Placement) -> XY:
        if isinstance(position, str):
            if position == "start":
                return 0, 0
            if position not in ("right", "down"):
                raise ValueError(
                    f"Unknown placement {position!r}; expected 'start', "
                    f"'right', 'down' or an (x, y) pair"
                )
            if not self.tensors:
                raise EmptyDiagramError(
                    f"Cannot place a tensor {position!r} of the last one: "
                    f"the diagram is empty"
                )
            last = self.tensors[-1]
            if position == "right":
                return last.x + 1, last.y
            return last.x, last.y + 1
        if isinstance(position, Mapping):
            return position["x"], position["y"]
        x, y = position
        return x, y

    def _record_contraction(self, i: int, j: int, name: str, pos: Position) -> None:
        self.contractions.append(Contraction(i, j, name, pos))
        logger.debug(
            "contraction %r: %r (%d) -- %r (%d)",
            name, self.tensors[i].name, i, self.tensors[j].name, j,
        )

    def _sum_single(self, k: int, name: str) -> None:
        tensor = self.tensors[k]
        idx = tensor.find_index(name)
        assert idx is not None
        side = Position.coerce(idx.pos)

        if side is Position.LEFT:
            xy = (tensor.x - 1, tensor.y + idx.order)
        elif side is Position.RIGHT:
            xy = (tensor.x + 1, tensor.y + idx.order)
        elif side is Position.UP:
            xy = (tensor.x + idx.order, tensor.y - 1)
        else:
            xy = (tensor.x + idx.order, tensor.y + 1)

        dot_legs = {p.value: [] for p in Position}
        dot_legs[opposite(side).value] = [name]
        logger.debug(
            "add_summation: %r on a single tensor %r, dot at %s",
            name, tensor.name, xy,
        )
        self.add_tensor(DOT_NAME, xy, **dot_legs, shape=Shape.DOT, show_label=False)
        self._record_contraction(k, len(self.tensors) - 1, name, Position.UP)

    def _sum_multi(
        self,
        relevant: list[int],
        name: str,
        position: Placement | None,
    ) -> None:
        if position is None:
            raise MissingPositionError(
                f"add_summation: index {name!r} is shared by {len(relevant)} "
                f"tensors; a dot position is required"
            )
        x, y = self._resolve_xy(position)

        # Validate every leg before touching the diagram.
        plan: list[tuple[int, Index, Position, str]] = []
        for k, t in enumerate(relevant):
            idx = self.tensors[t].find_index(name)
            assert idx is not None
            plan.append((t, idx, Position.coerce(idx.pos), f"{name}{k}"))

        logger.debug(
            "add_summation: %r shared by %d tensors, dot at (%d, %d)",
            name, len(relevant), x, y,
        )
        dot = create_tensor(
            x, y, DOT_NAME, shape=Shape.DOT, show_label=False,
            size=self.config.tensor_size,
        )
        self.tensors.append(dot)
        dot_position = len(self.tensors) - 1

        for t, idx, side, new_name in plan:
            dot_side = opposite(side)
            order = len(dot.indices_at(dot_side))
            dot.indices.append(Index(new_name, dot_side, order, show_label=False))
            idx.name = new_name
            self._record_contraction(t, dot_position, new_name, Position.UP)

    def __repr__(self) -> str:
        return (
            f"TensorDiagram(tensors={len(self.tensors)}, "
            f"contractions={len(self.contractions)}, lines={len(self.lines)}, "
            f"size={self.width}x{self.height})"
        )
