"""Tests for Tensor, create_tensor() and TensorOpts."""

import pytest

from tensordiagram.core.errors import InvalidIndexPositionError
from tensordiagram.core.index import Index, Position
from tensordiagram.core.tensor import (
    DEFAULT_SIZE,
    Shape,
    Tensor,
    TensorOpts,
    create_tensor,
)


def _legs(**sides):
    return [
        Index(name, side, order)
        for side, names in sides.items()
        for order, name in enumerate(names)
    ]


class TestCreateTensor:
    def test_defaults(self):
        t = create_tensor(1, 2, "A")
        assert (t.x, t.y, t.name) == (1, 2, "A")
        assert t.shape == Shape.CIRCLE
        assert t.show_label is True
        assert t.label_pos is Position.UP
        assert t.size == DEFAULT_SIZE == 20
        assert t.indices == []
        assert t.rect_height == 0

    def test_rect_height_right_dominant(self):
        t = create_tensor(0, 0, "M", _legs(left=["i"], right=["j", "k", "l"]))
        assert t.rect_height == 3

    def test_rect_height_left_dominant(self):
        t = create_tensor(0, 0, "M", _legs(left=["i", "j"], up=["a", "b", "c"]))
        assert t.rect_height == 2

    def test_rect_height_ignores_up_down(self):
        t = create_tensor(0, 0, "M", _legs(up=["a", "b"], down=["c", "d", "e"]))
        assert t.rect_height == 0

    def test_none_falls_back_to_defaults(self):
        t = create_tensor(0, 0, "A", label_pos=None, size=None)
        assert t.label_pos is Position.UP
        assert t.size == DEFAULT_SIZE

    def test_string_label_pos(self):
        t = create_tensor(0, 0, "A", label_pos="down")
        assert t.label_pos is Position.DOWN

    def test_invalid_label_pos_raises(self):
        with pytest.raises(InvalidIndexPositionError):
            create_tensor(0, 0, "A", label_pos="inside")

    def test_custom_shape_kept(self):
        t = create_tensor(0, 0, "A", shape="hexagon")
        assert t.shape == "hexagon"

    def test_shape_string_coerced(self):
        t = create_tensor(0, 0, "A", shape="dot")
        assert t.shape is Shape.DOT
        assert t.is_dot

    def test_does_not_alias_input(self):
        legs = _legs(left=["i"])
        t = create_tensor(0, 0, "A", legs)
        legs.append(Index("x", "up"))
        assert t.index_names() == ["i"]


class TestTensorHelpers:
    @pytest.fixture
    def tensor(self):
        return create_tensor(
            0, 0, "T", _legs(left=["a", "b"], right=["c"], down=["d"])
        )

    def test_indices_at(self, tensor):
        assert [i.name for i in tensor.indices_at("left")] == ["a", "b"]
        assert [i.name for i in tensor.indices_at(Position.UP)] == []

    def test_index_names(self, tensor):
        assert tensor.index_names() == ["a", "b", "c", "d"]

    def test_has_index(self, tensor):
        assert tensor.has_index("c")
        assert not tensor.has_index("z")

    def test_find_index_first_match(self):
        t = create_tensor(0, 0, "T", [Index("i", "left"), Index("i", "right")])
        assert t.find_index("i").pos is Position.LEFT
        assert t.find_index("missing") is None

    def test_rect_height_not_refreshed_automatically(self, tensor):
        tensor.indices.append(Index("e", "right", 1))
        tensor.indices.append(Index("f", "right", 2))
        assert tensor.rect_height == 2

    def test_recompute_rect_height(self, tensor):
        tensor.indices.append(Index("e", "right", 1))
        tensor.indices.append(Index("f", "right", 2))
        assert tensor.recompute_rect_height() == 3
        assert tensor.rect_height == 3

    def test_direct_construction(self):
        t = Tensor(3, 4, "X")
        assert t.indices == []
        assert not t.is_dot


class TestTensorOpts:
    def test_defaults(self):
        opts = TensorOpts()
        assert opts.shape is None
        assert opts.show_label is True
        assert opts.label_pos is None
        assert opts.size is None
