"""Shared fixtures for the tensordiagram test suite."""

import pytest

from tensordiagram import DiagramConfig, TensorDiagram

# ------------------------------------------------------------------ #
# Diagram fixtures                                                     #
# ------------------------------------------------------------------ #

@pytest.fixture
def empty():
    return TensorDiagram.new()


@pytest.fixture
def matmul():
    """A_{ij} B_{jk} with j shared, not yet summed."""
    return (
        TensorDiagram.new()
        .add_tensor("A", "start", left=["i"], right=["j"])
        .add_tensor("B", "right", left=["j"], right=["k"])
    )


@pytest.fixture
def vertical_pair():
    """A with a down leg j above B with an up leg j."""
    return (
        TensorDiagram.new()
        .add_tensor("A", "start", down=["j"])
        .add_tensor("B", "down", up=["j"])
    )


@pytest.fixture
def three_way():
    """Three tensors sharing k on different sides."""
    return (
        TensorDiagram.new()
        .add_tensor("A", (0, 0), right=["k"])
        .add_tensor("B", (2, 0), left=["k"])
        .add_tensor("C", (1, 2), up=["k"])
    )


@pytest.fixture
def strict():
    return TensorDiagram.new(DiagramConfig(validate_contractions=True))


@pytest.fixture
def snapshot():
    """Comparable copy of everything a builder call may change."""

    def _snapshot(diagram):
        return (
            [
                (t.x, t.y, t.name, str(t.shape), [(i.name, i.pos, i.order) for i in t.indices])
                for t in diagram.tensors
            ],
            list(diagram.contractions),
            list(diagram.lines),
            (diagram.width, diagram.height),
        )

    return _snapshot
