"""Tests for loose_indices(), einsum/LaTeX formulas and einsum subscripts."""

import numpy as np
import pytest

from tensordiagram import TensorDiagram
from tensordiagram.diagram.formula import free_index_names


class TestExamples:
    def test_vertical_pair(self, vertical_pair):
        vertical_pair.add_summation("j")
        assert vertical_pair.to_formula_einsum() == "einsum('j,j->', A, B)"
        assert vertical_pair.to_formula_latex() == r"\sum_{j} A_{j} B_{j}"

    def test_single_free_index(self):
        d = TensorDiagram.new().add_tensor("A", "start", left=["i"])
        assert d.to_formula_einsum() == "einsum('i->i', A)"
        assert d.to_formula_latex() == r"\sum_{} A_{i}"

    def test_matmul(self, matmul):
        matmul.add_summation("j")
        assert matmul.to_formula_einsum() == "einsum('ij,jk->ik', A, B)"
        assert matmul.to_formula_latex() == r"\sum_{j} A_{ij} B_{jk}"

    def test_trace(self):
        d = TensorDiagram.new().add_tensor("M", "start", left=["i"], right=["i"])
        d.add_summation("i")
        assert d.to_formula_einsum() == "einsum('ii,i->', M, dot)"
        assert d.to_formula_latex() == r"\sum_{i} M_{ii} dot_{i}"

    def test_empty_diagram(self, empty):
        assert empty.to_formula_einsum() == "einsum('->', )"
        assert empty.to_formula_latex() == r"\sum_{} "


class TestEinsumFree:
    def test_free_names_ordered_across_diagram(self):
        d = (
            TensorDiagram.new()
            .add_tensor("A", "start", left=["b"], right=["j"])
            .add_tensor("B", "right", left=["j"], right=["a"], down=["b"])
        )
        d.add_contraction(0, 1, "j")
        assert d.to_formula_einsum() == "einsum('bj,jab->ba', A, B)"

    def test_free_names_deduplicated(self):
        d = (
            TensorDiagram.new()
            .add_tensor("A", "start", left=["i"])
            .add_tensor("B", "right", left=["i"])
        )
        assert free_index_names(d.tensors, d.contractions) == ["i"]

    def test_contraction_order_in_latex(self, matmul):
        matmul.add_contraction(0, 1, "k").add_contraction(0, 1, "j")
        assert matmul.to_formula_latex().startswith(r"\sum_{kj} ")


class TestLooseIndices:
    def test_before_summation(self, matmul):
        loose = matmul.loose_indices()
        assert [[i.name for i in legs] for legs in loose] == [["i", "j"], ["j", "k"]]

    def test_after_summation(self, matmul):
        matmul.add_summation("j")
        loose = matmul.loose_indices()
        assert [[i.name for i in legs] for legs in loose] == [["i"], ["k"]]

    def test_returns_diagram_indices(self, matmul):
        assert matmul.loose_indices()[0][0] is matmul.tensors[0].indices[0]

    def test_never_contains_contracted_names(self, three_way):
        three_way.add_tensor("D", "right", left=["m"], right=["n"])
        three_way.add_summation("k", (1, 1))
        contracted = {c.name for c in three_way.contractions}
        loose = {i.name for legs in three_way.loose_indices() for i in legs}
        assert loose.isdisjoint(contracted)
        every_name = {n for t in three_way.tensors for n in t.index_names()}
        assert loose | contracted == every_name


class TestPurity:
    def test_repeated_calls_identical(self, three_way):
        three_way.add_summation("k", (1, 1))
        assert three_way.to_formula_einsum() == three_way.to_formula_einsum()
        assert three_way.to_formula_latex() == three_way.to_formula_latex()
        assert three_way.loose_indices() == three_way.loose_indices()
        assert three_way.to_subscripts() == three_way.to_subscripts()

    def test_reads_do_not_mutate(self, matmul, snapshot):
        matmul.add_summation("j")
        before = snapshot(matmul)
        matmul.to_formula_einsum()
        matmul.to_formula_latex()
        matmul.loose_indices()
        matmul.to_subscripts()
        assert snapshot(matmul) == before


class TestSubscripts:
    def test_single_letter_names(self, matmul):
        matmul.add_summation("j")
        assert matmul.to_subscripts() == "ab,bc->ac"

    def test_multi_character_names(self, three_way):
        three_way.add_summation("k", (1, 1))
        assert three_way.to_subscripts() == "a,b,c,abc->"

    def test_accepted_by_numpy_matmul(self, matmul):
        matmul.add_summation("j")
        a = np.arange(6.0).reshape(2, 3)
        b = np.arange(12.0).reshape(3, 4)
        np.testing.assert_allclose(np.einsum(matmul.to_subscripts(), a, b), a @ b)

    def test_accepted_by_numpy_trace(self):
        d = TensorDiagram.new().add_tensor("M", "start", left=["i"], right=["i"])
        d.add_summation("i")
        m = np.arange(9.0).reshape(3, 3)
        dot = np.ones(3)
        assert np.einsum(d.to_subscripts(), m, dot) == pytest.approx(np.trace(m))
