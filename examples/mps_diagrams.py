#!/usr/bin/env python3
"""Common tensor network diagrams and their formulas.

Builds a matrix product, a trace, a three-site MPS norm and a three-way
"copy" contraction, then prints the einsum and LaTeX formula for each and
the connected structure as seen through networkx.

Usage::

    python examples/mps_diagrams.py
"""

from __future__ import annotations

import logging

from tensordiagram import TensorDiagram, connected_components


def matrix_product() -> TensorDiagram:
    return (
        TensorDiagram.new()
        .add_tensor("A", "start", left=["i"], right=["j"])
        .add_tensor("B", "right", left=["j"], right=["k"])
        .add_summation("j")
    )


def trace() -> TensorDiagram:
    return (
        TensorDiagram.new()
        .add_tensor("M", "start", left=["i"], right=["i"])
        .add_summation("i")
    )


def mps_norm(n_sites: int = 3) -> TensorDiagram:
    """<psi|psi> for an open-boundary MPS with *n_sites* sites.

    Ket tensors sit on row 0 and bra tensors on row 1; physical legs are
    ``s0, s1, ...`` and bonds are ``a*`` (ket) / ``b*`` (bra).
    """
    diagram = TensorDiagram.new().set_size(80 * n_sites, 160)
    for row, (name, bond, phys_side) in enumerate(
        (("A", "a", "down"), ("A*", "b", "up"))
    ):
        for site in range(n_sites):
            left = [f"{bond}{site - 1}"] if site > 0 else []
            right = [f"{bond}{site}"] if site < n_sites - 1 else []
            legs = {phys_side: [f"s{site}"]}
            position = (0, row) if site == 0 else "right"
            diagram.add_tensor(name, position, left, right, **legs)

    for site in range(n_sites):
        diagram.add_summation(f"s{site}")
    for site in range(n_sites - 1):
        diagram.add_summation(f"a{site}").add_summation(f"b{site}")
    return diagram


def copy_tensor() -> TensorDiagram:
    return (
        TensorDiagram.new()
        .add_tensor("x", (0, 0), right=["k"])
        .add_tensor("y", (2, 0), left=["k"])
        .add_tensor("z", (1, 2), up=["k"])
        .add_summation("k", (1, 1))
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    examples = {
        "matrix product": matrix_product(),
        "trace": trace(),
        "MPS norm": mps_norm(),
        "copy tensor": copy_tensor(),
    }
    for title, diagram in examples.items():
        print(f"--- {title} ---")
        print(f"  einsum:     {diagram.to_formula_einsum()}")
        print(f"  latex:      {diagram.to_formula_latex()}")
        print(f"  subscripts: {diagram.to_subscripts()}")
        print(f"  components: {connected_components(diagram)}")


if __name__ == "__main__":
    main()
