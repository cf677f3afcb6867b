r"""Formula derivation from a diagram's tensors and contractions.

All functions here are pure reads: they never mutate their arguments and
return identical results when called twice on an unchanged diagram.

Formats::

    to_formula_einsum  -> "einsum('ij,jk->ik', A, B)"
    to_formula_latex   -> "\sum_{j} A_{ij} B_{jk}"
    to_subscripts      -> "ab,bc->ac"

The first two strings are a compatibility contract: names are emitted
verbatim, with no escaping, so name collisions or empty names are the
caller's responsibility. :func:`to_subscripts` instead maps every distinct
index name to a single einsum symbol, so the result can be handed straight
to ``numpy.einsum`` or ``opt_einsum.contract`` together with arrays in
diagram tensor order.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import opt_einsum

from tensordiagram.core.index import Index
from tensordiagram.core.tensor import Tensor

if TYPE_CHECKING:
    from tensordiagram.diagram.diagram import Contraction


def _contracted_names(contractions: Sequence[Contraction]) -> list[str]:
    return [c.name for c in contractions]


def free_index_names(
    tensors: Sequence[Tensor],
    contractions: Sequence[Contraction],
) -> list[str]:
    """Names not involved in any contraction, deduplicated.

    Ordering is first encounter across the whole diagram (tensor order,
    then each tensor's leg order), not per tensor.
    """
    contracted = set(_contracted_names(contractions))
    free: list[str] = []
    seen: set[str] = set()
    for tensor in tensors:
        for idx in tensor.indices:
            if idx.name not in contracted and idx.name not in seen:
                free.append(idx.name)
                seen.add(idx.name)
    return free


def loose_indices(
    tensors: Sequence[Tensor],
    contractions: Sequence[Contraction],
) -> list[list[Index]]:
    """Per tensor, the legs whose name appears in no contraction.

    Args:
        tensors:      Diagram tensors in order.
        contractions: Recorded contractions.

    Returns:
        One list per tensor, keeping that tensor's leg order. The Index
        objects are the diagram's own, not copies.
    """
    contracted = set(_contracted_names(contractions))
    return [
        [idx for idx in tensor.indices if idx.name not in contracted]
        for tensor in tensors
    ]


def to_formula_einsum(
    tensors: Sequence[Tensor],
    contractions: Sequence[Contraction],
) -> str:
    """Build ``einsum('<inputs>-><outputs>', <tensor names>)``.

    Each input term is the concatenation of one tensor's leg names; the
    output term concatenates :func:`free_index_names`.
    """
    per_tensor = ",".join("".join(t.index_names()) for t in tensors)
    free = "".join(free_index_names(tensors, contractions))
    names = ", ".join(t.name for t in tensors)
    return f"einsum('{per_tensor}->{free}', {names})"


def to_formula_latex(
    tensors: Sequence[Tensor],
    contractions: Sequence[Contraction],
) -> str:
    """Build ``\\sum_{<contracted names>} A_{...} B_{...}``.

    Contracted names are concatenated in the order the contractions were
    recorded; tensor terms follow diagram order.
    """
    summed = "".join(_contracted_names(contractions))
    terms = " ".join(
        f"{t.name}_{{{''.join(t.index_names())}}}" for t in tensors
    )
    return f"\\sum_{{{summed}}} {terms}"


def to_subscripts(
    tensors: Sequence[Tensor],
    contractions: Sequence[Contraction],
) -> str:
    """Build an einsum subscript string with one symbol per index name.

    Symbols are allocated with :func:`opt_einsum.get_symbol` in first
    encounter order, so multi-character names such as ``"k0"`` stay
    unambiguous.

    Returns:
        Subscripts such as ``"ab,bc->ac"``.
    """
    symbol_of: dict[str, str] = {}
    for tensor in tensors:
        for idx in tensor.indices:
            if idx.name not in symbol_of:
                symbol_of[idx.name] = opt_einsum.get_symbol(len(symbol_of))

    inputs = ",".join(
        "".join(symbol_of[idx.name] for idx in tensor.indices)
        for tensor in tensors
    )
    output = "".join(
        symbol_of[name] for name in free_index_names(tensors, contractions)
    )
    return f"{inputs}->{output}"
