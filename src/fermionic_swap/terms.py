"""
Fermionic Hamiltonian Terms
===========================

The scheduling code only needs two things from a Hamiltonian term: the set of
site orbitals it touches, and a copy of it re-indexed to a new Jordan-Wigner
ordering together with the sign picked up along the way. `ReindexableTerm`
captures exactly that. `HermitianFermionTerm` is the implementation used for
second-quantized fermionic Hamiltonians.

CANONICAL ORDER
---------------

A term is a normal-ordered product of ladder operators, e.g.

    a†_0 a†_1 a_1 a_0        <->  indices [0, 1, 1, 0]

The canonical form places every raising operator first with ascending indices,
followed by the lowering operators with descending indices. Reaching it from
an arbitrary normal-ordered product only exchanges operators of the same kind,
and every exchange of two fermionic operators flips the sign.

A Hermitian term stands for T + T† (or just T when T is self-adjoint), so T and
T† describe the same physics. The conjugate is canonicalized the same way and
replaces the term when its index sequence compares lower.

Example
-------
>>> term = HermitianFermionTerm.from_indices([1, 0])    # a†_1 a_0
>>> term.indices                                        # stored as a†_0 a_1
(0, 1)
>>> moved, sign = HermitianFermionTerm.from_indices([0, 1, 3, 2]).reindexed(
...     {0: 0, 1: 1, 2: 3, 3: 2})
>>> moved.indices, sign
((0, 1, 3, 2), -1)
"""

from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence, Tuple, runtime_checkable

import qutip


@runtime_checkable
class ReindexableTerm(Protocol):
    """Capabilities the scheduler needs from a Hamiltonian term."""

    def support(self) -> Tuple[int, ...]:
        """Distinct site orbitals referenced by the term."""
        ...

    def reindexed(self, positions: Mapping[int, int]) -> Tuple["ReindexableTerm", int]:
        """Return the term with orbital ``o`` moved to ``positions[o]``, and the sign acquired."""
        ...


@dataclass(frozen=True)
class LadderOperator:
    """
    A single fermionic creation (raising) or annihilation (lowering) operator.

    Attributes
    ----------
    raising : bool
        True for a†, False for a.
    index : int
        Site-orbital (or position) the operator acts on.
    """
    raising: bool
    index: int

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Ladder operator index must be >= 0, got {self.index}")

    def dag(self) -> "LadderOperator":
        return LadderOperator(not self.raising, self.index)

    def __repr__(self):
        return f"a†{self.index}" if self.raising else f"a{self.index}"


def _sort_key(op: LadderOperator) -> Tuple[int, int]:
    # raising ascending, then lowering descending
    return (0, op.index) if op.raising else (1, -op.index)


def canonical_order(operators: Sequence[LadderOperator]) -> Tuple[Tuple[LadderOperator, ...], int]:
    """
    Sort a normal-ordered operator product into canonical order.

    Returns
    -------
    operators : tuple of LadderOperator
        The sorted product.
    sign : int
        +1 or -1, the parity of the permutation applied.

    Raises
    ------
    ValueError
        If a lowering operator precedes a raising operator.
    """
    seen_lowering = False
    for op in operators:
        if not op.raising:
            seen_lowering = True
        elif seen_lowering:
            raise ValueError(f"Operator product {list(operators)} is not normal ordered")

    keys = [_sort_key(op) for op in operators]
    inversions = sum(
        1
        for i in range(len(keys))
        for j in range(i + 1, len(keys))
        if keys[i] > keys[j]
    )
    ordered = tuple(sorted(operators, key=_sort_key))
    return ordered, (-1 if inversions % 2 else 1)


def _comparison_key(operators: Sequence[LadderOperator]):
    return (tuple(op.index for op in operators), tuple(not op.raising for op in operators))


@dataclass(frozen=True)
class HermitianFermionTerm:
    """
    A Hermitian fermionic term stored in canonical order.

    Construction canonicalizes ``operators`` and folds the resulting sign into
    ``sign``. Two terms compare equal when both their canonical operator
    sequences and their signs agree.

    Attributes
    ----------
    operators : tuple of LadderOperator
        Canonically ordered, normal-ordered ladder operators.
    sign : int
        +1 or -1.
    """
    operators: Tuple[LadderOperator, ...]
    sign: int = 1

    def __post_init__(self):
        if self.sign not in (1, -1):
            raise ValueError(f"Term sign must be +1 or -1, got {self.sign}")

        operators, sign = canonical_order(tuple(self.operators))
        adjoint, adjoint_sign = canonical_order(
            tuple(op.dag() for op in reversed(operators))
        )
        if _comparison_key(adjoint) < _comparison_key(operators):
            operators, sign = adjoint, sign * adjoint_sign

        object.__setattr__(self, "operators", operators)
        object.__setattr__(self, "sign", self.sign * sign)

    @classmethod
    def from_indices(cls, indices: Sequence[int], sign: int = 1) -> "HermitianFermionTerm":
        """
        Build a term from a flat index list.

        The first half of ``indices`` are raising operators and the second half
        lowering operators, so ``[0, 1, 1, 0]`` is a†_0 a†_1 a_1 a_0.
        """
        if len(indices) % 2:
            raise ValueError(f"Need an even number of indices, got {list(indices)}")
        half = len(indices) // 2
        operators = [LadderOperator(k < half, int(index)) for k, index in enumerate(indices)]
        return cls(tuple(operators), sign)

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(op.index for op in self.operators)

    def support(self) -> Tuple[int, ...]:
        return tuple(sorted(set(self.indices)))

    def adjoint(self) -> "HermitianFermionTerm":
        return HermitianFermionTerm(tuple(op.dag() for op in reversed(self.operators)), self.sign)

    @property
    def is_self_adjoint(self) -> bool:
        adjoint, _ = canonical_order(tuple(op.dag() for op in reversed(self.operators)))
        return adjoint == self.operators

    def reindexed(self, positions: Mapping[int, int]) -> Tuple["HermitianFermionTerm", int]:
        """
        Return this term expressed in a new Jordan-Wigner ordering.

        Parameters
        ----------
        positions : mapping
            Map from site orbitals to their positions in the new ordering. Must
            cover every orbital in ``support()``.

        Returns
        -------
        term : HermitianFermionTerm
            Re-indexed term in canonical order, with unit sign.
        sign : int
            Sign picked up by re-indexing, including this term's own sign.
        """
        moved = HermitianFermionTerm(
            tuple(LadderOperator(op.raising, positions[op.index]) for op in self.operators)
        )
        return HermitianFermionTerm(moved.operators), self.sign * moved.sign

    def to_qobj(self, n_sites: int) -> qutip.Qobj:
        """
        Jordan-Wigner matrix of the term on ``n_sites`` modes.

        Returns ``sign * (T + T†)``, or ``sign * T`` if T is self-adjoint.
        """
        if self.operators and n_sites <= max(self.indices):
            raise ValueError(f"Term {self} needs more than {n_sites} sites")
        product = qutip.qeye([2] * n_sites)
        for op in self.operators:
            ladder = qutip.fcreate(n_sites, op.index) if op.raising else qutip.fdestroy(n_sites, op.index)
            product = product * ladder
        if not self.is_self_adjoint:
            product = product + product.dag()
        return self.sign * product

    def __repr__(self):
        signed = "" if self.sign == 1 else ", sign=-1"
        return f"HermitianFermionTerm({list(self.indices)}{signed})"

