"""
Fermion Hamiltonian Container
=============================

Collects `HermitianFermionTerm` objects with their real coefficients, grouped
by term type. Iterating a `FermionHamiltonian` yields ``(term, coefficient)``
pairs, which is all the Trotter-step planner needs.

TERM TYPES
----------

    IDENTITY   no ladder operators
    PP         a†_p a_p                      number operator
    PQ         a†_p a_q                      hopping
    PQQP       a†_p a†_q a_q a_p             Coulomb / exchange
    PQQR       a†_p a†_q a_q a_r             hopping with one spectator
    PQRS       a†_p a†_q a_r a_s             general two-body
    OTHER      anything else
"""

from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .terms import HermitianFermionTerm


class TermType(Enum):
    IDENTITY = "Identity"
    PP = "PP"
    PQ = "PQ"
    PQQP = "PQQP"
    PQQR = "PQQR"
    PQRS = "PQRS"
    OTHER = "Other"


def classify_term(term: HermitianFermionTerm) -> TermType:
    """Return the `TermType` of a term from its operator count and distinct orbitals."""
    num_operators = len(term.operators)
    num_distinct = len(term.support())
    if num_operators == 0:
        return TermType.IDENTITY
    if num_operators == 2:
        return TermType.PP if num_distinct == 1 else TermType.PQ
    if num_operators == 4:
        return {2: TermType.PQQP, 3: TermType.PQQR, 4: TermType.PQRS}.get(num_distinct, TermType.OTHER)
    return TermType.OTHER


class FermionHamiltonian:
    """
    A sum of Hermitian fermion terms with real coefficients.

    Terms are stored with unit sign; a term built with sign -1 is added with
    its coefficient negated. Adding the same term twice accumulates its
    coefficient.

    Example
    -------
    >>> H = FermionHamiltonian()
    >>> H.add(HermitianFermionTerm.from_indices([0, 1]), 0.5)
    >>> H.add(HermitianFermionTerm.from_indices([1, 1]), -1.0)
    >>> len(H), H.num_orbitals
    (2, 2)
    """

    def __init__(self):
        self._terms: Dict[TermType, Dict[HermitianFermionTerm, float]] = {}

    def add(self, term: HermitianFermionTerm, coefficient: float = 1.0) -> None:
        unit_term = HermitianFermionTerm(term.operators)
        bucket = self._terms.setdefault(classify_term(unit_term), {})
        bucket[unit_term] = bucket.get(unit_term, 0.0) + term.sign * coefficient

    @property
    def terms(self) -> Dict[TermType, List[Tuple[HermitianFermionTerm, float]]]:
        """Term type -> list of ``(term, coefficient)`` in insertion order."""
        return {term_type: list(bucket.items()) for term_type, bucket in self._terms.items()}

    @property
    def num_orbitals(self) -> int:
        """One more than the largest orbital index used, or 0 if empty."""
        indices = [max(term.support()) for term, _ in self if term.operators]
        return max(indices) + 1 if indices else 0

    def __iter__(self) -> Iterator[Tuple[HermitianFermionTerm, float]]:
        for bucket in self._terms.values():
            yield from bucket.items()

    def __len__(self):
        return sum(len(bucket) for bucket in self._terms.values())

    def __repr__(self):
        counts = ", ".join(f"{t.value}: {len(b)}" for t, b in self._terms.items())
        return f"FermionHamiltonian({counts})"


def dense_hopping_hamiltonian(
    num_sites: int,
    weights: Optional[Callable[[int, int], float]] = None,
) -> FermionHamiltonian:
    """
    Hopping term a†_i a_j for every pair ``i < j`` of ``num_sites`` orbitals.

    Parameters
    ----------
    num_sites : int
        Number of site orbitals.
    weights : callable, optional
        ``weights(i, j)`` gives the coefficient of the (i, j) term. All
        coefficients are 1.0 if None.
    """
    H = FermionHamiltonian()
    for i in range(num_sites):
        for j in range(i + 1, num_sites):
            coefficient = 1.0 if weights is None else weights(i, j)
            H.add(HermitianFermionTerm.from_indices([i, j]), coefficient)
    return H
