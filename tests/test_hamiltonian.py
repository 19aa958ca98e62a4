"""Tests for the FermionHamiltonian container."""

import pytest

from fermionic_swap import FermionHamiltonian, HermitianFermionTerm, TermType, dense_hopping_hamiltonian
from fermionic_swap.hamiltonian import classify_term


@pytest.mark.parametrize(
    "indices, term_type",
    [
        ([], TermType.IDENTITY),
        ([2, 2], TermType.PP),
        ([0, 3], TermType.PQ),
        ([0, 1, 1, 0], TermType.PQQP),
        ([0, 1, 1, 2], TermType.PQQR),
        ([0, 1, 2, 3], TermType.PQRS),
        ([0, 1, 2, 3, 4, 5], TermType.OTHER),
    ],
)
def test_classify_term(term, indices, term_type):
    assert classify_term(term(indices)) == term_type


class TestFermionHamiltonian:

    def test_empty(self):
        H = FermionHamiltonian()
        assert len(H) == 0
        assert list(H) == []
        assert H.num_orbitals == 0

    def test_groups_by_type_in_insertion_order(self, term):
        H = FermionHamiltonian()
        H.add(term([0, 1]), 1.0)
        H.add(term([0, 1, 1, 0]), 2.0)
        H.add(term([1, 2]), 3.0)
        assert list(H.terms) == [TermType.PQ, TermType.PQQP]
        assert [c for _, c in H] == [1.0, 3.0, 2.0]
        assert H.num_orbitals == 3

    def test_same_term_accumulates(self, term):
        H = FermionHamiltonian()
        H.add(term([0, 1]), 1.0)
        H.add(term([1, 0]), 0.5)
        assert list(H) == [(term([0, 1]), 1.5)]

    def test_negative_sign_folds_into_coefficient(self, term):
        H = FermionHamiltonian()
        H.add(term([0, 1, 2, 3]), 2.0)
        (stored, coefficient), = list(H)
        assert stored.sign == 1
        assert stored.indices == (0, 1, 3, 2)
        assert coefficient == -2.0

    def test_dense_hopping(self):
        H = dense_hopping_hamiltonian(4, weights=lambda i, j: 10 * i + j)
        assert len(H) == 6
        assert dict((t.indices, c) for t, c in H)[(1, 3)] == 13
        assert all(isinstance(t, HermitianFermionTerm) for t, _ in H)
