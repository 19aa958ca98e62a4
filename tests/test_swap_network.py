"""Tests for odd-even transposition swap networks."""

import itertools

import numpy as np
import pytest

from fermionic_swap import (
    InvalidOrdering,
    MismatchedOrbitalSet,
    apply_swap_network,
    build_reversal_network,
    build_swap_network,
)
from fermionic_swap.compiler.swap_network import even_odd_swap_layer

EVEN_7 = [(0, 1), (2, 3), (4, 5)]
ODD_7 = [(1, 2), (3, 4), (5, 6)]
EVEN_6 = [(0, 1), (2, 3), (4, 5)]
ODD_6 = [(1, 2), (3, 4)]


# =============================================================================
# REFERENCE NETWORKS
# =============================================================================

@pytest.mark.parametrize(
    "start_order, end_order, expected",
    [
        ([], [], []),
        ([0, 1], [0, 1], []),
        ([1, 0], [0, 1], [[(0, 1)]]),
        ([1, 2], [2, 1], [[(0, 1)]]),
        ([0, 1, 2], [0, 1, 2], []),
        ([0, 1, 2, 3], [0, 1, 2, 3], []),
        ([0, 1, 2, 3, 4], [0, 1, 2, 3, 4], []),
        ([0, 1, 2], [2, 1, 0], [[(0, 1)], [(1, 2)], [(0, 1)]]),
        # first even pass is trivial
        ([0, 1, 2], [0, 2, 1], [[(1, 2)]]),
        # move one orbital across the chain
        (
            [0, 1, 2, 3, 4, 5, 6],
            [6, 0, 1, 2, 3, 4, 5],
            [[(5, 6)], [(4, 5)], [(3, 4)], [(2, 3)], [(1, 2)], [(0, 1)]],
        ),
        (
            [0, 1, 2, 3, 4, 5, 6],
            [6, 5, 4, 3, 2, 1, 0],
            [EVEN_7, ODD_7, EVEN_7, ODD_7, EVEN_7, ODD_7, EVEN_7],
        ),
        (
            [0, 1, 2, 3, 4, 5],
            [5, 4, 3, 2, 1, 0],
            [EVEN_6, ODD_6, EVEN_6, ODD_6, EVEN_6, ODD_6],
        ),
    ],
)
def test_build_swap_network(start_order, end_order, expected):
    assert build_swap_network(start_order, end_order) == expected


@pytest.mark.parametrize(
    "num_sites, expected",
    [
        (0, []),
        (1, []),
        (2, [[(0, 1)]]),
        (3, [[(0, 1)], [(1, 2)], [(0, 1)]]),
        (6, [EVEN_6, ODD_6, EVEN_6, ODD_6, EVEN_6, ODD_6]),
        (7, [EVEN_7, ODD_7, EVEN_7, ODD_7, EVEN_7, ODD_7, EVEN_7]),
    ],
)
def test_build_reversal_network(num_sites, expected):
    assert build_reversal_network(num_sites) == expected


# =============================================================================
# NETWORK PROPERTIES
# =============================================================================

@pytest.fixture(scope="module")
def random_pairs():
    rng = np.random.default_rng(20221)
    pairs = []
    for n in range(1, 9):
        for _ in range(5):
            orbitals = rng.choice(20, size=n, replace=False)
            pairs.append((rng.permutation(orbitals).tolist(), rng.permutation(orbitals).tolist()))
    return pairs


class TestSwapNetworkProperties:

    def test_network_reaches_end_order(self, random_pairs):
        for start_order, end_order in random_pairs:
            network = build_swap_network(start_order, end_order)
            assert apply_swap_network(start_order, network) == end_order

    def test_layers_are_disjoint_and_adjacent(self, random_pairs):
        for start_order, end_order in random_pairs:
            for layer in build_swap_network(start_order, end_order):
                assert layer
                touched = [p for swap in layer for p in swap]
                assert len(touched) == len(set(touched))
                assert all(j == i + 1 for i, j in layer)

    def test_total_swaps_equal_inversions(self, random_pairs):
        for start_order, end_order in random_pairs:
            target = {o: p for p, o in enumerate(end_order)}
            ranks = [target[o] for o in start_order]
            inversions = sum(1 for a, b in itertools.combinations(ranks, 2) if a > b)
            network = build_swap_network(start_order, end_order)
            assert sum(len(layer) for layer in network) == inversions

    def test_layers_alternate_parity(self, random_pairs):
        for start_order, end_order in random_pairs:
            network = build_swap_network(start_order, end_order)
            parities = [layer[0][0] % 2 for layer in network]
            assert all(a != b for a, b in zip(parities, parities[1:]))

    @pytest.mark.parametrize("ordering", [[0], [3, 1, 2], list(range(8))[::-1]])
    def test_equal_orderings_give_empty_network(self, ordering):
        assert build_swap_network(ordering, ordering) == []

    @pytest.mark.parametrize("num_sites", range(9))
    def test_reversal_matches_generic_builder(self, num_sites):
        start_order = list(range(num_sites))
        assert build_reversal_network(num_sites) == build_swap_network(start_order, start_order[::-1])

    @pytest.mark.parametrize("num_sites", range(2, 9))
    def test_reversal_makes_every_pair_adjacent(self, num_sites):
        order = list(range(num_sites))
        adjacent = {frozenset(pair) for pair in zip(order, order[1:])}
        for layer in build_reversal_network(num_sites):
            for i, j in layer:
                order[i], order[j] = order[j], order[i]
            adjacent.update(frozenset(pair) for pair in zip(order, order[1:]))
        assert len(adjacent) == num_sites * (num_sites - 1) // 2


class TestEvenOddSwapLayer:

    def test_even_pass(self):
        desired = {0: 3, 1: 2, 2: 1, 3: 0}
        new_order, swaps = even_odd_swap_layer([0, 1, 2, 3], desired, True)
        assert new_order == [1, 0, 3, 2]
        assert swaps == [(0, 1), (2, 3)]

    def test_odd_pass(self):
        desired = {0: 3, 1: 2, 2: 1, 3: 0}
        new_order, swaps = even_odd_swap_layer([0, 1, 2, 3], desired, False)
        assert new_order == [0, 2, 1, 3]
        assert swaps == [(1, 2)]

    def test_sorted_pass_is_empty(self):
        new_order, swaps = even_odd_swap_layer([0, 1, 2], {0: 0, 1: 1, 2: 2}, True)
        assert new_order == [0, 1, 2]
        assert swaps == []


class TestSwapNetworkErrors:

    def test_mismatched_orbitals(self):
        with pytest.raises(MismatchedOrbitalSet):
            build_swap_network([0, 1, 2], [0, 1, 3])

    def test_mismatched_sizes(self):
        with pytest.raises(MismatchedOrbitalSet):
            build_swap_network([0, 1], [0, 1, 2])

    def test_repeated_orbital(self):
        with pytest.raises(InvalidOrdering):
            build_swap_network([0, 0, 1], [0, 1, 0])

    def test_negative_num_sites(self):
        with pytest.raises(InvalidOrdering):
            build_reversal_network(-1)

    def test_verbose_prints_layers(self, capsys):
        build_swap_network([1, 0], [0, 1], verbose=True)
        assert "layer 1" in capsys.readouterr().out
