"""
Swap Network Generation
=======================

Builds networks of adjacent transpositions that carry one Jordan-Wigner
ordering of site orbitals into another.

ODD-EVEN TRANSPOSITION SORT
---------------------------

Each pass compares disjoint neighbouring pairs of positions, alternating
between *even* passes over (0,1), (2,3), ... and *odd* passes over
(1,2), (3,4), .... A pair is swapped when the left orbital must end up to the
right of its neighbour. Every pass is one layer of disjoint swaps, so a pass
maps directly onto one round of parallel fermionic swap gates.

The sort uses the minimal number of transpositions and at most one layer more
than the minimal circuit depth. A greedy circuit-packing step can absorb the
extra layer.

DENSE REVERSAL
--------------

Fully reversing the chain makes every pair of orbitals adjacent at least once,
which is what a Trotter step of a dense one-body (or pairwise) Hamiltonian
needs: see `build_reversal_network()`.
"""

from typing import Dict, List, Sequence, Tuple

from ..errors import InvalidOrdering, MismatchedOrbitalSet
from ..ordering import SwapLayer, SwapNetwork, positions_of, validate_ordering


def even_odd_swap_layer(
    start_order: Sequence[int],
    desired_positions: Dict[int, int],
    even_parity: bool,
) -> Tuple[List[int], SwapLayer]:
    """
    Return one pass of the odd-even sort and the ordering it produces.

    Parameters
    ----------
    start_order : sequence of int
        Position-indexed orbital indices before the pass.
    desired_positions : dict
        Map from orbitals to their final positions.
    even_parity : bool
        True for swaps (0,1), (2,3), ...; False for (1,2), (3,4), ...

    Returns
    -------
    next_order : list of int
        Ordering after the pass.
    layer : list of (int, int)
        Mutually disjoint ``(i, i + 1)`` transpositions applied by the pass.
    """
    start = 0 if even_parity else 1
    new_order = list(start_order)
    swaps = []

    for i in range(start, len(start_order) - 1, 2):
        left, right = start_order[i], start_order[i + 1]
        if desired_positions[left] > desired_positions[right]:
            new_order[i], new_order[i + 1] = right, left
            swaps.append((i, i + 1))

    return new_order, swaps


def build_swap_network(
    start_order: Sequence[int],
    end_order: Sequence[int],
    verbose: bool = False,
) -> SwapNetwork:
    """
    Return a network of swaps converting ``start_order`` into ``end_order``.

    Runs odd-even transposition sort starting with an even pass. The loop ends
    on the first pass without swaps once any swap has happened. If the very
    first pass is empty, the opposite parity is probed once before the two
    orderings are declared equal.

    Parameters
    ----------
    start_order : sequence of int
        Position-indexed orbital indices, indicating their starting order.
    end_order : sequence of int
        Position-indexed orbital indices, indicating their desired order.
    verbose : bool
        If True, print the ordering after every productive pass.

    Returns
    -------
    list of list of (int, int)
        Layers of disjoint ``(n, n + 1)`` transpositions.

    Raises
    ------
    InvalidOrdering
        If either argument is not a permutation.
    MismatchedOrbitalSet
        If the orderings hold different orbitals.

    Example
    -------
    >>> build_swap_network([0, 1, 2], [2, 1, 0])
    [[(0, 1)], [(1, 2)], [(0, 1)]]
    """
    start = validate_ordering(start_order)
    end = validate_ordering(end_order)
    if set(start.tolist()) != set(end.tolist()):
        raise MismatchedOrbitalSet(
            f"Start ordering {start.tolist()} and end ordering {end.tolist()} "
            f"reference different orbitals"
        )

    result = []
    this_order = start.tolist()
    desired_positions = positions_of(end.tolist())

    at_least_once = False
    even_parity = True
    while True:
        this_order, swaps = even_odd_swap_layer(this_order, desired_positions, even_parity)
        if swaps:
            result.append(swaps)
            even_parity = not even_parity
            at_least_once = True
            if verbose:
                print(f"  layer {len(result)}: {swaps} -> order {this_order}")
        elif at_least_once:
            break
        else:
            # First pass was empty: try the other parity before giving up.
            at_least_once = True
            even_parity = not even_parity

    return result


def build_reversal_network(num_sites: int) -> SwapNetwork:
    """
    Return a swap network that fully reverses ``num_sites`` site orbitals.

    Every pair of orbitals is adjacent at some point of the network, so it is
    suitable for a Trotter step of a dense one-body Hamiltonian. The step can
    be completed without the last two swap layers, but that optimization is
    not applied here.

    Parameters
    ----------
    num_sites : int
        Number of site orbitals.

    Returns
    -------
    list of list of (int, int)
        Network taking ``[0, ..., n-1]`` to ``[n-1, ..., 0]``.
    """
    if num_sites < 0:
        raise InvalidOrdering(f"num_sites must be >= 0, got {num_sites}")
    start_order = list(range(num_sites))
    return build_swap_network(start_order, start_order[::-1])
