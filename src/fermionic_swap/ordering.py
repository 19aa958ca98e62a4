"""
Ordering Model
==============

An *ordering* is a position-indexed sequence of site-orbital indices: entry
``i`` names the orbital sitting at position ``i`` of the Jordan-Wigner chain.
Its inverse, the *position dictionary*, maps each orbital back to its position.

Swap layers act on positions, not orbitals: the swap ``(i, i + 1)`` exchanges
whatever orbitals currently occupy those two positions.

Example
-------
>>> positions_of([2, 0, 1])
{2: 0, 0: 1, 1: 2}
>>> apply_swap_layer([0, 1, 2, 3], [(0, 1), (2, 3)])
[1, 0, 3, 2]
"""

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidOrdering

Swap = Tuple[int, int]
SwapLayer = List[Swap]
SwapNetwork = List[SwapLayer]


def validate_ordering(ordering: Sequence[int], size: Optional[int] = None) -> np.ndarray:
    """
    Check that ``ordering`` is a permutation of distinct non-negative orbitals.

    Parameters
    ----------
    ordering : sequence of int
        Position-indexed orbital indices.
    size : int, optional
        Required length. Not checked if None.

    Returns
    -------
    np.ndarray
        The ordering as a 1-D integer array.

    Raises
    ------
    InvalidOrdering
        If the ordering is not one-dimensional, holds non-integer, negative or
        repeated entries, or has the wrong length.
    """
    order = np.asarray(ordering)
    if order.ndim != 1:
        raise InvalidOrdering(f"Ordering must be one-dimensional, got shape {order.shape}")
    if order.size == 0:
        order = order.astype(int)
    elif not np.issubdtype(order.dtype, np.integer):
        raise InvalidOrdering(f"Ordering must hold integer orbital indices, got dtype {order.dtype}")
    if size is not None and len(order) != size:
        raise InvalidOrdering(f"Ordering has {len(order)} positions, expected {size}")
    if np.any(order < 0):
        raise InvalidOrdering(f"Orbital indices must be >= 0, got {order.tolist()}")
    if len(np.unique(order)) != len(order):
        raise InvalidOrdering(f"Ordering repeats an orbital: {order.tolist()}")
    return order


def positions_of(ordering: Sequence[int]) -> Dict[int, int]:
    """
    Return a map from site-orbital indices to positions.

    Parameters
    ----------
    ordering : sequence of int
        Position-indexed array of site-orbital indices.

    Returns
    -------
    dict
        ``{orbital: position}`` for every entry of ``ordering``.
    """
    validate_ordering(ordering)
    return {int(orbital): position for position, orbital in enumerate(ordering)}


def _check_layer(layer: Sequence[Swap], num_positions: int) -> None:
    touched = set()
    for i, j in layer:
        if j != i + 1:
            raise InvalidOrdering(f"Swap ({i}, {j}) does not exchange adjacent positions")
        if i < 0 or j >= num_positions:
            raise InvalidOrdering(f"Swap ({i}, {j}) is outside positions [0, {num_positions})")
        if i in touched or j in touched:
            raise InvalidOrdering(f"Swap ({i}, {j}) overlaps another swap in the same layer")
        touched.update((i, j))


def apply_swap_layer(ordering: Sequence[int], layer: Sequence[Swap]) -> List[int]:
    """
    Apply one layer of disjoint adjacent swaps, returning the new ordering.

    The input ordering is left untouched.
    """
    new_order = [int(o) for o in ordering]
    _check_layer(layer, len(new_order))
    for i, j in layer:
        new_order[i], new_order[j] = new_order[j], new_order[i]
    return new_order


def apply_swap_network(ordering: Sequence[int], network: Sequence[Sequence[Swap]]) -> List[int]:
    """Apply every layer of ``network`` in sequence, returning the final ordering."""
    order = [int(o) for o in ordering]
    for layer in network:
        order = apply_swap_layer(order, layer)
    return order
