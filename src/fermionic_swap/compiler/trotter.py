"""
Trotter-Step Planning
=====================

Turns a Hamiltonian and a swap network into an *operator network*: the list of
local terms to evolve before the first swap layer and after each one.

    layer 0          terms local in the start ordering
    swap layer 1
    layer 1          terms local after swap layer 1
    ...
    swap layer k
    layer k          terms local in the end ordering

The operator network is therefore always one layer longer than the swap
network. Every term is evolved exactly once, in the first layer where its
orbitals are contiguous; terms that never become contiguous are reported on
the result (see `TrotterStepConfig.on_unscheduled`).
"""

import warnings
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from ..configurations import TrotterStepConfig
from ..errors import UnscheduledTermError, UnscheduledTermWarning
from ..ordering import SwapLayer, apply_swap_layer, validate_ordering
from .scheduler import OperatorNetwork, ScheduledTerm, TermPool, schedule_layer


@dataclass
class TrotterStepResult:
    """
    Output of `trotter_step`.

    Attributes
    ----------
    operator_network : list of list of (term, float)
        Local terms to evolve, one layer per boundary of the swap network.
    end_order : list of int
        Jordan-Wigner ordering after every swap layer has been applied.
    unscheduled : list of (term, float)
        Terms that never became local, with their unscaled coefficients.
    """
    operator_network: OperatorNetwork
    end_order: List[int]
    unscheduled: List[ScheduledTerm] = field(default_factory=list)

    @property
    def num_unscheduled(self) -> int:
        return len(self.unscheduled)


def trotter_step(
    terms: Iterable[ScheduledTerm],
    swap_network: Sequence[SwapLayer],
    start_order: Sequence[int],
    config: Optional[TrotterStepConfig] = None,
) -> TrotterStepResult:
    """
    Plan a Trotter step that evolves terms as the swap network makes them local.

    Parameters
    ----------
    terms : iterable of (term, float)
        Hamiltonian terms with coefficients, e.g. a `FermionHamiltonian`.
    swap_network : list of list of (int, int)
        Swap layers to apply, in order.
    start_order : sequence of int
        Position-indexed orbital indices before any swap is applied.
    config : TrotterStepConfig, optional
        Evolution time and unscheduled-term policy. Defaults to
        ``TrotterStepConfig()``.

    Returns
    -------
    TrotterStepResult

    Raises
    ------
    InvalidOrdering
        If ``start_order`` is not a permutation or a swap layer is malformed.
    UnscheduledTermError
        If terms remain and ``config.on_unscheduled == "raise"``.
    """
    config = config or TrotterStepConfig()

    # every layer is checked before any term is touched
    orderings = [validate_ordering(start_order).tolist()]
    for layer in swap_network:
        orderings.append(apply_swap_layer(orderings[-1], layer))

    pool = TermPool.from_terms(terms)
    op_network = []
    for ordering in orderings:
        op_network.append(schedule_layer(pool, ordering, config.time))
        if config.verbose:
            print(f"  order {ordering}: {len(op_network[-1])} term(s)")

    end_order = orderings[-1]
    unscheduled = pool.remaining()
    if unscheduled:
        if config.on_unscheduled == "raise":
            raise UnscheduledTermError(unscheduled)
        if config.on_unscheduled == "warn":
            warnings.warn(
                f"{len(unscheduled)} term(s) never became local under the swap network: "
                f"{[term for term, _ in unscheduled]}",
                UnscheduledTermWarning,
                stacklevel=2,
            )

    return TrotterStepResult(op_network, end_order, unscheduled)


def build_operator_network(
    terms: Iterable[ScheduledTerm],
    swap_network: Sequence[SwapLayer],
    start_order: Sequence[int],
    time: float = 1.0,
) -> Tuple[OperatorNetwork, List[int]]:
    """
    Return ``(operator_network, end_order)`` for a Trotter step.

    Terms that never become local are dropped silently; use `trotter_step`
    to inspect or reject them.

    Example
    -------
    >>> from fermionic_swap.hamiltonian import dense_hopping_hamiltonian
    >>> from fermionic_swap.compiler.swap_network import build_reversal_network
    >>> network, end_order = build_operator_network(
    ...     dense_hopping_hamiltonian(3), build_reversal_network(3), [0, 1, 2])
    >>> [len(layer) for layer in network], end_order
    ([2, 1, 0, 0], [2, 1, 0])
    """
    result = trotter_step(terms, swap_network, start_order, TrotterStepConfig(time=time))
    return result.operator_network, result.end_order
