# Fermionic Swap: Trotter-step planning with fermionic swap networks
#
# Evolving a Hamiltonian under the Jordan-Wigner encoding is cheap only for
# terms whose orbitals sit next to each other in the chain. A fermionic swap
# network reorders the chain layer by layer; between layers, every term that
# has become local is evolved.
#
# Layout:
#   ordering: position <-> orbital maps, applying swap layers
#   terms: HermitianFermionTerm and the ReindexableTerm interface
#   hamiltonian: FermionHamiltonian container
#   configurations: TrotterStepConfig
#   compiler: swap networks, term scheduling, Trotter-step planning
#   utils: plotting

__version__ = "0.1.0"

from .errors import (
    InvalidOrdering,
    MismatchedOrbitalSet,
    UnscheduledTermError,
    UnscheduledTermWarning,
)
from .ordering import apply_swap_layer, apply_swap_network, positions_of, validate_ordering
from .terms import HermitianFermionTerm, LadderOperator, ReindexableTerm
from .hamiltonian import FermionHamiltonian, TermType, dense_hopping_hamiltonian
from .configurations import TrotterStepConfig
from .compiler import (
    TermPool,
    TrotterStepResult,
    build_operator_network,
    build_reversal_network,
    build_swap_network,
    schedule_layer,
    trotter_step,
)

__all__ = [
    "InvalidOrdering",
    "MismatchedOrbitalSet",
    "UnscheduledTermError",
    "UnscheduledTermWarning",
    "apply_swap_layer",
    "apply_swap_network",
    "positions_of",
    "validate_ordering",
    "HermitianFermionTerm",
    "LadderOperator",
    "ReindexableTerm",
    "FermionHamiltonian",
    "TermType",
    "dense_hopping_hamiltonian",
    "TrotterStepConfig",
    "TermPool",
    "TrotterStepResult",
    "build_operator_network",
    "build_reversal_network",
    "build_swap_network",
    "schedule_layer",
    "trotter_step",
]
