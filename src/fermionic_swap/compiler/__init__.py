# Swap-Network Compiler
#
# Plans fermionic-swap Trotter steps on a linear Jordan-Wigner chain.
#
# Stages:
#   1. Swap network (odd-even transposition sort between two orderings)
#   2. Term scheduling (greedy packing of local terms into a layer)
#   3. Trotter step (one operator layer per swap-network boundary)
#
# Submodules:
#   - swap_network: build_swap_network, build_reversal_network
#   - scheduler: TermPool, schedule_layer
#   - trotter: trotter_step, build_operator_network

from .swap_network import build_reversal_network, build_swap_network, even_odd_swap_layer
from .scheduler import TermPool, schedule_layer, support_key
from .trotter import TrotterStepResult, build_operator_network, trotter_step

__all__ = [
    "build_swap_network",
    "build_reversal_network",
    "even_odd_swap_layer",
    "TermPool",
    "schedule_layer",
    "support_key",
    "TrotterStepResult",
    "trotter_step",
    "build_operator_network",
]
