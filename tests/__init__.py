# Tests for fermionic_swap
#
# Test organization mirrors source structure:
#   - test_ordering: position maps, swap-layer application
#   - test_swap_network: odd-even sort and reversal networks
#   - test_terms, test_hamiltonian: term algebra and Hamiltonian container
#   - test_scheduler, test_trotter: term scheduling and Trotter-step planning
#   - test_visualization: plotting
#
# Running tests:
#   pytest tests/
