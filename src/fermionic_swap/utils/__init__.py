# Utility Functions
#
# Submodules:
#   - visualization: swap-network and operator-network plots

__all__ = []
