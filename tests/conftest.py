import matplotlib
import pytest

from fermionic_swap import HermitianFermionTerm

matplotlib.use("Agg")


@pytest.fixture
def term():
    """Shorthand for building a HermitianFermionTerm from a flat index list."""
    return HermitianFermionTerm.from_indices
