"""
Errors and Warnings
===================

Exception and warning types raised by the swap-network and scheduling code.

All errors derive from ``ValueError``: each one signals an argument that can
never succeed, detected before any network is built.
"""


class InvalidOrdering(ValueError):
    """An ordering is not a permutation of the expected size, or a swap layer is malformed."""


class MismatchedOrbitalSet(ValueError):
    """Start and end orderings reference different sets of orbitals."""


class UnscheduledTermError(ValueError):
    """Terms were left in the pool after the last swap layer was processed."""

    def __init__(self, unscheduled):
        self.unscheduled = list(unscheduled)
        super().__init__(
            f"{len(self.unscheduled)} term(s) never became local under the swap network"
        )


class UnscheduledTermWarning(UserWarning):
    """Terms were left in the pool after the last swap layer was processed."""
