"""
Configuration Dataclasses
=========================

Parameter groups for Trotter-step planning, so that callers pass one object
instead of a growing list of keyword arguments.

- `TrotterStepConfig`: evolution time, handling of terms that never become
  local, progress output.
"""

from dataclasses import dataclass

UNSCHEDULED_POLICIES = ("ignore", "warn", "raise")


@dataclass
class TrotterStepConfig:
    """
    Settings for `trotter_step`.

    Attributes
    ----------
    time : float
        Evolution time applied to every Hamiltonian term. Each scheduled
        coefficient is ``time * coefficient`` (times the re-indexing sign).

    on_unscheduled : str
        What to do with terms still pending after the last swap layer, which
        happens when a term's orbitals never become contiguous:
        - "ignore": drop them silently (they stay available on the result)
        - "warn": emit an `UnscheduledTermWarning`
        - "raise": raise `UnscheduledTermError`

    verbose : bool
        Print the ordering and the number of scheduled terms per layer.

    Example
    -------
    >>> config = TrotterStepConfig(time=0.1, on_unscheduled="warn")
    """
    time: float = 1.0
    on_unscheduled: str = "ignore"
    verbose: bool = False

    def __post_init__(self):
        if self.on_unscheduled not in UNSCHEDULED_POLICIES:
            raise ValueError(
                f"Unknown on_unscheduled policy: {self.on_unscheduled}. "
                f"Use one of {UNSCHEDULED_POLICIES}"
            )
