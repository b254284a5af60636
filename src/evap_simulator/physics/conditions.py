"""
Simulation Conditions
=====================

The record handed to the time integrator: species, initial test-particle
ensemble, the composite acceleration and potential, and the loss model.

One record describes one simulation run. It is read-only configuration: the
integrator updates the CONTENTS of ``positions`` and ``velocities`` in
place but never replaces the record.

SHAPE RULES
-----------

positions and velocities are (3, N) float arrays:

1. Both must have exactly 3 rows (x, y, z)    -> ComponentCountError
2. Both must describe the same N particles    -> DimensionMismatchError

Both errors are ShapeMismatchError (a ValueError) and are raised at
construction; fix the inputs and construct again.
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .atom_database import AtomSpecies
from .evaporation import no_evap


class ShapeMismatchError(ValueError):
    """Position and velocity arrays do not describe a valid (3, N) ensemble."""


class ComponentCountError(ShapeMismatchError):
    """Position or velocity array does not have three spatial components."""


class DimensionMismatchError(ShapeMismatchError):
    """Position and velocity arrays hold different numbers of particles."""


@dataclass(frozen=True)
class SimulationConditions:
    """
    Configuration of one evaporation simulation run.

    Attributes
    ----------
    species : AtomSpecies
        Atomic species of the cloud
    f_scale : float
        Number of real atoms represented by each test particle
    positions : ndarray, shape (3, N)
        Initial test-particle positions (m)
    velocities : ndarray, shape (3, N)
        Initial test-particle velocities (m/s)
    acceleration : callable
        f(positions, species, t[, output]) -> (3, N) acceleration (m/s²)
    potential : callable
        f(positions, species, t[, output]) -> (N,) potential energy (J)
    three_body_loss : float
        Three-body loss coefficient (m⁶/s)
    evaporate : callable
        Evaporation policy f(positions, velocities, conditions, t) -> (N,)
    background_lifetime : float
        Background-gas loss time constant (s); inf disables the loss
    """
    species: AtomSpecies
    f_scale: float
    positions: np.ndarray
    velocities: np.ndarray
    acceleration: Callable
    potential: Callable
    three_body_loss: float = 0.0
    evaporate: Callable = no_evap
    background_lifetime: float = np.inf

    def __post_init__(self):
        positions = np.asarray(self.positions, dtype=float)
        velocities = np.asarray(self.velocities, dtype=float)

        for name, array in (("Position", positions), ("Velocity", velocities)):
            if array.ndim != 2 or array.shape[0] != 3:
                raise ComponentCountError(
                    f"{name} array must have three components, shape (3, N); "
                    f"got {array.shape}"
                )
        if positions.shape != velocities.shape:
            raise DimensionMismatchError(
                f"Velocity and position arrays must have the same size; "
                f"got {velocities.shape} and {positions.shape}"
            )

        object.__setattr__(self, 'positions', positions)
        object.__setattr__(self, 'velocities', velocities)

    @property
    def n_test(self) -> int:
        """Number of test particles N."""
        return self.positions.shape[1]

    @property
    def n_real(self) -> float:
        """Number of real atoms represented, f_scale × N."""
        return self.f_scale * self.n_test

    def summary(self) -> str:
        """Generate a formatted summary table."""
        lines = [
            "=" * 50,
            "SIMULATION CONDITIONS",
            "=" * 50,
            f"{'Species':<28} {self.species.name}",
            f"{'Test particles':<28} {self.n_test}",
            f"{'Real atoms per test particle':<28} {self.f_scale:.4g}",
            f"{'Real atoms':<28} {self.n_real:.4g}",
            f"{'Three-body loss (m^6/s)':<28} {self.three_body_loss:.4g}",
            f"{'Background lifetime (s)':<28} {self.background_lifetime:.4g}",
            "=" * 50,
        ]
        return "\n".join(lines)


__all__ = [
    "ShapeMismatchError",
    "ComponentCountError",
    "DimensionMismatchError",
    "SimulationConditions",
]
