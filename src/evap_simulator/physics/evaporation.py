"""
Evaporation Policies
====================

An evaporation policy decides which test particles are removed at a given
step. Every policy has the same signature

    policy(positions, velocities, conditions, t) -> probabilities, shape (N,)

and is stored on SimulationConditions.evaporate. The integrator removes
particle i with probability probabilities[i].

The policies here are deterministic thresholds: every probability is
exactly 0.0 (keep) or 1.0 (remove).

- energy_evap(depth):  remove if the potential energy exceeds depth(t).
  The potential is the trap potential, POSITIVE and equal to the local trap
  depth (see fields.py), so a particle is "too hot" when its potential is
  above the threshold.
- radius_evap(radius): remove if |position| > radius(t). A particle exactly
  at the radius is kept.
- no_evap:             never remove anything (the default).

Thresholds may be constants or functions of time, e.g. an exponential ramp
of the trap depth during forced evaporation.
"""

from typing import Callable, Optional

import numpy as np

from .time_dependence import time_parametrize


def no_evap(positions, *args) -> np.ndarray:
    """No evaporation: zero removal probability for every particle."""
    return np.zeros(np.shape(positions)[1], dtype=float)


def energy_evap(depth, potential: Optional[Callable] = None) -> Callable:
    """
    Energy-threshold evaporation policy.

    Parameters
    ----------
    depth : float or callable
        Threshold energy εₜ (J), constant or function of time
    potential : callable, optional
        Potential used for the comparison, f(positions, species, t[, output]).
        Defaults to conditions.potential. Pass the trap-only potential when
        the composite includes gravity.

    Returns
    -------
    callable
        Policy f(positions, velocities, conditions, t) -> (N,) array of 0/1
    """
    depth = time_parametrize(depth)

    def policy(positions, velocities, conditions, t):
        energy_fn = conditions.potential if potential is None else potential
        energies = energy_fn(positions, conditions.species, t)
        return (energies > depth(t)).astype(float)

    return policy


def radius_evap(radius) -> Callable:
    """
    Radius-threshold evaporation policy.

    Parameters
    ----------
    radius : float or callable
        Cutoff distance from the origin (m), constant or function of time

    Returns
    -------
    callable
        Policy f(positions, velocities, conditions, t) -> (N,) array of 0/1
    """
    radius = time_parametrize(radius)

    def policy(positions, velocities, conditions, t):
        distances = np.linalg.norm(np.asarray(positions, dtype=float), axis=0)
        return (distances > radius(t)).astype(float)

    return policy


__all__ = ["no_evap", "energy_evap", "radius_evap"]
