"""
Initial Cloud Sampling
======================

Random initial states for the test-particle ensemble. All samplers return
(3, N) arrays and accept an optional ``numpy.random.Generator`` so runs can
be reproduced.

THERMAL CLOUD IN A HARMONIC TRAP
--------------------------------

At temperature T a classical gas in a harmonic trap has Gaussian position
and velocity distributions:

    σ_v   = √(k_B T / m)          (every velocity component)
    σ_x,i = √(k_B T / m) / ω_i    (position along axis i)

For Rb87 at 15 μK in a trap with ω/2π = 100 Hz: σ_v ≈ 3.8 cm/s and
σ_x ≈ 60 μm.
"""

from typing import Optional, Tuple

import numpy as np
from scipy import stats

from .constants import KB


def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return np.random.default_rng() if rng is None else rng


def _check_count(n: int) -> int:
    if n < 0:
        raise ValueError(f"Number of particles must be non-negative, got {n}")
    return int(n)


def uniform_cloud(n: int, size: float, speed: float,
                  rng: Optional[np.random.Generator] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Positions uniform in [-size, size] and velocities uniform in [-speed, speed].

    Parameters
    ----------
    n : int
        Number of test particles
    size : float
        Half-width of the cube (m)
    speed : float
        Maximum velocity component (m/s)
    rng : numpy.random.Generator, optional

    Returns
    -------
    positions, velocities : ndarray, shape (3, n)
    """
    n = _check_count(n)
    rng = _generator(rng)
    positions = rng.uniform(-size, size, size=(3, n))
    velocities = rng.uniform(-speed, speed, size=(3, n))
    return positions, velocities


def boltzmann_velocities(n: int, mass: float, temperature: float,
                         rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Maxwell-Boltzmann velocities at ``temperature``.

    Parameters
    ----------
    n : int
        Number of test particles
    mass : float
        Atomic mass (kg)
    temperature : float
        Temperature (K)
    rng : numpy.random.Generator, optional

    Returns
    -------
    ndarray, shape (3, n)
        Velocities (m/s)
    """
    n = _check_count(n)
    sigma_v = np.sqrt(KB * temperature / mass)
    return stats.norm(loc=0.0, scale=sigma_v).rvs(size=(3, n), random_state=_generator(rng))


def harmonic_boltzmann_positions(n: int, mass: float, temperature: float,
                                 omega_x: float, omega_y: float, omega_z: float,
                                 rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Thermal equilibrium positions in a harmonic trap.

    Parameters
    ----------
    n : int
        Number of test particles
    mass : float
        Atomic mass (kg)
    temperature : float
        Temperature (K)
    omega_x, omega_y, omega_z : float
        Angular trap frequencies (rad/s)
    rng : numpy.random.Generator, optional

    Returns
    -------
    ndarray, shape (3, n)
        Positions (m)
    """
    n = _check_count(n)
    rng = _generator(rng)
    sigma_v = np.sqrt(KB * temperature / mass)
    positions = np.zeros((3, n), dtype=float)
    for axis, omega in enumerate((omega_x, omega_y, omega_z)):
        positions[axis] = stats.norm(loc=0.0, scale=sigma_v / omega).rvs(size=n, random_state=rng)
    return positions


__all__ = [
    "uniform_cloud",
    "boltzmann_velocities",
    "harmonic_boltzmann_positions",
]
