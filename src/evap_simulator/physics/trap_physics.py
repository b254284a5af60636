"""
Gaussian Beam Optics and Optical Dipole Trap Estimates
======================================================

Building blocks for the focused-beam field and closed-form estimates of the
trap it produces.

THE GAUSSIAN BEAM (PARAXIAL APPROXIMATION)
------------------------------------------

A beam of power P focused to a waist w₀ at wavelength λ has:

    Rayleigh length:   z_R  = π w₀² / λ
    Local waist:       w(z) = w₀ √(1 + (z/z_R)²)
    Intensity:         I(r, z) = 2P / (π w(z)²) × exp(-2r² / w(z)²)

where z is the coordinate along the beam axis measured from the focus and r
the distance from the axis.

An atom of polarizability α sees the dipole potential U = κ I with
κ = α/(2ε₀c). Throughout this package U is kept POSITIVE at high
intensity: it is the local trap depth, and it is compared directly with
the evaporation threshold.

TRAP DEPTH AND FREQUENCIES
--------------------------

At the focus:   U₀ = κ × 2P/(π w₀²)

Near the bottom the trap is approximately harmonic:

    ω_r = √(4U₀ / (m w₀²))     (radial)
    ω_z = √(2U₀ / (m z_R²))    (axial)

For two beams crossing at a full angle 2θ in the x-z plane, both
propagating along +x, the axial confinement of each beam is negligible and
the radial confinement projects onto the lab axes:

    ω_x = √(4 cos²θ U₀ / (m w₀²))
    ω_y = √(4 U₀ / (m w₀²))
    ω_z = √(4 sin²θ U₀ / (m w₀²))

where U₀ is the depth of the crossed trap.

References
----------
[1] Grimm et al., Adv. At. Mol. Opt. Phys. 42, 95 (2000) - Optical dipole traps
[2] Siegman, "Lasers" (1986), ch. 17 - Gaussian beam optics
"""

import numpy as np
from typing import Tuple

from .atom_database import AtomSpecies, kappa


# =============================================================================
# BEAM OPTICS
# =============================================================================

def rayleigh_range(waist: float, wavelength: float) -> float:
    """
    Rayleigh length z_R = π w₀² / λ.

    The distance from the focus at which the beam area has doubled.
    """
    return np.pi * waist**2 / wavelength


def beam_waist(waist: float, z_rayleigh: float, z):
    """Beam radius w(z) = w₀ √(1 + (z/z_R)²) at axial distance z from focus."""
    return waist * np.sqrt(1 + (z / z_rayleigh)**2)


def beam_intensity(power: float, w, r):
    """
    Intensity of a Gaussian beam, I = 2P/(πw²) × exp(-2r²/w²).

    Parameters
    ----------
    power : float
        Beam power (W)
    w : float or ndarray
        Local beam radius (m)
    r : float or ndarray
        Distance from the beam axis (m)

    Returns
    -------
    float or ndarray
        Intensity (W/m²)
    """
    return 2 * power / (np.pi * w**2) * np.exp(-2 * r**2 / w**2)


def axial_frame(positions: np.ndarray, focus, direction) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert Cartesian positions to the (z, r) frame of a beam.

    Parameters
    ----------
    positions : ndarray, shape (3, N)
        Particle positions (m)
    focus : array_like, shape (3,)
        Beam focus (m)
    direction : array_like, shape (3,)
        UNIT vector along the beam

    Returns
    -------
    z : ndarray, shape (N,)
        Signed axial distance from the focus
    r : ndarray, shape (N,)
        Radial distance from the beam axis. Cancellation in |d|² - z² can
        leave tiny negative values for points on the axis; these are
        clamped to zero.
    """
    displacement = positions - np.asarray(focus, dtype=float).reshape(3, 1)
    z = np.asarray(direction, dtype=float) @ displacement
    r_squared = np.einsum("ij,ij->j", displacement, displacement) - z**2
    r = np.sqrt(np.maximum(r_squared, 0.0))
    return z, r


# =============================================================================
# TRAP DEPTH AND FREQUENCIES
# =============================================================================

def trap_depth(power: float, waist: float, species: AtomSpecies) -> float:
    """
    Depth of a single-beam dipole trap at the focus.

        U₀ = κ × 2P / (π w₀²)

    Parameters
    ----------
    power : float
        Beam power (W)
    waist : float
        Beam waist (m)
    species : AtomSpecies
        Trapped species

    Returns
    -------
    float
        Trap depth (J), positive for positive polarizability. Matches
        GaussianBeam.potential evaluated at the focus.
    """
    return kappa(species) * beam_intensity(power, waist, 0.0)


def trap_frequencies(depth: float, mass: float, waist: float,
                     wavelength: float) -> Tuple[float, float]:
    """
    Harmonic frequencies at the bottom of a single-beam trap.

    Parameters
    ----------
    depth : float
        Trap depth U₀ (J)
    mass : float
        Atomic mass (kg)
    waist : float
        Beam waist (m)
    wavelength : float
        Trap wavelength (m)

    Returns
    -------
    omega_r : float
        Radial angular frequency (rad/s)
    omega_z : float
        Axial angular frequency (rad/s)
    """
    z_R = rayleigh_range(waist, wavelength)
    omega_r = np.sqrt(4 * depth / (mass * waist**2))
    omega_z = np.sqrt(2 * depth / (mass * z_R**2))
    return omega_r, omega_z


def crossed_beam_trap_frequencies(depth: float, mass: float, waist: float,
                                  half_angle: float) -> Tuple[float, float, float]:
    """
    Harmonic frequencies of two beams crossing at a full angle 2θ in x-z.

    Parameters
    ----------
    depth : float
        Depth of the crossed trap (J)
    mass : float
        Atomic mass (kg)
    waist : float
        Common beam waist (m)
    half_angle : float
        Half of the crossing angle θ (rad)

    Returns
    -------
    (omega_x, omega_y, omega_z) : tuple of float
        Angular frequencies (rad/s)
    """
    radial = 4 * depth / (mass * waist**2)
    omega_x = np.sqrt(np.cos(half_angle)**2 * radial)
    omega_y = np.sqrt(radial)
    omega_z = np.sqrt(np.sin(half_angle)**2 * radial)
    return omega_x, omega_y, omega_z


__all__ = [
    "rayleigh_range",
    "beam_waist",
    "beam_intensity",
    "axial_frame",
    "trap_depth",
    "trap_frequencies",
    "crossed_beam_trap_frequencies",
]
