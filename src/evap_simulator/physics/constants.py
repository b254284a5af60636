"""
Physical Constants for Evaporative Cooling Simulations
======================================================

All values are in SI units (CODATA 2018).

WHERE THESE CONSTANTS APPEAR
----------------------------

**kB (KB) - Boltzmann constant**
    Converts temperatures to energies. Sets the width of the initial thermal
    cloud: σ_v = √(k_B T / m) for each velocity component.

**c (C) and ε₀ (EPS0)**
    Enter the optical dipole potential of a far-detuned laser beam:

        U = α I / (2 ε₀ c)

    where α is the (real) polarizability and I the local intensity.

**g (G_EARTH) - Standard gravity**
    Magnitude of the default uniform field. In the simulation frame gravity
    points along -y.

References
----------
CODATA 2018 recommended values:
https://physics.nist.gov/cuu/Constants/
"""

KB = 1.380649e-23  # Boltzmann constant [J/K] (exact by definition)
"""
Thermal energy scale: k_B × 1 μK ≈ 1.4×10⁻²⁹ J.

At T = 15 μK a Rb87 atom has a 1D RMS velocity of about 3.8 cm/s.
"""

EPS0 = 8.8541878128e-12  # Vacuum permittivity [F/m]
"""
Used in the dipole-potential coefficient κ = α / (2ε₀c).
"""

C = 299792458.0  # Speed of light [m/s] (exact by definition)
"""
Used in the dipole-potential coefficient κ = α / (2ε₀c).
"""

G_EARTH = 9.81  # Gravitational acceleration [m/s²]
"""
Magnitude of the default gravity field, UniformField([0, -G_EARTH, 0]).
"""


__all__ = ["KB", "EPS0", "C", "G_EARTH"]
