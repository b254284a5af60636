"""
Atomic Species Database for Evaporative Cooling Simulations
===========================================================

Physical constants per atomic species needed by the field and collision
models. A species is created once from literature values and never mutated.

WHAT EACH PROPERTY IS USED FOR
------------------------------

**Mass (m)**
    Converts forces to accelerations and sets the potential energy of the
    atom in uniform and harmonic fields:
        U_gravity = -m g·(r - r₀),   U_harmonic = ½ m Σ ω_i² x_i²

**Scattering length (aₛ) and cross-section (σ)**
    Elastic s-wave collisions thermalise the cloud during evaporation. For
    identical bosons σ = 8π aₛ². These are consumed by the collision engine,
    not by the field model, but they belong to the species.

**Polarizability (α)**
    Sets the strength of the optical dipole potential of a far-detuned beam.
    The field model only ever needs the combination

        κ = α / (2 ε₀ c)

    so that the dipole potential is U = κ I for a local intensity I.

References
----------
[1] Steck, "Rubidium 87 D Line Data" (2021) - Rb87 atomic data
[2] Grimm et al., Adv. At. Mol. Opt. Phys. 42, 95 (2000) - Optical dipole traps
"""

from dataclasses import dataclass
from typing import Dict, List
import numpy as np

from .constants import EPS0, C


@dataclass(frozen=True)
class AtomSpecies:
    """
    Immutable physical constants of a neutral atomic species.

    Attributes
    ----------
    name : str
        Species label, e.g. "Rb87"
    mass : float
        Atomic mass (kg)
    scattering_length : float
        s-wave scattering length (m)
    cross_section : float
        Elastic scattering cross-section (m²)
    polarizability : float
        Real part of the dynamic polarizability at the trap wavelength,
        in the units that make κ = α/(2ε₀c) an energy per intensity (J·m²/W)
    """
    name: str
    mass: float
    scattering_length: float
    cross_section: float
    polarizability: float


# =============================================================================
# THE SPECIES DATABASE
# =============================================================================

RB87 = AtomSpecies(
    name="Rb87",
    mass=1.454660e-25,
    scattering_length=1e-8,
    cross_section=np.pi * 8e-16,
    polarizability=6.626e-34 * 0.079416 / 10000,
)

SPECIES_DB: Dict[str, AtomSpecies] = {
    RB87.name: RB87,
}


def get_species(name: str) -> AtomSpecies:
    """
    Look up a species by name.

    Raises
    ------
    ValueError
        If the species is not in the database
    """
    if name not in SPECIES_DB:
        raise ValueError(f"Unknown species: {name}. "
                         f"Available: {list(SPECIES_DB.keys())}")
    return SPECIES_DB[name]


def list_available_species() -> List[str]:
    """Return list of available atomic species."""
    return list(SPECIES_DB.keys())


def kappa(species: AtomSpecies) -> float:
    """
    Dipole-potential coefficient κ = α / (2ε₀c).

    Multiplying by a laser intensity (W/m²) gives the optical dipole
    potential in Joules. Depends only on the species, never on the beam.
    """
    return species.polarizability / (2 * EPS0 * C)


__all__ = [
    "AtomSpecies",
    "RB87",
    "SPECIES_DB",
    "get_species",
    "list_available_species",
    "kappa",
]
