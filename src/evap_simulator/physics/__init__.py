"""
Field and Loss Models for Evaporative Cooling
=============================================

This subpackage models the forces, potentials and loss mechanisms acting on
a cloud of cold neutral atoms. It is the physics input of a Monte-Carlo
evaporation simulation: the integrator calls the acceleration, potential
and evaporation callables assembled here once per time step.

PHYSICS OVERVIEW
----------------

**Test particles**
    A cloud of ~10⁷ real atoms is represented by ~10⁴ test particles, each
    standing for f_scale real atoms. The ensemble is a pair of (3, N)
    arrays: positions and velocities.

**Fields**
    Gravity, harmonic traps and focused laser beams each give an
    acceleration and a potential energy for every particle. All parameters
    may vary in time (evaporation ramps), and all fields share one calling
    contract so they can be summed freely.

**Evaporation**
    Forced evaporative cooling lowers the trap depth so the most energetic
    atoms escape; the remaining cloud rethermalises at a lower temperature.
    Policies decide which test particles leave at each step.

MODULE STRUCTURE
----------------

    - constants: Physical constants (SI)
    - atom_database: AtomSpecies and the species database
    - time_dependence: TimeFunction adapter and ramps
    - trap_physics: Gaussian beam optics and trap estimates
    - fields: UniformField, HarmonicField, GaussianBeam and composition
    - evaporation: Energy, radius and no-evaporation policies
    - conditions: SimulationConditions record with shape validation
    - cloud: Initial cloud sampling
    - configurations: Crossed optical dipole trap setup

References
----------
[1] Grimm et al., Adv. At. Mol. Opt. Phys. 42, 95 (2000) - Optical dipole traps
[2] Ketterle & van Druten, Adv. At. Mol. Opt. Phys. 37, 181 (1996) -
    Evaporative cooling of trapped atoms
"""

from .constants import KB, EPS0, C, G_EARTH

from .atom_database import (
    AtomSpecies,
    RB87,
    SPECIES_DB,
    get_species,
    list_available_species,
    kappa,
)

from .time_dependence import (
    ImplicitTimeWarning,
    TimeFunction,
    time_parametrize,
    exponential_ramp,
)

from .trap_physics import (
    rayleigh_range,
    beam_waist,
    beam_intensity,
    axial_frame,
    trap_depth,
    trap_frequencies,
    crossed_beam_trap_frequencies,
)

from .fields import (
    Field,
    UniformField,
    HarmonicField,
    GaussianBeam,
    GRAVITY,
    BoundField,
    CompositeField,
    sum_fields,
    acceleration,
    potential,
)

from .evaporation import (
    no_evap,
    energy_evap,
    radius_evap,
)

from .conditions import (
    ShapeMismatchError,
    ComponentCountError,
    DimensionMismatchError,
    SimulationConditions,
)

from .cloud import (
    uniform_cloud,
    boltzmann_velocities,
    harmonic_boltzmann_positions,
)

from .configurations import CrossedBeamTrap


__all__ = [
    # Constants
    "KB", "EPS0", "C", "G_EARTH",

    # Species
    "AtomSpecies", "RB87", "SPECIES_DB", "get_species",
    "list_available_species", "kappa",

    # Time dependence
    "ImplicitTimeWarning", "TimeFunction", "time_parametrize", "exponential_ramp",

    # Beam optics and trap estimates
    "rayleigh_range", "beam_waist", "beam_intensity", "axial_frame",
    "trap_depth", "trap_frequencies", "crossed_beam_trap_frequencies",

    # Fields
    "Field", "UniformField", "HarmonicField", "GaussianBeam", "GRAVITY",
    "BoundField", "CompositeField", "sum_fields", "acceleration", "potential",

    # Evaporation
    "no_evap", "energy_evap", "radius_evap",

    # Conditions
    "ShapeMismatchError", "ComponentCountError", "DimensionMismatchError",
    "SimulationConditions",

    # Initial cloud
    "uniform_cloud", "boltzmann_velocities", "harmonic_boltzmann_positions",

    # Setups
    "CrossedBeamTrap",
]
