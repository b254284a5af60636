"""
Trap Configurations
===================

Dataclasses describing complete experimental setups, able to assemble the
SimulationConditions for a run.

CROSSED OPTICAL DIPOLE TRAP
---------------------------

Two Gaussian beams share a focus and cross in the x-z plane at a full angle
2θ. Beam 1 propagates along (cos θ, 0, sin θ), beam 2 along
(cos θ, 0, -sin θ). Gravity points along -y.

Forced evaporation lowers both beam powers, typically with exponential
ramps. The trap depth follows the powers:

    U₀(t) = 2κ (P₁(t) + P₂(t)) / (π w₀²)

and atoms whose beam potential exceeds U₀(t) are removed. Gravity is left
out of the evaporation comparison: it tilts the trap but its potential is
unbounded and would dominate the threshold for a large cloud.

**Typical values (Rb87, 1064/1090 nm):**
- P: 15 W → 2 W over ~2 s, w₀ = 130 μm
- Crossing angle 22.5°
- U₀/k_B ≈ 60 μK at full power

Example
-------
>>> trap = CrossedBeamTrap(power_1=exponential_ramp(15, 2, 0.8),
...                        power_2=exponential_ramp(7.5, 2, 0.8))
>>> conditions = trap.build_conditions(RB87, n_real=3e7, n_test=10_000,
...                                    temperature=15e-6)
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union, Callable

import numpy as np

from .atom_database import AtomSpecies, kappa
from .cloud import boltzmann_velocities, harmonic_boltzmann_positions
from .conditions import SimulationConditions
from .constants import KB
from .evaporation import energy_evap
from .fields import (
    GRAVITY, CompositeField, GaussianBeam, HarmonicField,
    acceleration, potential, sum_fields,
)
from .time_dependence import TimeFunction, time_parametrize
from .trap_physics import crossed_beam_trap_frequencies

Scalar = Union[float, Callable[[float], float]]


@dataclass
class CrossedBeamTrap:
    """
    Crossed-beam optical dipole trap with optional gravity.

    Attributes
    ----------
    power_1, power_2 : float or callable
        Beam powers (W), constants or functions of time
    waist : float
        Common beam waist w₀ (m)
    half_angle : float
        Half of the crossing angle θ (rad)
    wavelength_1, wavelength_2 : float
        Beam wavelengths (m). Different wavelengths avoid interference
        between the two beams.
    focus : tuple of float
        Common focus (m)
    include_gravity : bool
        Add the uniform gravity field to the acceleration and potential
    """
    power_1: Scalar = 15.0
    power_2: Scalar = 7.5
    waist: float = 130e-6
    half_angle: float = np.deg2rad(22.5) / 2
    wavelength_1: float = 1064e-9
    wavelength_2: float = 1090e-9
    focus: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    include_gravity: bool = True

    def __post_init__(self):
        if self.waist <= 0:
            raise ValueError(f"Beam waist must be positive, got {self.waist}")
        if not 0 < self.half_angle < np.pi / 2:
            raise ValueError(f"Half-angle must lie in (0, π/2), got {self.half_angle}")

    def powers(self) -> Tuple[TimeFunction, TimeFunction]:
        """Beam powers as TimeFunctions, built from the current power_1 and power_2."""
        return time_parametrize(self.power_1, self.power_2)

    def directions(self) -> Tuple[np.ndarray, np.ndarray]:
        """Unit propagation directions of the two beams."""
        c, s = np.cos(self.half_angle), np.sin(self.half_angle)
        return np.array([c, 0.0, s]), np.array([c, 0.0, -s])

    def beams(self) -> Tuple[GaussianBeam, GaussianBeam]:
        """The two GaussianBeam fields."""
        dir_1, dir_2 = self.directions()
        power_1, power_2 = self.powers()
        beam_1 = GaussianBeam(self.focus, dir_1, power_1, self.waist, self.wavelength_1)
        beam_2 = GaussianBeam(self.focus, dir_2, power_2, self.waist, self.wavelength_2)
        return beam_1, beam_2

    # === Trap properties ===

    def trap_depth(self, species: AtomSpecies, t: float = None) -> float:
        """Depth U₀(t) of the crossed trap (J)."""
        power_1, power_2 = self.powers()
        return 2 * kappa(species) * (power_1(t) + power_2(t)) / (np.pi * self.waist**2)

    def depth_function(self, species: AtomSpecies) -> TimeFunction:
        """Trap depth as a TimeFunction of time, for evaporation thresholds."""
        return time_parametrize(lambda t: self.trap_depth(species, t))

    def trap_frequencies(self, species: AtomSpecies, t: float = None) -> Tuple[float, float, float]:
        """Harmonic frequencies (ω_x, ω_y, ω_z) at time t (rad/s)."""
        return crossed_beam_trap_frequencies(self.trap_depth(species, t), species.mass,
                                             self.waist, self.half_angle)

    def harmonic_approximation(self, species: AtomSpecies) -> HarmonicField:
        """Time-dependent HarmonicField matching the bottom of the trap."""
        return HarmonicField(lambda t: self.trap_frequencies(species, t)[0],
                             lambda t: self.trap_frequencies(species, t)[1],
                             lambda t: self.trap_frequencies(species, t)[2])

    def max_timestep(self, species: AtomSpecies, fraction: float = 0.05, t: float = 0.0) -> float:
        """Integration step as a fraction of the shortest trap period."""
        return fraction * 2 * np.pi / max(self.trap_frequencies(species, t))

    # === Composite fields ===

    def acceleration(self) -> CompositeField:
        """Total acceleration: both beams, plus gravity if enabled."""
        terms = [acceleration(beam) for beam in self.beams()]
        if self.include_gravity:
            terms.insert(0, acceleration(GRAVITY))
        return sum_fields(*terms)

    def beam_potential(self) -> CompositeField:
        """Potential of the two beams only."""
        return sum_fields(*(potential(beam) for beam in self.beams()))

    def total_potential(self) -> CompositeField:
        """Beam potential plus gravity if enabled."""
        if self.include_gravity:
            return sum_fields(potential(GRAVITY), self.beam_potential())
        return self.beam_potential()

    def evaporation(self, species: AtomSpecies) -> Callable:
        """Energy evaporation at the ramped trap depth, on the beam potential."""
        return energy_evap(self.depth_function(species), self.beam_potential())

    def build_conditions(self, species: AtomSpecies, n_real: float, n_test: int,
                         temperature: float, rng: Optional[np.random.Generator] = None,
                         verbose: bool = False, **kwargs) -> SimulationConditions:
        """
        Assemble SimulationConditions for a thermal cloud loaded into the trap.

        Positions are sampled from the harmonic approximation at t = 0 and
        velocities from the Maxwell-Boltzmann distribution.

        Parameters
        ----------
        species : AtomSpecies
            Atomic species
        n_real : float
            Number of real atoms
        n_test : int
            Number of test particles
        temperature : float
            Initial temperature (K)
        rng : numpy.random.Generator, optional
            Random generator for the initial cloud
        verbose : bool
            Print a summary of the trap and the conditions
        **kwargs
            Passed to SimulationConditions (three_body_loss,
            background_lifetime)

        Returns
        -------
        SimulationConditions
        """
        if n_test <= 0:
            raise ValueError(f"Number of test particles must be positive, got {n_test}")

        omega_x, omega_y, omega_z = self.trap_frequencies(species, 0.0)
        positions = harmonic_boltzmann_positions(n_test, species.mass, temperature,
                                                 omega_x, omega_y, omega_z, rng=rng)
        velocities = boltzmann_velocities(n_test, species.mass, temperature, rng=rng)

        conditions = SimulationConditions(
            species, n_real / n_test, positions, velocities,
            self.acceleration(), self.total_potential(),
            evaporate=self.evaporation(species), **kwargs,
        )

        if verbose:
            depth = self.trap_depth(species, 0.0)
            print(f"\n{'='*50}")
            print("CROSSED DIPOLE TRAP")
            print(f"{'='*50}")
            print(f"Trap depth:        U₀/k_B = {depth / KB * 1e6:.1f} μK")
            print(f"Trap frequencies:  ω/(2π) = ({omega_x/(2*np.pi):.1f}, "
                  f"{omega_y/(2*np.pi):.1f}, {omega_z/(2*np.pi):.1f}) Hz")
            print(f"Max timestep:      {self.max_timestep(species) * 1e6:.1f} μs")
            print(conditions.summary())

        return conditions


__all__ = ["CrossedBeamTrap"]
