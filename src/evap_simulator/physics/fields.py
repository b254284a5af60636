"""
Time-Dependent Fields Acting on the Atom Cloud
==============================================

Three physically distinct fields, one calling contract:

    field.acceleration(positions, species, t, output)  -> output  (3, N)
    field.potential(positions, species, t, output)     -> output  (N,)

``positions`` is a (3, N) array, one column per test particle. ``output`` is
an optional caller-owned buffer that is fully overwritten and returned; when
omitted a fresh array is allocated. ``species`` is accepted by every field,
even where it is physically unused, so that any field can stand in for any
other inside a composite.

THE FIELDS
----------

**UniformField** (e.g. gravity)
    a = g(t)
    U = -m g(t)·(x - x₀(t))

**HarmonicField**
    a_i = -ω_i(t)² x_i
    U   = ½ m Σ ω_i(t)² x_i²

**GaussianBeam** (optical dipole potential, paraxial)
    In the beam frame (z along the beam, r from the axis):

    U   = κ I(P, w(z), r)
    a_z = -κ I × (2 w₀ z / (z_R² w²)) × (2r²/w² - 1)     along the beam
    a_r =  4κ I / w²                                      × (d - z n̂)

    where d is the displacement from the focus and n̂ the unit beam
    direction. U is positive: it is the local trap depth, which the energy
    evaporation policy compares against its threshold.

Every parameter is a TimeFunction, so it may be a constant or a function of
time. Evaluating with ``t=None`` uses the default time and warns for any
time-dependent parameter.

COMPOSITION
-----------

Forces and potential energies from independent sources add:

    >>> accel = sum_fields(acceleration(GRAVITY), acceleration(beam_1),
    ...                    acceleration(beam_2))
    >>> accel(positions, RB87, t, buffer)
"""

from typing import Callable, Optional, Tuple

import numpy as np

from .atom_database import AtomSpecies, kappa
from .constants import G_EARTH
from .time_dependence import time_parametrize
from .trap_physics import axial_frame, beam_intensity, beam_waist, rayleigh_range


def _as_positions(positions) -> np.ndarray:
    positions = np.asarray(positions, dtype=float)
    if positions.ndim != 2 or positions.shape[0] != 3:
        raise ValueError(f"Positions must have shape (3, N), got {positions.shape}")
    return positions


def _unit_vector(vector) -> np.ndarray:
    vector = np.asarray(vector, dtype=float)
    norm = np.linalg.norm(vector)
    if norm == 0:
        raise ValueError("Beam direction must be a non-zero vector")
    return vector / norm


# =============================================================================
# FIELD BASE CLASS
# =============================================================================

class Field:
    """
    Base class for a time-dependent field.

    Subclasses implement ``_acceleration`` and ``_potential``, which write
    into an already allocated output buffer.
    """

    def acceleration(self, positions, species: AtomSpecies, t: float = None,
                     output: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Acceleration of every particle, shape (3, N), in m/s².

        Parameters
        ----------
        positions : array_like, shape (3, N)
            Particle positions (m)
        species : AtomSpecies
            Atomic species of the cloud
        t : float, optional
            Time (s). If None, time-dependent parameters are evaluated at
            their default time with an ImplicitTimeWarning.
        output : ndarray, shape (3, N), optional
            Buffer to overwrite and return

        Returns
        -------
        ndarray, shape (3, N)
        """
        positions = _as_positions(positions)
        if output is None:
            output = np.zeros(positions.shape, dtype=float)
        return self._acceleration(positions, species, t, output)

    def potential(self, positions, species: AtomSpecies, t: float = None,
                  output: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Potential energy of every particle, shape (N,), in J.

        Same arguments as ``acceleration``, with an (N,) output buffer.
        """
        positions = _as_positions(positions)
        if output is None:
            output = np.zeros(positions.shape[1], dtype=float)
        return self._potential(positions, species, t, output)

    def _acceleration(self, positions, species, t, output):
        raise NotImplementedError

    def _potential(self, positions, species, t, output):
        raise NotImplementedError


# =============================================================================
# FIELD VARIANTS
# =============================================================================

class UniformField(Field):
    """
    Uniform acceleration field, with potential referenced to ``origin``.

    Parameters
    ----------
    strength : array_like or callable
        Acceleration vector (m/s²), or a function of time returning one
    origin : array_like or callable
        Point of zero potential energy (m)
    default_time : float
        Time used when evaluated with no time argument (s)
    """

    def __init__(self, strength, origin=(0.0, 0.0, 0.0), default_time: float = 0.0):
        self.strength, self.origin = time_parametrize(strength, origin, default_time=default_time)

    def _acceleration(self, positions, species, t, output):
        g = np.asarray(self.strength(t), dtype=float)
        output[...] = g.reshape(3, 1)
        return output

    def _potential(self, positions, species, t, output):
        g = np.asarray(self.strength(t), dtype=float)
        x0 = np.asarray(self.origin(t), dtype=float).reshape(3, 1)
        output[...] = -species.mass * (g @ (positions - x0))
        return output

    def __repr__(self):
        return f"UniformField(strength={self.strength!r}, origin={self.origin!r})"


class HarmonicField(Field):
    """
    Anisotropic harmonic trap centred at the origin.

    Parameters
    ----------
    omega_x, omega_y, omega_z : float or callable
        Angular trap frequencies (rad/s), constants or functions of time
    default_time : float
        Time used when evaluated with no time argument (s)
    """

    def __init__(self, omega_x, omega_y, omega_z, default_time: float = 0.0):
        self.omega_x, self.omega_y, self.omega_z = time_parametrize(
            omega_x, omega_y, omega_z, default_time=default_time)

    def _omega_squared(self, t) -> np.ndarray:
        omegas = np.array([self.omega_x(t), self.omega_y(t), self.omega_z(t)], dtype=float)
        return (omegas**2).reshape(3, 1)

    def _acceleration(self, positions, species, t, output):
        # Mass independent: already an acceleration
        output[...] = -self._omega_squared(t) * positions
        return output

    def _potential(self, positions, species, t, output):
        output[...] = 0.5 * species.mass * np.sum(self._omega_squared(t) * positions**2, axis=0)
        return output

    def __repr__(self):
        return (f"HarmonicField(omega_x={self.omega_x!r}, omega_y={self.omega_y!r}, "
                f"omega_z={self.omega_z!r})")


class GaussianBeam(Field):
    """
    Focused Gaussian laser beam acting through the optical dipole force.

    Parameters
    ----------
    focus : array_like or callable
        Position of the focus (m)
    direction : array_like or callable
        Propagation direction; normalised on every evaluation
    power : float or callable
        Beam power (W)
    waist : float or callable
        Waist w₀ at the focus, 1/e² intensity radius (m)
    wavelength : float or callable
        Laser wavelength (m)
    default_time : float
        Time used when evaluated with no time argument (s)
    """

    def __init__(self, focus, direction, power, waist, wavelength, default_time: float = 0.0):
        focus, direction, power, waist, wavelength = time_parametrize(
            focus, direction, power, waist, wavelength, default_time=default_time)
        self.focus = focus
        self.power = power
        self.waist = waist
        self.wavelength = wavelength
        if direction.time_dependent:
            raw_direction = direction.source
            self.direction = time_parametrize(lambda t: _unit_vector(raw_direction(t)),
                                              default_time=direction.default_time)
        else:
            self.direction = time_parametrize(_unit_vector(direction()))

    def parameters(self, t: float = None) -> Tuple[np.ndarray, np.ndarray, float, float, float]:
        """
        Beam parameters at time t.

        Returns
        -------
        (focus, direction, power, waist, wavelength)
        """
        focus = np.asarray(self.focus(t), dtype=float)
        direction = np.asarray(self.direction(t), dtype=float)
        power = self.power(t)
        waist = self.waist(t)
        wavelength = self.wavelength(t)
        if waist <= 0 or wavelength <= 0:
            raise ValueError(f"Beam waist and wavelength must be positive, got "
                             f"waist = {waist}, wavelength = {wavelength}")
        return focus, direction, power, waist, wavelength

    def _acceleration(self, positions, species, t, output):
        focus, direction, power, waist, wavelength = self.parameters(t)
        k = kappa(species)

        n = direction.reshape(3, 1)
        displacement = positions - focus.reshape(3, 1)
        z, r = axial_frame(positions, focus, direction)

        z_R = rayleigh_range(waist, wavelength)
        w = beam_waist(waist, z_R, z)
        intensity = beam_intensity(power, w, r)

        # Cylindrical components of the dipole force
        a_z = -k * intensity * (2 * waist * z / (z_R**2 * w**2)) * (2 * r**2 / w**2 - 1)
        a_r = 4 * k * intensity / w**2

        output[...] = a_z * n + a_r * (displacement - z * n)
        return output

    def _potential(self, positions, species, t, output):
        focus, direction, power, waist, wavelength = self.parameters(t)
        z, r = axial_frame(positions, focus, direction)
        w = beam_waist(waist, rayleigh_range(waist, wavelength), z)
        output[...] = kappa(species) * beam_intensity(power, w, r)
        return output

    def __repr__(self):
        return (f"GaussianBeam(focus={self.focus!r}, direction={self.direction!r}, "
                f"power={self.power!r}, waist={self.waist!r}, "
                f"wavelength={self.wavelength!r})")


GRAVITY = UniformField([0.0, -G_EARTH, 0.0])


# =============================================================================
# BOUND FIELDS AND COMPOSITION
# =============================================================================

QUANTITIES = ("acceleration", "potential")


class BoundField:
    """
    A field bound to one quantity, evaluated as f(positions, species, t, output).

    Parameters
    ----------
    field : Field
        The field to evaluate
    quantity : str
        "acceleration" or "potential"
    """

    def __init__(self, field: Field, quantity: str):
        if quantity not in QUANTITIES:
            raise ValueError(f"Unknown quantity: {quantity}. Use one of {QUANTITIES}")
        self.field = field
        self.quantity = quantity

    def evaluate(self, positions, species: AtomSpecies, t: float = None,
                 output: Optional[np.ndarray] = None) -> np.ndarray:
        return getattr(self.field, self.quantity)(positions, species, t, output)

    __call__ = evaluate

    def __add__(self, other):
        return sum_fields(self, other)

    def __repr__(self):
        return f"BoundField({self.quantity}, {self.field!r})"


def _evaluate_term(term, positions, species, t, output):
    # Bound and composite terms write into the buffer; plain callables
    # take (positions, species, t) and return a fresh array.
    if isinstance(term, (BoundField, CompositeField)):
        return term(positions, species, t, output)
    result = term(positions, species, t)
    if output is None:
        return result
    output[...] = result
    return output


class CompositeField:
    """
    Pointwise sum of several field terms with the same calling contract.

    Terms are BoundFields, CompositeFields, or any callable
    f(positions, species, t) returning an array of the summed shape.
    """

    def __init__(self, terms, quantity: Optional[str] = None):
        self.terms = tuple(terms)
        self.quantity = quantity

    def evaluate(self, positions, species: AtomSpecies, t: float = None,
                 output: Optional[np.ndarray] = None,
                 scratch: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Sum of all terms, written into ``output``.

        Parameters
        ----------
        positions : array_like, shape (3, N)
            Particle positions (m)
        species : AtomSpecies
            Atomic species of the cloud
        t : float, optional
            Time (s)
        output : ndarray, optional
            Buffer to overwrite and return; allocated when omitted
        scratch : ndarray, optional
            Work buffer of the same shape as ``output``, reused across
            calls to avoid an allocation per step

        Returns
        -------
        ndarray
            ``output``
        """
        first, *rest = self.terms
        if output is None:
            output = np.array(_evaluate_term(first, positions, species, t, None), dtype=float)
        else:
            _evaluate_term(first, positions, species, t, output)

        if rest:
            if scratch is None:
                scratch = np.empty_like(output)
            for term in rest:
                output += _evaluate_term(term, positions, species, t, scratch)
        return output

    __call__ = evaluate

    def __add__(self, other):
        return sum_fields(self, other)

    def __repr__(self):
        return f"CompositeField({self.quantity}, {len(self.terms)} terms)"


def sum_fields(*terms: Callable) -> CompositeField:
    """
    Combine accelerations (or potentials) of several fields into one callable.

    Parameters
    ----------
    *terms : BoundField, CompositeField or callable
        Bound fields, composites, or callables f(positions, species, t)

    Returns
    -------
    CompositeField

    Raises
    ------
    ValueError
        If no terms are given, or accelerations are mixed with potentials
    """
    if not terms:
        raise ValueError("sum_fields requires at least one term")

    flat = []
    for term in terms:
        if isinstance(term, CompositeField):
            flat.extend(term.terms)
        else:
            flat.append(term)

    quantities = {term.quantity for term in flat if isinstance(term, BoundField)}
    if len(quantities) > 1:
        raise ValueError(f"Cannot sum different quantities: {sorted(quantities)}")
    quantity = quantities.pop() if quantities else None
    return CompositeField(flat, quantity)


def acceleration(field: Field, positions=None, species: AtomSpecies = None,
                 t: float = None, output: Optional[np.ndarray] = None):
    """
    Acceleration of ``field`` on the given particles.

    Called with the field alone, returns a BoundField that can be evaluated
    later (and summed with other fields).
    """
    if positions is None:
        return BoundField(field, "acceleration")
    return field.acceleration(positions, species, t, output)


def potential(field: Field, positions=None, species: AtomSpecies = None,
              t: float = None, output: Optional[np.ndarray] = None):
    """
    Potential energy of the given particles in ``field``.

    Called with the field alone, returns a BoundField that can be evaluated
    later (and summed with other fields).
    """
    if positions is None:
        return BoundField(field, "potential")
    return field.potential(positions, species, t, output)


__all__ = [
    "Field",
    "UniformField",
    "HarmonicField",
    "GaussianBeam",
    "GRAVITY",
    "BoundField",
    "CompositeField",
    "sum_fields",
    "acceleration",
    "potential",
]
