"""
Time-Parametrised Quantities
============================

Every configurable quantity in the field model (beam power, trap frequency,
evaporation threshold, ...) may either be a constant or vary in time. This
module wraps both cases into a single callable type so that field code never
has to branch on which one it was given.

THE CONTRACT
------------

    f = time_parametrize(value)

- Constant value v:       f(t) == v for every t, and f() == v
- Function g of one arg:  f(t) == g(t), and f() == g(default_time)

Calling a time-dependent quantity WITHOUT a time silently picks a moment
in time. That is almost never what the caller meant inside a simulation
loop, so it is reported as an ``ImplicitTimeWarning`` and counted on the
wrapper (``f.implicit_evaluations``). Constants never warn.

EXAMPLE
-------

    >>> power = time_parametrize(exponential_ramp(15.0, 2.0, 0.8))
    >>> power(0.8)        # explicit time, no warning
    6.78...
    >>> power()           # warns: assuming t = 0.0
    15.0
"""

import warnings
from typing import Any, Callable, Tuple, Union

import numpy as np


class ImplicitTimeWarning(UserWarning):
    """A time-dependent quantity was evaluated without an explicit time."""


class TimeFunction:
    """
    A quantity (scalar or vector) that can be queried at a time t.

    Parameters
    ----------
    source : value or callable
        Constant value, or a function of a single argument (time in s)
    default_time : float
        Time used when the quantity is evaluated with no argument
    """

    def __init__(self, source: Any, default_time: float = 0.0):
        self.source = source
        self.default_time = default_time
        self.time_dependent = callable(source)
        self.implicit_evaluations = 0

    def __call__(self, t: float = None) -> Any:
        if not self.time_dependent:
            return self.source
        if t is None:
            self.implicit_evaluations += 1
            warnings.warn(
                f"Time-dependent quantity evaluated with no time argument. "
                f"Assuming t = {self.default_time}.",
                ImplicitTimeWarning,
                stacklevel=2,
            )
            t = self.default_time
        return self.source(t)

    def __repr__(self) -> str:
        kind = "function" if self.time_dependent else "constant"
        return f"TimeFunction({kind}: {self.source!r})"


def time_parametrize(*values: Any,
                     default_time: float = 0.0) -> Union[TimeFunction, Tuple[TimeFunction, ...]]:
    """
    Convert values and/or functions of time into TimeFunctions.

    With a single argument returns a single TimeFunction; with several,
    returns a tuple in the same order. Existing TimeFunctions pass through
    unchanged, keeping their own default time.

    Parameters
    ----------
    *values : value or callable
        Constants (numbers, vectors) or functions f(t)
    default_time : float
        Time assumed when a new wrapper is evaluated without a time (s)

    Returns
    -------
    TimeFunction or tuple of TimeFunction
    """
    if not values:
        raise ValueError("time_parametrize requires at least one value")
    wrapped = tuple(v if isinstance(v, TimeFunction) else TimeFunction(v, default_time)
                    for v in values)
    if len(wrapped) == 1:
        return wrapped[0]
    return wrapped


def exponential_ramp(start: float, stop: float, tau: float) -> Callable[[float], float]:
    """
    Exponential ramp from ``start`` (t=0) towards ``stop`` with time constant tau.

        f(t) = stop + (start - stop) × exp(-t/τ)

    Used for evaporation ramps of beam power and trap depth.

    Parameters
    ----------
    start : float
        Value at t = 0
    stop : float
        Asymptotic value as t → ∞
    tau : float
        Time constant (s), must be positive

    Returns
    -------
    callable
        Function of time t (s)
    """
    if tau <= 0:
        raise ValueError(f"Ramp time constant must be positive, got tau = {tau}")

    def ramp(t):
        return stop + (start - stop) * np.exp(-t / tau)

    return ramp


__all__ = [
    "ImplicitTimeWarning",
    "TimeFunction",
    "time_parametrize",
    "exponential_ramp",
]
