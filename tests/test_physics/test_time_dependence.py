"""
Test Suite: Time-Parametrised Quantities
========================================

Every configurable quantity can be a constant or a function of time. These
tests pin down the adapter contract:

1. Constants evaluate to themselves at every time, with or without t
2. Functions evaluate at the given t, or at the default time with exactly
   one ImplicitTimeWarning
3. The variadic form preserves order and passes TimeFunctions through
"""

import warnings

import numpy as np
import pytest

from evap_simulator.physics import (
    ImplicitTimeWarning,
    TimeFunction,
    exponential_ramp,
    time_parametrize,
)


class TestConstantValues:
    """Constants never depend on time and never warn."""

    @pytest.mark.parametrize("value", [0.0, 2.5, -9.81, 7])
    def test_scalar_constant_at_every_time(self, value):
        f = time_parametrize(value)
        for t in (0.0, 1e-3, 1.0, 250.0):
            assert f(t) == value
        assert f() == value

    def test_vector_constant_returns_same_value(self):
        vector = np.array([0.0, -9.81, 0.0])
        f = time_parametrize(vector)
        np.testing.assert_array_equal(f(3.0), vector)
        np.testing.assert_array_equal(f(), vector)

    def test_constant_never_warns(self):
        f = time_parametrize(1.5)
        with warnings.catch_warnings(record=True) as record:
            warnings.simplefilter("always")
            f()
            f(2.0)
        assert len(record) == 0
        assert f.implicit_evaluations == 0
        assert not f.time_dependent


class TestTimeDependentValues:
    """Functions of time are evaluated at t, or at the default time with a warning."""

    def test_function_at_explicit_time(self):
        g = lambda t: 3.0 * t + 1.0
        f = time_parametrize(g)
        for t in (0.0, 0.5, 2.0, 10.0):
            assert f(t) == g(t)

    def test_explicit_time_does_not_warn(self):
        f = time_parametrize(lambda t: t**2)
        with warnings.catch_warnings(record=True) as record:
            warnings.simplefilter("always")
            f(0.0)
            f(1.0)
        assert len(record) == 0
        assert f.implicit_evaluations == 0

    def test_no_argument_uses_t_zero_and_warns_once(self):
        g = lambda t: 5.0 + t
        f = time_parametrize(g)
        with pytest.warns(ImplicitTimeWarning) as record:
            value = f()
        assert value == g(0)
        assert len(record) == 1, (
            f"Expected exactly one ImplicitTimeWarning, got {len(record)}."
        )
        assert f.implicit_evaluations == 1

    def test_every_implicit_evaluation_is_counted(self):
        f = time_parametrize(lambda t: t)
        with pytest.warns(ImplicitTimeWarning):
            f()
            f()
            f(None)
        assert f.implicit_evaluations == 3

    def test_custom_default_time(self):
        f = TimeFunction(lambda t: 2 * t, default_time=4.0)
        with pytest.warns(ImplicitTimeWarning, match="t = 4.0"):
            assert f() == 8.0

    def test_default_time_keyword(self):
        f = time_parametrize(lambda t: 3 * t, default_time=2.0)
        assert f.default_time == 2.0
        with pytest.warns(ImplicitTimeWarning, match="t = 2.0"):
            assert f() == 6.0

    def test_vector_valued_function(self):
        f = time_parametrize(lambda t: np.array([t, 2 * t, 3 * t]))
        np.testing.assert_array_equal(f(2.0), [2.0, 4.0, 6.0])


class TestVariadicForm:
    """Several values at once, in order."""

    def test_returns_tuple_in_order(self):
        fx, fy, fz = time_parametrize(1.0, lambda t: 2.0 * t, [0.0, 0.0, 1.0])
        assert fx(7.0) == 1.0
        assert fy(7.0) == 14.0
        assert fz(7.0) == [0.0, 0.0, 1.0]
        assert (fx.time_dependent, fy.time_dependent, fz.time_dependent) == (False, True, False)

    def test_time_functions_pass_through(self):
        existing = time_parametrize(lambda t: t)
        assert time_parametrize(existing) is existing
        first, second = time_parametrize(existing, 3.0)
        assert first is existing
        assert second(1.0) == 3.0

    def test_default_time_shared_by_new_wrappers(self):
        existing = TimeFunction(lambda t: t, default_time=5.0)
        fa, fb, fc = time_parametrize(lambda t: t, 1.0, existing, default_time=3.0)
        assert fa.default_time == 3.0
        assert fb.default_time == 3.0
        assert fc is existing
        assert fc.default_time == 5.0

    def test_no_values_rejected(self):
        with pytest.raises(ValueError):
            time_parametrize()


class TestExponentialRamp:
    """Evaporation ramps."""

    def test_ramp_endpoints(self):
        ramp = exponential_ramp(15.0, 2.0, 0.8)
        assert ramp(0.0) == pytest.approx(15.0)
        assert ramp(100.0) == pytest.approx(2.0)

    def test_ramp_after_one_time_constant(self):
        ramp = exponential_ramp(15.0, 2.0, 0.8)
        assert ramp(0.8) == pytest.approx(2.0 + 13.0 * np.exp(-1.0))

    def test_ramp_is_monotonic(self):
        ramp = exponential_ramp(15.0, 2.0, 0.8)
        values = ramp(np.linspace(0.0, 5.0, 50))
        assert np.all(np.diff(values) < 0)

    def test_ramp_wraps_as_time_dependent(self):
        power = time_parametrize(exponential_ramp(10.0, 1.0, 1.0))
        assert power.time_dependent
        with pytest.warns(ImplicitTimeWarning):
            assert power() == pytest.approx(10.0)

    def test_non_positive_time_constant_rejected(self):
        with pytest.raises(ValueError):
            exponential_ramp(1.0, 0.0, 0.0)
