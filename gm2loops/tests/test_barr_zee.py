import math

import mpmath
import numpy as np
import pytest

from gm2loops.gm2loops.barr_zee import (
    F1,
    F1t,
    F2,
    F3,
    _f1_complex,
    _f2_complex,
    _f_ps_complex,
    f_PS,
    f_S,
    f_sferm,
)
from gm2loops.gm2loops.errors import DomainWarning


def _feynman_integral(z, weight):
    """``z * int_0^1 weight(a) ln(a/z)/(a - z) dx`` with ``a = x (1 - x)``."""

    with mpmath.workdps(30):
        z = mpmath.mpf(z)

        def integrand(x):
            a = x * (1 - x)
            if a == z:
                # removable singularity
                return weight(a) / z
            return weight(a) * mpmath.log(a / z) / (a - z)

        return float(z * mpmath.quad(integrand, [0, mpmath.mpf(1) / 2, 1]))


Z_VALUES = [0.01, 0.1, 0.2499, 0.2501, 0.7, 3.0, 50.0]


@pytest.mark.parametrize("z", Z_VALUES)
def test_f_ps_matches_integral_representation(z):
    expected = _feynman_integral(z, lambda a: 1)
    np.testing.assert_allclose(f_PS(z), expected, rtol=1e-10)


@pytest.mark.parametrize("z", Z_VALUES)
def test_f_s_matches_integral_representation(z):
    expected = -_feynman_integral(z, lambda a: 1 - 2 * a)
    np.testing.assert_allclose(f_S(z), expected, rtol=1e-10)


@pytest.mark.parametrize("z", Z_VALUES)
def test_f_sferm_matches_integral_representation(z):
    expected = -0.5 * _feynman_integral(z, lambda a: a)
    np.testing.assert_allclose(f_sferm(z), expected, rtol=1e-10)


def test_exact_values():
    assert f_PS(0.0) == 0.0
    assert f_S(0.0) == 0.0
    assert f_sferm(0.0) == 0.0
    np.testing.assert_allclose(f_PS(0.25), math.log(4.0), rtol=1e-15)
    assert F1(0.0) == 0.0
    assert F1(0.25) == -0.5
    assert F2(0.0) == -math.inf
    np.testing.assert_allclose(F2(0.25), 1.0 - math.log(4.0), rtol=1e-15)
    assert F3(0.0) == -math.inf
    assert F3(0.25) == 4.75


def test_f1t_is_half_f_ps():
    for w in (0.0, 0.1, 0.25, 2.0):
        assert F1t(w) == 0.5 * f_PS(w)


@pytest.mark.parametrize("func", [f_PS, f_S, f_sferm, F1, F2, F3])
def test_continuous_through_quarter(func):
    at_quarter = func(0.25)
    for w in (0.25 - 1e-7, 0.25 + 1e-7):
        assert abs(func(w) - at_quarter) <= 1e-4 * max(1.0, abs(at_quarter))


@pytest.mark.parametrize("complex_form", [_f_ps_complex, _f1_complex, _f2_complex])
@pytest.mark.parametrize("z", [0.3, 0.5, 2.0, 10.0])
def test_imaginary_part_vanishes_above_quarter(complex_form, z):
    value = complex_form(z)
    assert abs(value.imag) <= 1e-10 * max(1.0, abs(value.real))


def test_small_argument_behaviour():
    assert abs(F1(1e-10)) < 1e-6
    assert F2(1e-10) < 0.0
    assert F3(1e-10) < 0.0


@pytest.mark.parametrize("func", [f_PS, f_S, f_sferm, F1, F1t, F2, F3])
def test_negative_argument_warns(func):
    with pytest.warns(DomainWarning, match=f"ERROR: {func.__name__}:"):
        value = func(-1.0)
    assert math.isnan(value)
