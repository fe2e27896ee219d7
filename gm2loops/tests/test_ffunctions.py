import math

import mpmath
import numpy as np
import pytest

from gm2loops.gm2loops import ffunctions
from gm2loops.gm2loops.constants import EPS, F3N_ZERO, F4N_ZERO, ONE_LOOP_TOL
from gm2loops.gm2loops.errors import DomainWarning
from gm2loops.gm2loops.ffunctions import F1C, F1N, F2C, F2N, F3C, F3N, F4C, F4N, G3, G4, Fa, Fb
from gm2loops.gm2loops.numerics import classify_pair
from gm2loops.gm2loops.scan import branch_boundaries, continuity_gap

SINGLE = {
    "F1C": (F1C, ONE_LOOP_TOL.f1c, 1.0),
    "F2C": (F2C, ONE_LOOP_TOL.f2c, 1.0),
    "F3C": (F3C, ONE_LOOP_TOL.f3c, 1.0),
    "F4C": (F4C, ONE_LOOP_TOL.f4c, 1.0),
    "F1N": (F1N, ONE_LOOP_TOL.f1n, 1.0),
    "F2N": (F2N, ONE_LOOP_TOL.f2n, 1.0),
    "F3N": (F3N, ONE_LOOP_TOL.f3n, 1.0),
    "F4N": (F4N, ONE_LOOP_TOL.f4n, 1.0),
    "G3": (G3, ONE_LOOP_TOL.g3, 1.0 / 3.0),
    "G4": (G4, ONE_LOOP_TOL.g4, 1.0 / 6.0),
}


def _closed_form(name, x):
    """Closed forms of the one-loop functions in arbitrary precision."""

    x = mpmath.mpf(x)
    d = x - 1
    lx = mpmath.log(x)
    li = mpmath.polylog(2, 1 - x)

    if name == "F1C":
        return 2 / d**4 * (2 + x * (3 + 6 * lx + x * (-6 + x)))
    if name == "F2C":
        return 3 / (2 * (1 - x) ** 3) * (-3 - 2 * lx + x * (4 - x))
    if name == "F3C":
        return 4 / (141 * d**4) * (
            (1 - x) * (151 * x**2 - 335 * x + 592)
            + 6 * (21 * x**3 - 108 * x**2 - 93 * x + 50) * lx
            - 54 * x * (x**2 - 2 * x - 2) * lx**2
            - 108 * x * (x**2 - 2 * x + 12) * li
        )
    if name == "F4C":
        return -9 / (122 * (1 - x) ** 3) * (
            8 * (x**2 - 3 * x + 2)
            + (11 * x**2 - 40 * x + 5) * lx
            - 2 * (x**2 - 2 * x - 2) * lx**2
            - 4 * (x**2 - 2 * x + 9) * li
        )
    if name == "F1N":
        return 2 / d**4 * (1 + x * (-6 + x * (3 - 6 * lx + 2 * x)))
    if name == "F2N":
        return 3 / (1 - x) ** 3 * (1 + x * (2 * lx - x))
    if name == "F3N":
        return 4 / (105 * d**4) * (
            (1 - x) * (-97 * x**2 - 529 * x + 2) + 6 * x**2 * (13 * x + 81) * lx + 108 * x * (7 * x + 4) * li
        )
    if name == "F4N":
        return mpmath.mpf(-9) / 4 / (1 - x) ** 3 * ((x + 3) * (x * lx + x - 1) + (6 * x + 2) * li)
    if name == "G3":
        return (d * (x - 3) + 2 * lx) / (2 * d**3)
    if name == "G4":
        return (d * (x + 1) - 2 * x * lx) / (2 * d**3)
    raise KeyError(name)


def _divided_difference(g, x, y):
    with mpmath.workdps(50):
        return float(-(_closed_form(g, x) - _closed_form(g, y)) / (mpmath.mpf(x) - mpmath.mpf(y)))


def test_values_at_zero():
    assert F1C(0.0) == 4.0
    assert F2C(0.0) == 0.0
    assert F3C(0.0) == -math.inf
    assert F4C(0.0) == 0.0
    assert F1N(0.0) == 2.0
    assert F2N(0.0) == 3.0
    assert F3N(0.0) == 8.0 / 105.0
    np.testing.assert_allclose(F4N(0.0), -0.75 * (math.pi**2 - 9.0), rtol=1e-15)
    assert G3(0.0) == math.inf
    assert G4(0.0) == 0.5


@pytest.mark.parametrize("name", ["F1C", "F1N", "F2N", "F3N", "F4N", "G4"])
def test_zero_values_are_limits_of_closed_form(name):
    func, _, _ = SINGLE[name]
    np.testing.assert_allclose(func(1e-10), func(0.0), rtol=1e-6)


def test_zero_constants():
    np.testing.assert_allclose(F3N_ZERO, 8.0 / 105.0, rtol=1e-15)
    np.testing.assert_allclose(F4N_ZERO, -0.75 * (math.pi**2 - 9.0), rtol=1e-15)


@pytest.mark.parametrize("name", sorted(SINGLE))
def test_normalisation_at_one(name):
    func, _, value = SINGLE[name]
    np.testing.assert_allclose(func(1.0), value, rtol=1e-15)
    with mpmath.workdps(80):
        limit = float(_closed_form(name, 1 + mpmath.mpf("1e-8")))
    np.testing.assert_allclose(limit, value, rtol=1e-6)


@pytest.mark.parametrize("name", sorted(SINGLE))
def test_expansion_matches_closed_form_near_one(name):
    func, tol, _ = SINGLE[name]
    for x in (1.0 - tol, 1.0 + 0.5 * tol):
        with mpmath.workdps(50):
            expected = float(_closed_form(name, x))
        np.testing.assert_allclose(func(x), expected, rtol=1e-9)


@pytest.mark.parametrize("name", sorted(SINGLE))
def test_closed_form_away_from_one(name):
    func, _, _ = SINGLE[name]
    for x in (0.3, 2.5, 40.0):
        with mpmath.workdps(30):
            expected = float(_closed_form(name, x))
        np.testing.assert_allclose(func(x), expected, rtol=1e-11)


@pytest.mark.parametrize("name", sorted(SINGLE))
def test_continuity_at_branch_switch(name):
    func, tol, _ = SINGLE[name]
    for boundary in branch_boundaries(tol):
        assert continuity_gap(func, boundary, 1e-10) < 1e-6


@pytest.mark.parametrize("name", sorted(SINGLE))
def test_negative_argument_warns(name):
    func, _, _ = SINGLE[name]
    with pytest.warns(DomainWarning, match=f"ERROR: {name}: x must not be negative"):
        value = func(-0.5)
    assert math.isnan(value)


def test_two_argument_values_at_one():
    assert Fa(1.0, 1.0) == 0.25
    assert Fb(1.0, 1.0) == 1.0 / 12.0


def test_two_argument_zero_limit():
    assert Fa(0.0, 2.0) == 0.0
    assert Fb(2.0, 0.0) == 0.0
    assert Fb(1e-20, 2.0) == 0.0


@pytest.mark.parametrize("func", [Fa, Fb])
@pytest.mark.parametrize("x, y", [(0.3, 2.0), (1.0, 3.0), (1.0005, 0.2), (0.5, 0.5005), (1.0002, 0.9997)])
def test_two_argument_symmetry(func, x, y):
    np.testing.assert_allclose(func(x, y), func(y, x), rtol=1e-7)


@pytest.mark.parametrize(
    "func, g, x, y",
    [
        (Fa, "G3", 0.3, 2.0),
        (Fa, "G3", 3.0, 1.0002),
        (Fa, "G3", 1.0002, 0.9997),
        (Fa, "G3", 2.5, 2.502),
        (Fa, "G3", 0.3, 0.3005),
        (Fb, "G4", 0.3, 2.0),
        (Fb, "G4", 3.0, 1.005),
        (Fb, "G4", 1.004, 0.997),
        (Fb, "G4", 2.5, 2.505),
        (Fb, "G4", 0.3, 0.3005),
    ],
)
def test_two_argument_matches_divided_difference(func, g, x, y):
    np.testing.assert_allclose(func(x, y), _divided_difference(g, x, y), rtol=1e-6)


@pytest.mark.parametrize("func, g", [(Fa, "G3"), (Fb, "G4")])
@pytest.mark.parametrize("x", [0.3, 2.5, 4.0])
def test_equal_arguments_give_derivative(func, g, x):
    with mpmath.workdps(50):
        expected = float(-mpmath.diff(lambda t: _closed_form(g, t), x))
    np.testing.assert_allclose(func(x, x), expected, rtol=1e-6)


@pytest.mark.parametrize(
    "func, tol, bound",
    [(Fa, ONE_LOOP_TOL.fa, 1e-6), (Fb, ONE_LOOP_TOL.fb, 1e-4)],
)
def test_two_argument_continuity_near_one(func, tol, bound):
    for boundary in branch_boundaries(tol):
        assert continuity_gap(func, boundary, 1e-12, 3.0) < bound


@pytest.mark.parametrize(
    "func, tol, bound",
    [(Fa, ONE_LOOP_TOL.fa, 1e-6), (Fb, ONE_LOOP_TOL.fb, 1e-4)],
)
@pytest.mark.parametrize("y", [0.3, 6.0])
def test_two_argument_continuity_near_equal(func, tol, bound, y):
    for boundary in branch_boundaries(tol, y):
        assert continuity_gap(func, boundary, 1e-12, y) < bound


def test_two_argument_equality_width_is_absolute_for_small_masses():
    # both arguments far apart, yet inside the x = y expansion
    assert classify_pair(0.00133, 0.01115, ONE_LOOP_TOL.fb, EPS)[0] == "near_equal"
    assert Fb(0.00133, 0.01115) > 2.0 * _divided_difference("G4", 0.00133, 0.01115)


def test_two_argument_negative_warns():
    with pytest.warns(DomainWarning, match="must not be negative"):
        value = Fa(-1.0, 1.0)
    assert math.isnan(value)
    with pytest.warns(DomainWarning, match="ERROR: Fb"):
        value = Fb(1.0, -1.0)
    assert math.isnan(value)


def test_public_names():
    assert sorted(list(SINGLE) + ["Fa", "Fb"]) == sorted(ffunctions.__all__)
