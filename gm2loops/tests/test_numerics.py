import dataclasses
import itertools
import math

import pytest

from gm2loops.gm2loops.constants import EPS, ONE_LOOP_TOL, PHI_TOL
from gm2loops.gm2loops.errors import DomainWarning, domain_error
from gm2loops.gm2loops.numerics import (
    classify_one,
    classify_pair,
    is_equal,
    is_zero,
    pow3,
    pow4,
    sort2,
    sort3,
    sqr,
)


def test_is_zero_is_strict():
    assert is_zero(0.0, 1e-10)
    assert is_zero(-5e-11, 1e-10)
    assert not is_zero(1e-10, 1e-10)


def test_is_equal_scales_with_magnitude():
    assert is_equal(1.0, 1.001, 0.001)
    assert not is_equal(1.0, 1.01, 0.001)
    # the width is prec * (1 + max(|a|, |b|))
    assert is_equal(1000.0, 1000.5, 0.001)
    assert not is_equal(1000.0, 1002.0, 0.001)


def test_powers():
    assert sqr(-3.0) == 9.0
    assert pow3(-2.0) == -8.0
    assert pow4(3.0) == 81.0


def test_sort_helpers_return_ascending_tuples():
    assert sort2(2.0, 1.0) == (1.0, 2.0)
    for perm in itertools.permutations((3.0, 1.0, 2.0)):
        assert sort3(*perm) == (1.0, 2.0, 3.0)


def test_classify_one_order():
    assert classify_one(0.0, 0.03, EPS) == "near_zero"
    assert classify_one(0.0, 0.03) == "generic"
    assert classify_one(1.01, 0.03, EPS) == "near_one"
    assert classify_one(2.0, 0.03, EPS) == "generic"


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0.0, 1.0, ("near_zero", 0.0, 1.0)),
        (1.0, 1.0005, ("near_both", 1.0, 1.0005)),
        (1.0, 3.0, ("near_one", 3.0, 1.0)),
        (3.0, 1.0, ("near_one", 3.0, 1.0)),
        (2.0, 2.001, ("near_equal", 2.0, 2.001)),
        (2.0, 3.0, ("generic", 2.0, 3.0)),
    ],
)
def test_classify_pair_decision_table(x, y, expected):
    assert classify_pair(x, y, 0.001, EPS) == expected


def test_tolerance_tables_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ONE_LOOP_TOL.f1c = 0.1  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        PHI_TOL.degenerate = 1e-3  # type: ignore[misc]


def test_tolerance_values():
    assert ONE_LOOP_TOL.f2n == 0.04
    assert ONE_LOOP_TOL.fa == 0.001
    assert ONE_LOOP_TOL.fb == 0.01
    assert PHI_TOL.lambda_zero == 1e-11


def test_domain_error_warns_and_returns_nan():
    with pytest.warns(DomainWarning, match="ERROR: F1C: x must not be negative"):
        value = domain_error("F1C", "x")
    assert math.isnan(value)


def test_domain_warning_can_be_escalated():
    import warnings

    with warnings.catch_warnings():
        warnings.simplefilter("error", DomainWarning)
        with pytest.raises(DomainWarning):
            domain_error("Fa", "x, y")
