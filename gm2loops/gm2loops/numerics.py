"""Tolerance tests, argument sorting and region classification."""

from __future__ import annotations

from typing import Literal, Optional, Tuple

Region = Literal["generic", "near_zero", "near_one", "near_equal", "near_both"]


def sqr(x):
    return x * x


def pow3(x):
    return x * x * x


def pow4(x):
    return sqr(sqr(x))


def is_zero(a: float, prec: float) -> bool:
    """Return ``True`` if ``|a| < prec``."""

    return abs(a) < prec


def is_equal(a: float, b: float, prec: float) -> bool:
    """Relative equality test, the width grows with the magnitude of the arguments."""

    return is_zero(a - b, prec * (1.0 + max(abs(a), abs(b))))


def sort2(x: float, y: float) -> Tuple[float, float]:
    return (x, y) if x <= y else (y, x)


def sort3(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Return the three arguments in ascending order."""

    if x > y:
        x, y = y, x
    if y > z:
        y, z = z, y
    if x > y:
        x, y = y, x
    return x, y, z


def classify_one(x: float, one_tol: float, zero_tol: Optional[float] = None) -> Region:
    """Decide which branch of a one-argument function applies at ``x``.

    The checks run in a fixed order: the zero limit (only if ``zero_tol`` is
    given) wins over the expansion around one.
    """

    if zero_tol is not None and is_zero(x, zero_tol):
        return "near_zero"
    if is_equal(x, 1.0, one_tol):
        return "near_one"
    return "generic"


def classify_pair(
    x: float,
    y: float,
    one_tol: float,
    zero_tol: float,
) -> Tuple[Region, float, float]:
    """Decide which branch of a symmetric two-argument function applies.

    Returns the region together with the arguments in the order the branch
    expects them.  For ``"near_one"`` the argument close to one comes second.
    """

    if is_zero(x, zero_tol) or is_zero(y, zero_tol):
        return "near_zero", x, y
    x_one = is_equal(x, 1.0, one_tol)
    y_one = is_equal(y, 1.0, one_tol)
    if x_one and y_one:
        return "near_both", x, y
    if x_one:
        return "near_one", y, x
    if y_one:
        return "near_one", x, y
    if is_equal(x, y, one_tol):
        return "near_equal", x, y
    return "generic", x, y


__all__ = [
    "Region",
    "classify_one",
    "classify_pair",
    "is_equal",
    "is_zero",
    "pow3",
    "pow4",
    "sort2",
    "sort3",
    "sqr",
]
