"""Dilogarithm and Clausen function of order 2.

Both are taken from Spence's function, ``Li2(z) = spence(1 - z)``.  The
Clausen function is the imaginary part of the dilogarithm on the unit
circle, ``Cl2(t) = Im Li2(exp(i t))``.
"""

from __future__ import annotations

import math
from typing import Union

from scipy import special

from .constants import PI

Number = Union[float, complex]


def _spence(w: complex) -> complex:
    return complex(special.spence(w))


def _dilog_real(x: float) -> float:
    """Real dilogarithm, ``Re Li2(x)`` for ``x > 1``."""

    if x == 0.0:
        return 0.0
    if x <= 1.0:
        return float(special.spence(1.0 - x))
    return _spence(complex(1.0 - x, 0.0)).real


def _dilog_complex(z: complex) -> complex:
    """Complex dilogarithm on the principal branch."""

    rz = z.real
    iz = z.imag

    if iz == 0.0:
        if rz <= 1.0:
            return complex(_dilog_real(rz), iz)
        # on the branch cut
        return complex(_dilog_real(rz), -PI * math.log(rz))

    return _spence(complex(1.0 - rz, -iz))


def dilog(z: Number) -> Number:
    """Dilogarithm ``Li2(z)``.

    Real arguments give a real result (the real part of Li2 for ``x > 1``),
    complex arguments give the complex value on the principal branch.  On the
    cut ``x > 1`` a complex argument with zero imaginary part gets the
    imaginary part ``-pi ln x``.
    """

    if isinstance(z, complex):
        return _dilog_complex(z)
    return _dilog_real(float(z))


def clausen_2(x: float) -> float:
    """Clausen function ``Cl2(x) = Im Li2(exp(i x))``."""

    sign = 1.0
    if x < 0.0:
        x = -x
        sign = -1.0

    x = math.fmod(x, 2.0 * PI)
    if x > PI:
        x = 2.0 * PI - x
        sign = -sign

    if x == 0.0 or x == PI:
        return 0.0

    # 1 - exp(i x), with 1 - cos(x) written as 2 sin^2(x/2)
    s = math.sin(0.5 * x)
    w = complex(2.0 * s * s, -math.sin(x))
    return sign * _spence(w).imag


__all__ = ["clausen_2", "dilog"]
