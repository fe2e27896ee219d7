"""One-loop form factors of the chargino and neutralino contributions.

Every single-argument function follows the same decision table:

1. negative argument -> ``DomainWarning`` and ``nan``,
2. ``x`` at zero -> the exact limit stored in :mod:`.constants`,
3. ``x`` within the function's radius around one -> polynomial in ``x - 1``,
4. otherwise the closed form in ``x``, ``ln x`` and ``Li2(1 - x)``.

All functions are normalised to 1 at ``x = 1``.  The expansion radii live in
:data:`.constants.ONE_LOOP_TOL`.

References: Martin and Wells, Phys. Rev. D64 (2001) 035003 (``F1C .. F4N``)
and Athron et al., Eur. Phys. J. C76 (2016) 62 (``G3``, ``G4``, ``Fa``, ``Fb``).
"""

from __future__ import annotations

import math

from .constants import (
    EPS,
    F1C_ZERO,
    F1N_ZERO,
    F2C_ZERO,
    F2N_ZERO,
    F3N_ZERO,
    F4C_ZERO,
    F4N_ZERO,
    G4_ZERO,
    ONE_LOOP_TOL,
)
from .errors import domain_error
from .numerics import classify_one, classify_pair, pow3, pow4, sqr
from .polylog import dilog


def F1C(x: float) -> float:
    """Chargino form factor ``F1C(x)``; ``F1C(0) = 4``."""

    if x < 0.0:
        return domain_error("F1C", "x")

    region = classify_one(x, ONE_LOOP_TOL.f1c, EPS)
    if region == "near_zero":
        return F1C_ZERO

    d = x - 1.0
    if region == "near_one":
        return 1.0 + d * (-0.6 + d * (0.4 + d * (-2.0 / 7.0
               + d * (3.0 / 14.0 + d * (-1.0 / 6.0 + 2.0 / 15.0 * d)))))

    return 2.0 / pow4(d) * (2.0 + x * (3.0 + 6.0 * math.log(x) + x * (-6.0 + x)))


def F2C(x: float) -> float:
    if x < 0.0:
        return domain_error("F2C", "x")

    region = classify_one(x, ONE_LOOP_TOL.f2c, EPS)
    if region == "near_zero":
        return F2C_ZERO

    d = x - 1.0
    if region == "near_one":
        return 1.0 + d * (-0.75 + d * (0.6 + d * (-0.5 + d * (3.0 / 7.0
               + d * (-0.375 + d / 3.0)))))

    return 3.0 / (2.0 * pow3(1.0 - x)) * (-3.0 - 2.0 * math.log(x) + x * (4.0 - x))


def F3C(x: float) -> float:
    """Chargino form factor ``F3C(x)``.

    Diverges logarithmically at ``x = 0``, where ``-inf`` is returned.
    """

    if x < 0.0:
        return domain_error("F3C", "x")
    if x == 0.0:
        return -math.inf

    d = x - 1.0
    if classify_one(x, ONE_LOOP_TOL.f3c) == "near_one":
        return 1.0 + d * (1059.0 / 1175.0 + d * (-4313.0 / 3525.0
               + d * (70701.0 / 57575.0 + d * (-265541.0 / 230300.0
               + d * (48919.0 / 46060.0 - 80755.0 / 82908.0 * d)))))

    lx = math.log(x)
    x2 = sqr(x)
    x3 = x2 * x

    return 4.0 / (141.0 * pow4(d)) * (
        (1.0 - x) * (151.0 * x2 - 335.0 * x + 592.0)
        + 6.0 * (21.0 * x3 - 108.0 * x2 - 93.0 * x + 50.0) * lx
        - 54.0 * x * (x2 - 2.0 * x - 2.0) * sqr(lx)
        - 108.0 * x * (x2 - 2.0 * x + 12.0) * dilog(1.0 - x)
    )


def F4C(x: float) -> float:
    if x < 0.0:
        return domain_error("F4C", "x")

    region = classify_one(x, ONE_LOOP_TOL.f4c, EPS)
    if region == "near_zero":
        return F4C_ZERO

    d = x - 1.0
    if region == "near_one":
        return 1.0 + d * (-45.0 / 122.0 + d * (941.0 / 6100.0
               + d * (-17.0 / 305.0 + d * (282.0 / 74725.0
               + d * (177.0 / 6832.0 - 47021.0 / 1076040.0 * d)))))

    lx = math.log(x)
    x2 = sqr(x)

    return -9.0 / (122.0 * pow3(1.0 - x)) * (
        8.0 * (x2 - 3.0 * x + 2.0)
        + (11.0 * x2 - 40.0 * x + 5.0) * lx
        - 2.0 * (x2 - 2.0 * x - 2.0) * sqr(lx)
        - 4.0 * (x2 - 2.0 * x + 9.0) * dilog(1.0 - x)
    )


def F1N(x: float) -> float:
    """Neutralino form factor ``F1N(x)``; ``F1N(0) = 2``."""

    if x < 0.0:
        return domain_error("F1N", "x")

    region = classify_one(x, ONE_LOOP_TOL.f1n, EPS)
    if region == "near_zero":
        return F1N_ZERO

    d = x - 1.0
    if region == "near_one":
        return 1.0 + d * (-0.4 + d * (0.2 + d * (-4.0 / 35.0
               + d * (1.0 / 14.0 + d * (-1.0 / 21.0 + d / 30.0)))))

    return 2.0 / pow4(d) * (1.0 + x * (-6.0 + x * (3.0 - 6.0 * math.log(x) + 2.0 * x)))


def F2N(x: float) -> float:
    """Neutralino form factor ``F2N(x)``; ``F2N(0) = 3``."""

    if x < 0.0:
        return domain_error("F2N", "x")

    region = classify_one(x, ONE_LOOP_TOL.f2n, EPS)
    if region == "near_zero":
        return F2N_ZERO

    d = x - 1.0
    if region == "near_one":
        return 1.0 + d * (-0.5 + d * (0.3 + d * (-0.2 + d * (1.0 / 7.0
               + d * (-3.0 / 28.0 + d / 12.0)))))

    return 3.0 / pow3(1.0 - x) * (1.0 + x * (2.0 * math.log(x) - x))


def F3N(x: float) -> float:
    if x < 0.0:
        return domain_error("F3N", "x")

    region = classify_one(x, ONE_LOOP_TOL.f3n, EPS)
    if region == "near_zero":
        return F3N_ZERO

    d = x - 1.0
    if region == "near_one":
        return 1.0 + d * (76.0 / 875.0 + d * (-431.0 / 2625.0
               + d * (5858.0 / 42875.0 + d * (-3561.0 / 34300.0
               + d * (23.0 / 294.0 - 4381.0 / 73500.0 * d)))))

    x2 = sqr(x)

    return 4.0 / (105.0 * pow4(d)) * (
        (1.0 - x) * (-97.0 * x2 - 529.0 * x + 2.0)
        + 6.0 * x2 * (13.0 * x + 81.0) * math.log(x)
        + 108.0 * x * (7.0 * x + 4.0) * dilog(1.0 - x)
    )


def F4N(x: float) -> float:
    """Neutralino form factor ``F4N(x)``; ``F4N(0) = -3/4 (pi^2 - 9)``."""

    if x < 0.0:
        return domain_error("F4N", "x")

    region = classify_one(x, ONE_LOOP_TOL.f4n, EPS)
    if region == "near_zero":
        return F4N_ZERO

    d = x - 1.0
    if region == "near_one":
        return 1.0 + sqr(d) * (-111.0 / 800.0 + d * (59.0 / 400.0
               + d * (-129.0 / 980.0 + d * (177.0 / 1568.0 - 775.0 / 8064.0 * d))))

    return -2.25 / pow3(1.0 - x) * (
        (x + 3.0) * (x * math.log(x) + x - 1.0)
        + (6.0 * x + 2.0) * dilog(1.0 - x)
    )


def G3(x: float) -> float:
    """Loop function ``G3(x)``, normalised to ``G3(1) = 1/3``; ``+inf`` at ``x = 0``."""

    if x < 0.0:
        return domain_error("G3", "x")
    if x == 0.0:
        return math.inf

    d = x - 1.0
    if classify_one(x, ONE_LOOP_TOL.g3) == "near_one":
        return 1.0 / 3.0 + d * (-0.25 + d * (0.2 + (-1.0 / 6.0 + d / 7.0) * d))

    return (d * (x - 3.0) + 2.0 * math.log(x)) / (2.0 * pow3(d))


def G4(x: float) -> float:
    """Loop function ``G4(x)``, normalised to ``G4(1) = 1/6``."""

    if x < 0.0:
        return domain_error("G4", "x")
    if x == 0.0:
        return G4_ZERO

    d = x - 1.0
    if classify_one(x, ONE_LOOP_TOL.g4) == "near_one":
        return 1.0 / 6.0 + d * (-1.0 / 12.0 + d * (0.05 + (-1.0 / 30.0 + d / 42.0) * d))

    return (d * (x + 1.0) - 2.0 * x * math.log(x)) / (2.0 * pow3(d))


def _fa11(x: float, y: float) -> float:
    """Fa(x, y) for x and y close to 1."""

    x1 = x - 1.0
    y1 = y - 1.0

    return (
        0.25 + (-0.2 + y1 / 6.0) * y1
        + x1 * (-0.2 + (1.0 / 6.0 - y1 / 7.0) * y1)
        + sqr(x1) * (1.0 / 6.0 + (-1.0 / 7.0 + y1 / 8.0) * y1)
    )


def _fa1(x: float, y: float) -> float:
    """Fa(x, y) for y close to 1, x away from 1."""

    x1 = x - 1.0
    y1 = y - 1.0
    lx = math.log(x)
    x14 = pow4(x1)
    x15 = x14 * x1
    x16 = x15 * x1

    return (
        (-11.0 - 6.0 * lx + x * (18.0 + x * (-9.0 + 2.0 * x))) / (6.0 * x14)
        + y1 * (-25.0 - 12.0 * lx + x * (48.0 + x * (-36.0 + x * (16.0 - 3.0 * x)))) / (12.0 * x15)
        + sqr(y1) * (-137.0 - 60.0 * lx
                     + x * (300.0 + x * (-300.0 + x * (200.0 + x * (-75.0 + 12.0 * x))))) / (60.0 * x16)
    )


def _fax(x: float, y: float) -> float:
    """Fa(x, y) for y close to x, both away from 1."""

    d = y - x
    x1 = x - 1.0
    lx = math.log(x)
    x14 = pow4(x1)
    x15 = x14 * x1
    x16 = x15 * x1

    return (
        (2.0 + x * (3.0 + 6.0 * lx + x * (-6.0 + x))) / (2.0 * x14 * x)
        - d * (-1.0 + x * (8.0 + x * (12.0 * lx + x * (-8.0 + x)))) / (2.0 * x15 * sqr(x))
        - sqr(d) * (-2.0 + x * (15.0 + x * (-60.0 + x * (20.0 - 60.0 * lx + x * (30.0 - 3.0 * x)))))
        / (6.0 * x16 * pow3(x))
    )


def Fa(x: float, y: float) -> float:
    """Two-argument loop function ``Fa(x, y) = -(G3(x) - G3(y))/(x - y)``.

    Symmetric in its arguments and 0 when either of them vanishes.  The
    ``x = y`` expansion is selected by ``is_equal``, whose width
    ``prec * (1 + max(x, y))`` is effectively absolute for arguments well
    below 1, so small but clearly different arguments can land in it.
    """

    if x < 0.0 or y < 0.0:
        return domain_error("Fa", "x, y")

    region, a, b = classify_pair(x, y, ONE_LOOP_TOL.fa, EPS)

    if region == "near_zero":
        return 0.0
    if region == "near_both":
        return _fa11(x, y)
    if region == "near_one":
        return _fa1(a, b)
    if region == "near_equal":
        return _fax(x, y)

    return -(G3(x) - G3(y)) / (x - y)


def _fb11(x: float, y: float) -> float:
    """Fb(x, y) for x and y close to 1."""

    x1 = x - 1.0
    y1 = y - 1.0

    return (
        1.0 / 12.0 + (-0.05 + y1 / 30.0) * y1
        + x1 * (-0.05 + (1.0 / 30.0 - y1 / 42.0) * y1
                + x1 * (1.0 / 30.0 + (-1.0 / 42.0 + y1 / 56.0) * y1))
    )


def _fb1(x: float, y: float) -> float:
    """Fb(x, y) for y close to 1, x away from 1."""

    x1 = x - 1.0
    y1 = y - 1.0
    lx = math.log(x)
    x14 = pow4(x1)
    x15 = x14 * x1
    x16 = x15 * x1

    return (
        (2.0 + x * (3.0 + 6.0 * lx + x * (-6.0 + x))) / (6.0 * x14)
        + y1 * (3.0 + x * (10.0 + 12.0 * lx + x * (-18.0 + x * (6.0 - x)))) / (12.0 * x15)
        + sqr(y1) * (12.0 + x * (65.0 + 60.0 * lx
                     + x * (-120.0 + x * (60.0 + x * (-20.0 + 3.0 * x))))) / (60.0 * x16)
    )


def _fbx(x: float, y: float) -> float:
    """Fb(x, y) for y close to x, both away from 1."""

    d = y - x
    x1 = x - 1.0
    lx = math.log(x)
    x14 = pow4(x1)
    x15 = x14 * x1
    x16 = x15 * x1

    return (
        (-5.0 - 2.0 * lx + x * (4.0 - 4.0 * lx + x)) / (2.0 * x14)
        - d * (-1.0 + x * (-9.0 - 6.0 * lx + x * (9.0 - 6.0 * lx + x))) / (2.0 * x15 * x)
        - sqr(d) * (-1.0 + x * (12.0 + x * (36.0 + 36.0 * lx + x * (-44.0 + 24.0 * lx - 3.0 * x))))
        / (6.0 * x16 * sqr(x))
    )


def Fb(x: float, y: float) -> float:
    """Two-argument loop function ``Fb(x, y) = -(G4(x) - G4(y))/(x - y)``.

    Symmetric in its arguments and 0 when either of them vanishes.  As for
    ``Fa``, the ``x = y`` band has an absolute width of about 0.01 for small
    arguments: ``Fb(0.00133, 0.01115)`` comes from the expansion and is far
    from the divided difference.
    """

    if x < 0.0 or y < 0.0:
        return domain_error("Fb", "x, y")

    region, a, b = classify_pair(x, y, ONE_LOOP_TOL.fb, EPS)

    if region == "near_zero":
        return 0.0
    if region == "near_both":
        return _fb11(x, y)
    if region == "near_one":
        return _fb1(a, b)
    if region == "near_equal":
        return _fbx(x, y)

    return -(G4(x) - G4(y)) / (x - y)


__all__ = [
    "F1C",
    "F1N",
    "F2C",
    "F2N",
    "F3C",
    "F3N",
    "F4C",
    "F4N",
    "Fa",
    "Fb",
    "G3",
    "G4",
]
