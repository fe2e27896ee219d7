"""Kinematic three-point functions ``Phi`` and ``Iabc``.

``Phi(x, y, z)`` is the two-loop vacuum function of Davydychev and Tausk,
Nucl. Phys. B397 (1993) 23, with squared masses as arguments.  It is built
from the normalised form ``phi_uv(u, v)`` with ``u = x/z`` and ``v = y/z``,
whose evaluation depends on the sign of the Kallen discriminant
``lambda^2(u, v)``:

* ``lambda^2 > 0``: dilogarithm representation (``phi_pos``),
* ``lambda^2 < 0``: Clausen-function representation (``phi_neg``),
* ``lambda^2 = 0``: ``Phi`` carries an overall factor ``lambda^2`` and is 0.

``Iabc(a, b, c)`` is the scalar one-loop three-point integral at zero
external momenta, with masses as arguments.  It equals the second divided
difference of ``t ln t`` at the three squared masses.
"""

from __future__ import annotations

import math

from .constants import EPS, INTEGRAL_TOL, PHI_11, PHI_THRESHOLD_RATIO, PHI_TOL, PI2
from .errors import domain_error
from .numerics import classify_pair, is_equal, is_zero, sort2, sort3, sqr
from .polylog import clausen_2, dilog


def lambda_2(u: float, v: float) -> float:
    """Kallen function ``lambda^2(u, v) = (1 - u - v)^2 - 4 u v``."""

    return sqr(1.0 - u - v) - 4.0 * u * v


def _acos(x: float) -> float:
    # arguments computed at the edge of [-1, 1] may overshoot by one ulp
    return math.acos(max(-1.0, min(1.0, x)))


def phi_pos(u: float, v: float) -> float:
    """``phi_uv`` for ``lambda^2(u, v) > 0`` and ``u, v <= 1``; symmetric in u and v."""

    tol = PHI_TOL.degenerate

    if is_equal(u, 1.0, tol) and is_equal(v, 1.0, tol):
        return PHI_11

    lam = math.sqrt(lambda_2(u, v))

    if is_equal(u, v, tol):
        a = 2.0 * u / (1.0 + lam)
        la = math.log(a)
        return (-sqr(math.log(u)) + 2.0 * sqr(la) - 4.0 * dilog(a) + PI2 / 3.0) / lam

    # (1 - lam + u - v)/2 and (1 - lam - u + v)/2, written without cancellation
    a = 2.0 * u / (1.0 + u - v + lam)
    b = 2.0 * v / (1.0 - u + v + lam)

    return (
        -math.log(u) * math.log(v)
        + 2.0 * math.log(a) * math.log(b)
        - 2.0 * dilog(a)
        - 2.0 * dilog(b)
        + PI2 / 3.0
    ) / lam


def _phi_neg_1v(v: float, lam: float) -> float:
    """``phi_neg(1, v)``."""

    return 2.0 * (
        clausen_2(2.0 * _acos((2.0 - v) / 2.0))
        + 2.0 * clausen_2(2.0 * _acos(0.5 * math.sqrt(v)))
    ) / lam


def phi_neg(u: float, v: float) -> float:
    """``phi_uv`` for ``lambda^2(u, v) < 0``; symmetric in u and v."""

    tol = PHI_TOL.degenerate

    if is_equal(u, 1.0, tol) and is_equal(v, 1.0, tol):
        return PHI_11

    lam = math.sqrt(-lambda_2(u, v))

    if is_equal(u, 1.0, tol):
        return _phi_neg_1v(v, lam)

    if is_equal(v, 1.0, tol):
        return _phi_neg_1v(u, lam)

    if is_equal(u, v, tol):
        return 2.0 * (
            2.0 * clausen_2(2.0 * _acos(1.0 / (2.0 * math.sqrt(u))))
            + clausen_2(2.0 * _acos((2.0 * u - 1.0) / (2.0 * abs(u))))
        ) / lam

    sqrtu = math.sqrt(u)
    sqrtv = math.sqrt(v)

    return 2.0 * (
        clausen_2(2.0 * _acos(0.5 * (1.0 + u - v) / sqrtu))
        + clausen_2(2.0 * _acos(0.5 * (1.0 - u + v) / sqrtv))
        + clausen_2(2.0 * _acos(0.5 * (-1.0 + u + v) / (sqrtu * sqrtv)))
    ) / lam


def phi_uv(u: float, v: float) -> float:
    """Normalised ``Phi``.

    Satisfies ``phi_uv(u, v) = phi_uv(v, u) = phi_uv(1/u, v/u)/u
    = phi_uv(1/v, u/v)/v``.  Returns 0 where ``lambda^2(u, v)`` vanishes,
    because every caller multiplies the result by ``lambda^2``.
    """

    lam2 = lambda_2(u, v)

    if is_zero(lam2, PHI_TOL.lambda_zero):
        return 0.0

    if u == 0.0 or v == 0.0:
        # logarithmic divergence of the massless limit
        return math.inf

    if lam2 > 0.0:
        if u <= 1.0 and v <= 1.0:
            return phi_pos(u, v)
        if u >= 1.0 and v / u <= 1.0:
            return phi_pos(1.0 / u, v / u) / u
        # v >= 1 and u/v <= 1
        return phi_pos(1.0 / v, u / v) / v

    return phi_neg(u, v)


def Phi(x: float, y: float, z: float) -> float:
    """``Phi(x, y, z)`` for squared masses ``x``, ``y``, ``z``.

    Symmetric under any permutation of its arguments.  Returns 0 when the
    Kallen discriminant of the normalised masses vanishes and ``inf`` when
    one mass is zero while the other two differ.

    The degenerate sub-cases of ``phi_uv`` compare the normalised masses
    with an absolute width near 1e-7 once they are small, so two light
    masses next to a heavy one (``Phi(817.8, 0.0087, 0.00865)``) take the
    ``u = v`` formula and lose accuracy at the 1e-4 level.
    """

    if x < 0.0 or y < 0.0 or z < 0.0:
        return domain_error("Phi", "squared masses")

    x, y, z = sort3(x, y, z)

    if z == 0.0:
        return 0.0

    u = x / z
    v = y / z

    return phi_uv(u, v) * z * lambda_2(u, v) / 2.0


def phi_over_threshold(s: float, f: float) -> float:
    """``Phi(s, f, f)/(s - 4f)``, continued through the threshold ``s = 4f``.

    Inside the band where ``Phi`` is set to 0 the analytic limit ``4 ln 2``
    is returned instead of ``0/0``.
    """

    d = s - 4.0 * f

    if is_zero(d, PHI_TOL.lambda_zero * s):
        return PHI_THRESHOLD_RATIO

    return Phi(s, f, f) / d


def _i_aaa(a: float, b: float, c: float) -> float:
    """I(a, b, c) for b and c close to a."""

    ba = b - a
    ca = c - a
    a2 = sqr(a)
    a3 = a2 * a

    return 0.5 / a + (-ba - ca) / (6.0 * a2) + (sqr(ba) + ba * ca + sqr(ca)) / (12.0 * a3)


def _i_aac(a: float, b: float, c: float) -> float:
    """I(a, b, c) for b close to a and c away from a."""

    ba = b - a
    ac = a - c
    a2 = sqr(a)
    a3 = a2 * a
    c2 = sqr(c)
    c3 = c2 * c
    ac2 = sqr(ac)
    ac3 = ac2 * ac
    ac4 = ac2 * ac2
    lac = math.log(a / c)

    return (
        (ac - c * lac) / ac2
        + ba * (-a2 + c2 + 2.0 * a * c * lac) / (2.0 * a * ac3)
        + sqr(ba) * (2.0 * a3 + 3.0 * a2 * c - 6.0 * a * c2 + c3 - 6.0 * a2 * c * lac) / (6.0 * a2 * ac4)
    )


def _i_0y(y: float) -> float:
    """I(0, y, 1)."""

    if is_equal(y, 1.0, INTEGRAL_TOL.equal):
        d = y - 1.0
        return 1.0 + d * (-0.5 + d / 3.0)
    return math.log(y) / (y - 1.0)


def Ixy(x: float, y: float) -> float:
    """Normalised three-point integral ``I(x, y, 1)`` of squared masses."""

    x, y = sort2(x, y)
    region, a, b = classify_pair(x, y, INTEGRAL_TOL.equal, EPS)

    if region == "near_zero":
        if is_zero(y, EPS):
            return 0.0
        return _i_0y(y)
    if region == "near_both":
        return _i_aaa(1.0, x, y)
    if region == "near_one":
        return _i_aac(1.0, b, a)
    if region == "near_equal":
        return _i_aac(x, y, 1.0)

    lx = math.log(x)
    ly = math.log(y)

    return (x * (y - 1.0) * lx - y * (x - 1.0) * ly) / ((x - 1.0) * (x - y) * (y - 1.0))


def Ixyz(x: float, y: float, z: float) -> float:
    """Three-point integral ``I(x, y, z)`` of squared masses."""

    if x < 0.0 or y < 0.0 or z < 0.0:
        return domain_error("Ixyz", "squared masses")

    x, y, z = sort3(x, y, z)

    if is_zero(z, EPS):
        return 0.0

    return Ixy(x / z, y / z) / z


def Iabc(a: float, b: float, c: float) -> float:
    """Three-point integral ``I(a, b, c)`` with masses (not squared) as arguments."""

    return Ixyz(sqr(a), sqr(b), sqr(c))


__all__ = [
    "Iabc",
    "Ixy",
    "Ixyz",
    "Phi",
    "lambda_2",
    "phi_neg",
    "phi_over_threshold",
    "phi_pos",
    "phi_uv",
]
