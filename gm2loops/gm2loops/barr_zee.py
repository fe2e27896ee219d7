"""Two-loop Barr-Zee form factors.

``f_PS``, ``f_S`` and ``f_sferm`` are Eqs. (70)-(72) of Stöckinger,
J. Phys. G34 (2007) R45 [arXiv:hep-ph/0609168].  ``F1``, ``F1t``, ``F2``
and ``F3`` are the photonic Barr-Zee functions of the two-Higgs-doublet
model, arXiv:1607.06292.

The defining square root ``y = sqrt(1 - 4w)`` is real below ``w = 1/4`` and
imaginary above it.  Both regimes share one complex-valued evaluation; only
the real part is returned, the imaginary part is rounding noise.
"""

from __future__ import annotations

import cmath
import math

from .constants import F1_QUARTER, F2_QUARTER, F3_QUARTER, F_PS_QUARTER, LOG2, QUARTER
from .errors import domain_error
from .polylog import dilog

_LOG16 = 2.7725887222397812      # 4 Log[2]
_LOG2_3_2 = 1.0397207708399180   # 3/2 Log[2]


def _f_ps_complex(z: float) -> complex:
    """``f_PS`` above the branch point, ``z > 1/4``."""

    y = cmath.sqrt(complex(1.0 - 4.0 * z, 0.0))
    return 2.0 * z / y * (dilog(1.0 - 0.5 * (1.0 - y) / z) - dilog(1.0 - 0.5 * (1.0 + y) / z))


def f_PS(z: float) -> float:
    """Pseudoscalar Barr-Zee loop function ``f_PS(z)``.

    Args:
        z: Squared mass ratio ``m_f^2 / m_S^2``, non-negative.

    Returns:
        ``f_PS(z)``; ``0`` at ``z = 0`` and ``ln 4`` at ``z = 1/4``.
    """

    if z < 0.0:
        return domain_error("f_PS", "z")
    if z == 0.0:
        return 0.0
    if z < QUARTER:
        y = math.sqrt(1.0 - 4.0 * z)
        return 2.0 * z / y * (dilog(1.0 - 0.5 * (1.0 - y) / z) - dilog(1.0 - 0.5 * (1.0 + y) / z))
    if z == QUARTER:
        return F_PS_QUARTER

    return _f_ps_complex(z).real


def f_S(z: float) -> float:
    """Scalar Barr-Zee loop function ``f_S(z) = (2z - 1) f_PS(z) - 2z (2 + ln z)``."""

    if z < 0.0:
        return domain_error("f_S", "z")
    if z == 0.0:
        return 0.0

    return (2.0 * z - 1.0) * f_PS(z) - 2.0 * z * (2.0 + math.log(z))


def f_sferm(z: float) -> float:
    """Sfermion Barr-Zee loop function ``f_sferm(z) = z/2 (2 + ln z - f_PS(z))``."""

    if z < 0.0:
        return domain_error("f_sferm", "z")
    if z == 0.0:
        return 0.0

    return 0.5 * z * (2.0 + math.log(z) - f_PS(z))


def _f1_complex(w: float) -> complex:
    y = cmath.sqrt(complex(1.0 - 4.0 * w, 0.0))
    lm1my = cmath.log(-1.0 - y)
    l1my = cmath.log(1.0 - y)
    lw = math.log(w)

    res = (
        -2.0 * y - y * lw + w * _LOG16 * l1my + 2.0 * w * lw * l1my
        - 2.0 * w * l1my * (l1my + cmath.log(1.0 + y))
        + (l1my - (1.0 - 2.0 * w) * lm1my) * cmath.log((1.0 - y) * (1.0 + y) / (4.0 * w))
        + (1.0 - 2.0 * w) * (dilog((1.0 + y) / (-1.0 + y)) - dilog((-1.0 + y) / (1.0 + y)))
    )

    return w / y * res


def F1(w: float) -> float:
    """Barr-Zee function ``F1(w)``; ``F1(0) = 0`` and ``F1(1/4) = -1/2``."""

    if w < 0.0:
        return domain_error("F1", "w")
    if w == 0.0:
        return 0.0
    if w == QUARTER:
        return F1_QUARTER

    return _f1_complex(w).real


def F1t(w: float) -> float:
    """``F1t(w) = f_PS(w)/2``."""

    if w < 0.0:
        return domain_error("F1t", "w")

    return 0.5 * f_PS(w)


def _f2_complex(w: float) -> complex:
    y = cmath.sqrt(complex(1.0 - 4.0 * w, 0.0))
    lm1my = cmath.log(-1.0 - y)
    l1my = cmath.log(1.0 - y)
    lw = math.log(w)

    res = (
        l1my * (l1my - lm1my - _LOG2_3_2 - lw + 0.5 * cmath.log(1.0 + y))
        + lm1my * (LOG2 + lw) + (1.0 + 0.5 * lw) * y / w
        - (0.5 * l1my - lm1my) * cmath.log(2.0 / (1.0 + y))
        + dilog((1.0 + y) / (-1.0 + y)) - dilog((-1.0 + y) / (1.0 + y))
    )

    return w / y * res


def F2(w: float) -> float:
    """Barr-Zee function ``F2(w)``.

    ``F2(1/4) = 1 - ln 4``.  The function diverges like ``ln(w)/2`` for
    ``w -> 0``, so ``-inf`` is returned at ``w = 0``.
    """

    if w < 0.0:
        return domain_error("F2", "w")
    if w == 0.0:
        return -math.inf
    if w == QUARTER:
        return F2_QUARTER

    return _f2_complex(w).real


def _f3_complex(w: float) -> complex:
    y = cmath.sqrt(complex(1.0 - 4.0 * w, 0.0))
    lm1my = cmath.log(-1.0 - y)
    l1my = cmath.log(1.0 - y)
    l1py = cmath.log(1.0 + y)
    lm1py = cmath.log(-1.0 + y)
    l2o1py = cmath.log(2.0 / (1.0 + y))
    lw = math.log(w)
    l2 = LOG2
    l8 = 3.0 * l2
    l12 = 12.0 * l2

    res = (
        l1my * l1my * (-45.0 - 57.0 * y + 36.0 * w * (4.0 + y))
        + lw * (6.0 * (15.0 + 1.0 / w) * y + 3.0 * (-19.0 + 12.0 * w) * (-1.0 + y) * lm1py)
        + 6.0 * (
            30.0 * y + (2.0 * y) / w + 19.0 * l2 * lm1py - 12.0 * w * l2 * lm1py
            - 19.0 * y * l2 * lm1py + 12.0 * w * y * l2 * lm1py
            + (17.0 - 30.0 * w) * (dilog((-1.0 + y) / (1.0 + y)) - dilog((1.0 + y) / (-1.0 + y)))
        )
        + lm1my * (
            -45.0 * l2 + (-19.0 + 12.0 * w) * y * l8 + 12.0 * w * l12
            + (-45.0 - 57.0 * y + 36.0 * w * (4.0 + y)) * lw
            + 3.0 * (-15.0 - 19.0 * y + 12.0 * w * (4.0 + y)) * l2o1py
        )
        + l1my * (
            (lm1my + lw) * (45.0 + 57.0 * y - 36.0 * w * (4.0 + y))
            + l1py * (63.0 - 57.0 * y + 18.0 * w * (1.0 + 2.0 * y))
            + 39.0 * l2 - 198.0 * w * l2 + 19.0 * y * l8 - 12.0 * w * y * l8
            - 3.0 * (-19.0 + 12.0 * w) * (-1.0 + y) * lm1py
            + (51.0 + 57.0 * y - 18.0 * w * (5.0 + 2.0 * y)) * l2o1py
        )
        + l1py * (19.0 - 12.0 * w) * (-1.0 + y) * (3.0 * lw + l8 + 3.0 * lm1py + 3.0 * l2o1py)
    )

    return w / (12.0 * y) * res


def F3(w: float) -> float:
    """Barr-Zee function ``F3(w)``; ``F3(1/4) = 19/4``, ``-inf`` at ``w = 0``."""

    if w < 0.0:
        return domain_error("F3", "w")
    if w == 0.0:
        return -math.inf
    if w == QUARTER:
        return F3_QUARTER

    return _f3_complex(w).real


__all__ = ["F1", "F1t", "F2", "F3", "f_PS", "f_S", "f_sferm"]
