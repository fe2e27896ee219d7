"""Bosonic two-loop contributions of the general two-Higgs-doublet model.

Only the pieces with a complete closed form are provided: the electroweak
correction of Eq. (49) and the leading Yukawa term ``a_000`` of Eq. (52) of
arXiv:1607.06292.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import PI, PI2
from .errors import domain_error
from .kinematics import Phi, phi_over_threshold
from .numerics import sqr
from .thdm_fermionic import MASS_H_SM, ElectroweakInputs


@dataclass(frozen=True)
class BosonicInputs(ElectroweakInputs):
    """Electroweak inputs plus the Standard-Model Higgs and charged-Higgs masses [GeV]."""

    mhSM: float = MASS_H_SM
    mHp: float = 440.0


def amu2L_B_EWadd(eta: float, zeta_l: float) -> float:
    """Eq. (49): electroweak two-loop correction ``2.3e-11 eta zeta_l``."""

    return 2.3e-11 * eta * zeta_l


def YF1(u: float, w: float, cw2: float) -> float:
    """Eq. (102), with ``u = m_h^2/m_Z^2`` and ``w = m_{H^+}^2/m_Z^2``."""

    if u <= 0.0 or w <= 0.0:
        return domain_error("YF1", "mass ratios", "must be positive")

    cw4 = sqr(cw2)
    uw = u + 2.0 * w

    return (
        -72.0 * cw2 * (cw2 - 1.0) * uw / u
        - 36.0 * cw2 * (cw2 - 1.0) * uw / u * math.log(w)
        + 9.0 * (-8.0 * cw4 - 3.0 * u + 2.0 * cw2 * (4.0 + u)) * uw / (2.0 * (u - 1.0) * u) * math.log(u)
        # Phi(w, w, 1)/(4w - 1) = -Phi(1, w, w)/(1 - 4w)
        + 9.0 * (3.0 - 10.0 * cw2 + 8.0 * cw4) * w * uw / (u - 1.0) * phi_over_threshold(1.0, w)
        + 9.0 * (8.0 * cw4 + 3.0 * u - 2.0 * cw2 * (4.0 + u)) * w * uw
        / ((4.0 * w - u) * (u - 1.0) * sqr(u)) * Phi(w, w, w)
    )


def fb(u: float, w: float, al: float, cw2: float) -> float:
    """Eq. (99)."""

    return al * PI / (cw2 * (cw2 - 1.0)) * (u + 2.0 * w)


def Fm0(u: float, w: float, al: float, cw2: float, mm2: float, mz2: float) -> float:
    """Eq. (100)."""

    sw2 = 1.0 - cw2

    return (
        sqr(al) / (576.0 * PI2 * sqr(cw2) * sqr(sw2)) * mm2 / mz2
        / (al * PI) * YF1(u, w, cw2)
    )


def amu2L_B_Yuk_leading(pars: BosonicInputs) -> float:
    """Leading Yukawa term ``a_000 = fb Fm0`` of Eq. (52)."""

    mz2 = sqr(pars.mz)
    cw2 = pars.cw2
    xhSM = sqr(pars.mhSM) / mz2
    xHp = sqr(pars.mHp) / mz2
    al = pars.alpha_em

    return fb(xhSM, xHp, al, cw2) * Fm0(xhSM, xHp, al, cw2, sqr(pars.mm), mz2)


__all__ = [
    "BosonicInputs",
    "Fm0",
    "YF1",
    "amu2L_B_EWadd",
    "amu2L_B_Yuk_leading",
    "fb",
]
