"""Fermionic two-loop Barr-Zee contributions of the general two-Higgs-doublet model.

Equations refer to Cherchiglia, Kneschke, Stöckinger and Stöckinger-Kim,
JHEP 01 (2017) 007 [arXiv:1607.06292].  A fermion loop couples to the muon
line through a neutral scalar ``S = h, H, A`` (with a photon or a Z boson)
or through the charged Higgs ``H^+`` (with a W boson).

Example
-------
>>> from gm2loops.gm2loops.thdm_fermionic import FermionicInputs, amu2L_F
>>> inputs = FermionicInputs.aligned(zeta_u=0.0, zeta_d=0.0, zeta_l=0.0, sin_bma=1.0)
>>> amu2L_F(inputs)
0.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Tuple

import numpy as np

from .constants import PI2
from .errors import domain_error
from .kinematics import Phi, phi_over_threshold
from .numerics import sqr
from .polylog import dilog

FormFactor = Callable[[float, float], float]

# PDG 2020 central values [GeV]
ALPHA_EM_THOMSON = 1.0 / 137.035999084
MASS_MUON = 0.1056583745
MASS_W = 80.379
MASS_Z = 91.1876
MASS_H_SM = 125.10
MASSES_UP = (0.00216, 1.27, 172.76)
MASSES_DOWN = (0.00467, 0.093, 4.18)
MASSES_LEPTON = (0.000510998950, MASS_MUON, 1.77686)

Q_U = 2.0 / 3.0
Q_D = -1.0 / 3.0
Q_L = -1.0
T3_U = 1.0
T3_D = -1.0
T3_L = -1.0

SQRT2 = 1.4142135623730950


@dataclass(frozen=True)
class ElectroweakInputs:
    """Electroweak parameters entering every prefactor."""

    alpha_em: float = ALPHA_EM_THOMSON
    mm: float = MASS_MUON
    mw: float = MASS_W
    mz: float = MASS_Z

    @property
    def cw2(self) -> float:
        return sqr(self.mw) / sqr(self.mz)

    @property
    def sw2(self) -> float:
        return 1.0 - self.cw2

    @property
    def prefactor(self) -> float:
        """``alpha^2 m_mu^2 / (pi^2 m_W^2)``, shared by Eqs. (54), (55) and (59)."""

        return sqr(self.alpha_em) * sqr(self.mm) / (PI2 * sqr(self.mw))


@dataclass(frozen=True)
class FermionCharges:
    """Quantum numbers of the loop fermion ``f`` and of the external lepton ``l``."""

    qf: float
    ql: float
    t3f: float
    t3l: float
    nc: float


UP_CHARGES = FermionCharges(qf=Q_U, ql=Q_L, t3f=T3_U, t3l=T3_L, nc=3.0)
DOWN_CHARGES = FermionCharges(qf=Q_D, ql=Q_L, t3f=T3_D, t3l=T3_L, nc=3.0)
LEPTON_CHARGES = FermionCharges(qf=Q_L, ql=Q_L, t3f=T3_L, t3l=T3_L, nc=1.0)


def FS(ms2: float, mf2: float) -> float:
    """Eq. (56), loop function of the CP-even scalars ``S = h, H``."""

    if ms2 <= 0.0 or mf2 <= 0.0:
        return domain_error("FS", "squared masses", "must be positive")

    return -2.0 + math.log(ms2 / mf2) - (ms2 - 2.0 * mf2) / ms2 * phi_over_threshold(ms2, mf2)


def FA(ms2: float, mf2: float) -> float:
    """Eq. (57), loop function of the CP-odd scalar ``A``."""

    if ms2 <= 0.0 or mf2 <= 0.0:
        return domain_error("FA", "squared masses", "must be positive")

    return phi_over_threshold(ms2, mf2)


def fSgamma(ms2: float, mf2: float, charges: FermionCharges, ew: ElectroweakInputs, form: FormFactor = FS) -> float:
    """Eq. (54), photonic part of the neutral-scalar Barr-Zee diagram."""

    return (
        ew.prefactor / (4.0 * ew.sw2)
        * sqr(charges.qf) * charges.nc * mf2 / ms2 * form(ms2, mf2)
    )


def fSZ(ms2: float, mf2: float, charges: FermionCharges, ew: ElectroweakInputs, form: FormFactor = FS) -> float:
    """Eq. (55), Z-boson part of the neutral-scalar Barr-Zee diagram."""

    mz2 = sqr(ew.mz)
    cw2 = ew.cw2
    sw2 = ew.sw2
    gvf = 0.5 * charges.t3f - charges.qf * sw2
    gvl = 0.5 * charges.t3l - charges.ql * sw2

    return (
        ew.prefactor / (4.0 * sw2)
        * (-charges.nc * charges.qf * gvl * gvf) / (sw2 * cw2)
        * mf2 / (ms2 - mz2) * (form(ms2, mf2) - form(mz2, mf2))
    )


def ffS(ms2: float, mf2: float, charges: FermionCharges, ew: ElectroweakInputs, form: FormFactor = FS) -> float:
    """Eq. (53), full neutral-scalar contribution of one fermion; 0 for a massless fermion.

    Pass ``form=FS`` for ``S = h, H`` and ``form=FA`` for ``S = A``.
    """

    if mf2 == 0.0:
        return 0.0

    return fSgamma(ms2, mf2, charges, ew, form) + fSZ(ms2, mf2, charges, ew, form)


def FlHp(ms2: float, mf2: float) -> float:
    """Eq. (60), charged-Higgs loop function of a lepton."""

    if ms2 <= 0.0 or mf2 <= 0.0:
        return domain_error("FlHp", "squared masses", "must be positive")

    xl = mf2 / ms2

    return xl + xl * (xl - 1.0) * (dilog(1.0 - 1.0 / xl) - PI2 / 6.0) + (xl - 0.5) * math.log(xl)


def _charged_kinematics(ms2: float, md2: float, mu2: float) -> Tuple[float, float, float, float]:
    xu = mu2 / ms2
    xd = md2 / ms2
    y = sqr(xu - xd) - 2.0 * (xu + xd) + 1.0
    return xu, xd, y, Phi(xd, xu, 1.0)


def FdHp(ms2: float, md2: float, mu2: float, qd: float, qu: float) -> float:
    """Eq. (61), charged-Higgs loop function with the photon attached to the down-type quark."""

    if ms2 <= 0.0 or md2 <= 0.0 or mu2 <= 0.0:
        return domain_error("FdHp", "squared masses", "must be positive")

    xu, xd, y, phi = _charged_kinematics(ms2, md2, mu2)

    if y == 0.0:
        return domain_error("FdHp", "mass ratios", "must not sit on the threshold sqrt(xu) + sqrt(xd) = 1")

    s = 0.25 * (qu + qd)
    c = sqr(xu - xd) - qu * xu + qd * xd
    cbar = (xu - qu) * xu - (xd + qd) * xd
    lxu = math.log(xu)
    lxd = math.log(xd)

    return (
        -(xu - xd)
        + (cbar / y - c * (xu - xd) / y) * phi
        + c * (dilog(1.0 - xd / xu) - 0.5 * lxu * (lxd - lxu))
        + (s + xd) * lxd
        + (s - xu) * lxu
    )


def FuHp(ms2: float, md2: float, mu2: float, qd: float, qu: float) -> float:
    """Eq. (62), charged-Higgs loop function with the photon attached to the up-type quark."""

    if ms2 <= 0.0 or md2 <= 0.0 or mu2 <= 0.0:
        return domain_error("FuHp", "squared masses", "must be positive")

    xu, xd, y, phi = _charged_kinematics(ms2, md2, mu2)

    if y == 0.0:
        return domain_error("FuHp", "mass ratios", "must not sit on the threshold sqrt(xu) + sqrt(xd) = 1")

    return (
        FdHp(ms2, md2, mu2, 2.0 + qd, 2.0 + qu)
        - 4.0 / 3.0 * (xu - xd - 1.0) / y * phi
        - 1.0 / 3.0 * (sqr(math.log(xd)) - sqr(math.log(xu)))
    )


def _charged_prefactor(ms2: float, ew: ElectroweakInputs) -> float:
    return ew.prefactor / (32.0 * sqr(ew.sw2)) / (ms2 - sqr(ew.mw))


def flHp(ms2: float, ml2: float, ew: ElectroweakInputs) -> float:
    """Eq. (59) for a lepton in the loop; 0 for a massless lepton."""

    if ml2 == 0.0:
        return 0.0

    mw2 = sqr(ew.mw)

    return _charged_prefactor(ms2, ew) * ml2 * (FlHp(ms2, ml2) - FlHp(mw2, ml2))


def fuHp(ms2: float, md2: float, mu2: float, qd: float, qu: float, ew: ElectroweakInputs) -> float:
    """Eq. (59) for the up-type quark of a doublet; 0 for a massless up-type quark."""

    if mu2 == 0.0:
        return 0.0

    mw2 = sqr(ew.mw)

    return (
        _charged_prefactor(ms2, ew) * 3.0 * mu2
        * (FuHp(ms2, md2, mu2, qd, qu) - FuHp(mw2, md2, mu2, qd, qu))
    )


def fdHp(ms2: float, md2: float, mu2: float, qd: float, qu: float, ew: ElectroweakInputs) -> float:
    """Eq. (59) for the down-type quark of a doublet; 0 for a massless down-type quark."""

    if md2 == 0.0:
        return 0.0

    mw2 = sqr(ew.mw)

    return (
        _charged_prefactor(ms2, ew) * 3.0 * md2
        * (FdHp(ms2, md2, mu2, qd, qu) - FdHp(mw2, md2, mu2, qd, qu))
    )


def yukawa_couplings(zeta: float, sin_bma: float, cos_bma: float, sign: float = 1.0) -> np.ndarray:
    """Eq. (18): flavour-aligned couplings of one fermion type.

    Returns a ``(3, 4)`` array, one row per generation and the columns
    ``S = h, H, A, H^+``.  ``sign`` is ``+1`` for up-type quarks and ``-1``
    for down-type quarks and charged leptons.
    """

    row = np.array(
        [
            sin_bma + cos_bma * zeta,
            cos_bma - sin_bma * zeta,
            sign * zeta,
            SQRT2 * sign * zeta,
        ],
        dtype=float,
    )
    return np.tile(row, (3, 1))


def _default_couplings() -> np.ndarray:
    return yukawa_couplings(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class FermionicInputs:
    """Masses [GeV] and Yukawa couplings for :func:`amu2L_F`.

    ``mu``, ``md`` and ``ml`` hold one mass per generation.  ``yuS``,
    ``ydS`` and ``ylS`` are ``(3, 4)`` coupling arrays as returned by
    :func:`yukawa_couplings`.  The defaults describe the Standard-Model
    limit, in which the contribution vanishes.
    """

    ew: ElectroweakInputs = field(default_factory=ElectroweakInputs)
    mhSM: float = MASS_H_SM
    mh: float = MASS_H_SM
    mH: float = 400.0
    mA: float = 420.0
    mHp: float = 440.0
    mu: np.ndarray = field(default_factory=lambda: np.array(MASSES_UP))
    md: np.ndarray = field(default_factory=lambda: np.array(MASSES_DOWN))
    ml: np.ndarray = field(default_factory=lambda: np.array(MASSES_LEPTON))
    yuS: np.ndarray = field(default_factory=_default_couplings)
    ydS: np.ndarray = field(default_factory=_default_couplings)
    ylS: np.ndarray = field(default_factory=_default_couplings)

    def __post_init__(self) -> None:
        for name in ("mu", "md", "ml"):
            if np.shape(getattr(self, name)) != (3,):
                raise ValueError(f"{name} must hold one mass per generation")
        for name in ("yuS", "ydS", "ylS"):
            if np.shape(getattr(self, name)) != (3, 4):
                raise ValueError(f"{name} must have shape (3, 4)")

    @classmethod
    def aligned(
        cls,
        zeta_u: float,
        zeta_d: float,
        zeta_l: float,
        sin_bma: float,
        **masses,
    ) -> "FermionicInputs":
        """Build the inputs of the flavour-aligned model from ``zeta_f`` and ``sin(beta - alpha)``."""

        cos_bma = math.sqrt(max(0.0, 1.0 - sqr(sin_bma)))
        return cls(
            yuS=yukawa_couplings(zeta_u, sin_bma, cos_bma, 1.0),
            ydS=yukawa_couplings(zeta_d, sin_bma, cos_bma, -1.0),
            ylS=yukawa_couplings(zeta_l, sin_bma, cos_bma, -1.0),
            **masses,
        )


def amu2L_F(inputs: FermionicInputs) -> float:
    """Eq. (63): fermionic two-loop contribution to a_mu.

    Sums the ``h``, ``H`` and ``A`` diagrams of every fermion and the
    charged-Higgs diagram of every doublet, weighted by the product of the
    loop-fermion and muon couplings, and subtracts the Standard-Model Higgs
    diagram.  The charged-Higgs diagrams are weighted with the ``A``
    couplings.
    """

    ew = inputs.ew
    mh2 = sqr(inputs.mh)
    mH2 = sqr(inputs.mH)
    mA2 = sqr(inputs.mA)
    mHp2 = sqr(inputs.mHp)
    mhSM2 = sqr(inputs.mhSM)
    mu2 = np.square(inputs.mu)
    md2 = np.square(inputs.md)
    ml2 = np.square(inputs.ml)
    ymu = inputs.ylS[1]

    res = 0.0

    for g in range(3):
        fermions = (
            (float(mu2[g]), UP_CHARGES, inputs.yuS[g]),
            (float(md2[g]), DOWN_CHARGES, inputs.ydS[g]),
            (float(ml2[g]), LEPTON_CHARGES, inputs.ylS[g]),
        )
        for mf2, charges, yf in fermions:
            res += ffS(mh2, mf2, charges, ew, FS) * yf[0] * ymu[0]
            res += ffS(mH2, mf2, charges, ew, FS) * yf[1] * ymu[1]
            res += ffS(mA2, mf2, charges, ew, FA) * yf[2] * ymu[2]
            res -= ffS(mhSM2, mf2, charges, ew, FS)

        res += fuHp(mHp2, float(md2[g]), float(mu2[g]), Q_D, Q_U, ew) * inputs.yuS[g, 2] * ymu[2]
        res += fdHp(mHp2, float(md2[g]), float(mu2[g]), Q_D, Q_U, ew) * inputs.ydS[g, 2] * ymu[2]
        res += flHp(mHp2, float(ml2[g]), ew) * inputs.ylS[g, 2] * ymu[2]

    return float(res)


__all__ = [
    "DOWN_CHARGES",
    "ElectroweakInputs",
    "FA",
    "FS",
    "FdHp",
    "FermionCharges",
    "FermionicInputs",
    "FlHp",
    "FuHp",
    "LEPTON_CHARGES",
    "UP_CHARGES",
    "amu2L_F",
    "fSZ",
    "fSgamma",
    "fdHp",
    "ffS",
    "flHp",
    "fuHp",
    "yukawa_couplings",
]
