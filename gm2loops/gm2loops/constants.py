# Tolerances and exact constants shared by the loop-function families.
#
# The tolerances are relative widths handed to ``is_equal`` / ``is_zero``.
# Each one marks where a function switches from its closed form to the
# expansion around a special point.

from __future__ import annotations

import sys
from dataclasses import dataclass

import numpy as np

EPS = 10.0 * sys.float_info.epsilon   # zero test for exact-limit branches

PI = np.pi
PI2 = PI * PI
LOG2 = 0.69314718055994531            # Log[2]
LOG4 = 1.3862943611198906             # Log[4]


@dataclass(frozen=True)
class PhiTolerances:
    """Tolerances of the three-point kinematic function ``Phi``."""

    lambda_zero: float = 1e-11   # |lambda^2| below this is treated as 0
    degenerate: float = 1e-7     # u = v, u = 1, v = 1 sub-cases


@dataclass(frozen=True)
class IntegralTolerances:
    """Tolerances of the scalar three-point integral ``Ixy``."""

    equal: float = 0.001


@dataclass(frozen=True)
class OneLoopTolerances:
    """Radii of the expansions around x = 1 (and x = y) of the one-loop functions."""

    f1c: float = 0.03
    f2c: float = 0.03
    f3c: float = 0.03
    f4c: float = 0.03
    f1n: float = 0.03
    f2n: float = 0.04
    f3n: float = 0.03
    f4n: float = 0.03
    g3: float = 0.01
    g4: float = 0.01
    fa: float = 0.001
    fb: float = 0.01


PHI_TOL = PhiTolerances()
INTEGRAL_TOL = IntegralTolerances()
ONE_LOOP_TOL = OneLoopTolerances()

# Phi(1, 1) = 4/sqrt(3) Cl2(pi/3)
PHI_11 = 2.343907238689459

# Values at the special points of the one-loop functions.
F1C_ZERO = 4.0
F2C_ZERO = 0.0
F4C_ZERO = 0.0
F1N_ZERO = 2.0
F2N_ZERO = 3.0
F3N_ZERO = 8.0 / 105.0
F4N_ZERO = -0.75 * (PI2 - 9.0)
G4_ZERO = 0.5

# Values at the branch point w = 1/4 of the two-loop functions.
QUARTER = 0.25
F_PS_QUARTER = LOG4
F1_QUARTER = -0.5
F2_QUARTER = -0.38629436111989062     # 1 - Log[4]
F3_QUARTER = 19.0 / 4.0

# lim Phi(s, f, f)/(s - 4 f) at the threshold s = 4 f
PHI_THRESHOLD_RATIO = 2.0 * LOG4


__all__ = [
    "EPS",
    "F1C_ZERO",
    "F1N_ZERO",
    "F1_QUARTER",
    "F2C_ZERO",
    "F2N_ZERO",
    "F2_QUARTER",
    "F3N_ZERO",
    "F3_QUARTER",
    "F4C_ZERO",
    "F4N_ZERO",
    "F_PS_QUARTER",
    "G4_ZERO",
    "INTEGRAL_TOL",
    "IntegralTolerances",
    "LOG2",
    "LOG4",
    "ONE_LOOP_TOL",
    "OneLoopTolerances",
    "PHI_11",
    "PHI_THRESHOLD_RATIO",
    "PHI_TOL",
    "PI",
    "PI2",
    "PhiTolerances",
    "QUARTER",
]
