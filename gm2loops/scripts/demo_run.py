"""Example script demonstrating the gm2loops loop functions."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from gm2loops import (
    F1C,
    F1N,
    F2C,
    F2N,
    BosonicInputs,
    FermionicInputs,
    Phi,
    amu2L_B_EWadd,
    amu2L_B_Yuk_leading,
    amu2L_F,
    f_PS,
    f_S,
    f_sferm,
)
from gm2loops.gm2loops.constants import ONE_LOOP_TOL
from gm2loops.gm2loops.scan import branch_boundaries, continuity_gap, tabulate


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Tabulate a_mu loop functions.")
    parser.add_argument("--zeta-l", type=float, default=50.0, help="Lepton alignment parameter")
    parser.add_argument("--zeta-u", type=float, default=-0.5, help="Up-quark alignment parameter")
    parser.add_argument("--zeta-d", type=float, default=0.5, help="Down-quark alignment parameter")
    parser.add_argument("--mA", type=float, default=30.0, help="CP-odd Higgs mass [GeV]")
    parser.add_argument("--plot", type=Path, default=None, help="Optional PNG path for form-factor curves")
    args = parser.parse_args(argv)

    # --- 1) One-loop form factors ------------------------------------------
    x = np.array([0.0, 0.25, 0.5, 0.99, 1.0, 1.01, 2.0, 5.0])
    table = pd.concat(
        [tabulate(func, x).set_index("x") for func in (F1C, F2C, F1N, F2N)],
        axis=1,
    )
    print("One-loop form factors:\n", table)

    # --- 2) Branch continuity around x = 1 ---------------------------------
    lower, upper = branch_boundaries(ONE_LOOP_TOL.f1c)
    gaps = pd.Series(
        {
            "F1C below": continuity_gap(F1C, lower, 1e-9),
            "F1C above": continuity_gap(F1C, upper, 1e-9),
        },
        name="relative gap",
    )
    print("Branch continuity:\n", gaps)

    # --- 3) Barr-Zee functions ---------------------------------------------
    z = np.array([0.0, 0.1, 0.25, 0.5, 2.0])
    barr_zee = pd.concat(
        [tabulate(func, z, names=["z"]).set_index("z") for func in (f_PS, f_S, f_sferm)],
        axis=1,
    )
    print("Barr-Zee functions:\n", barr_zee)
    print("Phi(1, 1, 1) =", Phi(1.0, 1.0, 1.0))

    # --- 4) Two-Higgs-doublet two-loop contributions ------------------------
    fermionic = FermionicInputs.aligned(
        zeta_u=args.zeta_u,
        zeta_d=args.zeta_d,
        zeta_l=args.zeta_l,
        sin_bma=1.0,
        mA=args.mA,
    )
    contributions = pd.Series(
        {
            "fermionic": amu2L_F(fermionic),
            "bosonic EW": amu2L_B_EWadd(eta=0.0, zeta_l=args.zeta_l),
            "bosonic Yukawa (leading)": amu2L_B_Yuk_leading(BosonicInputs()),
        },
        name="a_mu",
    )
    print("Two-loop contributions:\n", contributions)

    if args.plot is not None:
        from gm2loops.gm2loops.plotting import plot_form_factors

        path = plot_form_factors([F1C, F2C, F1N, F2N], args.plot)
        print("Saved plot to", path)


if __name__ == "__main__":
    main()
