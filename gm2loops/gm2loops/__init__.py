"""Loop functions for the muon anomalous magnetic moment, with lazy attribute loading."""

from importlib import import_module
from typing import Any


_EXPORTS = {
    "DomainWarning": ("gm2loops.gm2loops.errors", "DomainWarning"),
    "domain_error": ("gm2loops.gm2loops.errors", "domain_error"),
    "PhiTolerances": ("gm2loops.gm2loops.constants", "PhiTolerances"),
    "IntegralTolerances": ("gm2loops.gm2loops.constants", "IntegralTolerances"),
    "OneLoopTolerances": ("gm2loops.gm2loops.constants", "OneLoopTolerances"),
    "PHI_TOL": ("gm2loops.gm2loops.constants", "PHI_TOL"),
    "INTEGRAL_TOL": ("gm2loops.gm2loops.constants", "INTEGRAL_TOL"),
    "ONE_LOOP_TOL": ("gm2loops.gm2loops.constants", "ONE_LOOP_TOL"),
    "Region": ("gm2loops.gm2loops.numerics", "Region"),
    "is_zero": ("gm2loops.gm2loops.numerics", "is_zero"),
    "is_equal": ("gm2loops.gm2loops.numerics", "is_equal"),
    "classify_one": ("gm2loops.gm2loops.numerics", "classify_one"),
    "classify_pair": ("gm2loops.gm2loops.numerics", "classify_pair"),
    "dilog": ("gm2loops.gm2loops.polylog", "dilog"),
    "clausen_2": ("gm2loops.gm2loops.polylog", "clausen_2"),
    "lambda_2": ("gm2loops.gm2loops.kinematics", "lambda_2"),
    "phi_uv": ("gm2loops.gm2loops.kinematics", "phi_uv"),
    "Phi": ("gm2loops.gm2loops.kinematics", "Phi"),
    "phi_over_threshold": ("gm2loops.gm2loops.kinematics", "phi_over_threshold"),
    "Ixy": ("gm2loops.gm2loops.kinematics", "Ixy"),
    "Ixyz": ("gm2loops.gm2loops.kinematics", "Ixyz"),
    "Iabc": ("gm2loops.gm2loops.kinematics", "Iabc"),
    "F1C": ("gm2loops.gm2loops.ffunctions", "F1C"),
    "F2C": ("gm2loops.gm2loops.ffunctions", "F2C"),
    "F3C": ("gm2loops.gm2loops.ffunctions", "F3C"),
    "F4C": ("gm2loops.gm2loops.ffunctions", "F4C"),
    "F1N": ("gm2loops.gm2loops.ffunctions", "F1N"),
    "F2N": ("gm2loops.gm2loops.ffunctions", "F2N"),
    "F3N": ("gm2loops.gm2loops.ffunctions", "F3N"),
    "F4N": ("gm2loops.gm2loops.ffunctions", "F4N"),
    "G3": ("gm2loops.gm2loops.ffunctions", "G3"),
    "G4": ("gm2loops.gm2loops.ffunctions", "G4"),
    "Fa": ("gm2loops.gm2loops.ffunctions", "Fa"),
    "Fb": ("gm2loops.gm2loops.ffunctions", "Fb"),
    "f_PS": ("gm2loops.gm2loops.barr_zee", "f_PS"),
    "f_S": ("gm2loops.gm2loops.barr_zee", "f_S"),
    "f_sferm": ("gm2loops.gm2loops.barr_zee", "f_sferm"),
    "F1": ("gm2loops.gm2loops.barr_zee", "F1"),
    "F1t": ("gm2loops.gm2loops.barr_zee", "F1t"),
    "F2": ("gm2loops.gm2loops.barr_zee", "F2"),
    "F3": ("gm2loops.gm2loops.barr_zee", "F3"),
    "ElectroweakInputs": ("gm2loops.gm2loops.thdm_fermionic", "ElectroweakInputs"),
    "FermionicInputs": ("gm2loops.gm2loops.thdm_fermionic", "FermionicInputs"),
    "yukawa_couplings": ("gm2loops.gm2loops.thdm_fermionic", "yukawa_couplings"),
    "amu2L_F": ("gm2loops.gm2loops.thdm_fermionic", "amu2L_F"),
    "BosonicInputs": ("gm2loops.gm2loops.thdm_bosonic", "BosonicInputs"),
    "amu2L_B_EWadd": ("gm2loops.gm2loops.thdm_bosonic", "amu2L_B_EWadd"),
    "amu2L_B_Yuk_leading": ("gm2loops.gm2loops.thdm_bosonic", "amu2L_B_Yuk_leading"),
    "grid_points": ("gm2loops.gm2loops.scan", "grid_points"),
    "unit_points": ("gm2loops.gm2loops.scan", "unit_points"),
    "tabulate": ("gm2loops.gm2loops.scan", "tabulate"),
    "generate_data": ("gm2loops.gm2loops.scan", "generate_data"),
    "export_table": ("gm2loops.gm2loops.scan", "export_table"),
    "vectorize": ("gm2loops.gm2loops.scan", "vectorize"),
    "continuity_gap": ("gm2loops.gm2loops.scan", "continuity_gap"),
    "branch_boundaries": ("gm2loops.gm2loops.scan", "branch_boundaries"),
    "plot_form_factors": ("gm2loops.gm2loops.plotting", "plot_form_factors"),
}


__all__ = sorted(_EXPORTS.keys())


def __getattr__(name: str) -> Any:  # pragma: no cover - exercised via import
    try:
        module_name, attribute = _EXPORTS[name]
    except KeyError as exc:  # pragma: no cover - simple delegation
        raise AttributeError(f"module 'gm2loops.gm2loops' has no attribute {name!r}") from exc
    module = import_module(module_name)
    value = getattr(module, attribute)
    globals()[name] = value
    return value


def __dir__() -> list[str]:  # pragma: no cover - introspection helper
    return sorted(set(globals().keys()) | set(__all__))
