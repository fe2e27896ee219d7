"""Namespace package entry point for the gm2loops special-function library."""

from importlib import import_module
from typing import Any

__all__ = [
    "DomainWarning",
    "dilog",
    "clausen_2",
    "Phi",
    "Iabc",
    "F1C",
    "F2C",
    "F3C",
    "F4C",
    "F1N",
    "F2N",
    "F3N",
    "F4N",
    "G3",
    "G4",
    "Fa",
    "Fb",
    "f_PS",
    "f_S",
    "f_sferm",
    "F1",
    "F1t",
    "F2",
    "F3",
    "FermionicInputs",
    "amu2L_F",
    "BosonicInputs",
    "amu2L_B_EWadd",
    "amu2L_B_Yuk_leading",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - simple delegation
    if name in __all__:
        module = import_module(".gm2loops", __name__)
        return getattr(module, name)
    raise AttributeError(f"module 'gm2loops' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - introspection helper
    return sorted(set(globals().keys()) | set(__all__))
