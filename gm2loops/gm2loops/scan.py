"""Evaluate loop functions on parameter grids.

The point sets reproduce the reference-data layout used to validate the
functions: a regular grid from ``start`` to ``stop`` plus two sequences
approaching 1 from below and from above (``1 -/+ frac^k``), for every
combination of arguments.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Literal, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

Direction = Literal[-1, 1]

_ARG_NAMES = ("x", "y", "z")


def _cartesian(values: np.ndarray, narg: int) -> np.ndarray:
    mesh = np.meshgrid(*([values] * narg), indexing="ij")
    return np.stack([m.ravel() for m in mesh], axis=-1)


def grid_points(narg: int, start: float, stop: float = 5.0, step: float = 0.05) -> np.ndarray:
    """Return all ``narg``-tuples of ``start, start + step, ..., stop`` as an ``(N, narg)`` array."""

    if narg < 1:
        raise ValueError("narg must be positive")
    values = np.arange(start, stop + 0.5 * step, step)
    return _cartesian(values, narg)


def unit_points(narg: int, n: int = 15, frac: float = 0.1, direction: Direction = 1) -> np.ndarray:
    """Return all ``narg``-tuples of ``1 + direction * frac**k`` for ``k = 1 .. n``."""

    if narg < 1:
        raise ValueError("narg must be positive")
    values = 1.0 + direction * np.power(frac, np.arange(1, n + 1, dtype=float))
    return _cartesian(values, narg)


def tabulate(
    func: Callable[..., float],
    points: np.ndarray,
    names: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """Evaluate ``func`` at every row of ``points``.

    Returns a frame with one column per argument followed by a column named
    after ``func`` holding the values.
    """

    points = np.asarray(points, dtype=float)
    if points.ndim == 1:
        points = points.reshape(-1, 1)

    narg = points.shape[1]
    if names is None:
        names = _ARG_NAMES[:narg] if narg <= len(_ARG_NAMES) else [f"arg{i}" for i in range(narg)]
    if len(names) != narg:
        raise ValueError("names must provide one label per argument")

    values = np.array([func(*row) for row in points], dtype=float)

    frame = pd.DataFrame(points, columns=list(names))
    frame[getattr(func, "__name__", "value")] = values
    return frame


def generate_data(
    func: Callable[..., float],
    narg: int,
    start: float = 0.0,
    stop: float = 5.0,
    step: float = 0.05,
    n: int = 15,
    frac: float = 0.1,
) -> pd.DataFrame:
    """Grid plus approach-to-unity points, tabulated in one frame."""

    points = np.concatenate(
        [
            grid_points(narg, start, stop, step),
            unit_points(narg, n, frac, -1),
            unit_points(narg, n, frac, 1),
        ]
    )
    return tabulate(func, points)


def export_table(frame: pd.DataFrame, output_path: Path) -> Path:
    """Write ``frame`` as a whitespace-separated table without header."""

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output_path, sep=" ", header=False, index=False, float_format="%.17g")
    return output_path


def vectorize(func: Callable[..., float]) -> Callable[..., np.ndarray]:
    """Broadcasting wrapper returning float arrays."""

    return np.vectorize(func, otypes=[float])


def continuity_gap(func: Callable[..., float], boundary: float, delta: float, *args: float) -> float:
    """Relative difference of ``func`` at ``boundary - delta`` and ``boundary + delta``.

    Extra positional ``args`` are passed after the varied argument.
    """

    below = func(boundary - delta, *args)
    above = func(boundary + delta, *args)
    scale = max(abs(below), abs(above))
    if scale == 0.0:
        return 0.0
    return abs(above - below) / scale


def branch_boundaries(prec: float, point: float = 1.0) -> Tuple[float, float]:
    """Crossover points of ``is_equal(x, point, prec)`` for non-negative ``point``.

    ``is_equal`` is true strictly between the two returned values.
    """

    if not 0.0 < prec < 1.0:
        raise ValueError("prec must lie in (0, 1)")
    lower = point - prec * (1.0 + point)
    upper = (point + prec) / (1.0 - prec)
    return lower, upper


__all__ = [
    "branch_boundaries",
    "continuity_gap",
    "export_table",
    "generate_data",
    "grid_points",
    "tabulate",
    "unit_points",
    "vectorize",
]
