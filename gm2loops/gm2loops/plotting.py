"""Plots of the loop functions."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .scan import vectorize


def plot_form_factors(
    funcs: Sequence[Callable[[float], float]],
    output_path: Path,
    x_min: float = 0.0,
    x_max: float = 5.0,
    num: int = 401,
    title: Optional[str] = None,
) -> Path:
    """Draw single-argument functions on ``[x_min, x_max]`` and save the figure as PNG."""

    x = np.linspace(x_min, x_max, num)

    figure, axis = plt.subplots(figsize=(7, 4.5))
    for func in funcs:
        y = vectorize(func)(x)
        axis.plot(x, np.where(np.isfinite(y), y, np.nan), label=func.__name__)

    axis.axvline(1.0, color="grey", linestyle=":", linewidth=0.8)
    axis.set_xlabel("x")
    axis.set_ylabel("F(x)")
    axis.set_title(title or "One-loop form factors")
    axis.grid(linestyle="--", alpha=0.6)
    axis.legend()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    figure.tight_layout()
    figure.savefig(output_path)
    plt.close(figure)
    return output_path


__all__ = ["plot_form_factors"]
