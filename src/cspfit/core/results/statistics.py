"""Goodness-of-fit statistics."""

from __future__ import annotations

import numpy as np

from cspfit.core.shared.typing import FloatArray


def compute_ssr(residuals: FloatArray) -> float:
    """Sum of squared residuals."""
    return float(np.sum(np.square(residuals)))


def compute_tss(observed: FloatArray) -> float:
    """Total sum of squares: squared deviations of ``observed`` from its mean."""
    observed = np.asarray(observed, dtype=float)
    return float(np.sum(np.square(observed - observed.mean())))


def compute_r_squared(ssr: float, tss: float) -> float:
    """Coefficient of determination, ``1 - SSR/TSS``.

    A flat observed curve (TSS = 0) scores 1 when it is reproduced exactly
    and 0 otherwise.
    """
    if tss <= 0.0:
        return 1.0 if np.isclose(ssr, 0.0) else 0.0
    return 1.0 - ssr / tss


__all__ = ["compute_r_squared", "compute_ssr", "compute_tss"]
