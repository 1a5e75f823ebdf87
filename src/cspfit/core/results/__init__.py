"""Fit statistics and population-level result annotation."""

from cspfit.core.results.outliers import OutlierBounds, flag_outliers, iqr_bounds
from cspfit.core.results.statistics import compute_r_squared, compute_ssr, compute_tss

__all__ = [
    "OutlierBounds",
    "compute_r_squared",
    "compute_ssr",
    "compute_tss",
    "flag_outliers",
    "iqr_bounds",
]
