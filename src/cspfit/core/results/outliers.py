"""Cross-residue outlier detection on affinity estimates."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np

from cspfit.core.domain.results import FitResult

DEFAULT_IQR_FACTOR = 1.5


@dataclass(slots=True, frozen=True)
class OutlierBounds:
    """Tukey fences computed from a population of values."""

    q1: float
    q3: float
    factor: float = DEFAULT_IQR_FACTOR

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    @property
    def lower(self) -> float:
        return self.q1 - self.factor * self.iqr

    @property
    def upper(self) -> float:
        return self.q3 + self.factor * self.iqr

    def is_outlier(self, value: float) -> bool:
        return value < self.lower or value > self.upper

    def as_dict(self) -> dict[str, float]:
        return {
            "q1": self.q1,
            "q3": self.q3,
            "iqr": self.iqr,
            "lower": self.lower,
            "upper": self.upper,
        }


def iqr_bounds(values: Sequence[float], factor: float = DEFAULT_IQR_FACTOR) -> OutlierBounds | None:
    """Compute IQR bounds, or ``None`` for an empty population."""
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return None
    q1, q3 = np.percentile(data, [25.0, 75.0])
    return OutlierBounds(q1=float(q1), q3=float(q3), factor=factor)


def flag_outliers(
    fits: Mapping[str, FitResult], factor: float = DEFAULT_IQR_FACTOR
) -> tuple[dict[str, FitResult], OutlierBounds | None]:
    """Return copies of ``fits`` with ``is_outlier`` set from the Ka population."""
    bounds = iqr_bounds([fit.ka for fit in fits.values()], factor)
    if bounds is None:
        return dict(fits), None
    flagged = {label: fit.flagged(bounds.is_outlier(fit.ka)) for label, fit in fits.items()}
    return flagged, bounds


__all__ = ["DEFAULT_IQR_FACTOR", "OutlierBounds", "flag_outliers", "iqr_bounds"]
