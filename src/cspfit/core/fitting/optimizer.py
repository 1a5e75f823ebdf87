"""Multi-start least-squares fit of the 1:1 binding isotherm.

The isotherm is prone to shallow local minima in Ka, so each residue is
fitted from a grid of Ka starting values and the attempt with the lowest sum
of squared residuals is kept. Ka is optimized as log10(Ka) to keep it
positive and comparable in scale to the response parameters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from scipy.optimize import OptimizeResult, least_squares

from cspfit.core.domain.config import FittingConfig
from cspfit.core.domain.curves import CSPCurve, SampledCurve
from cspfit.core.domain.results import FitResult
from cspfit.core.fitting.isotherm import binding_response
from cspfit.core.results.statistics import compute_r_squared, compute_ssr, compute_tss
from cspfit.core.shared.exceptions import (
    FitNonConvergenceError,
    FitTotalFailureError,
    InsufficientDataError,
)
from cspfit.core.shared.typing import FloatArray

logger = logging.getLogger(__name__)

# log10(Ka) is kept inside this window so 1/Ka stays finite
LOG_KA_BOUNDS = (-10.0, 15.0)


@dataclass(slots=True, frozen=True)
class FitAttempt:
    """Outcome of one start: parameters and SSR, or a failure message."""

    ka0: float
    converged: bool
    ka: float = np.nan
    delta_hg: float = np.nan
    delta_h: float = np.nan
    ssr: float = np.inf
    nfev: int = 0
    message: str = ""


def _solve(
    host: FloatArray,
    guest: FloatArray,
    observed: FloatArray,
    ka0: float,
    delta_hg0: float,
    delta_h0: float,
    max_nfev: int,
) -> OptimizeResult:
    def objective(x: FloatArray) -> FloatArray:
        return binding_response(host, guest, 10.0 ** x[0], x[1], x[2]) - observed

    x0 = np.array([np.log10(ka0), delta_hg0, delta_h0], dtype=float)
    lower = np.array([LOG_KA_BOUNDS[0], -np.inf, -np.inf])
    upper = np.array([LOG_KA_BOUNDS[1], np.inf, np.inf])

    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        result = least_squares(
            objective, x0, bounds=(lower, upper), x_scale="jac", max_nfev=max_nfev
        )

    if not result.success:
        raise FitNonConvergenceError(result.message)
    if not (np.all(np.isfinite(result.x)) and np.isfinite(result.cost)):
        msg = "non-finite solution"
        raise FitNonConvergenceError(msg)
    return result


def fit_attempt(
    host: FloatArray,
    guest: FloatArray,
    observed: FloatArray,
    ka0: float,
    delta_hg0: float,
    delta_h0: float,
    *,
    max_nfev: int = 1000,
) -> FitAttempt:
    """Run one bounded least-squares fit from the given starting point.

    Never raises: a start that fails is returned with ``converged=False``.
    """
    try:
        result = _solve(host, guest, observed, ka0, delta_hg0, delta_h0, max_nfev)
    except (ValueError, np.linalg.LinAlgError, FitNonConvergenceError) as e:
        return FitAttempt(ka0=ka0, converged=False, message=str(e))

    return FitAttempt(
        ka0=ka0,
        converged=True,
        ka=float(10.0 ** result.x[0]),
        delta_hg=float(result.x[1]),
        delta_h=float(result.x[2]),
        ssr=compute_ssr(result.fun),
        nfev=int(result.nfev),
        message=result.message,
    )


class MultiStartFitter:
    """Fit the binding isotherm to CSP curves from several Ka starting values."""

    def __init__(
        self,
        *,
        n_starts: int = 20,
        ka_min: float = 1.0,
        ka_max: float = 1e5,
        max_iterations: int = 1000,
        min_points: int = 3,
        n_curve_points: int = 100,
    ) -> None:
        self.n_starts = n_starts
        self.ka_min = ka_min
        self.ka_max = ka_max
        self.max_iterations = max_iterations
        self.min_points = min_points
        self.n_curve_points = n_curve_points

    @classmethod
    def from_config(cls, config: FittingConfig) -> MultiStartFitter:
        return cls(
            n_starts=config.n_starts,
            ka_min=config.ka_min,
            ka_max=config.ka_max,
            max_iterations=config.max_iterations,
            min_points=config.min_points,
            n_curve_points=config.n_curve_points,
        )

    def initial_guesses(self) -> FloatArray:
        """Ka starting values, log-uniform over ``[ka_min, ka_max]``."""
        return np.logspace(np.log10(self.ka_min), np.log10(self.ka_max), self.n_starts)

    def attempts(self, curve: CSPCurve) -> list[FitAttempt]:
        """Run every start on the valid points of ``curve``."""
        host, guest, observed = curve.valid()
        if observed.size < self.min_points:
            msg = f"{curve.label}: {observed.size} valid point(s), need {self.min_points}"
            raise InsufficientDataError(msg)

        delta_hg0 = float(np.max(observed))
        delta_h0 = float(np.min(observed))
        return [
            fit_attempt(
                host,
                guest,
                observed,
                ka0,
                delta_hg0,
                delta_h0,
                max_nfev=self.max_iterations,
            )
            for ka0 in self.initial_guesses()
        ]

    def fit(self, curve: CSPCurve) -> FitResult:
        """Return the best converged fit for ``curve``.

        Raises:
            InsufficientDataError: Fewer than ``min_points`` valid points.
            FitTotalFailureError: No start converged.
        """
        attempts = self.attempts(curve)
        converged = [attempt for attempt in attempts if attempt.converged]
        for attempt in attempts:
            if not attempt.converged:
                logger.debug(
                    "%s: start Ka=%.3g discarded (%s)", curve.label, attempt.ka0, attempt.message
                )
        if not converged:
            msg = f"{curve.label}: none of {len(attempts)} starts converged"
            raise FitTotalFailureError(msg)

        best = min(converged, key=lambda attempt: attempt.ssr)
        _, _, observed = curve.valid()
        r_squared = compute_r_squared(best.ssr, compute_tss(observed))
        logger.debug(
            "%s: Ka=%.4g R2=%.4f (%d/%d starts converged)",
            curve.label,
            best.ka,
            r_squared,
            len(converged),
            len(attempts),
        )
        return FitResult(
            label=curve.label,
            ka=best.ka,
            delta_hg=best.delta_hg,
            delta_h=best.delta_h,
            ssr=best.ssr,
            r_squared=r_squared,
            n_points=int(observed.size),
            n_converged=len(converged),
        )

    def sample(self, curve: CSPCurve, fit: FitResult) -> SampledCurve:
        """Predicted response over the observed guest range at mean host concentration."""
        host, guest, _ = curve.valid()
        host_mean = float(np.mean(host))
        guest_grid = np.linspace(float(np.min(guest)), float(np.max(guest)), self.n_curve_points)
        response = binding_response(host_mean, guest_grid, fit.ka, fit.delta_hg, fit.delta_h)
        ratio = guest_grid / host_mean if host_mean > 0 else np.full_like(guest_grid, np.nan)
        return SampledCurve(
            label=curve.label, guest_conc=guest_grid, ratio=ratio, response=response
        )


__all__ = ["LOG_KA_BOUNDS", "FitAttempt", "MultiStartFitter", "fit_attempt"]
