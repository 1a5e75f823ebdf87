"""Per-residue fitting, sequential or in a process pool.

Residue fits share nothing but read-only curves, so each worker returns an
independent outcome and the outcomes are merged in input order afterwards.
"""

from __future__ import annotations

import multiprocessing as mp
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial

from cspfit.core.domain.curves import CSPCurve, SampledCurve
from cspfit.core.domain.results import FitResult
from cspfit.core.fitting.optimizer import MultiStartFitter
from cspfit.core.shared.exceptions import FitTotalFailureError, InsufficientDataError


@dataclass(slots=True, frozen=True)
class ResidueOutcome:
    """Fit and sampled curve for one residue, or the reason it was skipped."""

    label: str
    fit: FitResult | None = None
    sampled: SampledCurve | None = None
    error: InsufficientDataError | FitTotalFailureError | None = None


def _get_mp_context() -> mp.context.BaseContext:
    try:
        return mp.get_context("fork")
    except ValueError:
        return mp.get_context("spawn")


def fit_residue(curve: CSPCurve, fitter: MultiStartFitter) -> ResidueOutcome:
    """Fit one curve, turning recoverable failures into an outcome."""
    try:
        fit = fitter.fit(curve)
    except (InsufficientDataError, FitTotalFailureError) as e:
        return ResidueOutcome(label=curve.label, error=e)
    return ResidueOutcome(label=curve.label, fit=fit, sampled=fitter.sample(curve, fit))


def fit_residues(
    curves: Sequence[CSPCurve],
    fitter: MultiStartFitter,
    *,
    n_workers: int = 1,
    progress_callback: Callable[[ResidueOutcome], None] | None = None,
) -> list[ResidueOutcome]:
    """Fit every curve and return the outcomes in input order."""
    worker = partial(fit_residue, fitter=fitter)

    if n_workers > 1 and len(curves) > 1:
        with ProcessPoolExecutor(
            max_workers=min(n_workers, len(curves)), mp_context=_get_mp_context()
        ) as pool:
            outcomes = []
            for outcome in pool.map(worker, curves):
                if progress_callback is not None:
                    progress_callback(outcome)
                outcomes.append(outcome)
            return outcomes

    outcomes = []
    for curve in curves:
        outcome = worker(curve)
        if progress_callback is not None:
            progress_callback(outcome)
        outcomes.append(outcome)
    return outcomes


__all__ = ["ResidueOutcome", "fit_residue", "fit_residues"]
