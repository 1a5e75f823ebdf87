"""Binding isotherm model and multi-start fitting."""

from cspfit.core.fitting.isotherm import binding_response, complex_concentration
from cspfit.core.fitting.optimizer import FitAttempt, MultiStartFitter, fit_attempt
from cspfit.core.fitting.parallel import ResidueOutcome, fit_residue, fit_residues

__all__ = [
    "FitAttempt",
    "MultiStartFitter",
    "ResidueOutcome",
    "binding_response",
    "complex_concentration",
    "fit_attempt",
    "fit_residue",
    "fit_residues",
]
