"""Exception taxonomy for CSPFit.

Per-record and per-residue failures (malformed lines, short curves,
non-converging starts) are recovered where they occur and recorded as
run warnings. The remaining classes abort a run and are surfaced to the
caller.
"""

from __future__ import annotations


class CSPFitError(Exception):
    """Base class for all CSPFit-specific exceptions."""


class ConfigError(CSPFitError):
    """Configuration-related errors (invalid/missing options, schema issues)."""


class DataIOError(CSPFitError):
    """Data loading/saving errors (files, formats, inconsistent inputs)."""


class MalformedRecordError(DataIOError):
    """A peak list data line could not be turned into a record."""


class InsufficientDataError(CSPFitError):
    """A residue has too few valid points to be fitted."""


class FitNonConvergenceError(CSPFitError):
    """A single multi-start attempt failed to converge."""


class FitTotalFailureError(CSPFitError):
    """Every multi-start attempt failed for a residue."""


class SourceUnavailableError(CSPFitError):
    """An input/output selection step was aborted or cannot be served."""


__all__ = [
    "CSPFitError",
    "ConfigError",
    "DataIOError",
    "FitNonConvergenceError",
    "FitTotalFailureError",
    "InsufficientDataError",
    "MalformedRecordError",
    "SourceUnavailableError",
]
