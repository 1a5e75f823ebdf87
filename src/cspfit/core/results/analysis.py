"""Aggregate outcome of a titration analysis run."""

from __future__ import annotations

from dataclasses import dataclass, field

from cspfit.core.algorithms.matching import MatchConflictGroup, MatchResult
from cspfit.core.domain.curves import CSPCurve, SampledCurve
from cspfit.core.domain.report import RunWarning, WarningKind
from cspfit.core.domain.results import FitResult
from cspfit.core.results.outliers import OutlierBounds


@dataclass(slots=True)
class AnalysisResult:
    """Everything a run produces, keyed by residue label.

    ``fits`` only holds residues that were fitted; the others are listed in
    ``skipped`` with the reason.
    """

    spectra: list[str] = field(default_factory=list)
    curves: dict[str, CSPCurve] = field(default_factory=dict)
    fits: dict[str, FitResult] = field(default_factory=dict)
    sampled: dict[str, SampledCurve] = field(default_factory=dict)
    skipped: dict[str, str] = field(default_factory=dict)
    match_reports: list[MatchResult] = field(default_factory=list)
    warnings: list[RunWarning] = field(default_factory=list)
    bounds: OutlierBounds | None = None

    @property
    def outliers(self) -> list[str]:
        return [label for label, fit in self.fits.items() if fit.is_outlier]

    @property
    def conflicts(self) -> list[tuple[str, MatchConflictGroup]]:
        """Conflict groups of every matched spectrum, with the spectrum name."""
        return [(report.name, group) for report in self.match_reports for group in report.conflicts]

    def warnings_of(self, kind: WarningKind) -> list[RunWarning]:
        return [warning for warning in self.warnings if warning.kind is kind]

    def summary(self) -> dict[str, object]:
        return {
            "Spectra": len(self.spectra),
            "Residues": len(self.curves),
            "Fitted": len(self.fits),
            "Skipped": len(self.skipped),
            "Outliers": len(self.outliers),
            "Match conflicts": len(self.conflicts),
            "Warnings": len(self.warnings),
        }


__all__ = ["AnalysisResult"]
