"""Domain models: peak records, titration curves, fit results and run warnings."""

from cspfit.core.domain.curves import CSPCurve, SampledCurve, TitrationSeries
from cspfit.core.domain.peaks import AxisOrder, PeakRecord
from cspfit.core.domain.report import RunWarning, WarningKind
from cspfit.core.domain.results import FitResult

__all__ = [
    "AxisOrder",
    "CSPCurve",
    "FitResult",
    "PeakRecord",
    "RunWarning",
    "SampledCurve",
    "TitrationSeries",
    "WarningKind",
]
