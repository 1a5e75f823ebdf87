"""Non-fatal run warnings accumulated alongside results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WarningKind(str, Enum):
    """Recoverable failure categories."""

    MALFORMED_RECORD = "MalformedRecord"
    INSUFFICIENT_DATA = "InsufficientData"
    FIT_NON_CONVERGENCE = "FitNonConvergence"
    FIT_TOTAL_FAILURE = "FitTotalFailure"
    MISMATCHED_SERIES_LENGTH = "MismatchedSeriesLength"
    MISSING_PEAK = "MissingPeak"


@dataclass(slots=True, frozen=True)
class RunWarning:
    """A recovered failure: what kind, what it concerns, and a message."""

    kind: WarningKind
    subject: str
    message: str

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.subject}: {self.message}"


__all__ = ["RunWarning", "WarningKind"]
