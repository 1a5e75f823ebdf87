"""Common configuration and helpers for output writers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from cspfit.core.results.analysis import AnalysisResult


@dataclass
class WriterConfig:
    """Configuration for output writers.

    Attributes
    ----------
        precision: Decimal precision for floating point values
        scientific_notation_threshold: Use scientific notation for values
            smaller than 10^(-threshold) or larger than 10^threshold
        include_comments: Include explanatory comment lines in CSV outputs
    """

    precision: int = 6
    scientific_notation_threshold: int = 4
    include_comments: bool = True
    csv_delimiter: str = ","
    json_indent: int = 2


@runtime_checkable
class OutputWriter(Protocol):
    """Protocol implemented by every result writer."""

    def write(self, result: AnalysisResult, directory: Path) -> list[Path]:
        """Write ``result`` below ``directory`` and return the created files."""
        ...


def format_float(value: float, precision: int = 6, scientific_threshold: int = 4) -> str:
    """Format a float, switching to scientific notation for extreme magnitudes."""
    if value == 0:
        return f"{0:.{precision}f}"

    if math.isinf(value) or math.isnan(value):
        return str(value)

    log_val = math.log10(abs(value))
    if abs(log_val) > scientific_threshold:
        return f"{value:.{precision}e}"
    return f"{value:.{precision}f}"


__all__ = ["OutputWriter", "WriterConfig", "format_float"]
