"""Output writing for analysis results."""

from __future__ import annotations

from pathlib import Path

from cspfit.core.domain.config import OutputConfig
from cspfit.core.results.analysis import AnalysisResult
from cspfit.io.writers import WRITERS

FIGURES_FILE = "binding_curves.pdf"


def write_outputs(result: AnalysisResult, directory: Path, config: OutputConfig) -> list[Path]:
    """Write the configured tables and figures, returning the created files."""
    written: list[Path] = []
    for fmt in config.formats:
        written.extend(WRITERS[fmt]().write(result, directory))

    if config.save_figures and result.curves:
        from cspfit.plotting import save_binding_figures

        path = directory / FIGURES_FILE
        save_binding_figures(result, path)
        written.append(path)
    return written


__all__ = ["FIGURES_FILE", "write_outputs"]
