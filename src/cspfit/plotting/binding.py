"""Binding curve plots.

Observed chemical shift perturbations are drawn against the guest/host ratio
together with the fitted isotherm. Functions return matplotlib Figure objects.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure

if TYPE_CHECKING:
    from cspfit.core.domain.curves import CSPCurve, SampledCurve
    from cspfit.core.domain.results import FitResult
    from cspfit.core.results.analysis import AnalysisResult


def make_binding_figure(
    curve: CSPCurve,
    fit: FitResult | None = None,
    sampled: SampledCurve | None = None,
) -> Figure:
    """Create the binding curve plot of one residue."""
    fig, ax = plt.subplots(figsize=(6, 4.5))
    mask = curve.valid_mask
    ax.plot(curve.ratio[mask], curve.distance[mask], "o", color="tab:blue", label="Observed")

    title = curve.label
    if fit is not None and sampled is not None:
        ax.plot(sampled.ratio, sampled.response, "-", color="tab:red", label="1:1 fit")
        title += f"  Kd = {fit.kd:.3g} M, R² = {fit.r_squared:.3f}"
        if fit.is_outlier:
            title += " (outlier)"

    ax.set_title(title, fontsize=11, fontweight="bold")
    ax.set_xlabel("[Guest]/[Host]", fontsize=11)
    ax.set_ylabel("CSP", fontsize=11)
    ax.grid(True, alpha=0.3)
    ax.legend(frameon=False)
    fig.tight_layout()
    return fig


def save_binding_figures(result: AnalysisResult, path: Path) -> int:
    """Write one page per residue to a PDF and return the page count."""
    path.parent.mkdir(parents=True, exist_ok=True)
    n_pages = 0
    with PdfPages(path) as pdf:
        for label, curve in result.curves.items():
            fig = make_binding_figure(curve, result.fits.get(label), result.sampled.get(label))
            pdf.savefig(fig)
            plt.close(fig)
            n_pages += 1
    return n_pages


__all__ = ["make_binding_figure", "save_binding_figures"]
