"""Headless tests for binding curve figures."""

import matplotlib.pyplot as plt
import numpy as np

from cspfit.core.domain.curves import CSPCurve, SampledCurve
from cspfit.core.domain.results import FitResult
from cspfit.core.results.analysis import AnalysisResult
from cspfit.plotting import make_binding_figure, save_binding_figures


def make_curve(label="R1"):
    return CSPCurve(
        label,
        np.full(3, 5e-4),
        np.array([0.0, 1e-3, 2e-3]),
        np.array([0.0, 0.5, np.nan]),
    )


def make_fit(label="R1", is_outlier=False):
    return FitResult(
        label=label,
        ka=1e3,
        delta_hg=1.0,
        delta_h=0.0,
        ssr=0.0,
        r_squared=0.98,
        n_points=3,
        is_outlier=is_outlier,
    )


def make_sampled(label="R1"):
    ratio = np.linspace(0.0, 4.0, 10)
    return SampledCurve(label, ratio * 5e-4, ratio, ratio / 4.0)


class TestMakeBindingFigure:
    def test_observed_only(self):
        fig = make_binding_figure(make_curve())
        ax = fig.axes[0]
        assert ax.get_title() == "R1"
        assert len(ax.lines) == 1
        # NaN points are left out
        assert len(ax.lines[0].get_xdata()) == 2
        plt.close(fig)

    def test_with_fit(self):
        fig = make_binding_figure(make_curve(), make_fit(is_outlier=True), make_sampled())
        ax = fig.axes[0]
        assert len(ax.lines) == 2
        assert "R² = 0.980" in ax.get_title()
        assert "(outlier)" in ax.get_title()
        plt.close(fig)


class TestSaveBindingFigures:
    def test_one_page_per_residue(self, tmp_path):
        result = AnalysisResult(
            curves={"R1": make_curve("R1"), "R2": make_curve("R2")},
            fits={"R1": make_fit()},
            sampled={"R1": make_sampled()},
        )
        path = tmp_path / "figures" / "binding_curves.pdf"
        assert save_binding_figures(result, path) == 2
        assert path.exists()
        assert path.stat().st_size > 0
