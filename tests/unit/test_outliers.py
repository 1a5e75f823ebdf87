"""Tests for IQR outlier flagging and fit statistics."""

import pytest

from cspfit.core.domain.results import FitResult
from cspfit.core.results.outliers import OutlierBounds, flag_outliers, iqr_bounds
from cspfit.core.results.statistics import compute_r_squared, compute_ssr, compute_tss


def make_fit(label, ka):
    return FitResult(
        label=label, ka=ka, delta_hg=1.0, delta_h=0.0, ssr=0.0, r_squared=1.0, n_points=3
    )


class TestIQRBounds:
    def test_reference_population(self):
        bounds = iqr_bounds([1.0, 2.0, 3.0, 4.0, 100.0])
        assert bounds.q1 == pytest.approx(2.0)
        assert bounds.q3 == pytest.approx(4.0)
        assert bounds.iqr == pytest.approx(2.0)
        assert bounds.lower == pytest.approx(-1.0)
        assert bounds.upper == pytest.approx(7.0)

    def test_empty_population(self):
        assert iqr_bounds([]) is None

    def test_single_value_is_not_an_outlier(self):
        bounds = iqr_bounds([42.0])
        assert bounds.iqr == 0.0
        assert not bounds.is_outlier(42.0)

    def test_bounds_are_exclusive(self):
        bounds = OutlierBounds(q1=2.0, q3=4.0)
        assert not bounds.is_outlier(7.0)
        assert bounds.is_outlier(7.0001)
        assert not bounds.is_outlier(-1.0)

    def test_factor(self):
        assert OutlierBounds(q1=2.0, q3=4.0, factor=3.0).upper == pytest.approx(10.0)

    def test_as_dict(self):
        assert OutlierBounds(q1=2.0, q3=4.0).as_dict() == {
            "q1": 2.0,
            "q3": 4.0,
            "iqr": 2.0,
            "lower": -1.0,
            "upper": 7.0,
        }


class TestFlagOutliers:
    def test_only_extreme_ka_is_flagged(self):
        fits = {f"R{i}": make_fit(f"R{i}", ka) for i, ka in enumerate([1, 2, 3, 4, 100])}
        flagged, bounds = flag_outliers(fits)
        assert [label for label, fit in flagged.items() if fit.is_outlier] == ["R4"]
        assert bounds.upper == pytest.approx(7.0)

    def test_inputs_are_not_modified(self):
        fits = {"A": make_fit("A", 1.0), "B": make_fit("B", 1000.0), "C": make_fit("C", 1.5)}
        flag_outliers(fits, factor=0.0)
        assert not any(fit.is_outlier for fit in fits.values())

    def test_empty(self):
        flagged, bounds = flag_outliers({})
        assert flagged == {}
        assert bounds is None


class TestStatistics:
    def test_ssr(self):
        assert compute_ssr([1.0, -2.0]) == pytest.approx(5.0)

    def test_tss(self):
        assert compute_tss([1.0, 2.0, 3.0]) == pytest.approx(2.0)

    def test_r_squared(self):
        assert compute_r_squared(0.5, 2.0) == pytest.approx(0.75)

    def test_r_squared_flat_curve(self):
        assert compute_r_squared(0.0, 0.0) == 1.0
        assert compute_r_squared(0.1, 0.0) == 0.0
