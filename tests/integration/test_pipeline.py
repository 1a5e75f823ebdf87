"""End-to-end titration analysis through the service layer."""

import pytest

from cspfit.core.domain.config import CSPFitConfig
from cspfit.core.domain.peaks import make_record
from cspfit.core.domain.report import WarningKind
from cspfit.core.shared.exceptions import DataIOError, SourceUnavailableError
from cspfit.services.titration import DirectorySource, MemorySource, TitrationService

HOST = [5e-4, 5e-4, 5e-4]
GUEST = [0.0, 1e-3, 2e-3]


def quiet_config(**output):
    return CSPFitConfig.model_validate({"output": {"save_figures": False, **output}})


class TestTitrationService:
    def test_three_point_titration(self, titration):
        service = TitrationService(quiet_config())
        result, written = service.run(MemorySource(titration), host=HOST, guest=GUEST)

        assert written == []
        assert result.spectra == ["spectrum 1", "spectrum 2", "spectrum 3"]
        assert list(result.curves) == ["R1", "R2", "R3"]
        assert result.curves["R1"].distance == pytest.approx([0.0, 0.5, 0.9])

        fit = result.fits["R1"]
        assert fit.ka > 0
        assert 0.0 <= fit.r_squared <= 1.0
        assert fit.n_points == 3
        assert "R1" in result.sampled

    def test_short_residue_is_skipped_with_warning(self, titration):
        result, _ = TitrationService(quiet_config()).run(
            MemorySource(titration), host=HOST, guest=GUEST
        )
        assert "R3" not in result.fits
        assert result.skipped == {"R3": WarningKind.INSUFFICIENT_DATA.value}
        (warning,) = result.warnings_of(WarningKind.INSUFFICIENT_DATA)
        assert warning.subject == "R3"

    def test_conflicts_and_missing_peaks_are_recorded(self, titration):
        result, _ = TitrationService(quiet_config()).run(
            MemorySource(titration), host=HOST, guest=GUEST
        )
        (spectrum, group) = result.conflicts[0]
        assert spectrum == "spectrum 3"
        assert group.winner == "R1"
        assert result.warnings_of(WarningKind.MISSING_PEAK)

    def test_outliers_flagged_across_residues(self, titration):
        result, _ = TitrationService(quiet_config()).run(
            MemorySource(titration), host=HOST, guest=GUEST
        )
        assert result.bounds is not None
        for fit in result.fits.values():
            assert fit.is_outlier == result.bounds.is_outlier(fit.ka)

    def test_concentrations_from_config(self, titration):
        config = CSPFitConfig.model_validate(
            {"titration": {"host": HOST, "guest": GUEST}, "output": {"save_figures": False}}
        )
        result, _ = TitrationService(config).run(MemorySource(titration))
        assert "R1" in result.fits

    def test_explicit_concentrations_override_config(self, titration):
        config = CSPFitConfig.model_validate({"titration": {"host": [1.0], "guest": [1.0]}})
        result, _ = TitrationService(config).run(MemorySource(titration), host=HOST, guest=GUEST)
        assert not result.warnings_of(WarningKind.MISMATCHED_SERIES_LENGTH)
        assert "R1" in result.fits

    def test_mismatched_concentrations_truncate(self, titration):
        result, _ = TitrationService(quiet_config()).run(
            MemorySource(titration), host=HOST[:2], guest=GUEST
        )
        assert result.warnings_of(WarningKind.MISMATCHED_SERIES_LENGTH)
        assert all(curve.distance.size == 2 for curve in result.curves.values())
        # Two points are not enough for any residue
        assert result.fits == {}

    def test_missing_concentrations(self, titration):
        with pytest.raises(DataIOError, match="concentrations are required"):
            TitrationService().run(MemorySource(titration))

    def test_empty_concentrations(self, titration):
        with pytest.raises(DataIOError, match="Concentrations are empty"):
            TitrationService().run(MemorySource(titration), host=[], guest=[])

    def test_no_spectra(self):
        with pytest.raises(SourceUnavailableError):
            TitrationService().run(MemorySource([]), host=HOST, guest=GUEST)

    def test_duplicate_anchor_labels_abort(self):
        anchor = [make_record(1, 8.0, 120.0, label="A"), make_record(2, 9.0, 115.0, label="A")]
        with pytest.raises(DataIOError, match="Duplicate"):
            TitrationService().run(MemorySource([anchor]), host=[1e-3], guest=[0.0])

    def test_parallel_workers(self, titration):
        config = CSPFitConfig.model_validate(
            {"fitting": {"workers": 2}, "output": {"save_figures": False}}
        )
        sequential, _ = TitrationService(quiet_config()).run(
            MemorySource(titration), host=HOST, guest=GUEST
        )
        parallel, _ = TitrationService(config).run(MemorySource(titration), host=HOST, guest=GUEST)
        assert list(parallel.fits) == list(sequential.fits)
        for label, fit in parallel.fits.items():
            assert fit.ka == pytest.approx(sequential.fits[label].ka)


class TestDirectorySource:
    def test_writes_outputs(self, titration_files, tmp_path):
        output = tmp_path / "results"
        source = DirectorySource(titration_files, output)
        result, written = TitrationService().run(source, host=HOST, guest=GUEST)

        names = sorted(path.name for path in written)
        assert names == sorted(
            [
                "results.csv",
                "conflicts.csv",
                "curves.csv",
                "skipped.csv",
                "results.json",
                "binding_curves.pdf",
            ]
        )
        assert all(path.exists() for path in written)
        assert result.spectra == ["point0.list", "point1.list", "point2.list"]

    def test_from_directory_sorts_files(self, titration_files):
        source = DirectorySource.from_directory(titration_files[0].parent)
        assert [path.name for path in source.paths] == [
            "point0.list",
            "point1.list",
            "point2.list",
        ]
        assert source.open_sink() is None

    def test_swapped_axes_give_same_distances_for_pure_coord1_shifts(self, titration_files):
        spectra = DirectorySource(titration_files, axis_order="ba").list_spectra()
        result = TitrationService().analyze(spectra, HOST, GUEST)
        # Shifts now land on coord2 and are scaled by the 0.2 weight
        assert result.curves["R1"].distance == pytest.approx(
            [0.0, 0.1, 0.18], abs=1e-5
        )

    def test_missing_files(self, tmp_path):
        with pytest.raises(SourceUnavailableError, match="not found"):
            DirectorySource([tmp_path / "missing.list"]).list_spectra()

    def test_empty_selection(self):
        with pytest.raises(SourceUnavailableError, match="No spectra"):
            DirectorySource([]).list_spectra()

    def test_not_a_directory(self, tmp_path):
        with pytest.raises(SourceUnavailableError):
            DirectorySource.from_directory(tmp_path / "nope")


def test_anchor_only_run():
    anchor = [make_record(1, 8.0, 120.0, label="A")]
    result = TitrationService().analyze(MemorySource([anchor]).list_spectra(), [5e-4], [0.0])
    assert result.curves["A"].distance.tolist() == [0.0]
    assert result.skipped == {"A": WarningKind.INSUFFICIENT_DATA.value}
    assert result.bounds is None
