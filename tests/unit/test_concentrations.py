"""Tests for concentration table reading."""

import pytest

from cspfit.core.shared.exceptions import DataIOError
from cspfit.io.concentrations import read_concentrations


class TestReadConcentrations:
    def test_named_columns(self, tmp_path):
        path = tmp_path / "conc.csv"
        path.write_text("guest,host\n0.0,5e-4\n1e-3,5e-4\n2e-3,5e-4\n")
        conc = read_concentrations(path)
        assert conc.host.tolist() == [5e-4, 5e-4, 5e-4]
        assert conc.guest.tolist() == [0.0, 1e-3, 2e-3]
        assert len(conc) == 3

    def test_whitespace_separated(self, tmp_path):
        path = tmp_path / "conc.txt"
        path.write_text("Host   Guest\n5e-4   0.0\n5e-4   1e-3\n")
        conc = read_concentrations(path)
        assert conc.guest.tolist() == [0.0, 1e-3]

    def test_first_two_numeric_columns(self, tmp_path):
        path = tmp_path / "conc.csv"
        path.write_text("point;protein;ligand\nA;5e-4;0.0\nB;5e-4;1e-3\n")
        conc = read_concentrations(path)
        assert conc.host.tolist() == [5e-4, 5e-4]
        assert conc.guest.tolist() == [0.0, 1e-3]

    def test_comments_are_skipped(self, tmp_path):
        path = tmp_path / "conc.csv"
        path.write_text("host,guest\n# reference point\n5e-4,0.0\n")
        assert len(read_concentrations(path)) == 1

    def test_single_column(self, tmp_path):
        path = tmp_path / "conc.csv"
        path.write_text("host\n5e-4\n")
        with pytest.raises(DataIOError, match="two numeric columns"):
            read_concentrations(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIOError, match="Cannot read"):
            read_concentrations(tmp_path / "missing.csv")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "conc.csv"
        path.write_bytes(b"host,guest\n5e-4,0.0\n\xff\xfe\n")
        with pytest.raises(DataIOError, match="Cannot read"):
            read_concentrations(path)
