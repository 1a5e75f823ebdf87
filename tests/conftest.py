"""Pytest fixtures for CSPFit tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from cspfit.core.domain.peaks import make_record

SQRT2 = np.sqrt(2.0)

ANCHOR_PEAKS = {
    "R1": (8.0, 120.0),
    "R2": (9.0, 115.0),
    "R3": (7.5, 125.0),
}

HOST = [5e-4, 5e-4, 5e-4]
GUEST = [0.0, 1e-3, 2e-3]

# Perturbation distance of each residue in each spectrum. With weight 0.2
# and no coord2 shift, a coord1 shift of response * sqrt(2) gives exactly
# this response.
RESPONSES = {
    "R1": [0.0, 0.5, 0.9],
    "R2": [0.0, 0.4, 0.7],
    "R3": [0.0, 0.3, None],
}


def peak_line(index, coord_a, coord_b, flag="ok"):
    return f"{index:5d} {coord_a:10.4f} {coord_b:10.4f} 1.0e+05 {flag}\n"


def titration_records():
    """Anchor plus two unlabeled follow-ups; R3 disappears in the last one."""
    anchor = [
        make_record(i + 1, x, y, flag="ok", label=label)
        for i, (label, (x, y)) in enumerate(ANCHOR_PEAKS.items())
    ]
    follow_ups = []
    for k in (1, 2):
        records = []
        for i, (label, (x, y)) in enumerate(ANCHOR_PEAKS.items()):
            response = RESPONSES[label][k]
            if response is None:
                continue
            records.append(make_record(10 * k + i, x + response * SQRT2, y, flag="ok"))
        follow_ups.append(records)
    return [anchor, *follow_ups]


def write_titration(directory):
    """Write the titration of ``titration_records`` as peak list files."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for k, records in enumerate(titration_records()):
        path = directory / f"point{k}.list"
        lines = ["Peak list\n"]
        for record in records:
            lines.append(peak_line(record.index, record.coord1, record.coord2, record.flag))
            if record.label:
                lines.append(f"# {record.label}\n")
        path.write_text("".join(lines))
        paths.append(path)
    return paths


@pytest.fixture
def titration():
    """In-memory anchor and follow-up records."""
    return titration_records()


@pytest.fixture
def titration_files(tmp_path):
    """Peak list files of the synthetic titration, anchor first."""
    return write_titration(tmp_path / "spectra")


@pytest.fixture
def conc_file(tmp_path):
    """Concentration table matching ``titration_files``."""
    path = tmp_path / "conc.csv"
    rows = "".join(f"{h},{g}\n" for h, g in zip(HOST, GUEST, strict=True))
    path.write_text("host,guest\n" + rows)
    return path


@pytest.fixture
def sample_config_file(tmp_path):
    """Create a sample TOML configuration file."""
    config_path = tmp_path / "cspfit.toml"
    content = """
[matching]
weight = 0.25
max_distance = 2.0

[fitting]
n_starts = 10
ka_max = 1e6

[outliers]
iqr_factor = 3.0

[output]
directory = "Results"
formats = ["json"]
save_figures = false
"""
    config_path.write_text(content)
    return config_path
