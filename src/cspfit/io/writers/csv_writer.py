"""CSV writer for CSPFit results.

Tables are written one row per residue (results, skipped residues), per
conflict member (conflicts) or per point (curves), so they load directly
into pandas, R or a spreadsheet.
"""

from __future__ import annotations

import csv
from typing import TYPE_CHECKING, Any, TextIO

from cspfit.io.writers.base import WriterConfig, format_float

if TYPE_CHECKING:
    from pathlib import Path

    from cspfit.core.results.analysis import AnalysisResult

RESULTS_FILE = "results.csv"
CONFLICTS_FILE = "conflicts.csv"
CURVES_FILE = "curves.csv"
SKIPPED_FILE = "skipped.csv"


class CSVWriter:
    """Writer for CSV format outputs."""

    def __init__(self, config: WriterConfig | None = None) -> None:
        self.config = config or WriterConfig()

    def _fmt(self, value: float) -> str:
        return format_float(value, self.config.precision, self.config.scientific_notation_threshold)

    def _writer(self, f: TextIO) -> Any:
        return csv.writer(f, delimiter=self.config.csv_delimiter)

    def write(self, result: AnalysisResult, directory: Path) -> list[Path]:
        """Write every CSV table and return their paths."""
        directory.mkdir(parents=True, exist_ok=True)
        paths = [
            directory / RESULTS_FILE,
            directory / CONFLICTS_FILE,
            directory / CURVES_FILE,
            directory / SKIPPED_FILE,
        ]
        self.write_results(result, paths[0])
        self.write_conflicts(result, paths[1])
        self.write_curves(result, paths[2])
        self.write_skipped(result, paths[3])
        return paths

    def write_results(self, result: AnalysisResult, path: Path) -> None:
        """Write the per-residue affinity table."""
        with path.open("w", newline="") as f:
            if self.config.include_comments:
                f.write("# CSPFit binding fit results\n")
                if result.bounds is not None:
                    f.write(
                        f"# Ka outlier bounds: [{self._fmt(result.bounds.lower)}, "
                        f"{self._fmt(result.bounds.upper)}]\n"
                    )
            writer = self._writer(f)
            writer.writerow(
                ["residue", "Ka", "Kd", "delta_H", "delta_HG", "SSR", "R2", "n_points", "outlier"]
            )
            for label, fit in result.fits.items():
                writer.writerow(
                    [
                        label,
                        self._fmt(fit.ka),
                        self._fmt(fit.kd),
                        self._fmt(fit.delta_h),
                        self._fmt(fit.delta_hg),
                        self._fmt(fit.ssr),
                        self._fmt(fit.r_squared),
                        fit.n_points,
                        fit.is_outlier,
                    ]
                )

    def write_conflicts(self, result: AnalysisResult, path: Path) -> None:
        """Write one row per contending reference of every conflict group."""
        with path.open("w", newline="") as f:
            writer = self._writer(f)
            writer.writerow(
                ["spectrum", "unlabeled_index", "group_size", "residue", "distance", "winner"]
            )
            for spectrum, group in result.conflicts:
                for label, distance in zip(group.labels, group.distances, strict=True):
                    writer.writerow(
                        [
                            spectrum,
                            group.unlabeled_index,
                            group.size,
                            label,
                            self._fmt(distance),
                            label == group.winner,
                        ]
                    )

    def write_curves(self, result: AnalysisResult, path: Path) -> None:
        """Write observed and predicted curves in long format."""
        with path.open("w", newline="") as f:
            writer = self._writer(f)
            writer.writerow(["residue", "kind", "host", "guest", "ratio", "response"])
            for label, curve in result.curves.items():
                for host, guest, ratio, distance in zip(
                    curve.host_conc, curve.guest_conc, curve.ratio, curve.distance, strict=True
                ):
                    writer.writerow(
                        [
                            label,
                            "observed",
                            self._fmt(host),
                            self._fmt(guest),
                            self._fmt(ratio),
                            self._fmt(distance),
                        ]
                    )
                sampled = result.sampled.get(label)
                if sampled is None:
                    continue
                for guest, ratio, response in zip(
                    sampled.guest_conc, sampled.ratio, sampled.response, strict=True
                ):
                    writer.writerow(
                        [label, "fit", "", self._fmt(guest), self._fmt(ratio), self._fmt(response)]
                    )

    def write_skipped(self, result: AnalysisResult, path: Path) -> None:
        """Write residues without a fit and the reason."""
        with path.open("w", newline="") as f:
            writer = self._writer(f)
            writer.writerow(["residue", "reason"])
            for label, reason in result.skipped.items():
                writer.writerow([label, reason])


__all__ = ["CSVWriter"]
