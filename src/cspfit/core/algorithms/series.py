"""Assemble per-residue perturbation curves over a titration series."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from cspfit.core.algorithms.matching import MatchResult, match_peaks
from cspfit.core.domain.curves import Coordinates, CSPCurve, TitrationSeries
from cspfit.core.domain.peaks import PeakRecord, label_map
from cspfit.core.domain.report import RunWarning, WarningKind
from cspfit.core.shared.exceptions import DataIOError
from cspfit.core.shared.typing import FloatArray

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 0.2


def perturbation_distance(
    dx: float | FloatArray, dy: float | FloatArray, weight: float = DEFAULT_WEIGHT
) -> float | FloatArray:
    """Weighted combined shift: ``sqrt((dx**2 + (weight * dy)**2) / 2)``."""
    return np.sqrt((np.square(dx) + np.square(weight * dy)) / 2.0)


class SeriesAssembler:
    """Track anchor residues through the follow-up spectra of a titration.

    Follow-up spectra that carry labels are read by label; unlabeled ones are
    matched against the anchor coordinates.
    """

    def __init__(
        self,
        anchor: Sequence[PeakRecord],
        *,
        weight: float = DEFAULT_WEIGHT,
        max_distance: float | None = None,
    ) -> None:
        anchor_by_label = label_map(anchor)
        if not anchor_by_label:
            msg = "Anchor spectrum has no labeled peaks"
            raise DataIOError(msg)
        self._anchor = list(anchor_by_label.values())
        self.weight = weight
        self.max_distance = max_distance
        self.series = TitrationSeries.from_anchor(
            {label: record.position for label, record in anchor_by_label.items()}
        )
        self.match_reports: list[MatchResult] = []
        self.warnings: list[RunWarning] = []

    @property
    def labels(self) -> list[str]:
        return self.series.labels

    @property
    def n_spectra(self) -> int:
        return self.series.n_spectra

    def add_spectrum(self, records: Sequence[PeakRecord], name: str = "") -> MatchResult | None:
        """Locate every anchor residue in one follow-up spectrum.

        Returns the match report when the spectrum had to be matched.
        """
        name = name or f"spectrum {self.n_spectra + 1}"
        report = None
        if any(record.is_labeled for record in records):
            by_label = label_map(records)
            found: dict[str, Coordinates] = {
                label: by_label[label].position for label in self.labels if label in by_label
            }
        else:
            report = match_peaks(
                self._anchor, records, max_distance=self.max_distance, name=name
            )
            by_index = {record.index: record for record in records}
            found = {
                match.reference_label: by_index[match.unlabeled_index].position
                for match in report.matches
            }
            self.match_reports.append(report)

        missing = [label for label in self.labels if label not in found]
        if missing:
            logger.debug("%s: %d residue(s) not found", name, len(missing))
            self.warnings.append(
                RunWarning(
                    WarningKind.MISSING_PEAK,
                    name,
                    f"{len(missing)} residue(s) not found: {', '.join(missing)}",
                )
            )
        self.series.append(found)
        return report

    def distances(self, label: str) -> FloatArray:
        """Perturbation distance of ``label`` in every spectrum (NaN if missing)."""
        x0, y0 = self.series.anchor(label)
        values = np.full(self.n_spectra, np.nan)
        for k, coords in enumerate(self.series.tracks[label]):
            if coords is not None:
                values[k] = perturbation_distance(coords[0] - x0, coords[1] - y0, self.weight)
        return values

    def curves(
        self, host_conc: Sequence[float], guest_conc: Sequence[float]
    ) -> dict[str, CSPCurve]:
        """Align the series with the concentrations and build one curve per residue.

        All three lengths are truncated to the shortest one, with a warning,
        when they disagree. The assembled series itself is left intact.

        Raises:
            DataIOError: If either concentration sequence is empty.
        """
        lengths = (self.n_spectra, len(host_conc), len(guest_conc))
        n_points = min(lengths)
        if n_points < 1:
            msg = f"Concentrations are empty ({lengths[1]} host, {lengths[2]} guest values)"
            raise DataIOError(msg)
        if len(set(lengths)) > 1:
            message = (
                f"{lengths[0]} spectra, {lengths[1]} host and {lengths[2]} guest "
                f"concentrations; truncating to {n_points}"
            )
            logger.warning(message)
            self.warnings.append(
                RunWarning(WarningKind.MISMATCHED_SERIES_LENGTH, "series", message)
            )

        host = np.asarray(host_conc[:n_points], dtype=float)
        guest = np.asarray(guest_conc[:n_points], dtype=float)
        return {
            label: CSPCurve(
                label=label,
                host_conc=host,
                guest_conc=guest,
                distance=self.distances(label)[:n_points],
            )
            for label in self.labels
        }


__all__ = ["DEFAULT_WEIGHT", "SeriesAssembler", "perturbation_distance"]
