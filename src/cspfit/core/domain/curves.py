"""Titration series and chemical shift perturbation curves."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from cspfit.core.shared.typing import FloatArray

Coordinates = tuple[float, float]


@dataclass(slots=True)
class TitrationSeries:
    """Coordinates of every anchor residue across the spectra of a series.

    ``tracks[label][k]`` holds the ``(coord1, coord2)`` of the residue in
    spectrum ``k`` or ``None`` when the peak was not found. Index 0 is the
    anchor.
    """

    tracks: dict[str, list[Coordinates | None]] = field(default_factory=dict)
    n_spectra: int = 0

    @classmethod
    def from_anchor(cls, anchor: dict[str, Coordinates]) -> TitrationSeries:
        series = cls(tracks={label: [coords] for label, coords in anchor.items()})
        series.n_spectra = 1
        return series

    @property
    def labels(self) -> list[str]:
        return list(self.tracks)

    def anchor(self, label: str) -> Coordinates:
        coords = self.tracks[label][0]
        if coords is None:  # pragma: no cover - anchors are always present
            msg = f"Anchor coordinates missing for {label}"
            raise KeyError(msg)
        return coords

    def append(self, found: dict[str, Coordinates]) -> None:
        """Record one follow-up spectrum; residues absent from ``found`` are missing."""
        for label, track in self.tracks.items():
            track.append(found.get(label))
        self.n_spectra += 1


@dataclass(slots=True)
class CSPCurve:
    """Perturbation distance against concentrations for one residue.

    Missing distances are NaN; ``distance[0]`` is the anchor and always 0.
    """

    label: str
    host_conc: FloatArray
    guest_conc: FloatArray
    distance: FloatArray

    @property
    def valid_mask(self) -> np.ndarray:
        return np.isfinite(self.distance)

    @property
    def n_valid(self) -> int:
        return int(np.count_nonzero(self.valid_mask))

    def valid(self) -> tuple[FloatArray, FloatArray, FloatArray]:
        """Return host, guest and distance arrays restricted to valid points."""
        mask = self.valid_mask
        return self.host_conc[mask], self.guest_conc[mask], self.distance[mask]

    @property
    def ratio(self) -> FloatArray:
        """Guest/host concentration ratio for each spectrum."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.where(self.host_conc > 0, self.guest_conc / self.host_conc, np.nan)


@dataclass(slots=True, frozen=True)
class SampledCurve:
    """Model prediction sampled for display."""

    label: str
    guest_conc: FloatArray
    ratio: FloatArray
    response: FloatArray


__all__ = ["CSPCurve", "Coordinates", "SampledCurve", "TitrationSeries"]
