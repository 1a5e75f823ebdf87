"""JSON output writer for CSPFit results."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from cspfit.io.writers.base import WriterConfig

if TYPE_CHECKING:
    from cspfit.core.results.analysis import AnalysisResult

RESULTS_FILE = "results.json"
SCHEMA_VERSION = "1.0.0"


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types and Path objects."""

    def default(self, o: Any) -> Any:
        if isinstance(o, np.integer):
            return int(o)
        if isinstance(o, np.floating):
            return float(o)
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Path):
            return str(o)
        return super().default(o)


def _finite_or_none(values: np.ndarray) -> list[float | None]:
    return [float(v) if np.isfinite(v) else None for v in values]


class JSONWriter:
    """Writer for a single machine-readable ``results.json``."""

    def __init__(self, config: WriterConfig | None = None) -> None:
        self.config = config or WriterConfig()

    def write(self, result: AnalysisResult, directory: Path) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / RESULTS_FILE
        self.write_results(result, path)
        return [path]

    def write_results(self, result: AnalysisResult, path: Path) -> None:
        """Write fits, curves, conflicts, skipped residues and warnings."""
        output: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "generated": datetime.now(),
            "spectra": result.spectra,
            "summary": result.summary(),
            "outlier_bounds": result.bounds.as_dict() if result.bounds else None,
            "residues": {label: self._serialize_residue(result, label) for label in result.curves},
            "conflicts": [
                {
                    "spectrum": spectrum,
                    "unlabeled_index": group.unlabeled_index,
                    "group_size": group.size,
                    "labels": list(group.labels),
                    "distances": list(group.distances),
                    "winner": group.winner,
                }
                for spectrum, group in result.conflicts
            ],
            "match_summaries": {
                report.name: report.summary.as_dict() for report in result.match_reports
            },
            "skipped": result.skipped,
            "warnings": [
                {"kind": w.kind.value, "subject": w.subject, "message": w.message}
                for w in result.warnings
            ],
        }
        with path.open("w", encoding="utf-8") as f:
            json.dump(output, f, cls=NumpyEncoder, indent=self.config.json_indent)

    @staticmethod
    def _serialize_residue(result: AnalysisResult, label: str) -> dict[str, Any]:
        curve = result.curves[label]
        fit = result.fits.get(label)
        sampled = result.sampled.get(label)
        return {
            "fit": fit.model_dump() if fit else None,
            "observed": {
                "host": curve.host_conc,
                "guest": curve.guest_conc,
                "distance": _finite_or_none(curve.distance),
            },
            "predicted": (
                {"ratio": sampled.ratio, "response": sampled.response} if sampled else None
            ),
        }


__all__ = ["JSONWriter", "NumpyEncoder"]
