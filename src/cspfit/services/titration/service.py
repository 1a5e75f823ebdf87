"""High-level titration analysis service.

This is the primary entry point for analysis workflows: CLI and notebooks
hand it spectra and concentrations and get an ``AnalysisResult`` back.

Example:
    service = TitrationService()
    source = DirectorySource([Path("ref.list"), Path("t1.list"), Path("t2.list")])
    result, files = service.run(source, host=[5e-4] * 3, guest=[0.0, 1e-3, 2e-3])
    print(f"Fitted {len(result.fits)} residues")
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from cspfit.core.algorithms.series import SeriesAssembler
from cspfit.core.domain.config import CSPFitConfig
from cspfit.core.domain.peaks_io import ParsedPeakList
from cspfit.core.domain.report import RunWarning, WarningKind
from cspfit.core.fitting.optimizer import MultiStartFitter
from cspfit.core.fitting.parallel import ResidueOutcome, fit_residues
from cspfit.core.results.analysis import AnalysisResult
from cspfit.core.results.outliers import flag_outliers
from cspfit.core.shared.exceptions import DataIOError, InsufficientDataError
from cspfit.core.shared.reporter import NullReporter, Reporter
from cspfit.services.titration.source import SpectraSource
from cspfit.services.titration.writer import write_outputs

logger = logging.getLogger(__name__)


class TitrationService:
    """Match, assemble, fit and annotate a titration series."""

    def __init__(self, config: CSPFitConfig | None = None, reporter: Reporter | None = None) -> None:
        self.config = config or CSPFitConfig()
        self._reporter = reporter or NullReporter()

    def run(
        self,
        source: SpectraSource,
        host: Sequence[float] | None = None,
        guest: Sequence[float] | None = None,
    ) -> tuple[AnalysisResult, list[Path]]:
        """Analyze the spectra of ``source`` and write outputs to its sink.

        Concentrations passed here take precedence over the ``[titration]``
        section of the configuration.

        Raises:
            SourceUnavailableError: The source cannot provide spectra or a sink.
            DataIOError: Concentrations are missing or the anchor is unusable.
        """
        spectra = source.list_spectra()
        host, guest = self._resolve_concentrations(host, guest)
        result = self.analyze(spectra, host, guest)

        written: list[Path] = []
        sink = source.open_sink()
        if sink is not None:
            self._reporter.action(f"Writing results to {sink}")
            written = write_outputs(result, sink, self.config.output)
            self._reporter.success(f"Wrote {len(written)} file(s)")
        return result, written

    def _resolve_concentrations(
        self, host: Sequence[float] | None, guest: Sequence[float] | None
    ) -> tuple[Sequence[float], Sequence[float]]:
        if host is None or guest is None:
            if not self.config.titration.is_set:
                msg = "Host and guest concentrations are required"
                raise DataIOError(msg)
            host = host if host is not None else self.config.titration.host
            guest = guest if guest is not None else self.config.titration.guest
        return host, guest

    def analyze(
        self,
        spectra: Sequence[ParsedPeakList],
        host: Sequence[float],
        guest: Sequence[float],
    ) -> AnalysisResult:
        """Run the full analysis on already loaded spectra."""
        if not spectra:
            msg = "At least one spectrum is required"
            raise DataIOError(msg)

        result = AnalysisResult(spectra=[spectrum.name for spectrum in spectra])
        for spectrum in spectra:
            result.warnings.extend(spectrum.warnings)

        anchor, *follow_ups = spectra
        self._reporter.action(f"Tracking residues of {anchor.name} in {len(follow_ups)} spectra")
        assembler = SeriesAssembler(
            anchor.records,
            weight=self.config.matching.weight,
            max_distance=self.config.matching.max_distance,
        )
        for spectrum in follow_ups:
            report = assembler.add_spectrum(spectrum.records, name=spectrum.name)
            if report is not None and report.conflicts:
                self._reporter.info(
                    f"{spectrum.name}: {len(report.conflicts)} conflict(s), "
                    f"{report.summary.n_final}/{report.n_reference} residues matched"
                )

        result.curves = assembler.curves(host, guest)
        result.match_reports = assembler.match_reports
        result.warnings.extend(assembler.warnings)

        self._reporter.action(f"Fitting {len(result.curves)} residues")
        fitter = MultiStartFitter.from_config(self.config.fitting)
        outcomes = fit_residues(
            list(result.curves.values()), fitter, n_workers=self.config.fitting.workers
        )
        for outcome in outcomes:
            self._collect(result, outcome)

        result.fits, result.bounds = flag_outliers(result.fits, self.config.outliers.iqr_factor)
        if result.outliers:
            self._reporter.info(f"Ka outliers: {', '.join(result.outliers)}")
        self._reporter.success(
            f"Fitted {len(result.fits)} of {len(result.curves)} residues "
            f"({len(result.skipped)} skipped)"
        )
        return result

    def _collect(self, result: AnalysisResult, outcome: ResidueOutcome) -> None:
        if outcome.fit is not None:
            result.fits[outcome.label] = outcome.fit
            if outcome.sampled is not None:
                result.sampled[outcome.label] = outcome.sampled
            return

        if isinstance(outcome.error, InsufficientDataError):
            kind = WarningKind.INSUFFICIENT_DATA
            logger.info("Skipping %s", outcome.error)
        else:
            kind = WarningKind.FIT_TOTAL_FAILURE
            logger.warning("Fit failed: %s", outcome.error)
            self._reporter.warning(str(outcome.error))
        result.skipped[outcome.label] = kind.value
        result.warnings.append(RunWarning(kind, outcome.label, str(outcome.error)))


__all__ = ["TitrationService"]
