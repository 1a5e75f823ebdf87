"""Analyze command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer
from rich.markup import escape

from cspfit.core.domain.config import CSPFitConfig
from cspfit.core.domain.peaks import AXIS_ORDERS
from cspfit.core.shared.exceptions import CSPFitError
from cspfit.core.shared.reporter import CompositeReporter, LoggingReporter
from cspfit.io.concentrations import read_concentrations
from cspfit.io.config import load_config
from cspfit.services.titration import DirectorySource, TitrationService
from cspfit.ui import (
    ConsoleReporter,
    Verbosity,
    close_logging,
    error,
    log_dict,
    print_conflict_table,
    print_fit_table,
    print_summary,
    set_verbosity,
    setup_logging,
    show_standard_header,
    warning,
)

LOG_FILE = "cspfit.log"


def analyze_command(
    spectra: Annotated[
        list[pathlib.Path],
        typer.Argument(
            help="Peak lists in titration order (anchor first), or one directory of peak lists",
        ),
    ],
    conc: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--conc",
            help="Concentration table with host and guest columns, one row per spectrum",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    config: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to TOML configuration file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    output: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for results",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-w", help="Residues fitted in parallel", min=1),
    ] = None,
    axis: Annotated[
        str | None,
        typer.Option("--axis", help="Column to axis mapping: ab or ba"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
) -> None:
    """Track residues through a titration and fit their binding curves.

    Examples
    --------
    Concentrations from a table:
        $ cspfit analyze ref.list t1.list t2.list --conc conc.csv

    Everything from a configuration file:
        $ cspfit analyze spectra/ --config cspfit.toml --output results
    """
    if axis is not None and axis not in AXIS_ORDERS:
        msg = f"Invalid axis order '{axis}'. Valid orders: {', '.join(AXIS_ORDERS)}"
        raise typer.BadParameter(msg, param_hint="--axis")

    set_verbosity(Verbosity.VERBOSE if verbose else Verbosity.NORMAL)
    show_standard_header("analyze")

    try:
        cfg = load_config(config) if config is not None else CSPFitConfig()
    except (FileNotFoundError, CSPFitError) as e:
        error(escape(str(e)), do_log=False)
        raise typer.Exit(1) from e

    if output is not None:
        cfg.output.directory = output
    if workers is not None:
        cfg.fitting.workers = workers
    if axis is not None:
        cfg.matching.axis_order = axis

    setup_logging(
        log_file=cfg.output.directory / LOG_FILE,
        verbose=verbose,
        log_format=cfg.output.log_format,
    )
    log_dict(cfg.model_dump(mode="json"))

    try:
        host = guest = None
        if conc is not None:
            table = read_concentrations(conc)
            host, guest = table.host.tolist(), table.guest.tolist()

        if len(spectra) == 1 and spectra[0].is_dir():
            source = DirectorySource.from_directory(
                spectra[0], cfg.output.directory, axis_order=cfg.matching.axis_order
            )
        else:
            source = DirectorySource(
                spectra, cfg.output.directory, axis_order=cfg.matching.axis_order
            )

        reporter = CompositeReporter([ConsoleReporter(), LoggingReporter("cspfit.service")])
        service = TitrationService(cfg, reporter=reporter)
        result, _ = service.run(source, host=host, guest=guest)
    except CSPFitError as e:
        error(escape(str(e)))
        close_logging()
        raise typer.Exit(1) from e

    if result.fits:
        print_fit_table(result.fits.values())
    if result.conflicts:
        print_conflict_table(result.conflicts)
    for run_warning in result.warnings:
        warning(escape(str(run_warning)), do_log=False)
    print_summary(result.summary())
    close_logging()
