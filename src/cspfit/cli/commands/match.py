"""Match command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer
from rich.markup import escape

from cspfit.core.algorithms.matching import match_peaks
from cspfit.core.domain.peaks import AXIS_ORDERS
from cspfit.core.domain.peaks_io import read_peak_list
from cspfit.core.shared.exceptions import CSPFitError
from cspfit.ui import error, print_conflict_table, print_summary, show_standard_header, warning


def match_command(
    reference: Annotated[
        pathlib.Path,
        typer.Argument(help="Labeled reference peak list", dir_okay=False),
    ],
    unlabeled: Annotated[
        pathlib.Path,
        typer.Argument(help="Unlabeled peak list to assign", dir_okay=False),
    ],
    axis: Annotated[
        str,
        typer.Option("--axis", help="Column to axis mapping: ab or ba"),
    ] = "ab",
    max_distance: Annotated[
        float | None,
        typer.Option("--max-distance", help="Reject nearest neighbours farther than this", min=0),
    ] = None,
) -> None:
    """Match a labeled peak list against an unlabeled one and report conflicts.

    Examples
    --------
      $ cspfit match reference.list point2.list
      $ cspfit match reference.list point2.list --max-distance 0.5
    """
    if axis not in AXIS_ORDERS:
        msg = f"Invalid axis order '{axis}'. Valid orders: {', '.join(AXIS_ORDERS)}"
        raise typer.BadParameter(msg, param_hint="--axis")

    show_standard_header("match")
    try:
        ref = read_peak_list(reference, axis_order=axis)
        unl = read_peak_list(unlabeled, axis_order=axis)
        result = match_peaks(
            ref.records, unl.records, max_distance=max_distance, name=unl.name
        )
    except CSPFitError as e:
        error(escape(str(e)), do_log=False)
        raise typer.Exit(1) from e

    for run_warning in ref.warnings + unl.warnings:
        warning(escape(str(run_warning)), do_log=False)

    print_summary(result.summary.as_dict(), title=f"{ref.name} → {unl.name}")
    if result.conflicts:
        print_conflict_table((result.name, group) for group in result.conflicts)
    if result.unmatched:
        warning(f"Unmatched: {', '.join(result.unmatched)}", do_log=False)
