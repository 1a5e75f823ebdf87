"""UI tables for displaying analysis results.

This module provides functions for creating and displaying Rich tables
with consistent styling across the application.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from rich import box
from rich.table import Table

from cspfit.ui.console import console

if TYPE_CHECKING:
    from cspfit.core.algorithms.matching import MatchConflictGroup
    from cspfit.core.domain.results import FitResult

__all__ = [
    "create_table",
    "print_conflict_table",
    "print_fit_table",
    "print_summary",
]


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling."""
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table."""
    table = create_table(title, show_header=False)
    table.add_column("Item", style="metric")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, str(value))

    console.print(table)


def print_fit_table(fits: Iterable[FitResult], title: str = "Binding Fits") -> None:
    """Print Ka, Kd, R² and outlier status per residue."""
    table = create_table(title)
    table.add_column("Residue", style="key")
    table.add_column("Ka (M⁻¹)", justify="right")
    table.add_column("Kd (M)", justify="right")
    table.add_column("R²", justify="right")
    table.add_column("Outlier", justify="center")

    for fit in fits:
        table.add_row(
            fit.label,
            f"{fit.ka:.3e}",
            f"{fit.kd:.3e}",
            f"{fit.r_squared:.4f}",
            "[warning]yes[/warning]" if fit.is_outlier else "",
        )

    console.print(table)


def print_conflict_table(
    conflicts: Iterable[tuple[str, MatchConflictGroup]], title: str = "Match Conflicts"
) -> None:
    """Print one row per conflict group with its contenders and winner."""
    table = create_table(title)
    table.add_column("Spectrum", style="key")
    table.add_column("Peak", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Contenders (distance)")
    table.add_column("Kept", style="value")

    for spectrum, group in conflicts:
        contenders = ", ".join(
            f"{label} ({distance:.4f})"
            for label, distance in zip(group.labels, group.distances, strict=True)
        )
        table.add_row(spectrum, str(group.unlabeled_index), str(group.size), contenders, group.winner)

    console.print(table)
