"""Version and header display for CSPFit UI."""

from __future__ import annotations

from datetime import datetime

from rich.table import Table

from cspfit.ui.console import VERSION, Verbosity, console, get_verbosity, hr


def show_standard_header(title: str | None = None) -> None:
    """Show a compact header with version and timestamp."""
    if get_verbosity() == Verbosity.QUIET:
        return

    grid = Table.grid(expand=True)
    grid.add_column(justify="left", ratio=1)
    grid.add_column(justify="right", ratio=1)
    grid.add_row(
        f"[header]CSPFit v{VERSION}[/header]" + (f"  [dim]{title}[/dim]" if title else ""),
        f"[dim]{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}[/dim]",
    )
    console.print(grid)
    console.print(hr())


def show_version() -> None:
    """Show version information (for --version flag)."""
    console.print(f"\n[header]CSPFit[/header] [dim]v{VERSION}[/dim]\n")


__all__ = ["show_standard_header", "show_version"]
