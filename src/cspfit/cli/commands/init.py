"""Init command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from cspfit.io.config import generate_default_config
from cspfit.ui import console, error, info, success


def init_command(
    path: Annotated[
        Path,
        typer.Argument(
            help="Path for new configuration file",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = Path("cspfit.toml"),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
) -> None:
    """Generate a default configuration file.

    Examples
    --------
      Create default config:
        $ cspfit init

      Overwrite an existing config:
        $ cspfit init my_titration.toml --force
    """
    if path.exists() and not force:
        error(f"File already exists: [path]{path}[/path]", do_log=False)
        info("Use --force to overwrite", do_log=False)
        raise typer.Exit(1)

    path.write_text(generate_default_config())
    success(f"Created configuration file: [path]{path}[/path]", do_log=False)

    console.print("\n[header]Next steps:[/header]")
    console.print("  1. Fill in the [key]\\[titration][/key] host and guest concentrations")
    console.print(f"  2. Run: [key]cspfit analyze ref.list t1.list t2.list --config {path.name}[/key]")
