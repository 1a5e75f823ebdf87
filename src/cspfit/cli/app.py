"""Main Typer application for CSPFit.

This module creates the application and registers the commands defined in
the ``commands`` subpackage.
"""

from typing import Annotated

import typer

from cspfit.cli.callbacks import version_callback
from cspfit.cli.commands import analyze_command, init_command, match_command

app = typer.Typer(
    name="cspfit",
    help="CSPFit - Binding affinities from NMR chemical shift titrations",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """CSPFit - Track peaks through a titration and fit 1:1 binding isotherms."""


app.command(name="analyze")(analyze_command)
app.command(name="match")(match_command)
app.command(name="init")(init_command)
