"""Command-line interface for CSPFit."""

from cspfit.cli.app import app

__all__ = ["app"]
