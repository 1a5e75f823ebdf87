"""CLI command modules for CSPFit.

Each module exports one command function registered by ``cspfit.cli.app``.
"""

from cspfit.cli.commands.analyze import analyze_command
from cspfit.cli.commands.init import init_command
from cspfit.cli.commands.match import match_command

__all__ = ["analyze_command", "init_command", "match_command"]
