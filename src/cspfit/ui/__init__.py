"""UI and terminal output styling for CSPFit.

Submodules:
- console: Theme and console instance
- logging: File and console logging setup
- branding: Header and version display
- messages: Status messages (success, error, warning, etc.)
- tables: Result tables
- reporter: Reporter protocol implementation on the console
"""

from cspfit.ui.branding import show_standard_header, show_version
from cspfit.ui.console import (
    CSPFIT_THEME,
    VERSION,
    Verbosity,
    console,
    get_verbosity,
    hr,
    icon,
    set_verbosity,
)
from cspfit.ui.logging import close_logging, log_dict, setup_logging
from cspfit.ui.messages import action, error, info, success, warning
from cspfit.ui.reporter import ConsoleReporter
from cspfit.ui.tables import create_table, print_conflict_table, print_fit_table, print_summary

__all__ = [
    "CSPFIT_THEME",
    "VERSION",
    "ConsoleReporter",
    "Verbosity",
    "action",
    "close_logging",
    "console",
    "create_table",
    "error",
    "get_verbosity",
    "hr",
    "icon",
    "info",
    "log_dict",
    "print_conflict_table",
    "print_fit_table",
    "print_summary",
    "set_verbosity",
    "setup_logging",
    "show_standard_header",
    "show_version",
    "success",
    "warning",
]
