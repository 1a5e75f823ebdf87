"""Console-based reporter implementation using Rich."""

from __future__ import annotations

from cspfit.core.shared.reporter import Reporter
from cspfit.ui.messages import action, error, info, success, warning


class ConsoleReporter:
    """Reporter implementation printing styled messages to the console.

    Messages are not logged; pair it with a ``LoggingReporter`` in a
    ``CompositeReporter`` to keep them in the run log.

    Example:
        >>> reporter = ConsoleReporter()
        >>> reporter.action("Matching peaks...")
        >>> reporter.success("Matched 84 residues")
    """

    def action(self, message: str) -> None:
        action(message)

    def info(self, message: str) -> None:
        info(message, do_log=False)

    def warning(self, message: str) -> None:
        warning(message, do_log=False)

    def error(self, message: str) -> None:
        error(message, do_log=False)

    def success(self, message: str) -> None:
        success(message, do_log=False)


# Verify protocol compliance at import time
if not isinstance(ConsoleReporter(), Reporter):
    raise TypeError("ConsoleReporter must satisfy Reporter protocol")
