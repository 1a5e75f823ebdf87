"""Progress and status reporting abstraction.

The titration service reports what it is doing through a ``Reporter`` so the
core never depends on a particular UI:

    - Reporter protocol defines the contract
    - NullReporter keeps tests and batch runs silent
    - LoggingReporter forwards to the ``cspfit`` logger
    - ConsoleReporter (in ui/) prints with Rich
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Protocol for progress and status reporting."""

    def action(self, message: str) -> None:
        """Report an action being performed, e.g. 'Fitting residues...'."""
        ...

    def info(self, message: str) -> None:
        """Report an informational message."""
        ...

    def warning(self, message: str) -> None:
        """Report a non-fatal issue the user should be aware of."""
        ...

    def error(self, message: str) -> None:
        """Report an error that affects results without stopping the run."""
        ...

    def success(self, message: str) -> None:
        """Report successful completion of an operation."""
        ...


class NullReporter:
    """Silent reporter that discards all messages.

    Example:
        >>> reporter = NullReporter()
        >>> reporter.action("Matching peaks...")  # No output
    """

    def action(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass


class LoggingReporter:
    """Reporter that writes to Python logging.

    Example:
        >>> reporter = LoggingReporter("cspfit.titration")
        >>> reporter.action("Fitting residue A12...")  # INFO level
        >>> reporter.warning("Only 2 valid points")  # WARNING level
    """

    def __init__(self, logger_name: str = "cspfit") -> None:
        self._logger = logging.getLogger(logger_name)

    def action(self, message: str) -> None:
        """Log action at INFO level with prefix."""
        self._logger.info("[ACTION] %s", message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def success(self, message: str) -> None:
        """Log success at INFO level with prefix."""
        self._logger.info("[SUCCESS] %s", message)


class CompositeReporter:
    """Reporter that delegates to multiple reporters.

    Example:
        >>> reporter = CompositeReporter([ConsoleReporter(), LoggingReporter()])
        >>> reporter.success("Done!")  # Goes to both reporters
    """

    def __init__(self, reporters: list[Reporter]) -> None:
        self._reporters = reporters

    def action(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.action(message)

    def info(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.info(message)

    def warning(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.warning(message)

    def error(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.error(message)

    def success(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.success(message)


__all__ = ["CompositeReporter", "LoggingReporter", "NullReporter", "Reporter"]
