"""UI messages and status indicators."""

from __future__ import annotations

import logging

from cspfit.ui.console import console, icon

__all__ = [
    "action",
    "error",
    "info",
    "success",
    "warning",
]

_logger = logging.getLogger("cspfit.ui")


def success(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a success message."""
    console.print(f"{'  ' * indent}[success]{icon('check')}[/success] {message}")
    if do_log:
        _logger.info(message)


def warning(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a warning message."""
    console.print(f"{'  ' * indent}[warning]{icon('warn')}[/warning]  {message}")
    if do_log:
        _logger.warning(message)


def error(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an error message."""
    console.print(f"{'  ' * indent}[error]{icon('error')}[/error] {message}")
    if do_log:
        _logger.error(message)


def info(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an info message."""
    console.print(f"{'  ' * indent}[dim]{icon('info')}[/dim] {message}")
    if do_log:
        _logger.info(message)


def action(message: str) -> None:
    """Display an action/process message with visual separation."""
    console.print(f"\n[bold yellow]{icon('bullet')}[/bold yellow] {message}")
