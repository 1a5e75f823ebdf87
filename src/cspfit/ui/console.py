"""Console configuration and theme for CSPFit UI.

This module provides the central console instance and theme used throughout
the application for consistent styling.
"""

import os
import sys
from importlib import metadata

from rich.console import Console
from rich.theme import Theme

try:
    _PKG_VERSION = metadata.version("cspfit")
except metadata.PackageNotFoundError:
    _PKG_VERSION = "dev"

CSPFIT_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        # --- UI Structure ---
        "header": "bold cyan",
        "panel.border": "blue",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "path": "blue underline",
        # --- Modifiers ---
        "dim": "dim",
        "emphasis": "bold",
    }
)

# Single console instance for entire application
console = Console(theme=CSPFIT_THEME)

VERSION = _PKG_VERSION


class Verbosity:
    """Verbosity levels for UI output."""

    QUIET = 0  # Errors only
    NORMAL = 1  # Standard output (headers, progress, results)
    VERBOSE = 2  # Detailed output (debug info)


_verbosity = Verbosity.NORMAL


def set_verbosity(level: int) -> None:
    """Set the global verbosity level (0=QUIET, 1=NORMAL, 2=VERBOSE)."""
    global _verbosity
    _verbosity = level
    console.quiet = level == Verbosity.QUIET


def get_verbosity() -> int:
    return _verbosity


_EMOJI_DISABLED = os.getenv("CSPFIT_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_unicode() -> bool:
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a UI icon string based on terminal capabilities.

    Names: check, warn, error, info, bullet, separator
    """
    fancy = _supports_unicode()
    mapping = {
        "check": "✓" if fancy else "+",
        "warn": "⚠" if fancy else "!",
        "error": "✗" if fancy else "x",
        "info": "▸" if fancy else ">",
        "bullet": "‣" if fancy else "-",
        "separator": "━" if fancy else "-",
    }
    return mapping.get(name, mapping["bullet"])


def hr(width: int | None = None, style: str = "dim") -> str:
    """Return a horizontal rule string sized to the console width."""
    w = width or max(20, (console.width or 80) - 2)
    return f"[{style}]{icon('separator') * w}[/{style}]"


__all__ = [
    "CSPFIT_THEME",
    "VERSION",
    "Verbosity",
    "console",
    "get_verbosity",
    "hr",
    "icon",
    "set_verbosity",
]
