"""Logging configuration for CSPFit."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from cspfit.ui.console import VERSION, console

LOGGER_NAME = "cspfit"


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
    log_format: str = "text",
) -> logging.Logger:
    """Configure the ``cspfit`` logger.

    A file handler is attached when ``log_file`` is given, a Rich console
    handler when ``verbose`` is set.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else level)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)
        if log_format == "json" or log_file.suffix == ".json":
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)-5s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        console_handler.setLevel(logging.DEBUG)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.info("━" * 60)
    logger.info("CSPFit v%s - Session Started", VERSION)
    logger.info("━" * 60)
    logger.info("Command: %s", " ".join(sys.argv))
    logger.info("Working directory: %s", Path.cwd())
    logger.info("Python: %s | Platform: %s", sys.version.split()[0], sys.platform)
    return logger


def log_dict(data: dict[str, object], indent: str = "  ") -> None:
    """Log a dictionary as key-value pairs."""
    logger = logging.getLogger(LOGGER_NAME)
    for key, value in data.items():
        logger.info("%s- %s: %s", indent, key, value)


def close_logging() -> None:
    """Close logging and finalize log file."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.info("━" * 60)
    logger.info("CSPFit Session Completed")
    logger.info("━" * 60)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


__all__ = ["JSONFormatter", "close_logging", "log_dict", "setup_logging"]
