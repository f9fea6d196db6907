"""Centralized logging utilities for md2adoc entry points."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from md2adoc.exceptions import ValidationError

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(log_level: int | str) -> int:
    """Translate a level name or number into a numeric logging level.

    Raises
    ------
    ValidationError
        If a level name is not one of the standard logging level names.

    """
    if isinstance(log_level, int):
        return log_level
    name = str(log_level).strip().upper()
    if name not in LOG_LEVEL_NAMES:
        raise ValidationError(
            f"Unknown log level: {log_level!r} (expected one of {', '.join(LOG_LEVEL_NAMES)})",
            parameter_name="log_level",
            parameter_value=log_level,
        )
    return getattr(logging, name)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the command-line converter.

    Diagnostics always go to stderr because the converted document may be
    written to stdout.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter("md2adoc: %(levelname)s: %(message)s")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if log_file and len(handlers) > 1:
        root_logger.debug("Logging to file: %s", log_file)

    return root_logger
