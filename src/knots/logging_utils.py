"""Logging setup for applications embedding the knots renderer.

knots modules log through ``logging.getLogger(__name__)`` and never install
handlers themselves. Host applications call :func:`configure_logging` when
they want renderer diagnostics without reconfiguring their own root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "knots"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """Attach handlers to the ``knots`` package logger.

    Calling this again replaces the handlers installed by a previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
    propagate : bool, default False
        Whether records should also reach the host application's root handlers.

    Returns
    -------
    logging.Logger
        The configured ``knots`` logger.

    """
    resolved_level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = propagate
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "knots %(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
