# ============================================================================
# HookMonitor - Logging Utilities
#
# Purpose: Logger factory and CLI log setup for the HookMonitor namespace
# Inputs: Log level, format string
# Outputs: Loggers under "HookMonitor"; one stderr handler once configured
# Dependencies: logging (stdlib), errors
# Usage: logger = get_logger(__name__)
#        setup_logging("DEBUG")   # CLI / standalone use only
#
# Changelog:
#   2026-10-02: Initial logging setup
#   2026-10-18: Configure the package logger instead of the root logger;
#               level can be changed by later calls; level names validated
# ============================================================================

import logging
import sys
from typing import Optional

from HookMonitor.errors import ConfigurationError

PACKAGE_LOGGER = "HookMonitor"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER: Optional[logging.Handler] = None


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time."""

    def __init__(self, level: int = logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """
    Send HookMonitor log records to stderr.

    The root logger is left to the host application. The first call attaches
    a handler to the "HookMonitor" logger and stops propagation; later calls
    only change the level and format.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Optional custom format string

    Raises:
        ConfigurationError: If level is not a known level name
    """
    global _HANDLER

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown log level: {level}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _HANDLER is None:
        _HANDLER = _StderrHandler()
        package_logger.addHandler(_HANDLER)
        package_logger.propagate = False

    _HANDLER.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, always inside the "HookMonitor" namespace.

    Args:
        name: Module name (typically __name__); names outside the package
            are nested under it

    Returns:
        Logger instance
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
