"""Process-wide console logger for the command line.

Each command builds the logger once from its ``-v`` count with
``create_logger``; anything else running in the same process picks it up
through ``get_logger``.
"""

from __future__ import annotations

from rich.console import Console

from ..infrastructure.logging.console_logger import ConsoleLogger, LogContext, LogLevel

__all__ = [
    "ConsoleLogger",
    "LogContext",
    "LogLevel",
    "create_logger",
    "get_logger",
    "set_logger",
]


_logger: ConsoleLogger | None = None


def get_logger() -> ConsoleLogger:
    """Return the active logger, falling back to a quiet default console."""
    global _logger
    if _logger is None:
        _logger = ConsoleLogger()
    return _logger


def set_logger(logger: ConsoleLogger) -> None:
    global _logger
    _logger = logger


def create_logger(console: Console | None = None, verbosity: int = 0) -> ConsoleLogger:
    """Build a logger for ``console`` at ``verbosity`` and make it the active one."""
    logger = ConsoleLogger(console, verbosity)
    set_logger(logger)
    return logger
