"""
Logging setup for riscfetch.

Modules log through standard module loggers (logging.getLogger(__name__)).
The CLI calls configure_logging() once so that detection misses show up
on stderr with --verbose while stdout stays reserved for the report.

Usage:
    from riscfetch.logging import LogConfig, configure_logging

    configure_logging(LogConfig(level=logging.DEBUG))
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO


ROOT_LOGGER_NAME = "riscfetch"


@dataclass
class LogConfig:
    """Configuration for console logging."""

    # Log level for console output
    level: int = logging.WARNING

    # Whether to include timestamps in console output
    timestamps: bool = False

    # Stream for log records (stdout carries the report itself)
    stream: Optional[TextIO] = None


def configure_logging(config: Optional[LogConfig] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling this again replaces the previous handler, so repeated CLI
    invocations in one process do not duplicate output.
    """
    config = config or LogConfig()
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, '_riscfetch_console', False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(config.stream or sys.stderr)
    fmt = "%(levelname)s: %(message)s"
    if config.timestamps:
        fmt = "[%(asctime)s] " + fmt
    handler.setFormatter(logging.Formatter(fmt))
    handler._riscfetch_console = True

    logger.addHandler(handler)
    logger.setLevel(config.level)
    return logger
