# MIT License (see LICENSE)
"""
Logging setup for the softshape package.

Library modules only call logging.getLogger(__name__) and never configure
anything; the package installs a NullHandler so nothing is printed unless
an application asks for it. Scripts, examples and benchmarks call
setup_logging() once to route the 'softshape' logger to a stream and,
optionally, a file.

The default level comes from the SOFTSHAPE_LOG_LEVEL environment variable
(a level name such as "DEBUG"), falling back to WARNING. At DEBUG the
package reports body construction, reference shape swaps, world membership
and pins; per-frame work is never logged.
"""
from __future__ import annotations
import logging
import os
import sys
from typing import TextIO

LOGGER_NAME = "softshape"
ENV_LEVEL = "SOFTSHAPE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def default_level() -> int:
    """Level named by SOFTSHAPE_LOG_LEVEL, or WARNING if unset or unknown."""
    level = logging.getLevelName(os.environ.get(ENV_LEVEL, "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    level: int | None = None,
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Route package logs to a stream and optionally a file.

    Calling it again replaces the previous handlers, so a script may
    re-run it to change the level without doubling every line.

    Args:
        level: Logging level; defaults to default_level().
        log_file: Optional path, overwritten on each call.
        stream: Console stream, sys.stdout if omitted.

    Returns:
        The configured 'softshape' logger.
    """
    if level is None:
        level = default_level()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(stream or sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return logger
