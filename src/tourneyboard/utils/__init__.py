"""Shared utilities for Tourney Board."""

# Tourney Board
# Copyright (C) 2025  Tourney Board developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER_NAME = "tourneyboard"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return the module logger for ``name``.

    Handlers are only attached to the package logger (see
    :func:`configure_logging`), so module loggers just propagate.

    Args:
        name: Logger name, normally ``__name__``
        level: Optional level override for this logger

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(
    level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.

    Args:
        level: Logging level for the package
        stream: Output stream, stderr by default

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        if getattr(handler, "_tourneyboard_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._tourneyboard_handler = True
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


__all__ = ["setup_logger", "configure_logging", "PACKAGE_LOGGER_NAME"]
