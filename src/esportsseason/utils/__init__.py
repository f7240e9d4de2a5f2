"""Shared utilities for Esports Season."""

# Esports Season
# Copyright (C) 2025  Esports Season developers
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

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "esportsseason"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a module logger under the package root logger.

    The root package logger gets a single stream handler the first time this
    is called; module loggers propagate to it.

    Args:
        name: Usually __name__ of the calling module
        level: Level applied to the package root logger on first setup

    Returns:
        The configured logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(level)

    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the level of every Esports Season logger at once."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
