"""Shared helpers: logging setup and id generation."""

# Sports Meet
# Copyright (C) 2025  Sports Meet developers
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
import os
import uuid
from typing import Optional, Union

from sportsmeet.constants import LOG_LEVEL_ENV_VAR

PACKAGE_LOGGER_NAME = "sportsmeet"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def env_log_level() -> str:
    """Level named by the environment, or WARNING if the name is unknown."""
    level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


def _configure_package_logger() -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(env_log_level())
    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger that reports through the package handler.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    _configure_package_logger()
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Change the package log level, e.g. from a ``--verbose`` flag."""
    if isinstance(level, str):
        level = level.upper()
    _configure_package_logger().setLevel(level)


def generate_id(prefix: Optional[str] = None) -> str:
    """Generate a unique identifier, optionally prefixed (``match-3f2a...``)."""
    unique = uuid.uuid4().hex
    if prefix:
        return f"{prefix.lower()}-{unique}"
    return unique
