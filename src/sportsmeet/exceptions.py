"""Exceptions for use in Sports Meet"""

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


# ========== Base Application Exception ==========


class SportsMeetException(Exception):
    """Base exception for all Sports Meet errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationError(SportsMeetException):
    """Raised when input is malformed or violates a precondition.

    The operation that raised it made no changes.
    """

    pass


# ========== Lookup Exceptions ==========


class NotFoundError(SportsMeetException):
    """Raised when an operation references a record that does not exist."""

    pass


class MatchNotFoundError(NotFoundError):
    """Raised when a requested match cannot be found."""

    pass


class ParticipantNotFoundError(NotFoundError):
    """Raised when a requested participant cannot be found."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SportsMeetException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException, ValidationError):
    """Raised when configuration data is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(SportsMeetException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
