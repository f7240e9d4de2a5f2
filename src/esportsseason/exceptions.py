"""Exceptions for use in Esports Season"""

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


# ========== Base Application Exception ==========


class EsportsSeasonException(Exception):
    """Base exception for all Esports Season errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Match Exceptions ==========


class MatchException(EsportsSeasonException):
    """Base exception for match construction and scoring errors."""

    pass


class InvalidMatchShapeException(MatchException):
    """Raised when a match does not have exactly 3 titles and 3 round counts."""

    pass


class InvalidRoundException(MatchException):
    """Raised when a round count is outside the allowed range."""

    pass


class DuplicateTitleException(MatchException):
    """Raised when two titles in one match share an id."""

    pass


class NilCompetitorException(MatchException):
    """Raised when scoring a match without a competitor."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(EsportsSeasonException):
    """Base exception for validation errors."""

    pass


class InvalidGameTitleException(ValidationException):
    """Raised when game title data is invalid or incomplete."""

    pass


class InvalidCompetitorException(ValidationException):
    """Raised when competitor data is invalid or incomplete."""

    pass


# ========== Simulation Exceptions ==========


class SimulationException(EsportsSeasonException):
    """Base exception for season simulation errors."""

    pass


class InsufficientDataException(SimulationException):
    """Raised when the roster is empty or fewer than 3 titles are available."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(EsportsSeasonException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(EsportsSeasonException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
