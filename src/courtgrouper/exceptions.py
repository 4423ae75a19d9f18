"""Exceptions for use in Court Grouper"""

# Court Grouper
# Copyright (C) 2025  Court Grouper developers
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

from courtgrouper.constants import MAX_ROSTER_SIZE, MIN_ROSTER_SIZE

# ========== Base Application Exception ==========


class CourtGrouperException(Exception):
    """Base exception for all Court Grouper errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Grouping Exceptions ==========


class GroupingException(CourtGrouperException):
    """Base exception for round generation errors."""

    pass


class UnsupportedRosterSizeException(GroupingException):
    """Raised when the active roster cannot be spread over two courts.

    Recoverable: the caller should disable generation until the roster
    holds between ``MIN_ROSTER_SIZE`` and ``MAX_ROSTER_SIZE`` participants.

    Attributes
    ----------
    size : int
        The rejected roster size.
    """

    def __init__(self, size: int):
        self.size = size
        super().__init__(
            f"Unsupported player count: {size}. "
            f"Must be {MIN_ROSTER_SIZE}-{MAX_ROSTER_SIZE}."
        )


class GenerationFailedException(GroupingException):
    """Raised when enumeration yields no candidate for an accepted roster size.

    This means the court format and the enumerator disagree; it is an
    internal error and must not be retried.
    """

    pass


class InvalidRoundException(GroupingException):
    """Raised when a side, court or round violates its shape."""

    pass


# ========== Roster Exceptions ==========


class RosterException(CourtGrouperException):
    """Base exception for roster errors."""

    pass


class DuplicateParticipantException(RosterException):
    """Raised when attempting to add a participant whose id already exists."""

    pass


class ParticipantNotFoundException(RosterException):
    """Raised when a requested participant cannot be found."""

    pass


class InvalidParticipantDataException(RosterException):
    """Raised when participant data is invalid or incomplete."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(CourtGrouperException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtGrouperException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
