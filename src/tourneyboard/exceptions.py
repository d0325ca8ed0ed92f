"""Exceptions for use in Tourney Board"""

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

from typing import Optional


# ========== Base Application Exception ==========


class TourneyBoardException(Exception):
    """Base exception for all Tourney Board errors.

    All custom exceptions in the package should inherit from this class.
    This enables catching all package-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(TourneyBoardException):
    """Base exception for malformed or inconsistent input."""

    pass


class DrawValidationException(ValidationException):
    """Raised when a group draw or a manual group assignment is invalid.

    Attributes:
        expected: Expected count, when the error is a count mismatch
        actual: Actual count, when the error is a count mismatch
    """

    def __init__(
        self,
        message: str,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class UnknownParticipantException(DrawValidationException):
    """Raised when an assignment names a participant that is not on the roster."""

    def __init__(self, participant_id: str):
        super().__init__(f"Invalid participant ID: {participant_id}")
        self.participant_id = participant_id


class GroupIndexException(DrawValidationException):
    """Raised when an assignment targets a group index that does not exist."""

    def __init__(self, participant_id: str, group_index: object, group_count: int):
        super().__init__(
            f"Invalid group index for {participant_id}: {group_index!r} "
            f"(expected 0 to {group_count - 1})"
        )
        self.participant_id = participant_id
        self.group_index = group_index


class GroupSizeMismatchException(DrawValidationException):
    """Raised when a group receives a different number of participants than configured."""

    def __init__(self, group_index: int, group_name: str, expected: int, actual: int):
        super().__init__(
            f"{group_name} should have {expected} participants, but has {actual}",
            expected=expected,
            actual=actual,
        )
        self.group_index = group_index


class MissingParticipantException(DrawValidationException):
    """Raised when a roster participant was left out of a manual assignment."""

    def __init__(self, missing_ids):
        missing = sorted(missing_ids)
        super().__init__(
            "All participants must be assigned to a group; missing: "
            + ", ".join(missing)
        )
        self.missing_ids = missing


class DuplicateParticipantException(DrawValidationException):
    """Raised when the roster lists the same participant more than once."""

    def __init__(self, duplicate_ids):
        duplicates = sorted(duplicate_ids)
        super().__init__("Duplicate participant IDs: " + ", ".join(duplicates))
        self.duplicate_ids = duplicates


class InvalidConfigurationException(ValidationException):
    """Raised when tournament configuration data is invalid."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(TourneyBoardException):
    """Base exception for tournament-related errors."""

    pass


class InvalidStateException(TournamentException):
    """Raised when the tournament is in an invalid state for the requested operation."""

    pass


# ========== Snapshot Exceptions ==========


class SnapshotException(TourneyBoardException):
    """Raised when a tournament snapshot file cannot be loaded."""

    pass
