"""Validation utilities for Tourney Board.

This module provides reusable validation functions with consistent error handling.
"""

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

from typing import Optional, Sequence

from tourneyboard.exceptions import (
    DrawValidationException,
    InvalidConfigurationException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        expected: Expected count for count checks
        actual: Actual count for count checks
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.expected = expected
        self.actual = actual

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Group Size Validation ==========


def validate_group_sizes(
    participant_count: int, group_sizes: Sequence[int]
) -> ValidationResult:
    """Check that the configured group sizes add up to the participant count.

    Args:
        participant_count: Number of participants to be drawn
        group_sizes: Configured size of each group, in group order

    Returns:
        ValidationResult with validation status

    Example:
        >>> bool(validate_group_sizes(11, [6, 5]))
        True
    """
    if participant_count <= 0:
        return ValidationResult(
            is_valid=False,
            error_message="No participants provided",
            expected=sum(group_sizes),
            actual=participant_count,
        )

    if not group_sizes:
        return ValidationResult(
            is_valid=False,
            error_message="No group sizes provided",
            expected=0,
            actual=participant_count,
        )

    total = sum(group_sizes)
    if total != participant_count:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Participant count ({participant_count}) does not match "
                f"sum of group sizes ({total})"
            ),
            expected=total,
            actual=participant_count,
        )

    return ValidationResult(is_valid=True, expected=total, actual=participant_count)


def validate_group_sizes_strict(
    participant_count: int, group_sizes: Sequence[int]
) -> None:
    """Validate group sizes and raise exception if invalid.

    Each size must be a positive integer before the totals are compared.

    Raises:
        DrawValidationException: If a size is malformed or the sizes do not
            cover the participants
    """
    if group_sizes:
        shape = validate_group_size_list(group_sizes)
        if not shape.is_valid:
            raise DrawValidationException(shape.error_message)

    result = validate_group_sizes(participant_count, group_sizes)
    if not result.is_valid:
        raise DrawValidationException(
            result.error_message, expected=result.expected, actual=result.actual
        )


# ========== Configuration Validation ==========


def validate_group_size_list(group_sizes: Sequence[int]) -> ValidationResult:
    """Validate the shape of a configured group size list.

    Every entry must be a positive integer and the list must not be empty.
    """
    if not group_sizes:
        return ValidationResult(
            is_valid=False, error_message="At least one group size is required"
        )

    for index, size in enumerate(group_sizes):
        # bool is an int subclass but never a meaningful size
        if isinstance(size, bool) or not isinstance(size, int):
            return ValidationResult(
                is_valid=False,
                error_message=f"Group size at position {index} must be an integer: {size!r}",
            )
        if size < 1:
            return ValidationResult(
                is_valid=False,
                error_message=f"Group size at position {index} must be at least 1: {size}",
            )

    return ValidationResult(is_valid=True)


def validate_point_values(
    win_points: int, loss_points: int, draw_points: int
) -> ValidationResult:
    """Validate point values awarded for a win, a loss and a draw."""
    for label, value in (
        ("win", win_points),
        ("loss", loss_points),
        ("draw", draw_points),
    ):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Points for a {label} must be a number: {value!r}",
            )
    return ValidationResult(is_valid=True)


def validate_configuration_strict(
    group_sizes: Sequence[int], win_points: int, loss_points: int, draw_points: int
) -> None:
    """Validate configuration values and raise exception if invalid.

    Raises:
        InvalidConfigurationException: If any value is invalid
    """
    for result in (
        validate_group_size_list(group_sizes),
        validate_point_values(win_points, loss_points, draw_points),
    ):
        if not result.is_valid:
            raise InvalidConfigurationException(result.error_message)
