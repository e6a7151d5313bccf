"""Validation utilities for Sports Meet.

This module provides reusable validation functions with consistent error handling
for registration input and sport configuration.
"""

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

from typing import Any, Iterable, Optional

from sportsmeet.constants import MAX_SPORTS_PER_PARTICIPANT, MIN_PLAYERS_PER_MATCH
from sportsmeet.exceptions import ValidationError


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"

    def value_or_raise(self) -> Any:
        """Return the sanitized value, or raise ValidationError if invalid."""
        if not self.is_valid:
            raise ValidationError(self.error_message)
        return self.sanitized_value


# ========== Name Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a participant name (required, surrounding whitespace removed)."""
    if not name or not name.strip():
        return ValidationResult(is_valid=False, error_message="Name is required")
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


# ========== Grade Validation ==========


def validate_grade(grade: Any) -> ValidationResult:
    """Validate a grade (class) value.

    Accepts integers and integer strings such as ``"7"``. Grades outside the
    configured category bands are still valid; they classify as Unknown.

    Example:
        >>> validate_grade("7").sanitized_value
        7
    """
    if isinstance(grade, bool):
        return ValidationResult(
            is_valid=False, error_message=f"Invalid grade: {grade!r}"
        )
    if isinstance(grade, int):
        return ValidationResult(is_valid=True, sanitized_value=grade)
    if isinstance(grade, str) and grade.strip():
        try:
            return ValidationResult(is_valid=True, sanitized_value=int(grade.strip()))
        except ValueError:
            pass
    return ValidationResult(
        is_valid=False, error_message=f"Grade must be a whole number, got {grade!r}"
    )


# ========== Gender Group Validation ==========


def validate_gender_group(
    gender_group: Optional[str], allowed: Iterable[str]
) -> ValidationResult:
    """Validate that a gender group is one of the configured values."""
    allowed = list(allowed)
    if gender_group in allowed:
        return ValidationResult(is_valid=True, sanitized_value=gender_group)
    return ValidationResult(
        is_valid=False,
        error_message=(
            f"Invalid gender group {gender_group!r}; expected one of "
            f"{', '.join(allowed)}"
        ),
    )


# ========== Sports Selection Validation ==========


def validate_sports_selection(
    sports: Optional[Iterable[str]],
    known_sports: Iterable[str],
    max_sports: int = MAX_SPORTS_PER_PARTICIPANT,
) -> ValidationResult:
    """Validate the sports a participant registers for.

    Rules:
    - at least one sport
    - no more than ``max_sports``
    - no duplicates
    - every sport must be configured for the event

    Returns:
        ValidationResult whose sanitized value is the list of sports in the
        order given
    """
    selection = list(sports or [])
    if not selection:
        return ValidationResult(
            is_valid=False, error_message="Select at least one sport"
        )
    if len(selection) > max_sports:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"A participant may register for at most {max_sports} sports, "
                f"got {len(selection)}"
            ),
        )
    if len(set(selection)) != len(selection):
        return ValidationResult(
            is_valid=False, error_message="Sports selection contains duplicates"
        )

    known = set(known_sports)
    unknown = [s for s in selection if s not in known]
    if unknown:
        return ValidationResult(
            is_valid=False, error_message=f"Unknown sport(s): {', '.join(unknown)}"
        )
    return ValidationResult(is_valid=True, sanitized_value=selection)


# ========== Sport Configuration Validation ==========


def validate_players_per_match(players_per_match: Any) -> ValidationResult:
    """Validate the number of players taking part in one match."""
    if (
        isinstance(players_per_match, bool)
        or not isinstance(players_per_match, int)
        or players_per_match < MIN_PLAYERS_PER_MATCH
    ):
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Players per match must be an integer >= {MIN_PLAYERS_PER_MATCH}, "
                f"got {players_per_match!r}"
            ),
        )
    return ValidationResult(is_valid=True, sanitized_value=players_per_match)
