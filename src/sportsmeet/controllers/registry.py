"""Participant registration and lookup.

This module validates registration input, derives each participant's
category from their grade and answers the participant filter queries.
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

from typing import Any, Dict, Iterable, List, Optional

from sportsmeet.controllers.classifier import classify
from sportsmeet.exceptions import ParticipantNotFoundError, ValidationError
from sportsmeet.models import EventConfig, Match, Participant
from sportsmeet.utils import generate_id, setup_logger
from sportsmeet.utils.validation import (
    validate_gender_group,
    validate_grade,
    validate_name,
    validate_sports_selection,
)

logger = setup_logger(__name__)


class ParticipantRegistry:
    """Registers, edits and removes participants.

    Removing a participant also removes every match they appear in.
    """

    def __init__(
        self,
        participants: Dict[str, Participant],
        matches: List[Match],
        config: EventConfig,
    ):
        self.participants = participants
        self.matches = matches
        self.config = config

    def get(self, participant_id: str) -> Participant:
        """Look up a participant.

        Raises:
            ParticipantNotFoundError: If the id is unknown
        """
        participant = self.participants.get(participant_id)
        if participant is None:
            raise ParticipantNotFoundError(f"Participant not found: {participant_id}")
        return participant

    def register(
        self,
        name: str,
        grade: Any,
        gender_group: str,
        sports: Iterable[str],
        participant_id: Optional[str] = None,
    ) -> Participant:
        """Register a new participant.

        Args:
            name: Full name
            grade: Class/grade (int or integer string)
            gender_group: One of the configured gender groups
            sports: Between one and the configured maximum of sports
            participant_id: Explicit id, e.g. when importing; generated if omitted

        Returns:
            The new Participant

        Raises:
            ValidationError: If any field is invalid or the id is taken
        """
        if participant_id is not None and participant_id in self.participants:
            raise ValidationError(f"Participant id already exists: {participant_id}")

        clean_name = validate_name(name).value_or_raise()
        clean_grade = validate_grade(grade).value_or_raise()
        clean_gender = validate_gender_group(
            gender_group, self.config.gender_groups
        ).value_or_raise()
        clean_sports = validate_sports_selection(
            sports, self.config.sport_names, self.config.max_sports_per_participant
        ).value_or_raise()

        participant = Participant(
            _id=participant_id or generate_id("participant"),
            name=clean_name,
            grade=clean_grade,
            gender_group=clean_gender,
            category=classify(clean_grade, self.config.category_bands),
            sports=clean_sports,
        )
        self.participants[participant.id] = participant
        logger.info(
            f"Registered {participant.name} ({participant.id}) in "
            f"{participant.category} for {', '.join(participant.sports)}"
        )
        return participant

    def update(
        self,
        participant_id: str,
        name: Optional[str] = None,
        grade: Any = None,
        gender_group: Optional[str] = None,
        sports: Optional[Iterable[str]] = None,
    ) -> Participant:
        """Edit a participant; omitted fields keep their value.

        The category is re-derived when the grade changes. All fields are
        validated before any is applied.
        """
        participant = self.get(participant_id)

        clean_name = (
            participant.name if name is None else validate_name(name).value_or_raise()
        )
        clean_grade = (
            participant.grade
            if grade is None
            else validate_grade(grade).value_or_raise()
        )
        clean_gender = (
            participant.gender_group
            if gender_group is None
            else validate_gender_group(
                gender_group, self.config.gender_groups
            ).value_or_raise()
        )
        clean_sports = (
            participant.sports
            if sports is None
            else validate_sports_selection(
                sports, self.config.sport_names, self.config.max_sports_per_participant
            ).value_or_raise()
        )

        participant.name = clean_name
        participant.grade = clean_grade
        participant.gender_group = clean_gender
        participant.category = classify(clean_grade, self.config.category_bands)
        participant.sports = list(clean_sports)
        logger.info(f"Updated participant {participant.name} ({participant.id})")
        return participant

    def remove(self, participant_id: str) -> Participant:
        """Remove a participant together with every match they appear in."""
        participant = self.get(participant_id)
        kept = [m for m in self.matches if not m.involves(participant_id)]
        removed_matches = len(self.matches) - len(kept)
        # Mutate in place; the list is shared with the other controllers
        self.matches[:] = kept
        del self.participants[participant_id]
        logger.info(
            f"Removed participant {participant.name} ({participant_id}) "
            f"and {removed_matches} match(es)"
        )
        return participant

    def filter(
        self,
        category: Optional[str] = None,
        gender_group: Optional[str] = None,
        grade: Optional[int] = None,
        sport: Optional[str] = None,
    ) -> List[Participant]:
        """Participants matching every given criterion (``None`` matches all)."""
        return [
            p
            for p in self.participants.values()
            if (category is None or p.category == category)
            and (gender_group is None or p.gender_group == gender_group)
            and (grade is None or p.grade == grade)
            and (sport is None or p.plays(sport))
        ]
