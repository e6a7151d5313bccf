"""Participation status of a participant in a sport."""

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

from typing import Dict, Iterable

from sportsmeet.constants import (
    PARTICIPATION_NOT_PLAYED,
    PARTICIPATION_PLAYED,
    PARTICIPATION_PLAYING,
)
from sportsmeet.models import Match, Participant
from sportsmeet.type_hints import ParticipationStatus


def status_of(
    participant_id: str, sport: str, matches: Iterable[Match]
) -> ParticipationStatus:
    """Return ``"played"``, ``"playing"`` or ``"not-played"``.

    A finished match outranks a scheduled one.
    """
    playing = False
    for match in matches:
        if match.sport != sport or not match.involves(participant_id):
            continue
        if match.is_finished:
            return PARTICIPATION_PLAYED
        playing = True
    return PARTICIPATION_PLAYING if playing else PARTICIPATION_NOT_PLAYED


def sport_statuses(
    participant: Participant, matches: Iterable[Match]
) -> Dict[str, ParticipationStatus]:
    """Status for each sport the participant registered for."""
    matches = list(matches)
    return {sport: status_of(participant.id, sport, matches) for sport in participant.sports}
