"""Eligibility resolution for match scheduling.

A participant is eligible for a sport when they registered for it and have
never appeared in a match of that sport, whatever the match status. Deleting
a match is the only way to make its players eligible again.
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

from collections import defaultdict
from typing import Dict, Iterable, List, Set

from sportsmeet.constants import CATEGORY_GROUP_SEPARATOR
from sportsmeet.models import Match, Participant


def category_group_key(category: str, gender_group: str) -> str:
    """Build the key used to partition participants, e.g. ``"Middle (6-7) - Boys"``."""
    return f"{category}{CATEGORY_GROUP_SEPARATOR}{gender_group}"


def busy_participant_ids(sport: str, matches: Iterable[Match]) -> Set[str]:
    """Ids of everyone placed in any match of ``sport``, scheduled or finished."""
    busy: Set[str] = set()
    for match in matches:
        if match.sport == sport:
            busy.update(match.player_ids)
    return busy


def eligible_pool(
    sport: str, participants: Iterable[Participant], matches: Iterable[Match]
) -> List[Participant]:
    """Participants registered for ``sport`` who were never placed in one of its matches.

    Args:
        sport: Sport name
        participants: All registered participants
        matches: All existing matches (any sport, any status)

    Returns:
        Eligible participants in their original order. Empty when ``sport``
        is empty.
    """
    if not sport:
        return []
    busy = busy_participant_ids(sport, matches)
    return [p for p in participants if p.plays(sport) and p.id not in busy]


def group_keys(pool: Iterable[Participant]) -> List[str]:
    """Sorted distinct category groups present in ``pool``.

    An empty list means nobody is eligible; it is not an error.
    """
    return sorted({category_group_key(p.category, p.gender_group) for p in pool})


def pool_for_group(pool: Iterable[Participant], group_key: str) -> List[Participant]:
    """Participants of ``pool`` whose category group is ``group_key``."""
    return [
        p for p in pool if category_group_key(p.category, p.gender_group) == group_key
    ]


def partition_by_group(pool: Iterable[Participant]) -> Dict[str, List[Participant]]:
    """Split ``pool`` into category groups, keeping participant order inside each."""
    groups: Dict[str, List[Participant]] = defaultdict(list)
    for participant in pool:
        groups[category_group_key(participant.category, participant.gender_group)].append(
            participant
        )
    return dict(groups)
