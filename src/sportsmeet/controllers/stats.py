"""Dashboard statistics and results listing."""

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

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from sportsmeet.constants import RECENT_RESULTS_LIMIT
from sportsmeet.models import Match, Participant


@dataclass
class DashboardStats:
    """Headline numbers for the event dashboard."""

    total_participants: int = 0
    total_matches: int = 0
    matches_pending: int = 0
    matches_finished: int = 0
    by_category: Dict[str, int] = field(default_factory=dict)

    @property
    def completion_percentage(self) -> int:
        """Finished matches as a rounded percentage of all matches."""
        if not self.total_matches:
            return 0
        return round(self.matches_finished * 100 / self.total_matches)


@dataclass
class MatchResultView:
    """A finished match with names resolved for display."""

    match_id: str
    sport: str
    category_group: str
    winner_names: List[str]
    loser_names: List[str]


def dashboard(
    participants: Iterable[Participant],
    matches: Iterable[Match],
    categories: Optional[Iterable[str]] = None,
) -> DashboardStats:
    """Summarize participants and matches.

    Args:
        participants: All participants
        matches: All matches
        categories: Categories always listed in ``by_category``, even with
            a count of zero
    """
    participants = list(participants)
    matches = list(matches)

    by_category = {name: 0 for name in categories or []}
    for participant in participants:
        by_category[participant.category] = by_category.get(participant.category, 0) + 1

    finished = sum(1 for m in matches if m.is_finished)
    return DashboardStats(
        total_participants=len(participants),
        total_matches=len(matches),
        matches_pending=len(matches) - finished,
        matches_finished=finished,
        by_category=by_category,
    )


def results(
    participants: Dict[str, Participant],
    matches: Iterable[Match],
    limit: Optional[int] = None,
) -> List[MatchResultView]:
    """Finished matches, newest first, with winner and loser names.

    Ids of participants no longer registered are shown as-is.
    """

    def _name(participant_id: str) -> str:
        participant = participants.get(participant_id)
        return participant.name if participant else participant_id

    finished = [m for m in matches if m.is_finished]
    finished.reverse()
    if limit is not None:
        finished = finished[:limit]

    return [
        MatchResultView(
            match_id=m.id,
            sport=m.sport,
            category_group=m.category_group,
            winner_names=[_name(pid) for pid in m.winner_ids],
            loser_names=[_name(pid) for pid in m.loser_ids],
        )
        for m in finished
    ]


def recent_results(
    participants: Dict[str, Participant],
    matches: Iterable[Match],
    limit: int = RECENT_RESULTS_LIMIT,
) -> List[MatchResultView]:
    return results(participants, matches, limit=limit)
