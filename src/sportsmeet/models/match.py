"""Match data class."""

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
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Optional, Tuple

from dateutil import parser as date_parser

from sportsmeet.constants import STATUS_FINISHED, STATUS_SCHEDULED
from sportsmeet.type_hints import MatchStatus, Winner


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Match:
    """A single match between participants of one sport and category group.

    Attributes
    ----------
    id : str
        Unique match identifier.
    sport : str
        Name of the sport (references a SportConfig).
    category_group : str
        Category and gender key, e.g. ``"Juniors (4-5) - Girls"``.
    player_ids : tuple of str
        Ordered participant ids. For team sports consecutive pairs form teams.
    status : str
        ``"scheduled"`` until a winner is declared, then ``"finished"``.
    winner : str, tuple of str or None
        Winning participant id, or the winning team's ids for team sports.
    created_at : datetime
        Creation time (UTC).
    """

    _id: str
    sport: str
    category_group: str
    player_ids: Tuple[str, ...]
    status: MatchStatus = STATUS_SCHEDULED
    winner: Optional[Winner] = None
    created_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        self.player_ids = tuple(self.player_ids)
        if isinstance(self.winner, list):
            self.winner = tuple(self.winner)

    @property
    def id(self) -> str:
        """Immutable match identifier."""
        return self._id

    @property
    def is_finished(self) -> bool:
        return self.status == STATUS_FINISHED

    @property
    def is_scheduled(self) -> bool:
        return self.status == STATUS_SCHEDULED

    @property
    def player_set(self) -> FrozenSet[str]:
        """Order-independent view of the players."""
        return frozenset(self.player_ids)

    @property
    def winner_ids(self) -> Tuple[str, ...]:
        """Winner as a tuple of ids (empty while scheduled)."""
        if self.winner is None:
            return ()
        if isinstance(self.winner, str):
            return (self.winner,)
        return tuple(self.winner)

    @property
    def loser_ids(self) -> Tuple[str, ...]:
        """Players not in the winner, in match order (empty while scheduled)."""
        if self.winner is None:
            return ()
        winners = set(self.winner_ids)
        return tuple(pid for pid in self.player_ids if pid not in winners)

    def involves(self, participant_id: str) -> bool:
        """Is the participant one of the players in this match?"""
        return participant_id in self.player_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        winner = self.winner
        if isinstance(winner, tuple):
            winner = list(winner)
        return {
            "id": self.id,
            "sport": self.sport,
            "category_group": self.category_group,
            "player_ids": list(self.player_ids),
            "status": self.status,
            "winner": winner,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        created_at = data.get("created_at")
        winner = data.get("winner")
        return cls(
            _id=str(data["id"]),
            sport=data["sport"],
            category_group=data.get("category_group", ""),
            player_ids=tuple(data.get("player_ids", [])),
            status=data.get("status", STATUS_SCHEDULED),
            winner=tuple(winner) if isinstance(winner, list) else winner,
            created_at=(
                date_parser.isoparse(created_at) if created_at else _utc_now()
            ),
        )
