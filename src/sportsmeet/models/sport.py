"""SportConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from sportsmeet.constants import DEFAULT_PLAYERS_PER_MATCH, TEAM_MATCH_SIZE


@dataclass
class SportConfig:
    """Per-sport match settings.

    Attributes
    ----------
    name : str
        Sport name, referenced by matches and participant registrations.
    players_per_match : int
        Number of players placed in one match (>= 2).
    is_fixed_size : bool
        True for designated team formats whose player count cannot be edited.
    """

    name: str
    players_per_match: int = DEFAULT_PLAYERS_PER_MATCH
    is_fixed_size: bool = False

    @property
    def is_team_sport(self) -> bool:
        """Team sports crown a pair of players instead of one player."""
        return self.is_fixed_size and self.players_per_match == TEAM_MATCH_SIZE

    @property
    def winner_size(self) -> int:
        """Number of participant ids making up a winner."""
        if self.is_team_sport:
            return self.players_per_match // 2
        return 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize sport configuration to dictionary."""
        return {
            "name": self.name,
            "players_per_match": self.players_per_match,
            "is_fixed_size": self.is_fixed_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SportConfig":
        """Deserialize sport configuration from dictionary."""
        return cls(
            name=data["name"],
            players_per_match=data.get("players_per_match", DEFAULT_PLAYERS_PER_MATCH),
            is_fixed_size=data.get("is_fixed_size", False),
        )
