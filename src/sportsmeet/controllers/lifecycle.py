"""Match lifecycle: winner declaration and match removal.

A match starts ``scheduled`` and becomes ``finished`` once a winner is
declared. There is no way back to ``scheduled``; deleting a match removes it
entirely.
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

from typing import Iterable, List, Tuple, Union

from sportsmeet.constants import STATUS_FINISHED
from sportsmeet.exceptions import MatchNotFoundError, ValidationError
from sportsmeet.models import EventConfig, Match, SportConfig
from sportsmeet.type_hints import Winner
from sportsmeet.utils import setup_logger

logger = setup_logger(__name__)

WinnerSelection = Union[str, Iterable[str]]


def positional_teams(player_ids: Tuple[str, ...], team_size: int) -> List[Tuple[str, ...]]:
    """Split players into consecutive teams: ``(p0, p1), (p2, p3), ...``."""
    return [
        tuple(player_ids[i : i + team_size])
        for i in range(0, len(player_ids), team_size)
    ]


class MatchLifecycleController:
    """Owns match state transitions.

    This class is responsible for:
    - Validating winner selections (single player or positional team)
    - Moving matches from scheduled to finished
    - Removing matches on operator request
    """

    def __init__(self, matches: List[Match], config: EventConfig):
        """Initialize the controller.

        Args:
            matches: Match store shared with the scheduler
            config: Event configuration holding the sports catalog
        """
        self.matches = matches
        self.config = config

    def get_match(self, match_id: str) -> Match:
        """Look up a match by id.

        Raises:
            MatchNotFoundError: If no match has this id
        """
        for match in self.matches:
            if match.id == match_id:
                return match
        raise MatchNotFoundError(f"Match not found: {match_id}")

    def winner_candidates(self, match: Match) -> List[Winner]:
        """All valid winner selections for ``match``.

        Team sports yield the positional teams as tuples; other sports yield
        each player id.
        """
        sport_config = self._sport_for(match)
        if sport_config.is_team_sport:
            return positional_teams(match.player_ids, sport_config.winner_size)
        return list(match.player_ids)

    def declare_winner(self, match_id: str, winner_selection: WinnerSelection) -> Match:
        """Record the winner and finish the match.

        Declaring again on a finished match replaces the previous winner.

        Args:
            match_id: Match to finish
            winner_selection: A participant id, or for team sports the ids of
                one positional team in any order

        Returns:
            The updated Match

        Raises:
            MatchNotFoundError: If the match does not exist
            ValidationError: If the selection is not a valid winner; the
                match is left unchanged
        """
        match = self.get_match(match_id)
        winner = self._resolve_winner(match, winner_selection)

        if match.is_finished:
            logger.warning(
                f"Match {match.id} is already finished, "
                f"winner {match.winner!r} will be overwritten"
            )

        match.winner = winner
        match.status = STATUS_FINISHED
        logger.info(f"Match {match.id} ({match.sport}) won by {winner!r}")
        return match

    def delete_match(self, match_id: str) -> Match:
        """Remove a match regardless of its status.

        Its players become eligible for the sport again.

        Returns:
            The removed Match

        Raises:
            MatchNotFoundError: If the match does not exist
        """
        match = self.get_match(match_id)
        self.matches.remove(match)
        logger.info(f"Deleted {match.status} {match.sport} match {match.id}")
        return match

    def _resolve_winner(self, match: Match, selection: WinnerSelection) -> Winner:
        sport_config = self._sport_for(match)

        if isinstance(selection, str):
            chosen = [selection]
        else:
            chosen = list(selection)

        if sport_config.is_team_sport:
            teams = positional_teams(match.player_ids, sport_config.winner_size)
            for team in teams:
                if len(chosen) == len(team) and set(chosen) == set(team):
                    return team
            raise ValidationError(
                f"Winner of a {match.sport} match must be one of the teams "
                f"{[list(t) for t in teams]}, got {chosen}"
            )

        if len(chosen) != 1 or chosen[0] not in match.player_ids:
            raise ValidationError(
                f"Winner must be one player of match {match.id}, got {chosen}"
            )
        return chosen[0]

    def _sport_for(self, match: Match) -> SportConfig:
        sport_config = self.config.get_sport(match.sport)
        if sport_config is None:
            # Sport removed from the catalog after scheduling: infer from the match
            return SportConfig(
                name=match.sport, players_per_match=len(match.player_ids)
            )
        return sport_config
