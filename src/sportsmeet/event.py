"""Main SportsEvent class - orchestrates all event operations.

This is the primary interface for the sports meet, owning the participant and
match collections and coordinating the specialized controllers that read and
mutate them.
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

from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional

from sportsmeet.controllers import eligibility
from sportsmeet.controllers.lifecycle import MatchLifecycleController, WinnerSelection
from sportsmeet.controllers.registry import ParticipantRegistry
from sportsmeet.controllers.scheduler import AutoScheduleResult, MatchScheduler
from sportsmeet.controllers.stats import DashboardStats, MatchResultView
from sportsmeet.controllers import stats
from sportsmeet.controllers.status import sport_statuses, status_of
from sportsmeet.exceptions import ValidationError
from sportsmeet.models import EventConfig, Match, Participant, SportConfig
from sportsmeet.type_hints import ParticipationStatus, ShuffleFunction, Winner
from sportsmeet.utils import setup_logger
from sportsmeet.utils.validation import validate_players_per_match

logger = setup_logger(__name__)


class SportsEvent:
    """Main sports meet management class.

    This class coordinates all event operations through specialized controllers:
    - ParticipantRegistry: registration, edits and filters
    - MatchScheduler: manual and automatic match creation
    - MatchLifecycleController: winner declaration and match removal

    The event owns the participant and match collections and injects the
    same objects into every controller. Queries are recomputed from them on
    every call.
    """

    def __init__(
        self,
        config: Optional[EventConfig] = None,
        participants: Optional[Iterable[Participant]] = None,
        matches: Optional[Iterable[Match]] = None,
        shuffle: Optional[ShuffleFunction] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize a sports event.

        Args
        ----
        config: Event configuration (defaults to the standard sports catalog)
        participants: Already registered participants
        matches: Existing matches
        shuffle: Permutation used by auto-scheduling
        clock: Source of match creation times
        """
        self.config = config or EventConfig()

        self.participants: Dict[str, Participant] = {
            p.id: p for p in participants or []
        }
        self.matches: List[Match] = list(matches or [])

        # Specialized controllers
        self.registry = ParticipantRegistry(self.participants, self.matches, self.config)
        self.scheduler = MatchScheduler(
            self.participants, self.matches, self.config, shuffle=shuffle, clock=clock
        )
        self.lifecycle = MatchLifecycleController(self.matches, self.config)

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get event name."""
        return self.config.name

    @property
    def sports(self) -> List[SportConfig]:
        return self.config.sports

    # ========== Participant Management ==========

    def register_participant(
        self, name: str, grade: Any, gender_group: str, sports: Iterable[str], **kwargs
    ) -> Participant:
        return self.registry.register(name, grade, gender_group, sports, **kwargs)

    def update_participant(self, participant_id: str, **changes) -> Participant:
        return self.registry.update(participant_id, **changes)

    def remove_participant(self, participant_id: str) -> Participant:
        return self.registry.remove(participant_id)

    def get_participant(self, participant_id: str) -> Participant:
        return self.registry.get(participant_id)

    def filter_participants(self, **criteria) -> List[Participant]:
        return self.registry.filter(**criteria)

    # ========== Sport Configuration ==========

    def get_sport(self, name: str) -> SportConfig:
        """Look up a configured sport.

        Raises:
            ValidationError: If the sport is not configured
        """
        sport = self.config.get_sport(name)
        if sport is None:
            raise ValidationError(f"Unknown sport: {name}")
        return sport

    def set_players_per_match(self, sport_name: str, players_per_match: int) -> SportConfig:
        """Change the match size of an editable sport.

        Existing matches keep their players; the new size applies to matches
        created afterwards.

        Raises:
            ValidationError: If the sport is fixed-size or the size is invalid
        """
        sport = self.get_sport(sport_name)
        if sport.is_fixed_size:
            raise ValidationError(f"{sport.name} has a fixed number of players")
        sport.players_per_match = validate_players_per_match(
            players_per_match
        ).value_or_raise()
        logger.info(f"{sport.name} now has {sport.players_per_match} players per match")
        return sport

    # ========== Eligibility Queries ==========

    def eligible_pool(self, sport: str) -> List[Participant]:
        return eligibility.eligible_pool(sport, self.participants.values(), self.matches)

    def group_keys(self, sport: str) -> List[str]:
        return eligibility.group_keys(self.eligible_pool(sport))

    def pool_for_group(self, sport: str, group_key: str) -> List[Participant]:
        return eligibility.pool_for_group(self.eligible_pool(sport), group_key)

    # ========== Scheduling ==========

    def create_match(
        self, sport: str, category_group: str, player_ids: Iterable[str]
    ) -> Match:
        return self.scheduler.create_match(sport, category_group, list(player_ids))

    def auto_schedule(self, sport: str) -> AutoScheduleResult:
        return self.scheduler.auto_schedule(sport)

    # ========== Match Lifecycle ==========

    def get_match(self, match_id: str) -> Match:
        return self.lifecycle.get_match(match_id)

    def declare_winner(self, match_id: str, winner_selection: WinnerSelection) -> Match:
        return self.lifecycle.declare_winner(match_id, winner_selection)

    def delete_match(self, match_id: str) -> Match:
        return self.lifecycle.delete_match(match_id)

    def winner_candidates(self, match_id: str) -> List[Winner]:
        return self.lifecycle.winner_candidates(self.get_match(match_id))

    def get_matches(
        self, sport: Optional[str] = None, status: Optional[str] = None
    ) -> List[Match]:
        """Matches, optionally narrowed to a sport and/or status."""
        return [
            m
            for m in self.matches
            if (sport is None or m.sport == sport)
            and (status is None or m.status == status)
        ]

    # ========== Status & Statistics ==========

    def status_of(self, participant_id: str, sport: str) -> ParticipationStatus:
        return status_of(participant_id, sport, self.matches)

    def sport_statuses(self, participant_id: str) -> Dict[str, ParticipationStatus]:
        return sport_statuses(self.get_participant(participant_id), self.matches)

    def dashboard(self) -> DashboardStats:
        return stats.dashboard(
            self.participants.values(),
            self.matches,
            categories=[band[0] for band in self.config.category_bands],
        )

    def results(self, limit: Optional[int] = None) -> List[MatchResultView]:
        return stats.results(self.participants, self.matches, limit=limit)

    def recent_results(self) -> List[MatchResultView]:
        return stats.recent_results(self.participants, self.matches)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the whole event to a dictionary snapshot."""
        return {
            "config": self.config.to_dict(),
            "participants": [p.to_dict() for p in self.participants.values()],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        config: Optional[EventConfig] = None,
        shuffle: Optional[ShuffleFunction] = None,
    ) -> "SportsEvent":
        """Deserialize an event snapshot.

        Args:
            data: Snapshot produced by ``to_dict``
            config: Overrides the snapshot's configuration when given
            shuffle: Permutation used by auto-scheduling
        """
        if config is None:
            config = EventConfig.from_dict(data.get("config", {}))
        return cls(
            config=config,
            participants=[Participant.from_dict(p) for p in data.get("participants", [])],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
            shuffle=shuffle,
        )
