"""Match scheduling for sports meet events.

This module creates new matches, either from an explicit manual selection of
players or by an automatic batch-pairing pass over every eligible category
group of a sport.
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

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from sportsmeet.constants import NOOP_NO_PAIRINGS, NOOP_NO_SPORT
from sportsmeet.controllers.eligibility import (
    eligible_pool,
    partition_by_group,
    pool_for_group,
)
from sportsmeet.exceptions import ValidationError
from sportsmeet.models import EventConfig, Match, Participant, SportConfig
from sportsmeet.type_hints import ShuffleFunction
from sportsmeet.utils import generate_id, setup_logger

logger = setup_logger(__name__)


@dataclass
class ManualSelection:
    """Working state of the manual scheduling form.

    Attributes
    ----------
    sport : str
        Selected sport, or "" when none.
    category_group : str
        Selected category group, or "" when none.
    player_ids : list of str
        Players picked so far, in pick order.
    """

    sport: str = ""
    category_group: str = ""
    player_ids: List[str] = field(default_factory=list)


@dataclass
class AutoScheduleResult:
    """Outcome of one automatic scheduling pass.

    A pass that creates nothing is a no-op, not an error; ``reason`` then
    tells the operator why.

    Attributes
    ----------
    sport : str
        Sport the pass ran for.
    matches : list of Match
        Newly created matches.
    leftover_ids : list of str
        Eligible participants left unpaired because their group did not fill
        a final batch.
    skipped_duplicates : int
        Batches not created because an identical scheduled match exists.
    reason : str or None
        Why nothing was created, for no-op results.
    """

    sport: str
    matches: List[Match] = field(default_factory=list)
    leftover_ids: List[str] = field(default_factory=list)
    skipped_duplicates: int = 0
    reason: Optional[str] = None

    @property
    def is_noop(self) -> bool:
        return not self.matches


class MatchScheduler:
    """Creates matches from eligible participants.

    This class is responsible for:
    - Re-validating manual selections against the current eligible pool
    - Batch-pairing every category group of a sport
    - Keeping the manual selection working state

    The participant and match collections are owned by the caller and
    injected; new matches are appended to the injected list.
    """

    def __init__(
        self,
        participants: Dict[str, Participant],
        matches: List[Match],
        config: EventConfig,
        shuffle: Optional[ShuffleFunction] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the scheduler.

        Args:
            participants: Participant store (id -> Participant)
            matches: Match store; new matches are appended to it
            config: Event configuration holding the sports catalog
            shuffle: In-place permutation used by auto-scheduling
                (defaults to ``random.shuffle``)
            clock: Returns the creation time of new matches
        """
        self.participants = participants
        self.matches = matches
        self.config = config
        self.shuffle: ShuffleFunction = shuffle or random.shuffle
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.selection = ManualSelection()

    # ========== Manual Scheduling ==========

    def create_match(
        self, sport: str, category_group: str, selected_player_ids: Sequence[str]
    ) -> Match:
        """Create a scheduled match from an explicit selection of players.

        Args:
            sport: Sport name
            category_group: Category group the players were picked from
            selected_player_ids: Exactly ``players_per_match`` distinct ids

        Returns:
            The new scheduled Match

        Raises:
            ValidationError: If any precondition fails; nothing is changed
        """
        sport_config = self._require_sport(sport)
        selected = list(selected_player_ids)

        if len(selected) != sport_config.players_per_match:
            raise ValidationError(
                f"{sport} needs exactly {sport_config.players_per_match} players, "
                f"got {len(selected)}"
            )
        if len(set(selected)) != len(selected):
            raise ValidationError("The same player was selected more than once")

        pool = eligible_pool(sport, self.participants.values(), self.matches)
        group_ids = {p.id for p in pool_for_group(pool, category_group)}
        ineligible = [pid for pid in selected if pid not in group_ids]
        if ineligible:
            logger.warning(
                f"Rejected {sport} match in '{category_group}': "
                f"ineligible players {ineligible}"
            )
            raise ValidationError(
                f"Player(s) not eligible for {sport} in '{category_group}': "
                f"{', '.join(ineligible)}"
            )

        match = self._new_match(sport, category_group, tuple(selected))
        self.matches.append(match)

        if self.selection.sport == sport:
            self.selection.player_ids = []

        logger.info(
            f"Scheduled {sport} match {match.id} ({category_group}): "
            f"{', '.join(match.player_ids)}"
        )
        return match

    def select_sport(self, sport: str) -> None:
        """Start a manual selection for ``sport``, clearing group and players."""
        if sport:
            self._require_sport(sport)
        self.selection = ManualSelection(sport=sport)

    def select_group(self, category_group: str) -> None:
        """Choose the category group, clearing any picked players."""
        if not self.selection.sport:
            raise ValidationError("Select a sport before choosing a category group")
        self.selection.category_group = category_group
        self.selection.player_ids = []

    def select_player(self, participant_id: str) -> None:
        """Add a player to the manual selection."""
        if not self.selection.category_group:
            raise ValidationError("Select a category group before picking players")
        sport_config = self._require_sport(self.selection.sport)
        if participant_id in self.selection.player_ids:
            raise ValidationError(f"Player {participant_id} is already selected")
        if len(self.selection.player_ids) >= sport_config.players_per_match:
            raise ValidationError(
                f"{sport_config.name} takes only {sport_config.players_per_match} players"
            )
        self.selection.player_ids.append(participant_id)

    def deselect_player(self, participant_id: str) -> None:
        """Remove a player from the manual selection if present."""
        if participant_id in self.selection.player_ids:
            self.selection.player_ids.remove(participant_id)

    def create_match_from_selection(self) -> Match:
        """Create a match from the current manual selection.

        On success the picked players are cleared while sport and group stay
        selected, ready for the next match.
        """
        return self.create_match(
            self.selection.sport,
            self.selection.category_group,
            list(self.selection.player_ids),
        )

    # ========== Automatic Scheduling ==========

    def auto_schedule(self, sport: str) -> AutoScheduleResult:
        """Pair every eligible participant of ``sport`` into new matches.

        Each category group is shuffled independently and sliced into
        batches of ``players_per_match``. A short final batch is left
        unpaired. Batches identical to an existing scheduled match are
        skipped, so repeating a pass creates nothing new.

        Args:
            sport: Sport name; "" yields a no-op result

        Returns:
            AutoScheduleResult with the new matches (possibly none)

        Raises:
            ValidationError: If ``sport`` is not configured
        """
        if not sport:
            logger.info("Auto-schedule skipped: no sport selected")
            return AutoScheduleResult(sport=sport, reason=NOOP_NO_SPORT)

        sport_config = self._require_sport(sport)
        size = sport_config.players_per_match

        pool = [
            p
            for p in eligible_pool(sport, self.participants.values(), self.matches)
            if p.plays(sport)
        ]
        groups = partition_by_group(pool)

        existing: Set[Tuple[str, FrozenSet[str]]] = {
            (m.category_group, m.player_set)
            for m in self.matches
            if m.sport == sport and m.is_scheduled
        }

        result = AutoScheduleResult(sport=sport)
        for group_key in sorted(groups):
            members = [p.id for p in groups[group_key]]
            self.shuffle(members)

            full = len(members) - len(members) % size
            result.leftover_ids.extend(members[full:])

            for start in range(0, full, size):
                batch = tuple(members[start : start + size])
                if (group_key, frozenset(batch)) in existing:
                    result.skipped_duplicates += 1
                    continue
                result.matches.append(self._new_match(sport, group_key, batch))

        if result.is_noop:
            result.reason = NOOP_NO_PAIRINGS
            logger.info(f"Auto-schedule for {sport}: nothing to schedule")
            return result

        self.matches.extend(result.matches)
        logger.info(
            f"Auto-scheduled {len(result.matches)} {sport} match(es); "
            f"{len(result.leftover_ids)} participant(s) left unpaired"
        )
        return result

    # ========== Helpers ==========

    def _require_sport(self, sport: str) -> SportConfig:
        if not sport:
            raise ValidationError("A sport must be selected")
        sport_config = self.config.get_sport(sport)
        if sport_config is None:
            raise ValidationError(f"Unknown sport: {sport}")
        return sport_config

    def _new_match(
        self, sport: str, category_group: str, player_ids: Tuple[str, ...]
    ) -> Match:
        return Match(
            _id=generate_id("match"),
            sport=sport,
            category_group=category_group,
            player_ids=player_ids,
            created_at=self.clock(),
        )
