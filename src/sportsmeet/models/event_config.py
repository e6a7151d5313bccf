"""EventConfig data class."""

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
from typing import Any, Dict, List, Optional

from sportsmeet.constants import (
    DEFAULT_CATEGORY_BANDS,
    DEFAULT_EVENT_NAME,
    DEFAULT_GENDER_GROUPS,
    DEFAULT_SPORTS,
    MAX_SPORTS_PER_PARTICIPANT,
)
from sportsmeet.exceptions import InvalidConfigurationException
from sportsmeet.models.sport import SportConfig
from sportsmeet.type_hints import CategoryBands
from sportsmeet.utils.validation import validate_players_per_match


def default_sports() -> List[SportConfig]:
    """Build the default sports catalog."""
    return [
        SportConfig(name=name, players_per_match=size, is_fixed_size=fixed)
        for name, size, fixed in DEFAULT_SPORTS
    ]


@dataclass
class EventConfig:
    """Event configuration settings.

    Attributes
    ----------
    name : str
        Event name.
    category_bands : list of (str, int, int)
        Category name with its inclusive grade range, checked in order.
    gender_groups : list of str
        Allowed gender groups.
    max_sports_per_participant : int
        Registration limit per participant.
    sports : list of SportConfig
        Sports catalog.
    """

    name: str = DEFAULT_EVENT_NAME
    category_bands: CategoryBands = field(
        default_factory=lambda: list(DEFAULT_CATEGORY_BANDS)
    )
    gender_groups: List[str] = field(
        default_factory=lambda: list(DEFAULT_GENDER_GROUPS)
    )
    max_sports_per_participant: int = MAX_SPORTS_PER_PARTICIPANT
    sports: List[SportConfig] = field(default_factory=default_sports)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the configuration for internal consistency.

        Raises:
            InvalidConfigurationException: If any setting is unusable
        """
        for band in self.category_bands:
            if len(band) != 3:
                raise InvalidConfigurationException(
                    f"Category band must be (name, low, high), got {band!r}"
                )
            name, low, high = band
            if low > high:
                raise InvalidConfigurationException(
                    f"Category band {name!r} has low grade {low} above high grade {high}"
                )

        if not self.gender_groups:
            raise InvalidConfigurationException("At least one gender group is required")

        if self.max_sports_per_participant < 1:
            raise InvalidConfigurationException(
                "max_sports_per_participant must be at least 1"
            )

        names = [s.name for s in self.sports]
        if len(set(names)) != len(names):
            raise InvalidConfigurationException("Sport names must be unique")
        for sport in self.sports:
            result = validate_players_per_match(sport.players_per_match)
            if not result:
                raise InvalidConfigurationException(
                    f"{sport.name}: {result.error_message}"
                )

    @property
    def sport_names(self) -> List[str]:
        return [s.name for s in self.sports]

    def get_sport(self, name: str) -> Optional[SportConfig]:
        """Look up a sport by name."""
        for sport in self.sports:
            if sport.name == name:
                return sport
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "category_bands": [list(band) for band in self.category_bands],
            "gender_groups": list(self.gender_groups),
            "max_sports_per_participant": self.max_sports_per_participant,
            "sports": [s.to_dict() for s in self.sports],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventConfig":
        """Deserialize configuration from dictionary."""
        sports = data.get("sports")
        return cls(
            name=data.get("name", DEFAULT_EVENT_NAME),
            category_bands=[
                tuple(band)
                for band in data.get("category_bands", DEFAULT_CATEGORY_BANDS)
            ],
            gender_groups=list(data.get("gender_groups", DEFAULT_GENDER_GROUPS)),
            max_sports_per_participant=data.get(
                "max_sports_per_participant", MAX_SPORTS_PER_PARTICIPANT
            ),
            sports=(
                [SportConfig.from_dict(s) for s in sports]
                if sports is not None
                else default_sports()
            ),
        )
