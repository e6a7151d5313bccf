"""A participant registered for one or more sports."""

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
from typing import Any, Dict, List

from sportsmeet.constants import CATEGORY_GROUP_SEPARATOR, CATEGORY_UNKNOWN


@dataclass(slots=True)
class Participant:
    """
    A student registered for the sports meet.

    The identifier (``id``) is immutable, while all other attributes may be
    edited by the registration subsystem. The scheduling engine only reads
    participants.

    Attributes
    ----------
    id : str
        Immutable unique identifier.
    name : str
        Full name.
    grade : int
        School class/grade, used to derive the category.
    gender_group : str
        Gender group used for partitioning (e.g. "Boys" or "Girls").
    category : str
        Age band derived from ``grade`` by the category classifier.
    sports : list of str
        Sports the participant registered for (at most three).

    Examples
    --------
    ::

        participant = Participant(
            _id="p-001",
            name="Rahul Kumar",
            grade=6,
            gender_group="Boys",
            category="Middle (6-7)",
            sports=["Chess", "Carrom"],
        )
    """

    _id: str
    name: str
    grade: int
    gender_group: str
    category: str = CATEGORY_UNKNOWN
    sports: List[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        """Immutable participant identifier."""
        return self._id

    @property
    def category_group(self) -> str:
        """Category and gender combined, e.g. ``"Middle (6-7) - Boys"``."""
        return f"{self.category}{CATEGORY_GROUP_SEPARATOR}{self.gender_group}"

    def plays(self, sport: str) -> bool:
        """Is the participant registered for ``sport``?"""
        return sport in self.sports

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "grade": self.grade,
            "gender_group": self.gender_group,
            "category": self.category,
            "sports": list(self.sports),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        return cls(
            _id=str(data["id"]),
            name=data["name"],
            grade=int(data["grade"]),
            gender_group=data["gender_group"],
            category=data.get("category", CATEGORY_UNKNOWN),
            sports=list(data.get("sports", [])),
        )
