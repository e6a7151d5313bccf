"""Sports Meet: eligibility and match scheduling for multi-sport youth events."""

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

from sportsmeet.event import SportsEvent
from sportsmeet.models import EventConfig, Match, Participant, SportConfig
from sportsmeet.storage import EventStore

__version__ = "0.1.0"

__all__ = [
    "EventConfig",
    "EventStore",
    "Match",
    "Participant",
    "SportConfig",
    "SportsEvent",
]
