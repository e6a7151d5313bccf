from sportsmeet.models.event_config import EventConfig, default_sports
from sportsmeet.models.match import Match
from sportsmeet.models.participant import Participant
from sportsmeet.models.sport import SportConfig

__all__ = [
    "EventConfig",
    "Match",
    "Participant",
    "SportConfig",
    "default_sports",
]
