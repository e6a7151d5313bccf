from datetime import datetime, timezone

import pytest

from sportsmeet import SportsEvent

MIDDLE_BOYS = "Middle (6-7) - Boys"
MIDDLE_GIRLS = "Middle (6-7) - Girls"
JUNIOR_GIRLS = "Juniors (4-5) - Girls"

FIXED_TIME = datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)


def keep_order(items):
    """Shuffle stand-in that leaves the order untouched."""


@pytest.fixture
def event():
    return SportsEvent(shuffle=keep_order, clock=lambda: FIXED_TIME)


@pytest.fixture
def chess_boys(event):
    """Five Middle (6-7) boys registered for Chess."""
    return [
        event.register_participant(
            f"Boy {i}", 6 + i % 2, "Boys", ["Chess"], participant_id=f"b{i}"
        )
        for i in range(5)
    ]


@pytest.fixture
def carrom_team_match(event):
    """A scheduled Carrom (2vs2) match with players A, B, C, D in that order."""
    for pid in "ABCD":
        event.register_participant(
            f"Player {pid}", 9, "Girls", ["Carrom (2vs2)"], participant_id=pid
        )
    return event.create_match("Carrom (2vs2)", "Seniors (8-10) - Girls", list("ABCD"))
