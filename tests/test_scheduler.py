import random

import pytest

from conftest import FIXED_TIME, MIDDLE_BOYS, MIDDLE_GIRLS, keep_order
from sportsmeet import EventConfig, Match, Participant, SportsEvent
from sportsmeet.constants import (
    CATEGORY_MIDDLE,
    NOOP_NO_PAIRINGS,
    NOOP_NO_SPORT,
    STATUS_SCHEDULED,
)
from sportsmeet.controllers.scheduler import MatchScheduler
from sportsmeet.exceptions import ValidationError


# ========== Manual scheduling ==========


def test_manual_match_leaves_three_eligible(event, chess_boys):
    match = event.create_match("Chess", MIDDLE_BOYS, ["b0", "b3"])

    assert match.status == STATUS_SCHEDULED
    assert match.winner is None
    assert match.player_ids == ("b0", "b3")
    assert match.category_group == MIDDLE_BOYS
    assert match.created_at == FIXED_TIME
    assert [p.id for p in event.pool_for_group("Chess", MIDDLE_BOYS)] == [
        "b1",
        "b2",
        "b4",
    ]


def test_wrong_player_count_is_rejected(event, chess_boys):
    with pytest.raises(ValidationError, match="exactly 2 players"):
        event.create_match("Chess", MIDDLE_BOYS, ["b0"])
    with pytest.raises(ValidationError, match="exactly 2 players"):
        event.create_match("Chess", MIDDLE_BOYS, ["b0", "b1", "b2"])
    assert event.matches == []


def test_duplicate_player_is_rejected(event, chess_boys):
    with pytest.raises(ValidationError, match="more than once"):
        event.create_match("Chess", MIDDLE_BOYS, ["b0", "b0"])
    assert event.matches == []


def test_player_from_another_group_is_rejected(event, chess_boys):
    event.register_participant("Girl", 6, "Girls", ["Chess"], participant_id="g0")
    with pytest.raises(ValidationError, match="not eligible"):
        event.create_match("Chess", MIDDLE_BOYS, ["b0", "g0"])
    assert event.matches == []


def test_player_already_matched_is_rejected(event, chess_boys):
    event.create_match("Chess", MIDDLE_BOYS, ["b0", "b1"])
    with pytest.raises(ValidationError, match="b1"):
        event.create_match("Chess", MIDDLE_BOYS, ["b1", "b2"])
    assert len(event.matches) == 1


def test_finished_match_still_blocks_its_players(event, chess_boys):
    match = event.create_match("Chess", MIDDLE_BOYS, ["b0", "b1"])
    event.declare_winner(match.id, "b0")
    with pytest.raises(ValidationError):
        event.create_match("Chess", MIDDLE_BOYS, ["b0", "b2"])


def test_unregistered_sport_player_is_rejected(event, chess_boys):
    event.register_participant("Other", 6, "Boys", ["Badminton"], participant_id="x")
    with pytest.raises(ValidationError):
        event.create_match("Chess", MIDDLE_BOYS, ["b0", "x"])


@pytest.mark.parametrize("sport", ["", "Quidditch"])
def test_missing_or_unknown_sport_is_rejected(event, chess_boys, sport):
    with pytest.raises(ValidationError):
        event.create_match(sport, MIDDLE_BOYS, ["b0", "b1"])


def test_manual_selection_is_cleared_after_create(event, chess_boys):
    scheduler = event.scheduler
    scheduler.select_sport("Chess")
    scheduler.select_group(MIDDLE_BOYS)
    scheduler.select_player("b0")
    scheduler.select_player("b1")

    match = scheduler.create_match_from_selection()

    assert match.player_ids == ("b0", "b1")
    assert scheduler.selection.sport == "Chess"
    assert scheduler.selection.category_group == MIDDLE_BOYS
    assert scheduler.selection.player_ids == []


def test_manual_selection_rules(event, chess_boys):
    scheduler = event.scheduler
    with pytest.raises(ValidationError):
        scheduler.select_group(MIDDLE_BOYS)

    scheduler.select_sport("Chess")
    with pytest.raises(ValidationError):
        scheduler.select_player("b0")

    scheduler.select_group(MIDDLE_BOYS)
    scheduler.select_player("b0")
    with pytest.raises(ValidationError, match="already selected"):
        scheduler.select_player("b0")
    scheduler.select_player("b1")
    with pytest.raises(ValidationError, match="only 2"):
        scheduler.select_player("b2")

    scheduler.deselect_player("b0")
    assert scheduler.selection.player_ids == ["b1"]

    scheduler.select_sport("Chess")
    assert scheduler.selection.category_group == ""
    assert scheduler.selection.player_ids == []


def test_failed_create_keeps_selection(event, chess_boys):
    scheduler = event.scheduler
    scheduler.select_sport("Chess")
    scheduler.select_group(MIDDLE_BOYS)
    scheduler.select_player("b0")

    with pytest.raises(ValidationError):
        scheduler.create_match_from_selection()
    assert scheduler.selection.player_ids == ["b0"]


# ========== Automatic scheduling ==========


def test_auto_schedule_batches_each_group(event):
    for i in range(5):
        event.register_participant(f"Boy {i}", 6, "Boys", ["Chess"], participant_id=f"b{i}")
    for i in range(2):
        event.register_participant(f"Girl {i}", 7, "Girls", ["Chess"], participant_id=f"g{i}")

    result = event.auto_schedule("Chess")

    assert not result.is_noop
    assert [(m.category_group, m.player_ids) for m in result.matches] == [
        (MIDDLE_BOYS, ("b0", "b1")),
        (MIDDLE_BOYS, ("b2", "b3")),
        (MIDDLE_GIRLS, ("g0", "g1")),
    ]
    assert result.leftover_ids == ["b4"]
    assert event.matches == result.matches
    assert all(m.status == STATUS_SCHEDULED for m in result.matches)


def test_auto_schedule_uses_injected_shuffle_per_group(chess_boys):
    calls = []

    def reverse(items):
        calls.append(list(items))
        items.reverse()

    event = SportsEvent(participants=chess_boys, shuffle=reverse)
    event.register_participant("Girl", 6, "Girls", ["Chess"], participant_id="g0")

    result = event.auto_schedule("Chess")

    assert calls == [["b0", "b1", "b2", "b3", "b4"], ["g0"]]
    assert [m.player_ids for m in result.matches] == [("b4", "b3"), ("b2", "b1")]
    assert result.leftover_ids == ["b0", "g0"]


def test_chess_example_remainder_is_left_unpaired(event, chess_boys):
    event.create_match("Chess", MIDDLE_BOYS, ["b0", "b1"])

    first = event.auto_schedule("Chess")
    assert [m.player_ids for m in first.matches] == [("b2", "b3")]
    assert first.leftover_ids == ["b4"]

    second = event.auto_schedule("Chess")
    assert second.is_noop
    assert second.reason == NOOP_NO_PAIRINGS
    assert second.leftover_ids == ["b4"]
    assert len(event.matches) == 2


def test_auto_schedule_is_idempotent(event, chess_boys):
    event.auto_schedule("Chess")
    before = list(event.matches)

    again = event.auto_schedule("Chess")

    assert again.matches == []
    assert event.matches == before


def test_auto_schedule_batches_are_complete_for_team_sport(event):
    for i in range(9):
        event.register_participant(
            f"Senior {i}", 9, "Girls", ["Carrom (2vs2)"], participant_id=f"s{i}"
        )

    result = event.auto_schedule("Carrom (2vs2)")

    assert [len(m.player_ids) for m in result.matches] == [4, 4]
    assert result.leftover_ids == ["s8"]


def test_auto_schedule_without_sport_is_noop(event, chess_boys):
    result = event.auto_schedule("")
    assert result.is_noop
    assert result.reason == NOOP_NO_SPORT
    assert event.matches == []


def test_auto_schedule_without_players_is_noop(event):
    result = event.auto_schedule("Badminton")
    assert result.is_noop
    assert result.reason == NOOP_NO_PAIRINGS


def test_auto_schedule_unknown_sport(event):
    with pytest.raises(ValidationError, match="Unknown sport"):
        event.auto_schedule("Quidditch")


def test_auto_schedule_lifetime_uniqueness_with_random_shuffle():
    event = SportsEvent(shuffle=random.Random(7).shuffle)
    for i in range(23):
        event.register_participant(
            f"P{i}", 4 + i % 7, "Boys" if i % 2 else "Girls", ["Chess", "Carrom"]
        )

    event.auto_schedule("Chess")
    event.auto_schedule("Carrom")
    event.auto_schedule("Chess")

    for sport in ("Chess", "Carrom"):
        seen = []
        for match in event.get_matches(sport=sport):
            assert len(match.player_ids) == 2
            seen.extend(match.player_ids)
        assert len(seen) == len(set(seen))
        assert not set(seen) & {p.id for p in event.eligible_pool(sport)}


def test_scheduler_defaults_to_random_shuffle():
    event = SportsEvent()
    assert event.scheduler.shuffle is random.shuffle
    assert SportsEvent(shuffle=keep_order).scheduler.shuffle is keep_order


def _pool_ignoring_matches(sport, participants, matches):
    return [p for p in participants if p.plays(sport)]


def test_auto_schedule_skips_batches_matching_scheduled_matches(monkeypatch):
    participants = {
        pid: Participant(pid, f"Boy {pid}", 6, "Boys", CATEGORY_MIDDLE, ["Chess"])
        for pid in ("b0", "b1", "b2", "b3")
    }
    existing = Match("match-1", "Chess", MIDDLE_BOYS, ("b1", "b0"))
    matches = [existing]
    scheduler = MatchScheduler(
        participants, matches, EventConfig(), shuffle=keep_order, clock=lambda: FIXED_TIME
    )
    monkeypatch.setattr(
        "sportsmeet.controllers.scheduler.eligible_pool", _pool_ignoring_matches
    )

    result = scheduler.auto_schedule("Chess")

    assert result.skipped_duplicates == 1
    assert [m.player_ids for m in result.matches] == [("b2", "b3")]
    assert matches == [existing] + result.matches


def test_auto_schedule_with_only_duplicate_batches_is_noop(monkeypatch):
    participants = {
        pid: Participant(pid, f"Boy {pid}", 7, "Boys", CATEGORY_MIDDLE, ["Chess"])
        for pid in ("b0", "b1")
    }
    matches = [Match("match-1", "Chess", MIDDLE_BOYS, ("b0", "b1"))]
    scheduler = MatchScheduler(participants, matches, EventConfig(), shuffle=keep_order)
    monkeypatch.setattr(
        "sportsmeet.controllers.scheduler.eligible_pool", _pool_ignoring_matches
    )

    result = scheduler.auto_schedule("Chess")

    assert result.is_noop
    assert result.skipped_duplicates == 1
    assert result.reason == NOOP_NO_PAIRINGS
    assert len(matches) == 1
