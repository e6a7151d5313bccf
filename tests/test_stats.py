from conftest import MIDDLE_BOYS


def test_empty_dashboard(event):
    stats = event.dashboard()

    assert stats.total_participants == 0
    assert stats.total_matches == 0
    assert stats.completion_percentage == 0
    assert stats.by_category == {
        "Juniors (4-5)": 0,
        "Middle (6-7)": 0,
        "Seniors (8-10)": 0,
    }


def test_dashboard_counts(event, chess_boys):
    event.register_participant("Old", 12, "Girls", ["Chess"])
    first = event.create_match("Chess", MIDDLE_BOYS, ["b0", "b1"])
    event.create_match("Chess", MIDDLE_BOYS, ["b2", "b3"])
    event.declare_winner(first.id, "b0")

    stats = event.dashboard()

    assert stats.total_participants == 6
    assert stats.total_matches == 2
    assert stats.matches_pending == 1
    assert stats.matches_finished == 1
    assert stats.completion_percentage == 50
    assert stats.by_category["Middle (6-7)"] == 5
    assert stats.by_category["Unknown"] == 1


def test_results_newest_first(event, chess_boys, carrom_team_match):
    first = event.create_match("Chess", MIDDLE_BOYS, ["b0", "b1"])
    second = event.create_match("Chess", MIDDLE_BOYS, ["b2", "b3"])
    event.declare_winner(first.id, "b1")
    event.declare_winner(carrom_team_match.id, ["C", "D"])

    results = event.results()

    assert [r.match_id for r in results] == [first.id, carrom_team_match.id]
    assert results[0].winner_names == ["Boy 1"]
    assert results[0].loser_names == ["Boy 0"]
    assert results[1].winner_names == ["Player C", "Player D"]
    assert results[1].loser_names == ["Player A", "Player B"]
    assert second.id not in {r.match_id for r in results}
    assert [r.match_id for r in event.results(limit=1)] == [first.id]


def test_recent_results_limited_to_four(event):
    for i in range(12):
        event.register_participant(f"P{i}", 6, "Boys", ["Chess"], participant_id=f"p{i}")
    event.auto_schedule("Chess")
    for match in event.matches:
        event.declare_winner(match.id, match.player_ids[0])

    recent = event.recent_results()

    assert len(recent) == 4
    assert recent[0].match_id == event.matches[-1].id
