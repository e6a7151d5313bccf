import pytest

from conftest import MIDDLE_BOYS
from sportsmeet.constants import STATUS_FINISHED, STATUS_SCHEDULED
from sportsmeet.controllers.lifecycle import positional_teams
from sportsmeet.exceptions import MatchNotFoundError, NotFoundError, ValidationError


@pytest.fixture
def chess_match(event, chess_boys):
    return event.create_match("Chess", MIDDLE_BOYS, ["b0", "b1"])


def test_declare_winner_finishes_match(event, chess_match):
    match = event.declare_winner(chess_match.id, "b1")

    assert match is chess_match
    assert match.status == STATUS_FINISHED
    assert match.winner == "b1"
    assert match.loser_ids == ("b0",)


def test_single_item_selection_is_accepted(event, chess_match):
    assert event.declare_winner(chess_match.id, ["b0"]).winner == "b0"


@pytest.mark.parametrize("selection", ["b2", "", ["b0", "b1"], []])
def test_invalid_single_winner_is_rejected(event, chess_match, selection):
    with pytest.raises(ValidationError):
        event.declare_winner(chess_match.id, selection)
    assert chess_match.status == STATUS_SCHEDULED
    assert chess_match.winner is None


def test_unknown_match(event):
    with pytest.raises(MatchNotFoundError):
        event.declare_winner("missing", "b0")
    with pytest.raises(NotFoundError):
        event.delete_match("missing")


def test_redeclaring_overwrites_winner(event, chess_match):
    event.declare_winner(chess_match.id, "b0")
    event.declare_winner(chess_match.id, "b1")

    assert chess_match.winner == "b1"
    assert chess_match.status == STATUS_FINISHED


def test_rejected_redeclare_keeps_match_finished(event, chess_match):
    event.declare_winner(chess_match.id, "b0")
    with pytest.raises(ValidationError):
        event.declare_winner(chess_match.id, "b4")

    assert chess_match.status == STATUS_FINISHED
    assert chess_match.winner == "b0"


@pytest.mark.parametrize(
    "selection, expected",
    [
        ({"A", "B"}, ("A", "B")),
        (["B", "A"], ("A", "B")),
        (("C", "D"), ("C", "D")),
        (["D", "C"], ("C", "D")),
    ],
)
def test_team_winner_is_a_positional_pair(event, carrom_team_match, selection, expected):
    match = event.declare_winner(carrom_team_match.id, selection)

    assert match.winner == expected
    assert match.status == STATUS_FINISHED
    assert set(match.loser_ids) == set("ABCD") - set(expected)


@pytest.mark.parametrize(
    "selection",
    [{"A", "C"}, {"B", "C"}, {"A", "D"}, "A", ["A"], ["A", "B", "C"], ["A", "A"]],
)
def test_team_winner_outside_positional_pairs_is_rejected(
    event, carrom_team_match, selection
):
    with pytest.raises(ValidationError):
        event.declare_winner(carrom_team_match.id, selection)
    assert carrom_team_match.winner is None
    assert carrom_team_match.status == STATUS_SCHEDULED


def test_winner_candidates(event, chess_match, carrom_team_match):
    assert event.winner_candidates(chess_match.id) == ["b0", "b1"]
    assert event.winner_candidates(carrom_team_match.id) == [("A", "B"), ("C", "D")]


def test_positional_teams():
    assert positional_teams(("a", "b", "c", "d", "e", "f"), 2) == [
        ("a", "b"),
        ("c", "d"),
        ("e", "f"),
    ]


def test_deleting_finished_match_restores_eligibility(event, chess_match):
    event.declare_winner(chess_match.id, "b0")
    assert "b0" not in {p.id for p in event.eligible_pool("Chess")}

    removed = event.delete_match(chess_match.id)

    assert removed is chess_match
    assert event.matches == []
    assert {"b0", "b1"} <= {p.id for p in event.eligible_pool("Chess")}
    assert event.status_of("b0", "Chess") == "not-played"


def test_deleting_scheduled_match(event, chess_match):
    event.delete_match(chess_match.id)
    with pytest.raises(MatchNotFoundError):
        event.get_match(chess_match.id)
