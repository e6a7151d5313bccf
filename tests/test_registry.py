import pytest

from conftest import MIDDLE_BOYS
from sportsmeet.exceptions import ParticipantNotFoundError, ValidationError


def test_register_derives_category(event):
    participant = event.register_participant("  Rahul Kumar ", "8", "Boys", ["Chess"])

    assert participant.name == "Rahul Kumar"
    assert participant.grade == 8
    assert participant.category == "Seniors (8-10)"
    assert participant.category_group == "Seniors (8-10) - Boys"
    assert participant.id.startswith("participant-")
    assert event.get_participant(participant.id) is participant


def test_grade_outside_bands_is_unknown(event):
    assert event.register_participant("Tiny", 2, "Girls", ["Chess"]).category == "Unknown"


@pytest.mark.parametrize(
    "name, grade, gender, sports, message",
    [
        ("", 6, "Boys", ["Chess"], "Name is required"),
        ("Ravi", "six", "Boys", ["Chess"], "whole number"),
        ("Ravi", 6, "Other", ["Chess"], "gender group"),
        ("Ravi", 6, "Boys", [], "at least one sport"),
        ("Ravi", 6, "Boys", ["Chess", "Carrom", "Football", "Basketball"], "at most 3"),
        ("Ravi", 6, "Boys", ["Chess", "Chess"], "duplicates"),
        ("Ravi", 6, "Boys", ["Quidditch"], "Unknown sport"),
    ],
)
def test_invalid_registration(event, name, grade, gender, sports, message):
    with pytest.raises(ValidationError, match=message):
        event.register_participant(name, grade, gender, sports)
    assert event.participants == {}


def test_duplicate_id_is_rejected(event):
    event.register_participant("A", 6, "Boys", ["Chess"], participant_id="p1")
    with pytest.raises(ValidationError, match="already exists"):
        event.register_participant("B", 6, "Boys", ["Chess"], participant_id="p1")


def test_update_recomputes_category(event):
    participant = event.register_participant("A", 5, "Girls", ["Chess"])
    event.update_participant(participant.id, grade=9, sports=["Chess", "Football"])

    assert participant.category == "Seniors (8-10)"
    assert participant.sports == ["Chess", "Football"]
    assert participant.name == "A"


def test_invalid_update_changes_nothing(event):
    participant = event.register_participant("A", 5, "Girls", ["Chess"])
    with pytest.raises(ValidationError):
        event.update_participant(participant.id, grade=7, gender_group="Other")

    assert participant.grade == 5
    assert participant.category == "Juniors (4-5)"


def test_unknown_participant(event):
    with pytest.raises(ParticipantNotFoundError):
        event.get_participant("ghost")
    with pytest.raises(ParticipantNotFoundError):
        event.update_participant("ghost", name="X")
    with pytest.raises(ParticipantNotFoundError):
        event.remove_participant("ghost")


def test_remove_participant_removes_their_matches(event, chess_boys):
    kept = event.create_match("Chess", MIDDLE_BOYS, ["b2", "b3"])
    event.create_match("Chess", MIDDLE_BOYS, ["b0", "b1"])

    event.remove_participant("b0")

    assert "b0" not in event.participants
    assert event.matches == [kept]
    assert event.scheduler.matches is event.matches
    assert "b1" in {p.id for p in event.eligible_pool("Chess")}


def test_filter_participants(event):
    event.register_participant("A", 4, "Girls", ["Chess"], participant_id="a")
    event.register_participant("B", 6, "Boys", ["Chess", "Carrom"], participant_id="b")
    event.register_participant("C", 7, "Boys", ["Carrom"], participant_id="c")

    def ids(**criteria):
        return [p.id for p in event.filter_participants(**criteria)]

    assert ids() == ["a", "b", "c"]
    assert ids(category="Middle (6-7)") == ["b", "c"]
    assert ids(gender_group="Girls") == ["a"]
    assert ids(grade=7) == ["c"]
    assert ids(sport="Chess") == ["a", "b"]
    assert ids(category="Middle (6-7)", sport="Carrom", grade=6) == ["b"]
