import json

import pytest

from conftest import MIDDLE_BOYS
from sportsmeet.cli import main
from sportsmeet.storage import EventStore


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "meet.json")


def run(data_file, *argv):
    return main(["--data", data_file, *argv])


def register(data_file, pid, grade="6", gender="Boys", *sports):
    args = ["register", "--id", pid, "--name", f"Student {pid}", "--grade", grade]
    args += ["--gender", gender]
    for sport in sports or ("Chess",):
        args += ["--sport", sport]
    return run(data_file, *args)


def test_register_writes_snapshot(data_file, capsys):
    assert register(data_file, "s1") == 0

    out = capsys.readouterr().out
    assert "Registered Student s1" in out
    event = EventStore(data_file).load()
    assert event.get_participant("s1").category == "Middle (6-7)"


def test_invalid_register_fails_without_saving(data_file, capsys):
    assert register(data_file, "s1", "6", "Robots") == 1

    assert "gender group" in capsys.readouterr().err
    assert not EventStore(data_file).exists()


def test_schedule_winner_and_status(data_file, capsys):
    for pid in ("s1", "s2", "s3"):
        register(data_file, pid)

    assert run(data_file, "schedule", "Chess", MIDDLE_BOYS, "s1", "s2") == 0
    match = EventStore(data_file).load().matches[0]

    assert run(data_file, "winner", match.id, "s2") == 0
    assert run(data_file, "status", "s1", "--sport", "Chess") == 0
    assert "played" in capsys.readouterr().out

    event = EventStore(data_file).load()
    assert event.get_match(match.id).winner == "s2"
    assert [p.id for p in event.eligible_pool("Chess")] == ["s3"]


def test_schedule_rejects_ineligible_player(data_file, capsys):
    register(data_file, "s1")
    register(data_file, "s2", "9")

    assert run(data_file, "schedule", "Chess", MIDDLE_BOYS, "s1", "s2") == 1
    assert "not eligible" in capsys.readouterr().err
    assert EventStore(data_file).load().matches == []


def test_auto_schedule_with_seed(data_file, capsys):
    for i in range(5):
        register(data_file, f"s{i}")

    assert run(data_file, "auto", "Chess", "--seed", "3") == 0
    out = capsys.readouterr().out
    assert "Scheduled 2 match(es)" in out
    assert "Unpaired" in out

    assert run(data_file, "auto", "Chess") == 0
    assert "Nothing scheduled" in capsys.readouterr().out
    assert len(EventStore(data_file).load().matches) == 2


def test_team_winner_from_cli(data_file):
    for pid in "ABCD":
        register(data_file, pid, "9", "Girls", "Carrom (2vs2)")
    run(data_file, "schedule", "Carrom (2vs2)", "Seniors (8-10) - Girls", *"ABCD")
    match_id = EventStore(data_file).load().matches[0].id

    assert run(data_file, "winner", match_id, "A", "C") == 1
    assert run(data_file, "winner", match_id, "D", "C") == 0
    assert EventStore(data_file).load().get_match(match_id).winner == ("C", "D")


def test_delete_match_and_unknown_ids(data_file, capsys):
    register(data_file, "s1")
    register(data_file, "s2")
    run(data_file, "schedule", "Chess", MIDDLE_BOYS, "s1", "s2")
    match_id = EventStore(data_file).load().matches[0].id

    assert run(data_file, "delete-match", match_id) == 0
    assert run(data_file, "delete-match", match_id) == 1
    assert "Match not found" in capsys.readouterr().err
    assert EventStore(data_file).load().matches == []


def test_reports(data_file, capsys):
    register(data_file, "s1")
    register(data_file, "s2")
    run(data_file, "auto", "Chess")
    match_id = EventStore(data_file).load().matches[0].id
    run(data_file, "winner", match_id, "s1")
    capsys.readouterr()

    assert run(data_file, "stats") == 0
    out = capsys.readouterr().out
    assert "Completion: 100%" in out

    assert run(data_file, "results") == 0
    assert "Student s1" in capsys.readouterr().out

    assert run(data_file, "participants", "--sport", "Chess") == 0
    assert "Found 2 participant(s)" in capsys.readouterr().out

    assert run(data_file, "eligible", "Chess") == 0
    assert "No eligible participants" in capsys.readouterr().out

    assert run(data_file, "matches", "--status", "finished") == 0
    assert "winner: Student s1" in capsys.readouterr().out


def test_set_size_and_config_file(tmp_path, data_file, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"name": "Mini Meet", "sports": [{"name": "Relay"}]}),
        encoding="utf-8",
    )

    assert main(["--data", data_file, "--config", str(config_path), "sports"]) == 0
    assert "Relay" in capsys.readouterr().out

    assert (
        main(["--data", data_file, "--config", str(config_path), "set-size", "Relay", "4"])
        == 0
    )
    assert EventStore(data_file).load().config.get_sport("Relay").players_per_match == 4


def test_unreadable_data_file(data_file, capsys):
    with open(data_file, "w", encoding="utf-8") as f:
        f.write("[broken")

    assert run(data_file, "stats") == 1
    assert "Cannot read event file" in capsys.readouterr().err


def test_malformed_config_file(tmp_path, data_file, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text("[]", encoding="utf-8")

    assert main(["--data", data_file, "--config", str(config_path), "stats"]) == 1
    assert "Malformed config file" in capsys.readouterr().err
