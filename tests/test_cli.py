import json

import pytest

from tourneyboard.cli import main


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def snapshot_file(tmp_path):
    return _write(
        tmp_path / "cup.json",
        {
            "config": {"name": "Cup", "group_sizes": [2, 2]},
            "participants": [
                {"id": "a", "name": "Ann"},
                {"id": "b", "name": "Bob"},
                {"id": "c", "name": "Cid"},
                {"id": "d", "name": "Dee"},
            ],
        },
    )


def _complete_matches(path, winner_first=True):
    data = _read(path)
    for match in data["matches"]:
        if match["status"] != "COMPLETED":
            match["player1_score"], match["player2_score"] = (2, 1) if winner_first else (1, 2)
            match["status"] = "COMPLETED"
            match["winner_id"] = match["player1_id"] if winner_first else match["player2_id"]
    _write(path, data)


def test_full_tournament_flow(snapshot_file, capsys):
    assert main(["draw", str(snapshot_file), "--seed", "3", "-o", str(snapshot_file)]) == 0
    drawn = json.loads(capsys.readouterr().out)
    assert [len(g["participant_ids"]) for g in drawn["groups"]] == [2, 2]
    assert sorted(drawn["assignment"]) == ["a", "b", "c", "d"]
    assert _read(snapshot_file)["config"]["phase"] == "GROUP_DRAW"

    assert main(["schedule", str(snapshot_file), "-o", str(snapshot_file)]) == 0
    schedules = json.loads(capsys.readouterr().out)["schedules"]
    assert [len(s["matches"]) for s in schedules] == [1, 1]
    assert len(_read(snapshot_file)["matches"]) == 2

    # Open group matches block advancement
    assert main(["semifinals", str(snapshot_file)]) == 1
    capsys.readouterr()

    _complete_matches(snapshot_file)
    assert main(["standings", str(snapshot_file)]) == 0
    standings = json.loads(capsys.readouterr().out)["groups"]
    assert [[s["rank"] for s in g["standings"]] for g in standings] == [[1, 2], [1, 2]]

    assert main(["semifinals", str(snapshot_file), "-o", str(snapshot_file)]) == 0
    semifinals = json.loads(capsys.readouterr().out)
    group_a, group_b = standings
    assert semifinals["semifinal1"] == {
        "player1_id": group_a["standings"][0]["participant_id"],
        "player2_id": group_b["standings"][1]["participant_id"],
    }
    assert _read(snapshot_file)["config"]["phase"] == "KNOCKOUT"

    # Writing the knockout round a second time is refused
    assert main(["-q", "semifinals", str(snapshot_file), "-o", str(snapshot_file)]) == 1
    assert capsys.readouterr().out == ""
    assert len(_read(snapshot_file)["matches"]) == 4

    assert main(["final", str(snapshot_file)]) == 0
    assert json.loads(capsys.readouterr().out)["ready"] is False

    _complete_matches(snapshot_file, winner_first=False)
    assert main(["final", str(snapshot_file)]) == 0
    final = json.loads(capsys.readouterr().out)
    assert final == {
        "ready": True,
        "player1_id": semifinals["semifinal1"]["player2_id"],
        "player2_id": semifinals["semifinal2"]["player2_id"],
    }


def test_manual_draw(snapshot_file, tmp_path, capsys):
    assignment = _write(tmp_path / "manual.json", {"a": 0, "b": 1, "c": 0, "d": 1})

    assert main(["draw", str(snapshot_file), "--assignment", str(assignment)]) == 0
    groups = json.loads(capsys.readouterr().out)["groups"]
    assert groups[0]["participant_ids"] == ["a", "c"]
    assert groups[1]["participant_ids"] == ["b", "d"]


def test_invalid_manual_draw_fails(snapshot_file, tmp_path, capsys):
    assignment = _write(tmp_path / "manual.json", {"a": 0, "b": 0, "c": 0, "d": 1})

    assert main(["-q", "draw", str(snapshot_file), "--assignment", str(assignment)]) == 1
    assert capsys.readouterr().out == ""


def test_schedule_requires_groups(snapshot_file):
    assert main(["-q", "schedule", str(snapshot_file)]) == 1


def test_unknown_group_for_standings(snapshot_file):
    assert main(["-q", "standings", str(snapshot_file), "--group", "nope"]) == 1


def test_missing_or_malformed_snapshot(tmp_path):
    assert main(["-q", "standings", str(tmp_path / "absent.json")]) == 1

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert main(["-q", "standings", str(broken)]) == 1

    no_config = _write(tmp_path / "empty.json", {"participants": []})
    assert main(["-q", "standings", str(no_config)]) == 1


def test_command_is_required():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
