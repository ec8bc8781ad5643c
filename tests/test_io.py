"""Tests for export and import."""

import json

import pytest

from scouting_scheduler.domain.models import Personnel
from scouting_scheduler.engine.generator import generate_schedule
from scouting_scheduler.io.export import (
    export_event_config,
    export_personnel,
    export_timetable_csv,
    write_exports,
)
from scouting_scheduler.io.import_csv import import_personnel_csv
from scouting_scheduler.io.import_json import ScheduleFormatError, load_schedule_file, parse_schedule_json
from scouting_scheduler.io.summary import scouter_stats_frame, summarize_schedule


def test_timetable_csv(eight_scouter_schedule):
    lines = export_timetable_csv(eight_scouter_schedule).split("\n")

    assert lines[0] == "Match #,Lead Scouter,Camera,Blue 1,Blue 2,Blue 3,Red 1,Red 2,Red 3"
    assert lines[1] == "1,L1,C1,S1,S2,S3,S4,S5,S6"
    assert lines[21] == "21,L2,C2,S7,S8,S1,S2,S3,S4"
    assert len(lines) == 73


def test_timetable_csv_leaves_unfilled_slots_empty(frc_event, three_turns):
    personnel = Personnel(["L1"], ["A", "A", "B", "C", "D", "E"], ["C1"])
    schedule = generate_schedule(frc_event, personnel, three_turns).schedule
    lines = export_timetable_csv(schedule).split("\n")
    assert lines[1] == "1,L1,C1,A,B,C,D,E,"


def test_event_and_personnel_json(eight_scouter_schedule):
    event = json.loads(export_event_config(eight_scouter_schedule))
    assert event["totalMatches"] == 72
    assert event["teamsPerMatch"] == 6
    assert event["allianceBlue"] == "Blue"

    personnel = json.loads(export_personnel(eight_scouter_schedule))
    assert personnel["scouters"] == [f"S{i}" for i in range(1, 9)]
    assert personnel["leadScouters"] == ["L1", "L2"]


def test_full_schedule_json_shape(eight_scouter_schedule, tmp_path):
    written = write_exports(eight_scouter_schedule, tmp_path / "out")

    assert sorted(p.name for p in written.values()) == [
        "event_config.json", "full_schedule.json", "personnel.json", "timetable.csv",
    ]
    data = json.loads(written["full"].read_text(encoding="utf-8"))
    assert set(data) == {"event", "personnel", "shifts", "schedule"}
    assert data["shifts"]["breakPoints"] == [20, 40]
    assert data["shifts"]["turns"][2] == {"turn": 3, "startMatch": 41, "endMatch": 72}
    assert data["schedule"][0]["assignments"][0] == {"position": "Blue 1", "scouter": "S1", "teamNumber": None}
    assert load_schedule_file(written["full"]) == eight_scouter_schedule


def test_parse_rejects_invalid_json():
    with pytest.raises(ScheduleFormatError):
        parse_schedule_json("{not json")


def test_parse_rejects_missing_sections(eight_scouter_schedule):
    data = eight_scouter_schedule.to_dict()
    del data["shifts"]
    with pytest.raises(ScheduleFormatError, match="shifts"):
        parse_schedule_json(json.dumps(data))


def test_parse_rejects_malformed_records(eight_scouter_schedule):
    data = eight_scouter_schedule.to_dict()
    del data["event"]["totalMatches"]
    with pytest.raises(ValueError):
        parse_schedule_json(json.dumps(data))


def test_import_personnel_csv(tmp_path):
    csv_file = tmp_path / "roster.csv"
    csv_file.write_text(
        "Role,Name\n"
        "lead,Ana\n"
        "Scouter,Diego\n"
        "camera operator,Luis\n"
        "scouter, Elena \n"
        "Lead Scouter,Bruno\n"
        "scouter,\n"
    )
    personnel = import_personnel_csv(csv_file)

    assert personnel.lead_scouters == ("Ana", "Bruno")
    assert personnel.scouters == ("Diego", "Elena", "")
    assert personnel.cameras == ("Luis",)


def test_import_personnel_csv_unknown_role(tmp_path):
    csv_file = tmp_path / "roster.csv"
    csv_file.write_text("role,name\ndriver,Zed\n")
    with pytest.raises(ValueError, match="driver"):
        import_personnel_csv(csv_file)


def test_import_personnel_csv_missing_column(tmp_path):
    csv_file = tmp_path / "roster.csv"
    csv_file.write_text("name\nZed\n")
    with pytest.raises(ValueError, match="role"):
        import_personnel_csv(csv_file)


def test_stats_frame(eight_scouter_schedule):
    frame = scouter_stats_frame(eight_scouter_schedule)

    assert list(frame.index) == [f"S{i}" for i in range(1, 9)]
    assert frame.loc["S1", "total_matches"] == 72
    assert frame.loc["S3", "Red 2"] == 20
    assert frame.loc["S3", "Blue 1"] == 0


def test_summary_text(eight_scouter_schedule):
    text = summarize_schedule(eight_scouter_schedule)
    assert "Turns:" in text
    assert "Matches per scouter:" in text
    assert "Spread: 40-72 matches, 0 unfilled slot(s)" in text
