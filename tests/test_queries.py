"""Tests for per-scouter queries over a generated schedule."""

from scouting_scheduler.domain.models import Personnel, TurnBoundary
from scouting_scheduler.engine.generator import generate_schedule
from scouting_scheduler.io.export import export_full_schedule
from scouting_scheduler.io.import_json import parse_schedule_json
from scouting_scheduler.queries import (
    get_all_scouter_names,
    get_match,
    get_next_scouter_for_position,
    get_scouter_assignments,
    get_scouter_stats,
    get_turn_for_match,
    is_last_match_of_turn,
)


def test_assignments_grouped_by_turn(eight_scouter_schedule):
    turns = get_scouter_assignments(eight_scouter_schedule, "S1")

    assert [t.turn for t in turns] == [1, 2, 3]
    assert [(t.start_match, t.end_match) for t in turns] == [(1, 20), (21, 40), (41, 72)]
    assert {a.position for a in turns[0].assignments} == {"Blue 1"}
    assert {a.position for a in turns[1].assignments} == {"Blue 3"}
    assert {a.position for a in turns[2].assignments} == {"Red 2"}
    assert [a.match_number for a in turns[0].assignments] == list(range(1, 21))
    assert turns[1].assignments[0].lead_scouter == "L2"


def test_turns_without_matches_are_omitted(eight_scouter_schedule):
    turns = get_scouter_assignments(eight_scouter_schedule, "S3")
    assert [t.turn for t in turns] == [1, 2]
    assert turns[1].assignments[0].position == "Red 2"


def test_name_lookup_ignores_case(eight_scouter_schedule):
    assert get_scouter_assignments(eight_scouter_schedule, "s7") == get_scouter_assignments(
        eight_scouter_schedule, "S7"
    )
    assert get_scouter_assignments(eight_scouter_schedule, "nobody") == []


def test_last_match_of_turn(eight_scouter_schedule):
    assert is_last_match_of_turn(eight_scouter_schedule, 20, "S1") == TurnBoundary(True, 1)
    assert is_last_match_of_turn(eight_scouter_schedule, 19, "S1") == TurnBoundary(False, None)
    assert is_last_match_of_turn(eight_scouter_schedule, 40, "s3") == TurnBoundary(True, 2)
    assert is_last_match_of_turn(eight_scouter_schedule, 72, "S1") == TurnBoundary(True, 3)
    assert is_last_match_of_turn(eight_scouter_schedule, 72, "S3") == TurnBoundary(False, None)


def test_next_scouter_for_position(eight_scouter_schedule):
    assert get_next_scouter_for_position(eight_scouter_schedule, 5, "Blue 1") == "S1"
    assert get_next_scouter_for_position(eight_scouter_schedule, 20, "Blue 1") == "S7"
    assert get_next_scouter_for_position(eight_scouter_schedule, 1, "Purple 9") is None


def test_no_next_scouter_after_final_match(eight_scouter_schedule):
    assert get_next_scouter_for_position(eight_scouter_schedule, 72, "Blue 1") is None


def test_next_scouter_for_unfilled_position(frc_event, three_turns):
    personnel = Personnel(["L1"], ["A", "A", "B", "C", "D", "E"], ["C1"])
    schedule = generate_schedule(frc_event, personnel, three_turns).schedule
    assert get_next_scouter_for_position(schedule, 40, "Red 3") is None
    assert get_next_scouter_for_position(schedule, 40, "Blue 1") == "A"


def test_scouter_stats(eight_scouter_schedule):
    stats = get_scouter_stats(eight_scouter_schedule)

    assert stats["S1"].total_matches == 72
    assert stats["S1"].positions == {"Blue 1": 20, "Blue 3": 20, "Red 2": 32}
    assert stats["S3"].total_matches == 40
    assert sum(s.total_matches for s in stats.values()) == 72 * 6


def test_roster_and_lookup_helpers(eight_scouter_schedule):
    assert get_all_scouter_names(eight_scouter_schedule) == [f"S{i}" for i in range(1, 9)]
    assert get_turn_for_match(eight_scouter_schedule, 21).turn == 2
    assert get_turn_for_match(eight_scouter_schedule, 99) is None
    assert get_match(eight_scouter_schedule, 99) is None


def test_queries_match_after_json_round_trip(eight_scouter_schedule):
    reloaded = parse_schedule_json(export_full_schedule(eight_scouter_schedule))

    assert reloaded == eight_scouter_schedule
    for name in ("S1", "S5", "s8"):
        assert get_scouter_assignments(reloaded, name) == get_scouter_assignments(eight_scouter_schedule, name)
        for n in (1, 20, 40, 72):
            assert is_last_match_of_turn(reloaded, n, name) == is_last_match_of_turn(eight_scouter_schedule, n, name)
    for n in (1, 20, 40, 71, 72):
        assert get_next_scouter_for_position(reloaded, n, "Red 1") == get_next_scouter_for_position(
            eight_scouter_schedule, n, "Red 1"
        )
    assert get_scouter_stats(reloaded) == get_scouter_stats(eight_scouter_schedule)
