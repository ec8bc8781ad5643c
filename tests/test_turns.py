"""Tests for turn calculation."""

import pytest

from scouting_scheduler.domain.models import Turn
from scouting_scheduler.services.turns import build_shift_config, calculate_turns


def _covered(turns):
    matches = []
    for turn in turns:
        matches.extend(range(turn.start_match, turn.end_match + 1))
    return matches


def test_regional_break_points():
    turns = calculate_turns(72, [20, 40])
    assert turns == [Turn(1, 1, 20), Turn(2, 21, 40), Turn(3, 41, 72)]


def test_no_break_points_gives_single_turn():
    assert calculate_turns(45, []) == [Turn(1, 1, 45)]


def test_unsorted_and_out_of_range_points_are_dropped():
    turns = calculate_turns(10, [7, 0, -3, 10, 12, 3])
    assert turns == [Turn(1, 1, 3), Turn(2, 4, 7), Turn(3, 8, 10)]


def test_repeated_break_point_does_not_create_empty_turn():
    turns = calculate_turns(10, [5, 5])
    assert turns == [Turn(1, 1, 5), Turn(2, 6, 10)]


def test_single_match_event():
    assert calculate_turns(1, [1]) == [Turn(1, 1, 1)]


@pytest.mark.parametrize(
    "total,breaks",
    [
        (72, [20, 40]),
        (45, [15, 30]),
        (10, [1, 2, 3, 9]),
        (10, [9, 1]),
        (30, [0, 30, 31, -1]),
        (12, [6, 6, 6]),
        (5, []),
    ],
)
def test_turns_partition_the_match_range(total, breaks):
    turns = calculate_turns(total, breaks)
    assert _covered(turns) == list(range(1, total + 1))
    assert [t.turn for t in turns] == list(range(1, len(turns) + 1))
    for point in breaks:
        if point <= 0 or point >= total:
            assert point not in [t.end_match for t in turns[:-1]]


def test_build_shift_config_keeps_points_as_entered():
    shifts = build_shift_config(72, [40, 20, 99])
    assert shifts.break_points == (40, 20, 99)
    assert [t.end_match for t in shifts.turns] == [20, 40, 72]


def test_turn_helpers():
    turn = Turn(2, 21, 40)
    assert turn.match_count == 20
    assert turn.contains(21) and turn.contains(40)
    assert not turn.contains(41)
