"""Turn calculation from break points."""

from __future__ import annotations

from typing import Iterable, List

from scouting_scheduler.domain.models import ShiftConfig, Turn


def calculate_turns(total_matches: int, break_points: Iterable[int]) -> List[Turn]:
    """
    Split matches 1..total_matches into contiguous turns.

    A break point ``b`` ends a turn at match ``b``; the next turn starts at
    ``b + 1``. Break points outside ``1 <= b < total_matches`` are dropped
    without complaint. A repeated break point is used once, so it neither
    yields an empty turn nor advances the lead/camera rotation an extra step.
    The result always has at least one turn.

    Args:
        total_matches: Number of matches in the event
        break_points: Break points in any order

    Returns:
        Turns numbered from 1, in match order
    """
    valid = [b for b in sorted(break_points) if 0 < b < total_matches]

    turns: List[Turn] = []
    start_match = 1
    for break_point in valid:
        # a repeated break point would produce an empty turn
        if break_point < start_match:
            continue
        turns.append(Turn(turn=len(turns) + 1, start_match=start_match, end_match=break_point))
        start_match = break_point + 1

    turns.append(Turn(turn=len(turns) + 1, start_match=start_match, end_match=total_matches))
    return turns


def build_shift_config(total_matches: int, break_points: Iterable[int]) -> ShiftConfig:
    """Keep the break points as entered and attach the derived turns."""
    points = list(break_points)
    return ShiftConfig(break_points=points, turns=calculate_turns(total_matches, points))
