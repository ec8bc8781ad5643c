"""Read-only projections over a generated schedule for per-scouter views."""

from __future__ import annotations

from typing import Dict, List, Optional

from scouting_scheduler.domain.models import (
    GeneratedSchedule,
    MatchSchedule,
    ScouterStats,
    ScouterTurnAssignment,
    Turn,
    TurnBoundary,
    TurnMatchAssignment,
)


def get_match(schedule: GeneratedSchedule, match_number: int) -> Optional[MatchSchedule]:
    for match in schedule.schedule:
        if match.match_number == match_number:
            return match
    return None


def get_turn_for_match(schedule: GeneratedSchedule, match_number: int) -> Optional[Turn]:
    for turn in schedule.shifts.turns:
        if turn.contains(match_number):
            return turn
    return None


def get_all_scouter_names(schedule: GeneratedSchedule) -> List[str]:
    """Scouter roster in entry order."""
    return list(schedule.personnel.scouters)


def get_scouter_assignments(schedule: GeneratedSchedule, scouter_name: str) -> List[ScouterTurnAssignment]:
    """
    Group one scouter's matches by turn.

    Names compare case-insensitively. Turns where the scouter has no match
    are left out.
    """
    wanted = scouter_name.lower()
    result: List[ScouterTurnAssignment] = []

    for turn in schedule.shifts.turns:
        entries: List[TurnMatchAssignment] = []
        for match in schedule.schedule:
            if not turn.contains(match.match_number):
                continue
            hit = next((a for a in match.assignments if a.scouter.lower() == wanted), None)
            if hit is not None:
                entries.append(TurnMatchAssignment(
                    match_number=match.match_number,
                    position=hit.position,
                    team_number=hit.team_number,
                    lead_scouter=match.lead_scouter,
                ))

        if entries:
            result.append(ScouterTurnAssignment(
                turn=turn.turn,
                start_match=turn.start_match,
                end_match=turn.end_match,
                assignments=tuple(entries),
            ))

    return result


def is_last_match_of_turn(schedule: GeneratedSchedule, match_number: int, scouter_name: str) -> TurnBoundary:
    """Whether ``match_number`` is the scouter's final match in its turn."""
    for turn_assignment in get_scouter_assignments(schedule, scouter_name):
        if turn_assignment.last_match_number == match_number:
            return TurnBoundary(is_last=True, turn_number=turn_assignment.turn)
    return TurnBoundary(is_last=False, turn_number=None)


def get_next_scouter_for_position(
    schedule: GeneratedSchedule,
    current_match_number: int,
    position: str,
) -> Optional[str]:
    """Who scouts ``position`` in the following match; None if nobody or no such match."""
    next_match = get_match(schedule, current_match_number + 1)
    if next_match is None:
        return None
    return next_match.scouter_for(position) or None


def get_scouter_stats(schedule: GeneratedSchedule) -> Dict[str, ScouterStats]:
    """Total matches and per-position counts for every scouter with an assignment."""
    stats: Dict[str, ScouterStats] = {}
    for match in schedule.schedule:
        for assignment in match.assignments:
            if not assignment.scouter:
                continue
            entry = stats.setdefault(assignment.scouter, ScouterStats())
            entry.total_matches += 1
            entry.positions[assignment.position] = entry.positions.get(assignment.position, 0) + 1
    return stats
