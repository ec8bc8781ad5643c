"""Turn-scoped greedy schedule generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from scouting_scheduler.config import (
    DEFAULT_IMBALANCE_SLACK_FACTOR,
    DEFAULT_UNASSIGNED_EXAMPLE_LIMIT,
    SchedulerConfig,
)
from scouting_scheduler.domain.models import (
    EventConfig,
    GeneratedSchedule,
    MatchAssignment,
    MatchSchedule,
    Personnel,
    ScheduleConstraints,
    ScheduleGenerationResult,
    ShiftConfig,
    Turn,
    ValidationError,
    warning,
)
from scouting_scheduler.services.fairness import (
    empty_counts,
    is_imbalanced,
    rank_scouters,
    workload_spread,
)
from scouting_scheduler.services.positions import get_positions
from scouting_scheduler.services.turns import build_shift_config
from scouting_scheduler.validator import validate_schedule_config

from .rotation import pick_round_robin

logger = logging.getLogger(__name__)


@dataclass
class _Workload:
    """Running counters for one generation pass; discarded afterwards."""

    turn_counts: Dict[str, int]
    match_counts: Dict[str, int]

    @classmethod
    def for_roster(cls, scouters: Sequence[str]) -> "_Workload":
        return cls(turn_counts=empty_counts(scouters), match_counts=empty_counts(scouters))

    def record(self, scouter: str, matches: int) -> None:
        self.turn_counts[scouter] = self.turn_counts.get(scouter, 0) + 1
        self.match_counts[scouter] = self.match_counts.get(scouter, 0) + matches


@dataclass
class _TurnCrew:
    lead_scouter: str
    camera: str
    scouters: List[str] = field(default_factory=list)


def _assign_turn(
    turn: Turn,
    positions: Sequence[str],
    scouters: Sequence[str],
    workload: _Workload,
    warnings: List[ValidationError],
) -> List[str]:
    """
    Pick one scouter per position for every match in ``turn``.

    Only turn counts drive the ordering. Match counts are recorded for the
    balance audit and never exclude anyone here.
    """
    matches_in_turn = turn.match_count
    ranked = rank_scouters(scouters, workload.turn_counts)

    chosen: List[str] = []
    for position in positions:
        pick = next((name for name in ranked if name not in chosen), None)
        if pick is None:
            chosen.append("")
            warnings.append(warning(
                f"No available scouter for Turn {turn.turn}, {position}",
                "Not enough scouters to cover all positions.",
            ))
            logger.debug("Turn %d: %s left unfilled", turn.turn, position)
            continue

        chosen.append(pick)
        workload.record(pick, matches_in_turn)

    logger.debug("Turn %d (%d-%d): %s", turn.turn, turn.start_match, turn.end_match, ", ".join(chosen))
    return chosen


def _build_matches(turn: Turn, positions: Sequence[str], crew: _TurnCrew) -> List[MatchSchedule]:
    return [
        MatchSchedule(
            match_number=match_number,
            lead_scouter=crew.lead_scouter,
            camera=crew.camera,
            assignments=[
                MatchAssignment(position=position, scouter=scouter, team_number=None)
                for position, scouter in zip(positions, crew.scouters)
            ],
        )
        for match_number in range(turn.start_match, turn.end_match + 1)
    ]


def _audit(
    event: EventConfig,
    personnel: Personnel,
    matches: Sequence[MatchSchedule],
    workload: _Workload,
    slack_factor: int,
    example_limit: int,
) -> List[ValidationError]:
    """Post-generation checks: unfilled slots and overall workload balance."""
    warnings: List[ValidationError] = []

    unassigned = [
        f"Match {m.match_number} - {a.position}"
        for m in matches
        for a in m.assignments
        if not a.scouter
    ]
    if unassigned:
        details = ", ".join(unassigned[:example_limit])
        if len(unassigned) > example_limit:
            details += "..."
        warnings.append(warning(f"{len(unassigned)} positions left unassigned", details))

    if is_imbalanced(workload.match_counts, event.total_matches, len(personnel.scouters), slack_factor):
        low, high = workload_spread(workload.match_counts)
        warnings.append(warning(
            "Uneven workload distribution",
            f"Match counts range from {low} to {high}. "
            "Consider adding more scouters or adjusting shifts.",
        ))

    return warnings


def generate_schedule(
    event: EventConfig,
    personnel: Personnel,
    shifts: ShiftConfig,
    constraints: ScheduleConstraints | None = None,
    *,
    imbalance_slack_factor: int = DEFAULT_IMBALANCE_SLACK_FACTOR,
    unassigned_example_limit: int = DEFAULT_UNASSIGNED_EXAMPLE_LIMIT,
) -> ScheduleGenerationResult:
    """
    Validate the configuration and, if feasible, build a full schedule.

    Turns are processed in order. Lead scouter and camera rotate once per
    turn. The scouters for a turn are chosen once, least-used first, and
    reused for every match in that turn.

    Args:
        event: Event parameters
        personnel: Rosters; never modified
        shifts: Break points and turns
        constraints: Optional per-scouter match cap, checked by the validator only
        imbalance_slack_factor: K in the workload-balance threshold
        unassigned_example_limit: Examples listed in the unfilled-slot warning

    Returns:
        ScheduleGenerationResult; ``schedule`` is None when validation failed
    """
    constraints = constraints or ScheduleConstraints()
    errors = validate_schedule_config(event, personnel, shifts, constraints)
    if errors:
        return ScheduleGenerationResult(success=False, schedule=None, errors=errors, warnings=[])

    positions = get_positions(event)
    workload = _Workload.for_roster(personnel.scouters)
    warnings: List[ValidationError] = []
    matches: List[MatchSchedule] = []

    for rotation_index, turn in enumerate(shifts.turns):
        crew = _TurnCrew(
            lead_scouter=pick_round_robin(personnel.lead_scouters, rotation_index),
            camera=pick_round_robin(personnel.cameras, rotation_index),
        )
        crew.scouters = _assign_turn(turn, positions, personnel.scouters, workload, warnings)
        matches.extend(_build_matches(turn, positions, crew))

    warnings.extend(_audit(
        event, personnel, matches, workload, imbalance_slack_factor, unassigned_example_limit
    ))

    schedule = GeneratedSchedule(event=event, personnel=personnel, shifts=shifts, schedule=matches)
    logger.info(
        "Generated %d matches across %d turns for %s (%d warning(s))",
        len(matches), len(shifts.turns), event.local_label, len(warnings),
    )
    return ScheduleGenerationResult(success=True, schedule=schedule, errors=[], warnings=warnings)


def generate_from_config(cfg: SchedulerConfig) -> ScheduleGenerationResult:
    """Derive turns from the configured break points and generate."""
    shifts = build_shift_config(cfg.event.total_matches, cfg.break_points)
    return generate_schedule(
        cfg.event,
        cfg.personnel,
        shifts,
        cfg.constraints,
        imbalance_slack_factor=cfg.imbalance_slack_factor,
        unassigned_example_limit=cfg.unassigned_example_limit,
    )
