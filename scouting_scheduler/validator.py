"""Feasibility checks run before a schedule is generated."""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Optional

from scouting_scheduler.domain.models import (
    EventConfig,
    Personnel,
    ScheduleConstraints,
    ShiftConfig,
    ValidationError,
    error,
)
from scouting_scheduler.services.positions import positions_per_match

logger = logging.getLogger(__name__)

CAPACITY_ERROR = "Max matches constraint cannot be satisfied"


def _check_roster_sizes(personnel: Personnel, positions: int) -> List[ValidationError]:
    errors: List[ValidationError] = []
    scouters = personnel.scouters

    if len(scouters) < positions:
        errors.append(error(
            "Not enough scouters",
            f"Need at least {positions} scouters to cover all positions, but only have {len(scouters)}.",
        ))

    if any(not name.strip() for name in scouters):
        errors.append(error("Empty scouter names", "All scouters must have a name."))

    if not personnel.lead_scouters:
        errors.append(error("No lead scouters", "At least one lead scouter is required."))

    if not personnel.cameras:
        errors.append(error("No camera operators", "At least one camera operator is required."))

    return errors


def _check_capacity(
    event: EventConfig,
    personnel: Personnel,
    constraints: ScheduleConstraints,
    positions: int,
) -> Optional[ValidationError]:
    cap = constraints.max_matches_per_scouter
    if cap is None:
        return None

    needed = event.total_matches * positions
    capacity = len(personnel.scouters) * cap
    if capacity >= needed:
        return None

    return error(
        CAPACITY_ERROR,
        f"Need {needed} total assignments ({event.total_matches} matches × {positions} positions), "
        f"but with {len(personnel.scouters)} scouters limited to {cap} matches each, "
        f"can only cover {capacity} assignments. "
        "Either add more scouters or increase the max matches limit.",
    )


def _check_turn_coverage(event: EventConfig, shifts: ShiftConfig) -> List[ValidationError]:
    if not shifts.turns:
        return [error("No turns defined", "Schedule must have at least one turn.")]

    errors: List[ValidationError] = []
    total = event.total_matches

    for turn in shifts.turns:
        if turn.start_match > turn.end_match:
            errors.append(error(
                "Inverted turn",
                f"Turn {turn.turn} starts at match {turn.start_match} after it ends at match {turn.end_match}.",
            ))
            break

    for turn in shifts.turns:
        if turn.start_match < 1 or turn.end_match > total:
            errors.append(error(
                "Turn out of range",
                f"Turn {turn.turn} spans matches {turn.start_match}-{turn.end_match}, "
                f"outside 1-{total}.",
            ))
            break

    covered: Counter = Counter()
    for turn in shifts.turns:
        covered.update(range(turn.start_match, turn.end_match + 1))

    for match_number in range(1, total + 1):
        if match_number not in covered:
            errors.append(error("Gaps in turn coverage", f"Match {match_number} is not covered by any turn."))
            break

    for match_number in range(1, total + 1):
        if covered[match_number] > 1:
            errors.append(error(
                "Overlapping turns",
                f"Match {match_number} is covered by {covered[match_number]} turns.",
            ))
            break

    return errors


def validate_schedule_config(
    event: EventConfig,
    personnel: Personnel,
    shifts: ShiftConfig,
    constraints: ScheduleConstraints | None = None,
) -> List[ValidationError]:
    """
    Check that a schedule can be generated from this configuration.

    Every check runs; nothing short-circuits, so the caller sees all
    problems at once. Only errors are produced here.

    Args:
        event: Event parameters
        personnel: Lead scouter, scouter and camera rosters
        shifts: Break points and the turns derived from them
        constraints: Optional per-scouter match cap

    Returns:
        List of blocking errors; empty when the configuration is feasible
    """
    constraints = constraints or ScheduleConstraints()
    positions = positions_per_match(event)

    errors = _check_roster_sizes(personnel, positions)
    capacity_error = _check_capacity(event, personnel, constraints, positions)
    if capacity_error is not None:
        errors.append(capacity_error)
    errors.extend(_check_turn_coverage(event, shifts))

    if errors:
        logger.info("Configuration for %s has %d blocking error(s)", event.local_label, len(errors))
    return errors
