"""Per-match position labels derived from the alliance layout."""

from __future__ import annotations

from typing import List

from scouting_scheduler.domain.models import EventConfig


def get_positions(event: EventConfig) -> List[str]:
    """
    Position labels for one match, blue alliance first.

    FRC (6 teams) -> Blue 1, Blue 2, Blue 3, Red 1, Red 2, Red 3
    FTC (4 teams) -> Blue 1, Blue 2, Red 1, Red 2
    """
    per_alliance = event.teams_per_match // 2
    blue = [f"{event.alliance_blue} {slot}" for slot in range(1, per_alliance + 1)]
    red = [f"{event.alliance_red} {slot}" for slot in range(1, per_alliance + 1)]
    return blue + red


def positions_per_match(event: EventConfig) -> int:
    return len(get_positions(event))
