from __future__ import annotations

import pandas as pd

from scouting_scheduler.domain.models import GeneratedSchedule
from scouting_scheduler.queries import get_scouter_stats
from scouting_scheduler.services.positions import get_positions


def scouter_stats_frame(schedule: GeneratedSchedule) -> pd.DataFrame:
    """Per-scouter totals with one column per position, roster order first."""
    positions = get_positions(schedule.event)
    stats = get_scouter_stats(schedule)

    # scouters with no assignment still get a zero row
    names = list(dict.fromkeys([*schedule.personnel.scouters, *stats]))
    rows = []
    for name in names:
        entry = stats.get(name)
        row = {"scouter": name, "total_matches": entry.total_matches if entry else 0}
        for position in positions:
            row[position] = entry.positions.get(position, 0) if entry else 0
        rows.append(row)

    return pd.DataFrame(rows, columns=["scouter", "total_matches", *positions]).set_index("scouter")


def turns_frame(schedule: GeneratedSchedule) -> pd.DataFrame:
    by_match = {m.match_number: m for m in schedule.schedule}
    rows = []
    for turn in schedule.shifts.turns:
        first = by_match.get(turn.start_match)
        rows.append({
            "turn": turn.turn,
            "start_match": turn.start_match,
            "end_match": turn.end_match,
            "matches": turn.match_count,
            "lead_scouter": first.lead_scouter if first else "",
            "camera": first.camera if first else "",
        })
    return pd.DataFrame(rows).set_index("turn")


def summarize_schedule(schedule: GeneratedSchedule) -> str:
    if not schedule.schedule:
        return "No matches scheduled."

    stats = scouter_stats_frame(schedule)
    unfilled = sum(1 for m in schedule.schedule for a in m.assignments if not a.scouter)

    lines = [f"Event: {schedule.event.local_label} ({schedule.event.total_matches} matches)"]
    lines.append("")
    lines.append("Turns:")
    lines.append(turns_frame(schedule).to_string())
    lines.append("")
    lines.append("Matches per scouter:")
    lines.append(stats.sort_values("total_matches", ascending=False, kind="stable").to_string())
    lines.append("")
    lines.append(
        f"Spread: {int(stats['total_matches'].min())}-{int(stats['total_matches'].max())} matches, "
        f"{unfilled} unfilled slot(s)"
    )
    return "\n".join(lines)
