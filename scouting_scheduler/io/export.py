"""Text, CSV and JSON exports of a generated schedule."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

from scouting_scheduler.domain.models import GeneratedSchedule
from scouting_scheduler.services.positions import get_positions

logger = logging.getLogger(__name__)

EXPORT_FILENAMES = {
    "event": "event_config.json",
    "personnel": "personnel.json",
    "timetable": "timetable.csv",
    "full": "full_schedule.json",
}


def export_timetable_csv(schedule: GeneratedSchedule) -> str:
    """
    One header row then one row per match, scouters in position order.

    Fields are comma-joined without quoting; names are assumed comma-free.
    """
    header = ["Match #", "Lead Scouter", "Camera", *get_positions(schedule.event)]
    rows = [",".join(header)]
    for match in schedule.schedule:
        row = [
            str(match.match_number),
            match.lead_scouter,
            match.camera,
            *(a.scouter for a in match.assignments),
        ]
        rows.append(",".join(row))
    return "\n".join(rows)


def export_event_config(schedule: GeneratedSchedule) -> str:
    return json.dumps(schedule.event.to_dict(), indent=2, ensure_ascii=False)


def export_personnel(schedule: GeneratedSchedule) -> str:
    return json.dumps(schedule.personnel.to_dict(), indent=2, ensure_ascii=False)


def export_full_schedule(schedule: GeneratedSchedule) -> str:
    return json.dumps(schedule.to_dict(), indent=2, ensure_ascii=False)


def write_exports(schedule: GeneratedSchedule, out_dir: str | Path) -> Dict[str, Path]:
    """Write all four export files into ``out_dir``. Returns kind -> path."""
    directory = Path(out_dir)
    directory.mkdir(parents=True, exist_ok=True)

    contents = {
        "event": export_event_config(schedule),
        "personnel": export_personnel(schedule),
        "timetable": export_timetable_csv(schedule),
        "full": export_full_schedule(schedule),
    }

    written: Dict[str, Path] = {}
    for kind, text in contents.items():
        path = directory / EXPORT_FILENAMES[kind]
        path.write_text(text, encoding="utf-8")
        written[kind] = path

    logger.info("Exported %d files to %s", len(written), directory)
    return written
