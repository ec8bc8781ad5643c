"""Re-import of full schedule JSON exports."""

from __future__ import annotations

import json
from pathlib import Path

from scouting_scheduler.domain.models import GeneratedSchedule

REQUIRED_KEYS = ("event", "personnel", "shifts", "schedule")


class ScheduleFormatError(ValueError):
    """Raised when a schedule document is not valid JSON or lacks required parts."""


def parse_schedule_json(text: str) -> GeneratedSchedule:
    """
    Parse the full schedule JSON produced by ``export_full_schedule``.

    Raises:
        ScheduleFormatError: If the text is not JSON, a top-level key is
            missing, or a record inside it is malformed
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ScheduleFormatError(f"Invalid schedule JSON: {e}") from e

    if not isinstance(data, dict):
        raise ScheduleFormatError("Invalid schedule JSON structure: expected an object")

    missing = [key for key in REQUIRED_KEYS if data.get(key) is None]
    if missing:
        raise ScheduleFormatError(f"Invalid schedule JSON structure: missing {', '.join(missing)}")

    try:
        return GeneratedSchedule.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ScheduleFormatError(f"Invalid schedule record: {e}") from e


def load_schedule_file(path: str | Path) -> GeneratedSchedule:
    return parse_schedule_json(Path(path).read_text(encoding="utf-8"))
