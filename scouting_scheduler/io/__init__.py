"""I/O utilities for schedule export and import."""

from .export import (
    export_event_config,
    export_full_schedule,
    export_personnel,
    export_timetable_csv,
    write_exports,
)
from .import_csv import import_personnel_csv
from .import_json import ScheduleFormatError, load_schedule_file, parse_schedule_json
from .summary import scouter_stats_frame, summarize_schedule

__all__ = [
    "ScheduleFormatError",
    "export_event_config",
    "export_full_schedule",
    "export_personnel",
    "export_timetable_csv",
    "import_personnel_csv",
    "load_schedule_file",
    "parse_schedule_json",
    "scouter_stats_frame",
    "summarize_schedule",
    "write_exports",
]
