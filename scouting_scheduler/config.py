"""Configuration loading (YAML or JSON) and program presets."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from scouting_scheduler.domain.models import EventConfig, Personnel, ScheduleConstraints

DEFAULT_DB_URL = "sqlite:///scouting_schedule.db"

# Slack factor K for the workload-balance audit
DEFAULT_IMBALANCE_SLACK_FACTOR = 2
DEFAULT_UNASSIGNED_EXAMPLE_LIMIT = 5

PROGRAMS = ("FTC", "FRC", "custom")

_EVENT_PRESETS: Dict[str, Dict[str, Any]] = {
    "FTC": {
        "local_label": "FTC Event 2026",
        "tba_label": "FTCScout",
        "amount_of_teams": 30,
        "matches_per_team": 5,
        "total_matches": 45,
        "teams_per_match": 4,
    },
    "FRC": {
        "local_label": "Regional MTY 2026",
        "tba_label": "2025mxmo",
        "amount_of_teams": 60,
        "matches_per_team": 8,
        "total_matches": 72,
        "teams_per_match": 6,
    },
}

_BREAK_POINT_PRESETS: Dict[str, List[int]] = {
    "FTC": [15, 30],
    "FRC": [20, 40],
}


def default_event_config(program: str = "FRC") -> EventConfig:
    """Event defaults for a program; ``custom`` starts from the FRC values."""
    preset = _EVENT_PRESETS.get(program.upper(), _EVENT_PRESETS["FRC"])
    return EventConfig(**preset)


def default_break_points(program: str = "FRC") -> List[int]:
    return list(_BREAK_POINT_PRESETS.get(program.upper(), _BREAK_POINT_PRESETS["FRC"]))


def default_personnel() -> Personnel:
    return Personnel(
        lead_scouters=[f"Lead Scouter {i}" for i in range(1, 4)],
        scouters=[f"Scouter {i}" for i in range(1, 7)],
        cameras=[f"Camera {i}" for i in range(1, 4)],
    )


@dataclass
class SchedulerConfig:
    """Inputs for one generation run plus the scheduler tunables."""

    program: str = "FRC"
    event: EventConfig = field(default_factory=default_event_config)
    personnel: Personnel = field(default_factory=default_personnel)
    break_points: List[int] = field(default_factory=default_break_points)
    max_matches_per_scouter: Optional[int] = None
    imbalance_slack_factor: int = DEFAULT_IMBALANCE_SLACK_FACTOR
    unassigned_example_limit: int = DEFAULT_UNASSIGNED_EXAMPLE_LIMIT
    db_url: str = DEFAULT_DB_URL
    log_level: str = "INFO"

    @property
    def constraints(self) -> ScheduleConstraints:
        return ScheduleConstraints(max_matches_per_scouter=self.max_matches_per_scouter)


_TOP_LEVEL_KEYS = {"program", "event", "personnel", "shifts", "constraints", "scheduler"}
_EVENT_KEYS = set(EventConfig.__dataclass_fields__)
_PERSONNEL_KEYS = {"lead_scouters", "scouters", "cameras"}
_SCHEDULER_KEYS = {"imbalance_slack_factor", "unassigned_example_limit", "db_url", "log_level"}


def _reject_unknown(section: str, data: Dict[str, Any], allowed: set) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValueError(f"Unknown keys in '{section}' section: {', '.join(unknown)}")


_EVENT_INT_KEYS = ("amount_of_teams", "matches_per_team", "total_matches", "teams_per_match")


def _coerce_event_fields(event_data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert numeric event values (YAML may quote them) to int."""
    coerced = dict(event_data)
    for key in _EVENT_INT_KEYS:
        if key not in coerced:
            continue
        try:
            coerced[key] = int(coerced[key])
        except (TypeError, ValueError) as e:
            raise ValueError(f"event.{key} must be an integer, got {coerced[key]!r}") from e
    for key in ("local_label", "tba_label", "alliance_blue", "alliance_red"):
        if key in coerced:
            coerced[key] = str(coerced[key])
    return coerced


def _read_mapping(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")
    return data


def config_from_mapping(data: Dict[str, Any]) -> SchedulerConfig:
    """Build a SchedulerConfig from already-parsed configuration data."""
    _reject_unknown("root", data, _TOP_LEVEL_KEYS)

    program = str(data.get("program", "FRC"))
    if program.upper() not in {p.upper() for p in PROGRAMS}:
        raise ValueError(f"Unknown program '{program}', expected one of {', '.join(PROGRAMS)}")

    event_data = data.get("event") or {}
    _reject_unknown("event", event_data, _EVENT_KEYS)
    base_event = default_event_config(program)
    event = EventConfig(**{**base_event.__dict__, **_coerce_event_fields(event_data)})

    personnel_data = data.get("personnel") or {}
    _reject_unknown("personnel", personnel_data, _PERSONNEL_KEYS)
    base_personnel = default_personnel()
    personnel = Personnel(
        lead_scouters=personnel_data.get("lead_scouters", base_personnel.lead_scouters),
        scouters=personnel_data.get("scouters", base_personnel.scouters),
        cameras=personnel_data.get("cameras", base_personnel.cameras),
    )

    shifts = data.get("shifts") or {}
    _reject_unknown("shifts", shifts, {"break_points"})
    break_points = [int(b) for b in shifts.get("break_points", default_break_points(program))]

    constraints = data.get("constraints") or {}
    _reject_unknown("constraints", constraints, {"max_matches_per_scouter"})
    cap = constraints.get("max_matches_per_scouter")
    if cap is not None:
        cap = int(cap)
        if cap <= 0:
            raise ValueError(f"max_matches_per_scouter must be positive, got {cap}")

    tunables = data.get("scheduler") or {}
    _reject_unknown("scheduler", tunables, _SCHEDULER_KEYS)

    return SchedulerConfig(
        program=program,
        event=event,
        personnel=personnel,
        break_points=break_points,
        max_matches_per_scouter=cap,
        imbalance_slack_factor=int(tunables.get("imbalance_slack_factor", DEFAULT_IMBALANCE_SLACK_FACTOR)),
        unassigned_example_limit=int(tunables.get("unassigned_example_limit", DEFAULT_UNASSIGNED_EXAMPLE_LIMIT)),
        db_url=str(tunables.get("db_url", DEFAULT_DB_URL)),
        log_level=str(tunables.get("log_level", "INFO")).upper(),
    )


def load_config(path: str | Path | None = None) -> SchedulerConfig:
    """Load configuration from a YAML or JSON file; no path means all defaults."""
    if path is None:
        return SchedulerConfig()
    return config_from_mapping(_read_mapping(Path(path)))
