"""Scouting crew scheduler for robotics competitions.

Modules:
- config: load configuration (YAML or JSON) and program presets
- domain: immutable schedule records, SQLAlchemy storage and repositories
- services: position derivation, turn calculation, fairness helpers
- validator: feasibility checks run before generation
- engine: turn-scoped greedy schedule generator
- queries: per-scouter projections over a generated schedule
- io: CSV/JSON export, JSON and roster CSV import, pandas summaries
- cli: command-line interface entrypoints
"""

from .domain.models import (
    EventConfig,
    GeneratedSchedule,
    Personnel,
    ScheduleConstraints,
    ScheduleGenerationResult,
    ShiftConfig,
    Turn,
    ValidationError,
)
from .engine.generator import generate_schedule
from .services.turns import build_shift_config, calculate_turns
from .validator import validate_schedule_config

__all__ = [
    "EventConfig",
    "GeneratedSchedule",
    "Personnel",
    "ScheduleConstraints",
    "ScheduleGenerationResult",
    "ShiftConfig",
    "Turn",
    "ValidationError",
    "build_shift_config",
    "calculate_turns",
    "generate_schedule",
    "validate_schedule_config",
]
