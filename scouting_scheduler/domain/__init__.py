"""Domain models and data access layer."""

from .models import (
    EventConfig,
    GeneratedSchedule,
    MatchAssignment,
    MatchSchedule,
    Personnel,
    ScheduleConstraints,
    ScheduleGenerationResult,
    ScouterStats,
    ScouterTurnAssignment,
    Severity,
    ShiftConfig,
    Turn,
    TurnBoundary,
    TurnMatchAssignment,
    ValidationError,
)
from .records import Base, ScheduleRecord
from .repositories import ScheduleRepository

__all__ = [
    "EventConfig",
    "GeneratedSchedule",
    "MatchAssignment",
    "MatchSchedule",
    "Personnel",
    "ScheduleConstraints",
    "ScheduleGenerationResult",
    "ScouterStats",
    "ScouterTurnAssignment",
    "Severity",
    "ShiftConfig",
    "Turn",
    "TurnBoundary",
    "TurnMatchAssignment",
    "ValidationError",
    "Base",
    "ScheduleRecord",
    "ScheduleRepository",
]
