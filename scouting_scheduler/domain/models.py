"""Immutable records for events, personnel, turns and generated schedules.

Every record serializes to the JSON shape the scouting app persists and
exchanges (camelCase keys); ``from_dict(to_dict(x)) == x`` holds for all of
them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


def _names(values: Iterable[str]) -> Tuple[str, ...]:
    return tuple(str(v) for v in values)


@dataclass(frozen=True)
class EventConfig:
    """Competition parameters that drive position and turn derivation."""

    local_label: str
    tba_label: str
    amount_of_teams: int
    matches_per_team: int
    total_matches: int
    teams_per_match: int
    alliance_blue: str = "Blue"
    alliance_red: str = "Red"
    is_practice: bool = False

    def __post_init__(self) -> None:
        if self.total_matches <= 0:
            raise ValueError(f"total_matches must be positive, got {self.total_matches}")
        if self.teams_per_match < 2 or self.teams_per_match % 2:
            raise ValueError(
                f"teams_per_match must be an even number >= 2, got {self.teams_per_match}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "localLabel": self.local_label,
            "tbaLabel": self.tba_label,
            "amountOfTeams": self.amount_of_teams,
            "matchesPerTeam": self.matches_per_team,
            "totalMatches": self.total_matches,
            "teamsPerMatch": self.teams_per_match,
            "allianceBlue": self.alliance_blue,
            "allianceRed": self.alliance_red,
            "isPractice": self.is_practice,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventConfig":
        return cls(
            local_label=str(data.get("localLabel", "")),
            tba_label=str(data.get("tbaLabel", "")),
            amount_of_teams=int(data.get("amountOfTeams", 0)),
            matches_per_team=int(data.get("matchesPerTeam", 0)),
            total_matches=int(data["totalMatches"]),
            teams_per_match=int(data["teamsPerMatch"]),
            alliance_blue=str(data.get("allianceBlue", "Blue")),
            alliance_red=str(data.get("allianceRed", "Red")),
            is_practice=bool(data.get("isPractice", False)),
        )


@dataclass(frozen=True)
class Personnel:
    """The three rosters. Names are kept in the order they were entered."""

    lead_scouters: Tuple[str, ...]
    scouters: Tuple[str, ...]
    cameras: Tuple[str, ...]

    def __post_init__(self) -> None:
        # accept lists from callers, store tuples
        object.__setattr__(self, "lead_scouters", _names(self.lead_scouters))
        object.__setattr__(self, "scouters", _names(self.scouters))
        object.__setattr__(self, "cameras", _names(self.cameras))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "leadScouters": list(self.lead_scouters),
            "scouters": list(self.scouters),
            "cameras": list(self.cameras),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Personnel":
        return cls(
            lead_scouters=data.get("leadScouters", []),
            scouters=data.get("scouters", []),
            cameras=data.get("cameras", []),
        )


@dataclass(frozen=True)
class Turn:
    """A contiguous, inclusive range of matches worked by one crew."""

    turn: int
    start_match: int
    end_match: int

    @property
    def match_count(self) -> int:
        return self.end_match - self.start_match + 1

    def contains(self, match_number: int) -> bool:
        return self.start_match <= match_number <= self.end_match

    def to_dict(self) -> Dict[str, Any]:
        return {"turn": self.turn, "startMatch": self.start_match, "endMatch": self.end_match}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Turn":
        return cls(
            turn=int(data["turn"]),
            start_match=int(data["startMatch"]),
            end_match=int(data["endMatch"]),
        )


@dataclass(frozen=True)
class ShiftConfig:
    """Break points as entered plus the turns derived from them."""

    break_points: Tuple[int, ...]
    turns: Tuple[Turn, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "break_points", tuple(int(b) for b in self.break_points))
        object.__setattr__(self, "turns", tuple(self.turns))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "breakPoints": list(self.break_points),
            "turns": [t.to_dict() for t in self.turns],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShiftConfig":
        return cls(
            break_points=data.get("breakPoints", []),
            turns=[Turn.from_dict(t) for t in data.get("turns", [])],
        )


@dataclass(frozen=True)
class ScheduleConstraints:
    max_matches_per_scouter: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"maxMatchesPerScouter": self.max_matches_per_scouter}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleConstraints":
        cap = data.get("maxMatchesPerScouter")
        return cls(max_matches_per_scouter=None if cap is None else int(cap))


@dataclass(frozen=True)
class MatchAssignment:
    """One position in one match. An empty scouter marks an unfilled slot."""

    position: str
    scouter: str = ""
    team_number: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"position": self.position, "scouter": self.scouter, "teamNumber": self.team_number}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchAssignment":
        team = data.get("teamNumber")
        return cls(
            position=str(data["position"]),
            scouter=str(data.get("scouter") or ""),
            team_number=None if team is None else int(team),
        )


@dataclass(frozen=True)
class MatchSchedule:
    match_number: int
    lead_scouter: str
    camera: str
    assignments: Tuple[MatchAssignment, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "assignments", tuple(self.assignments))

    def scouter_for(self, position: str) -> Optional[str]:
        for assignment in self.assignments:
            if assignment.position == position:
                return assignment.scouter
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matchNumber": self.match_number,
            "leadScouter": self.lead_scouter,
            "camera": self.camera,
            "assignments": [a.to_dict() for a in self.assignments],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchSchedule":
        return cls(
            match_number=int(data["matchNumber"]),
            lead_scouter=str(data.get("leadScouter") or ""),
            camera=str(data.get("camera") or ""),
            assignments=[MatchAssignment.from_dict(a) for a in data.get("assignments", [])],
        )


@dataclass(frozen=True)
class GeneratedSchedule:
    """Everything needed to render, export or query one generated schedule."""

    event: EventConfig
    personnel: Personnel
    shifts: ShiftConfig
    schedule: Tuple[MatchSchedule, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "schedule", tuple(self.schedule))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event": self.event.to_dict(),
            "personnel": self.personnel.to_dict(),
            "shifts": self.shifts.to_dict(),
            "schedule": [m.to_dict() for m in self.schedule],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratedSchedule":
        return cls(
            event=EventConfig.from_dict(data["event"]),
            personnel=Personnel.from_dict(data["personnel"]),
            shifts=ShiftConfig.from_dict(data["shifts"]),
            schedule=[MatchSchedule.from_dict(m) for m in data["schedule"]],
        )


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationError:
    """A blocking error or an advisory warning, reported as data."""

    severity: Severity
    message: str
    details: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.severity.value, "message": self.message, "details": self.details}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationError":
        return cls(
            severity=Severity(data["type"]),
            message=str(data["message"]),
            details=data.get("details"),
        )

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


def error(message: str, details: Optional[str] = None) -> ValidationError:
    return ValidationError(Severity.ERROR, message, details)


def warning(message: str, details: Optional[str] = None) -> ValidationError:
    return ValidationError(Severity.WARNING, message, details)


@dataclass(frozen=True)
class ScheduleGenerationResult:
    success: bool
    schedule: Optional[GeneratedSchedule]
    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[ValidationError] = field(default_factory=list)


@dataclass(frozen=True)
class TurnMatchAssignment:
    match_number: int
    position: str
    team_number: Optional[int]
    lead_scouter: str


@dataclass(frozen=True)
class ScouterTurnAssignment:
    """A scouter's matches inside one turn, in match order."""

    turn: int
    start_match: int
    end_match: int
    assignments: Tuple[TurnMatchAssignment, ...]

    @property
    def last_match_number(self) -> Optional[int]:
        return self.assignments[-1].match_number if self.assignments else None


@dataclass(frozen=True)
class TurnBoundary:
    is_last: bool
    turn_number: Optional[int]


@dataclass
class ScouterStats:
    total_matches: int = 0
    positions: Dict[str, int] = field(default_factory=dict)
