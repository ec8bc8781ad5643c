"""SQLAlchemy models for stored schedules."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class ScheduleRecord(Base):
    """A generated schedule stored as its exported JSON document."""

    __tablename__ = "generated_schedules"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_label = Column(String(200), nullable=False, index=True)
    total_matches = Column(Integer, nullable=False)
    warning_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=_utcnow)
    document = Column(Text, nullable=False)  # full schedule JSON

    def __repr__(self) -> str:
        return (
            f"<ScheduleRecord(id={self.id}, event='{self.event_label}', "
            f"matches={self.total_matches}, warnings={self.warning_count})>"
        )
