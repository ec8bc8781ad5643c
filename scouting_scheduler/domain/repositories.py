"""Repository classes for stored schedules."""

from __future__ import annotations

import json
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from .models import GeneratedSchedule, ValidationError
from .records import ScheduleRecord


class ScheduleRepository:
    """Save and load generated schedules as opaque JSON documents."""

    @staticmethod
    def save(
        session: Session,
        schedule: GeneratedSchedule,
        warnings: Sequence[ValidationError] = (),
    ) -> ScheduleRecord:
        """Persist a schedule. Each call stores a new record."""
        record = ScheduleRecord(
            event_label=schedule.event.local_label,
            total_matches=schedule.event.total_matches,
            warning_count=len(warnings),
            document=json.dumps(schedule.to_dict()),
        )
        session.add(record)
        session.commit()
        session.refresh(record)
        return record

    @staticmethod
    def get_by_id(session: Session, record_id: int) -> Optional[ScheduleRecord]:
        """Get record by ID."""
        return session.query(ScheduleRecord).filter(ScheduleRecord.id == record_id).first()

    @staticmethod
    def get_latest(session: Session) -> Optional[ScheduleRecord]:
        """Get the most recently stored record."""
        return session.query(ScheduleRecord).order_by(ScheduleRecord.id.desc()).first()

    @staticmethod
    def get_all(session: Session) -> List[ScheduleRecord]:
        """Get all records, oldest first."""
        return session.query(ScheduleRecord).order_by(ScheduleRecord.id).all()

    @staticmethod
    def get_by_event(session: Session, event_label: str) -> List[ScheduleRecord]:
        """Get all records for one event label, oldest first."""
        return (
            session.query(ScheduleRecord)
            .filter(ScheduleRecord.event_label == event_label)
            .order_by(ScheduleRecord.id)
            .all()
        )

    @staticmethod
    def delete(session: Session, record_id: int) -> int:
        """Delete one record. Returns number of deleted rows."""
        count = (
            session.query(ScheduleRecord)
            .filter(ScheduleRecord.id == record_id)
            .delete(synchronize_session=False)
        )
        session.commit()
        return count

    @staticmethod
    def load(record: ScheduleRecord) -> GeneratedSchedule:
        """Rebuild the schedule stored in a record."""
        return GeneratedSchedule.from_dict(json.loads(record.document))
