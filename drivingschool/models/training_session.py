"""
Training session database model.

A session is either *Practical* (one instructor, one trainee) or
*Theoretical* (one instructor, a roster of trainees held in the
``trainee_sessions`` join table).  ``trainee_id`` is therefore only
populated for practical sessions.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class SessionType(str, Enum):
    PRACTICAL = "Practical"
    THEORETICAL = "Theoretical"


class SessionStatus(str, Enum):
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"


# Allowed status changes (same-state changes are no-ops)
STATUS_TRANSITIONS: dict[SessionStatus, set[SessionStatus]] = {
    SessionStatus.SCHEDULED: {SessionStatus.SCHEDULED, SessionStatus.COMPLETED},
    SessionStatus.COMPLETED: {SessionStatus.COMPLETED, SessionStatus.SCHEDULED},
}


def duration_hours(start: datetime.datetime, end: datetime.datetime) -> float:
    """Whole minutes between ``start`` and ``end`` expressed in hours."""
    minutes = int((end - start).total_seconds() // 60)
    return minutes / 60.0


class TrainingSession(SQLModel, table=True):
    """A scheduled practical or theoretical lesson."""

    __tablename__ = "sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    session_type: str = Field(nullable=False, max_length=20, index=True)
    start_datetime: datetime.datetime = Field(sa_type=DateTime(timezone=False), nullable=False, index=True)
    end_datetime: datetime.datetime = Field(sa_type=DateTime(timezone=False), nullable=False)
    status: str = Field(default=SessionStatus.SCHEDULED.value, nullable=False, max_length=20, index=True)
    instructor_feedback: Optional[str] = Field(default=None, max_length=2000)

    instructor_id: int = Field(foreign_key="instructors.id", nullable=False, index=True)
    # NULL for theoretical sessions
    trainee_id: Optional[int] = Field(default=None, foreign_key="trainees.id", index=True)

    @property
    def is_practical(self) -> bool:
        return self.session_type == SessionType.PRACTICAL.value

    @property
    def is_theoretical(self) -> bool:
        return self.session_type == SessionType.THEORETICAL.value

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED.value

    @property
    def is_scheduled(self) -> bool:
        return self.status == SessionStatus.SCHEDULED.value

    @property
    def duration_hours(self) -> float:
        return duration_hours(self.start_datetime, self.end_datetime)

    def is_upcoming(self, now: datetime.datetime) -> bool:
        """Scheduled and starting strictly after ``now``."""
        return self.is_scheduled and self.start_datetime > now
