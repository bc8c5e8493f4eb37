"""Exam database model (read-only for the scheduling core)."""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class ExamStatus(str, Enum):
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    PASSED = "Passed"
    FAILED = "Failed"


class Exam(SQLModel, table=True):
    __tablename__ = "exams"

    id: Optional[int] = Field(default=None, primary_key=True)
    exam_type: str = Field(nullable=False, max_length=20)
    scheduled_date: datetime.date = Field(nullable=False, index=True)
    status: str = Field(default=ExamStatus.SCHEDULED.value, nullable=False, max_length=20)
    trainee_id: int = Field(foreign_key="trainees.id", nullable=False, index=True)

    def is_upcoming(self, today: datetime.date) -> bool:
        """Still scheduled and dated ``today`` or later."""
        return self.status == ExamStatus.SCHEDULED.value and self.scheduled_date >= today
