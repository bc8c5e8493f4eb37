"""
Report API schemas.

One explicitly typed row model per report; rows are computed on every
request and never persisted.
"""

import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class ReportType(str, Enum):
    ABOVE_AVERAGE_SESSIONS = "above-average-sessions"
    TOP_INSTRUCTORS = "top-instructors"
    MOST_ACTIVE_INSTRUCTORS = "most-active-instructors"
    BEHIND_SCHEDULE = "behind-schedule"


class TraineeSessionCountRow(BaseModel):
    """Trainee with an above-average number of completed practical sessions."""

    trainee_id: int
    first_name: str
    last_name: str
    total_sessions: int


class InstructorPassRateRow(BaseModel):
    instructor_id: int
    first_name: str
    last_name: str
    total_students: int
    passed_exams: int
    pass_rate: float = Field(..., description="passed_exams / total_students * 100")


class InstructorSessionLoadRow(BaseModel):
    instructor_id: int
    first_name: str
    last_name: str
    session_count: int


class TraineeScheduleDeviationRow(BaseModel):
    """Active trainee with fewer completed practical sessions than the mean."""

    trainee_id: int
    first_name: str
    last_name: str
    enrollment_date: datetime.date
    days_enrolled: int
    completed_sessions: int


ReportRow = Union[
    TraineeSessionCountRow,
    InstructorPassRateRow,
    InstructorSessionLoadRow,
    TraineeScheduleDeviationRow,
]


class ReportResponse(BaseModel):
    """A computed report.

    ``mean`` is the population average used as threshold (``None`` for
    the pass-rate ranking, or when no entity qualifies for the average).
    """

    report_type: ReportType
    title: str
    as_of: datetime.date
    mean: Optional[float] = None
    rows: list[ReportRow]
