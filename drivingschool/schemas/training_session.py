"""
Training session API schemas.

Business rules (roster, time range, feedback) are checked at the service
layer so that they surface as ``InvalidError`` rather than as schema
validation errors; these models only describe shapes.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from drivingschool.models.training_session import SessionStatus, SessionType


class SessionCreate(BaseModel):
    """Schema for scheduling a session."""

    session_type: SessionType = Field(..., description="'Practical' or 'Theoretical'")
    start_datetime: Optional[datetime.datetime] = Field(None, description="Session start")
    end_datetime: Optional[datetime.datetime] = Field(None, description="Session end (after start)")
    status: Optional[str] = Field(None, description="Defaults to 'Scheduled'")
    instructor_feedback: Optional[str] = Field(None, max_length=2000)
    instructor_id: int = Field(..., description="Teaching instructor")
    trainee_id: Optional[int] = Field(
        None, description="Required for practical sessions, ignored for theoretical ones"
    )


class SessionUpdate(BaseModel):
    """Schema for updating a session (unset fields keep their value)."""

    session_type: Optional[SessionType] = None
    start_datetime: Optional[datetime.datetime] = None
    end_datetime: Optional[datetime.datetime] = None
    status: Optional[str] = None
    instructor_feedback: Optional[str] = Field(None, max_length=2000)
    instructor_id: Optional[int] = None
    trainee_id: Optional[int] = None


class SessionStatusChange(BaseModel):
    status: str


class SessionFeedback(BaseModel):
    feedback: str = Field(..., max_length=2000)


class SessionFilter(BaseModel):
    """Listing filter; set fields are combined with AND."""

    session_type: Optional[SessionType] = None
    status: Optional[SessionStatus] = None
    instructor_id: Optional[int] = None
    trainee_id: Optional[int] = Field(
        None, description="Matches practical assignment and theoretical enrollment"
    )


# Response schemas
class SessionResponse(BaseModel):
    """Bare session row."""

    id: int
    session_type: SessionType
    start_datetime: datetime.datetime
    end_datetime: datetime.datetime
    status: SessionStatus
    instructor_feedback: Optional[str]
    instructor_id: int
    trainee_id: Optional[int]
    duration_hours: float

    class Config:
        from_attributes = True


class SessionDetailResponse(SessionResponse):
    """Session row with joined names and theoretical roster size."""

    instructor_name: Optional[str]
    trainee_name: Optional[str]
    trainee_count: int


class SessionStatsResponse(BaseModel):
    total_sessions: int
    scheduled_sessions: int
    completed_sessions: int
    practical_sessions: int
    theoretical_sessions: int
