"""
Dashboard API schemas.

Per-role summary statistics assembled by the dashboard aggregator.
"""

import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from drivingschool.schemas.training_session import SessionResponse


class DashboardRole(str, Enum):
    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    TRAINEE = "trainee"


# ---------------------------------------------------------------------------
# Embedded summaries
# ---------------------------------------------------------------------------

class TraineeSummary(BaseModel):
    id: int
    first_name: str
    last_name: str
    status: str
    enrollment_date: datetime.date
    license_category: str

    class Config:
        from_attributes = True


class PaymentSummary(BaseModel):
    id: int
    amount: Decimal
    payment_date: datetime.date
    payment_method: str
    trainee_id: int

    class Config:
        from_attributes = True


class ExamSummary(BaseModel):
    id: int
    exam_type: str
    scheduled_date: datetime.date
    status: str

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Per-role dashboards
# ---------------------------------------------------------------------------

class AdminDashboard(BaseModel):
    role: DashboardRole = DashboardRole.ADMIN

    total_trainees: int
    active_trainees: int
    total_instructors: int
    total_cars: int
    total_sessions: int
    total_exams: int

    completed_sessions: int
    upcoming_sessions: int
    passed_exams: int
    upcoming_exams: int

    total_revenue: float
    monthly_revenue: float

    recent_trainees: list[TraineeSummary]
    recent_payments: list[PaymentSummary]
    upcoming_session_list: list[SessionResponse]


class InstructorDashboard(BaseModel):
    role: DashboardRole = DashboardRole.INSTRUCTOR
    instructor_id: int
    instructor_name: str

    total_sessions: int
    upcoming_sessions_count: int
    completed_sessions_count: int
    assigned_trainees_count: int
    total_hours: float

    upcoming_sessions: list[SessionResponse]
    completed_sessions: list[SessionResponse]
    assigned_trainees: list[TraineeSummary]


class TraineeDashboard(BaseModel):
    role: DashboardRole = DashboardRole.TRAINEE
    trainee_id: int
    trainee_name: str

    total_sessions: int
    completed_sessions_count: int
    upcoming_sessions_count: int

    hours_completed: float
    required_hours: float
    hours_remaining: float
    progress_percentage: float

    total_paid: float
    total_cost: float
    balance: float

    total_exams: int
    passed_exams: int
    upcoming_exams_count: int

    upcoming_sessions: list[SessionResponse]
    sessions_with_feedback: list[SessionResponse]
    recent_payments: list[PaymentSummary]
    upcoming_exams: list[ExamSummary]
    next_exam_date: Optional[datetime.date] = None
