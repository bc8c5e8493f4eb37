"""
Per-role dashboard statistics.

Assembles admin, instructor and trainee summaries from sessions,
enrollments, payments and exams.  Everything is derived on request from
the current database state.

"Upcoming" means ``status == Scheduled`` and a start strictly after
``now`` for sessions, and ``status == Scheduled`` with a date on or after
today for exams.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Iterable, Optional, Union

from pydantic import BaseModel, Field
from sqlmodel import Session

from drivingschool.core.exceptions import InvalidError, NotFoundError
from drivingschool.db.repositories.car import CarRepository
from drivingschool.db.repositories.exam import ExamRepository
from drivingschool.db.repositories.instructor import InstructorRepository
from drivingschool.db.repositories.payment import PaymentRepository
from drivingschool.db.repositories.trainee import TraineeRepository
from drivingschool.db.repositories.training_session import TrainingSessionRepository
from drivingschool.models.exam import Exam, ExamStatus
from drivingschool.models.payment import Payment
from drivingschool.models.trainee import TraineeStatus
from drivingschool.models.training_session import TrainingSession
from drivingschool.schemas.dashboard import (AdminDashboard, DashboardRole, ExamSummary, InstructorDashboard,
                                             PaymentSummary, TraineeDashboard, TraineeSummary, )
from drivingschool.schemas.training_session import SessionResponse


class DashboardConfig(BaseModel):
    """Course parameters and list sizes used by the dashboards."""

    required_practical_hours: float = Field(30.0, gt=0, description="Practical hours required for category B")
    total_course_cost: float = Field(4000.0, ge=0)
    list_limit: int = Field(5, ge=1)
    trainee_payments_limit: int = Field(3, ge=1)


DEFAULT_DASHBOARD_CONFIG = DashboardConfig()

# ======================================================================
# Pure helpers
# ======================================================================


def _upcoming(sessions: Iterable[TrainingSession], now: datetime.datetime, limit: int) -> list[TrainingSession]:
    """Scheduled sessions starting after ``now``, soonest first."""
    upcoming = [s for s in sessions if s.is_upcoming(now)]
    return sorted(upcoming, key=lambda s: s.start_datetime)[:limit]


def _latest_completed(sessions: Iterable[TrainingSession], limit: int) -> list[TrainingSession]:
    """Completed sessions, most recently ended first."""
    completed = [s for s in sessions if s.is_completed]
    return sorted(completed, key=lambda s: s.end_datetime, reverse=True)[:limit]


def _sum_amounts(payments: Iterable[Payment]) -> Decimal:
    return sum((p.amount for p in payments), Decimal("0"))


def _month_start(now: datetime.datetime) -> datetime.date:
    return now.date().replace(day=1)


def _progress_percentage(hours_completed: float, required_hours: float) -> float:
    return min(hours_completed / required_hours * 100.0, 100.0)


def _balance(total_cost: float, total_paid: float) -> float:
    return max(total_cost - total_paid, 0.0)


def _sessions_out(sessions: Iterable[TrainingSession]) -> list[SessionResponse]:
    return [SessionResponse.model_validate(s) for s in sessions]


# ======================================================================
# Per-role dashboards
# ======================================================================


def compute_admin_dashboard(session: Session, now: Optional[datetime.datetime] = None,
                            config: Optional[DashboardConfig] = None, ) -> AdminDashboard:
    """School-wide counts, revenue and the next few sessions."""
    now = now or datetime.datetime.now()
    cfg = config or DEFAULT_DASHBOARD_CONFIG
    today = now.date()

    trainee_repo = TraineeRepository(session)
    sessions = TrainingSessionRepository(session).get_all()
    exams = ExamRepository(session).get_all()
    payments = PaymentRepository(session).get_all()

    month_start = _month_start(now)
    monthly_payments = [p for p in payments if p.payment_date >= month_start]

    return AdminDashboard(total_trainees=trainee_repo.count(),
                          active_trainees=trainee_repo.count_by_status(TraineeStatus.ACTIVE.value),
                          total_instructors=InstructorRepository(session).count(),
                          total_cars=CarRepository(session).count(), total_sessions=len(sessions),
                          total_exams=len(exams), completed_sessions=sum(1 for s in sessions if s.is_completed),
                          upcoming_sessions=sum(1 for s in sessions if s.is_upcoming(now)),
                          passed_exams=sum(1 for e in exams if e.status == ExamStatus.PASSED.value),
                          upcoming_exams=sum(1 for e in exams if e.is_upcoming(today)),
                          total_revenue=float(_sum_amounts(payments)),
                          monthly_revenue=float(_sum_amounts(monthly_payments)),
                          recent_trainees=[TraineeSummary.model_validate(t) for t in
                                           trainee_repo.get_most_recently_enrolled(cfg.list_limit)],
                          recent_payments=[PaymentSummary.model_validate(p) for p in payments[:cfg.list_limit]],
                          upcoming_session_list=_sessions_out(_upcoming(sessions, now, cfg.list_limit)), )


def compute_instructor_dashboard(session: Session, instructor_id: int, now: Optional[datetime.datetime] = None,
                                 config: Optional[DashboardConfig] = None, ) -> InstructorDashboard:
    """An instructor's schedule, recent lessons, trainees and hours taught."""
    now = now or datetime.datetime.now()
    cfg = config or DEFAULT_DASHBOARD_CONFIG

    instructor = InstructorRepository(session).get_by_id(instructor_id)
    if instructor is None:
        raise NotFoundError(f"Instructor not found: {instructor_id}")

    sessions = TrainingSessionRepository(session).get_by_instructor(instructor_id)
    trainees = TraineeRepository(session).get_by_instructor(instructor_id)
    completed = [s for s in sessions if s.is_completed]

    return InstructorDashboard(instructor_id=instructor_id, instructor_name=instructor.full_name,
                               total_sessions=len(sessions),
                               upcoming_sessions_count=sum(1 for s in sessions if s.is_upcoming(now)),
                               completed_sessions_count=len(completed), assigned_trainees_count=len(trainees),
                               total_hours=sum(s.duration_hours for s in completed),
                               upcoming_sessions=_sessions_out(_upcoming(sessions, now, cfg.list_limit)),
                               completed_sessions=_sessions_out(_latest_completed(sessions, cfg.list_limit)),
                               assigned_trainees=[TraineeSummary.model_validate(t) for t in trainees], )


def compute_trainee_dashboard(session: Session, trainee_id: int, now: Optional[datetime.datetime] = None,
                              config: Optional[DashboardConfig] = None, ) -> TraineeDashboard:
    """A trainee's lessons, driving-hour progress, balance and exams."""
    now = now or datetime.datetime.now()
    cfg = config or DEFAULT_DASHBOARD_CONFIG
    today = now.date()

    trainee = TraineeRepository(session).get_by_id(trainee_id)
    if trainee is None:
        raise NotFoundError(f"Trainee not found: {trainee_id}")

    sessions = TrainingSessionRepository(session).get_by_trainee(trainee_id)
    payments = PaymentRepository(session).get_by_trainee(trainee_id)
    exams: list[Exam] = ExamRepository(session).get_by_trainee(trainee_id)

    with_feedback = [s for s in sessions if s.instructor_feedback]
    hours_completed = sum(s.duration_hours for s in sessions if s.is_completed and s.is_practical)
    total_paid = float(_sum_amounts(payments))
    upcoming_exams = sorted((e for e in exams if e.is_upcoming(today)), key=lambda e: e.scheduled_date)

    return TraineeDashboard(trainee_id=trainee_id, trainee_name=trainee.full_name, total_sessions=len(sessions),
                            completed_sessions_count=sum(1 for s in sessions if s.is_completed),
                            upcoming_sessions_count=sum(1 for s in sessions if s.is_upcoming(now)),
                            hours_completed=hours_completed, required_hours=cfg.required_practical_hours,
                            hours_remaining=max(cfg.required_practical_hours - hours_completed, 0.0),
                            progress_percentage=_progress_percentage(hours_completed,
                                                                     cfg.required_practical_hours),
                            total_paid=total_paid, total_cost=cfg.total_course_cost,
                            balance=_balance(cfg.total_course_cost, total_paid), total_exams=len(exams),
                            passed_exams=sum(1 for e in exams if e.status == ExamStatus.PASSED.value),
                            upcoming_exams_count=len(upcoming_exams),
                            upcoming_sessions=_sessions_out(_upcoming(sessions, now, cfg.list_limit)),
                            sessions_with_feedback=_sessions_out(_latest_completed(with_feedback, cfg.list_limit)),
                            recent_payments=[PaymentSummary.model_validate(p) for p in
                                             payments[:cfg.trainee_payments_limit]],
                            upcoming_exams=[ExamSummary.model_validate(e) for e in upcoming_exams],
                            next_exam_date=upcoming_exams[0].scheduled_date if upcoming_exams else None, )


# ======================================================================
# Main entry point
# ======================================================================


def get_dashboard_stats(session: Session, role: DashboardRole, identity: Optional[int] = None,
                        now: Optional[datetime.datetime] = None, config: Optional[DashboardConfig] = None,
                        ) -> Union[AdminDashboard, InstructorDashboard, TraineeDashboard]:
    """Dashboard for ``role``; ``identity`` is the instructor or trainee id."""
    role = DashboardRole(role)
    if role == DashboardRole.ADMIN:
        return compute_admin_dashboard(session, now=now, config=config)
    if identity is None:
        raise InvalidError(f"An id is required for the {role.value} dashboard")
    if role == DashboardRole.INSTRUCTOR:
        return compute_instructor_dashboard(session, identity, now=now, config=config)
    return compute_trainee_dashboard(session, identity, now=now, config=config)
