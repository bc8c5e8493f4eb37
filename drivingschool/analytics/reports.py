"""
Operational reports: outlier detection over trainees and instructors.

All four reports share one shape:

1. a per-entity count (completed practical sessions, sessions taught, ...),
2. a population mean over a **filtered** subset of entities,
3. a comparison filter against that mean.

The subset the mean is taken over is part of each report's definition
and changes the threshold:

- ``above-average-sessions``: mean over trainees with >= 1 completed
  practical session; zero-count trainees are still listed candidates.
- ``top-instructors``: no mean; ranks pass rate
  (completed exams / distinct assigned trainees * 100).
- ``most-active-instructors``: mean over instructors with >= 1 session.
- ``behind-schedule``: active trainees enrolled for at least
  ``min_enrollment_days``; mean over trainees with the same tenure and
  >= 1 completed practical session.

Reports are recomputed on every call; nothing is cached.
"""

from __future__ import annotations

import datetime
from typing import Callable, Optional

from pydantic import BaseModel, Field
from sqlmodel import Session

from drivingschool.db.repositories.reports import ReportsRepository
from drivingschool.schemas.report import (InstructorPassRateRow, InstructorSessionLoadRow, ReportResponse,
                                          ReportType, TraineeScheduleDeviationRow, TraineeSessionCountRow, )

# ======================================================================
# Configuration
# ======================================================================


class ReportsConfig(BaseModel):
    """Tunable parameters of the reports."""

    min_enrollment_days: int = Field(30, ge=0, description="Tenure before a trainee can be behind schedule")


DEFAULT_REPORTS_CONFIG = ReportsConfig()

REPORT_TITLES: dict[ReportType, str] = {
    ReportType.ABOVE_AVERAGE_SESSIONS: "Trainees with Above-Average Sessions",
    ReportType.TOP_INSTRUCTORS: "Top Instructors by Student Pass Rate",
    ReportType.MOST_ACTIVE_INSTRUCTORS: "Most Active Instructors (by Sessions)",
    ReportType.BEHIND_SCHEDULE: "Trainees Behind Schedule",
}

# ======================================================================
# Pure helpers
# ======================================================================


def _pass_rate(passed_exams: int, total_students: int) -> float:
    """Completed exams per assigned trainee, as a percentage."""
    if total_students <= 0:
        return 0.0
    return passed_exams * 100.0 / total_students


def _enrollment_cutoff(as_of: datetime.date, min_days: int) -> datetime.date:
    """Latest enrollment date with at least ``min_days`` of tenure on ``as_of``."""
    return as_of - datetime.timedelta(days=min_days)


def _days_enrolled(enrollment_date: datetime.date, as_of: datetime.date) -> int:
    return (as_of - enrollment_date).days


# ======================================================================
# Reports
# ======================================================================


def trainees_above_average_sessions(session: Session, as_of: Optional[datetime.date] = None,
                                    config: Optional[ReportsConfig] = None, ) -> ReportResponse:
    """R1: trainees whose completed practical count is above the mean."""
    as_of = as_of or datetime.date.today()
    repo = ReportsRepository(session)

    rows = [TraineeSessionCountRow(trainee_id=trainee_id, first_name=first, last_name=last,
                                   total_sessions=total, ) for trainee_id, first, last, total in
            repo.trainees_above_average_completed_practical()]

    return ReportResponse(report_type=ReportType.ABOVE_AVERAGE_SESSIONS,
                          title=REPORT_TITLES[ReportType.ABOVE_AVERAGE_SESSIONS], as_of=as_of,
                          mean=repo.mean_completed_practical_per_trainee(), rows=rows, )


def top_instructors_by_pass_rate(session: Session, as_of: Optional[datetime.date] = None,
                                 config: Optional[ReportsConfig] = None, ) -> ReportResponse:
    """R2: instructors with assigned trainees, ranked by pass rate."""
    as_of = as_of or datetime.date.today()
    repo = ReportsRepository(session)

    rows = []
    for instructor_id, first, last, total_students, passed_exams, _ in repo.instructors_by_pass_rate():
        rows.append(InstructorPassRateRow(instructor_id=instructor_id, first_name=first, last_name=last,
                                          total_students=total_students, passed_exams=passed_exams,
                                          pass_rate=_pass_rate(passed_exams, total_students), ))

    return ReportResponse(report_type=ReportType.TOP_INSTRUCTORS, title=REPORT_TITLES[ReportType.TOP_INSTRUCTORS],
                          as_of=as_of, rows=rows, )


def most_active_instructors(session: Session, as_of: Optional[datetime.date] = None,
                            config: Optional[ReportsConfig] = None, ) -> ReportResponse:
    """R3: instructors teaching more sessions than the mean."""
    as_of = as_of or datetime.date.today()
    repo = ReportsRepository(session)

    rows = [InstructorSessionLoadRow(instructor_id=instructor_id, first_name=first, last_name=last,
                                     session_count=count, ) for instructor_id, first, last, count in
            repo.instructors_above_average_sessions()]

    return ReportResponse(report_type=ReportType.MOST_ACTIVE_INSTRUCTORS,
                          title=REPORT_TITLES[ReportType.MOST_ACTIVE_INSTRUCTORS], as_of=as_of,
                          mean=repo.mean_sessions_per_instructor(), rows=rows, )


def trainees_behind_schedule(session: Session, as_of: Optional[datetime.date] = None,
                             config: Optional[ReportsConfig] = None, ) -> ReportResponse:
    """R4: tenured active trainees below the mean completed practical count."""
    as_of = as_of or datetime.date.today()
    cfg = config or DEFAULT_REPORTS_CONFIG
    repo = ReportsRepository(session)
    cutoff = _enrollment_cutoff(as_of, cfg.min_enrollment_days)

    rows = [TraineeScheduleDeviationRow(trainee_id=trainee_id, first_name=first, last_name=last,
                                        enrollment_date=enrollment_date,
                                        days_enrolled=_days_enrolled(enrollment_date, as_of),
                                        completed_sessions=completed, ) for
            trainee_id, first, last, enrollment_date, completed in repo.trainees_behind_schedule(cutoff)]

    return ReportResponse(report_type=ReportType.BEHIND_SCHEDULE, title=REPORT_TITLES[ReportType.BEHIND_SCHEDULE],
                          as_of=as_of, mean=repo.mean_completed_practical_per_trainee(cutoff), rows=rows, )


# ======================================================================
# Main entry point
# ======================================================================

_REPORTS: dict[ReportType, Callable[..., ReportResponse]] = {
    ReportType.ABOVE_AVERAGE_SESSIONS: trainees_above_average_sessions,
    ReportType.TOP_INSTRUCTORS: top_instructors_by_pass_rate,
    ReportType.MOST_ACTIVE_INSTRUCTORS: most_active_instructors,
    ReportType.BEHIND_SCHEDULE: trainees_behind_schedule,
}


def run_report(session: Session, report_type: ReportType, as_of: Optional[datetime.date] = None,
               config: Optional[ReportsConfig] = None, ) -> ReportResponse:
    """Compute one report against the current database state.

    Args:
        session: Database session.
        report_type: Which report to run.
        as_of: Reference date (defaults to today); only the
            behind-schedule report depends on it.
        config: Optional :class:`ReportsConfig` override.
    """
    return _REPORTS[ReportType(report_type)](session, as_of=as_of, config=config)
