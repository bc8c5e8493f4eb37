"""
Reports repository.

Set-based aggregation queries behind the four operational reports.  Every
report has the same shape: a per-entity count, a population mean taken
over a *filtered* subset (entities with at least one qualifying session),
and a comparison against that mean.  The subset matters: including the
zero-count entities would lower the threshold.
"""

import datetime
from typing import Optional

from sqlalchemy import Float, and_, cast, distinct, func
from sqlmodel import Session, select

from drivingschool.models.exam import Exam, ExamStatus
from drivingschool.models.instructor import Instructor
from drivingschool.models.trainee import Trainee, TraineeStatus
from drivingschool.models.training_session import SessionStatus, SessionType, TrainingSession


def _completed_practical_for(trainee_id_column):
    """Join condition: completed practical sessions of a trainee."""
    return and_(TrainingSession.trainee_id == trainee_id_column,
                TrainingSession.status == SessionStatus.COMPLETED.value,
                TrainingSession.session_type == SessionType.PRACTICAL.value, )


class ReportsRepository:
    """Aggregation queries for the reports engine."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Population means
    # ------------------------------------------------------------------

    @staticmethod
    def _mean_completed_practical_statement(enrolled_on_or_before: Optional[datetime.date] = None):
        """AVG of completed-practical counts over trainees having at least one.

        With ``enrolled_on_or_before`` the population is further limited
        to trainees enrolled on or before that date.
        """
        per_trainee = (select(func.count(TrainingSession.id).label("session_count"))
                       .where(TrainingSession.status == SessionStatus.COMPLETED.value,
                              TrainingSession.session_type == SessionType.PRACTICAL.value,
                              TrainingSession.trainee_id.is_not(None), ))
        if enrolled_on_or_before is not None:
            per_trainee = (per_trainee.join(Trainee, Trainee.id == TrainingSession.trainee_id)
                           .where(Trainee.enrollment_date <= enrolled_on_or_before))
        per_trainee = per_trainee.group_by(TrainingSession.trainee_id).subquery()
        return select(func.avg(per_trainee.c.session_count))

    @staticmethod
    def _mean_sessions_per_instructor_statement():
        """AVG of session counts over instructors having at least one session."""
        per_instructor = (select(func.count(TrainingSession.id).label("session_count"))
                          .group_by(TrainingSession.instructor_id)
                          .subquery())
        return select(func.avg(per_instructor.c.session_count))

    def mean_completed_practical_per_trainee(self, enrolled_on_or_before: Optional[datetime.date] = None,
                                             ) -> Optional[float]:
        value = self.session.exec(self._mean_completed_practical_statement(enrolled_on_or_before)).one()
        return float(value) if value is not None else None

    def mean_sessions_per_instructor(self) -> Optional[float]:
        value = self.session.exec(self._mean_sessions_per_instructor_statement()).one()
        return float(value) if value is not None else None

    # ------------------------------------------------------------------
    # R1 - trainees above the average completed practical count
    # ------------------------------------------------------------------

    def trainees_above_average_completed_practical(self) -> list[tuple]:
        """``(trainee_id, first_name, last_name, total_sessions)`` rows, count descending."""
        mean = self._mean_completed_practical_statement().scalar_subquery()
        session_count = func.count(TrainingSession.id)
        total_sessions = session_count.label("total_sessions")

        statement = (select(Trainee.id, Trainee.first_name, Trainee.last_name, total_sessions)
                     .select_from(Trainee)
                     .outerjoin(TrainingSession, _completed_practical_for(Trainee.id))
                     .group_by(Trainee.id, Trainee.first_name, Trainee.last_name)
                     .having(session_count > mean)
                     .order_by(total_sessions.desc(), Trainee.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # R2 - instructors by student pass rate
    # ------------------------------------------------------------------

    def instructors_by_pass_rate(self) -> list[tuple]:
        """``(instructor_id, first_name, last_name, total_students, passed_exams, pass_rate)`` rows.

        ``passed_exams`` counts exams in status *Completed* taken by any of
        the instructor's assigned trainees.  Instructors without assigned
        trainees are excluded.
        """
        students = (select(Trainee.assigned_instructor_id.label("instructor_id"),
                           func.count(distinct(Trainee.id)).label("total_students"))
                    .where(Trainee.assigned_instructor_id.is_not(None))
                    .group_by(Trainee.assigned_instructor_id)
                    .subquery())
        passed = (select(Trainee.assigned_instructor_id.label("instructor_id"),
                         func.count(Exam.id).label("passed_exams"))
                  .select_from(Trainee)
                  .join(Exam, Exam.trainee_id == Trainee.id)
                  .where(Exam.status == ExamStatus.COMPLETED.value,
                         Trainee.assigned_instructor_id.is_not(None))
                  .group_by(Trainee.assigned_instructor_id)
                  .subquery())

        passed_count = func.coalesce(passed.c.passed_exams, 0)
        passed_exams = passed_count.label("passed_exams")
        pass_rate = (cast(passed_count, Float) * 100.0 / students.c.total_students).label("pass_rate")

        statement = (select(Instructor.id, Instructor.first_name, Instructor.last_name, students.c.total_students,
                            passed_exams, pass_rate)
                     .select_from(Instructor)
                     .join(students, students.c.instructor_id == Instructor.id)
                     .outerjoin(passed, passed.c.instructor_id == Instructor.id)
                     .where(students.c.total_students > 0)
                     .order_by(pass_rate.desc(), passed_exams.desc(), Instructor.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # R3 - instructors above the average session load
    # ------------------------------------------------------------------

    def instructors_above_average_sessions(self) -> list[tuple]:
        """``(instructor_id, first_name, last_name, session_count)`` rows, count descending."""
        mean = self._mean_sessions_per_instructor_statement().scalar_subquery()
        count = func.count(TrainingSession.id)
        session_count = count.label("session_count")

        statement = (select(Instructor.id, Instructor.first_name, Instructor.last_name, session_count)
                     .select_from(Instructor)
                     .outerjoin(TrainingSession, TrainingSession.instructor_id == Instructor.id)
                     .group_by(Instructor.id, Instructor.first_name, Instructor.last_name)
                     .having(count > mean)
                     .order_by(session_count.desc(), Instructor.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # R4 - trainees behind schedule
    # ------------------------------------------------------------------

    def trainees_behind_schedule(self, enrolled_on_or_before: datetime.date) -> list[tuple]:
        """Active trainees enrolled on or before the cut-off who are below the mean.

        Returns ``(trainee_id, first_name, last_name, enrollment_date,
        completed_sessions)`` rows, fewest sessions first.  The mean is taken
        over trainees enrolled on or before the same cut-off that have at
        least one completed practical session.
        """
        mean = self._mean_completed_practical_statement(enrolled_on_or_before).scalar_subquery()
        count = func.count(TrainingSession.id)
        completed_sessions = count.label("completed_sessions")

        statement = (select(Trainee.id, Trainee.first_name, Trainee.last_name, Trainee.enrollment_date,
                            completed_sessions)
                     .select_from(Trainee)
                     .outerjoin(TrainingSession, _completed_practical_for(Trainee.id))
                     .where(Trainee.status == TraineeStatus.ACTIVE.value,
                            Trainee.enrollment_date <= enrolled_on_or_before, )
                     .group_by(Trainee.id, Trainee.first_name, Trainee.last_name, Trainee.enrollment_date)
                     .having(count < mean)
                     .order_by(completed_sessions.asc(), Trainee.id))
        return list(self.session.exec(statement).all())
