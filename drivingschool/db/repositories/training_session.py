"""
Training session repository.

Handles database operations for :class:`TrainingSession`.  Write methods
``flush`` only; the calling service owns the transaction.
"""

from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import aliased
from sqlmodel import Session, select

from drivingschool.models.enrollment import Enrollment
from drivingschool.models.instructor import Instructor
from drivingschool.models.trainee import Trainee
from drivingschool.models.training_session import SessionStatus, SessionType, TrainingSession


class TrainingSessionRepository:
    """Repository for TrainingSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.flush()
        return entry

    def get_by_id(self, entry_id: int) -> Optional[TrainingSession]:
        return self.session.get(TrainingSession, entry_id)

    def get_all(self) -> list[TrainingSession]:
        statement = select(TrainingSession).order_by(TrainingSession.start_datetime.desc())
        return list(self.session.exec(statement).all())

    def get_by_instructor(self, instructor_id: int) -> list[TrainingSession]:
        statement = (select(TrainingSession).where(TrainingSession.instructor_id == instructor_id)
                     .order_by(TrainingSession.start_datetime.desc()))
        return list(self.session.exec(statement).all())

    def get_by_trainee(self, trainee_id: int) -> list[TrainingSession]:
        """Practical sessions assigned to the trainee plus theoretical ones they are enrolled in."""
        statement = (select(TrainingSession).where(self._trainee_clause(trainee_id))
                     .order_by(TrainingSession.start_datetime.desc()))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Detail listing (joined names + roster size)
    # ------------------------------------------------------------------

    def list_details(self, session_type: Optional[SessionType] = None, status: Optional[SessionStatus] = None,
                     instructor_id: Optional[int] = None, trainee_id: Optional[int] = None,
                     session_id: Optional[int] = None, ) -> list[tuple]:
        """Sessions with instructor name, trainee name and roster size.

        Returns ``(TrainingSession, instructor_first, instructor_last,
        trainee_first, trainee_last, trainee_count)`` tuples, newest first.
        Filters are combined with AND.
        """
        trainee = aliased(Trainee)
        roster_size = (select(func.count(Enrollment.trainee_id))
                       .where(Enrollment.session_id == TrainingSession.id)
                       .correlate(TrainingSession)
                       .scalar_subquery())

        statement = (select(TrainingSession, Instructor.first_name, Instructor.last_name, trainee.first_name,
                            trainee.last_name, roster_size.label("trainee_count"))
                     .outerjoin(Instructor, Instructor.id == TrainingSession.instructor_id)
                     .outerjoin(trainee, trainee.id == TrainingSession.trainee_id))

        if session_type is not None:
            statement = statement.where(TrainingSession.session_type == session_type.value)
        if status is not None:
            statement = statement.where(TrainingSession.status == status.value)
        if instructor_id is not None:
            statement = statement.where(TrainingSession.instructor_id == instructor_id)
        if trainee_id is not None:
            statement = statement.where(self._trainee_clause(trainee_id))
        if session_id is not None:
            statement = statement.where(TrainingSession.id == session_id)

        statement = statement.order_by(TrainingSession.start_datetime.desc(), TrainingSession.id.desc())
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------

    def count(self) -> int:
        statement = select(func.count()).select_from(TrainingSession)
        return self.session.exec(statement).one()

    def count_by_status(self, status: SessionStatus) -> int:
        statement = (select(func.count()).select_from(TrainingSession)
                     .where(TrainingSession.status == status.value))
        return self.session.exec(statement).one()

    def count_by_type(self, session_type: SessionType) -> int:
        statement = (select(func.count()).select_from(TrainingSession)
                     .where(TrainingSession.session_type == session_type.value))
        return self.session.exec(statement).one()

    def completed_practical_for_trainee(self, trainee_id: int) -> list[TrainingSession]:
        statement = select(TrainingSession).where(TrainingSession.trainee_id == trainee_id,
                                                  TrainingSession.session_type == SessionType.PRACTICAL.value,
                                                  TrainingSession.status == SessionStatus.COMPLETED.value, )
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.flush()
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.flush()
            return True
        return False

    @staticmethod
    def _trainee_clause(trainee_id: int):
        enrolled = select(Enrollment.session_id).where(Enrollment.trainee_id == trainee_id)
        return or_(TrainingSession.trainee_id == trainee_id, TrainingSession.id.in_(enrolled))
