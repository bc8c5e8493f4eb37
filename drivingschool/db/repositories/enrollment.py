"""
Enrollment repository.

A plain join-table manager for theoretical session rosters.  It performs
no validation of its own: the session service checks trainees and
sessions before calling in, and commits the surrounding transaction.
"""

from sqlalchemy import func
from sqlmodel import Session, select

from drivingschool.models.enrollment import Enrollment


class EnrollmentRepository:
    """Repository for trainee <-> session enrollment rows."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, trainee_id: int, session_id: int) -> Enrollment:
        row = Enrollment(trainee_id=trainee_id, session_id=session_id)
        self.session.add(row)
        self.session.flush()
        return row

    def remove(self, trainee_id: int, session_id: int) -> bool:
        row = self.session.get(Enrollment, (trainee_id, session_id))
        if row:
            self.session.delete(row)
            self.session.flush()
            return True
        return False

    def remove_all_for_session(self, session_id: int) -> int:
        """Delete the whole roster of a session, returning the row count."""
        rows = self.session.exec(select(Enrollment).where(Enrollment.session_id == session_id)).all()
        for row in rows:
            self.session.delete(row)
        self.session.flush()
        return len(rows)

    def list_trainee_ids_for_session(self, session_id: int) -> list[int]:
        statement = (select(Enrollment.trainee_id).where(Enrollment.session_id == session_id)
                     .order_by(Enrollment.trainee_id))
        return list(self.session.exec(statement).all())

    def count_for_session(self, session_id: int) -> int:
        statement = select(func.count()).select_from(Enrollment).where(Enrollment.session_id == session_id)
        return self.session.exec(statement).one()
