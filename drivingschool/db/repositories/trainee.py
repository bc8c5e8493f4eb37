"""Trainee repository (read-only lookups)."""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from drivingschool.models.trainee import Trainee


class TraineeRepository:
    """Repository for Trainee lookups."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, trainee_id: int) -> Optional[Trainee]:
        return self.session.get(Trainee, trainee_id)

    def get_by_instructor(self, instructor_id: int) -> list[Trainee]:
        statement = (select(Trainee).where(Trainee.assigned_instructor_id == instructor_id)
                     .order_by(Trainee.last_name, Trainee.first_name))
        return list(self.session.exec(statement).all())

    def get_most_recently_enrolled(self, limit: int = 5) -> list[Trainee]:
        statement = select(Trainee).order_by(Trainee.enrollment_date.desc(), Trainee.id.desc()).limit(limit)
        return list(self.session.exec(statement).all())

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(Trainee)).one()

    def count_by_status(self, status: str) -> int:
        statement = select(func.count()).select_from(Trainee).where(Trainee.status == status)
        return self.session.exec(statement).one()
