"""Instructor repository (read-only lookups)."""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from drivingschool.models.instructor import Instructor


class InstructorRepository:
    """Repository for Instructor lookups."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, instructor_id: int) -> Optional[Instructor]:
        return self.session.get(Instructor, instructor_id)

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(Instructor)).one()
