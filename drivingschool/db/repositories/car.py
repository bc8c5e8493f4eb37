"""Car repository."""

from sqlalchemy import func
from sqlmodel import Session, select

from drivingschool.models.car import Car


class CarRepository:
    def __init__(self, session: Session):
        self.session = session

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(Car)).one()
