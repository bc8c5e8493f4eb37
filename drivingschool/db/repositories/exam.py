"""Exam repository (read-only lookups)."""

from sqlmodel import Session, select

from drivingschool.models.exam import Exam


class ExamRepository:
    """Repository for Exam lookups."""

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[Exam]:
        return list(self.session.exec(select(Exam).order_by(Exam.scheduled_date)).all())

    def get_by_trainee(self, trainee_id: int) -> list[Exam]:
        statement = select(Exam).where(Exam.trainee_id == trainee_id).order_by(Exam.scheduled_date)
        return list(self.session.exec(statement).all())
