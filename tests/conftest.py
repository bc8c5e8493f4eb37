"""Shared fixtures: an in-memory SQLite database and row factories.

The factories insert rows directly (bypassing the session service) so
that tests can set up completed or past sessions freely.
"""

import datetime
from decimal import Decimal
from typing import Optional

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

import drivingschool.db.base  # noqa: F401
from drivingschool.db.session import create_db_engine
from drivingschool.models import Car, Enrollment, Exam, Instructor, Payment, Trainee, TrainingSession

NOW = datetime.datetime(2026, 3, 2, 10, 0)
TODAY = NOW.date()


@pytest.fixture()
def engine():
    db_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(db_engine)
    yield db_engine
    SQLModel.metadata.drop_all(db_engine)
    db_engine.dispose()


@pytest.fixture()
def db(engine):
    with Session(engine) as session:
        yield session


def _save(session: Session, row):
    session.add(row)
    session.commit()
    session.refresh(row)
    return row


@pytest.fixture()
def make_instructor(db):
    def _make(first_name: str = "Nikos", last_name: str = "Papadopoulos", **kwargs) -> Instructor:
        return _save(db, Instructor(first_name=first_name, last_name=last_name, **kwargs))

    return _make


@pytest.fixture()
def make_trainee(db):
    def _make(first_name: str = "Maria", last_name: str = "Georgiou",
              enrollment_date: datetime.date = TODAY - datetime.timedelta(days=60),
              assigned_instructor_id: Optional[int] = None, **kwargs) -> Trainee:
        return _save(db, Trainee(first_name=first_name, last_name=last_name, enrollment_date=enrollment_date,
                                 assigned_instructor_id=assigned_instructor_id, **kwargs))

    return _make


@pytest.fixture()
def make_session(db):
    """Insert a session row; ``roster`` adds enrollment rows."""

    def _make(instructor_id: int, trainee_id: Optional[int] = None, session_type: str = "Practical",
              status: str = "Completed", start: datetime.datetime = NOW - datetime.timedelta(days=7),
              hours: float = 1.0, feedback: Optional[str] = None, roster: tuple = ()) -> TrainingSession:
        entry = _save(db, TrainingSession(session_type=session_type, start_datetime=start,
                                          end_datetime=start + datetime.timedelta(hours=hours), status=status,
                                          instructor_feedback=feedback, instructor_id=instructor_id,
                                          trainee_id=trainee_id))
        for enrolled_id in roster:
            db.add(Enrollment(trainee_id=enrolled_id, session_id=entry.id))
        if roster:
            db.commit()
        return entry

    return _make


@pytest.fixture()
def make_exam(db):
    def _make(trainee_id: int, status: str = "Scheduled", scheduled_date: datetime.date = TODAY,
              exam_type: str = "Driving") -> Exam:
        return _save(db, Exam(trainee_id=trainee_id, status=status, scheduled_date=scheduled_date,
                              exam_type=exam_type))

    return _make


@pytest.fixture()
def make_payment(db):
    def _make(trainee_id: int, amount: str = "100.00", payment_date: datetime.date = TODAY) -> Payment:
        return _save(db, Payment(trainee_id=trainee_id, amount=Decimal(amount), payment_date=payment_date))

    return _make


@pytest.fixture()
def make_car(db):
    def _make(license_plate: str = "ABC-1234", **kwargs) -> Car:
        kwargs.setdefault("brand", "Toyota")
        kwargs.setdefault("model", "Yaris")
        return _save(db, Car(license_plate=license_plate, **kwargs))

    return _make
