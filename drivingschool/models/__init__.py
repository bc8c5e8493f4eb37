"""SQLModel database models."""

from drivingschool.models.instructor import Instructor
from drivingschool.models.trainee import Trainee, TraineeStatus
from drivingschool.models.car import Car
from drivingschool.models.exam import Exam, ExamStatus
from drivingschool.models.payment import Payment
from drivingschool.models.training_session import SessionStatus, SessionType, TrainingSession
from drivingschool.models.enrollment import Enrollment

__all__ = [
    "Instructor",
    "Trainee",
    "TraineeStatus",
    "Car",
    "Exam",
    "ExamStatus",
    "Payment",
    "TrainingSession",
    "SessionType",
    "SessionStatus",
    "Enrollment",
]
