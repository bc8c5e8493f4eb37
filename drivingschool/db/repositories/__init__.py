"""Database repositories."""

from drivingschool.db.repositories.training_session import TrainingSessionRepository
from drivingschool.db.repositories.enrollment import EnrollmentRepository
from drivingschool.db.repositories.instructor import InstructorRepository
from drivingschool.db.repositories.trainee import TraineeRepository
from drivingschool.db.repositories.exam import ExamRepository
from drivingschool.db.repositories.payment import PaymentRepository
from drivingschool.db.repositories.car import CarRepository
from drivingschool.db.repositories.reports import ReportsRepository

__all__ = [
    "TrainingSessionRepository",
    "EnrollmentRepository",
    "InstructorRepository",
    "TraineeRepository",
    "ExamRepository",
    "PaymentRepository",
    "CarRepository",
    "ReportsRepository",
]
