"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from drivingschool.models.instructor import Instructor  # noqa: F401
from drivingschool.models.trainee import Trainee  # noqa: F401
from drivingschool.models.car import Car  # noqa: F401
from drivingschool.models.exam import Exam  # noqa: F401
from drivingschool.models.payment import Payment  # noqa: F401
from drivingschool.models.training_session import TrainingSession  # noqa: F401
from drivingschool.models.enrollment import Enrollment  # noqa: F401
