"""
Trainee database model.

Owned by the trainee management screens; the scheduling core and the
reports only read it.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class TraineeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    GRADUATED = "Graduated"


class Trainee(SQLModel, table=True):
    """A student enrolled at the school."""

    __tablename__ = "trainees"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(nullable=False, max_length=100)
    last_name: str = Field(nullable=False, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)
    enrollment_date: datetime.date = Field(nullable=False, index=True)
    license_category: str = Field(default="B", max_length=10)
    status: str = Field(default=TraineeStatus.ACTIVE.value, nullable=False, max_length=20)

    assigned_instructor_id: Optional[int] = Field(default=None, foreign_key="instructors.id", index=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
