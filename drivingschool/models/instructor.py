"""Instructor database model (read-only for the scheduling core)."""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Instructor(SQLModel, table=True):
    __tablename__ = "instructors"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(nullable=False, max_length=100)
    last_name: str = Field(nullable=False, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)
    hire_date: Optional[datetime.date] = Field(default=None)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
