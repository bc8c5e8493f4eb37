"""Car database model. Only counted by the admin dashboard."""

from typing import Optional

from sqlmodel import Field, SQLModel


class Car(SQLModel, table=True):
    __tablename__ = "cars"

    id: Optional[int] = Field(default=None, primary_key=True)
    license_plate: str = Field(unique=True, nullable=False, max_length=20)
    brand: str = Field(nullable=False, max_length=50)
    model: str = Field(nullable=False, max_length=50)
    transmission_type: str = Field(default="Manual", max_length=20)
    assigned_instructor_id: Optional[int] = Field(default=None, foreign_key="instructors.id")
