"""Payment database model (read-only for the scheduling core)."""

import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel


class Payment(SQLModel, table=True):
    __tablename__ = "payments"

    id: Optional[int] = Field(default=None, primary_key=True)
    amount: Decimal = Field(nullable=False, max_digits=10, decimal_places=2)
    payment_date: datetime.date = Field(nullable=False, index=True)
    payment_method: str = Field(default="Cash", max_length=30)
    details: Optional[str] = Field(default=None, max_length=255)
    trainee_id: int = Field(foreign_key="trainees.id", nullable=False, index=True)
