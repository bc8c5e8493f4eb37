"""
Enrollment (trainee <-> theoretical session) join table.

Rows are removed together with their session (``ON DELETE CASCADE``).
"""

from sqlmodel import Field, SQLModel


class Enrollment(SQLModel, table=True):
    """One trainee enrolled in one theoretical session."""

    __tablename__ = "trainee_sessions"

    trainee_id: int = Field(foreign_key="trainees.id", primary_key=True, ondelete="CASCADE")
    session_id: int = Field(foreign_key="sessions.id", primary_key=True, ondelete="CASCADE")
