"""
Shared API dependencies.

Reusable FastAPI dependencies for database access and services.
"""

from fastapi import Depends
from sqlmodel import Session

from drivingschool.db.session import get_db
from drivingschool.services.session_service import SessionService


def get_session_service(db: Session = Depends(get_db)) -> SessionService:
    """Session lifecycle service bound to the request's database session."""
    return SessionService(db)
