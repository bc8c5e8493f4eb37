"""Business logic services."""

from drivingschool.services.session_service import SessionService

__all__ = [
    "SessionService",
]
