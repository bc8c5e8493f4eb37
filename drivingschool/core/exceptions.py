"""
Domain errors raised by the service layer.

Both are :class:`fastapi.HTTPException` subclasses so the API layer
returns them unchanged, while non-HTTP callers can catch them by type.
"""

from fastapi import HTTPException, status


class InvalidError(HTTPException):
    """A precondition was violated (missing field, bad time range, ...)."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    """A referenced instructor, trainee or session does not exist."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
