"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from drivingschool.api.v1.endpoints import dashboard, reports, sessions

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    sessions.router, prefix="/sessions", tags=["Sessions"]
)
api_router.include_router(
    reports.router, prefix="/reports", tags=["Reports"]
)
api_router.include_router(
    dashboard.router, prefix="/dashboard", tags=["Dashboard"]
)
