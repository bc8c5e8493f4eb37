"""Pydantic schemas for request/response validation."""

from drivingschool.schemas.training_session import (
    SessionCreate,
    SessionUpdate,
    SessionStatusChange,
    SessionFeedback,
    SessionFilter,
    SessionResponse,
    SessionDetailResponse,
    SessionStatsResponse,
)
from drivingschool.schemas.report import (
    ReportType,
    ReportResponse,
    TraineeSessionCountRow,
    InstructorPassRateRow,
    InstructorSessionLoadRow,
    TraineeScheduleDeviationRow,
)
from drivingschool.schemas.dashboard import (
    DashboardRole,
    AdminDashboard,
    InstructorDashboard,
    TraineeDashboard,
)

__all__ = [
    "SessionCreate",
    "SessionUpdate",
    "SessionStatusChange",
    "SessionFeedback",
    "SessionFilter",
    "SessionResponse",
    "SessionDetailResponse",
    "SessionStatsResponse",
    "ReportType",
    "ReportResponse",
    "TraineeSessionCountRow",
    "InstructorPassRateRow",
    "InstructorSessionLoadRow",
    "TraineeScheduleDeviationRow",
    "DashboardRole",
    "AdminDashboard",
    "InstructorDashboard",
    "TraineeDashboard",
]
