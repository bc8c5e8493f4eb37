"""
Dashboard endpoints: per-role summary statistics.
"""

from typing import Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from drivingschool.analytics.dashboard import get_dashboard_stats
from drivingschool.db.session import get_db
from drivingschool.schemas.dashboard import AdminDashboard, DashboardRole, InstructorDashboard, TraineeDashboard

router = APIRouter()


@router.get("/{role}", summary="Get dashboard statistics for a role.",
            response_model=Union[AdminDashboard, InstructorDashboard, TraineeDashboard], )
def get_dashboard(role: DashboardRole,
                  identity: Optional[int] = Query(None, description="Instructor or trainee id"),
                  db: Session = Depends(get_db), ):
    return get_dashboard_stats(db, role, identity)
