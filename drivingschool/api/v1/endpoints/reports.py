"""
Report endpoints: outlier reports over trainees and instructors.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from drivingschool.analytics.reports import REPORT_TITLES, run_report
from drivingschool.db.session import get_db
from drivingschool.schemas.report import ReportResponse, ReportType

router = APIRouter()


@router.get("", summary="List available reports.")
def list_reports():
    return [{"report_type": report_type.value, "title": title} for report_type, title in REPORT_TITLES.items()]


@router.get("/{report_type}", summary="Run a report against current data.", response_model=ReportResponse, )
def get_report(report_type: ReportType,
               as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
               db: Session = Depends(get_db), ):
    return run_report(db, report_type, as_of or datetime.date.today())
