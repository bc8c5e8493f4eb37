"""
Session endpoints.

Scheduling, status changes, feedback and theoretical rosters.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, status

from drivingschool.api.dependencies import get_session_service
from drivingschool.models.training_session import SessionStatus, SessionType
from drivingschool.schemas.training_session import (SessionCreate, SessionDetailResponse, SessionFeedback,
                                                    SessionFilter, SessionResponse, SessionStatsResponse,
                                                    SessionStatusChange, SessionUpdate, )
from drivingschool.services.session_service import SessionService

router = APIRouter()


@router.post("", summary="Schedule a session.", response_model=SessionDetailResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(session: SessionCreate,
                   trainee_ids: Optional[list[int]] = Body(None, description="Roster of a theoretical session"),
                   service: SessionService = Depends(get_session_service), ):
    session_id = service.create(session, trainee_ids)
    return service.get_by_id(session_id)


@router.get("", summary="List sessions with optional filters.", response_model=list[SessionDetailResponse], )
def list_sessions(session_type: Optional[SessionType] = Query(None, alias="type", description="Session type"),
                  session_status: Optional[SessionStatus] = Query(None, alias="status", description="Status"),
                  instructor_id: Optional[int] = Query(None, description="Teaching instructor"),
                  trainee_id: Optional[int] = Query(None, description="Assigned or enrolled trainee"),
                  service: SessionService = Depends(get_session_service), ):
    filters = SessionFilter(session_type=session_type, status=session_status, instructor_id=instructor_id,
                            trainee_id=trainee_id, )
    return service.list_sessions(filters)


@router.get("/statistics", summary="Session counts by status and type.", response_model=SessionStatsResponse, )
def get_statistics(service: SessionService = Depends(get_session_service)):
    return service.get_statistics()


@router.get("/{session_id}", summary="Get a session.", response_model=SessionDetailResponse, )
def get_session(session_id: int, service: SessionService = Depends(get_session_service)):
    return service.get_by_id(session_id)


@router.put("/{session_id}", summary="Update a session.", response_model=SessionResponse, )
def update_session(session_id: int, session: SessionUpdate,
                   trainee_ids: Optional[list[int]] = Body(None, description="Replaces the theoretical roster"),
                   service: SessionService = Depends(get_session_service), ):
    return service.update(session_id, session, trainee_ids)


@router.delete("/{session_id}", summary="Delete a session and its roster.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: int, service: SessionService = Depends(get_session_service)):
    service.delete(session_id)


@router.put("/{session_id}/status", summary="Change session status.", response_model=SessionResponse, )
def change_status(session_id: int, data: SessionStatusChange,
                  service: SessionService = Depends(get_session_service), ):
    return service.change_status(session_id, data.status)


@router.post("/{session_id}/feedback", summary="Add instructor feedback to a completed session.",
             response_model=SessionResponse, )
def add_feedback(session_id: int, data: SessionFeedback, service: SessionService = Depends(get_session_service)):
    return service.add_feedback(session_id, data.feedback)


@router.get("/{session_id}/enrollment", summary="Trainee ids enrolled in a theoretical session.",
            response_model=list[int], )
def get_enrollment(session_id: int, service: SessionService = Depends(get_session_service)):
    return service.get_enrollment(session_id)
