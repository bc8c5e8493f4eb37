"""
Session lifecycle service.

Validates session creation, update and status changes, keeps the
practical/theoretical invariants and maintains the theoretical roster in
the enrollment table.

**Invariants** (hold after every operation)::

    Practical   -> trainee_id set, no enrollment rows
    Theoretical -> trainee_id NULL, at least one enrollment row
    end_datetime > start_datetime
    instructor_feedback non-empty -> status == Completed

Each mutating operation runs in a single :func:`transaction`; a failed
check anywhere (including halfway through a roster) rolls everything back.
"""

import datetime
import logging
from typing import Iterable, Optional

from sqlmodel import Session

from drivingschool.core.exceptions import InvalidError, NotFoundError
from drivingschool.db.repositories.enrollment import EnrollmentRepository
from drivingschool.db.repositories.instructor import InstructorRepository
from drivingschool.db.repositories.trainee import TraineeRepository
from drivingschool.db.repositories.training_session import TrainingSessionRepository
from drivingschool.db.session import transaction
from drivingschool.models.training_session import (STATUS_TRANSITIONS, SessionStatus, SessionType,
                                                   TrainingSession, )
from drivingschool.schemas.training_session import (SessionCreate, SessionDetailResponse, SessionFilter,
                                                    SessionResponse, SessionStatsResponse, SessionUpdate, )

logger = logging.getLogger(__name__)

# Sessions may start at most this far in the past when created.
PAST_START_GRACE = datetime.timedelta(hours=1)


class SessionService:
    """Service for the session lifecycle and theoretical enrollment."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = TrainingSessionRepository(session)
        self.enrollments = EnrollmentRepository(session)
        self.instructors = InstructorRepository(session)
        self.trainees = TraineeRepository(session)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, data: SessionCreate, trainee_ids: Optional[list[int]] = None,
               now: Optional[datetime.datetime] = None, ) -> int:
        """Schedule a session and return its id.

        For theoretical sessions ``trainee_ids`` is the roster; it must not
        be empty and every id must exist.  ``trainee_id`` is ignored.
        """
        now = now or datetime.datetime.now()

        with transaction(self.session):
            self._require_instructor(data.instructor_id)

            trainee_id = data.trainee_id
            roster: list[int] = []
            if data.session_type == SessionType.PRACTICAL:
                self._require_practical_trainee(trainee_id)
            else:
                roster = self._dedupe(trainee_ids or [])
                if not roster:
                    self._reject("Theoretical sessions must have at least one trainee")
                trainee_id = None

            if data.start_datetime is None or data.end_datetime is None:
                self._reject("Start and end date/time are required")
            start = self._naive(data.start_datetime)
            end = self._naive(data.end_datetime)
            self._check_time_range(start, end)
            if start < now - PAST_START_GRACE:
                self._reject("Cannot schedule sessions in the past")

            status = self._parse_status(data.status) if data.status else SessionStatus.SCHEDULED
            feedback = data.instructor_feedback or None
            if feedback and status != SessionStatus.COMPLETED:
                self._reject("Can only add feedback to completed sessions")

            entry = TrainingSession(session_type=data.session_type.value, start_datetime=start,
                                    end_datetime=end, status=status.value,
                                    instructor_feedback=feedback, instructor_id=data.instructor_id,
                                    trainee_id=trainee_id, )
            entry = self.repository.create(entry)
            session_id = entry.id

            self._write_roster(session_id, roster)

        logger.info("Created %s session %s (instructor=%s, trainees=%s)", data.session_type.value, session_id,
                    data.instructor_id, roster or [trainee_id])
        return session_id

    def update(self, session_id: int, data: SessionUpdate, trainee_ids: Optional[list[int]] = None,
               ) -> SessionResponse:
        """Update a session.

        For theoretical sessions a given ``trainee_ids`` list replaces the
        whole roster (all rows removed, new ones inserted); ``None`` keeps
        the current roster.
        """
        with transaction(self.session):
            entry = self._get_entry(session_id)

            if data.session_type is not None and data.session_type.value != entry.session_type:
                self._reject("Session type cannot be changed")

            instructor_id = data.instructor_id if data.instructor_id is not None else entry.instructor_id
            self._require_instructor(instructor_id)

            start = self._naive(data.start_datetime) if data.start_datetime else entry.start_datetime
            end = self._naive(data.end_datetime) if data.end_datetime else entry.end_datetime
            self._check_time_range(start, end)

            status = self._parse_status(data.status) if data.status else SessionStatus(entry.status)
            feedback = entry.instructor_feedback if data.instructor_feedback is None else data.instructor_feedback
            feedback = feedback or None
            if feedback and status != SessionStatus.COMPLETED:
                self._reject("Can only add feedback to completed sessions")

            if entry.is_practical:
                trainee_id = data.trainee_id if data.trainee_id is not None else entry.trainee_id
                self._require_practical_trainee(trainee_id)
                entry.trainee_id = trainee_id
            else:
                entry.trainee_id = None

            entry.instructor_id = instructor_id
            entry.start_datetime = start
            entry.end_datetime = end
            entry.status = status.value
            entry.instructor_feedback = feedback
            entry = self.repository.update(entry)

            if entry.is_theoretical and trainee_ids is not None:
                roster = self._dedupe(trainee_ids)
                if not roster:
                    self._reject("Theoretical sessions must have at least one trainee")
                removed = self.enrollments.remove_all_for_session(session_id)
                self._write_roster(session_id, roster)
                logger.info("Replaced roster of session %s (%d removed, %d added)", session_id, removed,
                            len(roster))

            response = self._to_response(entry)

        logger.info("Updated session %s", session_id)
        return response

    def delete(self, session_id: int) -> None:
        """Delete a session together with its enrollment rows."""
        with transaction(self.session):
            self._get_entry(session_id)
            removed = self.enrollments.remove_all_for_session(session_id)
            self.repository.delete(session_id)
        logger.info("Deleted session %s (%d enrollments removed)", session_id, removed)

    def change_status(self, session_id: int, new_status: str) -> SessionResponse:
        """Move a session to ``new_status``.

        Unknown statuses are rejected.  Reopening a completed session
        clears its feedback.
        """
        with transaction(self.session):
            entry = self._get_entry(session_id)
            target = self._parse_status(new_status)
            current = SessionStatus(entry.status)

            if target not in STATUS_TRANSITIONS[current]:
                self._reject(f"Cannot change status from {current.value} to {target.value}")

            entry.status = target.value
            if target != SessionStatus.COMPLETED:
                entry.instructor_feedback = None
            entry = self.repository.update(entry)
            response = self._to_response(entry)

        logger.info("Session %s status %s -> %s", session_id, current.value, target.value)
        return response

    def add_feedback(self, session_id: int, feedback: str) -> SessionResponse:
        """Attach instructor feedback to a completed session."""
        with transaction(self.session):
            entry = self._get_entry(session_id)
            if not entry.is_completed:
                self._reject("Can only add feedback to completed sessions")

            entry.instructor_feedback = feedback
            entry = self.repository.update(entry)
            response = self._to_response(entry)

        logger.info("Feedback recorded for session %s", session_id)
        return response

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_enrollment(self, session_id: int) -> list[int]:
        """Trainee ids enrolled in a (theoretical) session; empty once it is deleted."""
        return self.enrollments.list_trainee_ids_for_session(session_id)

    def get_by_id(self, session_id: int) -> SessionDetailResponse:
        rows = self.repository.list_details(session_id=session_id)
        if not rows:
            raise NotFoundError(f"Session not found: {session_id}")
        return self._to_detail_response(rows[0])

    def list_sessions(self, filters: Optional[SessionFilter] = None) -> list[SessionDetailResponse]:
        filters = filters or SessionFilter()
        rows = self.repository.list_details(session_type=filters.session_type, status=filters.status,
                                            instructor_id=filters.instructor_id, trainee_id=filters.trainee_id, )
        return [self._to_detail_response(row) for row in rows]

    def get_statistics(self) -> SessionStatsResponse:
        return SessionStatsResponse(total_sessions=self.repository.count(),
                                    scheduled_sessions=self.repository.count_by_status(SessionStatus.SCHEDULED),
                                    completed_sessions=self.repository.count_by_status(SessionStatus.COMPLETED),
                                    practical_sessions=self.repository.count_by_type(SessionType.PRACTICAL),
                                    theoretical_sessions=self.repository.count_by_type(SessionType.THEORETICAL), )

    def get_total_practical_hours(self, trainee_id: int) -> float:
        """Hours of completed practical driving for a trainee."""
        if self.trainees.get_by_id(trainee_id) is None:
            raise NotFoundError(f"Trainee not found: {trainee_id}")
        return sum(s.duration_hours for s in self.repository.completed_practical_for_trainee(trainee_id))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry(self, session_id: int) -> TrainingSession:
        entry = self.repository.get_by_id(session_id)
        if not entry:
            logger.warning("Session not found: %s", session_id)
            raise NotFoundError(f"Session not found: {session_id}")
        return entry

    def _require_instructor(self, instructor_id: int) -> None:
        if self.instructors.get_by_id(instructor_id) is None:
            logger.warning("Instructor not found: %s", instructor_id)
            raise NotFoundError(f"Instructor not found: {instructor_id}")

    def _require_practical_trainee(self, trainee_id: Optional[int]) -> None:
        if trainee_id is None:
            self._reject("Practical sessions must have a trainee assigned")
        if self.trainees.get_by_id(trainee_id) is None:
            logger.warning("Trainee not found: %s", trainee_id)
            raise NotFoundError(f"Trainee not found: {trainee_id}")

    def _write_roster(self, session_id: int, roster: list[int]) -> None:
        """Insert one enrollment row per trainee; any unknown id aborts."""
        for trainee_id in roster:
            if self.trainees.get_by_id(trainee_id) is None:
                logger.warning("Trainee not found: %s", trainee_id)
                raise NotFoundError(f"Trainee not found: {trainee_id}")
            self.enrollments.add(trainee_id, session_id)

    @staticmethod
    def _check_time_range(start: datetime.datetime, end: datetime.datetime) -> None:
        if end <= start:
            SessionService._reject("End date/time must be after start date/time")

    @staticmethod
    def _parse_status(value: str) -> SessionStatus:
        try:
            return SessionStatus(value)
        except ValueError:
            SessionService._reject(f"Unknown session status: '{value}'. "
                                   f"Available: {[s.value for s in SessionStatus]}")

    @staticmethod
    def _naive(value: datetime.datetime) -> datetime.datetime:
        """Stored datetimes are naive local time."""
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value

    @staticmethod
    def _dedupe(trainee_ids: Iterable[int]) -> list[int]:
        return list(dict.fromkeys(trainee_ids))

    @staticmethod
    def _reject(detail: str) -> None:
        logger.warning("Rejected session operation: %s", detail)
        raise InvalidError(detail)

    @staticmethod
    def _to_response(entry: TrainingSession) -> SessionResponse:
        return SessionResponse.model_validate(entry)

    @staticmethod
    def _to_detail_response(row: tuple) -> SessionDetailResponse:
        entry, instructor_first, instructor_last, trainee_first, trainee_last, trainee_count = row

        instructor_name = f"{instructor_first} {instructor_last}" if instructor_first is not None else None
        trainee_name = f"{trainee_first} {trainee_last}" if trainee_first is not None else None

        return SessionDetailResponse(id=entry.id, session_type=entry.session_type,
                                     start_datetime=entry.start_datetime, end_datetime=entry.end_datetime,
                                     status=entry.status, instructor_feedback=entry.instructor_feedback,
                                     instructor_id=entry.instructor_id, trainee_id=entry.trainee_id,
                                     duration_hours=entry.duration_hours, instructor_name=instructor_name,
                                     trainee_name=trainee_name, trainee_count=trainee_count or 0, )
