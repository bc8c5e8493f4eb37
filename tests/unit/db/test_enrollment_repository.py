"""Tests for the enrollment join-table repository and FK cascades."""

import pytest
from sqlmodel import select

from drivingschool.db.repositories.enrollment import EnrollmentRepository
from drivingschool.models.enrollment import Enrollment
from drivingschool.models.training_session import TrainingSession


@pytest.fixture()
def lecture(make_instructor, make_session):
    instructor = make_instructor()
    return make_session(instructor.id, None, session_type="Theoretical", status="Scheduled")


class TestEnrollmentRepository:
    def test_add_and_list(self, db, lecture, make_trainee):
        repo = EnrollmentRepository(db)
        second = make_trainee(first_name="Second")
        first = make_trainee(first_name="First")

        repo.add(second.id, lecture.id)
        repo.add(first.id, lecture.id)
        db.commit()

        assert repo.list_trainee_ids_for_session(lecture.id) == sorted([first.id, second.id])
        assert repo.count_for_session(lecture.id) == 2

    def test_remove(self, db, lecture, make_trainee):
        repo = EnrollmentRepository(db)
        trainee = make_trainee()
        repo.add(trainee.id, lecture.id)

        assert repo.remove(trainee.id, lecture.id) is True
        assert repo.remove(trainee.id, lecture.id) is False
        assert repo.count_for_session(lecture.id) == 0

    def test_remove_all_for_session(self, db, lecture, make_trainee):
        repo = EnrollmentRepository(db)
        for name in ("A", "B", "C"):
            repo.add(make_trainee(first_name=name).id, lecture.id)

        assert repo.remove_all_for_session(lecture.id) == 3
        assert repo.list_trainee_ids_for_session(lecture.id) == []
        assert repo.remove_all_for_session(lecture.id) == 0

    def test_session_delete_cascades_to_enrollment(self, db, lecture, make_trainee):
        repo = EnrollmentRepository(db)
        repo.add(make_trainee().id, lecture.id)
        db.commit()
        lecture_id = lecture.id

        db.delete(db.get(TrainingSession, lecture_id))
        db.commit()
        db.expunge_all()

        rows = db.exec(select(Enrollment).where(Enrollment.session_id == lecture_id)).all()
        assert rows == []
