"""Tests for exam model helpers."""

import datetime

import pytest

from drivingschool.models.exam import Exam, ExamStatus

TODAY = datetime.date(2026, 3, 2)


class TestExamUpcoming:
    @pytest.mark.parametrize(
        "status, days, expected",
        [
            (ExamStatus.SCHEDULED, 0, True),
            (ExamStatus.SCHEDULED, 5, True),
            (ExamStatus.SCHEDULED, -1, False),
            (ExamStatus.PASSED, 0, False),
            (ExamStatus.FAILED, 3, False),
            (ExamStatus.COMPLETED, 1, False),
        ],
    )
    def test_upcoming_requires_scheduled_status(self, status, days, expected):
        exam = Exam(exam_type="Driving", status=status.value,
                    scheduled_date=TODAY + datetime.timedelta(days=days), trainee_id=1)
        assert exam.is_upcoming(TODAY) is expected
