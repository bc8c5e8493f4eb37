"""Tests for the operational reports.

Pure helpers are tested directly; the reports themselves run against an
in-memory SQLite database populated through the row factories.
"""

import datetime

import pytest

from drivingschool.analytics.reports import (DEFAULT_REPORTS_CONFIG, REPORT_TITLES, ReportsConfig,
                                             _days_enrolled, _enrollment_cutoff, _pass_rate,
                                             most_active_instructors, run_report, top_instructors_by_pass_rate,
                                             trainees_above_average_sessions, trainees_behind_schedule, )
from drivingschool.schemas.report import ReportType

TODAY = datetime.date(2026, 3, 2)


def _days_ago(days: int) -> datetime.date:
    return TODAY - datetime.timedelta(days=days)


# ======================================================================
# Pure helpers
# ======================================================================


class TestHelpers:
    def test_default_config(self):
        assert DEFAULT_REPORTS_CONFIG.min_enrollment_days == 30

    def test_negative_tenure_rejected(self):
        with pytest.raises(ValueError):
            ReportsConfig(min_enrollment_days=-1)

    @pytest.mark.parametrize(
        "passed, students, expected",
        [
            (0, 0, 0.0),
            (0, 3, 0.0),
            (1, 4, 25.0),
            (2, 2, 100.0),
        ],
    )
    def test_pass_rate(self, passed, students, expected):
        assert _pass_rate(passed, students) == expected

    def test_enrollment_cutoff(self):
        assert _enrollment_cutoff(TODAY, 30) == datetime.date(2026, 1, 31)

    def test_days_enrolled(self):
        assert _days_enrolled(_days_ago(40), TODAY) == 40

    def test_every_report_has_a_title(self):
        assert set(REPORT_TITLES) == set(ReportType)


# ======================================================================
# R1: above-average completed practical sessions
# ======================================================================


class TestAboveAverageSessions:
    def test_mean_excludes_trainees_without_sessions(self, db, make_instructor, make_trainee, make_session):
        instructor = make_instructor()
        counts = {"Anna": 5, "Babis": 5, "Chloe": 3, "Dimitris": 1, "Eva": 0}
        trainees = {}
        for name, count in counts.items():
            trainees[name] = make_trainee(first_name=name)
            for _ in range(count):
                make_session(instructor.id, trainees[name].id)

        report = trainees_above_average_sessions(db, as_of=TODAY)

        assert report.mean == pytest.approx(3.5)
        assert [row.first_name for row in report.rows] == ["Anna", "Babis"]
        assert [row.total_sessions for row in report.rows] == [5, 5]

    def test_only_completed_practical_sessions_count(self, db, make_instructor, make_trainee, make_session):
        instructor = make_instructor()
        busy = make_trainee(first_name="Busy")
        quiet = make_trainee(first_name="Quiet")
        make_session(instructor.id, busy.id)
        make_session(instructor.id, busy.id)
        make_session(instructor.id, quiet.id)
        make_session(instructor.id, quiet.id, status="Scheduled")
        make_session(instructor.id, quiet.id, status="Scheduled")
        make_session(instructor.id, None, session_type="Theoretical", roster=(quiet.id,))

        report = trainees_above_average_sessions(db, as_of=TODAY)

        assert report.mean == pytest.approx(1.5)
        assert [row.trainee_id for row in report.rows] == [busy.id]

    def test_empty_database(self, db):
        report = trainees_above_average_sessions(db, as_of=TODAY)
        assert report.rows == []
        assert report.mean is None


# ======================================================================
# R2: instructors by pass rate
# ======================================================================


class TestTopInstructors:
    def test_ranked_by_pass_rate(self, db, make_instructor, make_trainee, make_exam):
        strong = make_instructor(first_name="Strong")
        average = make_instructor(first_name="Average")
        make_instructor(first_name="Idle")

        for i in range(2):
            trainee = make_trainee(first_name=f"S{i}", assigned_instructor_id=strong.id)
            make_exam(trainee.id, status="Completed")
        make_exam(trainee.id, status="Failed")

        average_trainees = [make_trainee(first_name=f"A{i}", assigned_instructor_id=average.id)
                            for i in range(4)]
        make_exam(average_trainees[0].id, status="Completed")
        make_exam(average_trainees[1].id, status="Scheduled")

        report = top_instructors_by_pass_rate(db, as_of=TODAY)

        assert report.mean is None
        assert [row.first_name for row in report.rows] == ["Strong", "Average"]
        first, second = report.rows
        assert (first.total_students, first.passed_exams, first.pass_rate) == (2, 2, 100.0)
        assert (second.total_students, second.passed_exams, second.pass_rate) == (4, 1, 25.0)

    def test_instructor_without_passes_listed_with_zero_rate(self, db, make_instructor, make_trainee):
        instructor = make_instructor()
        make_trainee(assigned_instructor_id=instructor.id)

        report = top_instructors_by_pass_rate(db, as_of=TODAY)

        assert len(report.rows) == 1
        assert report.rows[0].passed_exams == 0
        assert report.rows[0].pass_rate == 0.0


# ======================================================================
# R3: most active instructors
# ======================================================================


class TestMostActiveInstructors:
    def test_above_mean_of_instructors_with_sessions(self, db, make_instructor, make_trainee, make_session):
        trainee = make_trainee()
        loads = {"Busy": 6, "Normal": 2, "Light": 1, "Idle": 0}
        for name, count in loads.items():
            instructor = make_instructor(first_name=name)
            for i in range(count):
                status = "Completed" if i % 2 else "Scheduled"
                make_session(instructor.id, trainee.id, status=status)

        report = most_active_instructors(db, as_of=TODAY)

        assert report.mean == pytest.approx(3.0)
        assert [(row.first_name, row.session_count) for row in report.rows] == [("Busy", 6)]

    def test_theoretical_sessions_count_towards_load(self, db, make_instructor, make_trainee, make_session):
        trainee = make_trainee()
        lecturer = make_instructor(first_name="Lecturer")
        driver = make_instructor(first_name="Driver")
        for _ in range(3):
            make_session(lecturer.id, None, session_type="Theoretical", roster=(trainee.id,))
        make_session(driver.id, trainee.id)

        report = most_active_instructors(db, as_of=TODAY)

        assert [row.instructor_id for row in report.rows] == [lecturer.id]


# ======================================================================
# R4: trainees behind schedule
# ======================================================================


class TestBehindSchedule:
    def test_tenured_trainee_below_mean(self, db, make_instructor, make_trainee, make_session):
        instructor = make_instructor()
        veteran = make_trainee(first_name="Veteran", enrollment_date=_days_ago(100))
        slow = make_trainee(first_name="Slow", enrollment_date=_days_ago(40))
        newcomer = make_trainee(first_name="Newcomer", enrollment_date=_days_ago(10))
        for _ in range(6):
            make_session(instructor.id, veteran.id)
        for _ in range(2):
            make_session(instructor.id, slow.id)
        for _ in range(10):
            make_session(instructor.id, newcomer.id)

        report = trainees_behind_schedule(db, as_of=TODAY)

        assert report.mean == pytest.approx(4.0)
        assert len(report.rows) == 1
        row = report.rows[0]
        assert row.trainee_id == slow.id
        assert row.days_enrolled == 40
        assert row.completed_sessions == 2

    def test_zero_sessions_listed_first_inactive_excluded(self, db, make_instructor, make_trainee, make_session):
        instructor = make_instructor()
        veteran = make_trainee(first_name="Veteran", enrollment_date=_days_ago(100))
        slow = make_trainee(first_name="Slow", enrollment_date=_days_ago(60))
        absent = make_trainee(first_name="Absent", enrollment_date=_days_ago(45))
        make_trainee(first_name="Gone", enrollment_date=_days_ago(45), status="Inactive")
        for _ in range(6):
            make_session(instructor.id, veteran.id)
        for _ in range(2):
            make_session(instructor.id, slow.id)

        report = trainees_behind_schedule(db, as_of=TODAY)

        assert [row.trainee_id for row in report.rows] == [absent.id, slow.id]
        assert report.rows[0].completed_sessions == 0

    def test_enrolled_exactly_at_cutoff_is_tenured(self, db, make_instructor, make_trainee, make_session):
        instructor = make_instructor()
        veteran = make_trainee(first_name="Veteran", enrollment_date=_days_ago(90))
        edge = make_trainee(first_name="Edge", enrollment_date=_days_ago(30))
        for _ in range(4):
            make_session(instructor.id, veteran.id)
        make_session(instructor.id, edge.id)

        report = trainees_behind_schedule(db, as_of=TODAY)

        assert [row.trainee_id for row in report.rows] == [edge.id]

    def test_configurable_tenure(self, db, make_instructor, make_trainee, make_session):
        instructor = make_instructor()
        veteran = make_trainee(first_name="Veteran", enrollment_date=_days_ago(100))
        slow = make_trainee(first_name="Slow", enrollment_date=_days_ago(40))
        for _ in range(6):
            make_session(instructor.id, veteran.id)
        make_session(instructor.id, slow.id)

        report = trainees_behind_schedule(db, as_of=TODAY, config=ReportsConfig(min_enrollment_days=60))

        assert report.rows == []
        assert report.mean == pytest.approx(6.0)


# ======================================================================
# run_report
# ======================================================================


class TestRunReport:
    @pytest.mark.parametrize("report_type", list(ReportType))
    def test_dispatch(self, db, report_type):
        report = run_report(db, report_type, as_of=TODAY)
        assert report.report_type == report_type
        assert report.title == REPORT_TITLES[report_type]
        assert report.as_of == TODAY

    def test_accepts_string_key(self, db):
        assert run_report(db, "behind-schedule", as_of=TODAY).report_type == ReportType.BEHIND_SCHEDULE

    def test_unknown_report(self, db):
        with pytest.raises(ValueError):
            run_report(db, "least-active-trainees", as_of=TODAY)
