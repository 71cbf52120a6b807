from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.database import create_database_tables
from app.core.security import hash_password
from app.main import create_app
from app.models.admin import Admin
from app.models.attendance import Attendance
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.grade import Grade
from app.models.semester import Semester
from app.models.student import Student

TEST_PASSWORD = "secret-pass"


# ---------------------------------------------------------------------------
# App and database
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
        RECENT_ATTENDANCE_LIMIT=3,
        REPORT_WEEKS=8,
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    create_database_tables(app.state.engine)
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_factory(app):
    return app.state.session_factory


@pytest.fixture
def add_rows(session_factory):
    """Insert rows one by one (parents first) and commit."""
    def _add(*rows):
        db = session_factory()
        try:
            for row in rows:
                db.add(row)
                db.flush()
            db.commit()
        finally:
            db.close()
    return _add


@pytest.fixture
def fetch(session_factory):
    """Look a row up by primary key in a fresh session."""
    def _fetch(model, key):
        db = session_factory()
        try:
            return db.get(model, key)
        finally:
            db.close()
    return _fetch


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------

def make_student(student_id="S1", department="Computer Science", status="Active", **extra):
    values = dict(
        student_id=student_id,
        first_name="Test",
        last_name=student_id,
        email=f"{student_id.lower()}@example.edu",
        password_hash=hash_password(TEST_PASSWORD, rounds=4),
        admission_date=date(2024, 8, 1),
        department=department,
        current_year=1,
        status=status,
    )
    values.update(extra)
    return Student(**values)


def make_admin(email="admin@example.edu"):
    return Admin(email=email, name="Admin", password_hash=hash_password(TEST_PASSWORD, rounds=4))


def make_course(course_id="CS101", credit_hours=3, faculty_name="Dr. Reed",
                department="Computer Science", status="Active"):
    return Course(
        course_id=course_id,
        course_name=f"Course {course_id}",
        credit_hours=credit_hours,
        faculty_name=faculty_name,
        department=department,
        schedule="Mon 09:00",
        status=status,
    )


def make_semester(semester_id=1):
    return Semester(semester_id=semester_id, semester_name=f"Semester {semester_id}")


def make_enrollment(enrollment_id, student_id, course_id, semester_id=1):
    return Enrollment(
        enrollment_id=enrollment_id,
        student_id=student_id,
        course_id=course_id,
        semester_id=semester_id,
    )


def make_grade(enrollment_id, gpa_point, numeric_score=None, letter_grade=None):
    return Grade(
        enrollment_id=enrollment_id,
        gpa_point=gpa_point,
        numeric_score=numeric_score,
        letter_grade=letter_grade,
    )


def make_attendance(enrollment_id, status, class_date):
    return Attendance(enrollment_id=enrollment_id, status=status, class_date=class_date)


@pytest.fixture
def builders():
    """Row builders, so test modules do not import from conftest."""
    class Builders:
        student = staticmethod(make_student)
        admin = staticmethod(make_admin)
        course = staticmethod(make_course)
        semester = staticmethod(make_semester)
        enrollment = staticmethod(make_enrollment)
        grade = staticmethod(make_grade)
        attendance = staticmethod(make_attendance)
        password = TEST_PASSWORD
    return Builders
