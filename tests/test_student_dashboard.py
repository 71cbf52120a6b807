from datetime import date

import pytest


@pytest.fixture
def transcript(add_rows, builders):
    """
    S1 took CS101 in semester 1 and is in CS201 (graded) and EE110 (not yet
    graded) in semester 2. S2 has no enrollments.
    """
    add_rows(
        builders.student("S1"),
        builders.student("S2"),
        builders.course("CS101", credit_hours=4),
        builders.course("CS201", credit_hours=3),
        builders.course("EE110", credit_hours=4, department="Electrical Engineering"),
        builders.semester(1),
        builders.semester(2),
        builders.enrollment(1, "S1", "CS101", semester_id=1),
        builders.enrollment(2, "S1", "CS201", semester_id=2),
        builders.enrollment(3, "S1", "EE110", semester_id=2),
        builders.grade(1, 10.0, numeric_score=95.0, letter_grade="A+"),
        builders.grade(2, 9.0, numeric_score=84.0, letter_grade="A"),
        builders.attendance(1, "Absent", date(2025, 10, 1)),
        builders.attendance(1, "Absent", date(2025, 10, 8)),
        builders.attendance(2, "Present", date(2026, 3, 2)),
        builders.attendance(2, "Late", date(2026, 3, 9)),
        builders.attendance(2, "Absent", date(2026, 3, 16)),
        builders.attendance(3, "Present", date(2026, 3, 4)),
    )


def test_dashboard_uses_latest_semester(client, transcript):
    response = client.get("/api/students/S1")

    assert response.status_code == 200
    body = response.json()
    assert body["student"]["student_id"] == "S1"
    assert body["sgpa"] == "9.00"
    assert body["attendanceRate"] == "75.0"
    assert body["enrolledCoursesCount"] == 2
    assert client.get("/api/students/S1/dashboard").json() == body


def test_current_grades(client, transcript):
    body = client.get("/api/grades/S1/current").json()

    assert body["semesterId"] == 2
    assert body["summary"] == {
        "currentSgpa": "9.00",
        "totalCredits": 7,
        "coursesPassed": 1,
        "totalCourses": 1,
        "averageScore": "84.00",
    }
    details = {row["course_id"]: row for row in body["details"]}
    assert set(details) == {"CS201", "EE110"}
    assert details["CS201"]["letter_grade"] == "A"
    assert details["EE110"]["gpa_point"] is None


def test_current_attendance(client, transcript):
    body = client.get("/api/attendance/S1/current").json()

    assert body["summary"] == {
        "overallRate": "75.0",
        "totalClasses": 4,
        "classesAttended": 3,
        "totalAbsences": 1,
    }
    assert [(d["course_id"], d["rate"]) for d in body["details"]] == [
        ("CS201", "66.7"),
        ("EE110", "100.0"),
    ]
    # newest first, cut at RECENT_ATTENDANCE_LIMIT (3 in tests)
    assert [r["class_date"] for r in body["recent"]] == ["2026-03-16", "2026-03-09", "2026-03-04"]
    assert body["recent"][0]["status"] == "Absent"


def test_student_without_enrollments_gets_zero_defaults(client, transcript):
    dashboard = client.get("/api/students/S2/dashboard").json()
    grades = client.get("/api/grades/S2/current").json()
    attendance = client.get("/api/attendance/S2/current").json()

    assert dashboard["sgpa"] == "0.00"
    assert dashboard["attendanceRate"] == "0.0"
    assert dashboard["enrolledCoursesCount"] == 0

    assert grades["semesterId"] is None
    assert grades["summary"] == {
        "currentSgpa": "0.00",
        "totalCredits": 0,
        "coursesPassed": 0,
        "totalCourses": 0,
        "averageScore": "0.00",
    }
    assert grades["details"] == []

    assert attendance["summary"] == {
        "overallRate": "0.0",
        "totalClasses": 0,
        "classesAttended": 0,
        "totalAbsences": 0,
    }
    assert attendance["details"] == []
    assert attendance["recent"] == []


def test_ungraded_semester_has_zero_sgpa(client, add_rows, builders):
    add_rows(
        builders.student("S3"),
        builders.course("CS101"),
        builders.semester(1),
        builders.enrollment(1, "S3", "CS101"),
    )

    body = client.get("/api/grades/S3/current").json()
    assert body["summary"]["currentSgpa"] == "0.00"
    assert body["summary"]["totalCredits"] == 3


@pytest.mark.parametrize("path", [
    "/api/students/NOPE/dashboard",
    "/api/grades/NOPE/current",
    "/api/attendance/NOPE/current",
])
def test_unknown_student_is_404(client, path):
    assert client.get(path).status_code == 404
