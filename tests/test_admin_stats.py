from datetime import date

import pytest


@pytest.fixture
def school(add_rows, builders):
    """
    A: CGPA 9.0 (top bucket). B: CGPA 8.999 (second bucket).
    C: inactive, CGPA 4.0. D: active, no grades.
    """
    add_rows(
        builders.student("A", department="Computer Science"),
        builders.student("B", department="Computer Science"),
        builders.student("C", department="Mechanical Engineering", status="Inactive"),
        builders.student("D", department="Electrical Engineering"),
        builders.course("CS101", faculty_name="Dr. Reed"),
        builders.course("CS201", faculty_name="Dr. Reed"),
        builders.course("ME120", faculty_name="Dr. Haddad", department="Mechanical Engineering"),
        builders.course("OLD1", faculty_name=None, status="Inactive"),
        builders.semester(1),
        builders.semester(2),
        builders.enrollment(1, "A", "CS101", semester_id=1),
        builders.enrollment(2, "B", "CS101", semester_id=1),
        builders.enrollment(3, "B", "CS201", semester_id=2),
        builders.enrollment(4, "C", "ME120", semester_id=2),
        builders.enrollment(5, "D", "CS201", semester_id=2),
        builders.grade(1, 9.0),
        builders.grade(2, 9.0),
        builders.grade(3, 8.998),
        builders.grade(4, 4.0),
        builders.attendance(1, "Present", date(2026, 3, 2)),
        builders.attendance(2, "Late", date(2026, 3, 3)),
        builders.attendance(3, "Absent", date(2026, 3, 9)),
        builders.attendance(4, "Absent", date(2026, 3, 10)),
    )


def test_dashboard_stats(client, school, settings):
    body = client.get("/api/admin/dashboard-stats").json()

    assert body["totalStudents"] == 3
    assert body["totalCourses"] == 3
    assert body["facultyCount"] == 2
    assert body["averageAttendance"] == "50.0"
    # mean of CGPAs 9.0, 8.999 and 4.0
    assert body["averageGpa"] == "7.33"


def test_department_distribution_is_zero_filled_and_sorted(client, school, settings):
    slices = client.get("/api/admin/dashboard-stats").json()["departmentDistribution"]

    assert [s["name"] for s in slices] == sorted(settings.DEPARTMENTS)
    counts = {s["name"]: s["value"] for s in slices}
    assert counts == {
        "Civil Engineering": 0,
        "Computer Science": 2,
        "Electrical Engineering": 1,
        "Mechanical Engineering": 0,
    }
    assert all(s["color"] == settings.department_color(s["name"]) for s in slices)


def test_average_gpa(client, school):
    assert client.get("/api/stats/average-gpa").json() == {"averageGpa": "7.33"}


def test_courses_overview_counts_live_enrollments(client, school):
    body = client.get("/api/admin/courses-overview").json()

    counts = {course["course_id"]: course["enrolled_count"] for course in body}
    assert counts == {"CS101": 2, "CS201": 2, "ME120": 1, "OLD1": 0}


def test_reports_data(client, school):
    body = client.get("/api/admin/reports-data").json()

    distribution = {item["range"]: item["count"] for item in body["gpaDistribution"]}
    assert distribution["9.0-10.0"] == 1
    assert distribution["8.0-9.0"] == 1
    assert distribution["Below 5.0"] == 1
    assert sum(distribution.values()) == 3
    assert body["gpaDistribution"][0]["range"] == "9.0-10.0"

    assert body["enrollmentTrend"] == [
        {"semester_id": 1, "semester_name": "Semester 1", "enrollments": 2},
        {"semester_id": 2, "semester_name": "Semester 2", "enrollments": 3},
    ]
    assert body["weeklyAttendance"] == [
        {"week": "2026-W10", "totalClasses": 2, "rate": "100.0"},
        {"week": "2026-W11", "totalClasses": 2, "rate": "0.0"},
    ]
    assert len(body["courses"]) == 4


def test_empty_store_gives_zeros(client, settings):
    stats = client.get("/api/admin/dashboard-stats").json()

    assert stats["totalStudents"] == 0
    assert stats["averageAttendance"] == "0.0"
    assert stats["averageGpa"] == "0.00"
    assert all(s["value"] == 0 for s in stats["departmentDistribution"])

    reports = client.get("/api/admin/reports-data").json()
    assert all(item["count"] == 0 for item in reports["gpaDistribution"])
    assert reports["weeklyAttendance"] == []


def test_cgpa_of_exactly_nine_counts_in_top_bucket(client, add_rows, builders):
    add_rows(
        builders.student("A"),
        builders.course("CS101"),
        builders.course("CS201"),
        builders.course("CS301"),
        builders.semester(1),
        builders.enrollment(1, "A", "CS101"),
        builders.enrollment(2, "A", "CS201"),
        builders.enrollment(3, "A", "CS301"),
        builders.grade(1, 7.6),
        builders.grade(2, 9.7),
        builders.grade(3, 9.7),
    )

    assert client.get("/api/stats/average-gpa").json() == {"averageGpa": "9.00"}
    body = client.get("/api/admin/reports-data").json()
    distribution = {item["range"]: item["count"] for item in body["gpaDistribution"]}
    assert distribution["9.0-10.0"] == 1
    assert distribution["8.0-9.0"] == 0
