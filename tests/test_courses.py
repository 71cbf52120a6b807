import logging

from app.models.course import Course

NEW_COURSE = {
    "course_id": "CS301",
    "course_name": "Operating Systems",
    "credit_hours": 4,
    "faculty_name": "Dr. Reed",
    "department": "Computer Science",
    "schedule": "Tue/Thu 10:00",
}


def test_create_and_get_course(client):
    response = client.post("/api/courses", json=NEW_COURSE)

    assert response.status_code == 201
    assert response.json()["status"] == "Active"

    fetched = client.get("/api/courses/CS301")
    assert fetched.status_code == 200
    assert fetched.json()["credit_hours"] == 4


def test_duplicate_course_id_conflicts(client):
    client.post("/api/courses", json=NEW_COURSE)

    response = client.post("/api/courses", json=NEW_COURSE)
    assert response.status_code == 409


def test_course_requires_name_and_credits(client):
    response = client.post("/api/courses", json={"course_id": "X1", "department": "Computer Science"})
    assert response.status_code == 400


def test_update_course(client, add_rows, builders):
    add_rows(builders.course("CS101"))

    response = client.put("/api/courses/CS101", json={"faculty_name": "Dr. Nair", "credit_hours": 2})

    assert response.status_code == 200
    assert response.json()["faculty_name"] == "Dr. Nair"
    assert response.json()["credit_hours"] == 2
    assert response.json()["course_name"] == "Course CS101"


def test_update_unknown_course_is_404(client):
    assert client.put("/api/courses/NOPE", json={"credit_hours": 2}).status_code == 404


def test_delete_course_without_enrollments_removes_it(client, add_rows, builders, fetch):
    add_rows(builders.course("CS101"))

    response = client.delete("/api/courses/CS101")

    assert response.status_code == 200
    assert fetch(Course, "CS101") is None
    assert client.get("/api/courses/CS101").status_code == 404


def test_delete_course_with_enrollment_conflicts(client, add_rows, builders, fetch):
    add_rows(
        builders.student("S1"),
        builders.course("CS101"),
        builders.semester(1),
        builders.enrollment(1, "S1", "CS101"),
    )

    response = client.delete("/api/courses/CS101")

    assert response.status_code == 409
    assert fetch(Course, "CS101") is not None


def test_list_courses(client, add_rows, builders):
    add_rows(builders.course("ME120"), builders.course("CS101"))

    assert [c["course_id"] for c in client.get("/api/courses").json()] == ["CS101", "ME120"]


def test_delete_rejected_by_store_is_logged(client, add_rows, builders, fetch, monkeypatch, caplog):
    from app.services.course import course as course_service

    add_rows(
        builders.student("S1"),
        builders.course("CS101"),
        builders.semester(1),
        builders.enrollment(1, "S1", "CS101"),
    )
    # skip the up-front count so the foreign key itself refuses the delete
    monkeypatch.setattr(course_service, "count_enrollments", lambda db, course_id: 0)

    with caplog.at_level(logging.WARNING, logger="app.services.course.course"):
        response = client.delete("/api/courses/CS101")

    assert response.status_code == 409
    assert fetch(Course, "CS101") is not None
    assert "Delete of course CS101 rejected" in caplog.text
    assert "FOREIGN KEY" in caplog.text.upper()
