"""System-wide figures for the admin dashboard and reports."""

import logging
from collections import defaultdict
from typing import Any, Dict, List

from sqlalchemy import distinct, func
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.models.attendance import Attendance
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.grade import Grade
from app.models.semester import Semester
from app.models.student import Student
from app.services.metrics import aggregator

logger = logging.getLogger(__name__)

ACTIVE = "Active"


# =============================================================================
# QUERIES
# =============================================================================

def student_cgpas(db: Session) -> List[float]:
    """CGPA of every student with at least one graded enrollment."""
    rows = db.query(Enrollment.student_id, Grade.gpa_point).join(
        Grade, Grade.enrollment_id == Enrollment.enrollment_id
    ).filter(Grade.gpa_point.isnot(None)).all()

    points_by_student: Dict[str, List[float]] = defaultdict(list)
    for student_id, gpa_point in rows:
        points_by_student[student_id].append(float(gpa_point))

    return [aggregator.student_cgpa(points) for points in points_by_student.values()]


def overall_attendance_rate(db: Session) -> float:
    total = db.query(func.count(Attendance.attendance_id)).scalar() or 0
    attended = db.query(func.count(Attendance.attendance_id)).filter(
        Attendance.status.in_(sorted(aggregator.ATTENDED_STATUSES))
    ).scalar() or 0
    return aggregator.percentage(attended, total)


def active_students_by_department(db: Session) -> Dict[str, int]:
    rows = db.query(Student.department, func.count(Student.student_id)).filter(
        Student.status == ACTIVE
    ).group_by(Student.department).all()
    return {department: count for department, count in rows}


def department_slices(db: Session, settings: Settings) -> List[Dict[str, Any]]:
    counts = active_students_by_department(db)
    return [
        {"name": name, "value": value, "color": settings.department_color(name)}
        for name, value in aggregator.department_distribution(counts, settings.DEPARTMENTS)
    ]


# =============================================================================
# VIEWS
# =============================================================================

def get_average_gpa(db: Session) -> Dict[str, str]:
    return {"averageGpa": aggregator.format_gpa(aggregator.mean(student_cgpas(db)))}


def get_dashboard_stats(db: Session, settings: Settings) -> Dict[str, Any]:
    total_students = db.query(func.count(Student.student_id)).filter(
        Student.status == ACTIVE
    ).scalar() or 0
    total_courses = db.query(func.count(Course.course_id)).filter(
        Course.status == ACTIVE
    ).scalar() or 0
    # COUNT(DISTINCT ...) skips NULL faculty names
    faculty_count = db.query(func.count(distinct(Course.faculty_name))).scalar() or 0

    return {
        "totalStudents": total_students,
        "totalCourses": total_courses,
        "facultyCount": faculty_count,
        "averageAttendance": aggregator.format_percent(overall_attendance_rate(db)),
        "averageGpa": aggregator.format_gpa(aggregator.mean(student_cgpas(db))),
        "departmentDistribution": department_slices(db, settings),
    }


def get_courses_overview(db: Session) -> List[Dict[str, Any]]:
    """Every course with its live enrollment count."""
    rows = db.query(Course, func.count(Enrollment.enrollment_id)).outerjoin(
        Enrollment, Enrollment.course_id == Course.course_id
    ).group_by(Course.course_id).order_by(Course.course_id).all()

    return [
        {
            "course_id": course.course_id,
            "course_name": course.course_name,
            "credit_hours": course.credit_hours,
            "faculty_name": course.faculty_name,
            "department": course.department,
            "schedule": course.schedule,
            "status": course.status,
            "enrolled_count": enrolled_count,
        }
        for course, enrolled_count in rows
    ]


def get_enrollment_trend(db: Session) -> List[Dict[str, Any]]:
    rows = db.query(
        Semester.semester_id,
        Semester.semester_name,
        func.count(Enrollment.enrollment_id),
    ).outerjoin(
        Enrollment, Enrollment.semester_id == Semester.semester_id
    ).group_by(
        Semester.semester_id, Semester.semester_name
    ).order_by(Semester.semester_id).all()

    return [
        {"semester_id": semester_id, "semester_name": name, "enrollments": count}
        for semester_id, name, count in rows
    ]


def get_reports_data(db: Session, settings: Settings) -> Dict[str, Any]:
    attendance = db.query(Attendance.class_date, Attendance.status).all()

    return {
        "gpaDistribution": aggregator.gpa_distribution(student_cgpas(db)),
        "departmentDistribution": department_slices(db, settings),
        "enrollmentTrend": get_enrollment_trend(db),
        "weeklyAttendance": aggregator.weekly_attendance(attendance, settings.REPORT_WEEKS),
        "courses": get_courses_overview(db),
    }
