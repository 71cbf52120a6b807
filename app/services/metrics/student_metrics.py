"""
Per-student dashboard figures, scoped to the student's latest semester.

Each function fetches plain rows for one student and hands them to the
aggregator. A student with no enrollments gets zeros and empty lists.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.models.attendance import Attendance
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.grade import Grade
from app.models.student import Student
from app.services.metrics import aggregator

logger = logging.getLogger(__name__)


# =============================================================================
# QUERIES
# =============================================================================

def latest_semester_id(db: Session, student_id: str) -> Optional[int]:
    semester_ids = db.query(Enrollment.semester_id).filter(
        Enrollment.student_id == student_id
    ).distinct()
    return aggregator.latest_semester(semester_id for (semester_id,) in semester_ids)


def course_grade_rows(db: Session, student_id: str, semester_id: int) -> List[aggregator.CourseGradeRow]:
    """Every enrollment of the semester with its course and (possibly missing) grade."""
    rows = db.query(
        Enrollment.enrollment_id,
        Course.course_id,
        Course.course_name,
        Course.credit_hours,
        Grade.numeric_score,
        Grade.letter_grade,
        Grade.gpa_point,
    ).join(
        Course, Enrollment.course_id == Course.course_id
    ).outerjoin(
        Grade, Grade.enrollment_id == Enrollment.enrollment_id
    ).filter(
        Enrollment.student_id == student_id,
        Enrollment.semester_id == semester_id,
    ).order_by(Course.course_id).all()

    return [
        aggregator.CourseGradeRow(
            enrollment_id=row.enrollment_id,
            course_id=row.course_id,
            course_name=row.course_name,
            credit_hours=int(row.credit_hours or 0),
            numeric_score=_as_float(row.numeric_score),
            letter_grade=row.letter_grade,
            gpa_point=_as_float(row.gpa_point),
        )
        for row in rows
    ]


def attendance_rows(db: Session, student_id: str, semester_id: int) -> List[aggregator.AttendanceRow]:
    """Attendance records of the semester, most recent class first."""
    rows = db.query(
        Course.course_id,
        Course.course_name,
        Attendance.status,
        Attendance.class_date,
    ).join(
        Enrollment, Attendance.enrollment_id == Enrollment.enrollment_id
    ).join(
        Course, Enrollment.course_id == Course.course_id
    ).filter(
        Enrollment.student_id == student_id,
        Enrollment.semester_id == semester_id,
    ).order_by(
        Attendance.class_date.desc(), Attendance.attendance_id.desc()
    ).all()

    return [
        aggregator.AttendanceRow(
            course_id=row.course_id,
            course_name=row.course_name,
            status=row.status,
            class_date=row.class_date,
        )
        for row in rows
    ]


def _as_float(value) -> Optional[float]:
    # Numeric columns come back as Decimal on PostgreSQL
    return None if value is None else float(value)


# =============================================================================
# DASHBOARD VIEWS
# =============================================================================

def get_student_dashboard(db: Session, student: Student) -> Dict[str, Any]:
    semester_id = latest_semester_id(db, student.student_id)
    if semester_id is None:
        grades: List[aggregator.CourseGradeRow] = []
        attendance: List[aggregator.AttendanceRow] = []
    else:
        grades = course_grade_rows(db, student.student_id, semester_id)
        attendance = attendance_rows(db, student.student_id, semester_id)

    sgpa = aggregator.compute_sgpa(grades)
    rate = aggregator.attendance_rate(row.status for row in attendance)
    logger.debug(f"Dashboard for {student.student_id}: sgpa={sgpa:.2f} attendance={rate:.1f}%")

    return {
        "student": student,
        "sgpa": aggregator.format_gpa(sgpa),
        "attendanceRate": aggregator.format_percent(rate),
        "enrolledCoursesCount": len(grades),
    }


def get_current_grades(db: Session, student_id: str) -> Dict[str, Any]:
    semester_id = latest_semester_id(db, student_id)
    rows = course_grade_rows(db, student_id, semester_id) if semester_id is not None else []
    summary = aggregator.summarize_grades(rows)

    return {
        "semesterId": semester_id,
        "summary": {
            "currentSgpa": aggregator.format_gpa(summary.sgpa),
            "totalCredits": summary.total_credits,
            "coursesPassed": summary.courses_passed,
            "totalCourses": summary.total_courses,
            "averageScore": aggregator.format_gpa(summary.average_score),
        },
        "details": [
            {
                "enrollment_id": row.enrollment_id,
                "course_id": row.course_id,
                "course_name": row.course_name,
                "credit_hours": row.credit_hours,
                "numeric_score": row.numeric_score,
                "letter_grade": row.letter_grade,
                "gpa_point": row.gpa_point,
            }
            for row in rows
        ],
    }


def get_current_attendance(db: Session, student_id: str, recent_limit: int = 10) -> Dict[str, Any]:
    semester_id = latest_semester_id(db, student_id)
    rows = attendance_rows(db, student_id, semester_id) if semester_id is not None else []
    summary = aggregator.summarize_attendance(rows)
    by_course = sorted(aggregator.attendance_by_course(rows), key=lambda item: item.course_id)

    return {
        "semesterId": semester_id,
        "summary": {
            "overallRate": aggregator.format_percent(summary.rate),
            "totalClasses": summary.total_classes,
            "classesAttended": summary.classes_attended,
            "totalAbsences": summary.total_absences,
        },
        "details": [
            {
                "course_id": item.course_id,
                "course_name": item.course_name,
                "totalClasses": item.total_classes,
                "classesAttended": item.classes_attended,
                "absences": item.absences,
                "rate": aggregator.format_percent(item.rate),
            }
            for item in by_course
        ],
        "recent": [
            {
                "course_id": row.course_id,
                "course_name": row.course_name,
                "class_date": row.class_date,
                "status": row.status,
            }
            for row in rows[:recent_limit]
        ],
    }
