import logging
from typing import Dict, List

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    BadRequestException,
    ConflictException,
    is_unique_violation,
    translate_integrity_error,
)
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.semester import Semester
from app.models.student import Student

logger = logging.getLogger(__name__)

ID_COLLISION_MESSAGE = "Enrollment ID was taken by a concurrent request; please retry."


def get_enrollments_for_student(db: Session, student_id: str) -> List[Enrollment]:
    return db.query(Enrollment).filter(
        Enrollment.student_id == student_id
    ).order_by(Enrollment.semester_id, Enrollment.course_id).all()


def next_enrollment_id(db: Session) -> int:
    return (db.query(func.max(Enrollment.enrollment_id)).scalar() or 0) + 1


def is_enrollment_id_collision(exc: IntegrityError) -> bool:
    """True when the primary key, not the student/course pair, was violated."""
    constraint = getattr(getattr(exc.orig, "diag", None), "constraint_name", None)
    if constraint:
        return constraint == "enrollment_pkey"
    return "enrollment.enrollment_id" in str(exc.orig)


def create_enrollment(db: Session, student_id: str, course_id: str, semester_id: int) -> Enrollment:
    """
    Enroll a student in a course for a semester.

    Raises BadRequestException when the student, course or semester does not
    exist and ConflictException when the student already takes the course.
    """
    missing = []
    if db.get(Student, student_id) is None:
        missing.append("student")
    if db.get(Course, course_id) is None:
        missing.append("course")
    if db.get(Semester, semester_id) is None:
        missing.append("semester")
    if missing:
        raise BadRequestException(f"Unknown {', '.join(missing)} for enrollment.")

    duplicate = db.query(Enrollment).filter(
        Enrollment.student_id == student_id,
        Enrollment.course_id == course_id,
    ).first()
    if duplicate:
        raise ConflictException("Student is already enrolled in this course.")

    enrollment = Enrollment(
        enrollment_id=next_enrollment_id(db),
        student_id=student_id,
        course_id=course_id,
        semester_id=semester_id,
    )
    db.add(enrollment)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Enrollment of {student_id} in {course_id} rejected: {e.orig}")
        if is_unique_violation(e) and is_enrollment_id_collision(e):
            raise ConflictException(ID_COLLISION_MESSAGE)
        raise translate_integrity_error(
            e,
            duplicate_message="Student is already enrolled in this course.",
            reference_message="Student, course or semester does not exist.",
        )
    db.refresh(enrollment)
    logger.info(f"Enrolled {student_id} in {course_id} (semester {semester_id})")
    return enrollment


def get_enrollment_data(db: Session) -> Dict[str, list]:
    """Courses and semesters for the enrollment form."""
    return {
        "courses": db.query(Course).order_by(Course.course_id).all(),
        "semesters": db.query(Semester).order_by(Semester.semester_id).all(),
    }
