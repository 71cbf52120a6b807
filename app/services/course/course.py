import logging
from typing import List, Optional

from fastapi import status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictException, translate_integrity_error
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.schemas.course import CourseCreate, CourseUpdate

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"faculty_name", "schedule"}


def get_course(db: Session, course_id: str) -> Optional[Course]:
    return db.query(Course).filter(Course.course_id == course_id).first()


def get_courses(db: Session) -> List[Course]:
    return db.query(Course).order_by(Course.course_id).all()


def count_enrollments(db: Session, course_id: str) -> int:
    return db.query(func.count(Enrollment.enrollment_id)).filter(
        Enrollment.course_id == course_id
    ).scalar() or 0


def create_course(db: Session, course: CourseCreate) -> Course:
    if get_course(db, course.course_id):
        raise ConflictException("A course with this ID already exists.")

    db_course = Course(**course.model_dump())
    db.add(db_course)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Insert of course {course.course_id} rejected: {e.orig}")
        raise translate_integrity_error(
            e,
            duplicate_message="A course with this ID already exists.",
            reference_message="Course references a record that does not exist.",
        )
    db.refresh(db_course)
    logger.info(f"Created course {db_course.course_id}")
    return db_course


def update_course(db: Session, db_course: Course, changes: CourseUpdate) -> Course:
    course_id = db_course.course_id
    for field, value in changes.model_dump(exclude_unset=True).items():
        # explicit nulls only clear nullable columns
        if value is None and field not in NULLABLE_FIELDS:
            continue
        setattr(db_course, field, value)

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Update of course {course_id} rejected: {e.orig}")
        raise translate_integrity_error(
            e,
            duplicate_message="A course with this ID already exists.",
            reference_message="Course references a record that does not exist.",
        )
    db.refresh(db_course)
    return db_course


def delete_course(db: Session, db_course: Course) -> None:
    """Delete a course nobody is enrolled in; enrollments block the delete."""
    if count_enrollments(db, db_course.course_id):
        raise ConflictException("Cannot delete course: students are enrolled in it.")

    course_id = db_course.course_id
    db.delete(db_course)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Delete of course {course_id} rejected: {e.orig}")
        raise translate_integrity_error(
            e,
            duplicate_message="Cannot delete course.",
            reference_message="Cannot delete course: dependent records exist.",
            reference_status=status.HTTP_409_CONFLICT,
        )
    logger.info(f"Deleted course {course_id}")
