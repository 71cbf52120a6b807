import logging
from typing import List, Optional

from fastapi import status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictException, translate_integrity_error
from app.core.security import hash_password
from app.models.enrollment import Enrollment
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"admission_date"}


def get_student(db: Session, student_id: str) -> Optional[Student]:
    """Get one student by ID"""
    return db.query(Student).filter(Student.student_id == student_id).first()


def get_student_by_email(db: Session, email: str) -> Optional[Student]:
    return db.query(Student).filter(Student.email == email).first()


def get_students(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[Student]:
    """List students ordered by ID; every student unless a limit is given"""
    query = db.query(Student).order_by(Student.student_id).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def count_enrollments(db: Session, student_id: str) -> int:
    return db.query(func.count(Enrollment.enrollment_id)).filter(
        Enrollment.student_id == student_id
    ).scalar() or 0


def create_student(db: Session, student: StudentCreate, bcrypt_rounds: int = 10) -> Student:
    """Create a student; the password is stored only as a bcrypt hash."""
    if get_student(db, student.student_id):
        raise ConflictException("A student with this ID already exists.")
    if get_student_by_email(db, student.email):
        raise ConflictException("A student with this email already exists.")

    db_student = Student(
        student_id=student.student_id,
        first_name=student.first_name,
        last_name=student.last_name,
        email=student.email,
        password_hash=hash_password(student.password, rounds=bcrypt_rounds),
        admission_date=student.admission_date,
        department=student.department,
        current_year=student.current_year,
        status=student.status,
    )
    db.add(db_student)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Insert of student {student.student_id} rejected: {e.orig}")
        raise translate_integrity_error(
            e,
            duplicate_message="A student with this ID or email already exists.",
            reference_message="Student references a record that does not exist.",
        )
    db.refresh(db_student)
    logger.info(f"Created student {db_student.student_id}")
    return db_student


def update_student(
    db: Session,
    db_student: Student,
    changes: StudentUpdate,
    bcrypt_rounds: int = 10,
) -> Student:
    """Apply the fields present in `changes`; a new password is re-hashed."""
    data = changes.model_dump(exclude_unset=True)
    student_id = db_student.student_id

    email = data.get("email")
    if email and email != db_student.email:
        other = get_student_by_email(db, email)
        if other and other.student_id != db_student.student_id:
            raise ConflictException("Email is already used by another student.")

    password = data.pop("password", None)
    if password:
        db_student.password_hash = hash_password(password, rounds=bcrypt_rounds)

    for field, value in data.items():
        # explicit nulls only clear nullable columns
        if value is None and field not in NULLABLE_FIELDS:
            continue
        setattr(db_student, field, value)

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Update of student {student_id} rejected: {e.orig}")
        raise translate_integrity_error(
            e,
            duplicate_message="Email is already used by another student.",
            reference_message="Student references a record that does not exist.",
        )
    db.refresh(db_student)
    return db_student


def delete_student(db: Session, db_student: Student) -> None:
    """Delete a student that has no enrollments; dependent rows block the delete."""
    if count_enrollments(db, db_student.student_id):
        raise ConflictException("Cannot delete student: enrollment records exist for this student.")

    student_id = db_student.student_id
    db.delete(db_student)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Delete of student {student_id} rejected: {e.orig}")
        raise translate_integrity_error(
            e,
            duplicate_message="Cannot delete student.",
            reference_message="Cannot delete student: dependent records exist.",
            reference_status=status.HTTP_409_CONFLICT,
        )
    logger.info(f"Deleted student {student_id}")
