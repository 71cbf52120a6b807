from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from app.api.deps import get_db, get_settings
from app.core.config import Settings
from app.core.exceptions import NotFoundException
from app.services.student import student as crud_student
from app.services.enrollment import enrollment as crud_enrollment
from app.services.metrics import student_metrics
from app.schemas.student import Student, StudentCreate, StudentUpdate, StudentDashboard
from app.schemas.enrollment import Enrollment

router = APIRouter()


def get_student_or_404(db: Session, student_id: str):
    student = crud_student.get_student(db, student_id=student_id)
    if not student:
        raise NotFoundException("Student not found.")
    return student


@router.get("", response_model=List[Student])
def get_students(
    skip: int = 0,
    limit: Optional[int] = None,
    db: Session = Depends(get_db)
):
    """
    List students, ordered by ID

    - **skip**: number of records to skip (default: 0)
    - **limit**: maximum number of records (default: all)
    """
    return crud_student.get_students(db, skip=skip, limit=limit)


@router.get("/{student_id}", response_model=StudentDashboard)
@router.get("/{student_id}/dashboard", response_model=StudentDashboard)
def get_student_dashboard(
    student_id: str,
    db: Session = Depends(get_db)
):
    """
    Profile plus latest-semester SGPA, attendance rate and enrolled course count
    """
    student = get_student_or_404(db, student_id)
    return student_metrics.get_student_dashboard(db, student)


@router.get("/{student_id}/enrollments", response_model=List[Enrollment])
def get_student_enrollments(
    student_id: str,
    db: Session = Depends(get_db)
):
    get_student_or_404(db, student_id)
    return crud_enrollment.get_enrollments_for_student(db, student_id)


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Create a student

    Required:
    - **student_id**, **first_name**, **last_name**, **email** (unique),
      **password**, **department**, **current_year**

    The password is stored as a bcrypt hash.
    """
    return crud_student.create_student(db, student, bcrypt_rounds=settings.BCRYPT_ROUNDS)


@router.put("/{student_id}", response_model=Student)
def update_student(
    student_id: str,
    changes: StudentUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Update the fields sent in the body
    """
    student = get_student_or_404(db, student_id)
    return crud_student.update_student(db, student, changes, bcrypt_rounds=settings.BCRYPT_ROUNDS)


@router.delete("/{student_id}")
def delete_student(
    student_id: str,
    db: Session = Depends(get_db)
):
    """
    Delete a student; refused with 409 while enrollments exist
    """
    student = get_student_or_404(db, student_id)
    crud_student.delete_student(db, student)
    return {"message": "Student deleted successfully."}
