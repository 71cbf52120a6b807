from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.api.deps import get_db
from app.services.enrollment import enrollment as crud_enrollment
from app.schemas.enrollment import Enrollment, EnrollmentCreate, EnrollmentData

router = APIRouter()


@router.post("/enrollments", response_model=Enrollment, status_code=status.HTTP_201_CREATED)
def create_enrollment(enrollment: EnrollmentCreate, db: Session = Depends(get_db)):
    """
    Enroll a student in a course

    - 400 when the student, course or semester does not exist
    - 409 when the student is already enrolled in the course
    """
    return crud_enrollment.create_enrollment(
        db,
        student_id=enrollment.student_id,
        course_id=enrollment.course_id,
        semester_id=enrollment.semester_id,
    )


@router.get("/enrollment-data", response_model=EnrollmentData)
def get_enrollment_data(db: Session = Depends(get_db)):
    """
    Course and semester lists for the enrollment form
    """
    return crud_enrollment.get_enrollment_data(db)
