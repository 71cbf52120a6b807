from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.api.deps import get_db
from app.api.v1.endpoints.students import get_student_or_404
from app.services.metrics import student_metrics
from app.schemas.dashboard import CurrentGrades

router = APIRouter()


@router.get("/{student_id}/current", response_model=CurrentGrades)
def get_current_grades(student_id: str, db: Session = Depends(get_db)):
    """
    Grades of the student's latest semester with SGPA, credits and pass count
    """
    get_student_or_404(db, student_id)
    return student_metrics.get_current_grades(db, student_id)
