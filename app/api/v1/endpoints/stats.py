from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.api.deps import get_db
from app.services.metrics import admin_stats
from app.schemas.dashboard import AverageGpa

router = APIRouter()


@router.get("/average-gpa", response_model=AverageGpa)
def get_average_gpa(db: Session = Depends(get_db)):
    """
    Mean CGPA over every student with a graded course
    """
    return admin_stats.get_average_gpa(db)
