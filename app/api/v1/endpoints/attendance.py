from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.api.deps import get_db, get_settings
from app.api.v1.endpoints.students import get_student_or_404
from app.core.config import Settings
from app.services.metrics import student_metrics
from app.schemas.dashboard import CurrentAttendance

router = APIRouter()


@router.get("/{student_id}/current", response_model=CurrentAttendance)
def get_current_attendance(
    student_id: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Attendance of the student's latest semester: overall rate, per course, most recent classes
    """
    get_student_or_404(db, student_id)
    return student_metrics.get_current_attendance(
        db, student_id, recent_limit=settings.RECENT_ATTENDANCE_LIMIT
    )
