from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.api.deps import get_db, get_settings
from app.core.config import Settings
from app.services.metrics import admin_stats
from app.schemas.course import CourseOverview
from app.schemas.dashboard import DashboardStats, ReportsData

router = APIRouter()


@router.get("/dashboard-stats", response_model=DashboardStats)
def get_dashboard_stats(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Active student/course counts, faculty count, average attendance and GPA,
    active students per department
    """
    return admin_stats.get_dashboard_stats(db, settings)


@router.get("/courses-overview", response_model=List[CourseOverview])
def get_courses_overview(db: Session = Depends(get_db)):
    return admin_stats.get_courses_overview(db)


@router.get("/reports-data", response_model=ReportsData)
def get_reports_data(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    GPA distribution, department distribution, enrollments per semester,
    weekly attendance and the course overview
    """
    return admin_stats.get_reports_data(db, settings)
