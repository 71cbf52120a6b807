from fastapi import APIRouter
from app.api.v1.endpoints import admin
from app.api.v1.endpoints import attendance
from app.api.v1.endpoints import auth
from app.api.v1.endpoints import courses
from app.api.v1.endpoints import enrollments
from app.api.v1.endpoints import grades
from app.api.v1.endpoints import stats
from app.api.v1.endpoints import students

api_router = APIRouter()

api_router.include_router(auth.router, tags=["auth"])

api_router.include_router(
    students.router,
    prefix="/students",
    tags=["students"]
)

api_router.include_router(
    courses.router,
    prefix="/courses",
    tags=["courses"]
)

api_router.include_router(enrollments.router, tags=["enrollments"])

api_router.include_router(
    grades.router,
    prefix="/grades",
    tags=["grades"]
)

api_router.include_router(
    attendance.router,
    prefix="/attendance",
    tags=["attendance"]
)

api_router.include_router(
    stats.router,
    prefix="/stats",
    tags=["stats"]
)

api_router.include_router(
    admin.router,
    prefix="/admin",
    tags=["admin"]
)
