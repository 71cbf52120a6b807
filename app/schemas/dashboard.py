from datetime import date
from typing import List, Optional
from pydantic import BaseModel

from app.schemas.course import CourseOverview

# GPA-scale figures are strings with 2 decimals, percentages strings with 1


# ============= GRADES =============

class GradeSummary(BaseModel):
    currentSgpa: str
    totalCredits: int
    coursesPassed: int
    totalCourses: int
    averageScore: str


class GradeDetail(BaseModel):
    enrollment_id: int
    course_id: str
    course_name: str
    credit_hours: int
    numeric_score: Optional[float] = None
    letter_grade: Optional[str] = None
    gpa_point: Optional[float] = None


class CurrentGrades(BaseModel):
    semesterId: Optional[int] = None
    summary: GradeSummary
    details: List[GradeDetail]


# ============= ATTENDANCE =============

class AttendanceSummary(BaseModel):
    overallRate: str
    totalClasses: int
    classesAttended: int
    totalAbsences: int


class CourseAttendanceDetail(BaseModel):
    course_id: str
    course_name: str
    totalClasses: int
    classesAttended: int
    absences: int
    rate: str


class RecentAttendance(BaseModel):
    course_id: str
    course_name: str
    class_date: date
    status: str


class CurrentAttendance(BaseModel):
    semesterId: Optional[int] = None
    summary: AttendanceSummary
    details: List[CourseAttendanceDetail]
    recent: List[RecentAttendance]


# ============= ADMIN =============

class AverageGpa(BaseModel):
    averageGpa: str


class DepartmentSlice(BaseModel):
    name: str
    value: int
    color: str


class DashboardStats(BaseModel):
    totalStudents: int
    totalCourses: int
    facultyCount: int
    averageAttendance: str
    averageGpa: str
    departmentDistribution: List[DepartmentSlice]


class GpaBucket(BaseModel):
    range: str
    count: int


class EnrollmentTrendPoint(BaseModel):
    semester_id: int
    semester_name: str
    enrollments: int


class WeeklyAttendancePoint(BaseModel):
    week: str
    totalClasses: int
    rate: str


class ReportsData(BaseModel):
    gpaDistribution: List[GpaBucket]
    departmentDistribution: List[DepartmentSlice]
    enrollmentTrend: List[EnrollmentTrendPoint]
    weeklyAttendance: List[WeeklyAttendancePoint]
    courses: List[CourseOverview]
