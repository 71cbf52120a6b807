from datetime import date
from typing import Optional
from pydantic import BaseModel, EmailStr, ConfigDict, Field


class StudentCreate(BaseModel):
    student_id: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)
    admission_date: Optional[date] = None
    department: str = Field(min_length=1)
    current_year: int = Field(ge=1)
    status: str = "Active"

    model_config = ConfigDict(coerce_numbers_to_str=True)


class StudentUpdate(BaseModel):
    """Partial update: only the fields sent are changed."""
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=1)
    admission_date: Optional[date] = None
    department: Optional[str] = Field(default=None, min_length=1)
    current_year: Optional[int] = Field(default=None, ge=1)
    status: Optional[str] = None


class Student(BaseModel):
    """Student as returned by the API; never carries the password hash."""
    student_id: str
    first_name: str
    last_name: str
    email: str
    admission_date: Optional[date] = None
    department: str
    current_year: int
    status: str

    model_config = ConfigDict(from_attributes=True)


class StudentDashboard(BaseModel):
    student: Student
    sgpa: str
    attendanceRate: str
    enrolledCoursesCount: int
