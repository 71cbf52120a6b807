from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CourseCreate(BaseModel):
    course_id: str = Field(min_length=1)
    course_name: str = Field(min_length=1)
    credit_hours: int = Field(ge=0)
    faculty_name: Optional[str] = None
    department: str = Field(min_length=1)
    schedule: Optional[str] = None
    status: str = "Active"

    model_config = ConfigDict(coerce_numbers_to_str=True)


class CourseUpdate(BaseModel):
    """Partial update: only the fields sent are changed."""
    course_name: Optional[str] = Field(default=None, min_length=1)
    credit_hours: Optional[int] = Field(default=None, ge=0)
    faculty_name: Optional[str] = None
    department: Optional[str] = Field(default=None, min_length=1)
    schedule: Optional[str] = None
    status: Optional[str] = None


class Course(BaseModel):
    course_id: str
    course_name: str
    credit_hours: int
    faculty_name: Optional[str] = None
    department: str
    schedule: Optional[str] = None
    status: str

    model_config = ConfigDict(from_attributes=True)


class CourseOverview(Course):
    enrolled_count: int
