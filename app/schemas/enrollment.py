from typing import List
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.course import Course


class EnrollmentCreate(BaseModel):
    student_id: str = Field(min_length=1)
    course_id: str = Field(min_length=1)
    semester_id: int

    model_config = ConfigDict(coerce_numbers_to_str=True)


class Enrollment(BaseModel):
    enrollment_id: int
    student_id: str
    course_id: str
    semester_id: int

    model_config = ConfigDict(from_attributes=True)


class Semester(BaseModel):
    semester_id: int
    semester_name: str

    model_config = ConfigDict(from_attributes=True)


class EnrollmentData(BaseModel):
    """Lookup lists for the enrollment form."""
    courses: List[Course]
    semesters: List[Semester]
