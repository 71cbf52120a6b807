from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.api.deps import get_db
from app.core.exceptions import NotFoundException
from app.services.course import course as crud_course
from app.schemas.course import Course, CourseCreate, CourseUpdate

router = APIRouter()


def get_course_or_404(db: Session, course_id: str):
    course = crud_course.get_course(db, course_id=course_id)
    if not course:
        raise NotFoundException("Course not found.")
    return course


@router.get("", response_model=List[Course])
def get_courses(db: Session = Depends(get_db)):
    return crud_course.get_courses(db)


@router.get("/{course_id}", response_model=Course)
def get_course(course_id: str, db: Session = Depends(get_db)):
    return get_course_or_404(db, course_id)


@router.post("", response_model=Course, status_code=status.HTTP_201_CREATED)
def create_course(course: CourseCreate, db: Session = Depends(get_db)):
    """
    Create a course; 409 when the course_id is taken
    """
    return crud_course.create_course(db, course)


@router.put("/{course_id}", response_model=Course)
def update_course(course_id: str, changes: CourseUpdate, db: Session = Depends(get_db)):
    course = get_course_or_404(db, course_id)
    return crud_course.update_course(db, course, changes)


@router.delete("/{course_id}")
def delete_course(course_id: str, db: Session = Depends(get_db)):
    """
    Delete a course; refused with 409 while students are enrolled
    """
    course = get_course_or_404(db, course_id)
    crud_course.delete_course(db, course)
    return {"message": "Course deleted successfully."}
