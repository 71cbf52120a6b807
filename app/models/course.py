from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Course(Base):
    __tablename__ = "course"

    course_id = Column(String(32), primary_key=True, index=True)
    course_name = Column(String(200), nullable=False)
    credit_hours = Column(Integer, nullable=False)
    faculty_name = Column(String(100), nullable=True)
    department = Column(String(100), nullable=False)
    schedule = Column(String(100), nullable=True)
    status = Column(String(20), nullable=False, default="Active")
